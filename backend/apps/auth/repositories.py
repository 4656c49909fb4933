from __future__ import annotations

from typing import Any

from django.contrib.auth import get_user_model
from django.db.models import Q

from .protocols import UserRegistrationRepositoryProtocol


class DjangoUserRegistrationRepository(UserRegistrationRepositoryProtocol):
    def __init__(self) -> None:
        self.model = get_user_model()

    def exists_with_email_or_username(self, email: str, username: str) -> bool:
        return self.model.objects.filter(
            Q(email__iexact=email) | Q(username=username)
        ).exists()

    def get_by_email(self, email: str):
        return self.model.objects.filter(email__iexact=email).first()

    def create_user(self, *, password: str, **data: Any):
        # create_user hashes the password with the configured hasher
        return self.model.objects.create_user(password=password, **data)
