from __future__ import annotations

from apps.users.container import build_user_service

from .repositories import DjangoUserRegistrationRepository
from .services import AuthService

__all__ = ["build_auth_service", "build_user_service"]


def build_auth_service() -> AuthService:
    return AuthService(users=DjangoUserRegistrationRepository())
