from __future__ import annotations

from typing import Any, Dict

from rest_framework_simplejwt.tokens import RefreshToken

from apps.common import get_logger
from apps.common.errors import ValidationError
from .protocols import UserRegistrationRepositoryProtocol

logger = get_logger(__name__).bind(component="auth", service="AuthService")


def issue_tokens(user) -> Dict[str, str]:
    refresh = RefreshToken.for_user(user)
    return {"token": str(refresh.access_token), "refresh": str(refresh)}


def _user_summary(user) -> Dict[str, Any]:
    return {
        "id": user.id,
        "username": user.username,
        "email": user.email,
        "role": user.role,
    }


class AuthService:
    def __init__(self, users: UserRegistrationRepositoryProtocol):
        self.users = users
        self.logger = logger

    def register(self, data: Dict[str, Any]) -> Dict[str, Any]:
        username = data["username"].strip()
        email = data["email"].strip().lower()
        self.logger.debug("Received registration request", username=username, email=email)
        if self.users.exists_with_email_or_username(email, username):
            self.logger.info(
                "Registration rejected: account exists", username=username, email=email
            )
            raise ValidationError(
                "User with this email or username already exists",
                details={"email": email, "username": username},
            )
        user = self.users.create_user(
            password=data["password"],
            username=username,
            email=email,
            phone=(data.get("phone") or "").strip(),
            role=data.get("role") or "both",
        )
        self.logger.info("User registered", user_id=user.id, username=user.username)
        return {**issue_tokens(user), "user": _user_summary(user)}

    def login(self, email: str, password: str) -> Dict[str, Any]:
        normalized = email.strip().lower()
        user = self.users.get_by_email(normalized)
        # Same message for unknown email and wrong password
        if user is None or not user.is_active or not user.check_password(password):
            self.logger.info("Login rejected", email=normalized)
            raise ValidationError("Invalid credentials")
        self.logger.info("User logged in", user_id=user.id)
        return {**issue_tokens(user), "user": _user_summary(user)}
