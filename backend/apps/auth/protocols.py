from __future__ import annotations

from typing import Any, Optional, Protocol, TYPE_CHECKING

if TYPE_CHECKING:
    from apps.users.models import User


class UserRegistrationRepositoryProtocol(Protocol):
    def exists_with_email_or_username(self, email: str, username: str) -> bool: ...

    def get_by_email(self, email: str) -> Optional["User"]: ...

    def create_user(self, *, password: str, **data: Any) -> "User": ...
