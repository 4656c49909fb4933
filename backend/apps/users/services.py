from __future__ import annotations

from typing import Any, Dict

from apps.common import get_logger
from apps.common.errors import NotFoundError, ValidationError
from .dtos import UserDTO, user_to_dto
from .protocols import UserRepositoryProtocol

logger = get_logger(__name__).bind(component="users", layer="service")

PROFILE_FIELDS = ("username", "phone", "address", "profile_image")


class UserService:
    def __init__(self, users: UserRepositoryProtocol):
        self.users = users
        self.logger = logger.bind(service="UserService")

    def get_profile(self, user_id: int) -> UserDTO:
        self.logger.debug("Fetching profile", user_id=user_id)
        user = self.users.get(id=user_id)
        if not user:
            self.logger.info("Profile requested for missing user", user_id=user_id)
            raise NotFoundError("User not found", details={"id": str(user_id)})
        return user_to_dto(user)

    def update_profile(self, user_id: int, data: Dict[str, Any]) -> UserDTO:
        """Apply the non-empty profile fields present in ``data``."""
        self.logger.info("Updating profile", user_id=user_id, fields=sorted(data))
        user = self.users.get(id=user_id)
        if not user:
            self.logger.warning("Profile update failed: user missing", user_id=user_id)
            raise NotFoundError("User not found", details={"id": str(user_id)})
        changes = {key: data.get(key) or None for key in PROFILE_FIELDS}
        username = changes.get("username")
        if username and username != user.username:
            if self.users.username_taken(username, exclude_id=user_id):
                self.logger.warning(
                    "Profile update rejected: username taken",
                    user_id=user_id,
                    username=username,
                )
                raise ValidationError(
                    "Username already exists", details={"username": username}
                )
        if changes.get("address") is not None:
            changes["address"] = dict(changes["address"])
        self.users.update_scalar(user, **changes)
        self.logger.info("Profile updated", user_id=user_id)
        return user_to_dto(user)
