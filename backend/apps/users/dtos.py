from dataclasses import dataclass, field
from typing import Any, Dict

from .models import User


@dataclass
class UserDTO:
    id: int
    username: str
    email: str
    phone: str
    role: str
    profile_image: str = ""
    address: Dict[str, Any] = field(default_factory=dict)


@dataclass
class PublicUserDTO:
    """Contact card shown next to listings and orders."""

    id: int
    username: str
    email: str
    phone: str


def user_to_dto(u: User) -> UserDTO:
    return UserDTO(
        id=u.id,
        username=u.username,
        email=u.email,
        phone=u.phone or "",
        role=u.role,
        profile_image=u.profile_image or "",
        address=dict(u.address or {}),
    )


def public_user_to_dto(u: User) -> PublicUserDTO:
    return PublicUserDTO(
        id=u.id, username=u.username, email=u.email, phone=u.phone or ""
    )
