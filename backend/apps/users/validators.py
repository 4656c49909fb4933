import re

from rest_framework import serializers

_USERNAME_PATTERN = re.compile(r"^[A-Za-z0-9_]+$")


def validate_username(value: str) -> str:
    """
    Usernames are 3 to 30 characters of letters, digits or underscores.
    """
    if value is None:
        raise serializers.ValidationError("Username is required.")
    trimmed = value.strip()
    if not 3 <= len(trimmed) <= 30:
        raise serializers.ValidationError(
            "Username must be between 3 and 30 characters long."
        )
    if not _USERNAME_PATTERN.match(trimmed):
        raise serializers.ValidationError(
            "Username may contain only letters, numbers and underscores."
        )
    return trimmed


def validate_password(value: str) -> str:
    if value is None:
        raise serializers.ValidationError("Password is required.")
    if len(value) < 6:
        raise serializers.ValidationError(
            "Password must be at least 6 characters long."
        )
    return value
