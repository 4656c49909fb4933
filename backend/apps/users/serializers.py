from rest_framework import serializers

from .models import User
from .validators import validate_username as validate_username_rules


class AddressSerializer(serializers.Serializer):
    street = serializers.CharField(required=False, allow_blank=True, max_length=200)
    city = serializers.CharField(required=False, allow_blank=True, max_length=100)
    state = serializers.CharField(required=False, allow_blank=True, max_length=100)
    pincode = serializers.CharField(required=False, allow_blank=True, max_length=20)
    country = serializers.CharField(required=False, allow_blank=True, max_length=100)


class UserProfileSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    username = serializers.CharField()
    email = serializers.EmailField()
    phone = serializers.CharField(allow_blank=True)
    address = serializers.DictField()
    profileImage = serializers.CharField(source="profile_image", allow_blank=True)
    role = serializers.CharField()


class PublicUserSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    username = serializers.CharField()
    email = serializers.EmailField()
    phone = serializers.CharField(allow_blank=True)


class ProfileUpdateSerializer(serializers.Serializer):
    username = serializers.CharField(required=False)
    phone = serializers.CharField(required=False, allow_blank=True, max_length=50)
    address = AddressSerializer(required=False)
    profileImage = serializers.CharField(
        source="profile_image", required=False, allow_blank=True, max_length=500
    )

    def validate_username(self, value: str) -> str:
        return validate_username_rules(value)


ROLE_CHOICES = [choice for choice, _label in User.Role.choices]
