from django.db import models
from django.contrib.auth.models import AbstractUser


class User(AbstractUser):
    # id, username, password, is_active, is_staff, groups and permissions come from AbstractUser
    class Role(models.TextChoices):
        BUYER = "buyer", "Buyer"
        SELLER = "seller", "Seller"
        BOTH = "both", "Both"

    email = models.EmailField(unique=True)
    phone = models.CharField(max_length=50, blank=True, default="")
    # {street, city, state, pincode, country}
    address = models.JSONField(default=dict, blank=True)
    profile_image = models.CharField(max_length=500, blank=True, default="")
    role = models.CharField(max_length=10, choices=Role.choices, default=Role.BOTH)

    def __str__(self):
        return self.username
