from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models


class Product(models.Model):
    class Category(models.TextChoices):
        ELECTRONICS = "Electronics", "Electronics"
        CLOTHING = "Clothing & Accessories", "Clothing & Accessories"
        HOME_GARDEN = "Home & Garden", "Home & Garden"
        BOOKS_MEDIA = "Books & Media", "Books & Media"
        SPORTS_FITNESS = "Sports & Fitness", "Sports & Fitness"
        TOYS_GAMES = "Toys & Games", "Toys & Games"
        AUTOMOTIVE = "Automotive", "Automotive"
        HEALTH_BEAUTY = "Health & Beauty", "Health & Beauty"
        JEWELRY_WATCHES = "Jewelry & Watches", "Jewelry & Watches"
        FURNITURE = "Furniture", "Furniture"
        OTHER = "Other", "Other"

    class Condition(models.TextChoices):
        NEW = "New", "New"
        LIKE_NEW = "Like New", "Like New"
        GOOD = "Good", "Good"
        FAIR = "Fair", "Fair"
        POOR = "Poor", "Poor"

    title = models.CharField(max_length=100)
    description = models.CharField(max_length=1000)
    category = models.CharField(max_length=40, choices=Category.choices)
    price = models.DecimalField(
        max_digits=10, decimal_places=2, validators=[MinValueValidator(0)]
    )
    images = models.JSONField(default=list, blank=True)
    condition = models.CharField(max_length=20, choices=Condition.choices)
    seller = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="products"
    )
    is_available = models.BooleanField(default=True)
    location = models.JSONField(default=dict, blank=True)
    tags = models.JSONField(default=list, blank=True)
    # One tag per line; searched instead of the JSON-encoded list
    tag_text = models.TextField(default="", blank=True, editable=False)
    views = models.PositiveIntegerField(default=0)
    likes = models.ManyToManyField(
        settings.AUTH_USER_MODEL, related_name="liked_products", blank=True
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at", "-id"]
        indexes = [
            models.Index(fields=["category"], name="product_category_idx"),
            models.Index(fields=["price"], name="product_price_idx"),
            models.Index(fields=["seller"], name="product_seller_idx"),
            models.Index(
                fields=["is_available", "-created_at"], name="product_avail_created_idx"
            ),
        ]

    @staticmethod
    def join_tags(tags) -> str:
        return "\n".join(str(t) for t in tags or [])

    def save(self, *args, **kwargs):
        self.tag_text = self.join_tags(self.tags)
        update_fields = kwargs.get("update_fields")
        if update_fields is not None and "tags" in update_fields:
            kwargs["update_fields"] = {*update_fields, "tag_text"}
        super().save(*args, **kwargs)

    def __str__(self):
        return self.title
