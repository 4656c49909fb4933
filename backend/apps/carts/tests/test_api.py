from decimal import Decimal

from django.contrib.auth import get_user_model
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.carts.models import Cart
from apps.catalog.models import Product

User = get_user_model()


class CartApiTests(APITestCase):
    def setUp(self):
        self.buyer = User.objects.create_user(
            username="buyer", email="buyer@example.com", password="secret1"
        )
        self.seller = User.objects.create_user(
            username="seller", email="seller@example.com", password="secret1"
        )
        self.lamp = Product.objects.create(
            title="Lamp",
            description="Brass lamp",
            category="Home & Garden",
            price=Decimal("12.00"),
            condition="Good",
            seller=self.seller,
        )
        self.own = Product.objects.create(
            title="Mine",
            description="Buyer's own",
            category="Other",
            price=Decimal("1.00"),
            condition="New",
            seller=self.buyer,
        )
        self.client.force_authenticate(self.buyer)

    def test_requires_authentication(self):
        self.client.force_authenticate(None)
        res = self.client.get(reverse("api-cart"))
        self.assertEqual(res.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_cart_is_created_lazily(self):
        self.assertFalse(Cart.objects.filter(user=self.buyer).exists())
        res = self.client.get(reverse("api-cart"))
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data["items"], [])
        self.client.get(reverse("api-cart"))
        self.assertEqual(Cart.objects.filter(user=self.buyer).count(), 1)

    def test_add_update_remove_clear(self):
        res = self.client.post(
            reverse("api-cart-add"), {"productId": self.lamp.id, "quantity": 2}, format="json"
        )
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.client.post(reverse("api-cart-add"), {"productId": self.lamp.id}, format="json")
        cart = self.client.get(reverse("api-cart")).data
        self.assertEqual(cart["items"][0]["quantity"], 3)
        self.assertEqual(cart["totalAmount"], "36.00")

        res = self.client.put(
            reverse("api-cart-update"), {"productId": self.lamp.id, "quantity": 1}, format="json"
        )
        self.assertEqual(res.data["cart"]["items"][0]["quantity"], 1)

        res = self.client.delete(
            reverse("api-cart-remove"), {"productId": self.lamp.id}, format="json"
        )
        self.assertEqual(res.data["cart"]["items"], [])

        self.client.post(reverse("api-cart-add"), {"productId": self.lamp.id}, format="json")
        res = self.client.delete(reverse("api-cart-clear"))
        self.assertEqual(res.data["message"], "Cart cleared successfully")
        self.assertEqual(self.client.get(reverse("api-cart")).data["items"], [])

    def test_error_codes(self):
        res = self.client.post(reverse("api-cart-add"), {"productId": self.own.id}, format="json")
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(res.data["error"]["code"], "SELF_PURCHASE")

        self.lamp.is_available = False
        self.lamp.save()
        res = self.client.post(reverse("api-cart-add"), {"productId": self.lamp.id}, format="json")
        self.assertEqual(res.data["error"]["code"], "PRODUCT_UNAVAILABLE")

        res = self.client.post(reverse("api-cart-add"), {"productId": 9999}, format="json")
        self.assertEqual(res.status_code, status.HTTP_404_NOT_FOUND)

        res = self.client.put(
            reverse("api-cart-update"), {"productId": self.lamp.id, "quantity": 2}, format="json"
        )
        self.assertEqual(res.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(res.data["error"]["message"], "Product not found in cart")
