from decimal import Decimal

from django.contrib.auth import get_user_model
from django.core.cache import cache
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.catalog.models import Product

User = get_user_model()


class ProductApiTests(APITestCase):
    def setUp(self):
        cache.clear()
        self.seller = User.objects.create_user(
            username="seller", email="seller@example.com", password="secret1"
        )
        self.buyer = User.objects.create_user(
            username="buyer", email="buyer@example.com", password="secret1"
        )

    def _product(self, title, price, **extra):
        data = dict(
            title=title,
            description=extra.pop("description", f"{title} description"),
            category=extra.pop("category", "Furniture"),
            price=Decimal(price),
            condition="Good",
            seller=self.seller,
        )
        data.update(extra)
        return Product.objects.create(**data)

    def _login(self, email):
        res = self.client.post(
            reverse("auth-login"), {"email": email, "password": "secret1"}, format="json"
        )
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {res.data['token']}")

    def test_search_filters_sorts_and_paginates(self):
        self._product("Oak table", "50.00", tags=["wood"])
        self._product("Pine shelf", "20.00", tags=["wood", "pine"])
        self._product("Phone", "200.00", category="Electronics")
        self._product("Sold chair", "5.00", is_available=False)
        url = reverse("api-products-list")

        res = self.client.get(url, {"search": "WOOD", "sortBy": "price", "sortOrder": "asc"})
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual([p["title"] for p in res.data["products"]], ["Pine shelf", "Oak table"])

        res = self.client.get(url, {"minPrice": "10", "maxPrice": "60", "category": "Furniture"})
        self.assertEqual(res.data["pagination"]["totalProducts"], 2)

        res = self.client.get(url, {"limit": 2, "page": 2})
        self.assertEqual(len(res.data["products"]), 1)
        self.assertEqual(
            res.data["pagination"],
            {
                "currentPage": 2,
                "totalPages": 2,
                "totalProducts": 3,
                "hasNext": False,
                "hasPrev": True,
            },
        )

    def test_detail_counts_views_and_missing_is_404(self):
        product = self._product("Lamp", "9.99")
        url = reverse("api-products-detail", args=[product.id])
        self.assertEqual(self.client.get(url).data["views"], 1)
        self.assertEqual(self.client.get(url).data["views"], 2)
        res = self.client.get(reverse("api-products-detail", args=[9999]))
        self.assertEqual(res.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(res.data["error"]["code"], "NOT_FOUND")

    def test_create_requires_authentication(self):
        res = self.client.post(reverse("api-products-list"), {}, format="json")
        self.assertEqual(res.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_seller_creates_updates_and_deletes(self):
        self._login("seller@example.com")
        res = self.client.post(
            reverse("api-products-list"),
            {
                "title": "Bike",
                "description": "City bike",
                "category": "Sports & Fitness",
                "price": "120.00",
                "condition": "Fair",
                "location": {"city": "Pune"},
            },
            format="json",
        )
        self.assertEqual(res.status_code, status.HTTP_201_CREATED)
        product_id = res.data["product"]["id"]
        self.assertEqual(res.data["product"]["seller"]["username"], "seller")

        listed = self.client.get(reverse("api-products-list")).data
        self.assertEqual(listed["pagination"]["totalProducts"], 1)

        detail = reverse("api-products-detail", args=[product_id])
        res = self.client.put(detail, {"isAvailable": False}, format="json")
        self.assertFalse(res.data["product"]["isAvailable"])
        listed = self.client.get(reverse("api-products-list")).data
        self.assertEqual(listed["pagination"]["totalProducts"], 0)

        mine = self.client.get(reverse("api-products-mine")).data
        self.assertEqual([p["id"] for p in mine], [product_id])

        res = self.client.delete(detail)
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertFalse(Product.objects.filter(id=product_id).exists())

    def test_update_with_empty_collections_clears_them(self):
        product = self._product(
            "Chair", "15.00", tags=["vintage"], images=["a.jpg"], location={"city": "Pune"}
        )
        self._login("seller@example.com")
        res = self.client.put(
            reverse("api-products-detail", args=[product.id]),
            {"tags": [], "images": []},
            format="json",
        )
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data["product"]["tags"], [])
        self.assertEqual(res.data["product"]["images"], [])
        product.refresh_from_db()
        self.assertEqual((product.tags, product.images), ([], []))
        self.assertEqual(product.location, {"city": "Pune"})
        self.assertEqual(product.tag_text, "")

    def test_tag_search_matches_tag_text_only(self):
        self._product("Mug", "4.00", description="Ceramic mug", tags=["café", "kitchen"])
        self._product("Rug", "30.00", description="Wool rug", tags=["floor"])
        url = reverse("api-products-list")

        res = self.client.get(url, {"search": "café"})
        self.assertEqual([p["title"] for p in res.data["products"]], ["Mug"])
        res = self.client.get(url, {"search": "KITCH"})
        self.assertEqual([p["title"] for p in res.data["products"]], ["Mug"])
        for term in ['"', ",", "["]:
            res = self.client.get(url, {"search": term})
            self.assertEqual(res.data["pagination"]["totalProducts"], 0, term)

    def test_non_seller_cannot_update(self):
        product = self._product("Lamp", "9.99")
        self._login("buyer@example.com")
        res = self.client.put(
            reverse("api-products-detail", args=[product.id]),
            {"title": "Stolen"},
            format="json",
        )
        self.assertEqual(res.status_code, status.HTTP_403_FORBIDDEN)
        product.refresh_from_db()
        self.assertEqual(product.title, "Lamp")

    def test_like_toggles(self):
        product = self._product("Lamp", "9.99")
        self._login("buyer@example.com")
        url = reverse("api-products-like", args=[product.id])
        first = self.client.post(url)
        second = self.client.post(url)
        self.assertEqual((first.data["isLiked"], first.data["likesCount"]), (True, 1))
        self.assertEqual((second.data["isLiked"], second.data["likesCount"]), (False, 0))
