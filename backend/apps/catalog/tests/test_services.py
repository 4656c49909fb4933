import unittest
from decimal import Decimal

from apps.catalog.cache import ProductListingCache
from apps.catalog.commands import ProductSearchCommand
from apps.catalog.services import ProductService
from apps.common.errors import NotAuthorizedError, NotFoundError


class DictCache:
    def __init__(self):
        self.store = {}

    def get(self, key, default=None):
        return self.store.get(key, default)

    def set(self, key, value, timeout=None):
        self.store[key] = value


class StubSeller:
    def __init__(self, user_id):
        self.id = user_id
        self.username = f"user{user_id}"
        self.email = f"user{user_id}@example.com"
        self.phone = ""


class StubProduct:
    def __init__(self, product_id, seller_id, **attrs):
        self.id = product_id
        self.seller_id = seller_id
        self.seller = StubSeller(seller_id)
        self.title = attrs.get("title", f"Product {product_id}")
        self.description = attrs.get("description", "")
        self.category = attrs.get("category", "Other")
        self.price = Decimal(str(attrs.get("price", "10")))
        self.condition = attrs.get("condition", "Good")
        self.is_available = attrs.get("is_available", True)
        self.images = []
        self.location = {}
        self.tags = attrs.get("tags", [])
        self.views = attrs.get("views", 0)
        self.likers = set()
        self.likes_total = 0
        self.created_at = None
        self.updated_at = None


class FakeProductRepository:
    def __init__(self, *products):
        self.items = {p.id: p for p in products}
        self.search_calls = 0
        self.deleted = []
        self.view_hits = {}

    def get(self, **filters):
        return self.items.get(filters.get("id"))

    def get_detail(self, product_id):
        product = self.items.get(product_id)
        if product is not None:
            product.likes_total = len(product.likers)
        return product

    def create(self, **data):
        product_id = max(self.items, default=0) + 1
        product = StubProduct(product_id, data.pop("seller_id"))
        for key, value in data.items():
            setattr(product, key, value)
        self.items[product_id] = product
        return product

    def update_scalar(self, product, **fields):
        for key, value in fields.items():
            if value is not None:
                setattr(product, key, value)
        return product

    def delete(self, product):
        self.deleted.append(product.id)
        self.items.pop(product.id, None)

    def search(self, command):
        self.search_calls += 1
        matches = [p for p in self.items.values() if p.is_available]
        if command.category:
            matches = [p for p in matches if p.category == command.category]
        window = command.window
        return matches[window.offset : window.limit], len(matches)

    def list_for_seller(self, seller_id):
        return [p for p in self.items.values() if p.seller_id == seller_id]

    def increment_views(self, product_id):
        if product_id not in self.items:
            return 0
        self.view_hits[product_id] = self.view_hits.get(product_id, 0) + 1
        return 1

    def toggle_like(self, product, user_id):
        if user_id in product.likers:
            product.likers.remove(user_id)
            liked = False
        else:
            product.likers.add(user_id)
            liked = True
        return liked, len(product.likers)


class ProductServiceTests(unittest.TestCase):
    def setUp(self):
        self.repo = FakeProductRepository(
            StubProduct(1, seller_id=10, category="Books & Media"),
            StubProduct(2, seller_id=10, category="Furniture"),
            StubProduct(3, seller_id=20, category="Furniture", is_available=False),
        )
        self.cache = ProductListingCache(DictCache(), prefix="test")
        self.service = ProductService(products=self.repo, listing_cache=self.cache)

    def test_search_returns_page_and_pagination(self):
        page = self.service.search({"limit": 1})
        self.assertEqual(len(page.products), 1)
        self.assertEqual(page.pagination["totalProducts"], 2)
        self.assertEqual(page.pagination["totalPages"], 2)
        self.assertTrue(page.pagination["hasNext"])
        self.assertFalse(page.pagination["hasPrev"])

    def test_search_is_cached_until_catalog_changes(self):
        cmd = ProductSearchCommand(category="Furniture")
        first = self.service.search(cmd)
        second = self.service.search(cmd)
        self.assertIs(first, second)
        self.assertEqual(self.repo.search_calls, 1)
        self.service.set_availability(3, True)
        third = self.service.search(cmd)
        self.assertEqual(self.repo.search_calls, 2)
        self.assertEqual(third.pagination["totalProducts"], 2)

    def test_search_without_cache_hits_repository_each_time(self):
        service = ProductService(
            products=self.repo, listing_cache=self.cache, disable_cache=True
        )
        service.search({})
        service.search({})
        self.assertEqual(self.repo.search_calls, 2)

    def test_get_product_increments_views(self):
        dto = self.service.get_product(1)
        self.assertEqual(dto.views, 1)
        self.assertEqual(self.repo.view_hits, {1: 1})
        self.service.get_product(1, count_view=False)
        self.assertEqual(self.repo.view_hits, {1: 1})

    def test_get_product_missing(self):
        with self.assertRaises(NotFoundError):
            self.service.get_product(99)

    def test_increment_views_missing(self):
        with self.assertRaises(NotFoundError):
            self.service.increment_views(99)

    def test_create_product_assigns_seller_and_bumps_cache(self):
        self.service.search({})
        dto = self.service.create_product(
            30,
            {
                "title": "Desk",
                "description": "Teak desk",
                "category": "Furniture",
                "price": Decimal("99.00"),
                "condition": "Like New",
            },
        )
        self.assertEqual(dto.seller.id, 30)
        self.assertEqual(dto.price, Decimal("99.00"))
        self.assertTrue(dto.is_available)
        page = self.service.search({})
        self.assertEqual(page.pagination["totalProducts"], 3)

    def test_update_product_by_seller_applies_given_fields(self):
        dto = self.service.update_product(
            1, 10, {"price": Decimal("4.50"), "is_available": False}
        )
        self.assertEqual(dto.price, Decimal("4.50"))
        self.assertFalse(dto.is_available)
        self.assertEqual(dto.title, "Product 1")

    def test_update_product_by_other_user_is_rejected(self):
        with self.assertRaises(NotAuthorizedError):
            self.service.update_product(1, 20, {"title": "Mine now"})
        self.assertEqual(self.repo.items[1].title, "Product 1")

    def test_delete_product_requires_seller(self):
        with self.assertRaises(NotAuthorizedError):
            self.service.delete_product(1, 20)
        self.service.delete_product(1, 10)
        self.assertEqual(self.repo.deleted, [1])
        with self.assertRaises(NotFoundError):
            self.service.delete_product(1, 10)

    def test_list_for_seller_includes_unavailable(self):
        ids = [p.id for p in self.service.list_for_seller(20)]
        self.assertEqual(ids, [3])

    def test_toggle_like_twice_restores_state(self):
        first = self.service.toggle_like(2, 20)
        self.assertTrue(first.is_liked)
        self.assertEqual(first.likes_count, 1)
        second = self.service.toggle_like(2, 20)
        self.assertFalse(second.is_liked)
        self.assertEqual(second.likes_count, 0)

    def test_toggle_like_missing_product(self):
        with self.assertRaises(NotFoundError):
            self.service.toggle_like(99, 20)
