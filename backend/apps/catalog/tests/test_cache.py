import unittest

from apps.catalog.cache import ProductListingCache


class DictCache:
    def __init__(self):
        self.store = {}
        self.timeouts = {}

    def get(self, key, default=None):
        return self.store.get(key, default)

    def set(self, key, value, timeout=None):
        self.store[key] = value
        self.timeouts[key] = timeout


class ProductListingCacheTests(unittest.TestCase):
    def setUp(self):
        self.backend = DictCache()
        self.cache = ProductListingCache(self.backend, prefix="p", timeout=60)

    def test_round_trip_under_current_version(self):
        self.cache.set("all", ["a"])
        self.assertEqual(self.cache.get("all"), ["a"])
        self.assertIn("p:v1:all", self.backend.store)
        self.assertEqual(self.backend.timeouts["p:v1:all"], 60)

    def test_bump_orphans_existing_entries(self):
        self.cache.set("all", ["a"])
        self.assertEqual(self.cache.bump(), 2)
        self.assertIsNone(self.cache.get("all"))
        self.assertIsNone(self.backend.timeouts["p:version"])
        self.cache.set("all", ["b"])
        self.assertEqual(self.cache.get("all"), ["b"])
