from __future__ import annotations

from django.conf import settings
from django.core.cache import cache

from .cache import ProductListingCache
from .repositories import ProductRepository
from .services import ProductService


def build_listing_cache() -> ProductListingCache:
    return ProductListingCache(cache, timeout=getattr(settings, "CACHE_TTL", None))


def build_product_service(*, disable_cache: bool = False) -> ProductService:
    return ProductService(
        products=ProductRepository(),
        listing_cache=build_listing_cache(),
        disable_cache=disable_cache,
    )
