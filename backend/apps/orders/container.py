from __future__ import annotations

from apps.carts.repositories import CartEntryRepository, CartRepository
from apps.catalog.container import build_listing_cache
from apps.catalog.repositories import ProductRepository

from .repositories import OrderRepository
from .services import OrderService


def build_order_service() -> OrderService:
    return OrderService(
        orders=OrderRepository(),
        carts=CartRepository(),
        cart_entries=CartEntryRepository(),
        products=ProductRepository(),
        listing_cache=build_listing_cache(),
    )
