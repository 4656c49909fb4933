from __future__ import annotations

from apps.catalog.repositories import ProductRepository

from .mappers import CartMapper
from .repositories import CartEntryRepository, CartRepository
from .services import CartService


def build_cart_service() -> CartService:
    return CartService(
        carts=CartRepository(),
        entries=CartEntryRepository(),
        products=ProductRepository(),
        cart_mapper=CartMapper(),
    )
