from __future__ import annotations

from typing import Iterable, Optional, Protocol, TYPE_CHECKING

from .models import Cart, CartEntry

if TYPE_CHECKING:
    from apps.carts.dtos import CartDTO
    from apps.catalog.models import Product


class CartRepositoryProtocol(Protocol):
    def get(self, **filters) -> Optional[Cart]:
        ...

    def create(self, **data) -> Cart:
        ...

    def touch(self, cart: Cart) -> None:
        ...


class CartEntryRepositoryProtocol(Protocol):
    def create(self, **data) -> CartEntry:
        ...

    def list_for_cart(self, cart_id: int) -> Iterable[CartEntry]:
        ...

    def get_for_cart_product(self, cart_id: int, product_id: int) -> Optional[CartEntry]:
        ...

    def update_scalar(self, entry: CartEntry, **fields) -> CartEntry:
        ...

    def increment_quantity(self, entry: CartEntry, amount: int) -> None:
        ...

    def delete(self, entry: CartEntry) -> None:
        ...

    def delete_for_cart(self, cart: Cart) -> None:
        ...


class ProductRepositoryProtocol(Protocol):
    def get(self, **filters) -> Optional["Product"]:
        ...


class CartMapperProtocol(Protocol):
    def to_dto(self, cart: Cart) -> "CartDTO":
        ...
