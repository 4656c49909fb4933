from __future__ import annotations

from decimal import Decimal
from typing import Any, Dict, Iterable, Optional, Protocol, Sequence, TYPE_CHECKING

from .models import Order
from .splitter import ResolvedLine

if TYPE_CHECKING:
    from apps.carts.models import Cart, CartEntry
    from apps.catalog.models import Product


class OrderRepositoryProtocol(Protocol):
    def create_order(
        self,
        *,
        buyer_id: int,
        seller_id: int,
        total_amount: Decimal,
        shipping_address: Dict[str, Any],
        payment_method: str,
        lines: Sequence[ResolvedLine],
    ) -> Order:
        ...

    def get_detail(self, order_id: int) -> Optional[Order]:
        ...

    def list_for_buyer(self, buyer_id: int) -> Iterable[Order]:
        ...

    def list_for_seller(self, seller_id: int) -> Iterable[Order]:
        ...

    def update_scalar(self, order: Order, **fields) -> Order:
        ...


class CartRepositoryProtocol(Protocol):
    def get(self, **filters) -> Optional["Cart"]:
        ...


class CartEntryRepositoryProtocol(Protocol):
    def list_for_cart(self, cart_id: int) -> Iterable["CartEntry"]:
        ...

    def delete_for_cart(self, cart: "Cart") -> None:
        ...


class ProductLockRepositoryProtocol(Protocol):
    def lock_many(self, product_ids: Iterable[int]) -> Dict[int, "Product"]:
        ...

    def mark_unavailable(self, product_ids: Iterable[int]) -> int:
        ...


class ListingCacheProtocol(Protocol):
    def bump(self) -> int:
        ...
