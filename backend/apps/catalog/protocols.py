from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Protocol, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from .commands import ProductSearchCommand
    from .models import Product


class CacheBackendProtocol(Protocol):
    def get(self, key: str, default: Any = None) -> Any:
        ...

    def set(self, key: str, value: Any, timeout: Optional[int] = ...) -> None:
        ...


class ProductRepositoryProtocol(Protocol):
    def get(self, **filters) -> Optional["Product"]:
        ...

    def get_detail(self, product_id: int) -> Optional["Product"]:
        ...

    def create(self, **data) -> "Product":
        ...

    def update_scalar(self, product: "Product", **fields) -> "Product":
        ...

    def delete(self, product: "Product") -> None:
        ...

    def search(self, command: "ProductSearchCommand") -> Tuple[List["Product"], int]:
        ...

    def list_for_seller(self, seller_id: int) -> Iterable["Product"]:
        ...

    def increment_views(self, product_id: int) -> int:
        ...

    def toggle_like(self, product: "Product", user_id: int) -> Tuple[bool, int]:
        ...

    def lock_many(self, product_ids: Iterable[int]) -> Dict[int, "Product"]:
        ...

    def mark_unavailable(self, product_ids: Iterable[int]) -> int:
        ...
