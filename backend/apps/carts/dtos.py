from dataclasses import dataclass, field
from decimal import Decimal
from typing import List


@dataclass
class CartProductDTO:
    """The slice of a product shown inside a cart."""

    id: int
    title: str
    price: Decimal
    condition: str
    seller_id: int
    is_available: bool
    images: List[str] = field(default_factory=list)


@dataclass
class CartItemDTO:
    product: CartProductDTO
    quantity: int
    subtotal: Decimal


@dataclass
class CartDTO:
    id: int
    user_id: int
    items: List[CartItemDTO]
    total_items: int
    total_amount: Decimal
