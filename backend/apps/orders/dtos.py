from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, List, Optional

from apps.users.dtos import PublicUserDTO


@dataclass
class OrderLineDTO:
    product_id: Optional[int]
    title: str
    quantity: int
    price: Decimal
    subtotal: Decimal


@dataclass
class OrderDTO:
    id: int
    buyer: PublicUserDTO
    seller: PublicUserDTO
    lines: List[OrderLineDTO]
    total_amount: Decimal
    status: str
    payment_method: str
    payment_status: str
    shipping_address: Dict[str, Any] = field(default_factory=dict)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass
class CheckoutDTO:
    orders: List[OrderDTO]
    total_amount: Decimal
