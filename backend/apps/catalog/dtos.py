from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, List, Optional

from apps.users.dtos import PublicUserDTO


@dataclass
class ProductDTO:
    id: int
    title: str
    description: str
    category: str
    price: Decimal
    condition: str
    seller: Optional[PublicUserDTO]
    is_available: bool
    images: List[str] = field(default_factory=list)
    location: Dict[str, str] = field(default_factory=dict)
    tags: List[str] = field(default_factory=list)
    views: int = 0
    likes_count: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass
class ProductPageDTO:
    products: List[ProductDTO]
    pagination: Dict[str, Any]


@dataclass
class LikeStateDTO:
    is_liked: bool
    likes_count: int
