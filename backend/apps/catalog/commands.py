from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, List, Optional

from .pagination import DEFAULT_PAGE_SIZE, PageWindow

SORT_FIELDS = {
    "createdAt": "created_at",
    "price": "price",
    "title": "title",
    "views": "views",
}


@dataclass(frozen=True)
class ProductSearchCommand:
    search: str = ""
    category: Optional[str] = None
    min_price: Optional[Decimal] = None
    max_price: Optional[Decimal] = None
    sort_by: str = "createdAt"
    sort_order: str = "desc"
    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE

    @staticmethod
    def from_raw(payload: Dict[str, Any]) -> "ProductSearchCommand":
        data = dict(payload or {})
        min_price = data.get("min_price")
        max_price = data.get("max_price")
        return ProductSearchCommand(
            search=str(data.get("search") or "").strip(),
            category=data.get("category") or None,
            min_price=Decimal(str(min_price)) if min_price is not None else None,
            max_price=Decimal(str(max_price)) if max_price is not None else None,
            sort_by=data.get("sort_by") or "createdAt",
            sort_order=data.get("sort_order") or "desc",
            page=int(data.get("page") or 1),
            page_size=int(data.get("limit") or DEFAULT_PAGE_SIZE),
        )

    @property
    def window(self) -> PageWindow:
        return PageWindow(page=self.page, page_size=self.page_size)

    @property
    def ordering(self) -> List[str]:
        column = SORT_FIELDS.get(self.sort_by, "created_at")
        prefix = "-" if self.sort_order == "desc" else ""
        # id as tie-breaker keeps pages stable
        return [f"{prefix}{column}", f"{prefix}id"]

    def cache_token(self) -> str:
        return ":".join(
            str(part)
            for part in (
                self.search.lower() or "-",
                self.category or "all",
                self.min_price if self.min_price is not None else "-",
                self.max_price if self.max_price is not None else "-",
                self.sort_by,
                self.sort_order,
                self.page,
                self.page_size,
            )
        )


def _clean_tags(raw) -> List[str]:
    return [str(t).strip() for t in raw or [] if str(t).strip()]


@dataclass
class ProductCreateCommand:
    title: str
    description: str
    category: str
    price: Decimal
    condition: str
    images: List[str] = field(default_factory=list)
    location: Dict[str, str] = field(default_factory=dict)
    tags: List[str] = field(default_factory=list)

    @staticmethod
    def from_raw(payload: Dict[str, Any]) -> "ProductCreateCommand":
        data = dict(payload or {})
        return ProductCreateCommand(
            title=str(data.get("title", "")).strip(),
            description=str(data.get("description", "")).strip(),
            category=data.get("category", ""),
            price=Decimal(str(data.get("price", "0"))),
            condition=data.get("condition", ""),
            images=list(data.get("images") or []),
            location=dict(data.get("location") or {}),
            tags=_clean_tags(data.get("tags")),
        )


@dataclass
class ProductUpdateCommand:
    """Only fields that were sent are set; None means untouched."""

    product_id: int
    title: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    price: Optional[Decimal] = None
    condition: Optional[str] = None
    images: Optional[List[str]] = None
    location: Optional[Dict[str, str]] = None
    tags: Optional[List[str]] = None
    is_available: Optional[bool] = None

    @staticmethod
    def from_raw(product_id: int, payload: Dict[str, Any]) -> "ProductUpdateCommand":
        data = dict(payload or {})
        price = data.get("price")
        return ProductUpdateCommand(
            product_id=product_id,
            title=(data.get("title") or "").strip() or None,
            description=(data.get("description") or "").strip() or None,
            category=data.get("category") or None,
            price=Decimal(str(price)) if price is not None else None,
            condition=data.get("condition") or None,
            # An empty list or dict clears the field; only a missing key leaves it alone
            images=list(data["images"] or []) if "images" in data else None,
            location=dict(data["location"] or {}) if "location" in data else None,
            tags=_clean_tags(data["tags"]) if "tags" in data else None,
            is_available=data.get("is_available"),
        )

    def changes(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "description": self.description,
            "category": self.category,
            "price": self.price,
            "condition": self.condition,
            "images": self.images,
            "location": self.location,
            "tags": self.tags,
            "is_available": self.is_available,
        }
