from typing import Iterable, List

from apps.users.dtos import public_user_to_dto

from .dtos import ProductDTO
from .models import Product


class ProductMapper:
    @staticmethod
    def _likes_count(product: Product) -> int:
        annotated = getattr(product, "likes_total", None)
        if annotated is not None:
            return annotated
        return product.likes.count()

    @staticmethod
    def to_dto(product: Product) -> ProductDTO:
        seller = getattr(product, "seller", None)
        return ProductDTO(
            id=product.id,
            title=product.title,
            description=product.description,
            category=product.category,
            price=product.price,
            condition=product.condition,
            seller=public_user_to_dto(seller) if seller is not None else None,
            is_available=product.is_available,
            images=list(product.images or []),
            location=dict(product.location or {}),
            tags=list(product.tags or []),
            views=product.views,
            likes_count=ProductMapper._likes_count(product),
            created_at=product.created_at,
            updated_at=product.updated_at,
        )

    @staticmethod
    def many_to_dto(products: Iterable[Product]) -> List[ProductDTO]:
        return [ProductMapper.to_dto(p) for p in products]
