from typing import Dict, Iterable, List, Tuple

from django.db.models import Count, F, Q

from apps.common.repository import GenericRepository
from .commands import ProductSearchCommand
from .models import Product


class ProductRepository(GenericRepository[Product]):
    def __init__(self):
        super().__init__(Product)

    def _base(self):
        # Seller is always rendered and likes are counted in one query
        return self.model.objects.select_related("seller").annotate(
            likes_total=Count("likes", distinct=True)
        )

    def get_detail(self, product_id: int):
        return self._base().filter(id=product_id).first()

    def search(self, command: ProductSearchCommand) -> Tuple[List[Product], int]:
        qs = self.model.objects.filter(is_available=True)
        if command.search:
            term = command.search
            qs = qs.filter(
                Q(title__icontains=term)
                | Q(description__icontains=term)
                | Q(tag_text__icontains=term)
            )
        if command.category:
            qs = qs.filter(category=command.category)
        if command.min_price is not None:
            qs = qs.filter(price__gte=command.min_price)
        if command.max_price is not None:
            qs = qs.filter(price__lte=command.max_price)
        total = qs.count()
        window = command.window
        page_ids = list(
            qs.order_by(*command.ordering).values_list("id", flat=True)[
                window.offset : window.limit
            ]
        )
        by_id = {p.id: p for p in self._base().filter(id__in=page_ids)}
        return [by_id[pid] for pid in page_ids if pid in by_id], total

    def list_for_seller(self, seller_id: int) -> Iterable[Product]:
        return self._base().filter(seller_id=seller_id).order_by("-created_at", "-id")

    def increment_views(self, product_id: int) -> int:
        return self.model.objects.filter(id=product_id).update(views=F("views") + 1)

    def toggle_like(self, product: Product, user_id: int) -> Tuple[bool, int]:
        if product.likes.filter(id=user_id).exists():
            product.likes.remove(user_id)
            liked = False
        else:
            product.likes.add(user_id)
            liked = True
        return liked, product.likes.count()

    def lock_many(self, product_ids: Iterable[int]) -> Dict[int, Product]:
        """Row-lock the given products for the surrounding transaction."""
        ids = sorted(set(product_ids))
        qs = self.model.objects.select_for_update().filter(id__in=ids).order_by("id")
        return {p.id: p for p in qs}

    def mark_unavailable(self, product_ids: Iterable[int]) -> int:
        return self.model.objects.filter(id__in=list(product_ids)).update(
            is_available=False
        )
