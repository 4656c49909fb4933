from decimal import Decimal
from typing import Any, Dict, Sequence

from apps.common.repository import GenericRepository
from .models import Order, OrderLineItem
from .splitter import ResolvedLine


class OrderRepository(GenericRepository[Order]):
    def __init__(self):
        super().__init__(Order)

    def _base_queryset(self):
        return self.model.objects.select_related("buyer", "seller").prefetch_related(
            "lines"
        )

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
        order = self.model.objects.create(
            buyer_id=buyer_id,
            seller_id=seller_id,
            total_amount=total_amount,
            shipping_address=shipping_address,
            payment_method=payment_method,
        )
        OrderLineItem.objects.bulk_create(
            [
                OrderLineItem(
                    order=order,
                    product_id=line.product_id,
                    title=line.title,
                    quantity=line.quantity,
                    price=line.price,
                )
                for line in lines
            ]
        )
        return self.get_detail(order.id)

    def get_detail(self, order_id: int):
        return self._base_queryset().filter(id=order_id).first()

    def list_for_buyer(self, buyer_id: int):
        return self._base_queryset().filter(buyer_id=buyer_id).order_by("-created_at", "-id")

    def list_for_seller(self, seller_id: int):
        return self._base_queryset().filter(seller_id=seller_id).order_by("-created_at", "-id")
