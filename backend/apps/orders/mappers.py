from typing import Iterable, List

from apps.users.dtos import public_user_to_dto

from .dtos import OrderDTO, OrderLineDTO
from .models import Order, OrderLineItem


class OrderLineMapper:
    @staticmethod
    def to_dto(line: OrderLineItem) -> OrderLineDTO:
        return OrderLineDTO(
            product_id=line.product_id,
            title=line.title,
            quantity=line.quantity,
            price=line.price,
            subtotal=line.price * line.quantity,
        )


class OrderMapper:
    @staticmethod
    def to_dto(order: Order) -> OrderDTO:
        return OrderDTO(
            id=order.id,
            buyer=public_user_to_dto(order.buyer),
            seller=public_user_to_dto(order.seller),
            lines=[OrderLineMapper.to_dto(line) for line in order.lines.all()],
            total_amount=order.total_amount,
            status=order.status,
            payment_method=order.payment_method,
            payment_status=order.payment_status,
            shipping_address=dict(order.shipping_address or {}),
            created_at=order.created_at,
            updated_at=order.updated_at,
        )

    @staticmethod
    def many_to_dto(orders: Iterable[Order]) -> List[OrderDTO]:
        return [OrderMapper.to_dto(o) for o in orders]
