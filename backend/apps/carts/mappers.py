from decimal import Decimal
from typing import Iterable, List

from .dtos import CartDTO, CartItemDTO, CartProductDTO
from .models import Cart, CartEntry


class CartEntryMapper:
    def to_dto(self, entry: CartEntry) -> CartItemDTO:
        product = entry.product
        return CartItemDTO(
            product=CartProductDTO(
                id=product.id,
                title=product.title,
                price=product.price,
                condition=product.condition,
                seller_id=product.seller_id,
                is_available=product.is_available,
                images=list(product.images or []),
            ),
            quantity=entry.quantity,
            subtotal=product.price * entry.quantity,
        )

    def many_to_dto(self, entries: Iterable[CartEntry]) -> List[CartItemDTO]:
        return [self.to_dto(e) for e in entries]


class CartMapper:
    def __init__(self, entry_mapper: CartEntryMapper = None) -> None:
        self.entry_mapper = entry_mapper or CartEntryMapper()

    def to_dto(self, cart: Cart) -> CartDTO:
        items = self.entry_mapper.many_to_dto(cart.entries.all())
        return CartDTO(
            id=cart.id,
            user_id=cart.user_id,
            items=items,
            total_items=sum(i.quantity for i in items),
            total_amount=sum((i.subtotal for i in items), Decimal("0")),
        )
