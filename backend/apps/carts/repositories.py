from django.db.models import F

from apps.common.repository import GenericRepository
from .models import Cart, CartEntry


class CartRepository(GenericRepository[Cart]):
    def __init__(self):
        super().__init__(Cart)

    def _base_queryset(self):
        return self.model.objects.prefetch_related("entries__product")

    def get(self, **filters):
        return self._base_queryset().filter(**filters).first()

    def touch(self, cart: Cart) -> None:
        cart.save(update_fields=["updated_at"])


class CartEntryRepository(GenericRepository[CartEntry]):
    def __init__(self):
        super().__init__(CartEntry)

    def list_for_cart(self, cart_id: int):
        return self.model.objects.filter(cart_id=cart_id).select_related("product")

    def get_for_cart_product(self, cart_id: int, product_id: int):
        return (
            self.model.objects.filter(cart_id=cart_id, product_id=product_id)
            .select_related("product")
            .first()
        )

    def increment_quantity(self, entry: CartEntry, amount: int) -> None:
        # Applied in SQL so concurrent adds of the same product both count
        self.model.objects.filter(pk=entry.pk).update(quantity=F("quantity") + amount)

    def delete_for_cart(self, cart: Cart):
        self.model.objects.filter(cart=cart).delete()
