from __future__ import annotations

from typing import Tuple

from django.db import IntegrityError, transaction

from apps.common import get_logger
from apps.common.errors import (
    NotFoundError,
    ProductUnavailableError,
    SelfPurchaseError,
    UnexpectedError,
    ValidationError,
)
from .dtos import CartDTO
from .models import Cart
from .protocols import (
    CartEntryRepositoryProtocol,
    CartMapperProtocol,
    CartRepositoryProtocol,
    ProductRepositoryProtocol,
)

logger = get_logger(__name__).bind(component="carts", layer="service")


class CartService:
    def __init__(
        self,
        carts: CartRepositoryProtocol,
        entries: CartEntryRepositoryProtocol,
        products: ProductRepositoryProtocol,
        cart_mapper: CartMapperProtocol,
    ):
        self.carts = carts
        self.entries = entries
        self.products = products
        self.cart_mapper = cart_mapper
        self.logger = logger.bind(service="CartService")

    def _ensure_cart(self, user_id: int) -> Tuple[Cart, bool]:
        """
        Fetch the user's cart, creating it when absent.
        Returns a tuple of (cart, created_flag).
        """
        existing = self.carts.get(user_id=user_id)
        if existing:
            return existing, False
        try:
            with transaction.atomic():
                cart = self.carts.create(user_id=user_id)
        except IntegrityError as exc:
            # A concurrent request created the cart after our initial check.
            existing = self.carts.get(user_id=user_id)
            if existing:
                self.logger.debug(
                    "Cart created by concurrent request",
                    user_id=user_id,
                    cart_id=existing.id,
                )
                return existing, False
            self.logger.error("Cart insert failed without a concurrent cart", user_id=user_id)
            raise UnexpectedError("Cart could not be created") from exc
        self.logger.info("Cart created", user_id=user_id, cart_id=cart.id)
        return cart, True

    def _snapshot(self, user_id: int) -> CartDTO:
        # Re-read so prefetched entries reflect the latest writes
        cart = self.carts.get(user_id=user_id)
        return self.cart_mapper.to_dto(cart)

    def get(self, user_id: int) -> CartDTO:
        self.logger.debug("Fetching cart", user_id=user_id)
        cart, _created = self._ensure_cart(user_id)
        return self.cart_mapper.to_dto(cart)

    def add(self, user_id: int, product_id: int, quantity: int = 1) -> CartDTO:
        self.logger.info(
            "Adding product to cart",
            user_id=user_id,
            product_id=product_id,
            quantity=quantity,
        )
        if quantity < 1:
            raise ValidationError(
                "Quantity must be at least 1", details={"quantity": quantity}
            )
        product = self.products.get(id=product_id)
        if not product:
            self.logger.info("Add to cart failed: product missing", product_id=product_id)
            raise NotFoundError("Product not found", details={"productId": str(product_id)})
        if not product.is_available:
            self.logger.info(
                "Add to cart failed: product unavailable", product_id=product_id
            )
            raise ProductUnavailableError(details={"productId": str(product_id)})
        if product.seller_id == user_id:
            self.logger.warning(
                "Add to cart rejected: own product", user_id=user_id, product_id=product_id
            )
            raise SelfPurchaseError(details={"productId": str(product_id)})
        cart, _created = self._ensure_cart(user_id)
        with transaction.atomic():
            entry = self.entries.get_for_cart_product(cart.id, product_id)
            if entry:
                self.entries.increment_quantity(entry, quantity)
            else:
                self.entries.create(cart=cart, product=product, quantity=quantity)
            self.carts.touch(cart)
        return self._snapshot(user_id)

    def set_quantity(self, user_id: int, product_id: int, quantity: int) -> CartDTO:
        """Overwrite an entry's quantity; zero or less removes the entry."""
        self.logger.info(
            "Setting cart quantity",
            user_id=user_id,
            product_id=product_id,
            quantity=quantity,
        )
        cart, _created = self._ensure_cart(user_id)
        entry = self.entries.get_for_cart_product(cart.id, product_id)
        if not entry:
            self.logger.info(
                "Cart update failed: product not in cart",
                user_id=user_id,
                product_id=product_id,
            )
            raise NotFoundError(
                "Product not found in cart", details={"productId": str(product_id)}
            )
        with transaction.atomic():
            if quantity <= 0:
                self.entries.delete(entry)
            else:
                self.entries.update_scalar(entry, quantity=quantity)
            self.carts.touch(cart)
        return self._snapshot(user_id)

    def remove(self, user_id: int, product_id: int) -> CartDTO:
        self.logger.info("Removing product from cart", user_id=user_id, product_id=product_id)
        cart, _created = self._ensure_cart(user_id)
        entry = self.entries.get_for_cart_product(cart.id, product_id)
        if entry:
            self.entries.delete(entry)
            self.carts.touch(cart)
        return self._snapshot(user_id)

    def clear(self, user_id: int) -> None:
        self.logger.info("Clearing cart", user_id=user_id)
        cart, _created = self._ensure_cart(user_id)
        self.entries.delete_for_cart(cart)
        self.carts.touch(cart)
