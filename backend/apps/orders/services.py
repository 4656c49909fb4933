from __future__ import annotations

from typing import Any, Dict, List, Optional

from django.conf import settings
from django.db import transaction

from apps.common import get_logger
from apps.common.errors import (
    EmptyCartError,
    NotAuthorizedError,
    NotFoundError,
    ProductUnavailableError,
    ValidationError,
)
from .dtos import CheckoutDTO, OrderDTO
from .mappers import OrderMapper
from .models import Order
from .protocols import (
    CartEntryRepositoryProtocol,
    CartRepositoryProtocol,
    ListingCacheProtocol,
    OrderRepositoryProtocol,
    ProductLockRepositoryProtocol,
)
from .splitter import ResolvedLine, split_by_seller

logger = get_logger(__name__).bind(component="orders", layer="service")

ORDER_STATUSES = tuple(Order.Status.values)
PAYMENT_METHODS = tuple(Order.PaymentMethod.values)


class OrderService:
    def __init__(
        self,
        orders: OrderRepositoryProtocol,
        carts: CartRepositoryProtocol,
        cart_entries: CartEntryRepositoryProtocol,
        products: ProductLockRepositoryProtocol,
        listing_cache: ListingCacheProtocol,
    ):
        self.orders = orders
        self.carts = carts
        self.cart_entries = cart_entries
        self.products = products
        self.listing_cache = listing_cache
        self.logger = logger.bind(service="OrderService")

    @staticmethod
    def _normalize_address(address: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        normalized = {k: v for k, v in dict(address or {}).items() if v not in (None, "")}
        normalized.setdefault(
            "country", getattr(settings, "DEFAULT_SHIPPING_COUNTRY", "India")
        )
        return normalized

    def checkout(
        self,
        buyer_id: int,
        shipping_address: Optional[Dict[str, Any]] = None,
        payment_method: str = Order.PaymentMethod.CASH_ON_DELIVERY,
    ) -> CheckoutDTO:
        """
        Turn the buyer's cart into one pending order per seller.

        Runs in a single transaction with the purchased products row-locked,
        so either every order is created, every product is marked unavailable
        and the cart is emptied, or nothing changes at all.

        Raises:
            EmptyCartError: no cart, no entries, or nothing left to buy.
            ProductUnavailableError: any entry refers to an unavailable product.
            ValidationError: unknown payment method.
        """
        if payment_method not in PAYMENT_METHODS:
            raise ValidationError(
                "Unknown payment method", details={"paymentMethod": payment_method}
            )
        address = self._normalize_address(shipping_address)
        self.logger.info("Starting checkout", buyer_id=buyer_id, payment_method=payment_method)
        with transaction.atomic():
            cart = self.carts.get(user_id=buyer_id)
            entries = list(self.cart_entries.list_for_cart(cart.id)) if cart else []
            if not entries:
                self.logger.info("Checkout rejected: cart empty", buyer_id=buyer_id)
                raise EmptyCartError()
            locked = self.products.lock_many(e.product_id for e in entries)
            lines: List[ResolvedLine] = []
            for entry in entries:
                product = locked.get(entry.product_id)
                if product is None:
                    self.logger.warning(
                        "Skipping cart entry for missing product",
                        buyer_id=buyer_id,
                        product_id=entry.product_id,
                    )
                    continue
                if not product.is_available:
                    self.logger.info(
                        "Checkout rejected: product unavailable",
                        buyer_id=buyer_id,
                        product_id=product.id,
                    )
                    raise ProductUnavailableError(
                        f"Product '{product.title}' is no longer available",
                        details={"productId": str(product.id)},
                    )
                lines.append(
                    ResolvedLine(
                        product_id=product.id,
                        seller_id=product.seller_id,
                        price=product.price,
                        quantity=entry.quantity,
                        title=product.title,
                    )
                )
            split = split_by_seller(lines)
            created = [
                self.orders.create_order(
                    buyer_id=buyer_id,
                    seller_id=group.seller_id,
                    total_amount=group.total,
                    shipping_address=address,
                    payment_method=payment_method,
                    lines=group.lines,
                )
                for group in split.groups
            ]
            self.products.mark_unavailable(line.product_id for line in lines)
            self.cart_entries.delete_for_cart(cart)
        # Listings changed availability; only invalidate once the writes are durable
        self.listing_cache.bump()
        self.logger.info(
            "Checkout completed",
            buyer_id=buyer_id,
            orders=len(created),
            total_amount=str(split.grand_total),
        )
        return CheckoutDTO(
            orders=OrderMapper.many_to_dto(created), total_amount=split.grand_total
        )

    def list_by_buyer(self, buyer_id: int) -> List[OrderDTO]:
        self.logger.debug("Listing purchases", buyer_id=buyer_id)
        return OrderMapper.many_to_dto(self.orders.list_for_buyer(buyer_id))

    def list_by_seller(self, seller_id: int) -> List[OrderDTO]:
        self.logger.debug("Listing sales", seller_id=seller_id)
        return OrderMapper.many_to_dto(self.orders.list_for_seller(seller_id))

    def _require(self, order_id: int):
        order = self.orders.get_detail(order_id)
        if not order:
            self.logger.info("Order not found", order_id=order_id)
            raise NotFoundError("Order not found", details={"id": str(order_id)})
        return order

    def get_order(self, order_id: int, actor_id: int) -> OrderDTO:
        order = self._require(order_id)
        if actor_id not in (order.buyer_id, order.seller_id):
            self.logger.warning(
                "Order access forbidden", order_id=order_id, actor_id=actor_id
            )
            raise NotAuthorizedError("Not authorized to view this order")
        return OrderMapper.to_dto(order)

    def update_status(self, order_id: int, requester_id: int, status: str) -> OrderDTO:
        """Sellers may set any known status; there is no transition graph."""
        self.logger.info(
            "Updating order status",
            order_id=order_id,
            requester_id=requester_id,
            status=status,
        )
        order = self._require(order_id)
        if order.seller_id != requester_id:
            self.logger.warning(
                "Order status update forbidden",
                order_id=order_id,
                requester_id=requester_id,
            )
            raise NotAuthorizedError("Not authorized to update this order")
        if status not in ORDER_STATUSES:
            raise ValidationError(
                "Unknown order status",
                details={"status": status, "allowed": list(ORDER_STATUSES)},
            )
        self.orders.update_scalar(order, status=status)
        return OrderMapper.to_dto(order)
