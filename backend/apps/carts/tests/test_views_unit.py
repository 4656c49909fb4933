import types
import unittest
from decimal import Decimal
from unittest.mock import Mock, patch

from rest_framework.exceptions import ValidationError as DRFValidationError

from apps.carts.dtos import CartDTO, CartItemDTO, CartProductDTO
from apps.carts.views import (
    CartAddView,
    CartClearView,
    CartRemoveView,
    CartUpdateView,
    CartView,
)


class DummyRequest:
    def __init__(self, data=None, query_params=None):
        self.data = data or {}
        self.query_params = query_params or {}
        self.user = types.SimpleNamespace(id=1, is_authenticated=True)


def make_cart(quantity=2):
    product = CartProductDTO(
        id=10,
        title="Lamp",
        price=Decimal("10.00"),
        condition="Good",
        seller_id=2,
        is_available=True,
    )
    item = CartItemDTO(product=product, quantity=quantity, subtotal=Decimal("10.00") * quantity)
    return CartDTO(
        id=5,
        user_id=1,
        items=[item],
        total_items=quantity,
        total_amount=item.subtotal,
    )


class CartViewsUnitTests(unittest.TestCase):
    def test_get_serializes_camel_case(self):
        service = Mock()
        service.get.return_value = make_cart()
        with patch.object(CartView, "service", service):
            response = CartView().get(DummyRequest())
        self.assertEqual(response.data["userId"], 1)
        self.assertEqual(response.data["totalItems"], 2)
        self.assertEqual(response.data["totalAmount"], "20.00")
        self.assertEqual(response.data["items"][0]["product"]["sellerId"], 2)
        service.get.assert_called_once_with(1)

    def test_add_defaults_quantity_to_one(self):
        service = Mock()
        service.add.return_value = make_cart(1)
        with patch.object(CartAddView, "service", service):
            response = CartAddView().post(DummyRequest({"productId": 10}))
        self.assertEqual(response.data["message"], "Product added to cart successfully")
        service.add.assert_called_once_with(1, 10, 1)

    def test_add_rejects_zero_quantity(self):
        service = Mock()
        with patch.object(CartAddView, "service", service):
            with self.assertRaises(DRFValidationError):
                CartAddView().post(DummyRequest({"productId": 10, "quantity": 0}))
        service.add.assert_not_called()

    def test_update_allows_zero_to_remove(self):
        service = Mock()
        service.set_quantity.return_value = make_cart()
        with patch.object(CartUpdateView, "service", service):
            response = CartUpdateView().put(DummyRequest({"productId": 10, "quantity": 0}))
        self.assertEqual(response.data["message"], "Cart updated successfully")
        service.set_quantity.assert_called_once_with(1, 10, 0)

    def test_update_requires_quantity(self):
        with patch.object(CartUpdateView, "service", Mock()):
            with self.assertRaises(DRFValidationError):
                CartUpdateView().put(DummyRequest({"productId": 10}))

    def test_remove_accepts_body_or_query(self):
        service = Mock()
        service.remove.return_value = make_cart()
        with patch.object(CartRemoveView, "service", service):
            CartRemoveView().delete(DummyRequest({"productId": 10}))
            CartRemoveView().delete(DummyRequest(query_params={"productId": "11"}))
        self.assertEqual(
            [c.args for c in service.remove.call_args_list], [(1, 10), (1, 11)]
        )

    def test_clear(self):
        service = Mock()
        with patch.object(CartClearView, "service", service):
            response = CartClearView().delete(DummyRequest())
        self.assertEqual(response.data, {"message": "Cart cleared successfully"})
        service.clear.assert_called_once_with(1)
