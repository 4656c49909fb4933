import logging
import unittest

from apps.common.logger import AppLogger, get_logger


class AppLoggerTests(unittest.TestCase):
    def test_bind_merges_context_without_mutating_parent(self):
        base = get_logger("apps.test").bind(component="orders")
        child = base.bind(service="OrderService")
        self.assertEqual(base.context, {"component": "orders"})
        self.assertEqual(
            child.context, {"component": "orders", "service": "OrderService"}
        )

    def test_format_appends_key_value_pairs(self):
        line = AppLogger._format("Order created", {"order_id": 7, "total": "25.00"})
        self.assertEqual(line, "Order created | order_id=7 total=25.00")

    def test_non_scalar_values_use_repr(self):
        line = AppLogger._format("Grouped", {"sellers": [1, 2]})
        self.assertEqual(line, "Grouped | sellers=[1, 2]")

    def test_emits_record_with_bound_context(self):
        log = get_logger("apps.test.emit").bind(component="carts")
        with self.assertLogs("apps.test.emit", level=logging.INFO) as captured:
            log.info("Cart cleared", user_id=3)
        self.assertEqual(
            captured.records[0].getMessage(), "Cart cleared | component=carts user_id=3"
        )
