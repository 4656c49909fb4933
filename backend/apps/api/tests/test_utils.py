import unittest

from rest_framework import status

from apps.api.utils import error_response


class ErrorResponseTests(unittest.TestCase):
    def test_default_status_mapping_and_details(self):
        resp = error_response("NOT_FOUND", "Order not found", {"id": "9"})
        self.assertEqual(resp.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(resp.data["error"]["code"], "NOT_FOUND")
        self.assertEqual(resp.data["error"]["status"], status.HTTP_404_NOT_FOUND)
        self.assertEqual(resp.data["error"]["details"], {"id": "9"})

    def test_domain_codes_map_to_bad_request(self):
        for code in ("EMPTY_CART", "SELF_PURCHASE", "PRODUCT_UNAVAILABLE"):
            resp = error_response(code, "rejected")
            self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST, code)

    def test_unknown_code_defaults_to_bad_request(self):
        resp = error_response("weird_code", "oops")
        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(resp.data["error"]["code"], "WEIRD_CODE")

    def test_custom_status_override(self):
        resp = error_response("UNKNOWN", "oops", http_status=status.HTTP_202_ACCEPTED)
        self.assertEqual(resp.status_code, status.HTTP_202_ACCEPTED)
        self.assertNotIn("details", resp.data["error"])

    def test_blank_message_rejected(self):
        with self.assertRaises(ValueError):
            error_response("NOT_FOUND", "  ")
