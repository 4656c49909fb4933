"""Domain error hierarchy shared by every service layer.

Services raise these; the API exception handler turns them into the
structured error envelope, so views never need to catch them.
"""
from typing import Any, Optional


class DomainError(Exception):
    code = "SERVER_ERROR"
    status_code = 500
    default_message = "Something went wrong"

    def __init__(self, message: Optional[str] = None, *, details: Optional[Any] = None):
        self.message = message or self.default_message
        self.details = details
        super().__init__(self.message)


class ValidationError(DomainError):
    """Raised when input is missing or malformed."""

    code = "VALIDATION_ERROR"
    status_code = 400
    default_message = "Validation failed"


class NotFoundError(DomainError):
    code = "NOT_FOUND"
    status_code = 404
    default_message = "Resource not found"


class NotAuthorizedError(DomainError):
    """Raised when the actor is known but may not touch the resource."""

    code = "FORBIDDEN"
    status_code = 403
    default_message = "You do not have permission to perform this action"


class EmptyCartError(DomainError):
    code = "EMPTY_CART"
    status_code = 400
    default_message = "Cart is empty"


class SelfPurchaseError(DomainError):
    code = "SELF_PURCHASE"
    status_code = 400
    default_message = "Cannot add your own product to cart"


class ProductUnavailableError(DomainError):
    code = "PRODUCT_UNAVAILABLE"
    status_code = 400
    default_message = "Product is not available"


class UnexpectedError(DomainError):
    """Storage or infrastructure failure. The message is never sent to clients."""


__all__ = [
    "DomainError",
    "ValidationError",
    "NotFoundError",
    "NotAuthorizedError",
    "EmptyCartError",
    "SelfPurchaseError",
    "ProductUnavailableError",
    "UnexpectedError",
]
