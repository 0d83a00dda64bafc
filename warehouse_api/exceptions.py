"""Error taxonomy for the warehouse API.

Every error carries the HTTP status it maps to and a client-safe message.
Handlers discriminate between them by type, never by message text; the
application's exception handler renders any of them as ``{"detail": message}``.
"""

from typing import Optional


class WarehouseAPIError(Exception):
    """Base exception for all application errors.

    Attributes:
        message: Human-readable error message, safe to show to clients
        status_code: HTTP status code to return
    """

    status_code: int = 500
    default_message: str = "An error occurred"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidRequestError(WarehouseAPIError):
    """Malformed request body or path parameter."""

    status_code = 400
    default_message = "Invalid input"


class ProductValidationError(WarehouseAPIError):
    """A product candidate violates a business rule.

    The message is the reason reported by the validator.
    """

    status_code = 400
    default_message = "Validation failed"


class UnauthorizedError(WarehouseAPIError):
    status_code = 401
    default_message = "Unauthorized: Invalid API Key"


class AuthConfigError(WarehouseAPIError):
    """No API key is configured on the server, so mutations are refused."""

    status_code = 500
    default_message = "Server configuration error"


class ProductNotFoundError(WarehouseAPIError):
    """Exception raised when the requested product doesn't exist."""

    status_code = 404
    default_message = "Product not found"

    def __init__(self, product_id: Optional[int] = None):
        self.product_id = product_id
        if product_id is not None:
            super().__init__(f"Product with ID {product_id} not found")
        else:
            super().__init__()


class StorageError(WarehouseAPIError):
    """Any fault raised by the storage backend.

    The original exception is chained as ``__cause__``; its text is never
    returned to clients.
    """

    status_code = 500
    default_message = "Database error"
