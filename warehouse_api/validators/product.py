from warehouse_api.exceptions import ProductValidationError
from warehouse_api.schemas.product import ProductCandidate


class ProductValidator:
    """
    Business rules a product candidate must satisfy before it is persisted.

    Rules are checked in order and the first failure wins:
    name, then price, then stock.
    """

    NAME_REQUIRED = "name required"
    PRICE_NOT_POSITIVE = "price must be greater than zero"
    STOCK_NEGATIVE = "stock cannot be negative"

    def validate(self, candidate: ProductCandidate) -> None:
        """
        Raise ProductValidationError with the first violated rule's reason.

        Args:
            candidate: Product payload supplied by the caller
        """
        if not candidate.name:
            raise ProductValidationError(self.NAME_REQUIRED)
        if candidate.price <= 0:
            raise ProductValidationError(self.PRICE_NOT_POSITIVE)
        if candidate.stock < 0:
            raise ProductValidationError(self.STOCK_NEGATIVE)
