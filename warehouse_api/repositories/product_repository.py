from sqlalchemy.orm import Session
from sqlalchemy import update, delete
from sqlalchemy.exc import SQLAlchemyError
from typing import List
import logging

from warehouse_api.models.product import Product
from warehouse_api.schemas.product import ProductCandidate, INT64_MAX
from warehouse_api.exceptions import ProductNotFoundError, StorageError

logger = logging.getLogger(__name__)


class ProductRepository:
    """
    Data access for the products table.

    The repository is the only component that writes product rows. It never
    validates candidates (callers do), and it converts backend failures into
    StorageError so the HTTP layer can tell them apart from ProductNotFoundError.

    Each instance works on one request-scoped Session; the session (and its
    pooled connection) is released by whoever created it.
    """

    def __init__(self, db: Session):
        self.db = db

    def list_page(self, limit: int, offset: int) -> List[Product]:
        """
        Get one page of products, newest first.

        Args:
            limit: Maximum number of rows to return
            offset: Number of rows to skip

        Returns:
            List of products (empty when nothing matches)
        """
        # No row can sit past the largest offset the database accepts
        if offset > INT64_MAX:
            return []

        try:
            products = (
                self.db.query(Product)
                .order_by(Product.id.desc())
                .offset(offset)
                .limit(limit)
                .all()
            )
        except SQLAlchemyError as e:
            self._fail("listing products", e)
        return list(products)

    def create(self, candidate: ProductCandidate) -> Product:
        """
        Insert a new product. The database assigns id and created_at.

        Args:
            candidate: Already validated product payload

        Returns:
            The persisted product including its assigned fields
        """
        product = Product(
            name=candidate.name,
            price=candidate.price,
            stock=candidate.stock
        )
        try:
            self.db.add(product)
            self.db.commit()
            self.db.refresh(product)
        except SQLAlchemyError as e:
            self._fail("creating product", e)

        logger.info(f"Product #{product.id} created")
        return product

    def get_by_id(self, product_id: int) -> Product:
        """
        Get a product by ID.

        Raises:
            ProductNotFoundError: If no row has that ID
            StorageError: On any backend failure
        """
        try:
            product = self.db.query(Product).filter(Product.id == product_id).first()
        except SQLAlchemyError as e:
            self._fail(f"loading product #{product_id}", e)

        if product is None:
            raise ProductNotFoundError(product_id)
        return product

    def update(self, product_id: int, candidate: ProductCandidate) -> None:
        """
        Overwrite name, price and stock of an existing product.

        Runs a single UPDATE; if it matches no row the product doesn't exist.
        created_at is never touched.

        Raises:
            ProductNotFoundError: If no row has that ID
            StorageError: On any backend failure
        """
        statement = (
            update(Product)
            .where(Product.id == product_id)
            .values(name=candidate.name, price=candidate.price, stock=candidate.stock)
        )
        try:
            result = self.db.execute(statement)
            if result.rowcount == 0:
                self.db.rollback()
                raise ProductNotFoundError(product_id)
            self.db.commit()
        except SQLAlchemyError as e:
            self._fail(f"updating product #{product_id}", e)

        logger.info(f"Product #{product_id} updated")

    def delete(self, product_id: int) -> None:
        """
        Delete a product.

        Raises:
            ProductNotFoundError: If no row has that ID
            StorageError: On any backend failure
        """
        statement = delete(Product).where(Product.id == product_id)
        try:
            result = self.db.execute(statement)
            if result.rowcount == 0:
                self.db.rollback()
                raise ProductNotFoundError(product_id)
            self.db.commit()
        except SQLAlchemyError as e:
            self._fail(f"deleting product #{product_id}", e)

        logger.info(f"Product #{product_id} deleted")

    def _fail(self, action: str, error: SQLAlchemyError):
        """Roll back, log the backend error and raise StorageError in its place."""
        self.db.rollback()
        logger.error(f"Database error while {action}: {error}")
        raise StorageError() from error
