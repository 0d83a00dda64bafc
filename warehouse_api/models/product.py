from sqlalchemy import Column, Integer, String, DateTime, CheckConstraint
from sqlalchemy.sql import func

from warehouse_api.database import Base


class Product(Base):
    """
    Product model representing items held in the warehouse.

    Attributes:
        id: Unique identifier, assigned by the database
        name: Product name (must be non-empty)
        price: Product price as an integer amount (must be positive)
        stock: Available quantity (must be non-negative)
        created_at: Timestamp when product was created, assigned by the database
    """
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    price = Column(Integer, nullable=False)
    stock = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    # Database-level constraints to ensure data integrity
    __table_args__ = (
        CheckConstraint("name <> ''", name="check_name_not_empty"),
        CheckConstraint("price > 0", name="check_price_positive"),
        CheckConstraint("stock >= 0", name="check_stock_non_negative"),
    )

    def __repr__(self):
        return f"<Product(id={self.id}, name='{self.name}', stock={self.stock})>"
