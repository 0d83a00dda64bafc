from pydantic import BaseModel, Field, ConfigDict
from datetime import datetime

# Range of a signed 64-bit database integer
INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


class ProductCandidate(BaseModel):
    """
    Caller-supplied product payload for create and update.

    Types are enforced strictly (a string price is malformed input), but
    missing fields fall back to zero values so business rules are reported
    by the validator rather than by schema parsing. Integers outside the
    64-bit range are malformed too. Server-assigned fields
    such as id and created_at are ignored if sent.
    """
    model_config = ConfigDict(strict=True, extra="ignore")

    name: str = Field("", description="Product name")
    price: int = Field(0, ge=INT64_MIN, le=INT64_MAX, description="Product price (must be positive)")
    stock: int = Field(0, ge=INT64_MIN, le=INT64_MAX, description="Available stock (must be non-negative)")


class ProductResponse(BaseModel):
    """Schema for a persisted product."""
    id: int
    name: str
    price: int
    stock: int
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ProductListResponse(BaseModel):
    """Schema for a page of products."""
    page: int
    limit: int
    data: list[ProductResponse]


class MessageResponse(BaseModel):
    message: str
