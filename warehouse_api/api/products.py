from fastapi import APIRouter, Depends, Path, Query, status
from typing import Optional

from warehouse_api.api.dependencies import (
    get_product_candidate,
    get_product_repository,
    get_product_validator,
    require_api_key,
)
from warehouse_api.api.pagination import parse_page_params
from warehouse_api.exceptions import StorageError
from warehouse_api.repositories.product_repository import ProductRepository
from warehouse_api.schemas.product import (
    INT64_MIN,
    INT64_MAX,
    ProductCandidate,
    ProductResponse,
    ProductListResponse,
    MessageResponse,
)
from warehouse_api.validators.product import ProductValidator

# Reads are open; every mutation goes through the API key gate.
# Domain errors raised below are rendered by the application's error handler.
public_router = APIRouter(prefix="/products", tags=["Products"])
protected_router = APIRouter(
    prefix="/products",
    tags=["Products"],
    dependencies=[Depends(require_api_key)],
)

CANDIDATE_BODY = {
    "requestBody": {
        "required": True,
        "content": {"application/json": {"schema": ProductCandidate.model_json_schema()}},
    }
}


def product_id_path():
    return Path(..., ge=INT64_MIN, le=INT64_MAX, description="Product ID")


@public_router.get(
    "",
    response_model=ProductListResponse,
    summary="List products",
    description="Get a page of products, newest first."
)
def list_products(
    page: Optional[str] = Query(None, description="Page number, defaults to 1"),
    limit: Optional[str] = Query(None, description="Items per page (1-100), defaults to 10"),
    repository: ProductRepository = Depends(get_product_repository)
):
    """
    Get paginated list of products.

    Invalid or out-of-range `page` / `limit` values fall back to their
    defaults rather than failing the request.
    """
    params = parse_page_params(page, limit)
    products = repository.list_page(params.limit, params.offset)

    return ProductListResponse(
        page=params.page,
        limit=params.limit,
        data=[ProductResponse.model_validate(p) for p in products]
    )


@public_router.get(
    "/{product_id}",
    response_model=ProductResponse,
    summary="Get product by ID"
)
def get_product(
    product_id: int = product_id_path(),
    repository: ProductRepository = Depends(get_product_repository)
):
    return repository.get_by_id(product_id)


@protected_router.post(
    "",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new product",
    description="Create a new product with name, price, and initial stock. Requires X-API-Key.",
    openapi_extra=CANDIDATE_BODY
)
def create_product(
    candidate: ProductCandidate = Depends(get_product_candidate),
    repository: ProductRepository = Depends(get_product_repository),
    validator: ProductValidator = Depends(get_product_validator)
):
    """
    Create a new product.

    - **name**: Product name (required, non-empty)
    - **price**: Product price, must be greater than zero
    - **stock**: Initial stock quantity, must not be negative
    """
    validator.validate(candidate)

    try:
        return repository.create(candidate)
    except StorageError as e:
        raise StorageError("Failed to save product") from e


@protected_router.put(
    "/{product_id}",
    response_model=MessageResponse,
    summary="Update a product",
    description="Replace name, price and stock of a product. Requires X-API-Key.",
    openapi_extra=CANDIDATE_BODY
)
def update_product(
    product_id: int = product_id_path(),
    candidate: ProductCandidate = Depends(get_product_candidate),
    repository: ProductRepository = Depends(get_product_repository),
    validator: ProductValidator = Depends(get_product_validator)
):
    """
    Update a product.

    All three fields are written; the response only confirms the update.
    """
    validator.validate(candidate)
    repository.update(product_id, candidate)

    return MessageResponse(message="Product updated successfully")


@protected_router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a product",
    description="Delete a product by ID. Requires X-API-Key."
)
def delete_product(
    product_id: int = product_id_path(),
    repository: ProductRepository = Depends(get_product_repository)
):
    """Delete a product."""
    repository.delete(product_id)
    return None
