"""
Dependency providers shared by the API routers.
"""

import logging
import secrets
from typing import Optional

from fastapi import Depends, Header, Request
from pydantic import ValidationError
from sqlalchemy.orm import Session

from warehouse_api.config import Settings
from warehouse_api.database import get_db
from warehouse_api.exceptions import AuthConfigError, InvalidRequestError, UnauthorizedError
from warehouse_api.repositories.product_repository import ProductRepository
from warehouse_api.schemas.product import ProductCandidate
from warehouse_api.validators.product import ProductValidator

logger = logging.getLogger(__name__)

API_KEY_HEADER = "X-API-Key"


def get_app_settings(request: Request) -> Settings:
    """Settings the running application was created with."""
    return request.app.state.settings


def get_product_repository(db: Session = Depends(get_db)) -> ProductRepository:
    return ProductRepository(db)


def get_product_validator(request: Request) -> ProductValidator:
    return request.app.state.product_validator


def require_api_key(
    api_key: Optional[str] = Header(default=None, alias=API_KEY_HEADER),
    settings: Settings = Depends(get_app_settings),
) -> None:
    """
    Gate for mutating routes: the X-API-Key header must match API_KEY.

    With no API_KEY configured every request is refused, whatever it sends.
    """
    expected = settings.API_KEY
    if not expected:
        logger.error("API_KEY is not configured; refusing protected request")
        raise AuthConfigError()

    if api_key is None or not secrets.compare_digest(api_key.encode(), expected.encode()):
        logger.warning("Rejected request with missing or invalid API key")
        raise UnauthorizedError()


async def get_product_candidate(
    request: Request,
    _: None = Depends(require_api_key),
) -> ProductCandidate:
    """
    Decode the request body into a ProductCandidate.

    The body is only read once the API key has been accepted, so callers
    without a valid key get 401 (or 500 when no key is configured) whatever
    they send.
    """
    body = await request.body()
    try:
        return ProductCandidate.model_validate_json(body)
    except ValidationError:
        raise InvalidRequestError()
