import re
from typing import NamedTuple, Optional

from warehouse_api.schemas.product import INT64_MIN, INT64_MAX

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100

_INTEGER = re.compile(r"[+-]?[0-9]+")


class PageParams(NamedTuple):
    page: int
    limit: int

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


def _parse_int(raw: Optional[str]) -> Optional[int]:
    if raw is None or not _INTEGER.fullmatch(raw):
        return None
    value = int(raw)
    if value < INT64_MIN or value > INT64_MAX:
        return None
    return value


def parse_page_params(page: Optional[str], limit: Optional[str]) -> PageParams:
    """
    Turn raw ``page``/``limit`` query values into usable pagination.

    Anything unusable falls back to the default instead of being clamped:
    ``limit=500`` means 10 rows, not 100.
    """
    page_value = _parse_int(page)
    if page_value is None or page_value < 1:
        page_value = DEFAULT_PAGE

    limit_value = _parse_int(limit)
    if limit_value is None or limit_value < 1 or limit_value > MAX_LIMIT:
        limit_value = DEFAULT_LIMIT

    return PageParams(page=page_value, limit=limit_value)
