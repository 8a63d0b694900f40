from __future__ import annotations

import re
from typing import Any, Dict, List, Optional, Sequence

from catalog_api.errors import AppError
from catalog_api.store import Product

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _text(product: Product, field: str) -> str:
    value = product.get(field)
    return "" if value is None else str(value).lower()


def parse_int_param(value: Optional[Any], default: int) -> int:
    """Leniently read a leading integer from a query value.

    ``"2abc"`` reads as 2. Anything without leading digits, and 0, fall
    back to ``default``. Negative numbers are passed through untouched.
    """
    if value is None:
        return default
    match = _LEADING_INT.match(str(value))
    if not match:
        return default
    return int(match.group(1)) or default


def filter_by_category(items: Sequence[Product], category: str) -> List[Product]:
    wanted = category.lower()
    return [p for p in items if _text(p, "category") == wanted]


def search(items: Sequence[Product], query: Optional[str]) -> List[Product]:
    needle = (query or "").lower()
    if not needle:
        raise AppError.validation("Query parameter 'q' is required.")
    return [
        p for p in items
        if needle in _text(p, "name") or needle in _text(p, "description")
    ]


def paginate(items: Sequence[Product], page: Optional[Any] = None, limit: Optional[Any] = None) -> Dict[str, Any]:
    page = parse_int_param(page, DEFAULT_PAGE)
    limit = parse_int_param(limit, DEFAULT_LIMIT)
    start = (page - 1) * limit
    end = start + limit
    return {
        "totalItems": len(items),
        "currentPage": page,
        "itemsPerPage": limit,
        "data": list(items[start:end]),
    }
