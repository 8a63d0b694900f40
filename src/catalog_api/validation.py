from __future__ import annotations

import math
from typing import Any

from catalog_api.errors import AppError
from catalog_api.store import Product


def _is_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return isinstance(value, int) or math.isfinite(value)


def validate_product_fields(fields: Product) -> None:
    """Check the fields a caller chose to send; absent ones are not checked."""
    if "name" in fields:
        name = fields["name"]
        if not isinstance(name, str) or name == "":
            raise AppError.validation("Product name must be a non-empty string.")
    if "price" in fields and not _is_number(fields["price"]):
        raise AppError.validation("Product price must be a number.")


def validate_new_product(fields: Product) -> None:
    if fields.get("name") in (None, "") or fields.get("price") is None:
        raise AppError.validation("Product name and price are required.")
    validate_product_fields(fields)
