"""Filterable product listing."""

from tictac.catalog.products import (
    SAMPLE_PRODUCTS,
    CategoryRow,
    Product,
    ProductRow,
    Row,
    filter_rows,
    matches,
)

__all__ = [
    "SAMPLE_PRODUCTS",
    "CategoryRow",
    "Product",
    "ProductRow",
    "Row",
    "filter_rows",
    "matches",
]
