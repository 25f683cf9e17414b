"""Product listing — a stateless derived view over a product list."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Product:
    category: str
    price: str
    stocked: bool
    name: str


@dataclass(frozen=True, slots=True)
class CategoryRow:
    """Heading row emitted before each run of products in one category."""

    category: str


@dataclass(frozen=True, slots=True)
class ProductRow:
    product: Product


Row = CategoryRow | ProductRow


SAMPLE_PRODUCTS: tuple[Product, ...] = (
    Product("Fruits", "$1", True, "Apple"),
    Product("Fruits", "$1", True, "Dragonfruit"),
    Product("Fruits", "$2", False, "Passionfruit"),
    Product("Vegetables", "$2", True, "Spinach"),
    Product("Vegetables", "$4", False, "Pumpkin"),
    Product("Vegetables", "$1", True, "Peas"),
)


def matches(product: Product, filter_text: str = "", in_stock_only: bool = False) -> bool:
    """Case-insensitive name substring match, optionally hiding unstocked items."""
    if filter_text.lower() not in product.name.lower():
        return False
    return product.stocked or not in_stock_only


def filter_rows(
    products: Iterable[Product],
    filter_text: str = "",
    in_stock_only: bool = False,
) -> list[Row]:
    """Table rows for the visible products, in input order.

    A :class:`CategoryRow` precedes every product whose category differs
    from the previous *visible* product's.
    """
    rows: list[Row] = []
    last_category: str | None = None
    for product in products:
        if not matches(product, filter_text, in_stock_only):
            continue
        if product.category != last_category:
            rows.append(CategoryRow(product.category))
            last_category = product.category
        rows.append(ProductRow(product))
    return rows
