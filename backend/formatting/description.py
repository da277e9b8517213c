"""
Inventory formatting for model prompts.

This module provides the text blocks the recommendation prompts embed:

* ``to_inventory_entry``: renders one product as a short labelled block
  (name, brand, category, description, ingredients, dosage, price).

* ``to_inventory_block``: joins several entries, or returns a fixed
  placeholder when the inventory is empty so the model is told
  explicitly that nothing is available.

* ``PRODUCT_SCHEMA_REFERENCE``: the product field list shown to the
  model next to the inventory.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable

__all__ = [
    "EMPTY_INVENTORY_TEXT",
    "PRODUCT_SCHEMA_REFERENCE",
    "to_inventory_entry",
    "to_inventory_block",
]

EMPTY_INVENTORY_TEXT = "No products found in inventory."

PRODUCT_SCHEMA_REFERENCE = """
Product Schema:
{
  "name": "string",
  "category": "string",
  "brand": "string",
  "description": "string",
  "price": "string",
  "ingredients": "string",
  "dosage": "string"
}
""".strip()


def to_inventory_entry(product: Dict[str, Any]) -> str:
    """
    Render a product document as a labelled text block.

    Missing fields are rendered as empty values rather than dropped so
    that every entry has the same shape.

    Args:
        product: A product document as returned by ``services.search``.

    Returns:
        A multi-line string, one ``Label: value`` pair per line.
    """
    def field(key: str) -> str:
        value = product.get(key)
        return "" if value is None else str(value)

    return (
        f"Name: {field('name')}\n"
        f"Brand: {field('brand')}\n"
        f"Category: {field('category')}\n"
        f"Description: {field('description')}\n"
        f"Ingredients: {field('ingredients')}\n"
        f"Dosage: {field('dosage')}\n"
        f"Price: {field('price')}"
    )


def to_inventory_block(products: Iterable[Dict[str, Any]]) -> str:
    entries = [to_inventory_entry(p) for p in products]
    return "\n\n".join(entries) if entries else EMPTY_INVENTORY_TEXT
