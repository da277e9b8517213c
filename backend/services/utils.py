"""
Helper functions for parsing request values and normalising documents.

These functions encapsulate common operations such as safely parsing
numbers from query strings, preparing imported product records for
storage and turning MongoDB documents into JSON-friendly dicts. They
are kept in a separate module so the route handlers and services stay
focused on the business logic.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Optional

from bson import ObjectId

__all__ = [
    "_parse_int_safe",
    "parse_positive_int",
    "serialize_doc",
    "serialize_docs",
    "normalize_product",
    "PRODUCT_FIELDS",
]

# Fields stored for a product. Anything else in an imported record is dropped.
PRODUCT_FIELDS = (
    "name",
    "category",
    "brand",
    "description",
    "price",
    "ingredients",
    "dosage",
)


def _parse_int_safe(x: Any) -> Optional[int]:
    """Parse an integer from a query-string value, or ``None`` if it is not one."""
    if x is None:
        return None
    if isinstance(x, bool):
        return None
    if isinstance(x, int):
        return x
    s = str(x).strip()
    if s.startswith(("-", "+")):
        sign, digits = s[0], s[1:]
    else:
        sign, digits = "", s
    if not (digits.isascii() and digits.isdecimal()):
        return None
    return int(sign + digits)


def parse_positive_int(x: Any, default: int, maximum: Optional[int] = None) -> int:
    """
    Parse a page number or page size.

    Missing, malformed and non-positive values fall back to ``default``;
    values above ``maximum`` are clamped to it.
    """
    value = _parse_int_safe(x)
    if value is None or value < 1:
        value = default
    if maximum is not None and value > maximum:
        value = maximum
    return value


def serialize_doc(doc: Dict[str, Any]) -> Dict[str, Any]:
    """Return a copy of ``doc`` with ObjectIds and datetimes rendered as strings."""
    out: Dict[str, Any] = {}
    for key, value in doc.items():
        if isinstance(value, ObjectId):
            out[key] = str(value)
        elif isinstance(value, datetime):
            out[key] = value.isoformat()
        else:
            out[key] = value
    return out


def serialize_docs(docs: Iterable[Dict[str, Any]]) -> List[Dict[str, Any]]:
    return [serialize_doc(d) for d in docs]


def normalize_product(item: Dict[str, Any]) -> Dict[str, Any]:
    """
    Prepare one imported product record for insertion.

    The legacy ``dossage`` key is accepted as ``dosage``. Unknown keys are
    dropped, values are stored as trimmed strings, and insert timestamps
    are added. Raises ``ValueError`` when the record has no name.
    """
    if not isinstance(item, dict):
        raise ValueError("product must be an object")
    data = dict(item)
    if "dosage" not in data and "dossage" in data:
        data["dosage"] = data.pop("dossage")

    name = str(data.get("name") or "").strip()
    if not name:
        raise ValueError("product name is required")

    out: Dict[str, Any] = {}
    for field in PRODUCT_FIELDS:
        value = data.get(field)
        if value is None:
            continue
        out[field] = str(value).strip()
    out["name"] = name

    now = datetime.now(timezone.utc)
    out["createdAt"] = now
    out["updatedAt"] = now
    return out
