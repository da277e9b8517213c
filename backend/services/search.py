"""
Product catalog queries.

All reads and writes against the ``products`` collection live here:
bulk import, title and free-text regex search, filtered lookups for the
AI pipelines, pagination and single-product lookup. Results are returned
as plain JSON-friendly dicts (see ``services.utils.serialize_doc``).
"""

import logging
from typing import Any, Dict, List

from bson import ObjectId
from bson.errors import InvalidId
from werkzeug.exceptions import NotFound

import config
from filters.smart_query import build_text_query, build_title_query
from services.utils import normalize_product, serialize_doc, serialize_docs

__all__ = [
    "SEARCH_LIMIT",
    "create_many",
    "find_by_title",
    "search_by_text",
    "find_by_filter",
    "find_all",
    "find_by_id",
]

logger = logging.getLogger(__name__)

# Cap applied to free-text and filtered searches.
SEARCH_LIMIT = 50


def create_many(items: List[Dict[str, Any]]) -> List[str]:
    """Bulk insert products. Raises ``ValueError`` if any record is invalid."""
    docs = [normalize_product(item) for item in items]
    if not docs:
        return []
    result = config.products_collection.insert_many(docs)
    logger.info("Imported %d products", len(result.inserted_ids))
    return [str(oid) for oid in result.inserted_ids]


def find_by_title(title: str) -> List[Dict[str, Any]]:
    return serialize_docs(config.products_collection.find(build_title_query(title)))


def search_by_text(q: str) -> List[Dict[str, Any]]:
    cursor = config.products_collection.find(build_text_query(q)).limit(SEARCH_LIMIT)
    return serialize_docs(cursor)


def find_by_filter(query: Dict[str, Any]) -> List[Dict[str, Any]]:
    cursor = config.products_collection.find(query).limit(SEARCH_LIMIT)
    return serialize_docs(cursor)


def find_all(page: int = 1, limit: int = 20) -> Dict[str, Any]:
    """Return one page of the catalog together with the collection total."""
    skip = (page - 1) * limit
    # _id order keeps consecutive pages disjoint
    cursor = config.products_collection.find().sort("_id", 1).skip(skip).limit(limit)
    items = serialize_docs(cursor)
    total = config.products_collection.count_documents({})
    return {"items": items, "total": total, "page": page, "limit": limit}


def find_by_id(product_id: str) -> Dict[str, Any]:
    try:
        oid = ObjectId(product_id)
    except (InvalidId, TypeError):
        raise NotFound("Product not found")
    doc = config.products_collection.find_one({"_id": oid})
    if doc is None:
        raise NotFound("Product not found")
    return serialize_doc(doc)
