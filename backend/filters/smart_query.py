"""
Building MongoDB regex queries from user search text.

Every catalog search in the service is a case-insensitive regex match
over one or more product fields. The helpers here construct those
filters. User text is escaped first so that characters such as ``+``
or ``(`` in a query ("vitamin b12 (methyl)") are matched literally
instead of being interpreted as regex syntax.
"""

import re
from typing import Any, Dict, Iterable, List, Sequence

__all__ = [
    "TEXT_SEARCH_FIELDS",
    "KEYWORD_SEARCH_FIELDS",
    "regex_condition",
    "build_title_query",
    "build_text_query",
    "build_keyword_query",
]

# Free-text catalog search looks at these fields.
TEXT_SEARCH_FIELDS = ("name", "description", "ingredients")

# Keywords coming out of intent extraction are matched against these.
KEYWORD_SEARCH_FIELDS = ("ingredients", "category", "name", "description")


def regex_condition(text: str) -> Dict[str, Any]:
    """Case-insensitive, literal ``$regex`` condition for ``text``."""
    return {"$regex": re.escape(text), "$options": "i"}


def build_title_query(title: str) -> Dict[str, Any]:
    return {"name": regex_condition(title.strip())}


def build_text_query(q: str) -> Dict[str, Any]:
    """Match ``q`` against any of the free-text search fields."""
    cond = regex_condition(q.strip())
    return {"$or": [{field: cond} for field in TEXT_SEARCH_FIELDS]}


def build_keyword_query(
    keywords: Iterable[str], fields: Sequence[str] = KEYWORD_SEARCH_FIELDS
) -> Dict[str, Any]:
    """Construct an ``$or`` filter matching any keyword in any of ``fields``.

    Args:
        keywords: Keywords extracted from the user's query. Blank entries
            are ignored.
        fields: Product fields to search, in order.

    Returns:
        A MongoDB filter dict, or an empty dict when no usable keyword
        was given. Callers must treat the empty dict as "no search" rather
        than "match everything".
    """
    or_filters: List[Dict[str, Any]] = []
    for keyword in keywords:
        k = (keyword or "").strip()
        if not k:
            continue
        cond = regex_condition(k)
        or_filters.extend({field: cond} for field in fields)
    if not or_filters:
        return {}
    return {"$or": or_filters}
