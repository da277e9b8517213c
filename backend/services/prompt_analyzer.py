"""
Prompt analysis: relevancy gate and intent extraction.

``check_relevancy`` asks the model whether a user's query is about
healthcare supplements at all; every AI endpoint runs it first and stops
early for off-topic queries. ``extract_keywords`` turns a relevant query
into a short list of product-attribute keywords (ingredients, health
goals, product types) that the catalog search can match.

When the model is unavailable or returns something unusable, both
functions degrade to harmless defaults instead of raising.
"""

import logging
import re
from typing import Any, Dict, List, Optional, Tuple

from services import llm

__all__ = ["RELEVANCY_FALLBACK_REASON", "check_relevancy", "extract_keywords", "split_keywords"]

logger = logging.getLogger(__name__)

RELEVANCY_FALLBACK_REASON = "Could not verify query relevance"

_KEYWORD_SPLIT_RE = re.compile(r"[,;]+")

_TRUTHY_STRINGS = ("true", "yes")


def _as_bool(value: Any) -> bool:
    """Model answers sometimes quote booleans; "true" and "yes" count as true."""
    if isinstance(value, str):
        return value.strip().lower() in _TRUTHY_STRINGS
    return value is True


def check_relevancy(q: str) -> Dict[str, Any]:
    """
    Classify whether ``q`` relates to healthcare supplements, vitamins or
    products in the inventory.

    Returns ``{"relevant": bool, "reason": str}``. Model errors, malformed
    JSON and non-object answers all yield ``relevant=False`` with the fixed
    "could not verify" reason.
    """
    prompt_template = f"""
Pre Task Instructions:
Normalize the text if it has any typos or grammatical errors.
Task: Check if the following user query is related to healthcare supplements, vitamins, or products in the inventory.
Query: "{q}"

Respond only in strict JSON:
{{
  "relevant": true|false,
  "reason": "<short reason why>"
}}
    """.strip()

    fallback = {"relevant": False, "reason": RELEVANCY_FALLBACK_REASON}
    try:
        response = llm.ask(prompt_template)
    except Exception as e:
        logger.error("Relevancy check failed: %s", e)
        return fallback

    result, _ = llm.parse_json_response(response)
    if not isinstance(result, dict):
        logger.warning("Relevancy check returned no usable JSON object")
        return fallback

    relevancy = {
        "relevant": _as_bool(result.get("relevant")),
        "reason": str(result.get("reason") or ""),
    }
    logger.debug("Relevancy for %r: %s", q, relevancy)
    return relevancy


def split_keywords(text: str) -> List[str]:
    """Split a comma/semicolon separated model answer into clean keywords."""
    flat = (text or "").replace("\n", " ").strip()
    return [k.strip() for k in _KEYWORD_SPLIT_RE.split(flat) if k.strip()]


def extract_keywords(q: str) -> Tuple[List[str], Optional[str]]:
    """
    Extract the user's intent as product-attribute keywords.

    Returns ``(keywords, raw_response)``. On model failure the keyword
    list is empty and ``raw_response`` is ``None``.
    """
    prompt_template = f"""
Pre Task Instructions:
Normalize the text if it has any typos or grammatical errors.

Role:
You are an intent extraction engine for a healthcare product search system.

User query: "{q}"

Task Context:
Extract exact concise intent as comma-separated keywords (e.g., "calcium, vitamin D, joint"). If a user entered joints health issues then the intent should be exactly supplements for joints, not for health.
Task:
 - Identify the user's exact intent and extract the most relevant keywords.
 - Keywords should strictly match product-related attributes such as ingredients (e.g., "calcium", "vitamin D"), health goals (e.g., "joint support", "immune boost"), or product type (e.g., "protein powder", "multivitamin").
 - Do not add unrelated words or explanations.
 - Return keywords only, in a simple comma-separated list (no sentences, no extra text).
 - Only output keywords.
    """.strip()

    try:
        response = llm.ask(prompt_template)
    except Exception as e:
        logger.error("Keyword extraction failed: %s", e)
        return [], None

    keywords = split_keywords(response)
    logger.info("Extracted keywords for %r: %s", q, keywords)
    return keywords, response
