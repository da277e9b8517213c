"""
AI-assisted product matching pipelines.

The three public functions share one shape:

1. run the relevancy gate (``prompt_analyzer.check_relevancy``) and stop
   early with an empty payload for off-topic queries;
2. build a prompt grounded in the catalog (extracted keywords, or an
   inventory dump);
3. call the model and parse its answer best-effort, falling back to the
   raw text when the answer is not valid JSON.

Model failures never propagate out of this module; the caller always
gets a payload it can return to the client.
"""

import logging
from typing import Any, Dict, List

from filters.heuristic_filter import match_symptoms
from filters.smart_query import build_keyword_query
from formatting.description import PRODUCT_SCHEMA_REFERENCE, to_inventory_block
from services import llm, prompt_analyzer, search

__all__ = [
    "INVENTORY_PAGE_SIZE",
    "SYMPTOM_DISCLAIMER",
    "ai_search",
    "chat",
    "symptom_check",
]

logger = logging.getLogger(__name__)

# How many catalog products are dumped into a recommendation prompt.
INVENTORY_PAGE_SIZE = 100

SYMPTOM_DISCLAIMER = (
    "These suggestions are informational only and are not a medical diagnosis. "
    "Consult a healthcare professional before starting any supplement."
)

_RECOMMENDATION_RULES = """
Rules:
- Only recommend products from the inventory.
- Do not hallucinate.
- Recommend up to 5 products with short reasons.
- If no relevant product found, return [].

Output JSON only:
[
  { "name": "<product name>", "reason": "<reason>" }
]
""".strip()


def ai_search(q: str) -> Dict[str, Any]:
    """Keyword-driven catalog search for a natural-language query."""
    relevancy = prompt_analyzer.check_relevancy(q)
    if not relevancy["relevant"]:
        return {"keywords": [], "products": [], "rawIntent": None, "relevancy": relevancy}

    keywords, raw_intent = prompt_analyzer.extract_keywords(q)
    query = build_keyword_query(keywords)
    products: List[Dict[str, Any]] = search.find_by_filter(query) if query else []
    logger.info("AI search %r: %d keywords, %d products", q, len(keywords), len(products))
    return {
        "keywords": keywords,
        "products": products,
        "rawIntent": raw_intent,
        "relevancy": relevancy,
    }


def _recommend(prompt: str, relevancy: Dict[str, Any]) -> Dict[str, Any]:
    """Call the model with a recommendation prompt and parse its JSON list."""
    try:
        response = llm.ask(prompt)
    except Exception as e:
        logger.error("Recommendation call failed: %s", e)
        return {"recommendations": [], "raw": None, "relevancy": relevancy}

    parsed, cleaned = llm.parse_json_response(response)
    if isinstance(parsed, list):
        return {"recommendations": parsed, "raw": response, "relevancy": relevancy}
    return {"raw": response, "recommendationsText": cleaned, "relevancy": relevancy}


def chat(q: str) -> Dict[str, Any]:
    """Recommend inventory products for a free-form question."""
    relevancy = prompt_analyzer.check_relevancy(q)
    if not relevancy["relevant"]:
        return {"recommendations": [], "raw": None, "relevancy": relevancy}

    inventory = search.find_all(1, INVENTORY_PAGE_SIZE)["items"]
    prompt = f"""
Pre Task Instructions:
Normalize the text if it has any typos or grammatical errors.
You are a healthcare supplement recommendation assistant.

User query: "{q}"

Inventory:
{to_inventory_block(inventory)}

Schema reference:
{PRODUCT_SCHEMA_REFERENCE}

{_RECOMMENDATION_RULES}
    """.strip()

    return _recommend(prompt, relevancy)


def symptom_check(symptoms: str) -> Dict[str, Any]:
    """
    Suggest supplements and matching inventory products for described symptoms.

    The static symptom table narrows the inventory before the model is
    asked; when no symptom in the table matches, the model sees the first
    inventory page instead.
    """
    relevancy = prompt_analyzer.check_relevancy(symptoms)
    if not relevancy["relevant"]:
        return {
            "matchedSymptoms": [],
            "suggestedSupplements": [],
            "products": [],
            "recommendations": [],
            "raw": None,
            "relevancy": relevancy,
        }

    matched, suggested = match_symptoms(symptoms)
    query = build_keyword_query(suggested)
    if query:
        candidates = search.find_by_filter(query)
    else:
        candidates = search.find_all(1, INVENTORY_PAGE_SIZE)["items"]
    logger.info(
        "Symptom check: matched=%s suggested=%d candidates=%d",
        matched, len(suggested), len(candidates),
    )

    prompt = f"""
Pre Task Instructions:
Normalize the text if it has any typos or grammatical errors.
You are a healthcare supplement assistant helping a user find supplements for their symptoms.
Never diagnose; only suggest supplements from the inventory.

User symptoms: "{symptoms}"

Recognised symptoms: {", ".join(matched) or "none"}
Commonly associated supplements: {", ".join(suggested) or "none"}

Inventory:
{to_inventory_block(candidates)}

Schema reference:
{PRODUCT_SCHEMA_REFERENCE}

{_RECOMMENDATION_RULES}
    """.strip()

    result = _recommend(prompt, relevancy)
    result.update(
        {
            "matchedSymptoms": matched,
            "suggestedSupplements": suggested,
            "products": candidates,
            "disclaimer": SYMPTOM_DISCLAIMER,
        }
    )
    return result
