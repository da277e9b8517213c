from typing import Dict, List, Tuple

from formatting.mappings import SYMPTOM_SUPPLEMENTS, SYMPTOM_SYNONYMS

__all__ = ["match_symptoms"]


def match_symptoms(
    text: str,
    table: Dict[str, List[str]] = SYMPTOM_SUPPLEMENTS,
    synonyms: Dict[str, List[str]] = SYMPTOM_SYNONYMS,
) -> Tuple[List[str], List[str]]:
    """
    Heuristic (non-LLM) symptom lookup.

    - Stage 1: lower-case the text
    - Stage 2: a symptom matches when its key or any synonym is a substring
    - Stage 3: suggested supplements are the union over matched symptoms,
      de-duplicated case-insensitively, in table order

    Returns ``(matched_symptoms, suggested_supplements)``.
    """
    t = (text or "").lower()
    if not t.strip():
        return [], []

    matched: List[str] = []
    for symptom in table:
        phrases = [symptom] + list(synonyms.get(symptom, []))
        if any(p in t for p in phrases):
            matched.append(symptom)

    suggested: List[str] = []
    seen = set()
    for symptom in matched:
        for supplement in table[symptom]:
            key = supplement.lower()
            if key not in seen:
                seen.add(key)
                suggested.append(supplement)
    return matched, suggested
