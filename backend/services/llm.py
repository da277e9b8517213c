"""
Thin access layer over the configured Gemini model.

``ask`` sends a single prompt and returns the response text. The
parsing helpers clean up the usual model output noise (markdown code
fences, ``json`` labels) before attempting ``json.loads``. Parsing never
raises: callers get ``None`` back together with the cleaned text so
they can return it as a raw fallback.
"""

import json
import logging
import re
from typing import Any, Optional, Tuple

import config

__all__ = [
    "ModelUnavailableError",
    "ask",
    "strip_code_fences",
    "parse_json_response",
]

logger = logging.getLogger(__name__)

_FENCE_JSON_RE = re.compile(r"```json", re.IGNORECASE)


class ModelUnavailableError(RuntimeError):
    """Raised when no generative model is configured."""


def ask(prompt: str) -> str:
    """Send ``prompt`` to the model and return the stripped response text."""
    model = config._model
    if model is None:
        raise ModelUnavailableError("Gemini model is not configured")
    response = model.generate_content(prompt)
    return (response.text or "").strip()


def strip_code_fences(text: str) -> str:
    cleaned = _FENCE_JSON_RE.sub("", text or "")
    return cleaned.replace("```", "").strip()


def parse_json_response(text: str) -> Tuple[Optional[Any], str]:
    """
    Best-effort JSON parse of a model response.

    Returns ``(parsed, cleaned)``; ``parsed`` is ``None`` when the cleaned
    text is not valid JSON.
    """
    cleaned = strip_code_fences(text)
    try:
        return json.loads(cleaned), cleaned
    except ValueError as e:
        logger.warning("Could not parse model output as JSON: %s", e)
        return None, cleaned
