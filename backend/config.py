"""
Configuration and shared resources for the supplement catalog service.

This module centralises the setup of environment variables, database
connections and large language model (LLM) configuration. Values are
read from the process environment, optionally seeded from a ``.env``
file. If ``GEMINI_API_KEY`` is provided, the Gemini API will be
configured. Otherwise ``_model`` stays ``None`` and every AI pipeline
falls back to its harmless default payload.
"""

import logging
import os
from typing import Optional

from dotenv import load_dotenv

import google.generativeai as genai  # type: ignore
from pymongo import MongoClient
import certifi

load_dotenv()

logger = logging.getLogger(__name__)

__all__ = [
    "MONGODB_URI",
    "MONGODB_DB_NAME",
    "GEMINI_API_KEY",
    "GEMINI_MODEL",
    "OPENAI_API_KEY",
    "JWT_SECRET",
    "JWT_EXPIRES_SECONDS",
    "UPLOAD_DIR",
    "MAX_UPLOAD_MB",
    "PORT",
    "CORS_ORIGIN",
    "LOG_LEVEL",
    "mongo_client",
    "db",
    "products_collection",
    "users_collection",
    "_model",
]

# ---------------------------------------------------------------------------
# Configuration

MONGODB_URI: str = os.environ.get("MONGODB_URI", "mongodb://localhost:27017")
MONGODB_DB_NAME: str = os.environ.get("MONGODB_DB_NAME", "supplements")

GEMINI_API_KEY: str = os.environ.get("GEMINI_API_KEY", "")
GEMINI_MODEL: str = os.environ.get("GEMINI_MODEL", "gemini-2.5-flash-lite")

OPENAI_API_KEY: str = os.environ.get("OPENAI_API_KEY", "")

JWT_SECRET: str = os.environ.get("JWT_SECRET", "change-me")
JWT_EXPIRES_SECONDS: int = int(os.environ.get("JWT_EXPIRES_SECONDS", 86400))

UPLOAD_DIR: str = os.environ.get("UPLOAD_DIR", "/tmp/uploads")
MAX_UPLOAD_MB: int = int(os.environ.get("MAX_UPLOAD_MB", 10))

PORT: int = int(os.environ.get("PORT", 4000))
CORS_ORIGIN: str = os.environ.get("CORS_ORIGIN", "*")
LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO")

# Shared MongoDB handles. The client is lazy, so nothing connects until
# the first query; multiple requests reuse the same connection pool.
# Atlas (SRV) clusters need an explicit CA bundle.
if MONGODB_URI.startswith("mongodb+srv://"):
    mongo_client: MongoClient = MongoClient(MONGODB_URI, tlsCAFile=certifi.where())
else:
    mongo_client = MongoClient(MONGODB_URI)
db = mongo_client[MONGODB_DB_NAME]
products_collection = db["products"]
users_collection = db["users"]

# Initialise the Gemini model if an API key is provided.
if GEMINI_API_KEY:
    genai.configure(api_key=GEMINI_API_KEY)
    generation_config = {
        "temperature": 0.2,
        "top_p": 1,
        "top_k": 1,
        "max_output_tokens": 2048,
    }
    _model: Optional[genai.GenerativeModel] = genai.GenerativeModel(
        model_name=GEMINI_MODEL, generation_config=generation_config
    )
else:
    _model = None
    logger.warning("GEMINI_API_KEY not set - AI pipelines will return fallback payloads")
