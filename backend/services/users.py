"""User storage and password checks."""

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from bson import ObjectId
from bson.errors import InvalidId
from werkzeug.security import check_password_hash, generate_password_hash

import config
from services.utils import serialize_doc

__all__ = ["create", "find_by_email", "find_by_id", "validate_password", "public_view"]


def create(email: str, password: str, name: Optional[str] = None) -> Dict[str, Any]:
    doc: Dict[str, Any] = {
        "email": email,
        "password": generate_password_hash(password),
        "createdAt": datetime.now(timezone.utc),
    }
    if name:
        doc["name"] = name
    result = config.users_collection.insert_one(doc)
    doc["_id"] = result.inserted_id
    return doc


def find_by_email(email: str) -> Optional[Dict[str, Any]]:
    return config.users_collection.find_one({"email": email})


def find_by_id(user_id: str) -> Optional[Dict[str, Any]]:
    try:
        oid = ObjectId(user_id)
    except (InvalidId, TypeError):
        return None
    return config.users_collection.find_one({"_id": oid})


def validate_password(plain: str, hashed: str) -> bool:
    return check_password_hash(hashed, plain)


def public_view(user: Dict[str, Any]) -> Dict[str, Any]:
    """The user document as it may be shown to clients (no password hash)."""
    return serialize_doc({k: v for k, v in user.items() if k != "password"})
