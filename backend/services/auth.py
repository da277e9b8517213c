"""
Signup, login and bearer-token verification.

Tokens are HS256 JWTs signed with ``config.JWT_SECRET`` and carrying the
user id (``sub``) and email. ``require_auth`` protects a Flask view: it
rejects requests without a valid ``Authorization: Bearer <token>``
header and exposes the decoded payload as ``flask.g.user``.
"""

import logging
from datetime import datetime, timedelta, timezone
from functools import wraps
from typing import Any, Dict, Optional

import jwt
from flask import g, request
from werkzeug.exceptions import Unauthorized

import config
from services import users

__all__ = ["signup", "login", "issue_token", "decode_token", "require_auth"]

logger = logging.getLogger(__name__)

JWT_ALGORITHM = "HS256"


def issue_token(user: Dict[str, Any]) -> str:
    now = datetime.now(timezone.utc)
    payload = {
        "sub": str(user["_id"]),
        "email": user["email"],
        "iat": now,
        "exp": now + timedelta(seconds=config.JWT_EXPIRES_SECONDS),
    }
    return jwt.encode(payload, config.JWT_SECRET, algorithm=JWT_ALGORITHM)


def decode_token(token: str) -> Dict[str, Any]:
    """Verify ``token`` and return its payload; raise ``Unauthorized`` otherwise."""
    try:
        payload = jwt.decode(token, config.JWT_SECRET, algorithms=[JWT_ALGORITHM])
    except jwt.PyJWTError as e:
        logger.warning("JWT verification failed: %s", e)
        raise Unauthorized("Invalid or expired token")
    if not payload.get("sub"):
        raise Unauthorized("Invalid token: missing user id")
    return payload


def signup(email: str, password: str, name: Optional[str] = None) -> Dict[str, str]:
    if users.find_by_email(email):
        raise Unauthorized("User already exists")
    user = users.create(email, password, name)
    logger.info("Created user %s", user["_id"])
    return {"access_token": issue_token(user)}


def login(email: str, password: str) -> Dict[str, str]:
    user = users.find_by_email(email)
    if not user:
        raise Unauthorized("Invalid credentials")
    if not users.validate_password(password, user["password"]):
        raise Unauthorized("Invalid credentials")
    return {"access_token": issue_token(user)}


def _bearer_token() -> str:
    header = request.headers.get("Authorization", "")
    if not header:
        raise Unauthorized("Missing authorization header")
    scheme, _, token = header.partition(" ")
    if scheme != "Bearer" or not token.strip():
        raise Unauthorized("Invalid authorization format. Use: Bearer <token>")
    return token.strip()


def require_auth(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        g.user = decode_token(_bearer_token())
        return view(*args, **kwargs)

    return wrapper
