"""
Flask application for the supplement catalog service.

This module sets up the HTTP endpoints for authentication (`/auth`),
the product catalog and its AI-assisted search, chat and symptom
checker (`/products`), and speech transcription (`/speech`). Route
handlers only validate input and delegate to the ``services`` modules;
every HTTP error is rendered as a JSON body.
"""

import json
import logging
from typing import Any, Dict, List

import click
from flask import Flask, g, jsonify, request
from flask_cors import CORS
from werkzeug.exceptions import BadRequest, HTTPException, NotFound

import config
from services import auth, recommender, search, speech, users
from services.utils import parse_positive_int

logging.basicConfig(
    level=getattr(logging, config.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100
# Keeps the skip value well inside a signed 64-bit BSON int.
MAX_PAGE = 10 ** 9

app = Flask(__name__)
app.config["MAX_CONTENT_LENGTH"] = config.MAX_UPLOAD_MB * 1024 * 1024
CORS(app, origins=config.CORS_ORIGIN)


@app.errorhandler(HTTPException)
def handle_http_error(e: HTTPException):
    return jsonify({"error": e.description, "status": e.code}), e.code


def _json_body() -> Dict[str, Any]:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def _required_str(data: Dict[str, Any], key: str) -> str:
    value = data.get(key)
    if not isinstance(value, str) or not value.strip():
        raise BadRequest(f"'{key}' is required")
    return value.strip()


def _required_password(data: Dict[str, Any]) -> str:
    """Passwords are taken verbatim; only emptiness is rejected."""
    value = data.get("password")
    if not isinstance(value, str) or not value:
        raise BadRequest("'password' is required")
    return value


# ---------------------------------------------------------------------------
# Auth

@app.route("/auth/signup", methods=["POST"])
def signup_endpoint():
    data = _json_body()
    email = _required_str(data, "email")
    password = _required_password(data)
    name = data.get("name") if isinstance(data.get("name"), str) else None
    return jsonify(auth.signup(email, password, name)), 201


@app.route("/auth/login", methods=["POST"])
def login_endpoint():
    data = _json_body()
    email = _required_str(data, "email")
    password = _required_password(data)
    return jsonify(auth.login(email, password))


@app.route("/auth/me", methods=["GET"])
@auth.require_auth
def me_endpoint():
    user = users.find_by_id(g.user["sub"])
    if user is None:
        raise NotFound("User not found")
    return jsonify(users.public_view(user))


# ---------------------------------------------------------------------------
# Catalog

@app.route("/products", methods=["GET"])
@auth.require_auth
def list_products_endpoint():
    title = (request.args.get("title") or "").strip()
    q = (request.args.get("q") or "").strip()

    if title:
        items = search.find_by_title(title)
        return jsonify({"items": items, "total": len(items), "page": 1, "limit": len(items)})

    if q:
        items = search.search_by_text(q)
        return jsonify({"items": items, "total": len(items), "page": 1, "limit": len(items)})

    page = parse_positive_int(request.args.get("page"), 1, MAX_PAGE)
    limit = parse_positive_int(request.args.get("limit"), DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE)
    return jsonify(search.find_all(page, limit))


@app.route("/products/<product_id>", methods=["GET"])
@auth.require_auth
def get_product_endpoint(product_id: str):
    return jsonify(search.find_by_id(product_id))


@app.route("/products/import", methods=["POST"])
@auth.require_auth
def import_products_endpoint():
    data = request.get_json(silent=True)
    items = data.get("items") if isinstance(data, dict) else data
    if not isinstance(items, list):
        raise BadRequest("Expected a JSON array of products or {'items': [...]}")
    try:
        ids = search.create_many(items)
    except ValueError as e:
        raise BadRequest(str(e))
    return jsonify({"inserted": len(ids), "ids": ids}), 201


# ---------------------------------------------------------------------------
# AI search / chat / symptom checker

@app.route("/products/ai-search", methods=["GET"])
def ai_search_endpoint():
    q = (request.args.get("q") or "").strip()
    if not q:
        raise BadRequest("'q' is required")
    return jsonify(recommender.ai_search(q))


@app.route("/products/chat", methods=["POST"])
def chat_endpoint():
    q = _json_body().get("q") or ""
    if not isinstance(q, str):
        raise BadRequest("'q' must be a string")
    return jsonify(recommender.chat(q.strip()))


@app.route("/products/symptom-check", methods=["POST"])
def symptom_check_endpoint():
    symptoms = _required_str(_json_body(), "symptoms")
    return jsonify(recommender.symptom_check(symptoms))


# ---------------------------------------------------------------------------
# Speech

@app.route("/speech/speech-to-text", methods=["POST"])
def speech_to_text_endpoint():
    file = request.files.get("file")
    if file is None or not file.filename:
        raise BadRequest("No file provided")
    return jsonify({"text": speech.transcribe(file)})


@app.route("/health", methods=["GET"])
def health():
    return jsonify({"status": "ok"}), 200


@app.cli.command("import-products")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
def import_products_command(path: str):
    """Bulk import products from a JSON file (array or {"items": [...]})."""
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    items: List[Dict[str, Any]] = data.get("items", []) if isinstance(data, dict) else data
    try:
        ids = search.create_many(items)
    except ValueError as e:
        raise click.ClickException(str(e))
    click.echo(f"Imported {len(ids)} products")


if __name__ == "__main__":
    logger.info("Backend running on %s", config.PORT)
    app.run(host="0.0.0.0", port=config.PORT, threaded=True)
