import jwt

import config
from services import users


def test_signup_returns_token_and_hashes_password(client, mongo):
    resp = client.post("/auth/signup", json={"email": "bob@example.com", "password": "pw123"})
    assert resp.status_code == 201
    token = resp.get_json()["access_token"]
    payload = jwt.decode(token, config.JWT_SECRET, algorithms=["HS256"])
    assert payload["email"] == "bob@example.com"

    stored = mongo["users"].find_one({"email": "bob@example.com"})
    assert stored["password"] != "pw123"
    assert str(stored["_id"]) == payload["sub"]


def test_signup_rejects_existing_email(client, auth_headers):
    resp = client.post("/auth/signup", json={"email": "alice@example.com", "password": "other"})
    assert resp.status_code == 401
    assert resp.get_json()["error"] == "User already exists"


def test_signup_requires_email_and_password(client):
    assert client.post("/auth/signup", json={"email": "x@example.com"}).status_code == 400
    assert client.post("/auth/signup", json={"password": "pw"}).status_code == 400


def test_login_accepts_correct_password(client, auth_headers):
    resp = client.post("/auth/login", json={"email": "alice@example.com", "password": "s3cret"})
    assert resp.status_code == 200
    assert resp.get_json()["access_token"]


def test_login_rejects_wrong_password(client, auth_headers):
    resp = client.post("/auth/login", json={"email": "alice@example.com", "password": "wrong"})
    assert resp.status_code == 401
    assert resp.get_json()["error"] == "Invalid credentials"


def test_login_rejects_unknown_email(client):
    resp = client.post("/auth/login", json={"email": "nobody@example.com", "password": "pw"})
    assert resp.status_code == 401


def test_me_hides_password(client, auth_headers):
    resp = client.get("/auth/me", headers=auth_headers)
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["email"] == "alice@example.com"
    assert body["name"] == "Alice"
    assert "password" not in body


def test_protected_route_requires_bearer_token(client):
    assert client.get("/products").status_code == 401
    assert client.get("/products", headers={"Authorization": "Token abc"}).status_code == 401
    assert client.get("/products", headers={"Authorization": "Bearer not-a-jwt"}).status_code == 401


def test_expired_token_is_rejected(client, auth_headers, monkeypatch):
    monkeypatch.setattr(config, "JWT_EXPIRES_SECONDS", -10)
    user = users.find_by_email("alice@example.com")
    from services.auth import issue_token

    token = issue_token(user)
    resp = client.get("/products", headers={"Authorization": f"Bearer {token}"})
    assert resp.status_code == 401


def test_validate_password():
    user = users.create("carol@example.com", "hunter2")
    assert users.validate_password("hunter2", user["password"])
    assert not users.validate_password("hunter3", user["password"])


def test_password_is_used_verbatim(client):
    resp = client.post("/auth/signup", json={"email": " dan@example.com ", "password": "  pad  "})
    assert resp.status_code == 201

    ok = client.post("/auth/login", json={"email": "dan@example.com", "password": "  pad  "})
    assert ok.status_code == 200
    trimmed = client.post("/auth/login", json={"email": "dan@example.com", "password": "pad"})
    assert trimmed.status_code == 401


def test_whitespace_only_password_is_accepted(client):
    resp = client.post("/auth/signup", json={"email": "eve@example.com", "password": "   "})
    assert resp.status_code == 201
    assert client.post("/auth/signup", json={"email": "fay@example.com", "password": ""}).status_code == 400
