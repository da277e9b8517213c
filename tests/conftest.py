import os

# Deterministic settings before config is imported.
os.environ["GEMINI_API_KEY"] = ""
os.environ["OPENAI_API_KEY"] = ""
os.environ["JWT_SECRET"] = "test-secret"
os.environ["MONGODB_URI"] = "mongodb://localhost:27017"

import mongomock
import pytest

import config
from app import app as flask_app


SAMPLE_PRODUCTS = [
    {
        "name": "Calcium + Vitamin D3",
        "category": "Bone Health",
        "brand": "NatureWell",
        "description": "Supports strong bones and teeth.",
        "price": "12.99",
        "ingredients": "Calcium carbonate, Vitamin D3",
        "dossage": "2 tablets daily",
    },
    {
        "name": "Joint Flex Glucosamine",
        "category": "Joint Support",
        "brand": "FlexiLife",
        "description": "Glucosamine and chondroitin for joint comfort.",
        "price": "24.50",
        "ingredients": "Glucosamine sulfate, Chondroitin",
        "dosage": "1 capsule twice daily",
    },
    {
        "name": "Sleep Well Melatonin",
        "category": "Sleep",
        "brand": "NightCalm",
        "description": "Helps you fall asleep faster.",
        "price": "8.75",
        "ingredients": "Melatonin 3mg",
        "dosage": "1 tablet before bed",
    },
    {
        "name": "Omega-3 Fish Oil",
        "category": "Heart Health",
        "brand": "OceanPure",
        "description": "EPA and DHA for heart and brain.",
        "price": "15.00",
        "ingredients": "Fish oil, EPA, DHA",
        "dosage": "2 softgels daily",
    },
]


@pytest.fixture(autouse=True)
def mongo(monkeypatch):
    db = mongomock.MongoClient()["supplements_test"]
    monkeypatch.setattr(config, "db", db)
    monkeypatch.setattr(config, "products_collection", db["products"])
    monkeypatch.setattr(config, "users_collection", db["users"])
    return db


@pytest.fixture
def client():
    flask_app.config["TESTING"] = True
    with flask_app.test_client() as c:
        yield c


@pytest.fixture
def seeded():
    from services import search

    return search.create_many([dict(p) for p in SAMPLE_PRODUCTS])


class FakeModel:
    """Stands in for ``services.llm.ask``: replies from a queue, records prompts."""

    def __init__(self):
        self.replies = []
        self.prompts = []

    def queue(self, *replies):
        self.replies.extend(replies)

    def __call__(self, prompt):
        self.prompts.append(prompt)
        if not self.replies:
            raise AssertionError("unexpected model call")
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply


@pytest.fixture
def fake_model(monkeypatch):
    model = FakeModel()
    monkeypatch.setattr("services.llm.ask", model)
    return model


@pytest.fixture
def auth_headers(client):
    resp = client.post(
        "/auth/signup",
        json={"email": "alice@example.com", "password": "s3cret", "name": "Alice"},
    )
    token = resp.get_json()["access_token"]
    return {"Authorization": f"Bearer {token}"}
