"""
Pytest configuration and shared fixtures for Alumni Assistant tests.

This conftest.py handles:
- Setting the required environment variables before the settings module
  is imported (``GOOGLE_API_KEY`` and ``MONGO_URI`` have no defaults)
- In-memory fakes for the motor database and the chat model
- Pipeline / TestClient factories wired with those fakes
"""

import os

os.environ.setdefault("GOOGLE_API_KEY", "test-google-key")
os.environ.setdefault("MONGO_URI", "mongodb://localhost:27017")
os.environ.setdefault("ENV", "dev")

from types import SimpleNamespace

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient
from langchain_core.messages import AIMessage
from pymongo.errors import ServerSelectionTimeoutError

from alumni_assistant.src.core.chat_pipeline import ChatPipeline
from alumni_assistant.src.core.completion_gateway import CompletionGateway
from alumni_assistant.src.database.document_store import DocumentStore
from alumni_assistant.src.main import create_app


# =============================================================================
# Fake motor database
# =============================================================================

class FakeCursor:
    def __init__(self, collection):
        self._collection = collection

    async def to_list(self, length=None):
        if self._collection.fail:
            raise ServerSelectionTimeoutError("No servers available")
        docs = [dict(doc) for doc in self._collection.docs]
        return docs if length is None else docs[:length]


class FakeCollection:
    def __init__(self, name):
        self.name = name
        self.docs = []
        self.fail = False
        self.find_calls = 0

    def find(self, filter=None):
        self.find_calls += 1
        return FakeCursor(self)

    async def insert_many(self, records):
        if self.fail:
            raise ServerSelectionTimeoutError("No servers available")
        ids = []
        for record in records:
            doc = {"_id": ObjectId(), **record}
            self.docs.append(doc)
            ids.append(doc["_id"])
        return SimpleNamespace(inserted_ids=ids)

    async def count_documents(self, filter):
        if self.fail:
            raise ServerSelectionTimeoutError("No servers available")
        return len(self.docs)


class FakeDatabase:
    """Minimal stand-in for ``AsyncIOMotorDatabase``."""

    name = "alumni-test"

    def __init__(self):
        self.collections = {}

    def __getitem__(self, name):
        if name not in self.collections:
            self.collections[name] = FakeCollection(name)
        return self.collections[name]

    async def drop_collection(self, name):
        self.collections.pop(name, None)

    def seed(self, name, *records):
        for record in records:
            self[name].docs.append({"_id": ObjectId(), **record})

    def break_collection(self, name):
        self[name].fail = True


# =============================================================================
# Fake chat model
# =============================================================================

class FakeChatModel:
    """Records every ``ainvoke`` call and answers with a fixed reply."""

    def __init__(self, reply="Stub reply", error=None, response=None):
        self.reply = reply
        self.error = error
        self.response = response
        self.calls = []

    async def ainvoke(self, messages):
        self.calls.append(list(messages))
        if self.error is not None:
            raise self.error
        if self.response is not None:
            return self.response
        return AIMessage(content=self.reply)


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def fake_db():
    return FakeDatabase()


@pytest.fixture
def store(fake_db):
    return DocumentStore(fake_db)


@pytest.fixture
def chat_model():
    return FakeChatModel()


@pytest.fixture
def pipeline(store, chat_model):
    return ChatPipeline(store, CompletionGateway(chat_model))


@pytest.fixture
def client(pipeline):
    return TestClient(create_app(pipeline=pipeline))


@pytest.fixture
def reunion_event():
    return {"title": "Reunion 2024", "date": "2024-12-01", "location": "Campus Hall"}
