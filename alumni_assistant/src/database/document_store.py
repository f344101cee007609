"""
Alumni Assistant - DocumentStore
=================================
Async wrapper around the MongoDB database holding the platform
collections (events, fundraising, internships).

Design decisions:
  • **Dependency Injection**: the motor database handle is injected,
    never created here, so tests can pass an in-memory fake with the
    same ``db[name].find(...).to_list(...)`` shape.
  • **Whole-collection semantics**: ``list_all`` either returns every
    document of a collection or raises ``StoreUnavailable``.  There is
    no partial-success mode.
  • **Plain records**: documents come back as ``dict`` with the
    ``ObjectId`` key rendered as the string ``id``.

Usage:
    from alumni_assistant.src.database.document_store import DocumentStore, create_mongo_client

    client = create_mongo_client(settings)
    store = DocumentStore(client[settings.MONGO_DB_NAME])
    events = await store.list_all("events")
"""

from __future__ import annotations

from typing import Any

import motor.motor_asyncio
from pymongo.errors import PyMongoError

from alumni_assistant.config.settings import Settings
from alumni_assistant.src.core.exceptions import StoreUnavailable
from alumni_assistant.src.core.models import Record
from alumni_assistant.src.utils.logger import get_logger

logger = get_logger(__name__)


def create_mongo_client(settings: Settings) -> motor.motor_asyncio.AsyncIOMotorClient:
    """Build the process-wide async MongoDB client (called once at startup)."""
    client = motor.motor_asyncio.AsyncIOMotorClient(settings.MONGO_URI.get_secret_value(), serverSelectionTimeoutMS=settings.MONGO_TIMEOUT_MS)
    logger.info("MongoDB async client created (db: %s).", settings.MONGO_DB_NAME)
    return client


def _to_record(document: dict[str, Any]) -> Record:
    """Copy a raw document, replacing ``_id`` with a string ``id``."""
    record: Record = {k: v for k, v in document.items() if k != "_id"}
    if "_id" in document:
        record["id"] = str(document["_id"])
    return record


class DocumentStore:
    """
    Collection-level CRUD over an injected motor database.

    Parameters
    ----------
    database
        An ``AsyncIOMotorDatabase`` (or compatible fake).
    """

    __slots__ = ("_db",)

    def __init__(self, database: Any) -> None:
        self._db = database


    async def list_all(self, collection_name: str) -> list[Record]:
        """
        Fetch every document of *collection_name* in store order.

        Raises
        ------
        StoreUnavailable
            If the store cannot be reached or the query fails.
        """
        try:
            documents = await self._db[collection_name].find({}).to_list(length=None)
        except PyMongoError as exc:
            logger.error("Reading collection '%s' failed: %s", collection_name, exc)
            raise StoreUnavailable(collection_name, type(exc).__name__) from exc

        records = [_to_record(doc) for doc in documents]
        logger.debug("Collection '%s': %d record(s).", collection_name, len(records))
        return records


    async def add_documents(self, collection_name: str, records: list[Record]) -> int:
        """Insert *records* into *collection_name*.  Returns the number inserted."""
        if not records:
            return 0
        try:
            result = await self._db[collection_name].insert_many(records)
        except PyMongoError as exc:
            logger.error("Writing to collection '%s' failed: %s", collection_name, exc)
            raise StoreUnavailable(collection_name, type(exc).__name__) from exc

        inserted = len(result.inserted_ids)
        logger.info("Inserted %d record(s) into '%s'.", inserted, collection_name)
        return inserted


    async def count(self, collection_name: str) -> int:
        """Return the number of documents in *collection_name*."""
        try:
            return await self._db[collection_name].count_documents({})
        except PyMongoError as exc:
            raise StoreUnavailable(collection_name, type(exc).__name__) from exc


    async def drop_collection(self, collection_name: str) -> None:
        """Drop *collection_name* (no-op on the server if it does not exist)."""
        try:
            await self._db.drop_collection(collection_name)
        except PyMongoError as exc:
            raise StoreUnavailable(collection_name, type(exc).__name__) from exc
        logger.info("Dropped collection '%s'.", collection_name)


    def __repr__(self) -> str:
        return f"DocumentStore(db='{getattr(self._db, 'name', '?')}')"
