"""
Alumni Assistant - SeedLoader
==============================
Loads JSON fixture files into the platform collections so the chatbot
can be exercised locally without the platform's admin pages.

Layout of the seed directory::

    data/seed/
        events.json          → [{"title": ..., "date": ..., ...}, ...]
        fundraising.json
        internships.json

Each file must hold a JSON array of objects.  String fields are cleaned
with ``clean_text`` before insertion; other values are stored as-is.
Missing files are skipped with a warning.

Usage:
    from alumni_assistant.src.core.seeder import SeedLoader
    loader = SeedLoader(store, collections)
    summary = await loader.run()
"""

from __future__ import annotations

import json
import time
from pathlib import Path

from alumni_assistant.src.core.chat_pipeline import CollectionNames
from alumni_assistant.src.core.models import Record
from alumni_assistant.src.database.document_store import DocumentStore
from alumni_assistant.src.utils.logger import get_logger
from alumni_assistant.src.utils.text_utils import clean_text

logger = get_logger(__name__)

# Seed file name (without extension) per collection attribute.
_SEED_FILES: tuple[str, ...] = ("events", "fundraising", "internships")


class SeedLoader:
    """
    Read seed files and insert them into the document store.

    Parameters
    ----------
    store
        An initialised ``DocumentStore`` (injected).
    collections
        Target collection names.
    seed_dir
        Directory holding the seed files.
    """

    def __init__(self, store: DocumentStore, collections: CollectionNames, seed_dir: Path) -> None:
        self._store = store
        self._collections = collections
        self._seed_dir = Path(seed_dir)


    async def run(self) -> dict[str, int]:
        """
        Seed every collection that has a file.

        Returns
        -------
        dict
            Records inserted per collection name, plus ``elapsed_ms``.
        """
        t_start = time.perf_counter()
        summary: dict[str, int] = {}

        for key in _SEED_FILES:
            collection = getattr(self._collections, key)
            path = self._seed_dir / f"{key}.json"
            if not path.exists():
                logger.warning("Seed file not found, skipping: %s", path)
                summary[collection] = 0
                continue

            records = self.load_file(path)
            summary[collection] = await self._store.add_documents(collection, records)

        summary["elapsed_ms"] = int((time.perf_counter() - t_start) * 1000)
        logger.info("Seeding complete: %s", summary)
        return summary


    @staticmethod
    def load_file(path: Path) -> list[Record]:
        """
        Parse one seed file into cleaned records.

        Raises
        ------
        ValueError
            If the file is not a JSON array of objects.
        """
        with open(path, encoding="utf-8") as fh:
            payload = json.load(fh)

        if not isinstance(payload, list) or not all(isinstance(item, dict) for item in payload):
            raise ValueError(f"Seed file must contain a JSON array of objects: {path}")

        return [{key: clean_text(value) if isinstance(value, str) else value for key, value in item.items()} for item in payload]
