"""
Alumni Assistant - Database Setup & Seeding Script
===================================================
CLI entry point that orchestrates:
    1. Load settings (fail-fast on a bad ``.env``).
    2. Connect to MongoDB and wrap it in a ``DocumentStore``.
    3. Optionally drop the platform collections.
    4. Run the ``SeedLoader`` (or print the chatbot context block).
    5. Print a structured execution summary.

Flags:
    --drop       Drop the three platform collections before seeding.
    --drop-only  Drop the collections and exit immediately (no seeding).
    --preview    Print the context block the chatbot would build from the
                 current store state, then exit (no writes).
    --seed-dir   Override ``SEED_DIR``.

Usage:
    python -m alumni_assistant.scripts.setup_db              # Seed from data/seed
    python -m alumni_assistant.scripts.setup_db --drop       # Drop, then seed
    python -m alumni_assistant.scripts.setup_db --drop-only  # Drop and exit
    python -m alumni_assistant.scripts.setup_db --preview    # Show context block
"""

from __future__ import annotations

import argparse
import asyncio
import sys
import time
from pathlib import Path


# ── CLI Argument Parsing ───────────────────────────────────────────────

def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="setup_db", description="Alumni Assistant — Seed the platform collections or preview the chatbot context.")
    parser.add_argument("--drop", action="store_true", default=False, help="Drop the platform collections before seeding.")
    parser.add_argument("--drop-only", action="store_true", default=False, help="Drop the platform collections and exit (no seeding).")
    parser.add_argument("--preview", action="store_true", default=False, help="Print the context block built from the current store state and exit.")
    parser.add_argument("--seed-dir", type=Path, default=None, help="Directory holding events.json, fundraising.json and internships.json.")
    return parser.parse_args(argv)


# ── Main Orchestration ─────────────────────────────────────────────────

async def run(args: argparse.Namespace, settings: object, store: object) -> dict[str, int]:
    """Execute the requested action against *store*.  Returns the seed summary."""
    from alumni_assistant.src.core.chat_pipeline import CollectionNames, fetch_platform_data
    from alumni_assistant.src.core.context_builder import ContextBuilder
    from alumni_assistant.src.core.seeder import SeedLoader
    from alumni_assistant.src.utils.logger import get_logger

    collections = CollectionNames.from_settings(settings)  # type: ignore[arg-type]

    if args.preview:
        data = await fetch_platform_data(store, collections)  # type: ignore[arg-type]
        print(ContextBuilder(settings.CONTEXT_MAX_RECORDS_PER_CATEGORY).build(data))  # type: ignore[attr-defined]
        return {}

    logger = get_logger(__name__)
    if args.drop or args.drop_only:
        for name in (collections.events, collections.fundraising, collections.internships):
            logger.warning("Dropping collection '%s' as requested.", name)
            await store.drop_collection(name)  # type: ignore[attr-defined]
        if args.drop_only:
            logger.info("--drop-only: Collections dropped. Exiting.")
            return {}

    loader = SeedLoader(store, collections, args.seed_dir or settings.SEED_DIR)  # type: ignore[arg-type, attr-defined]
    return await loader.run()


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)
    t_start = time.perf_counter()

    try:
        from alumni_assistant.config.settings import settings
    except Exception as exc:
        print("\n[FATAL] Configuration error — check your .env file:\n")
        print(f"  {exc}")
        print()
        sys.exit(1)

    from alumni_assistant.src.core.exceptions import StoreUnavailable
    from alumni_assistant.src.database.document_store import DocumentStore, create_mongo_client
    from alumni_assistant.src.utils.logger import configure_logging, get_logger

    configure_logging(settings)
    logger = get_logger(__name__)
    if not args.preview:
        _print_header(settings)

    client = create_mongo_client(settings)
    store = DocumentStore(client[settings.MONGO_DB_NAME])
    try:
        summary = asyncio.run(run(args, settings, store))
    except StoreUnavailable as exc:
        logger.error("%s", exc)
        sys.exit(1)
    finally:
        client.close()

    if summary:
        _print_footer(summary, time.perf_counter() - t_start)


# ── Pretty-print helpers ──────────────────────────────────────────────

def _print_header(settings: object) -> None:
    mongo_uri_val = settings.MONGO_URI.get_secret_value()  # type: ignore[attr-defined]
    mongo_masked = mongo_uri_val.split("@")[-1] if "@" in mongo_uri_val else mongo_uri_val

    print()
    print("=" * 60)
    print("  ALUMNI ASSISTANT — Database Setup & Seeding")
    print("=" * 60)
    print(f"  Environment  : {settings.ENV}")                   # type: ignore[attr-defined]
    print(f"  Log level    : {settings.LOG_LEVEL or '(from ENV)'}")  # type: ignore[attr-defined]
    print(f"  MongoDB      : {mongo_masked} (db: {settings.MONGO_DB_NAME})")  # type: ignore[attr-defined]
    print(f"  Seed dir     : {settings.SEED_DIR}")              # type: ignore[attr-defined]
    print("=" * 60)
    print()


def _print_footer(summary: dict[str, int], elapsed: float) -> None:
    print()
    print("=" * 60)
    print("  EXECUTION SUMMARY")
    print("-" * 60)
    for name, inserted in summary.items():
        if name == "elapsed_ms":
            continue
        print(f"  {name:<21}: {inserted} record(s)")
    print("-" * 60)
    print(f"  Seeding time         : {summary.get('elapsed_ms', 0):>8}ms")
    print(f"  Total elapsed        : {elapsed:>8.2f}s")
    print("=" * 60)
    print()


# ── Entry point ────────────────────────────────────────────────────────

if __name__ == "__main__":
    main()
