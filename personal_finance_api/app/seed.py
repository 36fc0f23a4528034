"""
Database seeding.

At startup every collection that is still empty is filled from a
fixture file named after it (``Accounts.json``, ``Goals.json``, ...) in
``settings.seed_data_dir``.  Fixtures are MongoDB Extended JSON arrays,
so ids and dates may be written as ``{"$oid": ...}`` and
``{"$date": ...}``.  Collections that already hold documents are left
alone, which makes running the seeder twice harmless.

The count-then-insert sequence is not atomic.  Two processes starting
at the same moment against an empty database can both insert the
fixtures; run a single instance for the first start.

Any failure raises and must abort startup: the API never serves a
partially seeded database.

The seeder can also be run on its own::

    python -m personal_finance_api.app.seed
"""

import asyncio
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from bson import json_util
from bson.errors import BSONError
from pymongo.asynchronous.database import AsyncDatabase

from personal_finance_api.app.core.config import settings
from personal_finance_api.app.core.db import COLLECTIONS, USERS, close, connect
from personal_finance_api.app.core.logging_config import setup_logging
from personal_finance_api.app.core.security import hash_password


logger = logging.getLogger(__name__)


class SeedingError(Exception):
    """Raised when a fixture file is missing or malformed."""


def load_fixture(data_dir: Path, collection_name: str) -> List[Dict[str, Any]]:
    """Read and parse ``<collection_name>.json`` from ``data_dir``."""
    path = data_dir / f"{collection_name}.json"
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SeedingError(f"Cannot read fixture file {path}: {e}") from e
    try:
        documents = json_util.loads(raw)
    except (ValueError, BSONError) as e:
        raise SeedingError(f"Fixture file {path} is not valid JSON: {e}") from e
    if not isinstance(documents, list) or not all(isinstance(d, dict) for d in documents):
        raise SeedingError(f"Fixture file {path} must contain an array of objects")
    if collection_name == USERS:
        documents = [_hash_user_password(doc, path) for doc in documents]
    return documents


def _hash_user_password(doc: Dict[str, Any], path: Path) -> Dict[str, Any]:
    doc = dict(doc)
    password = doc.pop("password", None)
    if password is not None:
        if not isinstance(password, str):
            raise SeedingError(f"Fixture file {path}: user password must be a string")
        doc["password_hash"] = hash_password(password)
    return doc


async def seed_database(database: AsyncDatabase, data_dir: Optional[str] = None) -> Dict[str, int]:
    """Seed every empty collection and return the inserted counts.

    Collections that were skipped report ``0``.
    """
    directory = Path(data_dir or settings.seed_data_dir)
    logger.info("Starting database seeding from %s", directory)
    inserted: Dict[str, int] = {}
    for name in COLLECTIONS:
        collection = database[name]
        if await collection.count_documents({}) > 0:
            logger.info("%s collection already seeded", name)
            inserted[name] = 0
            continue
        logger.info("Seeding %s...", name)
        documents = load_fixture(directory, name)
        if documents:
            await collection.insert_many(documents)
        inserted[name] = len(documents)
        logger.info("%s seeded with %d documents", name, len(documents))
    logger.info("Database seeding finished")
    return inserted


async def main() -> int:
    setup_logging(settings.log_level, settings.log_file or None)
    client, database = await connect()
    try:
        await seed_database(database)
    except Exception:
        logger.exception("Database seeding failed")
        return 1
    finally:
        await close(client)
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
