"""
MongoDB integration.

This module owns the client lifecycle (``connect`` / ``close``) and the
small helpers used to translate between API identifiers (24 character
hex strings) and BSON ``ObjectId`` values.  Collection names are fixed
here so the services and the seeding routine agree on them.
"""

import logging
from typing import Any, Iterable, List, Optional

from bson import ObjectId
from pymongo import AsyncMongoClient
from pymongo.asynchronous.database import AsyncDatabase

from .config import settings


logger = logging.getLogger(__name__)

ACCOUNTS = "Accounts"
GOALS = "Goals"
TAGS = "Tags"
TRANSACTIONS = "Transactions"
USERS = "Users"

# Seeding order.
COLLECTIONS = (ACCOUNTS, GOALS, TAGS, TRANSACTIONS, USERS)


async def connect(
    connection_string: Optional[str] = None,
    database_name: Optional[str] = None,
) -> tuple[AsyncMongoClient, AsyncDatabase]:
    """Open a client and verify the server is reachable.

    The ``ping`` makes connectivity problems fail here, at startup,
    rather than on the first request.  Errors propagate to the caller.
    """
    client: AsyncMongoClient = AsyncMongoClient(
        connection_string or settings.connection_string,
        tz_aware=True,
    )
    try:
        await client.admin.command("ping")
    except Exception:
        await client.close()
        raise
    database = client[database_name or settings.database_name]
    logger.info("Connected to MongoDB database %s", database.name)
    return client, database


async def close(client: AsyncMongoClient) -> None:
    await client.close()
    logger.info("MongoDB client closed")


def to_object_id(value: Any) -> Optional[ObjectId]:
    """Return ``value`` as an ``ObjectId`` or ``None`` if it is not one.

    Malformed identifiers are not an error for lookups: they simply
    cannot match any document.
    """
    if isinstance(value, ObjectId):
        return value
    if isinstance(value, str) and ObjectId.is_valid(value):
        return ObjectId(value)
    return None


def to_object_ids(values: Iterable[Any]) -> List[ObjectId]:
    return [oid for oid in (to_object_id(v) for v in values) if oid is not None]


def id_to_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    return str(value)
