"""
Generic MongoDB implementation of the entity service interfaces.

Every entity service is a thin pass-through to one collection.  The
only work done here is translating between pydantic models and BSON
documents:

* ``_id`` (``ObjectId``) becomes the string field ``id``;
* reference fields (``user_id``, ``account_id``) and reference lists
  (``tag_ids``, ``transaction_ids``, ...) are stored as ``ObjectId``
  and returned as hex strings.

Each operation touches a single document (or performs a single query),
so atomicity is whatever MongoDB provides per document.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Generic, List, Optional, Tuple, Type

from pymongo.asynchronous.collection import AsyncCollection
from pymongo.asynchronous.database import AsyncDatabase

from personal_finance_api.app.core.db import id_to_str, to_object_id, to_object_ids
from personal_finance_api.app.services.interfaces import CreateT, ReadT


logger = logging.getLogger(__name__)


class MongoEntityService(Generic[CreateT, ReadT]):
    """CRUD over one collection.

    Subclasses set ``collection_name``, ``read_model`` and the reference
    field names; most need nothing else.
    """

    collection_name: str = ""
    read_model: Type[ReadT]
    reference_fields: Tuple[str, ...] = ()
    reference_list_fields: Tuple[str, ...] = ()

    def __init__(self, database: AsyncDatabase) -> None:
        self.collection: AsyncCollection = database[self.collection_name]

    async def get_all(self) -> List[ReadT]:
        return [self._from_document(doc) async for doc in self.collection.find({})]

    async def get(self, entity_id: str) -> Optional[ReadT]:
        oid = to_object_id(entity_id)
        if oid is None:
            return None
        doc = await self.collection.find_one({"_id": oid})
        if doc is None:
            return None
        return self._from_document(doc)

    async def create(self, data: CreateT) -> ReadT:
        doc = self._to_document(data)
        result = await self.collection.insert_one(doc)
        doc["_id"] = result.inserted_id
        logger.info("Created %s document %s", self.collection_name, result.inserted_id)
        return self._from_document(doc)

    async def update(self, entity_id: str, data: CreateT) -> None:
        """Replace the whole document.

        No upsert: when nothing matches, the collection is left
        untouched and no error is raised.
        """
        oid = to_object_id(entity_id)
        if oid is None:
            return
        result = await self.collection.replace_one({"_id": oid}, self._to_document(data))
        if result.matched_count:
            logger.info("Updated %s document %s", self.collection_name, oid)
        else:
            logger.debug("Update of missing %s document %s ignored", self.collection_name, oid)

    async def remove(self, entity_id: str) -> None:
        oid = to_object_id(entity_id)
        if oid is None:
            return
        result = await self.collection.delete_one({"_id": oid})
        if result.deleted_count:
            logger.info("Deleted %s document %s", self.collection_name, oid)

    def _to_document(self, data: CreateT) -> Dict[str, Any]:
        doc = data.model_dump()
        for field in self.reference_fields:
            if field in doc:
                doc[field] = to_object_id(doc[field])
        for field in self.reference_list_fields:
            if field in doc:
                doc[field] = to_object_ids(doc[field] or [])
        return doc

    def _from_document(self, doc: Dict[str, Any]) -> ReadT:
        values = dict(doc)
        values["id"] = id_to_str(values.pop("_id"))
        for field in self.reference_fields:
            if field in values:
                values[field] = id_to_str(values[field])
        for field in self.reference_list_fields:
            if field in values:
                values[field] = [str(v) for v in values[field] or []]
        return self.read_model.model_validate(values)


class MongoUserScopedService(MongoEntityService[CreateT, ReadT]):
    """Adds the by-owner query for entities carrying ``user_id``."""

    reference_fields: Tuple[str, ...] = ("user_id",)

    async def get_for_user(self, user_id: str) -> List[ReadT]:
        oid = to_object_id(user_id)
        if oid is None:
            return []
        return [self._from_document(doc) async for doc in self.collection.find({"user_id": oid})]
