"""
Service layer for users.

Users are stored with a salted password hash in ``password_hash``;
plain-text passwords never reach the database.  The hash is stripped
again when documents are converted to ``UserRead``.

Accounts, goals and transactions point at their user through
``user_id``.  The user keeps the reverse lists (``account_ids``,
``goal_ids``, ``transaction_ids``); ``attach`` appends to them when a
new document is created through the API.  Nothing removes ids from
these lists when the referenced document is deleted.
"""

import logging
from typing import Any, Dict, Optional, Tuple

from personal_finance_api.app.core.db import USERS, to_object_id
from personal_finance_api.app.core.security import hash_password
from personal_finance_api.app.schemas.user import UserCreate, UserRead
from personal_finance_api.app.services.base import MongoEntityService
from personal_finance_api.app.services.interfaces import UsersServiceInterface


logger = logging.getLogger(__name__)

ATTACHABLE_FIELDS = frozenset({"account_ids", "goal_ids", "transaction_ids"})


class UsersService(MongoEntityService[UserCreate, UserRead], UsersServiceInterface):
    collection_name = USERS
    read_model = UserRead
    reference_list_fields = ("account_ids", "goal_ids", "transaction_ids")

    async def attach(self, user_id: str, field: str, item_id: str) -> None:
        if field not in ATTACHABLE_FIELDS:
            raise ValueError(f"Unknown user reference list: {field}")
        user_oid = to_object_id(user_id)
        item_oid = to_object_id(item_id)
        if user_oid is None or item_oid is None:
            return
        result = await self.collection.update_one(
            {"_id": user_oid},
            {"$addToSet": {field: item_oid}},
        )
        if result.matched_count:
            logger.info("Attached %s %s to user %s", field, item_oid, user_oid)

    async def get_credentials(self, email: str) -> Optional[Tuple[UserRead, str]]:
        """Return the user with ``email`` and its stored password hash."""
        doc = await self.collection.find_one({"email": email})
        if doc is None:
            return None
        return self._from_document(doc), doc.get("password_hash", "")

    def _to_document(self, data: UserCreate) -> Dict[str, Any]:
        doc = super()._to_document(data)
        doc["password_hash"] = hash_password(doc.pop("password"))
        return doc
