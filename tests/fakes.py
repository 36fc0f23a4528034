"""
Test doubles.

``FakeDatabase`` / ``FakeCollection`` mimic the slice of pymongo's
asynchronous collection API the services and the seeder use, backed by
plain lists.  The ``InMemory*`` services implement the service
interfaces directly and are what the API tests inject into the app.
"""

import copy
from types import SimpleNamespace
from typing import Any, Dict, List, Optional

import bson
from bson import ObjectId
from bson.codec_options import CodecOptions

from personal_finance_api.app.schemas.account import AccountRead
from personal_finance_api.app.schemas.goal import GoalRead
from personal_finance_api.app.schemas.tag import TagRead
from personal_finance_api.app.schemas.transaction import TransactionRead
from personal_finance_api.app.schemas.user import UserCreate, UserRead
from personal_finance_api.app.services.interfaces import (
    AccountsServiceInterface,
    AuthServiceInterface,
    GoalsServiceInterface,
    TagsServiceInterface,
    TransactionsServiceInterface,
    UsersServiceInterface,
)
from personal_finance_api.app.services.registry import ServiceRegistry


# ---------------------------------------------------------------------------
# pymongo doubles
# ---------------------------------------------------------------------------


_CODEC_OPTIONS = CodecOptions(tz_aware=True)


def _through_bson(doc: Dict[str, Any]) -> Dict[str, Any]:
    """Encode and decode like a real server, so precision and time zones match."""
    return bson.decode(bson.encode(doc), codec_options=_CODEC_OPTIONS)


def _matches(doc: Dict[str, Any], query: Dict[str, Any]) -> bool:
    return all(doc.get(key) == value for key, value in query.items())


class _AsyncCursor:
    def __init__(self, docs: List[Dict[str, Any]]) -> None:
        self._docs = iter(docs)

    def __aiter__(self) -> "_AsyncCursor":
        return self

    async def __anext__(self) -> Dict[str, Any]:
        try:
            return next(self._docs)
        except StopIteration:
            raise StopAsyncIteration


class FakeCollection:
    def __init__(self, name: str) -> None:
        self.name = name
        self.docs: List[Dict[str, Any]] = []

    def find(self, query: Optional[Dict[str, Any]] = None) -> _AsyncCursor:
        query = query or {}
        return _AsyncCursor([copy.deepcopy(d) for d in self.docs if _matches(d, query)])

    async def find_one(self, query: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        for doc in self.docs:
            if _matches(doc, query):
                return copy.deepcopy(doc)
        return None

    async def insert_one(self, doc: Dict[str, Any]) -> SimpleNamespace:
        doc.setdefault("_id", ObjectId())
        self.docs.append(_through_bson(doc))
        return SimpleNamespace(inserted_id=doc["_id"])

    async def insert_many(self, docs: List[Dict[str, Any]]) -> SimpleNamespace:
        ids = []
        for doc in docs:
            result = await self.insert_one(doc)
            ids.append(result.inserted_id)
        return SimpleNamespace(inserted_ids=ids)

    async def replace_one(self, query: Dict[str, Any], replacement: Dict[str, Any]) -> SimpleNamespace:
        for index, doc in enumerate(self.docs):
            if _matches(doc, query):
                new_doc = _through_bson({"_id": doc["_id"], **replacement})
                self.docs[index] = new_doc
                return SimpleNamespace(matched_count=1, modified_count=1)
        return SimpleNamespace(matched_count=0, modified_count=0)

    async def update_one(self, query: Dict[str, Any], update: Dict[str, Any]) -> SimpleNamespace:
        for doc in self.docs:
            if _matches(doc, query):
                for field, value in update.get("$set", {}).items():
                    doc[field] = value
                for field, value in update.get("$addToSet", {}).items():
                    values = doc.setdefault(field, [])
                    if value not in values:
                        values.append(value)
                return SimpleNamespace(matched_count=1, modified_count=1)
        return SimpleNamespace(matched_count=0, modified_count=0)

    async def delete_one(self, query: Dict[str, Any]) -> SimpleNamespace:
        for index, doc in enumerate(self.docs):
            if _matches(doc, query):
                del self.docs[index]
                return SimpleNamespace(deleted_count=1)
        return SimpleNamespace(deleted_count=0)

    async def count_documents(self, query: Dict[str, Any]) -> int:
        return sum(1 for d in self.docs if _matches(d, query))


class FakeDatabase:
    name = "test"

    def __init__(self) -> None:
        self.collections: Dict[str, FakeCollection] = {}

    def __getitem__(self, name: str) -> FakeCollection:
        if name not in self.collections:
            self.collections[name] = FakeCollection(name)
        return self.collections[name]


# ---------------------------------------------------------------------------
# In-memory services
# ---------------------------------------------------------------------------


class InMemoryEntityService:
    read_model: Any = None

    def __init__(self, items: Optional[List[Any]] = None) -> None:
        self.items: Dict[str, Any] = {item.id: item for item in items or []}

    async def get_all(self) -> List[Any]:
        return list(self.items.values())

    async def get(self, entity_id: str) -> Optional[Any]:
        return self.items.get(entity_id)

    async def create(self, data: Any) -> Any:
        item = self.read_model(id=str(ObjectId()), **data.model_dump())
        self.items[item.id] = item
        return item

    async def update(self, entity_id: str, data: Any) -> None:
        if entity_id in self.items:
            self.items[entity_id] = self.read_model(id=entity_id, **data.model_dump())

    async def remove(self, entity_id: str) -> None:
        self.items.pop(entity_id, None)

    async def get_for_user(self, user_id: str) -> List[Any]:
        return [item for item in self.items.values() if getattr(item, "user_id", None) == user_id]


class InMemoryAccountsService(InMemoryEntityService, AccountsServiceInterface):
    read_model = AccountRead


class InMemoryGoalsService(InMemoryEntityService, GoalsServiceInterface):
    read_model = GoalRead


class InMemoryTagsService(InMemoryEntityService, TagsServiceInterface):
    read_model = TagRead


class InMemoryTransactionsService(InMemoryEntityService, TransactionsServiceInterface):
    read_model = TransactionRead


class InMemoryUsersService(InMemoryEntityService, UsersServiceInterface):
    read_model = UserRead

    def __init__(self, items: Optional[List[UserRead]] = None) -> None:
        super().__init__(items)
        self.passwords: Dict[str, str] = {}

    async def create(self, data: UserCreate) -> UserRead:
        user = await super().create(data)
        self.passwords[user.id] = data.password
        return user

    async def update(self, entity_id: str, data: UserCreate) -> None:
        if entity_id in self.items:
            await super().update(entity_id, data)
            self.passwords[entity_id] = data.password

    async def attach(self, user_id: str, field: str, item_id: str) -> None:
        user = self.items.get(user_id)
        if user is None:
            return
        ids = list(getattr(user, field))
        if item_id not in ids:
            ids.append(item_id)
        self.items[user_id] = user.model_copy(update={field: ids})


class InMemoryAuthService(AuthServiceInterface):
    def __init__(self, users: InMemoryUsersService) -> None:
        self.users = users

    async def check_credential(self, email: str, password: str) -> Optional[UserRead]:
        for user in self.users.items.values():
            if user.email == email and self.users.passwords.get(user.id) == password:
                return user
        return None


def make_registry(**overrides: Any) -> ServiceRegistry:
    users = overrides.pop("users", None) or InMemoryUsersService()
    services = {
        "accounts": InMemoryAccountsService(),
        "goals": InMemoryGoalsService(),
        "tags": InMemoryTagsService(),
        "transactions": InMemoryTransactionsService(),
        "users": users,
        "auth": InMemoryAuthService(users),
    }
    services.update(overrides)
    return ServiceRegistry(**services)


def make_goal(user_id: Optional[str], name: str) -> GoalRead:
    return GoalRead(id=str(ObjectId()), user_id=user_id, name=name, target_amount=1000, balance=10)


def make_user(name: str) -> UserRead:
    return UserRead(id=str(ObjectId()), name=name, email=f"{name.lower()}@example.com")
