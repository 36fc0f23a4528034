"""
Abstract service interfaces.

Controllers depend on these interfaces only.  The application wires
the MongoDB implementations at startup; tests substitute in-memory
implementations that honour the same contract:

* ``get`` returns ``None`` for an unknown (or malformed) identifier.
* ``get_for_user`` returns an empty list, never ``None``, when the
  user owns nothing.
* ``update`` and ``remove`` are no-ops when the identifier matches
  nothing.
"""

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel

from personal_finance_api.app.schemas.account import AccountCreate, AccountRead
from personal_finance_api.app.schemas.goal import GoalCreate, GoalRead
from personal_finance_api.app.schemas.tag import TagCreate, TagRead
from personal_finance_api.app.schemas.transaction import TransactionCreate, TransactionRead
from personal_finance_api.app.schemas.user import UserCreate, UserRead


CreateT = TypeVar("CreateT", bound=BaseModel)
ReadT = TypeVar("ReadT", bound=BaseModel)


class EntityServiceInterface(ABC, Generic[CreateT, ReadT]):
    """CRUD operations shared by every entity."""

    @abstractmethod
    async def get_all(self) -> List[ReadT]:
        """Return every entity in the store's natural order."""

    @abstractmethod
    async def get(self, entity_id: str) -> Optional[ReadT]:
        """Return the entity with ``entity_id`` or ``None``."""

    @abstractmethod
    async def create(self, data: CreateT) -> ReadT:
        """Insert a new entity and return it with its assigned id."""

    @abstractmethod
    async def update(self, entity_id: str, data: CreateT) -> None:
        """Replace the entity with ``entity_id``; no-op if absent."""

    @abstractmethod
    async def remove(self, entity_id: str) -> None:
        """Delete the entity with ``entity_id``; no-op if absent."""


class UserScopedServiceInterface(EntityServiceInterface[CreateT, ReadT]):
    """Entities that carry a ``user_id`` reference."""

    @abstractmethod
    async def get_for_user(self, user_id: str) -> List[ReadT]:
        """Return the entities whose ``user_id`` equals ``user_id``."""


class AccountsServiceInterface(UserScopedServiceInterface[AccountCreate, AccountRead]):
    pass


class GoalsServiceInterface(UserScopedServiceInterface[GoalCreate, GoalRead]):
    pass


class TransactionsServiceInterface(UserScopedServiceInterface[TransactionCreate, TransactionRead]):
    pass


class TagsServiceInterface(EntityServiceInterface[TagCreate, TagRead]):
    pass


class UsersServiceInterface(EntityServiceInterface[UserCreate, UserRead]):

    @abstractmethod
    async def attach(self, user_id: str, field: str, item_id: str) -> None:
        """Add ``item_id`` to one of the user's id lists.

        ``field`` is ``"account_ids"``, ``"goal_ids"`` or
        ``"transaction_ids"``.  No-op if the user does not exist.
        """


class AuthServiceInterface(ABC):

    @abstractmethod
    async def check_credential(self, email: str, password: str) -> Optional[UserRead]:
        """Return the user if the credentials are valid, else ``None``."""
