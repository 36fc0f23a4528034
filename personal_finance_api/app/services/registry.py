"""
Service registry.

All services are constructed once and kept together so the API layer
can resolve them from ``app.state.services``.  Tests build a registry
from in-memory fakes instead of calling ``build_mongo_services``.
"""

from dataclasses import dataclass

from pymongo.asynchronous.database import AsyncDatabase

from .account_service import AccountsService
from .auth_service import AuthService
from .goal_service import GoalsService
from .interfaces import (
    AccountsServiceInterface,
    AuthServiceInterface,
    GoalsServiceInterface,
    TagsServiceInterface,
    TransactionsServiceInterface,
    UsersServiceInterface,
)
from .tag_service import TagsService
from .transaction_service import TransactionsService
from .user_service import UsersService


@dataclass
class ServiceRegistry:
    accounts: AccountsServiceInterface
    goals: GoalsServiceInterface
    tags: TagsServiceInterface
    transactions: TransactionsServiceInterface
    users: UsersServiceInterface
    auth: AuthServiceInterface


def build_mongo_services(database: AsyncDatabase) -> ServiceRegistry:
    users = UsersService(database)
    return ServiceRegistry(
        accounts=AccountsService(database),
        goals=GoalsService(database),
        tags=TagsService(database),
        transactions=TransactionsService(database),
        users=users,
        auth=AuthService(users),
    )
