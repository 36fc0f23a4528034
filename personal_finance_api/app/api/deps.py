"""
FastAPI dependencies resolving services from the application state.

``create_app`` stores a ``ServiceRegistry`` on ``app.state.services``;
route handlers declare the service they need with ``Depends`` and never
construct services themselves.
"""

from fastapi import Request

from personal_finance_api.app.services.interfaces import (
    AccountsServiceInterface,
    AuthServiceInterface,
    GoalsServiceInterface,
    TagsServiceInterface,
    TransactionsServiceInterface,
    UsersServiceInterface,
)
from personal_finance_api.app.services.registry import ServiceRegistry


def get_services(request: Request) -> ServiceRegistry:
    return request.app.state.services


def get_accounts_service(request: Request) -> AccountsServiceInterface:
    return get_services(request).accounts


def get_goals_service(request: Request) -> GoalsServiceInterface:
    return get_services(request).goals


def get_tags_service(request: Request) -> TagsServiceInterface:
    return get_services(request).tags


def get_transactions_service(request: Request) -> TransactionsServiceInterface:
    return get_services(request).transactions


def get_users_service(request: Request) -> UsersServiceInterface:
    return get_services(request).users


def get_auth_service(request: Request) -> AuthServiceInterface:
    return get_services(request).auth
