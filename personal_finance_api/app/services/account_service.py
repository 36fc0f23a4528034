"""Service layer for accounts."""

from personal_finance_api.app.core.db import ACCOUNTS
from personal_finance_api.app.schemas.account import AccountCreate, AccountRead
from personal_finance_api.app.services.base import MongoUserScopedService
from personal_finance_api.app.services.interfaces import AccountsServiceInterface


class AccountsService(MongoUserScopedService[AccountCreate, AccountRead], AccountsServiceInterface):
    collection_name = ACCOUNTS
    read_model = AccountRead
    reference_list_fields = ("transaction_ids",)
