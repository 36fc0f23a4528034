"""
Service layer for transactions.

A transaction references its user and account by id.  Neither
reference is checked: a transaction may point at an account that no
longer exists.
"""

from personal_finance_api.app.core.db import TRANSACTIONS
from personal_finance_api.app.schemas.transaction import TransactionCreate, TransactionRead
from personal_finance_api.app.services.base import MongoUserScopedService
from personal_finance_api.app.services.interfaces import TransactionsServiceInterface


class TransactionsService(
    MongoUserScopedService[TransactionCreate, TransactionRead],
    TransactionsServiceInterface,
):
    collection_name = TRANSACTIONS
    read_model = TransactionRead
    reference_fields = ("user_id", "account_id")
    reference_list_fields = ("tag_ids",)
