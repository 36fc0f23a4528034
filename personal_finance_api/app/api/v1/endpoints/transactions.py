"""
Transaction endpoints for API v1.

Transactions are listed globally or per user.  Neither the account nor
the tags a transaction references are checked for existence.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from personal_finance_api.app.api.deps import get_transactions_service, get_users_service
from personal_finance_api.app.schemas.transaction import TransactionCreate, TransactionRead
from personal_finance_api.app.services.interfaces import TransactionsServiceInterface, UsersServiceInterface


router = APIRouter()


@router.get("", response_model=List[TransactionRead])
async def list_transactions(
    transactions: TransactionsServiceInterface = Depends(get_transactions_service),
) -> List[TransactionRead]:
    """Return every transaction."""
    return await transactions.get_all()


@router.get("/user/{user_id}", response_model=List[TransactionRead])
async def list_transactions_for_user(
    user_id: str,
    transactions: TransactionsServiceInterface = Depends(get_transactions_service),
) -> List[TransactionRead]:
    """Return the transactions of ``user_id``; empty for an unknown user."""
    return await transactions.get_for_user(user_id)


@router.get("/{transaction_id}", response_model=TransactionRead)
async def get_transaction(
    transaction_id: str,
    transactions: TransactionsServiceInterface = Depends(get_transactions_service),
) -> TransactionRead:
    """Retrieve a single transaction by its ID.

    Raises 404 if the transaction is not found.
    """
    transaction = await transactions.get(transaction_id)
    if transaction is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Transaction not found")
    return transaction


@router.post("", response_model=TransactionRead, status_code=status.HTTP_201_CREATED)
async def create_transaction(
    transaction_in: TransactionCreate,
    transactions: TransactionsServiceInterface = Depends(get_transactions_service),
    users: UsersServiceInterface = Depends(get_users_service),
) -> TransactionRead:
    """Record a transaction and add it to its user's ``transaction_ids``."""
    transaction = await transactions.create(transaction_in)
    if transaction.user_id is not None:
        await users.attach(transaction.user_id, "transaction_ids", transaction.id)
    return transaction


@router.put("/{transaction_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_transaction(
    transaction_id: str,
    transaction_in: TransactionCreate,
    transactions: TransactionsServiceInterface = Depends(get_transactions_service),
) -> None:
    """Replace an existing transaction with the request body."""
    if await transactions.get(transaction_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Transaction not found")
    await transactions.update(transaction_id, transaction_in)
    return None


@router.delete("/{transaction_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_transaction(
    transaction_id: str,
    transactions: TransactionsServiceInterface = Depends(get_transactions_service),
) -> None:
    """Delete a transaction.  Account balances are not adjusted."""
    if await transactions.get(transaction_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Transaction not found")
    await transactions.remove(transaction_id)
    return None
