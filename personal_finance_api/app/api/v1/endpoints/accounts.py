"""
Account endpoints for API v1.

Accounts are listed globally or per user.  A new account with a
``user_id`` is added to that user's ``account_ids``.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from personal_finance_api.app.api.deps import get_accounts_service, get_users_service
from personal_finance_api.app.schemas.account import AccountCreate, AccountRead
from personal_finance_api.app.services.interfaces import AccountsServiceInterface, UsersServiceInterface


router = APIRouter()


@router.get("", response_model=List[AccountRead])
async def list_accounts(
    accounts: AccountsServiceInterface = Depends(get_accounts_service),
) -> List[AccountRead]:
    """Return every account."""
    return await accounts.get_all()


@router.get("/user/{user_id}", response_model=List[AccountRead])
async def list_accounts_for_user(
    user_id: str,
    accounts: AccountsServiceInterface = Depends(get_accounts_service),
) -> List[AccountRead]:
    """Return the accounts owned by ``user_id`` (possibly none)."""
    return await accounts.get_for_user(user_id)


@router.get("/{account_id}", response_model=AccountRead)
async def get_account(
    account_id: str,
    accounts: AccountsServiceInterface = Depends(get_accounts_service),
) -> AccountRead:
    """Retrieve a single account by its ID.

    Raises 404 if the account is not found.
    """
    account = await accounts.get(account_id)
    if account is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Account not found")
    return account


@router.post("", response_model=AccountRead, status_code=status.HTTP_201_CREATED)
async def create_account(
    account_in: AccountCreate,
    accounts: AccountsServiceInterface = Depends(get_accounts_service),
    users: UsersServiceInterface = Depends(get_users_service),
) -> AccountRead:
    """Open an account and add it to its user's ``account_ids``."""
    account = await accounts.create(account_in)
    if account.user_id is not None:
        await users.attach(account.user_id, "account_ids", account.id)
    return account


@router.put("/{account_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_account(
    account_id: str,
    account_in: AccountCreate,
    accounts: AccountsServiceInterface = Depends(get_accounts_service),
) -> None:
    """Replace an existing account, including its balance."""
    if await accounts.get(account_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Account not found")
    await accounts.update(account_id, account_in)
    return None


@router.delete("/{account_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_account(
    account_id: str,
    accounts: AccountsServiceInterface = Depends(get_accounts_service),
) -> None:
    """Delete an account.

    The owning user keeps the id in ``account_ids`` and the account's
    transactions are left in place.
    """
    if await accounts.get(account_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Account not found")
    await accounts.remove(account_id)
    return None
