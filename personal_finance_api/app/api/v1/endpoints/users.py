"""
User endpoints for API v1.

Registration, listing and maintenance of users.  Passwords are accepted
in request bodies but never returned; see ``auth.py`` for login.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from personal_finance_api.app.api.deps import get_users_service
from personal_finance_api.app.schemas.user import UserCreate, UserRead
from personal_finance_api.app.services.interfaces import UsersServiceInterface


router = APIRouter()


@router.get("", response_model=List[UserRead])
async def list_users(users: UsersServiceInterface = Depends(get_users_service)) -> List[UserRead]:
    """Return every user.  Password hashes are never included."""
    return await users.get_all()


@router.get("/{user_id}", response_model=UserRead)
async def get_user(user_id: str, users: UsersServiceInterface = Depends(get_users_service)) -> UserRead:
    """Retrieve a single user by its ID, or 404."""
    user = await users.get(user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return user


@router.post("", response_model=UserRead, status_code=status.HTTP_201_CREATED)
async def register_user(user_in: UserCreate, users: UsersServiceInterface = Depends(get_users_service)) -> UserRead:
    """Register a new user.

    E-mail uniqueness is not checked; two users may share an address,
    in which case login matches whichever the store returns first.
    """
    return await users.create(user_in)


@router.put("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_user(
    user_id: str,
    user_in: UserCreate,
    users: UsersServiceInterface = Depends(get_users_service),
) -> None:
    """Replace a user, including the password and id lists."""
    if await users.get(user_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    await users.update(user_id, user_in)
    return None


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(user_id: str, users: UsersServiceInterface = Depends(get_users_service)) -> None:
    """Delete a user.  Their accounts, goals and transactions remain."""
    if await users.get(user_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    await users.remove(user_id)
    return None
