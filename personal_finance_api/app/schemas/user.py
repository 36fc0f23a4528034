"""
Pydantic models for user data.

The password is write-only: ``UserCreate`` accepts it in plain text and
the service layer stores a salted hash.  ``UserRead`` never carries the
password or its hash.
"""

from typing import List

from pydantic import BaseModel, Field

from .common import ObjectIdStr


class UserBase(BaseModel):
    name: str = Field(..., examples=["Jane Citizen"])
    email: str = Field(..., examples=["jane@example.com"])
    account_ids: List[ObjectIdStr] = Field(default_factory=list)
    goal_ids: List[ObjectIdStr] = Field(default_factory=list)
    transaction_ids: List[ObjectIdStr] = Field(default_factory=list)


class UserCreate(UserBase):
    """Schema for registering a user or fully replacing one."""

    password: str = Field(..., min_length=1, examples=["strongpassword"])


class UserRead(UserBase):
    """Schema for reading a user from the API."""

    id: str


class LoginRequest(BaseModel):
    email: str = Field(..., examples=["jane@example.com"])
    password: str = Field(..., examples=["strongpassword"])


class LoginResponse(BaseModel):
    user: UserRead
    access_token: str
    token_type: str = "bearer"
