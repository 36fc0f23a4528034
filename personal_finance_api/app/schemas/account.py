"""
Pydantic models for account data.

An account belongs to a user through ``user_id``.  The reference is
weak: deleting the user leaves the account in place.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .common import ObjectIdStr


class AccountType(str, Enum):
    GOAL_SAVER = "GoalSaver"
    NETBANK_SAVER = "NetBankSaver"
    EVERYDAY = "EveryDay"
    CREDIT = "Credit"


class AccountBase(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    user_id: Optional[ObjectIdStr] = Field(None, examples=["62a3f587102e921da1253d32"])
    number: Optional[int] = Field(None, examples=[12345678])
    name: str = Field(..., examples=["Everyday Account"])
    type: AccountType = Field(AccountType.EVERYDAY, examples=["EveryDay"])
    balance: float = Field(0.0, examples=[1500.25])
    transaction_ids: List[ObjectIdStr] = Field(default_factory=list)


class AccountCreate(AccountBase):
    """Schema for creating or fully replacing an account."""
    pass


class AccountRead(AccountBase):
    """Schema for reading an account from the API."""

    id: str
