"""
Pydantic models for transactions.

A transaction may reference the user and the account it belongs to,
plus any number of tags.  None of these references are enforced.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .common import ObjectIdStr, Timestamp


class TransactionType(str, Enum):
    DEBIT = "Debit"
    CREDIT = "Credit"
    TRANSFER = "Transfer"


class TransactionBase(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    user_id: Optional[ObjectIdStr] = Field(None, examples=["62a3f587102e921da1253d32"])
    account_id: Optional[ObjectIdStr] = Field(None, examples=["62a3e63a102e921da1253d2c"])
    transaction_type: TransactionType = Field(TransactionType.DEBIT, examples=["Debit"])
    amount: float = Field(..., examples=[42.5])
    date_time: Timestamp = Field(..., examples=["2025-03-14T09:30:00Z"])
    description: Optional[str] = Field(None, examples=["Weekly shop"])
    tag_ids: List[ObjectIdStr] = Field(default_factory=list)


class TransactionCreate(TransactionBase):
    """Schema for creating or fully replacing a transaction."""
    pass


class TransactionRead(TransactionBase):
    """Schema for reading a transaction from the API."""

    id: str
