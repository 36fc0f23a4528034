"""
Pydantic models for savings goals.

``balance`` is the progress made so far towards ``target_amount``.
Goals may be linked to the transactions and tags that contributed to
them through ``transaction_ids`` and ``tag_ids``.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from .common import ObjectIdStr, Timestamp


class GoalBase(BaseModel):
    user_id: Optional[ObjectIdStr] = Field(None, examples=["62a3f587102e921da1253d32"])
    name: str = Field(..., examples=["House Down Payment"])
    target_amount: float = Field(0.0, examples=[100000])
    target_date: Optional[Timestamp] = Field(None, examples=["2027-01-08T05:00:00Z"])
    balance: float = Field(0.0, examples=[73501.82])
    created: Optional[Timestamp] = None
    icon: Optional[str] = Field(None, examples=["🏠"])
    transaction_ids: List[ObjectIdStr] = Field(default_factory=list)
    tag_ids: List[ObjectIdStr] = Field(default_factory=list)


class GoalCreate(GoalBase):
    """Schema for creating or fully replacing a goal."""
    pass


class GoalRead(GoalBase):
    """Schema for reading a goal from the API."""

    id: str
