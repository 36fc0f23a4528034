"""Pydantic models for transaction tags."""

from typing import Optional

from pydantic import BaseModel, Field


class TagBase(BaseModel):
    name: str = Field(..., examples=["Groceries"])
    color: Optional[str] = Field(None, examples=["#FFCC00"])
    category: Optional[str] = Field(None, examples=["Spending"])


class TagCreate(TagBase):
    pass


class TagRead(TagBase):
    id: str
