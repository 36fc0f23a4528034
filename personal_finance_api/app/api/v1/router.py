"""
Top-level router for version 1 of the API.

Aggregates the per-entity routers under a unified prefix.  When a new
entity is introduced, include its router here.
"""

from fastapi import APIRouter

from .endpoints import accounts, auth, goals, tags, transactions, users


router = APIRouter()

router.include_router(accounts.router, prefix="/accounts", tags=["accounts"])
router.include_router(goals.router, prefix="/goals", tags=["goals"])
router.include_router(tags.router, prefix="/tags", tags=["tags"])
router.include_router(transactions.router, prefix="/transactions", tags=["transactions"])
router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(auth.router, prefix="/auth", tags=["auth"])
