"""
Service layer for savings goals.

Goals are owned by a user through ``user_id`` and may list the
transactions and tags that relate to them.
"""

from personal_finance_api.app.core.db import GOALS
from personal_finance_api.app.schemas.goal import GoalCreate, GoalRead
from personal_finance_api.app.services.base import MongoUserScopedService
from personal_finance_api.app.services.interfaces import GoalsServiceInterface


class GoalsService(MongoUserScopedService[GoalCreate, GoalRead], GoalsServiceInterface):
    collection_name = GOALS
    read_model = GoalRead
    reference_list_fields = ("transaction_ids", "tag_ids")
