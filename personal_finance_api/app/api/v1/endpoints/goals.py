"""
Goal endpoints for API v1.

CRUD over savings goals plus a per-user listing.  Creating a goal that
names a ``user_id`` also records the new goal id on that user.
Deleting a goal does not touch the user document.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from personal_finance_api.app.api.deps import get_goals_service, get_users_service
from personal_finance_api.app.schemas.goal import GoalCreate, GoalRead
from personal_finance_api.app.services.interfaces import GoalsServiceInterface, UsersServiceInterface


router = APIRouter()


@router.get("", response_model=List[GoalRead])
async def list_goals(
    goals: GoalsServiceInterface = Depends(get_goals_service),
) -> List[GoalRead]:
    """Return every goal."""
    return await goals.get_all()


@router.get("/user/{user_id}", response_model=List[GoalRead])
async def list_goals_for_user(
    user_id: str,
    goals: GoalsServiceInterface = Depends(get_goals_service),
) -> List[GoalRead]:
    """Return the goals owned by ``user_id``.

    An unknown user simply has no goals: the response is an empty list,
    not a 404.
    """
    return await goals.get_for_user(user_id)


@router.get("/{goal_id}", response_model=GoalRead)
async def get_goal(
    goal_id: str,
    goals: GoalsServiceInterface = Depends(get_goals_service),
) -> GoalRead:
    """Retrieve a single goal by its ID.

    Raises 404 if the goal is not found.
    """
    goal = await goals.get(goal_id)
    if goal is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Goal not found")
    return goal


@router.post("", response_model=GoalRead, status_code=status.HTTP_201_CREATED)
async def create_goal(
    goal_in: GoalCreate,
    goals: GoalsServiceInterface = Depends(get_goals_service),
    users: UsersServiceInterface = Depends(get_users_service),
) -> GoalRead:
    """Create a goal and link it to its user, if any."""
    goal = await goals.create(goal_in)
    if goal.user_id is not None:
        await users.attach(goal.user_id, "goal_ids", goal.id)
    return goal


@router.put("/{goal_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_goal(
    goal_id: str,
    goal_in: GoalCreate,
    goals: GoalsServiceInterface = Depends(get_goals_service),
) -> None:
    """Replace an existing goal with the request body."""
    if await goals.get(goal_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Goal not found")
    await goals.update(goal_id, goal_in)
    return None


@router.delete("/{goal_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_goal(
    goal_id: str,
    goals: GoalsServiceInterface = Depends(get_goals_service),
) -> None:
    if await goals.get(goal_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Goal not found")
    await goals.remove(goal_id)
    return None
