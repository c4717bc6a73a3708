"""Goal Routes — weekly priorities: list by week, create, partial update, delete.

Invariants:
    - Payloads validated by GoalCreate / GoalUpdate before Storage is called
    - Unknown goal id on PATCH/DELETE → 404 ResourceNotFoundError
    - DELETE success → 204 with an empty body
    - The 3-goals-per-week cap is a client concern; not enforced here
"""

import logging

from fastapi import APIRouter, Depends, Response, status

from app.api.dependencies import get_storage
from app.core.domain_types import GoalId
from app.core.errors import ResourceNotFoundError
from app.core.repository_protocols import Storage
from app.schemas.common import IsoDate
from app.schemas.goal import GoalCreate, GoalResponse, GoalUpdate

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/goals", tags=["goals"])


@router.get("/{week_start}", response_model=list[GoalResponse])
async def list_goals(week_start: IsoDate, storage: Storage = Depends(get_storage)):
    """Goals for the week starting on week_start, in insertion order."""
    goals = await storage.list_goals(week_start)
    return [GoalResponse.model_validate(g) for g in goals]


@router.post(
    "", response_model=GoalResponse, status_code=status.HTTP_201_CREATED,
)
async def create_goal(body: GoalCreate, storage: Storage = Depends(get_storage)):
    goal = await storage.create_goal(body.to_domain())
    logger.info(
        "Goal created",
        extra={"resource_id": goal.id, "week_start": goal.week_start.isoformat()},
    )
    return GoalResponse.model_validate(goal)


@router.patch("/{goal_id}", response_model=GoalResponse)
async def update_goal(
    goal_id: str, body: GoalUpdate, storage: Storage = Depends(get_storage),
):
    """Apply only the fields present in the request body."""
    goal = await storage.update_goal(GoalId(goal_id), body.to_changes())
    if goal is None:
        raise ResourceNotFoundError("Goal", goal_id)
    return GoalResponse.model_validate(goal)


@router.delete("/{goal_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_goal(goal_id: str, storage: Storage = Depends(get_storage)):
    if not await storage.delete_goal(GoalId(goal_id)):
        raise ResourceNotFoundError("Goal", goal_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
