"""
Planning API endpoints for the persistence/UI layer
"""

from typing import List
from fastapi import APIRouter, HTTPException, status

from ..models import WorkItem, MaintenanceWindow
from ..schemas import (
    RankRequest, CapacityRequest, WindowCapacity, AssignRequest, AssignmentReport,
    SynthesizeRequest, RecommendRequest, RecommendResponse, PlanningPassRequest, PlanningPassResult
)
from ..scheduling import (
    rank, available_hours, assign_all, synthesize_windows, recommend, analyze_windows, validate_inputs
)
from ..scheduling.exceptions import InvalidInput, SchedulingInProgress
from ..services.planning_service import planning_service

router = APIRouter()


def _invalid(exc: InvalidInput) -> HTTPException:
    return HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc))


@router.post("/rank", response_model=List[WorkItem])
async def rank_items(request: RankRequest):
    """Processing order for a backlog: most urgent tier first, oldest first."""
    return rank(request.items)


@router.post("/capacity", response_model=List[WindowCapacity])
async def window_capacity(request: CapacityRequest):
    try:
        _, windows, plans = validate_inputs((), request.windows, request.plans, request.parameters)
    except InvalidInput as e:
        raise _invalid(e)
    return [
        WindowCapacity(window_id=window.id, available_hours=available_hours(window, plans, request.parameters))
        for window in windows
    ]


@router.post("/assign", response_model=AssignmentReport)
async def assign_items(request: AssignRequest):
    try:
        return assign_all(request.items, request.windows, request.plans, request.parameters)
    except InvalidInput as e:
        raise _invalid(e)


@router.post("/synthesize", response_model=List[MaintenanceWindow])
async def synthesize(request: SynthesizeRequest):
    try:
        return synthesize_windows(request.items, request.plans, request.parameters)
    except InvalidInput as e:
        raise _invalid(e)


@router.post("/recommend", response_model=RecommendResponse)
async def recommendations(request: RecommendRequest):
    """Suggestions only; nothing is applied."""
    try:
        found = recommend(request.items, request.windows, request.plans, request.parameters,
                          include_moves=request.include_moves)
        _, windows, plans = validate_inputs((), request.windows, request.plans, request.parameters)
    except InvalidInput as e:
        raise _invalid(e)
    return RecommendResponse(recommendations=found, analysis=analyze_windows(windows, plans, request.parameters))


@router.post("/pass", response_model=PlanningPassResult)
def run_planning_pass(request: PlanningPassRequest):
    """Assign the backlog and synthesize windows for what does not fit."""
    try:
        return planning_service.run_pass(request.items, request.windows, request.plans,
                                         request.parameters, synthesize=request.synthesize)
    except InvalidInput as e:
        raise _invalid(e)
    except SchedulingInProgress as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
