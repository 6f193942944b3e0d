"""
Window and work item helpers shared by the engine components.
"""

from datetime import datetime, timezone
from typing import Dict, Iterable, List, Optional, Union

from ...models import WorkItem, MaintenanceWindow, RemediationPlan, ItemStatus
from ...schemas import SchedulingParameters

PlanLookup = Union[Dict[str, RemediationPlan], Iterable[RemediationPlan], None]


def to_utc(moment: datetime) -> datetime:
    """Naive datetimes are taken as UTC so they compare with aware ones."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


def utc_now(now: Optional[datetime] = None) -> datetime:
    return to_utc(now) if now is not None else datetime.now(timezone.utc)


def resolve_parameters(params: Optional[SchedulingParameters]) -> SchedulingParameters:
    return params if params is not None else SchedulingParameters()


def plan_index(plans: PlanLookup) -> Dict[str, RemediationPlan]:
    """Index remediation plans by the work item they belong to."""
    if plans is None:
        return {}
    if isinstance(plans, dict):
        return plans
    return {plan.work_item_id: plan for plan in plans}


def resolve_required_hours(item: WorkItem, plans: PlanLookup = None,
                           params: Optional[SchedulingParameters] = None) -> float:
    """
    Hours of outage time an item needs.
    Plan total hours win, then the plan's outage days, then the item's own
    estimate, then the configured default.
    """
    params = resolve_parameters(params)
    plan = plan_index(plans).get(item.id)

    if plan is not None:
        if plan.total_duration_hours and plan.total_duration_hours > 0:
            return float(plan.total_duration_hours)
        if plan.outage_duration_days and plan.outage_duration_days > 0:
            return float(plan.outage_duration_days) * params.hours_per_day

    if item.estimated_hours is not None:
        return float(item.estimated_hours)

    return params.default_required_hours


def is_eligible(item: WorkItem) -> bool:
    """Remediated and not yet placed in any window."""
    return item.status == ItemStatus.REMEDIATED and item.assigned_window_id is None


def with_item_appended(window: MaintenanceWindow, item: WorkItem) -> MaintenanceWindow:
    """Copy of the window with the item placed at the end of its assignments."""
    placed = item.model_copy(update={"assigned_window_id": window.id})
    return window.model_copy(update={"assigned_items": list(window.assigned_items) + [placed]})


def with_item_removed(window: MaintenanceWindow, item_id: str) -> MaintenanceWindow:
    remaining = [item for item in window.assigned_items if item.id != item_id]
    return window.model_copy(update={"assigned_items": remaining})


def release_window(window_id: str, items: Iterable[WorkItem]) -> List[WorkItem]:
    """
    Items that must go back to unscheduled once the caller deletes or
    cancels the given window. Returns updated copies; the inputs are untouched.
    """
    return [
        item.model_copy(update={"assigned_window_id": None})
        for item in items
        if item.assigned_window_id == window_id
    ]
