"""
Integrity checks applied to caller data before any assignment is attempted.
"""

import logging
from typing import Dict, Iterable, List, Optional, Tuple

from ...models import WorkItem, MaintenanceWindow, RemediationPlan
from ...schemas import SchedulingParameters
from ..exceptions import InvalidInput
from ..utils.window_utils import resolve_parameters, resolve_required_hours, to_utc

logger = logging.getLogger(__name__)


def _dedupe(records: Iterable, kind: str, key=lambda record: record.id) -> List:
    """Collapse identical duplicates; reject different records sharing an id."""
    seen: Dict[str, object] = {}
    unique = []
    for record in records:
        record_id = key(record)
        if record_id in seen:
            if seen[record_id] != record:
                raise InvalidInput(f"{kind} id '{record_id}' is used by two different {kind}s")
            logger.debug(f"Dropping identical duplicate {kind} '{record_id}'")
            continue
        seen[record_id] = record
        unique.append(record)
    return unique


def validate_window(window: MaintenanceWindow):
    if window.duration_days <= 0:
        raise InvalidInput(f"Window '{window.id}' has non-positive duration_days ({window.duration_days})")
    if to_utc(window.end_date) <= to_utc(window.start_date):
        raise InvalidInput(f"Window '{window.id}' ends before it starts ({window.start_date} -> {window.end_date})")


def validate_plan(plan: RemediationPlan):
    if plan.total_duration_hours is not None and plan.total_duration_hours < 0:
        raise InvalidInput(f"Plan '{plan.id}' has negative total_duration_hours")
    if plan.outage_duration_days is not None and plan.outage_duration_days < 0:
        raise InvalidInput(f"Plan '{plan.id}' has negative outage_duration_days")


def validate_item(item: WorkItem, plans: Dict[str, RemediationPlan], params: SchedulingParameters):
    if item.estimated_hours is not None and item.estimated_hours <= 0:
        raise InvalidInput(f"Item '{item.id}' has non-positive estimated_hours ({item.estimated_hours})")
    hours = resolve_required_hours(item, plans, params)
    if hours <= 0:
        raise InvalidInput(f"Item '{item.id}' requires non-positive hours ({hours})")


def validate_inputs(items: Iterable[WorkItem] = (), windows: Iterable[MaintenanceWindow] = (),
                    plans: Optional[Iterable[RemediationPlan]] = None,
                    params: Optional[SchedulingParameters] = None
                    ) -> Tuple[List[WorkItem], List[MaintenanceWindow], Dict[str, RemediationPlan]]:
    """
    Validate one engine call's worth of data.
    Returns de-duplicated items and windows plus the plan index.
    Raises InvalidInput on the first violation found.
    """
    params = resolve_parameters(params)

    plan_list = _dedupe(plans or [], "plan")
    plans_by_item: Dict[str, RemediationPlan] = {}
    for plan in plan_list:
        validate_plan(plan)
        if plan.work_item_id in plans_by_item:
            raise InvalidInput(f"Item '{plan.work_item_id}' has more than one remediation plan")
        plans_by_item[plan.work_item_id] = plan

    window_list = _dedupe(windows, "window")
    placed_in: Dict[str, str] = {}
    for window in window_list:
        validate_window(window)
        for assigned in window.assigned_items:
            validate_item(assigned, plans_by_item, params)
            previous = placed_in.get(assigned.id)
            if previous is not None and previous != window.id:
                raise InvalidInput(f"Item '{assigned.id}' is assigned to both '{previous}' and '{window.id}'")
            placed_in[assigned.id] = window.id

    item_list = _dedupe(items, "item")
    for item in item_list:
        validate_item(item, plans_by_item, params)
        # An item already sitting in a window must say so
        holder = placed_in.get(item.id)
        if holder is not None and item.assigned_window_id != holder:
            raise InvalidInput(f"Item '{item.id}' is already assigned to '{holder}' "
                               f"but is passed with assigned_window_id={item.assigned_window_id!r}")

    return item_list, window_list, plans_by_item
