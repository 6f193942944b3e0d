"""
Creation of new maintenance windows for items no existing window can host.
"""

import logging
import math
import uuid
from datetime import datetime, timedelta
from typing import Dict, Iterable, List, Optional

from ...models import WorkItem, MaintenanceWindow, RemediationPlan, UrgencyTier, WindowType, WindowStatus
from ...schemas import SchedulingParameters
from ..constraints.validation import validate_inputs
from ..scoring.priority_scoring import rank
from ..utils.window_utils import PlanLookup, resolve_parameters, resolve_required_hours, utc_now, with_item_appended

logger = logging.getLogger(__name__)

# Group name, window type, tiers it collects, whether the minimum group size applies
SYNTHESIS_GROUPS = [
    ("critical", WindowType.FORCE, frozenset({UrgencyTier.CRITICAL}), False),
    ("high", WindowType.MINOR, frozenset({UrgencyTier.HIGH}), False),
    ("medium-low", WindowType.MINOR, frozenset({UrgencyTier.MEDIUM, UrgencyTier.LOW}), True),
]


def calculate_window_days(items: List[WorkItem], plans: PlanLookup = None,
                          params: Optional[SchedulingParameters] = None) -> int:
    """
    Whole days needed to host every item with its handover buffer.
    With inter_task_buffer_hours=0 this is the plain ceil(hours / hours_per_day) sizing.
    """
    params = resolve_parameters(params)
    hours = sum(resolve_required_hours(item, plans, params) for item in items)
    hours += len(items) * params.inter_task_buffer_hours
    return max(1, math.ceil(hours / params.hours_per_day))


def group_items(items: Iterable[WorkItem], params: Optional[SchedulingParameters] = None) -> Dict[str, List[WorkItem]]:
    """
    Split items into synthesis groups. Medium/low items only form a group
    once enough of them are pending, to avoid many tiny windows.
    """
    params = resolve_parameters(params)
    ordered = rank(items)
    groups: Dict[str, List[WorkItem]] = {}
    for name, _, tiers, needs_minimum in SYNTHESIS_GROUPS:
        members = [item for item in ordered if item.urgency_tier in tiers]
        if not members:
            continue
        if needs_minimum and len(members) < params.min_group_size_for_low_priority:
            logger.debug(f"Holding {len(members)} {name} item(s) until {params.min_group_size_for_low_priority} are pending")
            continue
        groups[name] = members
    return groups


def build_window(window_type: WindowType, items: List[WorkItem], plans: PlanLookup = None,
                 params: Optional[SchedulingParameters] = None, now: Optional[datetime] = None) -> MaintenanceWindow:
    params = resolve_parameters(params)
    duration_days = calculate_window_days(items, plans, params)
    start_date = utc_now(now) + timedelta(days=1)
    equipment = ", ".join(item.equipment_id or item.id for item in items)

    window = MaintenanceWindow(
        id=f"auto-{window_type.value}-{uuid.uuid4().hex[:12]}",
        type=window_type,
        duration_days=duration_days,
        start_date=start_date,
        end_date=start_date + timedelta(days=duration_days),
        status=WindowStatus.PLANNED,
        auto_created=True,
        description=f"Automatic {window_type.value} outage - equipment: {equipment}",
        source_item_id=items[0].id if len(items) == 1 else None,
    )
    for item in items:
        window = with_item_appended(window, item)
    return window


def synthesize_windows(unassigned_items: Iterable[WorkItem],
                       plans: Optional[Iterable[RemediationPlan]] = None,
                       params: Optional[SchedulingParameters] = None,
                       now: Optional[datetime] = None) -> List[MaintenanceWindow]:
    """
    One new auto-created window per non-empty group, pre-filled with the
    group's items. Items held back by the group size rule stay unassigned.
    """
    params = resolve_parameters(params)
    item_list, _, plans_by_item = validate_inputs(unassigned_items, (), plans, params)

    new_windows = []
    groups = group_items(item_list, params)
    for name, window_type, _, _ in SYNTHESIS_GROUPS:
        members = groups.get(name)
        if not members:
            continue
        window = build_window(window_type, members, plans_by_item, params, now)
        logger.info(f"Synthesized {window.type.value} window {window.id}: {window.duration_days} day(s), {len(members)} item(s)")
        new_windows.append(window)

    return new_windows
