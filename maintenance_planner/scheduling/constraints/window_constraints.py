"""
Hard constraints a window must satisfy before it can host an item.
"""

import logging
from datetime import datetime
from typing import Optional

from ...models import WorkItem, MaintenanceWindow
from ...schemas import SchedulingParameters
from ..core.capacity import available_hours
from ..core.constants import OPEN_STATUSES
from ..utils.window_utils import PlanLookup, resolve_parameters, to_utc, utc_now
from .compatibility import is_compatible

logger = logging.getLogger(__name__)


def is_window_open(window: MaintenanceWindow, now: Optional[datetime] = None,
                   params: Optional[SchedulingParameters] = None) -> bool:
    """Planned or in progress, and (by default) not started yet."""
    params = resolve_parameters(params)
    if window.status not in OPEN_STATUSES:
        return False
    if params.require_future_start and to_utc(window.start_date) <= utc_now(now):
        return False
    return True


def has_capacity_for(window: MaintenanceWindow, required_hours: float, plans: PlanLookup = None,
                     params: Optional[SchedulingParameters] = None) -> bool:
    """The item's hours plus its handover buffer must fit in what is left."""
    params = resolve_parameters(params)
    # Buffer included so used + buffer per item never exceeds the budget after placement
    return available_hours(window, plans, params) >= required_hours + params.inter_task_buffer_hours


def is_window_allowed(item: WorkItem, required_hours: float, window: MaintenanceWindow,
                      plans: PlanLookup = None, params: Optional[SchedulingParameters] = None,
                      now: Optional[datetime] = None) -> bool:
    """
    Check if a window may host this item based on strict rules.
    """
    # Rule 1: window must still accept work
    if not is_window_open(window, now, params):
        logger.debug(f"Window {window.id} rejected for {item.id}: not open ({window.status.value})")
        return False

    # Rule 2: tier/type compatibility
    if not is_compatible(item.urgency_tier, window.type):
        logger.debug(f"Window {window.id} rejected for {item.id}: {window.type.value} cannot host {item.urgency_tier.value}")
        return False

    # Rule 3: capacity
    if not has_capacity_for(window, required_hours, plans, params):
        logger.debug(f"Window {window.id} rejected for {item.id}: not enough capacity for {required_hours}h")
        return False

    return True
