"""
Best-fit window selection.

Among the windows an item may legally occupy, the preferred window type
wins first, then the window that would be left with the least slack, then
the earliest start. Remaining ties keep the caller's order.
"""

from datetime import datetime
from typing import Iterable, List, Optional

from ...models import WorkItem, MaintenanceWindow
from ...schemas import SchedulingParameters
from ..constraints.compatibility import is_exact_match
from ..constraints.window_constraints import is_window_allowed
from ..core.capacity import available_hours
from ..utils.window_utils import PlanLookup, plan_index, resolve_parameters, resolve_required_hours, to_utc


def calculate_slack(window: MaintenanceWindow, required_hours: float, plans: PlanLookup = None,
                    params: Optional[SchedulingParameters] = None) -> float:
    """Hours left in the window once the item is placed."""
    return available_hours(window, plans, params) - required_hours


def calculate_fit_key(item: WorkItem, required_hours: float, window: MaintenanceWindow,
                      plans: PlanLookup = None, params: Optional[SchedulingParameters] = None):
    return (
        0 if is_exact_match(item.urgency_tier, window.type) else 1,
        calculate_slack(window, required_hours, plans, params),
        to_utc(window.start_date),
    )


def rank_windows(item: WorkItem, candidate_windows: Iterable[MaintenanceWindow], plans: PlanLookup = None,
                 params: Optional[SchedulingParameters] = None, now: Optional[datetime] = None,
                 required_hours: Optional[float] = None) -> List[MaintenanceWindow]:
    """Every legal window for the item, best first."""
    params = resolve_parameters(params)
    plans = plan_index(plans)
    if required_hours is None:
        required_hours = resolve_required_hours(item, plans, params)

    allowed = [
        window for window in candidate_windows
        if is_window_allowed(item, required_hours, window, plans, params, now)
    ]
    # sorted() is stable, so input order settles exact ties
    return sorted(allowed, key=lambda window: calculate_fit_key(item, required_hours, window, plans, params))


def select_window(item: WorkItem, candidate_windows: Iterable[MaintenanceWindow], plans: PlanLookup = None,
                  params: Optional[SchedulingParameters] = None, now: Optional[datetime] = None,
                  required_hours: Optional[float] = None) -> Optional[MaintenanceWindow]:
    """The single best legal window, or None when nothing fits."""
    ranked = rank_windows(item, candidate_windows, plans, params, now, required_hours)
    return ranked[0] if ranked else None
