"""
Capacity accounting for maintenance windows.

A window offers duration_days * hours_per_day hours. Each assigned item
consumes its required hours plus a fixed handover buffer. Setting the
buffer to zero reproduces the older day-based approximation.
"""

from typing import Optional

from ...models import MaintenanceWindow
from ...schemas import SchedulingParameters
from ..utils.window_utils import PlanLookup, plan_index, resolve_parameters, resolve_required_hours


def total_budget_hours(window: MaintenanceWindow, params: Optional[SchedulingParameters] = None) -> float:
    params = resolve_parameters(params)
    return window.duration_days * params.hours_per_day


def used_hours(window: MaintenanceWindow, plans: PlanLookup = None,
               params: Optional[SchedulingParameters] = None) -> float:
    """Work hours of every assigned item plus one buffer per item."""
    params = resolve_parameters(params)
    plans = plan_index(plans)
    work = sum(resolve_required_hours(item, plans, params) for item in window.assigned_items)
    buffer = len(window.assigned_items) * params.inter_task_buffer_hours
    return work + buffer


def available_hours(window: MaintenanceWindow, plans: PlanLookup = None,
                    params: Optional[SchedulingParameters] = None) -> float:
    """Remaining schedulable hours, never negative."""
    params = resolve_parameters(params)
    return max(0.0, total_budget_hours(window, params) - used_hours(window, plans, params))


def utilization(window: MaintenanceWindow, plans: PlanLookup = None,
                params: Optional[SchedulingParameters] = None) -> float:
    """Used share of the budget; above 1.0 means the window is overloaded."""
    params = resolve_parameters(params)
    total = total_budget_hours(window, params)
    if total <= 0:
        return 0.0
    return used_hours(window, plans, params) / total
