"""
Batch assignment of remediated work items to maintenance windows.
"""

import logging
from datetime import datetime
from typing import Dict, Iterable, List, Optional

from ...models import WorkItem, MaintenanceWindow, RemediationPlan
from ...schemas import SchedulingParameters, Assignment, UnassignedItem, AssignmentReport
from ..constraints.validation import validate_inputs
from ..scoring.fit_scoring import select_window
from ..scoring.priority_scoring import rank
from ..utils.window_utils import is_eligible, resolve_parameters, resolve_required_hours, with_item_appended
from .constants import NO_FIT_REASON

logger = logging.getLogger(__name__)

# ================================
# BATCH ASSIGNMENT
# ================================

def assign_all(items: Iterable[WorkItem], windows: Iterable[MaintenanceWindow],
               plans: Optional[Iterable[RemediationPlan]] = None,
               params: Optional[SchedulingParameters] = None,
               now: Optional[datetime] = None) -> AssignmentReport:
    """
    Place every eligible item into its best-fit window.

    Items are processed in priority order against a working snapshot of the
    windows, so each placement reduces the capacity seen by the next item.
    Inputs are validated up front and never mutated; the report carries
    updated copies of the windows.
    """
    params = resolve_parameters(params)
    item_list, window_list, plans_by_item = validate_inputs(items, windows, plans, params)

    eligible = [item for item in item_list if is_eligible(item)]
    skipped = len(item_list) - len(eligible)
    if skipped:
        logger.debug(f"Ignoring {skipped} item(s) that are not remediated or already scheduled")

    if not eligible:
        return AssignmentReport(windows=window_list)

    # Working snapshot, threaded through the loop
    working: Dict[str, MaintenanceWindow] = {window.id: window for window in window_list}
    assignments: List[Assignment] = []
    unassigned: List[UnassignedItem] = []

    for item in rank(eligible):
        required_hours = resolve_required_hours(item, plans_by_item, params)
        best = select_window(item, working.values(), plans_by_item, params, now, required_hours)

        if best is None:
            logger.debug(f"No window for {item.id} ({item.urgency_tier.value}, {required_hours}h)")
            unassigned.append(UnassignedItem(item_id=item.id, reason=NO_FIT_REASON))
            continue

        working[best.id] = with_item_appended(best, item)
        assignments.append(Assignment(
            item_id=item.id,
            window_id=best.id,
            window_type=best.type,
            required_hours=required_hours,
            reason=f"Assigned to {best.type.value} maintenance window",
        ))
        logger.debug(f"Assigned {item.id} to {best.id} ({best.type.value})")

    logger.info(f"Assignment pass: {len(assignments)} assigned, {len(unassigned)} unassigned")
    return AssignmentReport(
        assignments=assignments,
        unassigned=unassigned,
        windows=[working[window.id] for window in window_list],
    )


def assign_to_window(window: MaintenanceWindow, items: Iterable[WorkItem],
                     plans: Optional[Iterable[RemediationPlan]] = None,
                     params: Optional[SchedulingParameters] = None,
                     now: Optional[datetime] = None) -> AssignmentReport:
    """Fill a single (typically newly created) window from the backlog."""
    return assign_all(items, [window], plans, params, now)
