"""
Scheduling pass coordinator used by the HTTP layer.
"""

import logging
import threading
from datetime import datetime
from typing import Iterable, List, Optional

from ..models import WorkItem, MaintenanceWindow, RemediationPlan
from ..schemas import SchedulingParameters, PlanningPassResult, UnassignedItem
from ..scheduling import assign_all, synthesize_windows
from ..scheduling.exceptions import SchedulingInProgress

logger = logging.getLogger(__name__)


class PlanningService:
    """
    Runs complete scheduling passes, one at a time.

    A pass assigns the backlog to existing windows and, optionally,
    synthesizes windows for what is left. The lock only guards against two
    overlapping passes through this service; callers sharing storage across
    processes still need their own exclusion.
    """

    def __init__(self, params: Optional[SchedulingParameters] = None):
        self.params = params or SchedulingParameters()
        self._pass_lock = threading.Lock()

    @property
    def in_progress(self) -> bool:
        return self._pass_lock.locked()

    def run_pass(self, items: Iterable[WorkItem], windows: Iterable[MaintenanceWindow],
                 plans: Optional[Iterable[RemediationPlan]] = None,
                 params: Optional[SchedulingParameters] = None,
                 now: Optional[datetime] = None,
                 synthesize: bool = True) -> PlanningPassResult:
        if not self._pass_lock.acquire(blocking=False):
            raise SchedulingInProgress("A scheduling pass is already running")
        try:
            return self._run_pass(list(items), list(windows), list(plans or []), params or self.params, now, synthesize)
        finally:
            self._pass_lock.release()

    def _run_pass(self, items: List[WorkItem], windows: List[MaintenanceWindow],
                  plans: List[RemediationPlan], params: SchedulingParameters,
                  now: Optional[datetime], synthesize: bool) -> PlanningPassResult:
        report = assign_all(items, windows, plans, params, now)
        if not synthesize or not report.unassigned:
            return PlanningPassResult(report=report, unassigned=report.unassigned)

        # Items the assigner gave up on, in the order they were reported
        leftover_ids = [entry.item_id for entry in report.unassigned]
        by_id = {item.id: item for item in items}
        leftovers = [by_id[item_id] for item_id in leftover_ids]

        new_windows = synthesize_windows(leftovers, plans, params, now)
        placed = {item.id for window in new_windows for item in window.assigned_items}
        still_unassigned: List[UnassignedItem] = [entry for entry in report.unassigned if entry.item_id not in placed]

        logger.info(f"Scheduling pass: {report.assigned_count} assigned, {len(new_windows)} window(s) synthesized, "
                    f"{len(still_unassigned)} left unassigned")
        return PlanningPassResult(report=report, new_windows=new_windows, unassigned=still_unassigned)


# Global planning service instance
planning_service = PlanningService()
