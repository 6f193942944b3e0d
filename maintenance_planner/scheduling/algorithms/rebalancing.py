"""
Read-only analysis of existing assignments.

Flags overloaded and underutilized windows and critical items still
waiting for a slot, and proposes reassignment moves for overloaded
windows. Nothing here changes the caller's data; applying a move is the
caller's decision.
"""

import logging
from collections import Counter
from datetime import datetime
from typing import Dict, Iterable, List, Optional

from ...models import (
    WorkItem, MaintenanceWindow, RemediationPlan, UrgencyTier, WindowStatus,
    RecommendationType, RecommendationCategory
)
from ...schemas import SchedulingParameters, WindowAnalysis, ReassignmentMove, Recommendation
from ..constraints.validation import validate_inputs
from ..core.capacity import available_hours, total_budget_hours, used_hours, utilization
from ..scoring.fit_scoring import select_window
from ..scoring.priority_scoring import calculate_tier_rank
from ..utils.window_utils import (
    PlanLookup, is_eligible, resolve_parameters, resolve_required_hours, to_utc,
    with_item_appended, with_item_removed
)

logger = logging.getLogger(__name__)


# ================================
# WINDOW ANALYSIS
# ================================

def calculate_balance_score(window: MaintenanceWindow) -> float:
    """Diversity bonus: 10 points per distinct tier hosted."""
    return 10.0 * len({item.urgency_tier for item in window.assigned_items})


def calculate_efficiency_score(window_utilization: float, params: SchedulingParameters) -> float:
    """100 at the target utilization, one point lost per percent away from it."""
    return max(0.0, 100.0 - abs(100.0 * params.target_utilization - 100.0 * window_utilization))


def analyze_window(window: MaintenanceWindow, plans: PlanLookup = None,
                   params: Optional[SchedulingParameters] = None) -> WindowAnalysis:
    params = resolve_parameters(params)
    window_utilization = utilization(window, plans, params)
    balance_score = calculate_balance_score(window)
    efficiency_score = calculate_efficiency_score(window_utilization, params)

    return WindowAnalysis(
        window_id=window.id,
        window_type=window.type,
        total_hours=total_budget_hours(window, params),
        used_hours=used_hours(window, plans, params),
        available_hours=available_hours(window, plans, params),
        utilization=window_utilization,
        item_count=len(window.assigned_items),
        tier_mix=dict(Counter(item.urgency_tier for item in window.assigned_items)),
        balance_score=balance_score,
        efficiency_score=efficiency_score,
        overall_score=(balance_score + efficiency_score) / 2,
        overloaded=window_utilization > 1.0,
        underutilized=0.0 < window_utilization < params.underutilized_threshold,
    )


def analyze_windows(windows: Iterable[MaintenanceWindow], plans: PlanLookup = None,
                    params: Optional[SchedulingParameters] = None) -> List[WindowAnalysis]:
    """Analysis of every window that has not been cancelled."""
    params = resolve_parameters(params)
    return [
        analyze_window(window, plans, params)
        for window in windows
        if window.status != WindowStatus.CANCELLED
    ]


# ================================
# REASSIGNMENT PROPOSALS
# ================================

def _move_order(item: WorkItem):
    # Least urgent first, newest first within a tier
    return (calculate_tier_rank(item.urgency_tier), -to_utc(item.created_at).timestamp())


def propose_moves(windows: Iterable[MaintenanceWindow], plans: Optional[Iterable[RemediationPlan]] = None,
                  params: Optional[SchedulingParameters] = None,
                  now: Optional[datetime] = None) -> List[ReassignmentMove]:
    """
    Moves that relieve overloaded windows, using the same best-fit choice
    as the assigner. Each move is applied to a local snapshot only, so later
    proposals account for earlier ones.
    """
    params = resolve_parameters(params)
    _, window_list, plans_by_item = validate_inputs((), windows, plans, params)

    working: Dict[str, MaintenanceWindow] = {window.id: window for window in window_list}
    moves: List[ReassignmentMove] = []

    for source in window_list:
        if source.status == WindowStatus.CANCELLED:
            continue
        if utilization(working[source.id], plans_by_item, params) <= 1.0:
            continue

        for item in sorted(working[source.id].assigned_items, key=_move_order):
            if utilization(working[source.id], plans_by_item, params) <= 1.0:
                break
            required_hours = resolve_required_hours(item, plans_by_item, params)
            targets = [window for window_id, window in working.items() if window_id != source.id]
            target = select_window(item, targets, plans_by_item, params, now, required_hours)
            if target is None:
                continue

            working[source.id] = with_item_removed(working[source.id], item.id)
            working[target.id] = with_item_appended(target, item)
            moves.append(ReassignmentMove(
                item_id=item.id,
                source_window_id=source.id,
                target_window_id=target.id,
                required_hours=required_hours,
            ))

        if utilization(working[source.id], plans_by_item, params) > 1.0:
            logger.warning(f"Window {source.id} stays overloaded after proposed moves")

    return moves


# ================================
# RECOMMENDATIONS
# ================================

def recommend(items: Iterable[WorkItem], windows: Iterable[MaintenanceWindow],
              plans: Optional[Iterable[RemediationPlan]] = None,
              params: Optional[SchedulingParameters] = None,
              now: Optional[datetime] = None,
              include_moves: bool = True) -> List[Recommendation]:
    """Human-readable findings, most severe first."""
    params = resolve_parameters(params)
    item_list, window_list, plans_by_item = validate_inputs(items, windows, plans, params)
    analysis = analyze_windows(window_list, plans_by_item, params)
    recommendations: List[Recommendation] = []

    urgent = [item for item in item_list if is_eligible(item) and item.urgency_tier == UrgencyTier.CRITICAL]
    if urgent:
        logger.warning(f"{len(urgent)} critical item(s) remain unscheduled")
        recommendations.append(Recommendation(
            type=RecommendationType.ERROR,
            category=RecommendationCategory.URGENT_UNSCHEDULED,
            title="Unscheduled critical anomalies",
            description=f"{len(urgent)} critical anomaly(ies) need immediate attention",
            action="Create an emergency outage window or rework priorities",
            item_ids=[item.id for item in urgent],
        ))

    overloaded = [entry for entry in analysis if entry.overloaded]
    if overloaded:
        logger.warning(f"{len(overloaded)} window(s) exceed their capacity")
        recommendations.append(Recommendation(
            type=RecommendationType.WARNING,
            category=RecommendationCategory.OVERLOADED,
            title="Overloaded windows",
            description=f"{len(overloaded)} window(s) exceed their capacity",
            action="Redistribute anomalies or extend the window duration",
            window_ids=[entry.window_id for entry in overloaded],
        ))

    underutilized = [entry for entry in analysis if entry.underutilized]
    if underutilized:
        recommendations.append(Recommendation(
            type=RecommendationType.INFO,
            category=RecommendationCategory.UNDERUTILIZED,
            title="Available capacity",
            description=f"{len(underutilized)} window(s) can host more anomalies",
            action="Schedule additional anomalies",
            window_ids=[entry.window_id for entry in underutilized],
        ))

    if include_moves and overloaded:
        moves = propose_moves(window_list, list(plans_by_item.values()), params, now)
        if moves:
            recommendations.append(Recommendation(
                type=RecommendationType.SUGGESTION,
                category=RecommendationCategory.REASSIGNMENT,
                title="Suggested reassignments",
                description=f"{len(moves)} move(s) would relieve overloaded windows",
                action="Review and apply the proposed moves",
                window_ids=sorted({move.source_window_id for move in moves} | {move.target_window_id for move in moves}),
                item_ids=[move.item_id for move in moves],
                moves=moves,
            ))

    return recommendations
