from datetime import datetime, timedelta

from maintenance_planner.models import (
    WorkItem, MaintenanceWindow, RemediationPlan, UrgencyTier, WindowType, WindowStatus, ItemStatus
)

NOW = datetime(2030, 1, 1, 8, 0, 0)


def make_item(item_id, tier="high", hours=None, created_offset_hours=0, status=ItemStatus.REMEDIATED,
              assigned_window_id=None, equipment_id=None):
    return WorkItem(
        id=item_id,
        urgency_tier=UrgencyTier(tier),
        created_at=NOW - timedelta(days=10) + timedelta(hours=created_offset_hours),
        status=status,
        estimated_hours=hours,
        assigned_window_id=assigned_window_id,
        equipment_id=equipment_id,
    )


def make_window(window_id, window_type="minor", days=1, start_offset_days=2, status=WindowStatus.PLANNED,
                items=None, base=NOW):
    start = base + timedelta(days=start_offset_days)
    return MaintenanceWindow(
        id=window_id,
        type=WindowType(window_type),
        duration_days=days,
        start_date=start,
        end_date=start + timedelta(days=max(days, 1)),
        status=status,
        assigned_items=[
            item.model_copy(update={"assigned_window_id": window_id}) for item in (items or [])
        ],
    )


def make_plan(item_id, total_hours=None, outage_days=None):
    return RemediationPlan(
        id=f"plan-{item_id}",
        work_item_id=item_id,
        total_duration_hours=total_hours,
        outage_duration_days=outage_days,
    )
