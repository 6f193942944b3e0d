from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional, List
import enum

# Enums

class UrgencyTier(str, enum.Enum):
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

class ItemStatus(str, enum.Enum):
    NEW = "new"
    IN_PROGRESS = "in_progress"
    REMEDIATED = "remediated"  # Treated, waiting for an outage slot
    CLOSED = "closed"

class WindowType(str, enum.Enum):
    FORCE = "force"    # Shortest, most urgent outage class
    MINOR = "minor"
    MAJOR = "major"    # Longest outage class

class WindowStatus(str, enum.Enum):
    PLANNED = "planned"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

class RecommendationType(str, enum.Enum):
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"
    SUGGESTION = "suggestion"

class RecommendationCategory(str, enum.Enum):
    URGENT_UNSCHEDULED = "urgent_unscheduled"
    OVERLOADED = "overloaded"
    UNDERUTILIZED = "underutilized"
    REASSIGNMENT = "reassignment"


# ----------------- Domain Records ---------------------

class WorkItem(BaseModel):
    """A remediated anomaly waiting to be placed in a maintenance window."""
    id: str
    urgency_tier: UrgencyTier
    created_at: datetime
    status: ItemStatus = ItemStatus.REMEDIATED
    estimated_hours: Optional[float] = None
    assigned_window_id: Optional[str] = None
    equipment_id: Optional[str] = None
    title: Optional[str] = None

    class Config:
        from_attributes = True

class RemediationPlan(BaseModel):
    id: str
    work_item_id: str
    needs_outage: bool = True
    outage_type: Optional[WindowType] = None
    outage_duration_days: Optional[float] = None
    total_duration_hours: Optional[float] = None

    class Config:
        from_attributes = True

class MaintenanceWindow(BaseModel):
    id: str
    type: WindowType
    duration_days: int
    start_date: datetime
    end_date: datetime
    status: WindowStatus = WindowStatus.PLANNED
    assigned_items: List[WorkItem] = Field(default_factory=list)
    auto_created: bool = False
    description: Optional[str] = None
    source_item_id: Optional[str] = None

    class Config:
        from_attributes = True
