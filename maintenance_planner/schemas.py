from pydantic import BaseModel, Field
from typing import Optional, List, Dict
from . import config
from .models import (
    WorkItem, MaintenanceWindow, RemediationPlan, UrgencyTier, WindowType,
    RecommendationType, RecommendationCategory
)

# ----------------- Engine Parameters ---------------------

class SchedulingParameters(BaseModel):
    inter_task_buffer_hours: float = Field(default=config.INTER_TASK_BUFFER_HOURS, ge=0)
    hours_per_day: float = Field(default=config.HOURS_PER_DAY, gt=0)
    default_required_hours: float = Field(default=config.DEFAULT_REQUIRED_HOURS, gt=0)
    min_group_size_for_low_priority: int = Field(default=config.MIN_GROUP_SIZE_FOR_LOW_PRIORITY, ge=1)
    underutilized_threshold: float = Field(default=config.UNDERUTILIZED_THRESHOLD, ge=0)
    target_utilization: float = Field(default=config.TARGET_UTILIZATION, gt=0)
    require_future_start: bool = config.REQUIRE_FUTURE_START


# ----------------- Assignment Schemas ---------------------

class Assignment(BaseModel):
    item_id: str
    window_id: str
    window_type: WindowType
    required_hours: float
    reason: str

class UnassignedItem(BaseModel):
    item_id: str
    reason: str

class AssignmentReport(BaseModel):
    assignments: List[Assignment] = Field(default_factory=list)
    unassigned: List[UnassignedItem] = Field(default_factory=list)
    windows: List[MaintenanceWindow] = Field(default_factory=list)

    @property
    def assigned_count(self) -> int:
        return len(self.assignments)

    def window_for(self, item_id: str) -> Optional[str]:
        for assignment in self.assignments:
            if assignment.item_id == item_id:
                return assignment.window_id
        return None


# ----------------- Analysis Schemas ---------------------

class WindowAnalysis(BaseModel):
    window_id: str
    window_type: WindowType
    total_hours: float
    used_hours: float
    available_hours: float
    utilization: float
    item_count: int
    tier_mix: Dict[UrgencyTier, int] = Field(default_factory=dict)
    balance_score: float
    efficiency_score: float
    overall_score: float
    overloaded: bool
    underutilized: bool

class ReassignmentMove(BaseModel):
    item_id: str
    source_window_id: str
    target_window_id: str
    required_hours: float

class Recommendation(BaseModel):
    type: RecommendationType
    category: RecommendationCategory
    title: str
    description: str
    action: str
    window_ids: List[str] = Field(default_factory=list)
    item_ids: List[str] = Field(default_factory=list)
    moves: List[ReassignmentMove] = Field(default_factory=list)


# ----------------- Planning Pass Schemas ---------------------

class PlanningPassResult(BaseModel):
    report: AssignmentReport
    new_windows: List[MaintenanceWindow] = Field(default_factory=list)
    unassigned: List[UnassignedItem] = Field(default_factory=list)


# ----------------- API Request/Response Schemas ---------------------

class RankRequest(BaseModel):
    items: List[WorkItem]

class CapacityRequest(BaseModel):
    windows: List[MaintenanceWindow]
    plans: List[RemediationPlan] = Field(default_factory=list)
    parameters: Optional[SchedulingParameters] = None

class WindowCapacity(BaseModel):
    window_id: str
    available_hours: float

class AssignRequest(BaseModel):
    items: List[WorkItem]
    windows: List[MaintenanceWindow]
    plans: List[RemediationPlan] = Field(default_factory=list)
    parameters: Optional[SchedulingParameters] = None

class SynthesizeRequest(BaseModel):
    items: List[WorkItem]
    plans: List[RemediationPlan] = Field(default_factory=list)
    parameters: Optional[SchedulingParameters] = None

class RecommendRequest(BaseModel):
    items: List[WorkItem]
    windows: List[MaintenanceWindow]
    plans: List[RemediationPlan] = Field(default_factory=list)
    parameters: Optional[SchedulingParameters] = None
    include_moves: bool = True

class RecommendResponse(BaseModel):
    recommendations: List[Recommendation]
    analysis: List[WindowAnalysis]

class PlanningPassRequest(BaseModel):
    items: List[WorkItem]
    windows: List[MaintenanceWindow]
    plans: List[RemediationPlan] = Field(default_factory=list)
    parameters: Optional[SchedulingParameters] = None
    synthesize: bool = True
