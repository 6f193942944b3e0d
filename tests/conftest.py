import pytest

from maintenance_planner.schemas import SchedulingParameters
from factories import NOW


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def params():
    return SchedulingParameters(
        inter_task_buffer_hours=2,
        hours_per_day=24,
        default_required_hours=8,
        min_group_size_for_low_priority=3,
        underutilized_threshold=0.5,
        target_utilization=0.85,
        require_future_start=True,
    )
