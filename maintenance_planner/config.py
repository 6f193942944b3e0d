"""
Environment-driven defaults for the planning engine.

Values are read once at import time from the process environment (and a
local .env file when present). Every engine call still accepts an explicit
SchedulingParameters instance that overrides them.
"""

import os
from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


INTER_TASK_BUFFER_HOURS = float(os.getenv("PLANNER_INTER_TASK_BUFFER_HOURS", "2"))
HOURS_PER_DAY = float(os.getenv("PLANNER_HOURS_PER_DAY", "24"))
DEFAULT_REQUIRED_HOURS = float(os.getenv("PLANNER_DEFAULT_REQUIRED_HOURS", "8"))
MIN_GROUP_SIZE_FOR_LOW_PRIORITY = int(os.getenv("PLANNER_MIN_GROUP_SIZE_FOR_LOW_PRIORITY", "3"))
UNDERUTILIZED_THRESHOLD = float(os.getenv("PLANNER_UNDERUTILIZED_THRESHOLD", "0.5"))
TARGET_UTILIZATION = float(os.getenv("PLANNER_TARGET_UTILIZATION", "0.85"))
REQUIRE_FUTURE_START = _env_bool("PLANNER_REQUIRE_FUTURE_START", True)

LOG_LEVEL = os.getenv("PLANNER_LOG_LEVEL", "INFO")
