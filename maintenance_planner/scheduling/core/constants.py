"""
Fixed tables used across the planning engine.
"""

from ...models import UrgencyTier, WindowStatus

# Higher value = more urgent
TIER_RANK = {
    UrgencyTier.CRITICAL: 4,
    UrgencyTier.HIGH: 3,
    UrgencyTier.MEDIUM: 2,
    UrgencyTier.LOW: 1,
}

# Windows that may still receive new work
OPEN_STATUSES = frozenset({WindowStatus.PLANNED, WindowStatus.IN_PROGRESS})

NO_FIT_REASON = "no compatible window with sufficient capacity"
