"""
Priority ordering of work items.
"""

from typing import Iterable, List

from ...models import WorkItem, UrgencyTier
from ..core.constants import TIER_RANK
from ..utils.window_utils import to_utc


def calculate_tier_rank(urgency_tier: UrgencyTier) -> int:
    """
    Map tier to rank: Critical: 4, High: 3, Medium: 2, Low: 1
    """
    return TIER_RANK[UrgencyTier(urgency_tier)]


def calculate_selection_key(item: WorkItem):
    """Most urgent tier first, then oldest first."""
    return (-calculate_tier_rank(item.urgency_tier), to_utc(item.created_at))


def rank(items: Iterable[WorkItem]) -> List[WorkItem]:
    """Deterministic processing order for a backlog. The input is not modified."""
    return sorted(items, key=calculate_selection_key)
