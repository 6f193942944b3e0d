"""
Maintenance Planning Engine

Ranks remediated anomalies, places them into maintenance windows under a
best-fit policy, synthesizes windows when nothing fits and reviews existing
assignments. Pure functions over plain records; the caller owns storage.
"""

from .core.capacity import available_hours, used_hours, total_budget_hours, utilization
from .core.assigner import assign_all, assign_to_window
from .constraints.compatibility import is_compatible, is_exact_match, preferred_window_type
from .constraints.validation import validate_inputs
from .scoring.priority_scoring import rank
from .scoring.fit_scoring import select_window, rank_windows
from .algorithms.synthesis import synthesize_windows
from .algorithms.rebalancing import recommend, analyze_windows, propose_moves
from .utils.window_utils import release_window, resolve_required_hours, is_eligible
from .exceptions import InvalidInput, SchedulingInProgress

# Version for future API compatibility
__version__ = "1.0.0"
