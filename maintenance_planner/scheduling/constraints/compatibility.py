"""
Tier to window type compatibility rules.
"""

from ...models import UrgencyTier, WindowType

# Legal hosts per window type
WINDOW_ACCEPTS = {
    WindowType.FORCE: frozenset({UrgencyTier.CRITICAL}),
    WindowType.MAJOR: frozenset({UrgencyTier.CRITICAL, UrgencyTier.HIGH, UrgencyTier.MEDIUM}),
    WindowType.MINOR: frozenset({UrgencyTier.HIGH, UrgencyTier.MEDIUM, UrgencyTier.LOW}),
}

# Preferred pairing. MAJOR is legal for several tiers but never preferred.
PREFERRED_WINDOW_TYPE = {
    UrgencyTier.CRITICAL: WindowType.FORCE,
    UrgencyTier.HIGH: WindowType.MINOR,
    UrgencyTier.MEDIUM: WindowType.MINOR,
    UrgencyTier.LOW: WindowType.MINOR,
}


def is_compatible(urgency_tier: UrgencyTier, window_type: WindowType) -> bool:
    """Check if a window of this type may legally host an item of this tier."""
    return UrgencyTier(urgency_tier) in WINDOW_ACCEPTS.get(WindowType(window_type), frozenset())


def is_exact_match(urgency_tier: UrgencyTier, window_type: WindowType) -> bool:
    """Check if the window type is the preferred one for this tier."""
    return PREFERRED_WINDOW_TYPE[UrgencyTier(urgency_tier)] == WindowType(window_type)


def preferred_window_type(urgency_tier: UrgencyTier) -> WindowType:
    return PREFERRED_WINDOW_TYPE[UrgencyTier(urgency_tier)]
