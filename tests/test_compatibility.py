import pytest

from maintenance_planner.models import UrgencyTier, WindowType
from maintenance_planner.scheduling import is_compatible, is_exact_match, preferred_window_type


@pytest.mark.parametrize("tier, window_type, expected", [
    ("critical", "force", True),
    ("high", "force", False),
    ("medium", "force", False),
    ("low", "force", False),
    ("critical", "major", True),
    ("high", "major", True),
    ("medium", "major", True),
    ("low", "major", False),
    ("critical", "minor", False),
    ("high", "minor", True),
    ("medium", "minor", True),
    ("low", "minor", True),
])
def test_compatibility_table(tier, window_type, expected):
    assert is_compatible(UrgencyTier(tier), WindowType(window_type)) is expected


def test_exact_match_prefers_force_for_critical_and_minor_otherwise():
    assert is_exact_match(UrgencyTier.CRITICAL, WindowType.FORCE)
    for tier in (UrgencyTier.HIGH, UrgencyTier.MEDIUM, UrgencyTier.LOW):
        assert is_exact_match(tier, WindowType.MINOR)
        assert not is_exact_match(tier, WindowType.FORCE)


def test_major_is_legal_but_never_exact():
    for tier in (UrgencyTier.CRITICAL, UrgencyTier.HIGH, UrgencyTier.MEDIUM):
        assert is_compatible(tier, WindowType.MAJOR)
        assert not is_exact_match(tier, WindowType.MAJOR)


def test_plain_strings_are_accepted():
    assert is_compatible("critical", "force")
    assert preferred_window_type("low") == WindowType.MINOR
