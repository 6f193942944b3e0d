from maintenance_planner.scheduling import rank
from factories import make_item


def test_tiers_are_ranked_critical_first():
    items = [
        make_item("low", "low"),
        make_item("medium", "medium"),
        make_item("critical", "critical"),
        make_item("high", "high"),
    ]
    assert [item.id for item in rank(items)] == ["critical", "high", "medium", "low"]


def test_older_items_first_within_a_tier():
    items = [
        make_item("newer", "high", created_offset_hours=5),
        make_item("oldest", "high", created_offset_hours=0),
        make_item("middle", "high", created_offset_hours=2),
    ]
    assert [item.id for item in rank(items)] == ["oldest", "middle", "newer"]


def test_tier_beats_age():
    items = [
        make_item("old-low", "low", created_offset_hours=0),
        make_item("new-critical", "critical", created_offset_hours=100),
    ]
    assert [item.id for item in rank(items)] == ["new-critical", "old-low"]


def test_ranking_is_deterministic_and_stable():
    items = [make_item(f"i{n}", "medium", created_offset_hours=1) for n in range(5)]
    first = [item.id for item in rank(items)]
    second = [item.id for item in rank(list(items))]
    assert first == second == ["i0", "i1", "i2", "i3", "i4"]


def test_rank_does_not_modify_input():
    items = [make_item("b", "low"), make_item("a", "critical")]
    rank(items)
    assert [item.id for item in items] == ["b", "a"]
