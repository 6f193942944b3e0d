import pytest

from maintenance_planner.models import RecommendationCategory, RecommendationType, UrgencyTier, WindowStatus
from maintenance_planner.scheduling import analyze_windows, propose_moves, recommend, release_window
from factories import make_item, make_window


def overloaded_window():
    # 20h + 10h + 2 buffers = 34h in a 24h window
    return make_window("busy", "minor", days=1, items=[
        make_item("medium-old", "medium", hours=20, created_offset_hours=0),
        make_item("low-new", "low", hours=10, created_offset_hours=3),
    ])


def test_analysis_reports_utilization_and_scores(params):
    window = make_window("w1", "minor", days=1, items=[make_item("a", "high", hours=18.4)])
    entry = analyze_windows([window], params=params)[0]

    assert entry.total_hours == 24
    assert entry.used_hours == pytest.approx(20.4)
    assert entry.utilization == pytest.approx(0.85)
    assert entry.efficiency_score == pytest.approx(100)
    assert entry.balance_score == 10
    assert entry.overall_score == pytest.approx(55)
    assert entry.tier_mix == {UrgencyTier.HIGH: 1}
    assert not entry.overloaded and not entry.underutilized


def test_overloaded_and_underutilized_flags(params):
    quiet = make_window("quiet", "minor", days=3, items=[make_item("a", "high", hours=8)])
    empty = make_window("empty", "minor", days=3)
    cancelled = make_window("cancelled", "minor", days=1, status=WindowStatus.CANCELLED)
    analysis = {entry.window_id: entry for entry in analyze_windows([overloaded_window(), quiet, empty, cancelled], params=params)}

    assert analysis["busy"].overloaded
    assert analysis["busy"].available_hours == 0
    assert analysis["quiet"].underutilized
    assert not analysis["empty"].underutilized
    assert "cancelled" not in analysis


def test_moves_relieve_overload_least_urgent_first(params, now):
    spare = make_window("spare", "minor", days=3)
    moves = propose_moves([overloaded_window(), spare], params=params, now=now)

    assert len(moves) == 1
    assert moves[0].item_id == "low-new"
    assert moves[0].source_window_id == "busy"
    assert moves[0].target_window_id == "spare"
    assert moves[0].required_hours == 10


def test_moves_respect_compatibility(params, now):
    force = make_window("force", "force", days=5)
    assert propose_moves([overloaded_window(), force], params=params, now=now) == []


def test_recommendations_cover_every_finding(params, now):
    busy = overloaded_window()
    quiet = make_window("quiet", "minor", days=5, items=[make_item("q", "high", hours=4)])
    items = [make_item("urgent", "critical", hours=4), make_item("fine", "low", hours=4)]

    recommendations = recommend(items, [busy, quiet], params=params, now=now)
    by_category = {rec.category: rec for rec in recommendations}

    assert [rec.type for rec in recommendations] == [
        RecommendationType.ERROR, RecommendationType.WARNING,
        RecommendationType.INFO, RecommendationType.SUGGESTION,
    ]
    assert by_category[RecommendationCategory.URGENT_UNSCHEDULED].item_ids == ["urgent"]
    assert by_category[RecommendationCategory.OVERLOADED].window_ids == ["busy"]
    assert by_category[RecommendationCategory.UNDERUTILIZED].window_ids == ["quiet"]
    moves = by_category[RecommendationCategory.REASSIGNMENT].moves
    assert [(move.item_id, move.target_window_id) for move in moves] == [("low-new", "quiet")]


def test_recommend_without_moves_and_without_findings(params, now):
    busy = overloaded_window()
    categories = [rec.category for rec in recommend([], [busy], params=params, now=now, include_moves=False)]
    assert categories == [RecommendationCategory.OVERLOADED]

    balanced = make_window("ok", "minor", days=1, items=[make_item("a", "high", hours=16)])
    assert recommend([], [balanced], params=params, now=now) == []


def test_recommend_leaves_inputs_untouched(params, now):
    busy = overloaded_window()
    spare = make_window("spare", "minor", days=3)
    recommend([], [busy, spare], params=params, now=now)
    assert [item.id for item in busy.assigned_items] == ["medium-old", "low-new"]
    assert spare.assigned_items == []


def test_release_window_unschedules_its_items():
    items = [
        make_item("a", assigned_window_id="gone"),
        make_item("b", assigned_window_id="kept"),
        make_item("c"),
    ]
    released = release_window("gone", items)
    assert [item.id for item in released] == ["a"]
    assert released[0].assigned_window_id is None
    assert items[0].assigned_window_id == "gone"
