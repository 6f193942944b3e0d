from datetime import timedelta

import pytest

from maintenance_planner.scheduling import assign_all, synthesize_windows, recommend, validate_inputs
from maintenance_planner.scheduling.exceptions import InvalidInput
from factories import make_item, make_window, make_plan


def test_window_ending_before_it_starts_is_rejected(params, now):
    window = make_window("w1", "minor", days=1)
    broken = window.model_copy(update={"end_date": window.start_date - timedelta(hours=1)})
    with pytest.raises(InvalidInput, match="w1"):
        assign_all([make_item("a")], [broken], params=params, now=now)


def test_zero_length_window_is_rejected(params, now):
    window = make_window("w1", "minor", days=1)
    broken = window.model_copy(update={"end_date": window.start_date})
    with pytest.raises(InvalidInput):
        assign_all([make_item("a")], [broken], params=params, now=now)


def test_non_positive_duration_is_rejected(params, now):
    window = make_window("w1", "minor", days=0)
    with pytest.raises(InvalidInput, match="duration_days"):
        assign_all([make_item("a")], [window], params=params, now=now)


def test_non_positive_item_hours_are_rejected(params, now):
    with pytest.raises(InvalidInput, match="estimated_hours"):
        assign_all([make_item("a", hours=0)], [make_window("w1")], params=params, now=now)
    with pytest.raises(InvalidInput):
        synthesize_windows([make_item("a", "critical", hours=-3)], params=params, now=now)


def test_negative_plan_values_are_rejected(params, now):
    with pytest.raises(InvalidInput, match="plan-a"):
        assign_all([make_item("a")], [make_window("w1")], [make_plan("a", total_hours=-1)], params, now)


def test_conflicting_item_ids_are_rejected(params, now):
    items = [make_item("a", "high", hours=4), make_item("a", "low", hours=4)]
    with pytest.raises(InvalidInput, match="'a'"):
        assign_all(items, [make_window("w1")], params=params, now=now)


def test_conflicting_window_ids_are_rejected(params, now):
    windows = [make_window("w1", "minor", days=1), make_window("w1", "major", days=2)]
    with pytest.raises(InvalidInput):
        assign_all([make_item("a")], windows, params=params, now=now)


def test_item_assigned_to_two_windows_is_rejected(params, now):
    shared = make_item("shared", "high", hours=2)
    windows = [make_window("w1", items=[shared]), make_window("w2", items=[shared])]
    with pytest.raises(InvalidInput, match="shared"):
        recommend([], windows, params=params, now=now)


def test_unscheduled_item_already_inside_a_window_is_rejected(params, now):
    item = make_item("a", "high", hours=4)
    window = make_window("w1", "minor", days=2, items=[item])
    with pytest.raises(InvalidInput, match="'a' is already assigned to 'w1'"):
        assign_all([item], [window], params=params, now=now)


def test_item_carrying_its_own_window_id_is_accepted(params, now):
    window = make_window("w1", "minor", days=2, items=[make_item("a", "high", hours=4)])
    placed = window.assigned_items[0]

    report = assign_all([placed], [window], params=params, now=now)

    assert report.assignments == []
    assert [len(w.assigned_items) for w in report.windows] == [1]


def test_two_plans_for_one_item_are_rejected(params, now):
    plans = [make_plan("a", total_hours=4), make_plan("a", total_hours=4).model_copy(update={"id": "other"})]
    with pytest.raises(InvalidInput, match="more than one"):
        assign_all([make_item("a")], [make_window("w1")], plans, params, now)


def test_identical_duplicates_are_collapsed(params):
    item = make_item("a", "high", hours=4)
    window = make_window("w1")
    items, windows, plans = validate_inputs([item, item], [window, window], [], params)
    assert items == [item]
    assert windows == [window]
    assert plans == {}


def test_invalid_input_stops_the_pass_before_any_assignment(params, now):
    good = make_window("good", "minor", days=3)
    bad = make_window("bad", "minor", days=-1)
    with pytest.raises(InvalidInput):
        assign_all([make_item("a", hours=1)], [good, bad], params=params, now=now)
    assert good.assigned_items == []
