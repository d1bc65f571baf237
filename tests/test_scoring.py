import pytest

from gradekit.enums import LogEntryType
from gradekit.logs import LogEntry
from gradekit.scoring import ScoredCase


def _boom():
    raise RuntimeError("boom")


def test_assertions_grow_points_possible():
    case = ScoredCase("unit")
    case.assert_true(True, 3, "a")
    case.assert_equal(1, 1, 4, "b")
    assert case.dynamic_points_possible == 3 + 4
    assert case.computed_points_possible == case.dynamic_points_possible
    assert case.points == 0


def test_all_passing_awards_everything():
    case = ScoredCase("unit")
    case.assert_true(True, 2, "t")
    case.assert_false(False, 3, "f")
    case.assert_equal("x", "x", 1, "eq")
    case.assert_not_equal(1, 2, 1, "ne")
    case.assert_exception(_boom, 2, "ex")
    case.assert_no_exception(lambda: None, 1, "noex")
    assert case.run() is True
    assert case.points == case.computed_points_possible
    assert all(a.has_ran for a in case.assertions)


def test_fail_fast_stops_at_first_failure():
    case = ScoredCase("unit")
    case.assert_true(False, 2, "first")
    case.assert_true(True, 3, "second")
    assert case.run() is False
    assert case.points == 0
    assert case.assertions[1].has_ran is False
    warnings = case.logs.entries_as_string(LogEntryType.WARNING)
    assert "Test failed and fail_fast_ is true; Abort remaining tests." in warnings


def test_without_fail_fast_runs_everything():
    case = ScoredCase("unit")
    case.fail_fast = False
    case.assert_true(False, 2, "first")
    case.assert_true(True, 3, "second")
    assert case.run() is False
    assert case.points == 3
    assert all(a.has_ran for a in case.assertions)


def test_run_does_not_rerun_assertions():
    case = ScoredCase("unit")
    case.assert_true(True, 5, "once")
    case.run()
    first = case.points
    assert case.run() is True
    assert case.points == first


def test_fail_log_message_format():
    case = ScoredCase("unit")
    case.assert_equal(1, 2, 4, "cmp")
    case.run()
    text = case.pass_fail_logs_as_string()
    assert "cmp :: Unable to award 4 points :: <<<1>>> != <<<2>>>" in text
    assert "[***Fail***]" in text


def test_pass_log_message_format():
    case = ScoredCase("unit")
    case.assert_true(True, 4)
    case.run()
    text = case.pass_fail_logs_as_string()
    assert "NOLABEL :: Award 4 points :: TRUE" in text


def test_adjust_points_is_capped():
    case = ScoredCase("unit", 0, 5)
    assert case.adjust_points(9, "bonus") == 5
    info = case.logs.entries_as_string(LogEntryType.INFO)
    assert "have exceeded maximum possible points" in info


def test_adjust_points_chooses_log_type():
    case = ScoredCase("unit", 3, 5)
    case.adjust_points(-1, "penalty")
    case.adjust_points(1, "reward")
    entries = case.logs.entries
    assert entries[-2].entry_type is LogEntryType.FAIL
    assert entries[-1].entry_type is LogEntryType.PASS
    assert entries[-1].message.endswith(": reward")


def test_zero_adjustment_keeps_none_type():
    case = ScoredCase("unit", 1, 5)
    case.adjust_points(0, "nothing")
    assert case.logs.entries[-1].entry_type is LogEntryType.NONE


def test_fixed_points_possible_ignores_growth():
    case = ScoredCase("unit")
    case.set_fixed_points_possible(10)
    case.assert_true(True, 25, "big")
    assert case.dynamic_points_possible == 0
    assert case.computed_points_possible == 10
    case.run()
    assert case.points == 10


def test_normalized_points():
    case = ScoredCase("unit", 1, 2)
    assert case.compute_normalized_points(100) == case.points
    case.set_normalized_points_possible_target(10)
    assert case.compute_normalized_points() == 5
    assert case.normalized_points_possible_target == 10


def test_normalized_rounds_half_away_from_zero():
    case = ScoredCase("unit", 1, 4)
    case.set_normalized_points_possible_target(2)
    assert case.compute_normalized_points() == 1


def test_normalize_to_zero_raises():
    case = ScoredCase("unit", 1, 2)
    case.set_normalized_points_possible_target(0)
    with pytest.raises(ValueError):
        case.compute_normalized_points()


def test_to_json():
    case = ScoredCase("unit")
    case.assert_true(True, 2, "t")
    case.run()
    data = case.to_json()
    assert data["label"] == "unit"
    assert data["points"] == data["points_possible"] == 2
    assert data["logs"] == case.logs.entries_as_string()


def test_to_gradescope_json_plain_and_normalized():
    case = ScoredCase("unit")
    case.assert_true(True, 2, "t")
    case.run()
    plain = case.to_gradescope_json()
    assert plain["score"] == plain["max_score"] == 2
    assert plain["name"] == "unit"
    case.set_normalized_points_possible_target(50)
    normed = case.to_gradescope_json()
    assert normed["score"] == normed["max_score"] == 50


def test_copy_is_independent():
    case = ScoredCase("unit")
    case.assert_true(True, 2, "t")
    clone = case.copy()
    clone.run()
    assert clone.points == 2
    assert case.points == 0
    assert case.assertions[0].has_ran is False
    case.log(LogEntry("only original"))
    assert "only original" not in clone.logs.entries_as_string()


def test_log_accepts_strings():
    case = ScoredCase("unit")
    case.log("hello")
    assert case.logs.entries[-1] == LogEntry("hello", LogEntryType.INFO)


def test_adjust_points_possible_message():
    case = ScoredCase("unit")
    assert case.adjust_points_possible(3, "lbl") == 3
    assert case.adjust_points_possible(-2, "neg") == 3
    assert str(case.logs.entries[-1]).endswith("(3) for label: lbl")