import pytest

from gradekit.enums import LeaderboardSortDirection
from gradekit.leaderboard import Leaderboard, LeaderboardEntry


def test_entry_json():
    entry = LeaderboardEntry("speed", 42)
    assert entry.to_gradescope_json() == {"name": "speed", "value": 42}


def test_first_entry_becomes_sort_key():
    board = Leaderboard()
    board.add_entry("zeta", 1)
    board.add_entry("alpha", 2)
    assert board.sort_key == "zeta"


def test_json_ordered_by_name_with_order_on_sort_key():
    board = Leaderboard()
    board.add_entry("zeta", 1)
    board.add_entry("alpha", 2)
    result = board.to_gradescope_json()
    assert [item["name"] for item in result] == ["alpha", "zeta"]
    assert "order" not in result[0]
    assert result[1]["order"] == "desc"


def test_ascending_direction_in_json():
    board = Leaderboard()
    board.add_entry("time", 3.5)
    board.sort_direction = LeaderboardSortDirection.ASCENDING
    assert board.to_gradescope_json() == [{"name": "time", "value": 3.5, "order": "asc"}]


def test_add_entry_object_replaces_same_name():
    board = Leaderboard()
    board.add_entry("a", 1)
    board.add_entry(LeaderboardEntry("a", 5))
    assert board.entries["a"].value == 5
    assert len(board.entries) == 1


def test_missing_sort_key_raises():
    board = Leaderboard()
    board.add_entry("a", 1)
    board.sort_key = "missing"
    with pytest.raises(ValueError):
        board.to_gradescope_json()


def test_empty_board_raises():
    with pytest.raises(ValueError):
        Leaderboard().to_gradescope_json()


@pytest.mark.parametrize(
    "direction, name, gradescope",
    [
        (LeaderboardSortDirection.ASCENDING, "Ascending", "asc"),
        (LeaderboardSortDirection.DEFAULT, "Default", "desc"),
        (LeaderboardSortDirection.DESCENDING, "Descending", "desc"),
    ],
)
def test_direction_strings(direction, name, gradescope):
    assert Leaderboard.sort_direction_to_string(direction) == name
    assert Leaderboard.sort_direction_to_gradescope_string(direction) == gradescope


def test_invalid_direction_rejected():
    board = Leaderboard()
    with pytest.raises(ValueError):
        board.sort_direction = "up"
    with pytest.raises(ValueError):
        Leaderboard.sort_direction_to_string("up")


def test_copy_is_independent():
    board = Leaderboard()
    board.add_entry("a", 1)
    board.sort_direction = LeaderboardSortDirection.ASCENDING
    other = board.copy()
    other.add_entry("b", 2)
    other.entries["a"].value = 99
    assert list(board.entries) == ["a"]
    assert board.entries["a"].value == 1
    assert other.sort_direction is LeaderboardSortDirection.ASCENDING
    assert other.sort_key == "a"