import pytest

from uvasolve.grids import (
    Flatworld,
    day_of_week,
    die_top,
    hartal_days,
    is_jolly,
    is_symmetric,
    largest_square,
    minesweeper,
    run_118,
    run_299,
    run_10038,
    run_10050,
    run_10189,
    run_10409,
    run_10908,
    run_11321,
    run_11349,
    run_12019,
    sort_by_modulo,
    train_swaps,
)


def test_jolly_sequences():
    assert is_jolly([1, 4, 2, 3]) is True
    assert is_jolly([1, 4, 2, -1, 6]) is False
    assert is_jolly([5]) is True
    assert is_jolly([3, 3]) is False


def test_run_10038():
    assert run_10038("4 1 4 2 3\n5 1 4 2 -1 6\n") == "Jolly\nNot jolly\n"


def test_hartal_sample():
    assert run_10050("1\n14\n3\n3\n4\n8\n") == "5\n"


def test_hartal_weekly_party_never_strikes_on_working_day():
    assert hartal_days(100, [7]) == 0


def test_hartal_more_parties_never_fewer_days():
    assert hartal_days(50, [3, 5]) >= hartal_days(50, [3])
    assert hartal_days(50, [2]) <= hartal_days(50, [1])


def test_minesweeper_sample():
    assert minesweeper(["*...", "....", ".*..", "...."]) == ["*100", "2210", "1*10", "1110"]


def test_minesweeper_without_mines_is_all_zero():
    result = minesweeper(["...", "..."])
    assert set("".join(result)) == {"0"}
    assert [len(row) for row in result] == [3, 3]


def test_run_10189_separates_fields():
    out = run_10189("1 2\n*.\n1 1\n*\n0 0\n")
    assert out == "Field #1:\n*1\n\nField #2:\n*\n"


def test_die_rotations():
    assert die_top([]) == 1
    assert die_top(["north"] * 4) == 1
    assert die_top(["east", "west"]) == 1
    assert die_top(["north", "north"]) == 6
    assert die_top(["east", "east"]) == 6


def test_run_10409():
    assert run_10409("1\nnorth\n0\n") == "5\n"


def test_largest_square_uniform_grid():
    grid = ["aaaaa"] * 5
    assert largest_square(grid, 2, 2) == 5
    assert largest_square(grid, 0, 0) == 1


def test_largest_square_stops_at_different_ring():
    grid = ["bbbbb", "baaab", "baaab", "baaab", "bbbbb"]
    assert largest_square(grid, 2, 2) == 3


def test_largest_square_outside_grid():
    with pytest.raises(IndexError):
        largest_square(["ab"], 3, 0)


def test_run_10908():
    assert run_10908("1\n3 3 1\naaa\naaa\naaa\n1 1\n") == "3 3 1\n3\n"


def test_sort_by_modulo_example():
    assert sort_by_modulo([1, 2, 3, 4, 5, 6], 3) == [3, 6, 1, 4, 5, 2]


def test_sort_by_modulo_invariants():
    nums = [15, 9, 3, 8, 2, 14, 7, 11]
    result = sort_by_modulo(nums, 3)
    assert sorted(result) == sorted(nums)
    remainders = [value % 3 for value in result]
    assert remainders == sorted(remainders)


def test_run_11321_always_ends_with_zero_pair():
    out = run_11321("2 5\n4\n9\n0 0\n")
    assert out.endswith("0 0\n")
    assert out.startswith("2 5\n")


def test_symmetric_matrix():
    assert is_symmetric([[5, 1, 3], [2, 0, 2], [3, 1, 5]]) is True
    assert is_symmetric([[5, 1, 3], [2, 0, 2], [0, 0, 5]]) is False
    assert is_symmetric([[-1]]) is False


def test_run_11349_accepts_both_header_forms():
    assert run_11349("1\nN = 1\n5\n") == "Test #1: Symmetric.\n"
    assert run_11349("1\nN=2\n1 2\n3 4\n") == "Test #1: Non-symmetric.\n"


def test_flatworld_scent_saves_later_robot():
    world = Flatworld(2, 2)
    assert world.move(0, 2, "N", "F") == (0, 2, "N", True)
    assert world.move(0, 2, "N", "FR") == (0, 2, "E", False)


def test_flatworld_turns():
    world = Flatworld(5, 5)
    assert world.move(1, 1, "N", "RRRR") == (1, 1, "N", False)
    assert world.move(1, 1, "N", "L") == (1, 1, "W", False)


def test_day_of_week_known_mondays():
    assert day_of_week(1, 10) == "Monday"
    assert day_of_week(8, 8) == "Monday"
    assert day_of_week(3, 1) == "Tuesday"


def test_day_of_week_repeats_weekly():
    assert day_of_week(5, 3) == day_of_week(5, 10)


def test_day_of_week_rejects_bad_month():
    with pytest.raises(ValueError):
        day_of_week(13, 1)


def test_run_12019():
    assert run_12019("2\n1 10\n3 1\n") == "Monday\nTuesday\n"


def test_train_swaps():
    assert train_swaps([1, 2, 3, 4]) == 0
    assert train_swaps(list(range(6, 0, -1))) == 6 * 5 // 2
    cars = [3, 1, 2]
    train_swaps(cars)
    assert cars == [3, 1, 2]


def test_run_299():
    assert run_299("1\n2\n2 1\n") == "Optimal train swapping takes 1 swaps.\n"