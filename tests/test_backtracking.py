import copy
import itertools
import math

import pytest

from dailyalgo.backtracking import (
    n_queens,
    power,
    solve_sudoku,
    unique_permutations,
    word_exists,
)


@pytest.mark.parametrize("text", ["ABC", "AAB", "ABSG", "AAAA", "x"])
def test_unique_permutations_are_complete_and_distinct(text):
    result = unique_permutations(text)
    assert len(result) == len(set(result))
    assert set(result) == {"".join(p) for p in itertools.permutations(text)}
    assert result[0] == "".join(sorted(text))


def test_unique_permutations_order():
    assert unique_permutations("CBA") == ["ABC", "ACB", "BAC", "BCA", "CBA", "CAB"]


@pytest.mark.parametrize(
    "base, exponent", [(2.0, 10), (2.5, 3), (3.0, -2), (-2.0, 5), (1.0001, 1000), (0.5, 0)]
)
def test_power_matches_builtin(base, exponent):
    assert math.isclose(power(base, exponent), base**exponent, rel_tol=1e-12)


def test_power_zero_cases():
    assert power(0.0, 0) == 1.0
    assert power(0.0, 5) == 0.0
    assert power(0.0, -3) == 0.0


def _valid_queens(solution):
    n = len(solution)
    cols = [c - 1 for c in solution]
    if sorted(cols) != list(range(n)):
        return False
    return all(
        abs(cols[a] - cols[b]) != b - a for a in range(n) for b in range(a + 1, n)
    )


def test_n_queens_four():
    assert n_queens(4) == [[2, 4, 1, 3], [3, 1, 4, 2]]


@pytest.mark.parametrize("n", [1, 5, 6, 8])
def test_n_queens_solutions_are_valid_and_sorted(n):
    solutions = n_queens(n)
    assert solutions
    assert all(_valid_queens(s) for s in solutions)
    assert solutions == sorted(solutions)
    assert len({tuple(s) for s in solutions}) == len(solutions)


def test_n_queens_eight_count():
    assert len(n_queens(8)) == 92


@pytest.mark.parametrize("n", [2, 3])
def test_n_queens_impossible(n):
    assert n_queens(n) == []


PUZZLE = [
    [5, 3, 0, 0, 7, 0, 0, 0, 0],
    [6, 0, 0, 1, 9, 5, 0, 0, 0],
    [0, 9, 8, 0, 0, 0, 0, 6, 0],
    [8, 0, 0, 0, 6, 0, 0, 0, 3],
    [4, 0, 0, 8, 0, 3, 0, 0, 1],
    [7, 0, 0, 0, 2, 0, 0, 0, 6],
    [0, 6, 0, 0, 0, 0, 2, 8, 0],
    [0, 0, 0, 4, 1, 9, 0, 0, 5],
    [0, 0, 0, 0, 8, 0, 0, 7, 9],
]


def _valid_sudoku(grid):
    digits = set(range(1, 10))
    rows_ok = all(set(row) == digits for row in grid)
    cols_ok = all({grid[r][c] for r in range(9)} == digits for c in range(9))
    boxes_ok = all(
        {grid[br + r][bc + c] for r in range(3) for c in range(3)} == digits
        for br in (0, 3, 6)
        for bc in (0, 3, 6)
    )
    return rows_ok and cols_ok and boxes_ok


def test_solve_sudoku_fills_grid():
    grid = copy.deepcopy(PUZZLE)
    assert solve_sudoku(grid) is True
    assert _valid_sudoku(grid)
    for r in range(9):
        for c in range(9):
            if PUZZLE[r][c]:
                assert grid[r][c] == PUZZLE[r][c]


def test_solve_sudoku_unsolvable_leaves_grid():
    grid = [[0] * 9 for _ in range(9)]
    grid[0] = [1, 2, 3, 4, 5, 6, 7, 8, 0]
    grid[1][8] = 9
    before = copy.deepcopy(grid)
    assert solve_sudoku(grid) is False
    assert grid == before


def test_solve_sudoku_rejects_wrong_shape():
    with pytest.raises(ValueError):
        solve_sudoku([[0] * 9 for _ in range(8)])


GRID = [["T", "E", "E"], ["S", "G", "K"], ["T", "E", "L"]]


def test_word_exists_found():
    assert word_exists(GRID, "GEEK") is True
    assert word_exists(GRID, "T") is True


def test_word_exists_no_cell_reuse():
    assert word_exists(GRID, "GEG") is False
    assert word_exists(["AB"], "ABA") is False


def test_word_exists_leaves_grid_unchanged():
    grid = copy.deepcopy(GRID)
    word_exists(grid, "GEEK")
    assert grid == GRID


def test_word_exists_empty_inputs():
    assert word_exists([], "A") is False
    assert word_exists(GRID, "") is False