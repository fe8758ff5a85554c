"""Backtracking and recursion: permutations, powers, queens, sudoku and word search."""

from __future__ import annotations

from collections.abc import Sequence


def unique_permutations(s: str) -> list[str]:
    """Return every distinct arrangement of the characters of ``s``.

    The characters are sorted first and then arranged by swapping, so the
    first result is the sorted string.
    """
    chars = sorted(s)
    result: list[str] = []

    def arrange(start: int) -> None:
        if start == len(chars):
            result.append("".join(chars))
            return
        seen: set[str] = set()
        for i in range(start, len(chars)):
            if chars[i] in seen:
                continue
            seen.add(chars[i])
            chars[start], chars[i] = chars[i], chars[start]
            arrange(start + 1)
            chars[start], chars[i] = chars[i], chars[start]

    arrange(0)
    return result


def power(base: float, exponent: int) -> float:
    """Raise ``base`` to an integer ``exponent`` by repeated squaring.

    A zero exponent gives 1 and a zero base otherwise gives 0, even for a
    negative exponent.
    """
    if exponent == 0:
        return 1.0
    if base == 0:
        return 0.0
    result = 1.0
    factor = float(base)
    remaining = abs(exponent)
    while remaining:
        if remaining & 1:
            result *= factor
        factor *= factor
        remaining >>= 1
    return 1 / result if exponent < 0 else result


def n_queens(n: int) -> list[list[int]]:
    """Return every placement of ``n`` non-attacking queens.

    Each placement lists, row by row, the 1-based column of that row's queen.
    """
    solutions: list[list[int]] = []
    placement: list[int] = []
    columns: set[int] = set()
    diagonals: set[int] = set()
    anti_diagonals: set[int] = set()

    def place(row: int) -> None:
        if row == n:
            solutions.append([col + 1 for col in placement])
            return
        for col in range(n):
            if col in columns or row - col in diagonals or row + col in anti_diagonals:
                continue
            placement.append(col)
            columns.add(col)
            diagonals.add(row - col)
            anti_diagonals.add(row + col)
            place(row + 1)
            placement.pop()
            columns.discard(col)
            diagonals.discard(row - col)
            anti_diagonals.discard(row + col)

    place(0)
    return solutions


def _fits(grid: list[list[int]], row: int, col: int, num: int) -> bool:
    box_row, box_col = row - row % 3, col - col % 3
    for x in range(9):
        if grid[row][x] == num or grid[x][col] == num:
            return False
        if grid[box_row + x // 3][box_col + x % 3] == num:
            return False
    return True


def solve_sudoku(grid: list[list[int]]) -> bool:
    """Fill the zero cells of a 9x9 grid in place.

    Returns True when a solution was found; otherwise the grid is left as given.
    """
    if len(grid) != 9 or any(len(row) != 9 for row in grid):
        raise ValueError("sudoku grid must be 9 by 9")
    empty = [(r, c) for r in range(9) for c in range(9) if grid[r][c] == 0]

    def fill(index: int) -> bool:
        if index == len(empty):
            return True
        row, col = empty[index]
        for num in range(1, 10):
            if _fits(grid, row, col, num):
                grid[row][col] = num
                if fill(index + 1):
                    return True
                grid[row][col] = 0
        return False

    return fill(0)


def word_exists(grid: Sequence[Sequence[str]], word: str) -> bool:
    """Tell whether ``word`` can be traced through horizontally or vertically
    adjacent cells, using each cell at most once."""
    if not word or not grid or not grid[0]:
        return False
    rows, cols = len(grid), len(grid[0])
    used: set[tuple[int, int]] = set()

    def trace(r: int, c: int, index: int) -> bool:
        if index == len(word):
            return True
        if not (0 <= r < rows and 0 <= c < cols) or (r, c) in used:
            return False
        if grid[r][c] != word[index]:
            return False
        used.add((r, c))
        found = (
            trace(r + 1, c, index + 1)
            or trace(r - 1, c, index + 1)
            or trace(r, c + 1, index + 1)
            or trace(r, c - 1, index + 1)
        )
        used.discard((r, c))
        return found

    return any(trace(r, c, 0) for r in range(rows) for c in range(cols))