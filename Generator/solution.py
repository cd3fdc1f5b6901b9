"""
Solution finder: one marker per row and column, no shared diagonal, no touching
"""
from typing import List, Tuple, Optional

from .sequence import SeededSequence

Cell = Tuple[int, int]


def _is_safe(placed: List[Cell], row: int, col: int) -> bool:
    for q_row, q_col in placed:
        if q_col == col:
            return False
        if abs(q_row - row) == abs(q_col - col):
            return False
        if abs(q_row - row) <= 1 and abs(q_col - col) <= 1:
            return False
    return True


def find_solution(size: int, rng: SeededSequence) -> Optional[List[Cell]]:
    """
    Row-by-row backtracking with seed-shuffled column order.

    Returns N (row, col) pairs, or None when the search space is exhausted.
    """
    placed: List[Cell] = []

    def solve(row: int) -> bool:
        if row == size:
            return True
        columns = list(range(size))
        rng.shuffle(columns)
        for col in columns:
            if _is_safe(placed, row, col):
                placed.append((row, col))
                if solve(row + 1):
                    return True
                placed.pop()
        return False

    if not solve(0):
        return None
    return placed


def is_valid_solution(solution, size: int) -> bool:
    """N cells with distinct rows, columns and diagonals, pairwise non-touching"""
    if solution is None or len(solution) != size:
        return False
    for r, c in solution:
        if not (0 <= r < size and 0 <= c < size):
            return False
    for i, (r1, c1) in enumerate(solution):
        for r2, c2 in solution[i + 1:]:
            if r1 == r2 or c1 == c2:
                return False
            if abs(r1 - r2) == abs(c1 - c2):
                return False
            if max(abs(r1 - r2), abs(c1 - c2)) <= 1:
                return False
    return True
