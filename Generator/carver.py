"""
Puzzle carver

Starts from the maximal-clue board (only solution cells Empty) and opens
blocked cells one at a time in seeded order, keeping an opening only while
the logical solver can still prove the full placement.
"""
import math
from typing import List, Tuple

import numpy as np

from Solver.board import EMPTY, BLOCKED
from Solver.rules import MAX_SUBSET
from Solver.solver import solve_logically

from .sequence import SeededSequence

Cell = Tuple[int, int]


def maximal_clue_board(solution: List[Cell], size: int) -> np.ndarray:
    """Every cell Blocked except the solution cells"""
    grid = np.full((size, size), BLOCKED, dtype=np.int8)
    for r, c in solution:
        grid[r, c] = EMPTY
    return grid


def carve(solution: List[Cell], region_grid, removal_ratio: float, size: int,
          rng: SeededSequence, verbose: bool = False,
          max_subset: int = MAX_SUBSET) -> np.ndarray:
    """
    Remove up to floor(removable * removal_ratio) clues, checking solvability
    after each one. Greedy in the shuffled order, so not a global minimum.
    """
    puzzle_grid = maximal_clue_board(solution, size)
    solution_set = set(solution)
    removable = [(r, c) for r in range(size) for c in range(size) if (r, c) not in solution_set]
    rng.shuffle(removable)

    target = int(math.floor(len(removable) * removal_ratio))
    removed = 0
    rejected = 0

    for r, c in removable:
        if removed >= target:
            break
        puzzle_grid[r, c] = EMPTY
        result = solve_logically(puzzle_grid, region_grid, max_subset=max_subset)
        if result.solved:
            removed += 1
        else:
            puzzle_grid[r, c] = BLOCKED
            rejected += 1

    if verbose:
        print(f"  Carved {removed}/{target} clues ({rejected} rejected, "
              f"{int(np.count_nonzero(puzzle_grid == BLOCKED))} clues remain)")

    return puzzle_grid
