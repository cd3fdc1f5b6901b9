"""
Deduction-only solver for Queens puzzles

The solver never guesses. It runs the rule cascade from rules.py to a fixed
point: the first rule that fires is applied and the cascade restarts from
the attack rule, so cheap deductions are always re-checked before the
expensive subset search runs again.
"""

from typing import List, Optional, NamedTuple

import numpy as np

from .board import QueensPuzzle, EMPTY, BLOCKED, MARKER
from .rules import (
    DeductionRules,
    Deduction,
    RULE_ORDER,
    ACTION_PLACE,
    MAX_SUBSET,
)


class SolveResult(NamedTuple):
    grid: np.ndarray
    markers: int
    solved: bool


class LogicalSolver:
    def __init__(self, puzzle: QueensPuzzle, verbose: bool = False, max_subset: int = MAX_SUBSET):
        self.puzzle = puzzle
        self.verbose = verbose
        self.max_subset = max_subset
        self.stats = {
            'passes': 0,
            'markers_placed': 0,
            'cells_blocked': 0,
            'rule_counts': {rule: 0 for rule in RULE_ORDER},
        }

    # -------------------------------------------------------------------------
    # Rule cascade
    # -------------------------------------------------------------------------
    def _cascade(self):
        return (
            DeductionRules.find_attacks,
            DeductionRules.find_singles,
            DeductionRules.find_region_pointing,
            DeductionRules.find_line_confinement,
            lambda p: DeductionRules.find_subset_confinement(p, self.max_subset),
        )

    def find_deductions(self) -> List[Deduction]:
        """Deductions of the first rule that fires, without applying them."""
        for finder in self._cascade():
            found = finder(self.puzzle)
            if found:
                return found
        return []

    def next_deduction(self) -> Optional[Deduction]:
        found = self.find_deductions()
        return found[0] if found else None

    # -------------------------------------------------------------------------
    # Main solving driver
    # -------------------------------------------------------------------------
    def step(self) -> bool:
        """
        Apply the first rule that fires. A placement is applied on its own,
        block deductions of the same rule are applied together.
        Returns False once the board has reached a fixed point.
        """
        found = self.find_deductions()
        if not found:
            return False
        if found[0].action == ACTION_PLACE:
            found = found[:1]

        changed = False
        for deduction in found:
            if self._apply(deduction):
                changed = True
        return changed

    def solve(self) -> bool:
        if self.verbose:
            print(f"Starting logical solver: {self.puzzle}")

        while not self.puzzle.is_complete():
            self.stats['passes'] += 1
            if not self.step():
                break

        solved = self.puzzle.is_complete()
        if self.verbose:
            print("\n✓ Solved by deduction alone!" if solved else "\n✗ Deduction stalled")
            self._print_stats()
        return solved

    # -------------------------------------------------------------------------
    # Board updates
    # -------------------------------------------------------------------------
    def _apply(self, deduction: Deduction) -> bool:
        grid = self.puzzle.grid
        changed = False

        if deduction.action == ACTION_PLACE:
            r, c = deduction.cells[0]
            if grid[r, c] == EMPTY:
                grid[r, c] = MARKER
                self.stats['markers_placed'] += 1
                changed = True
        else:
            for r, c in deduction.cells:
                if grid[r, c] == EMPTY:
                    grid[r, c] = BLOCKED
                    self.stats['cells_blocked'] += 1
                    changed = True

        if changed:
            self.stats['rule_counts'][deduction.rule] += 1
            self.puzzle.move_history.append(deduction)
            if self.verbose:
                print(f"  [{deduction.rule}] {deduction.describe()}")
        return changed

    # -------------------------------------------------------------------------
    # Stats
    # -------------------------------------------------------------------------
    def _print_stats(self) -> None:
        """Print solving statistics."""
        print("\nSolving Statistics:")
        print(f"  Passes: {self.stats['passes']}")
        print(f"  Markers placed: {self.stats['markers_placed']}")
        print(f"  Cells blocked: {self.stats['cells_blocked']}")
        for rule, count in self.stats['rule_counts'].items():
            print(f"  {rule}: {count}")


def solve_logically(grid, region_grid, verbose: bool = False,
                    max_subset: int = MAX_SUBSET) -> SolveResult:
    """
    Run the deduction cascade to a fixed point on a copy of `grid`.

    Returns the resulting grid, the number of markers on it and whether all
    N markers were proven.
    """
    puzzle = QueensPuzzle(grid, region_grid)
    solver = LogicalSolver(puzzle, verbose=verbose, max_subset=max_subset)
    solved = solver.solve()
    return SolveResult(puzzle.grid, puzzle.count_markers(), solved)


def evaluate_hint(grid, region_grid, max_subset: int = MAX_SUBSET) -> Optional[Deduction]:
    """The single next deduction for the given board, or None if nothing is forced."""
    puzzle = QueensPuzzle(grid, region_grid)
    return LogicalSolver(puzzle, max_subset=max_subset).next_deduction()
