"""
Queens Puzzle Solver Package

A deduction-only solver for Queens puzzles: one marker per row, column and
colored region, no two markers touching.
"""

from .board import QueensPuzzle, Region, EMPTY, BLOCKED, MARKER
from .rules import Deduction, DeductionRules, ConstraintChecker, RULE_ORDER
from .solver import LogicalSolver, SolveResult, solve_logically, evaluate_hint
from .output import PuzzleFormatter

__version__ = "1.0.0"
__all__ = [
    'QueensPuzzle',
    'Region',
    'EMPTY',
    'BLOCKED',
    'MARKER',
    'Deduction',
    'DeductionRules',
    'ConstraintChecker',
    'RULE_ORDER',
    'LogicalSolver',
    'SolveResult',
    'solve_logically',
    'evaluate_hint',
    'PuzzleFormatter'
]
