#!/usr/bin/env python3
"""
Debug script to replay one seed stage by stage

Usage:
    python debug.py 8 0.85 1700000000000

Or configure the values below and just run:
    python debug.py
"""

import sys

# ============================================================================
# CONFIGURATION
# ============================================================================
SIZE = 6                 # Board size to replay
REMOVAL_RATIO = 0.8      # Fraction of non-solution cells to try opening
SEED = 12345             # Seed to replay
# ============================================================================

import numpy as np

from Generator import SeededSequence, find_solution, is_valid_solution, grow_regions, check_regions, carve
from Generator.carver import maximal_clue_board
from Generator.regions import region_sizes
from Solver import QueensPuzzle, PuzzleFormatter, BLOCKED
from Solver.diagnostics import trace_deductions, summarize_rule_usage


def debug_seed(size: int, removal_ratio: float, seed: int):
    """Run the generation pipeline with maximum debug output"""

    print(f"\n{'='*70}")
    print(f"DEBUGGING: size={size} ratio={removal_ratio} seed={seed}")
    print(f"{'='*70}\n")

    rng = SeededSequence(seed)

    print("Step 1: Finding solution...")
    solution = find_solution(size, rng)
    if solution is None:
        print("  ✗ Search exhausted, no placement for this seed")
        return None
    print(f"  Solution: {solution}")
    print(f"  Valid: {is_valid_solution(solution, size)}")
    print(f"  Draws so far: {rng.draws}\n")

    print("Step 2: Growing regions...")
    region_grid = grow_regions(solution, size, rng)
    problems = check_regions(region_grid, solution)
    print(f"  Region sizes: {region_sizes(region_grid)}")
    print(f"  Problems: {problems or 'none'}")
    print(PuzzleFormatter.format_grid_visualization(maximal_clue_board(solution, size), region_grid))
    print(f"  Draws so far: {rng.draws}\n")

    print("Step 3: Carving clues...")
    puzzle_grid = carve(solution, region_grid, removal_ratio, size, rng, verbose=True)
    print(PuzzleFormatter.format_grid_visualization(puzzle_grid, region_grid))
    print(f"  Draws total: {rng.draws}\n")

    print("Step 4: Tracing deductions...")
    puzzle = QueensPuzzle(puzzle_grid, region_grid)
    deductions = trace_deductions(puzzle)

    print(f"\n{'='*70}")
    found = sorted(puzzle.marker_cells())
    if puzzle.is_complete() and found == sorted(solution):
        print(f"✓ Reconstructed the solution with {len(deductions)} deductions")
    else:
        print(f"✗ Solver ended with {found}, expected {sorted(solution)}")
    print(f"Clues: {int(np.count_nonzero(puzzle_grid == BLOCKED))}")
    for rule, count in summarize_rule_usage(deductions).items():
        print(f"  {rule}: {count}")
    print(f"{'='*70}\n")

    return puzzle


if __name__ == "__main__":
    if len(sys.argv) > 3:
        debug_seed(int(sys.argv[1]), float(sys.argv[2]), int(sys.argv[3]))
    else:
        debug_seed(SIZE, REMOVAL_RATIO, SEED)
