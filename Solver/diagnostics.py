"""
Diagnostics: see which rules a puzzle needs, and where deduction stops

Usage:
    python -m Solver.diagnostics data/json/puzzle.json
"""

import sys
from pathlib import Path
from typing import List, Dict

import numpy as np

from .board import QueensPuzzle, EMPTY, MARKER
from .rules import Deduction, RULE_ORDER, MAX_SUBSET
from .solver import LogicalSolver
from .output import PuzzleFormatter


def trace_deductions(puzzle: QueensPuzzle, max_subset: int = MAX_SUBSET,
                     verbose: bool = True) -> List[Deduction]:
    """Run the solver one cascade pass at a time, printing every deduction."""
    solver = LogicalSolver(puzzle, max_subset=max_subset)
    passes = 0

    while not puzzle.is_complete():
        before = len(puzzle.move_history)
        if not solver.step():
            break
        passes += 1
        if verbose:
            for deduction in puzzle.move_history[before:]:
                print(f"  Pass {passes:3d} [{deduction.rule}] {deduction.describe()}")

    return list(puzzle.move_history)


def summarize_rule_usage(deductions: List[Deduction]) -> Dict[str, int]:
    """Firing counts for the rules that were used, in cascade order"""
    counts = {rule: 0 for rule in RULE_ORDER}
    for deduction in deductions:
        counts[deduction.rule] += 1
    return {rule: n for rule, n in counts.items() if n}


def find_stalled_groups(puzzle: QueensPuzzle) -> List[Dict]:
    """Marker-less rows, columns and regions with their remaining candidates, tightest first"""
    grid = puzzle.grid
    empty = grid == EMPTY
    rr, cc = np.indices(grid.shape)

    groups = []
    for i in range(puzzle.size):
        for group_type, mask in (('row', rr == i), ('column', cc == i),
                                 ('region', puzzle.region_grid == i)):
            if not mask.any() or (grid[mask] == MARKER).any():
                continue
            candidates = [(int(r), int(c)) for r, c in np.argwhere(mask & empty)]
            groups.append({
                'group_type': group_type,
                'group_id': i,
                'candidates': candidates,
            })

    groups.sort(key=lambda g: (len(g['candidates']), g['group_type'], g['group_id']))
    return groups


def analyze_puzzle(json_path: str, max_subset: int = MAX_SUBSET) -> Dict:
    """Deeply analyze how far deduction gets on a saved puzzle."""
    start = QueensPuzzle.from_json(json_path)
    puzzle = start.copy()

    print(f"\n{'='*70}")
    print(f"ANALYZING: {Path(json_path).name}")
    print(f"{'='*70}")
    print(f"Size: {puzzle.size}x{puzzle.size}")
    print(f"Clues (blocked cells): {int(np.count_nonzero(start.grid != EMPTY))}")

    print("\nRegions:")
    for region_id, region in sorted(puzzle.regions.items()):
        print(f"  Region {PuzzleFormatter.region_label(region_id)} ({region_id}): "
              f"{len(region.cells)} cells, spans {len(region.rows())} row(s) x {len(region.cols())} col(s)")

    print("\nDeduction trace:")
    deductions = trace_deductions(puzzle, max_subset=max_subset)
    usage = summarize_rule_usage(deductions)
    decided = int(np.count_nonzero(puzzle.grid != start.grid))

    print(f"\n{'='*70}")
    solved = puzzle.is_complete()
    if solved:
        print(f"✓ SOLVED with {len(deductions)} deductions")
    else:
        print(f"✗ STALLED at {puzzle.count_markers()}/{puzzle.size} markers")
        print("\nTightest open groups:")
        for group in find_stalled_groups(puzzle)[:5]:
            print(f"  {group['group_type']} {group['group_id']}: "
                  f"{len(group['candidates'])} candidates {group['candidates']}")

    print("\nRule usage:")
    for rule, count in usage.items():
        print(f"  {rule}: {count}")
    print(PuzzleFormatter.format_grid_visualization(puzzle.grid, puzzle.region_grid))
    print(f"{'='*70}\n")

    return {
        'solved': solved,
        'markers': puzzle.count_markers(),
        'deductions': len(deductions),
        'rule_usage': usage,
        'decided_cells': decided,
        'completion': puzzle.get_completion_percentage(),
    }


def main():
    if len(sys.argv) < 2:
        print("Usage: python -m Solver.diagnostics <puzzle.json> [...]")
        sys.exit(1)

    for path in sys.argv[1:]:
        if not Path(path).exists():
            print(f"WARNING: File not found: {path}")
            continue
        analyze_puzzle(path)


if __name__ == "__main__":
    main()
