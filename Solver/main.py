#!/usr/bin/env python3
"""
Queens Solver - Main Entry Point

Usage:
    python -m Solver.main data/json/puzzle.json
    python -m Solver.main --hint data/json/puzzle.json  (or -H)
    python -m Solver.main  # Solves all puzzles in data/json/
"""

import sys
import os
from pathlib import Path

from .board import QueensPuzzle
from .rules import MAX_SUBSET
from .solver import LogicalSolver, evaluate_hint
from .output import PuzzleFormatter

# ============================================================================
# CONFIGURATION
# ============================================================================
DATA_DIR = "data/json"                     # Where generated puzzles are saved
OUTPUT_DIR = "data/debug"                  # Base output directory

MAX_SUBSET_SIZE = MAX_SUBSET
# Largest region/line subset the confinement rule tries (2..N)
# Lower values are faster but prove fewer puzzles
# ============================================================================


def solve_puzzle(input_path: str, output_dir: str = None, verbose: bool = True,
                 max_subset: int = MAX_SUBSET_SIZE):
    """
    Solve a single puzzle by deduction and save results.

    Args:
        input_path: Path to input JSON file
        output_dir: Directory for output files (default: data/debug/<puzzle_name>/)
        verbose: Print every deduction
        max_subset: Largest subset tried by the confinement rule
    """
    puzzle_name = Path(input_path).stem

    if output_dir is None:
        output_dir = Path(OUTPUT_DIR) / puzzle_name

    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    print(f"\n{'='*60}")
    print(f"Loading puzzle: {input_path}")
    print(f"Output directory: {output_dir}")
    print(f"{'='*60}")

    try:
        puzzle = QueensPuzzle.from_json(str(input_path))
        solver = LogicalSolver(puzzle, verbose=verbose, max_subset=max_subset)

        solved = solver.solve()

        json_output = output_dir / "solution.json"
        text_output = output_dir / "solution.txt"
        PuzzleFormatter.save_solution(puzzle, solver.stats, str(json_output))
        PuzzleFormatter.save_human_readable(puzzle, str(text_output))

        if solved:
            print(f"\n{'='*60}")
            print("SUCCESS! Puzzle solved ✓")
            print(f"{'='*60}")
            if verbose:
                print(PuzzleFormatter.format_grid_visualization(puzzle.grid, puzzle.region_grid))
        else:
            print(f"\n{'='*60}")
            print(f"FAILED: Deduction stalled at {puzzle.count_markers()}/{puzzle.size} markers ✗")
            print(f"{'='*60}")
            if verbose and max_subset < MAX_SUBSET:
                print(f"\n💡 Tip: Try a max_subset of {MAX_SUBSET}")

        return solved, puzzle, solver

    except KeyboardInterrupt:
        print(f"\n\n{'='*60}")
        print("⚠ Solving interrupted by user (Ctrl+C)")
        print(f"{'='*60}")
        return False, None, None

    except (OSError, ValueError, KeyError) as e:
        print(f"\nError while solving {input_path}: {e}")
        return False, None, None


def show_hint(input_path: str, max_subset: int = MAX_SUBSET_SIZE):
    """Print the next forced deduction for a saved board."""
    puzzle = QueensPuzzle.from_json(str(input_path))
    hint = evaluate_hint(puzzle.grid, puzzle.region_grid, max_subset=max_subset)

    if hint is None:
        print("No Obvious Hints: nothing is forced on this board.")
    else:
        print(f"Hint [{hint.rule}]: {hint.describe()}")
        print(f"  {hint.action} {hint.cells}")
    return hint


def solve_all_puzzles(data_dir: str = None, output_dir: str = None,
                      max_subset: int = MAX_SUBSET_SIZE):
    """
    Solve all puzzles in data/json/ (or a specified directory)
    """
    data_path = Path(data_dir or DATA_DIR)
    if not data_path.exists():
        print(f"Error: Directory not found: {data_path}")
        return

    json_files = sorted(data_path.glob("*.json"))
    if not json_files:
        print(f"No JSON puzzles found in {data_path}")
        return

    print(f"\nFound {len(json_files)} puzzle(s) to solve")
    print(f"  Max subset size: {max_subset}\n")

    results = []

    for i, json_file in enumerate(json_files, 1):
        print(f"\n[{i}/{len(json_files)}] Solving {json_file.name}...")

        target_dir = Path(output_dir) / json_file.stem if output_dir else None
        solved, puzzle, solver = solve_puzzle(
            str(json_file),
            output_dir=target_dir,
            verbose=False,
            max_subset=max_subset
        )

        results.append({
            'file': json_file.name,
            'solved': bool(solved),
            'size': puzzle.size if puzzle else None,
            'markers': puzzle.count_markers() if puzzle else 0,
            'deductions': len(puzzle.move_history) if puzzle else 0,
            'rule_counts': dict(solver.stats['rule_counts']) if solver else {},
        })

        if solved:
            print("  ✓ proven")
        else:
            print(f"  ✗ stalled at {results[-1]['markers']} markers")

    # ---------------------------
    # Rule usage across the batch
    # ---------------------------
    print(f"\n{'='*60}")
    print("SUMMARY")
    print(f"{'='*60}")
    proven = [r for r in results if r['solved']]
    print(f"Proven by deduction: {len(proven)}/{len(results)}")

    totals = {}
    for r in results:
        for rule, count in r['rule_counts'].items():
            totals[rule] = totals.get(rule, 0) + count
    for rule, count in totals.items():
        if count:
            print(f"  {rule}: {count}")
    print(f"{'='*60}\n")

    for r in results:
        mark = "✓" if r['solved'] else "✗"
        if r['size'] is None:
            print(f"{mark} {r['file']:30s} - unreadable")
        else:
            print(f"{mark} {r['file']:30s} - {r['size']}x{r['size']}, "
                  f"{r['markers']}/{r['size']} markers, {r['deductions']} deductions")

    return results


def main():
    """Main entry point"""

    if len(sys.argv) > 1:
        command = sys.argv[1]

        if command == "--hint" or command == "-H":
            if len(sys.argv) < 3:
                print("Usage: python -m Solver.main --hint <puzzle.json>")
                sys.exit(1)

            input_file = sys.argv[2]
            if not os.path.exists(input_file):
                print(f"Error: File not found: {input_file}")
                sys.exit(1)

            show_hint(input_file)
            return

        input_file = command
        if not os.path.exists(input_file):
            print(f"Error: File not found: {input_file}")
            sys.exit(1)

        solve_puzzle(input_file, verbose=True)

    else:
        print(f"Solving all puzzles in {DATA_DIR}/")
        solve_all_puzzles()


if __name__ == "__main__":
    main()
