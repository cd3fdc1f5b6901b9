import json
import string
from typing import Dict
from datetime import datetime

import numpy as np

from .board import QueensPuzzle, EMPTY, BLOCKED, MARKER
from .rules import ConstraintChecker


STATE_SYMBOLS = {EMPTY: '·', BLOCKED: 'x', MARKER: 'Q'}
REGION_LABELS = string.ascii_uppercase + string.ascii_lowercase


class PuzzleFormatter:
    """Formats puzzles and solver results for output"""

    @staticmethod
    def region_label(region_id: int) -> str:
        if 0 <= region_id < len(REGION_LABELS):
            return REGION_LABELS[region_id]
        return '?'

    @staticmethod
    def format_solution_json(puzzle: QueensPuzzle, stats: Dict) -> Dict:
        """
        Format solver result as JSON
        """
        return {
            'puzzle_info': {
                'size': puzzle.size,
                'total_regions': len(puzzle.regions),
                'markers': puzzle.count_markers(),
                'solved': puzzle.is_complete(),
                'timestamp': datetime.now().isoformat()
            },
            'solving_stats': stats,
            'markers': [list(cell) for cell in puzzle.marker_cells()],
            'deductions': [d.to_dict() for d in puzzle.move_history],
            'conflicts': ConstraintChecker.find_conflicts(puzzle.grid, puzzle.region_grid),
            'grid': puzzle.grid.tolist(),
            'region_grid': puzzle.region_grid.tolist(),
        }

    @staticmethod
    def format_grid_visualization(grid, region_grid) -> str:
        """
        Text grid: region letter followed by the cell state
        (· empty, x blocked, Q marker).
        """
        grid = np.asarray(grid)
        region_grid = np.asarray(region_grid)
        if grid.size == 0:
            return "Empty puzzle"

        n = grid.shape[0]
        lines = []
        lines.append("\nGRID VISUALIZATION:")
        lines.append("-" * (n * 3 + 1))
        for r in range(n):
            row = [
                PuzzleFormatter.region_label(int(region_grid[r, c])) + STATE_SYMBOLS[int(grid[r, c])]
                for c in range(n)
            ]
            lines.append("  " + " ".join(row))
        lines.append("-" * (n * 3 + 1))
        return "\n".join(lines)

    @staticmethod
    def format_solution_human_readable(puzzle: QueensPuzzle) -> str:
        """
        Format solver result as human-readable text
        """
        lines = []
        lines.append("=" * 60)
        lines.append("QUEENS PUZZLE SOLUTION")
        lines.append("=" * 60)
        lines.append(f"\nBoard is {puzzle.size}x{puzzle.size} with {len(puzzle.regions)} regions")
        lines.append(f"Placed {puzzle.count_markers()}/{puzzle.size} markers "
                     f"using {len(puzzle.move_history)} deductions\n")

        lines.append("DEDUCTIONS:")
        lines.append("-" * 60)
        for i, deduction in enumerate(puzzle.move_history, 1):
            lines.append(f"{i:3d}. [{deduction.rule}] {deduction.describe()}")

        lines.append("\n" + "=" * 60)
        lines.append("VALIDATION:")
        lines.append("-" * 60)
        conflicts = ConstraintChecker.find_conflicts(puzzle.grid, puzzle.region_grid)
        if conflicts:
            for message in conflicts:
                lines.append(f"✗ {message}")
        elif puzzle.is_complete():
            lines.append("✓ All markers placed without conflicts")
        else:
            lines.append("✗ Deduction stalled before every marker was placed")
        lines.append("=" * 60)

        lines.append(PuzzleFormatter.format_grid_visualization(puzzle.grid, puzzle.region_grid))
        return "\n".join(lines)

    @staticmethod
    def save_solution(puzzle: QueensPuzzle, stats: Dict, output_path: str):
        """
        Save solver result to JSON file
        """
        solution = PuzzleFormatter.format_solution_json(puzzle, stats)

        with open(output_path, 'w') as f:
            json.dump(solution, f, indent=2)

        print(f"\n✓ Solution saved to: {output_path}")

    @staticmethod
    def save_human_readable(puzzle: QueensPuzzle, output_path: str):
        """
        Save human-readable solution to text file
        """
        text = PuzzleFormatter.format_solution_human_readable(puzzle)

        with open(output_path, 'w') as f:
            f.write(text)

        print(f"✓ Human-readable solution saved to: {output_path}")
