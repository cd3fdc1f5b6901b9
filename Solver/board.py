"""
Core data structures for Queens puzzle boards and region partitions
"""
import json
from typing import List, Dict, Set, Tuple
from dataclasses import dataclass, field

import numpy as np


# Cell states (same integers the game stores in its grids)
EMPTY = 0
BLOCKED = 1
MARKER = 2

CELL_STATES = (EMPTY, BLOCKED, MARKER)

Cell = Tuple[int, int]


@dataclass
class Region:
    """Represents one colored region of the board"""
    region_id: int
    cells: List[Cell] = field(default_factory=list)

    def add_cell(self, cell: Cell):
        """Add a cell to this region"""
        self.cells.append(cell)

    def rows(self) -> Set[int]:
        return {r for r, _ in self.cells}

    def cols(self) -> Set[int]:
        return {c for _, c in self.cells}

    def __repr__(self):
        return f"Region(id={self.region_id}, size={len(self.cells)})"


class QueensPuzzle:
    """Board state plus region partition for a single puzzle"""

    def __init__(self, grid, region_grid):
        self.grid = np.array(grid, dtype=np.int8)
        self.region_grid = np.array(region_grid, dtype=np.int16)
        self._validate()

        self.size = int(self.grid.shape[0])

        self.regions: Dict[int, Region] = {}
        self._parse_regions()

        # Deductions applied by the solver, in order
        self.move_history: List = []

    @classmethod
    def from_dict(cls, data: Dict) -> "QueensPuzzle":
        """Build a puzzle from a dict with 'puzzle_grid' and 'region_grid'"""
        return cls(data['puzzle_grid'], data['region_grid'])

    @classmethod
    def from_json(cls, json_path: str) -> "QueensPuzzle":
        """Load puzzle from JSON file"""
        with open(json_path, 'r') as f:
            data = json.load(f)
        return cls.from_dict(data)

    def _validate(self):
        """Reject grids that cannot describe a puzzle"""
        if self.grid.ndim != 2 or self.grid.shape[0] != self.grid.shape[1]:
            raise ValueError(f"[board] Grid must be square, got shape {self.grid.shape}")
        if self.region_grid.shape != self.grid.shape:
            raise ValueError(
                f"[board] Region grid shape {self.region_grid.shape} "
                f"does not match board shape {self.grid.shape}"
            )
        if not np.isin(self.grid, CELL_STATES).all():
            raise ValueError("[board] Grid contains unknown cell states")
        n = self.grid.shape[0]
        if n and (self.region_grid.min() < 0 or self.region_grid.max() >= n):
            raise ValueError(f"[board] Region ids must lie in [0, {n})")

    def _parse_regions(self):
        """Group cells by region id"""
        for r in range(self.size):
            for c in range(self.size):
                rid = int(self.region_grid[r, c])
                if rid not in self.regions:
                    self.regions[rid] = Region(region_id=rid)
                self.regions[rid].add_cell((r, c))

    def copy(self) -> "QueensPuzzle":
        return QueensPuzzle(self.grid, self.region_grid)

    def get_region_id(self, row: int, col: int) -> int:
        return int(self.region_grid[row, col])

    def get_region(self, row: int, col: int) -> Region:
        """Get the region a cell belongs to"""
        return self.regions[self.get_region_id(row, col)]

    def marker_cells(self) -> List[Cell]:
        """All cells holding a marker, in row-major order"""
        return [(int(r), int(c)) for r, c in np.argwhere(self.grid == MARKER)]

    def count_markers(self) -> int:
        return int(np.count_nonzero(self.grid == MARKER))

    def is_complete(self) -> bool:
        """Check if every row holds a marker"""
        return self.count_markers() == self.size

    def get_completion_percentage(self) -> float:
        """Fraction of cells that are no longer empty"""
        decided = np.count_nonzero(self.grid != EMPTY)
        return decided / self.grid.size if self.grid.size else 0.0

    def __repr__(self):
        return f"QueensPuzzle(size={self.size}, regions={len(self.regions)}, markers={self.count_markers()})"
