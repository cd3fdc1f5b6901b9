"""
Deduction rules and marker validation for the Queens solver

Rule cascade, cheapest first:
 1. attack             - a marker rules out its row, column, region and neighbours
 2. naked/hidden single - a row, column or region with one possible cell takes the marker
 3. region pointing    - a region whose candidates share one line claims that line
 4. line confinement   - a line whose candidates share one region claims that region
 5. subset confinement - N regions confined to N lines claim those lines (N = 2..4)

Every finder only reports deductions that change at least one Empty cell, so
an empty result means the rule does not fire on the current board.
"""

from itertools import combinations
from typing import List, Tuple, Dict, Iterator
from dataclasses import dataclass

import numpy as np

from .board import QueensPuzzle, Cell, EMPTY, MARKER


RULE_ATTACK = 'attack'
RULE_NAKED_SINGLE = 'naked_single'
RULE_HIDDEN_SINGLE = 'hidden_single'
RULE_REGION_POINTING = 'region_pointing'
RULE_LINE_CONFINEMENT = 'line_confinement'
RULE_SUBSET_CONFINEMENT = 'subset_confinement'

RULE_ORDER = (
    RULE_ATTACK,
    RULE_NAKED_SINGLE,
    RULE_HIDDEN_SINGLE,
    RULE_REGION_POINTING,
    RULE_LINE_CONFINEMENT,
    RULE_SUBSET_CONFINEMENT,
)

ACTION_BLOCK = 'block'
ACTION_PLACE = 'place'

# Largest region/line subset tried by the confinement rule
MAX_SUBSET = 4


@dataclass
class Deduction:
    """A forced step: cells that must be blocked, or the cell that must hold a marker"""
    rule: str
    action: str
    cells: List[Cell]
    group_type: str              # 'marker', 'row', 'column', 'region', 'rows', 'columns'
    group_ids: Tuple[int, ...]
    regions: Tuple[int, ...] = ()

    def group_label(self) -> str:
        ids = ", ".join(str(i) for i in self.group_ids)
        if self.group_type == 'marker':
            return f"marker at ({ids})"
        return f"{self.group_type} {ids}"

    def describe(self) -> str:
        """One-line explanation suitable for a hint"""
        n = len(self.cells)
        if self.rule == RULE_ATTACK:
            return (f"The {self.group_label()} rules out {n} cell(s) in its row, "
                    f"column, region and neighbours")
        if self.rule == RULE_NAKED_SINGLE:
            return f"{self.group_label().capitalize()} has one empty cell left: {self.cells[0]}"
        if self.rule == RULE_HIDDEN_SINGLE:
            return (f"{self.group_label().capitalize()} has only one cell no marker "
                    f"attacks: {self.cells[0]}")
        if self.rule == RULE_REGION_POINTING:
            return (f"Region {self.regions[0]} must place its marker in {self.group_label()}, "
                    f"ruling out {n} other cell(s) there")
        if self.rule == RULE_LINE_CONFINEMENT:
            return (f"{self.group_label().capitalize()} must take its marker from region "
                    f"{self.regions[0]}, ruling out {n} other cell(s) of that region")
        if self.rule == RULE_SUBSET_CONFINEMENT:
            regions = ", ".join(str(r) for r in self.regions)
            return (f"Regions {regions} fill {self.group_label()} between them, "
                    f"ruling out {n} other cell(s) there")
        return f"{self.rule}: {self.action} {self.cells}"

    def to_dict(self) -> Dict:
        return {
            'rule': self.rule,
            'action': self.action,
            'cells': [list(cell) for cell in self.cells],
            'group_type': self.group_type,
            'group_ids': list(self.group_ids),
            'regions': list(self.regions),
            'description': self.describe(),
        }


# -----------------------------------------------------------------------------
# Mask helpers
# -----------------------------------------------------------------------------
def _cells(mask: np.ndarray) -> List[Cell]:
    return [(int(r), int(c)) for r, c in np.argwhere(mask)]


def _attack_mask(puzzle: QueensPuzzle, row: int, col: int,
                 rr: np.ndarray, cc: np.ndarray) -> np.ndarray:
    """Cells sharing a row, column or region with (row, col), or touching it"""
    return ((rr == row) | (cc == col)
            | (puzzle.region_grid == puzzle.region_grid[row, col])
            | ((np.abs(rr - row) <= 1) & (np.abs(cc - col) <= 1)))


def _iter_groups(puzzle: QueensPuzzle, rr: np.ndarray,
                 cc: np.ndarray) -> Iterator[Tuple[str, int, np.ndarray]]:
    """Rows, columns and regions interleaved by index"""
    for i in range(puzzle.size):
        yield 'row', i, rr == i
        yield 'column', i, cc == i
        if i in puzzle.regions:
            yield 'region', i, puzzle.region_grid == i


def _free_regions(puzzle: QueensPuzzle) -> List[int]:
    """Region ids that do not hold a marker yet"""
    marked = set(puzzle.region_grid[puzzle.grid == MARKER].tolist())
    return [rid for rid in sorted(puzzle.regions) if rid not in marked]


def _bitmask(indices) -> int:
    mask = 0
    for i in indices:
        mask |= 1 << int(i)
    return mask


# -----------------------------------------------------------------------------
# Deduction rules
# -----------------------------------------------------------------------------
class DeductionRules:
    """Finders for each rule of the cascade. None of them modify the board."""

    @staticmethod
    def find_attacks(puzzle: QueensPuzzle) -> List[Deduction]:
        empty = puzzle.grid == EMPTY
        rr, cc = np.indices(puzzle.grid.shape)

        found: List[Deduction] = []
        for r, c in puzzle.marker_cells():
            hit = _attack_mask(puzzle, r, c, rr, cc) & empty
            if hit.any():
                found.append(Deduction(
                    rule=RULE_ATTACK,
                    action=ACTION_BLOCK,
                    cells=_cells(hit),
                    group_type='marker',
                    group_ids=(r, c),
                    regions=(puzzle.get_region_id(r, c),),
                ))
        return found

    @staticmethod
    def find_singles(puzzle: QueensPuzzle) -> List[Deduction]:
        """
        First marker-less row, column or region with a single candidate.

        Naked single: exactly one Empty cell. Hidden single: several Empty
        cells, but only one of them outside every marker's attack zone.
        """
        grid = puzzle.grid
        empty = grid == EMPTY
        rr, cc = np.indices(grid.shape)

        attacked = np.zeros(grid.shape, dtype=bool)
        for r, c in puzzle.marker_cells():
            attacked |= _attack_mask(puzzle, r, c, rr, cc)

        for group_type, gid, mask in _iter_groups(puzzle, rr, cc):
            if (grid[mask] == MARKER).any():
                continue

            spots = _cells(mask & empty)
            if len(spots) == 1:
                r, c = spots[0]
                return [Deduction(RULE_NAKED_SINGLE, ACTION_PLACE, spots, group_type, (gid,),
                                  (puzzle.get_region_id(r, c),))]

            valid = _cells(mask & empty & ~attacked)
            if len(valid) == 1:
                r, c = valid[0]
                return [Deduction(RULE_HIDDEN_SINGLE, ACTION_PLACE, valid, group_type, (gid,),
                                  (puzzle.get_region_id(r, c),))]
        return []

    @staticmethod
    def find_region_pointing(puzzle: QueensPuzzle) -> List[Deduction]:
        """A region whose candidates lie in one row or column owns that line."""
        empty = puzzle.grid == EMPTY
        rr, cc = np.indices(puzzle.grid.shape)

        found: List[Deduction] = []
        for rid in _free_regions(puzzle):
            in_region = puzzle.region_grid == rid
            candidates = _cells(in_region & empty)
            if len(candidates) < 2:
                continue

            rows = {r for r, _ in candidates}
            cols = {c for _, c in candidates}

            if len(rows) == 1:
                row = rows.pop()
                hit = (rr == row) & empty & ~in_region
                if hit.any():
                    found.append(Deduction(RULE_REGION_POINTING, ACTION_BLOCK, _cells(hit),
                                           'row', (row,), (rid,)))
            if len(cols) == 1:
                col = cols.pop()
                hit = (cc == col) & empty & ~in_region
                if hit.any():
                    found.append(Deduction(RULE_REGION_POINTING, ACTION_BLOCK, _cells(hit),
                                           'column', (col,), (rid,)))
        return found

    @staticmethod
    def find_line_confinement(puzzle: QueensPuzzle) -> List[Deduction]:
        """
        A line whose candidates all belong to one region owns that region's marker.

        The mirror image of region pointing: the line is fixed and the region
        is blocked outside it. The earlier web game had no such rule, so
        puzzles carved here can need deductions that its solver never made.
        """
        grid = puzzle.grid
        empty = grid == EMPTY
        rr, cc = np.indices(grid.shape)
        free = set(_free_regions(puzzle))

        found: List[Deduction] = []
        for i in range(puzzle.size):
            for group_type, line in (('row', rr == i), ('column', cc == i)):
                if (grid[line] == MARKER).any():
                    continue
                owners = set(puzzle.region_grid[line & empty].tolist())
                if len(owners) != 1:
                    continue
                rid = owners.pop()
                if rid not in free:
                    continue
                hit = (puzzle.region_grid == rid) & empty & ~line
                if hit.any():
                    found.append(Deduction(RULE_LINE_CONFINEMENT, ACTION_BLOCK, _cells(hit),
                                           group_type, (i,), (rid,)))
        return found

    @staticmethod
    def find_subset_confinement(puzzle: QueensPuzzle, max_subset: int = MAX_SUBSET) -> List[Deduction]:
        """
        Generalized locked candidates.

        For N = 2..max_subset, if exactly N marker-less regions have all their
        candidates inside some N columns (or rows), those regions use up the
        lines, so every other region's cells in them are blocked. Columns are
        tried before rows; the first N that yields anything wins.
        """
        empty = puzzle.grid == EMPTY
        rr, cc = np.indices(puzzle.grid.shape)
        free = _free_regions(puzzle)

        row_masks: Dict[int, int] = {}
        col_masks: Dict[int, int] = {}
        for rid in free:
            cand = np.argwhere((puzzle.region_grid == rid) & empty)
            if len(cand) == 0:
                continue
            row_masks[rid] = _bitmask(cand[:, 0])
            col_masks[rid] = _bitmask(cand[:, 1])

        for n in range(2, max_subset + 1):
            if len(free) < n:
                break
            for group_type, masks, index in (('columns', col_masks, cc), ('rows', row_masks, rr)):
                found = DeductionRules._confined_lines(puzzle, n, masks, index, group_type, empty)
                if found:
                    return found
        return []

    @staticmethod
    def _confined_lines(puzzle: QueensPuzzle, n: int, masks: Dict[int, int],
                        index: np.ndarray, group_type: str,
                        empty: np.ndarray) -> List[Deduction]:
        small = {rid: m for rid, m in masks.items() if bin(m).count('1') <= n}
        if len(small) < n:
            return []

        # Lines no small region touches cannot complete a consistent combination
        pool_mask = 0
        for m in small.values():
            pool_mask |= m
        pool = [i for i in range(puzzle.size) if pool_mask >> i & 1]

        found: List[Deduction] = []
        for combo in combinations(pool, n):
            combo_mask = _bitmask(combo)
            confined = tuple(rid for rid, m in small.items() if m & ~combo_mask == 0)
            if len(confined) != n:
                continue
            hit = np.isin(index, combo) & empty & ~np.isin(puzzle.region_grid, confined)
            if hit.any():
                found.append(Deduction(RULE_SUBSET_CONFINEMENT, ACTION_BLOCK, _cells(hit),
                                       group_type, tuple(combo), confined))
        return found


# -----------------------------------------------------------------------------
# Marker validation
# -----------------------------------------------------------------------------
class ConstraintChecker:
    """Validates placed markers against the row/column/region/touch rules."""

    @staticmethod
    def find_conflicts(grid, region_grid) -> List[str]:
        """Human-readable list of rule violations among the placed markers"""
        grid = np.asarray(grid)
        region_grid = np.asarray(region_grid)
        markers = [(int(r), int(c)) for r, c in np.argwhere(grid == MARKER)]

        errors: List[str] = []
        for i, (r1, c1) in enumerate(markers):
            for r2, c2 in markers[i + 1:]:
                if r1 == r2:
                    errors.append(f"Row {r1} has multiple markers.")
                if c1 == c2:
                    errors.append(f"Column {c1} has multiple markers.")
                if abs(r1 - r2) <= 1 and abs(c1 - c2) <= 1:
                    errors.append(f"Markers at ({r1},{c1}) and ({r2},{c2}) are adjacent.")

        counts: Dict[int, int] = {}
        for r, c in markers:
            rid = int(region_grid[r, c])
            counts[rid] = counts.get(rid, 0) + 1
        for rid, count in sorted(counts.items()):
            if count > 1:
                errors.append(f"Region {rid} has {count} markers.")

        return list(dict.fromkeys(errors))

    @staticmethod
    def is_solved(grid, region_grid) -> bool:
        """N markers placed and none of them conflict"""
        grid = np.asarray(grid)
        markers = int(np.count_nonzero(grid == MARKER))
        return markers == grid.shape[0] and not ConstraintChecker.find_conflicts(grid, region_grid)
