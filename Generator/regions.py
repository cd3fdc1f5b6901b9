"""
Region partitioner

Grows one region from each solution marker by randomized frontier flood fill.
A cell only ever copies the id of an already-assigned 4-neighbour, so every
region stays connected to its seed marker.
"""
from collections import deque
from typing import List, Tuple, Set

import numpy as np

from .sequence import SeededSequence

Cell = Tuple[int, int]

UNASSIGNED = -1
DIRS4 = [(-1, 0), (1, 0), (0, -1), (0, 1)]


def _neighbors(r: int, c: int, size: int):
    for dr, dc in DIRS4:
        nr, nc = r + dr, c + dc
        if 0 <= nr < size and 0 <= nc < size:
            yield nr, nc


def grow_regions(solution: List[Cell], size: int, rng: SeededSequence) -> np.ndarray:
    """Partition the board into len(solution) connected regions, region i seeded at solution[i]"""
    grid = np.full((size, size), UNASSIGNED, dtype=np.int16)

    frontier: List[Cell] = []
    for region_id, (r, c) in enumerate(solution):
        grid[r, c] = region_id
    for r, c in solution:
        for nr, nc in _neighbors(r, c, size):
            if grid[nr, nc] == UNASSIGNED and (nr, nc) not in frontier:
                frontier.append((nr, nc))

    while frontier:
        rng.shuffle(frontier)
        r, c = frontier.pop(0)

        if grid[r, c] != UNASSIGNED:
            continue

        neighbor_ids = [int(grid[nr, nc]) for nr, nc in _neighbors(r, c, size)
                        if grid[nr, nc] != UNASSIGNED]
        if not neighbor_ids:
            continue

        grid[r, c] = rng.choice(neighbor_ids)

        for nr, nc in _neighbors(r, c, size):
            if grid[nr, nc] == UNASSIGNED and (nr, nc) not in frontier:
                frontier.append((nr, nc))

    return grid


def _region_connected(cells: Set[Cell], size: int) -> bool:
    """BFS over 4-connectivity inside one region"""
    if not cells:
        return False
    start = next(iter(cells))
    seen = {start}
    queue = deque([start])
    while queue:
        r, c = queue.popleft()
        for nb in _neighbors(r, c, size):
            if nb in cells and nb not in seen:
                seen.add(nb)
                queue.append(nb)
    return len(seen) == len(cells)


def check_regions(region_grid, solution: List[Cell]) -> List[str]:
    """
    Invariant violations of a region grid against its solution.

    Every id in [0, N) must be present, 4-connected, and hold exactly one
    solution cell. An empty list means the grid is sound.
    """
    region_grid = np.asarray(region_grid)
    size = region_grid.shape[0]
    problems: List[str] = []

    if (region_grid == UNASSIGNED).any():
        problems.append(f"{int(np.count_nonzero(region_grid == UNASSIGNED))} cell(s) left unassigned")

    for region_id in range(size):
        cells = {(int(r), int(c)) for r, c in np.argwhere(region_grid == region_id)}
        if not cells:
            problems.append(f"Region {region_id} is empty")
            continue
        if not _region_connected(cells, size):
            problems.append(f"Region {region_id} is not connected")
        markers = [cell for cell in solution if cell in cells]
        if len(markers) != 1:
            problems.append(f"Region {region_id} holds {len(markers)} solution cells")

    return problems


def region_sizes(region_grid) -> List[int]:
    region_grid = np.asarray(region_grid)
    return np.bincount(region_grid.ravel(), minlength=region_grid.shape[0]).tolist()
