import numpy as np
import pytest

from Solver.board import EMPTY, BLOCKED


# Hand-built 4x4 board. Solution: (0,1) (1,3) (2,0) (3,2), region i seeded at solution[i].
SOLUTION_4 = [(0, 1), (1, 3), (2, 0), (3, 2)]
REGIONS_4 = [
    [0, 0, 1, 1],
    [2, 0, 1, 1],
    [2, 2, 3, 1],
    [2, 3, 3, 3],
]


@pytest.fixture
def regions4():
    return np.array(REGIONS_4)


@pytest.fixture
def solution4():
    return list(SOLUTION_4)


@pytest.fixture
def empty4():
    return np.full((4, 4), EMPTY, dtype=np.int8)


@pytest.fixture
def maximal4():
    grid = np.full((4, 4), BLOCKED, dtype=np.int8)
    for r, c in SOLUTION_4:
        grid[r, c] = EMPTY
    return grid
