import json

import numpy as np
import pytest

from Solver.board import QueensPuzzle, EMPTY, BLOCKED, MARKER


def test_regions_are_parsed(empty4, regions4):
    puzzle = QueensPuzzle(empty4, regions4)

    assert puzzle.size == 4
    assert sorted(puzzle.regions) == [0, 1, 2, 3]
    assert puzzle.regions[0].cells == [(0, 0), (0, 1), (1, 1)]
    assert puzzle.get_region(3, 0).region_id == 2
    assert puzzle.regions[1].rows() == {0, 1, 2}


def test_grid_is_copied(empty4, regions4):
    puzzle = QueensPuzzle(empty4, regions4)
    puzzle.grid[0, 0] = BLOCKED
    assert empty4[0, 0] == EMPTY


def test_copy_is_independent(maximal4, regions4):
    puzzle = QueensPuzzle(maximal4, regions4)
    clone = puzzle.copy()
    clone.grid[0, 1] = MARKER

    assert puzzle.count_markers() == 0
    assert clone.count_markers() == 1
    assert clone.regions[2].cols() == {0, 1}


def test_marker_bookkeeping(maximal4, regions4):
    maximal4[1, 3] = MARKER
    maximal4[0, 1] = MARKER
    puzzle = QueensPuzzle(maximal4, regions4)

    assert puzzle.marker_cells() == [(0, 1), (1, 3)]
    assert puzzle.count_markers() == 2
    assert not puzzle.is_complete()
    assert puzzle.get_completion_percentage() == pytest.approx(14 / 16)


@pytest.mark.parametrize("grid, regions", [
    (np.zeros((4, 3)), np.zeros((4, 3))),
    (np.zeros((4, 4)), np.zeros((3, 3))),
    (np.full((4, 4), 3), np.zeros((4, 4))),
    (np.zeros((4, 4)), np.full((4, 4), 4)),
])
def test_malformed_grids_are_rejected(grid, regions):
    with pytest.raises(ValueError):
        QueensPuzzle(grid, regions)


def test_from_json(tmp_path, maximal4, regions4):
    path = tmp_path / "puzzle.json"
    path.write_text(json.dumps({
        'puzzle_grid': maximal4.tolist(),
        'region_grid': regions4.tolist(),
    }))

    puzzle = QueensPuzzle.from_json(str(path))
    assert np.array_equal(puzzle.grid, maximal4)
    assert np.array_equal(puzzle.region_grid, regions4)
