import pytest

from Generator.sequence import SeededSequence
from Generator.solution import find_solution, is_valid_solution


@pytest.mark.parametrize("size", [4, 5, 6, 7, 8, 10, 12, 16, 20])
@pytest.mark.parametrize("seed", [0, 1, 12345, 1700000000000])
def test_solution_is_valid(size, seed):
    solution = find_solution(size, SeededSequence(seed))

    assert solution is not None
    assert is_valid_solution(solution, size)
    assert [r for r, _ in solution] == list(range(size))


def test_same_seed_same_solution():
    assert find_solution(8, SeededSequence(5)) == find_solution(8, SeededSequence(5))


def test_four_by_four_has_only_two_placements():
    found = {tuple(find_solution(4, SeededSequence(seed))) for seed in range(30)}
    assert found <= {
        ((0, 1), (1, 3), (2, 0), (3, 2)),
        ((0, 2), (1, 0), (2, 3), (3, 1)),
    }


def test_too_small_board_has_no_placement():
    assert find_solution(3, SeededSequence(1)) is None


def test_known_good_solution():
    assert is_valid_solution([(0, 0), (1, 2), (2, 4), (3, 1), (4, 3)], 5)


@pytest.mark.parametrize("solution, size", [
    ([(0, 1), (1, 3), (2, 0)], 4),                    # too short
    ([(0, 0), (2, 2), (1, 4), (3, 1), (4, 3)], 5),    # shared diagonal
    ([(0, 1), (1, 3), (2, 0), (3, 3)], 4),            # shared column
    ([(0, 1), (1, 3), (2, 0), (3, 4)], 4),            # off the board
    (None, 4),
])
def test_invalid_solutions_are_rejected(solution, size):
    assert not is_valid_solution(solution, size)
