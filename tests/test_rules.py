import numpy as np

from Solver.board import QueensPuzzle, BLOCKED, MARKER
from Solver.rules import (
    DeductionRules,
    ConstraintChecker,
    RULE_ATTACK,
    RULE_NAKED_SINGLE,
    RULE_HIDDEN_SINGLE,
    RULE_REGION_POINTING,
    RULE_LINE_CONFINEMENT,
    RULE_SUBSET_CONFINEMENT,
    ACTION_BLOCK,
    ACTION_PLACE,
)


def test_attack_blocks_row_column_region_and_neighbours(empty4, regions4):
    empty4[0, 1] = MARKER
    found = DeductionRules.find_attacks(QueensPuzzle(empty4, regions4))

    assert len(found) == 1
    d = found[0]
    assert d.rule == RULE_ATTACK
    assert d.action == ACTION_BLOCK
    assert d.group_type == 'marker'
    assert d.group_ids == (0, 1)
    assert d.cells == [(0, 0), (0, 2), (0, 3), (1, 0), (1, 1), (1, 2), (2, 1), (3, 1)]


def test_attack_is_silent_once_everything_is_blocked(maximal4, regions4):
    maximal4[0, 1] = MARKER
    assert DeductionRules.find_attacks(QueensPuzzle(maximal4, regions4)) == []


def test_naked_single_in_row(empty4, regions4):
    empty4[2, 1:] = BLOCKED
    found = DeductionRules.find_singles(QueensPuzzle(empty4, regions4))

    assert len(found) == 1
    d = found[0]
    assert d.rule == RULE_NAKED_SINGLE
    assert d.action == ACTION_PLACE
    assert d.cells == [(2, 0)]
    assert d.group_type == 'row'
    assert d.group_ids == (2,)
    assert d.regions == (2,)


def test_hidden_single_uses_attack_zones(empty4, regions4):
    # Marker placed but its attacks not blocked yet: row 1 only has (1,3) unattacked
    empty4[0, 1] = MARKER
    found = DeductionRules.find_singles(QueensPuzzle(empty4, regions4))

    assert len(found) == 1
    d = found[0]
    assert d.rule == RULE_HIDDEN_SINGLE
    assert d.cells == [(1, 3)]
    assert d.group_type == 'row'
    assert d.group_ids == (1,)


def test_region_pointing_claims_its_row(empty4, regions4):
    for cell in [(1, 2), (1, 3), (2, 3)]:
        empty4[cell] = BLOCKED
    found = DeductionRules.find_region_pointing(QueensPuzzle(empty4, regions4))

    assert len(found) == 1
    d = found[0]
    assert d.rule == RULE_REGION_POINTING
    assert d.cells == [(0, 0), (0, 1)]
    assert d.group_type == 'row'
    assert d.group_ids == (0,)
    assert d.regions == (1,)


def test_line_confinement_claims_the_region(empty4, regions4):
    empty4[0, 0] = BLOCKED
    empty4[0, 1] = BLOCKED
    found = DeductionRules.find_line_confinement(QueensPuzzle(empty4, regions4))

    assert [d.rule for d in found] == [RULE_LINE_CONFINEMENT, RULE_LINE_CONFINEMENT]
    row_rule, col_rule = found
    assert (row_rule.group_type, row_rule.group_ids, row_rule.regions) == ('row', (0,), (1,))
    assert row_rule.cells == [(1, 2), (1, 3), (2, 3)]
    assert (col_rule.group_type, col_rule.group_ids, col_rule.regions) == ('column', (0,), (2,))
    assert col_rule.cells == [(2, 1)]


def test_subset_confinement_on_two_columns(empty4, regions4):
    found = DeductionRules.find_subset_confinement(QueensPuzzle(empty4, regions4))

    assert len(found) == 1
    d = found[0]
    assert d.rule == RULE_SUBSET_CONFINEMENT
    assert d.group_type == 'columns'
    assert d.group_ids == (0, 1)
    assert d.regions == (0, 2)
    assert d.cells == [(3, 1)]


def test_subset_confinement_respects_max_subset(empty4, regions4):
    assert DeductionRules.find_subset_confinement(QueensPuzzle(empty4, regions4), max_subset=1) == []


def test_finders_do_not_modify_the_board(empty4, regions4):
    puzzle = QueensPuzzle(empty4, regions4)
    before = puzzle.grid.copy()
    DeductionRules.find_subset_confinement(puzzle)
    DeductionRules.find_line_confinement(puzzle)
    assert np.array_equal(puzzle.grid, before)


def test_deduction_describe_and_to_dict(empty4, regions4):
    empty4[2, 1:] = BLOCKED
    d = DeductionRules.find_singles(QueensPuzzle(empty4, regions4))[0]

    assert "Row 2" in d.describe()
    data = d.to_dict()
    assert data['rule'] == RULE_NAKED_SINGLE
    assert data['cells'] == [[2, 0]]
    assert data['description'] == d.describe()


def test_conflicts_for_shared_row(empty4, regions4):
    empty4[0, 0] = MARKER
    empty4[0, 2] = MARKER
    assert ConstraintChecker.find_conflicts(empty4, regions4) == ["Row 0 has multiple markers."]


def test_conflicts_for_touching_markers_in_one_region(empty4, regions4):
    empty4[0, 0] = MARKER
    empty4[1, 1] = MARKER
    assert ConstraintChecker.find_conflicts(empty4, regions4) == [
        "Markers at (0,0) and (1,1) are adjacent.",
        "Region 0 has 2 markers.",
    ]


def test_is_solved(maximal4, regions4, solution4):
    assert not ConstraintChecker.is_solved(maximal4, regions4)
    for cell in solution4:
        maximal4[cell] = MARKER
    assert ConstraintChecker.is_solved(maximal4, regions4)


def test_region_pointing_claims_its_column(empty4, regions4):
    regions = regions4.T.copy()
    for cell in [(2, 1), (3, 1), (3, 2)]:
        empty4[cell] = BLOCKED
    found = DeductionRules.find_region_pointing(QueensPuzzle(empty4, regions))

    assert len(found) == 1
    d = found[0]
    assert d.group_type == 'column'
    assert d.group_ids == (0,)
    assert d.regions == (1,)
    assert d.cells == [(0, 0), (1, 0)]


def test_subset_confinement_on_two_rows(empty4, regions4):
    # Transposed board: the column case above becomes a row case
    found = DeductionRules.find_subset_confinement(QueensPuzzle(empty4, regions4.T.copy()))

    assert len(found) == 1
    d = found[0]
    assert d.group_type == 'rows'
    assert d.group_ids == (0, 1)
    assert d.regions == (0, 2)
    assert d.cells == [(1, 3)]


# Regions 0-2 each reach all of columns 0-2 and no two regions fit in the same two rows,
# so nothing is confined in pairs but the three together own columns 0-2.
REGIONS_TRIPLE = [
    [0, 0, 0, 4, 4, 4],
    [0, 1, 1, 4, 5, 5],
    [1, 1, 1, 4, 5, 5],
    [2, 2, 2, 5, 5, 5],
    [2, 2, 3, 5, 5, 5],
    [3, 3, 3, 3, 3, 3],
]


def test_subset_confinement_on_three_columns():
    grid = np.zeros((6, 6), dtype=np.int8)
    puzzle = QueensPuzzle(grid, REGIONS_TRIPLE)

    assert DeductionRules.find_subset_confinement(puzzle, max_subset=2) == []

    found = DeductionRules.find_subset_confinement(puzzle, max_subset=3)
    assert len(found) == 1
    d = found[0]
    assert d.rule == RULE_SUBSET_CONFINEMENT
    assert d.group_type == 'columns'
    assert d.group_ids == (0, 1, 2)
    assert d.regions == (0, 1, 2)
    assert d.cells == [(4, 2), (5, 0), (5, 1), (5, 2)]
