import json

from Solver.board import QueensPuzzle, BLOCKED
from Solver.rules import RULE_NAKED_SINGLE
from Solver.diagnostics import (
    trace_deductions,
    summarize_rule_usage,
    find_stalled_groups,
    analyze_puzzle,
)


def test_trace_on_maximal_board(maximal4, regions4):
    puzzle = QueensPuzzle(maximal4, regions4)
    deductions = trace_deductions(puzzle, verbose=False)

    assert puzzle.is_complete()
    assert [d.rule for d in deductions] == [RULE_NAKED_SINGLE] * 4
    assert summarize_rule_usage(deductions) == {RULE_NAKED_SINGLE: 4}


def test_stalled_groups_tightest_first(maximal4, regions4):
    maximal4[0, 1] = BLOCKED
    puzzle = QueensPuzzle(maximal4, regions4)
    trace_deductions(puzzle, verbose=False)

    groups = find_stalled_groups(puzzle)
    assert not puzzle.is_complete()
    assert groups[0] == {'group_type': 'column', 'group_id': 1, 'candidates': []}
    assert {(g['group_type'], g['group_id']) for g in groups} == {
        ('column', 1), ('region', 0), ('row', 0),
    }


def test_no_stalled_groups_once_solved(maximal4, regions4):
    puzzle = QueensPuzzle(maximal4, regions4)
    trace_deductions(puzzle, verbose=False)
    assert find_stalled_groups(puzzle) == []


def test_analyze_puzzle(tmp_path, maximal4, regions4):
    path = tmp_path / "puzzle.json"
    path.write_text(json.dumps({
        'puzzle_grid': maximal4.tolist(),
        'region_grid': regions4.tolist(),
    }))

    report = analyze_puzzle(str(path))
    assert report['solved'] is True
    assert report['markers'] == 4
    assert report['rule_usage'] == {RULE_NAKED_SINGLE: 4}
    assert report['decided_cells'] == 4
