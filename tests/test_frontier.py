import pytest

from mrvsudoku import InvariantError
from mrvsudoku.bitset import mask_of, popcount
from mrvsudoku.frontier import FrontierQueue
from mrvsudoku.models import Cell


def make_queue(*specs):
    cells = [Cell(x=x, y=y, mask=mask_of(values)) for x, y, values in specs]
    return FrontierQueue(key=lambda c: popcount(c.mask), cells=cells), cells


def test_peek_returns_fewest_candidates():
    q, cells = make_queue((0, 0, [1, 2, 3]), (1, 0, [4]), (2, 0, [5, 6]))
    assert len(q) == 3
    assert q.peek_min() is cells[1]


def test_ties_break_row_major():
    q, cells = make_queue((3, 2, [1, 2]), (5, 1, [3, 4]), (0, 2, [5, 6]))
    assert q.pop_min() is cells[1]
    assert q.pop_min() is cells[2]
    assert q.pop_min() is cells[0]
    assert q.peek_min() is None


def test_reorder_follows_changed_counts():
    q, cells = make_queue((0, 0, [1]), (1, 0, [1, 2, 3]))
    cells[0].mask = mask_of([1, 2, 3, 4])
    cells[1].mask = mask_of([7])
    assert q.peek_min() is cells[0]  # stale until reordered
    q.reorder()
    assert q.peek_min() is cells[1]


def test_remove_and_insert():
    q, cells = make_queue((0, 0, [1]), (1, 0, [1, 2]), (2, 0, [1, 2, 3]))
    q.remove(cells[0])
    assert cells[0] not in q
    assert q.peek_min() is cells[1]
    q.remove(cells[2])
    assert q.cells() == [cells[1]]
    q.insert(cells[0])
    assert cells[0] in q
    assert q.peek_min() is cells[0]
    assert len(q) == 2


def test_contract_violations_raise():
    q, cells = make_queue((0, 0, [1]))
    with pytest.raises(InvariantError):
        q.insert(cells[0])
    q.pop_min()
    with pytest.raises(InvariantError):
        q.pop_min()
    with pytest.raises(InvariantError):
        q.remove(cells[0])
    with pytest.raises(InvariantError):
        FrontierQueue(key=lambda c: 0, cells=[cells[0], cells[0]])
