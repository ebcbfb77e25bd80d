import pytest

from oslab.bankers import UnsafeStateError, need_matrix, safe_sequence

ALLOCATION = [[0, 1, 0], [2, 0, 0], [3, 0, 2], [2, 1, 1], [0, 0, 2]]
MAXIMUM = [[7, 5, 3], [3, 2, 2], [9, 0, 2], [2, 2, 2], [4, 3, 3]]
AVAILABLE = [3, 3, 2]


def _is_safe(order, allocation, maximum, available):
    work = list(available)
    for p in order:
        need = [m - a for m, a in zip(maximum[p], allocation[p])]
        if any(n > w for n, w in zip(need, work)):
            return False
        work = [w + a for w, a in zip(work, allocation[p])]
    return True


def test_need_plus_allocation_is_maximum():
    need = need_matrix(ALLOCATION, MAXIMUM)
    for need_row, alloc_row, max_row in zip(need, ALLOCATION, MAXIMUM):
        assert [n + a for n, a in zip(need_row, alloc_row)] == max_row


def test_textbook_safe_sequence():
    assert safe_sequence(ALLOCATION, MAXIMUM, AVAILABLE) == [1, 3, 4, 0, 2]


def test_sequence_is_a_safe_permutation():
    order = safe_sequence(ALLOCATION, MAXIMUM, AVAILABLE)
    assert sorted(order) == list(range(len(ALLOCATION)))
    assert _is_safe(order, ALLOCATION, MAXIMUM, AVAILABLE)


def test_zero_need_runs_in_index_order():
    allocation = [[1], [2], [3]]
    assert safe_sequence(allocation, allocation, [0]) == [0, 1, 2]


def test_unsafe_with_no_progress():
    with pytest.raises(UnsafeStateError) as info:
        safe_sequence([[1, 0], [0, 1]], [[2, 1], [1, 2]], [0, 0])
    assert info.value.finished == ()
    assert str(info.value) == "System is not in a safe state."


def test_unsafe_after_partial_progress():
    with pytest.raises(UnsafeStateError) as info:
        safe_sequence([[0], [1]], [[1], [5]], [1])
    assert info.value.finished == (0,)


def test_mismatched_process_counts():
    with pytest.raises(ValueError):
        need_matrix([[1]], [[1], [2]])


def test_mismatched_resource_counts():
    with pytest.raises(ValueError):
        need_matrix([[1, 2]], [[1]])


def test_available_of_wrong_length():
    with pytest.raises(ValueError):
        safe_sequence(ALLOCATION, MAXIMUM, [3, 3])