import pytest

from oslab.paging import (
    DEMO_PAGE_TABLE,
    PageTable,
    fifo_replace,
    lru_replace,
    welcome_message,
)

REFS = [7, 0, 1, 2, 0, 3, 0, 4, 2, 3, 0, 3, 2]


def test_counts_add_up():
    for result in (fifo_replace(REFS, 3), lru_replace(REFS, 3)):
        assert len(result.steps) == len(REFS)
        assert result.hits() + result.faults() == len(REFS)
        assert result.hit_ratio() + result.miss_ratio() == pytest.approx(1.0)
        assert result.hit_ratio() == pytest.approx(result.hits() / len(REFS))


def test_page_resident_after_each_step():
    for result in (fifo_replace(REFS, 3), lru_replace(REFS, 3)):
        for step, page in zip(result.steps, REFS):
            assert step.page == page
            assert page in step.frames
            assert len(step.frames) == 3


def test_hit_iff_already_resident():
    for result in (fifo_replace(REFS, 3), lru_replace(REFS, 3)):
        assert result.steps[0].hit is False
        for before, step in zip(result.steps, result.steps[1:]):
            assert step.hit == (step.page in before.frames)


def test_frames_change_only_on_miss():
    for result in (fifo_replace(REFS, 3), lru_replace(REFS, 3)):
        for before, step in zip(result.steps, result.steps[1:]):
            changed = sum(a != b for a, b in zip(before.frames, step.frames))
            assert changed == (0 if step.hit else 1)


def test_empty_frames_fill_in_order():
    assert fifo_replace([1, 2, 3], 3).steps[-1].frames == (1, 2, 3)
    assert lru_replace([1, 2, 3], 3).steps[-1].frames == (1, 2, 3)
    assert fifo_replace([5], 2).steps[0].frames == (5, None)
    assert lru_replace([5], 2).steps[0].frames == (5, None)


def test_enough_frames_means_only_compulsory_faults():
    frames = len(set(REFS))
    assert fifo_replace(REFS, frames).faults() == len(set(REFS))
    assert lru_replace(REFS, frames).faults() == len(set(REFS))


def test_invalid_arguments():
    with pytest.raises(ValueError):
        fifo_replace(REFS, 0)
    with pytest.raises(ValueError):
        fifo_replace([], 3)
    with pytest.raises(ValueError):
        lru_replace(REFS, 0)
    with pytest.raises(ValueError):
        lru_replace([], 3)


def test_fifo_and_lru_evict_differently():
    refs = [1, 2, 3, 1, 4]
    fifo_final = fifo_replace(refs, 3).steps[-1].frames
    lru_final = lru_replace(refs, 3).steps[-1].frames
    assert 1 not in fifo_final
    assert 1 in lru_final
    assert 2 not in lru_final


def test_page_table_translation_keeps_offset():
    table = PageTable([7, 3, 9], 4)
    for address in range(12):
        physical = table.translate(address)
        assert physical % 4 == address % 4
        assert physical // 4 == table.frames[address // 4]


def test_page_table_rejects_out_of_range():
    table = PageTable([7, 3, 9], 4)
    with pytest.raises(ValueError):
        table.translate(12)
    with pytest.raises(ValueError):
        table.translate(-1)


def test_page_table_rejects_bad_page_size():
    with pytest.raises(ValueError):
        PageTable([1], 0)


def test_demo_translation():
    assert DEMO_PAGE_TABLE.translate(12) == 232


def test_welcome_message():
    assert welcome_message() == "Hello, Welcome"