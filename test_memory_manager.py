import pytest

from memory_manager import CapacityError, FrameTable, Statistics


def test_slots_fill_left_to_right():
    table = FrameTable(3)
    assert table.insert_into_free_slot(5) == 0
    assert table.insert_into_free_slot(-2) == 1
    assert table.snapshot() == (5, -2, None)
    assert not table.is_full()
    assert table.insert_into_free_slot(9) == 2
    assert table.is_full()


def test_lookup():
    table = FrameTable(2)
    table.insert_into_free_slot(4)
    table.insert_into_free_slot(0)
    assert table.lookup(4) == 0
    assert table.lookup(0) == 1
    assert table.lookup(7) is None


def test_insert_when_full_raises():
    table = FrameTable(1)
    table.insert_into_free_slot(1)
    with pytest.raises(CapacityError):
        table.insert_into_free_slot(2)


def test_replace_slot_keeps_position():
    table = FrameTable(3)
    for page in (1, 2, 3):
        table.insert_into_free_slot(page)
    table.replace_slot(1, 8)
    assert table.snapshot() == (1, 8, 3)
    assert table.pages() == [1, 8, 3]
    assert table.lookup(2) is None


def test_replace_empty_slot_raises():
    table = FrameTable(2)
    table.insert_into_free_slot(1)
    with pytest.raises(CapacityError):
        table.replace_slot(1, 2)


def test_snapshot_is_a_copy():
    table = FrameTable(2)
    table.insert_into_free_slot(1)
    snapshot = table.snapshot()
    table.insert_into_free_slot(2)
    assert snapshot == (1, None)


def test_statistics():
    stats = Statistics()
    assert stats.hit_rate() == 0.0
    stats.record_page_fault()
    stats.record_page_fault()
    stats.record_hit()
    stats.record_page_fault()
    assert stats.page_faults == 3
    assert stats.hits == 1
    assert stats.references == 4
    assert str(stats) == ("References: 4\n"
                          "Page Faults: 3\n"
                          "Hits: 1\n"
                          "Hit Rate: 25.00%")
