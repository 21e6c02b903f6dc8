import pytest

from page_table import PageTable, PageTableEntry
from simulation_errors import InvalidPage


def test_entry_lifecycle():
    entry = PageTableEntry(3)
    assert not entry.is_resident()

    entry.load(frame_index=2, clock=5)
    assert entry.is_resident()
    assert (entry.frame_index, entry.arrival_time, entry.last_access_time, entry.reference_count) == (2, 5, 5, 1)

    entry.touch(8)
    assert (entry.arrival_time, entry.last_access_time, entry.reference_count) == (5, 8, 2)

    entry.evict()
    assert not entry.is_resident()
    assert entry.last_access_time is None


def test_unbounded_table_accepts_large_pages():
    table = PageTable()
    assert table.get_entry(10 ** 6).page == 10 ** 6


def test_bounded_table_range():
    table = PageTable(num_pages=4)
    table.check_page(0)
    table.check_page(3)
    with pytest.raises(InvalidPage):
        table.check_page(4)


@pytest.mark.parametrize("page", [-1, "1", None, False])
def test_rejects_non_page_values(page):
    with pytest.raises(InvalidPage):
        PageTable().get_entry(page)


def test_resident_entries_only_lists_loaded_pages():
    table = PageTable()
    table.get_entry(1).load(0, 1)
    table.get_entry(2)
    assert [e.page for e in table.resident_entries()] == [1]
    assert table.is_resident(1)
    assert not table.is_resident(2)
    assert not table.is_resident(7)
