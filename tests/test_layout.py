import pytest

from parking_allocator.domain.common import SizeClass
from parking_allocator.domain.layout import initialize_parking_slots, LayoutError


def test_initialize_parking_slots():
    """Test one slot per entry point row and column."""
    slots = initialize_parking_slots(2, [[1, 4, 6], [5, 3, 2]], [0, 1, 2])

    assert len(slots) == 6
    assert [slot.index for slot in slots] == list(range(6))
    assert [slot.distance for slot in slots] == [1, 4, 6, 5, 3, 2]
    assert [slot.entry_point for slot in slots] == [0, 0, 0, 1, 1, 1]
    assert all(not slot.occupied for slot in slots)


def test_slot_size_follows_column():
    """Test the size list is indexed by column whatever the entry point."""
    slots = initialize_parking_slots(2, [[1, 2], [3, 4]], [2, 0])

    assert [slot.size for slot in slots] == [SizeClass.LARGE, SizeClass.SMALL, SizeClass.LARGE, SizeClass.SMALL]
    assert [slot.column for slot in slots] == [0, 1, 0, 1]


def test_row_length_mismatch():
    with pytest.raises(LayoutError, match="Row 1 has 2 distances but 3 slot sizes"):
        initialize_parking_slots(2, [[1, 2, 3], [1, 2]], [0, 1, 2])


def test_row_count_mismatch():
    with pytest.raises(LayoutError, match="2 rows but 3 entry points"):
        initialize_parking_slots(3, [[1, 2, 3], [1, 2, 3]], [0, 1, 2])


def test_no_entry_points():
    with pytest.raises(LayoutError, match="At least one entry point"):
        initialize_parking_slots(0, [], [0, 1, 2])


def test_unknown_size():
    with pytest.raises(LayoutError, match="Invalid slot size"):
        initialize_parking_slots(1, [[1, 2]], [0, 3])


def test_negative_distance():
    with pytest.raises(LayoutError, match="Negative distance"):
        initialize_parking_slots(1, [[1, -2]], [0, 1])


def test_layout_error_is_value_error():
    with pytest.raises(ValueError):
        initialize_parking_slots(1, [[1]], [0, 1])
