"""Construction of the slot inventory from a distance matrix."""
from typing import List, Sequence

from parking_allocator.domain.common import SizeClass
from parking_allocator.domain.entities import ParkingSlot


class LayoutError(ValueError):
    pass


def initialize_parking_slots(
    entry_points: int, distances: Sequence[Sequence[int]], sizes: Sequence[int]
) -> List[ParkingSlot]:
    """Build the flat slot list, one slot per (entry point row, column).

    The size of the slot in column ``j`` is ``sizes[j]`` whatever the entry
    point. Inconsistent dimensions are rejected up front.
    """
    if entry_points < 1:
        raise LayoutError(f"At least one entry point is required, got {entry_points}")
    if len(distances) != entry_points:
        raise LayoutError(
            f"Distance matrix has {len(distances)} rows but {entry_points} entry points were declared"
        )

    try:
        size_classes = [SizeClass(size) for size in sizes]
    except ValueError as e:
        raise LayoutError(f"Invalid slot size in {list(sizes)}: {e}") from e

    parking_slots = []
    for row_index, row in enumerate(distances):
        if len(row) != len(size_classes):
            raise LayoutError(
                f"Row {row_index} has {len(row)} distances but {len(size_classes)} slot sizes were given"
            )
        for column, distance in enumerate(row):
            if distance < 0:
                raise LayoutError(f"Negative distance {distance} at row {row_index}, column {column}")
            parking_slots.append(
                ParkingSlot(
                    distance=distance,
                    size=size_classes[column],
                    index=len(parking_slots),
                    entry_point=row_index,
                    column=column,
                )
            )

    return parking_slots
