import math
from datetime import datetime

from parking_allocator.domain.common import SizeClass


HOURLY_RATES = {
    SizeClass.SMALL: 20,
    SizeClass.MEDIUM: 60,
    SizeClass.LARGE: 100,
}
FULL_DAY_CHARGE = 5000
UNITS_PER_DAY = 24
FREE_UNITS = 3
MINIMUM_CHARGE = 40
GRACE_PERIOD_UNITS = 1


def calculate_elapsed_time(entry_time: datetime, current_time: datetime) -> int:
    """Whole minutes between entry and now, rounded up.

    Billing consumes the returned count as hours.
    TODO: confirm with operations whether billing should switch to real hours.
    """
    elapsed_seconds = (current_time - entry_time).total_seconds()
    return max(0, math.ceil(elapsed_seconds / 60))


def get_hourly_rate(slot_size: SizeClass) -> int:
    return HOURLY_RATES[SizeClass(slot_size)]


def calculate_total_charge(slot_size: SizeClass, elapsed_time: int) -> int:
    """Flat rate per full day, free first units of the remainder, hourly after that."""
    hourly_rate = get_hourly_rate(slot_size)

    full_days = elapsed_time // UNITS_PER_DAY
    remaining_units = elapsed_time % UNITS_PER_DAY

    total_charge = full_days * FULL_DAY_CHARGE
    total_charge += max(0, math.ceil(remaining_units - FREE_UNITS)) * hourly_rate

    return max(MINIMUM_CHARGE, total_charge)
