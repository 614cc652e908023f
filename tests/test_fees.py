from datetime import datetime, timedelta, timezone

import pytest

from parking_allocator.domain.common import SizeClass
from parking_allocator.domain.fees import (
    calculate_elapsed_time, calculate_total_charge, get_hourly_rate, MINIMUM_CHARGE, FULL_DAY_CHARGE
)


def test_hourly_rates():
    assert get_hourly_rate(SizeClass.SMALL) == 20
    assert get_hourly_rate(SizeClass.MEDIUM) == 60
    assert get_hourly_rate(SizeClass.LARGE) == 100


def test_small_within_free_units_pays_minimum():
    assert calculate_total_charge(SizeClass.SMALL, 3) == 40


def test_medium_beyond_free_units():
    assert calculate_total_charge(SizeClass.MEDIUM, 5) == 120


def test_large_one_day_and_remainder():
    assert calculate_total_charge(SizeClass.LARGE, 28) == 5100


@pytest.mark.parametrize(
    "slot_size, elapsed, expected",
    [
        (SizeClass.SMALL, 0, MINIMUM_CHARGE),
        (SizeClass.SMALL, 4, MINIMUM_CHARGE),  # 20 is below the minimum
        (SizeClass.SMALL, 6, 60),
        (SizeClass.LARGE, 23, 2000),
        (SizeClass.LARGE, 24, FULL_DAY_CHARGE),
        (SizeClass.LARGE, 27, FULL_DAY_CHARGE),
        (SizeClass.MEDIUM, 48, 2 * FULL_DAY_CHARGE),
        (SizeClass.MEDIUM, 53, 2 * FULL_DAY_CHARGE + 120),
    ],
)
def test_calculate_total_charge(slot_size, elapsed, expected):
    assert calculate_total_charge(slot_size, elapsed) == expected


def test_calculate_total_charge_accepts_raw_size():
    assert calculate_total_charge(2, 5) == 200


def test_elapsed_time_rounds_minutes_up():
    entry = datetime(2024, 3, 1, 8, 0, tzinfo=timezone.utc)

    assert calculate_elapsed_time(entry, entry) == 0
    assert calculate_elapsed_time(entry, entry + timedelta(seconds=1)) == 1
    assert calculate_elapsed_time(entry, entry + timedelta(seconds=60)) == 1
    assert calculate_elapsed_time(entry, entry + timedelta(seconds=61)) == 2
    assert calculate_elapsed_time(entry, entry + timedelta(hours=2)) == 120


def test_elapsed_time_never_negative():
    entry = datetime(2024, 3, 1, 8, 0, tzinfo=timezone.utc)

    assert calculate_elapsed_time(entry, entry - timedelta(minutes=5)) == 0
