from types import SimpleNamespace

import pytest

from app.services.scheduling.time_slot_service import (
    conflict_message,
    find_conflict,
    format_time,
    generate_time_slots,
    intervals_overlap,
    parse_time_string,
    to_minutes,
)


def booking(time, duration):
    return SimpleNamespace(time=time, duration=duration)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("12:00 AM", (0, 0)),
        ("12:00 PM", (12, 0)),
        ("11:30 PM", (23, 30)),
        ("9:05 AM", (9, 5)),
        ("1:15 pm", (13, 15)),
        ("14:30", (14, 30)),
    ],
)
def test_parse_time_string(value, expected):
    assert parse_time_string(value) == expected


@pytest.mark.parametrize(
    "value",
    [
        "",
        "noon",
        "2 PM",
        "two:30 PM",
        "2:30 p.m.",
        "2:30 XM",
        "2:30 PM sharp",
        "-1:30 PM",
        "0:30 PM",
        "13:00 PM",
        "24:00",
        "9:75 AM",
    ],
)
def test_parse_time_string_rejects_malformed(value):
    with pytest.raises(ValueError):
        parse_time_string(value)


def test_format_time():
    assert format_time(0) == "12:00 AM"
    assert format_time(12 * 60) == "12:00 PM"
    assert format_time(14 * 60 + 45) == "2:45 PM"
    assert format_time(24 * 60 + 30) == "12:30 AM"


def test_to_minutes():
    assert to_minutes("2:30 PM") == 870


def test_touching_intervals_do_not_overlap():
    assert not intervals_overlap(840, 885, 885, 915)
    assert not intervals_overlap(885, 915, 840, 885)
    assert intervals_overlap(840, 885, 884, 900)


def test_find_conflict_inside_existing_booking():
    """A 45 minute booking at 2:00 PM blocks 2:30 PM but not 2:45 PM."""
    existing = [booking("2:00 PM", 45)]

    assert find_conflict("2:30 PM", 30, existing) is existing[0]
    assert find_conflict("2:45 PM", 30, existing) is None


def test_find_conflict_candidate_spanning_existing():
    existing = [booking("11:00 AM", 15)]

    assert find_conflict("10:30 AM", 60, existing) is existing[0]
    assert find_conflict("10:30 AM", 30, existing) is None


def test_find_conflict_returns_first_match():
    first, second = booking("10:00 AM", 60), booking("10:30 AM", 30)

    assert find_conflict("10:45 AM", 15, [first, second]) is first


def test_conflict_message():
    assert conflict_message(booking("2:00 PM", 45)) == (
        "Time slot conflicts with an existing appointment from 2:00 PM to 2:45 PM"
    )


def test_generate_time_slots_default_day():
    slots = generate_time_slots()

    assert slots[0] == "10:00 AM"
    assert slots[-1] == "4:45 PM"
    assert len(slots) == 28
    assert "12:00 PM" in slots
