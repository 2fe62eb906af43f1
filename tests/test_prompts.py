from __future__ import annotations

import pytest
from pydantic import ValidationError

from trip_calendar.ai.prompts import (
    CALENDAR_MARKER,
    MAPS_SEARCH_URL,
    PREVIEW_MARKER,
    SYSTEM_INSTRUCTION,
    build_trip_prompt,
    build_user_prompt,
)
from trip_calendar.api.models.schemas import TripRequest


def _make_trip(**overrides) -> TripRequest:
    data = {
        "destination": "Tokyo",
        "startDate": "2025-04-01",
        "endDate": "2025-04-05",
        "arrivalTime": "09:30",
        "departureTime": "20:15",
        "accommodation": "Marunouchi Hotel",
        "mustGo": "Skytree, Senso-ji (day 1 afternoon)",
        "notToGo": "Shibuya crossing",
        "preference": "packed",
        "tripType": "food, shopping",
    }
    data.update(overrides)
    return TripRequest(**data)


def test_user_prompt_contains_every_field_value():
    prompt = build_user_prompt(_make_trip())

    for value in [
        "Tokyo",
        "2025-04-01",
        "2025-04-05",
        "09:30",
        "20:15",
        "Marunouchi Hotel",
        "Skytree, Senso-ji (day 1 afternoon)",
        "Shibuya crossing",
        "packed",
        "food, shopping",
    ]:
        assert value in prompt


def test_user_prompt_field_order_is_fixed():
    lines = build_user_prompt(_make_trip()).splitlines()
    labels = [line.split(":", 1)[0] for line in lines[:9]]

    assert labels == [
        "Destination",
        "Date range",
        "Arrival time",
        "Departure time",
        "Accommodation",
        "Must-visit places (with preferred time slots)",
        "Places to avoid",
        "Pace preference",
        "Trip type",
    ]


@pytest.mark.parametrize("empty_field", ["arrivalTime", "departureTime", "mustGo", "notToGo", "tripType"])
def test_empty_optional_fields_keep_their_line(empty_field):
    full = build_user_prompt(_make_trip()).splitlines()
    sparse = build_user_prompt(_make_trip(**{empty_field: ""})).splitlines()

    assert len(full) == len(sparse)
    assert [line.split(":", 1)[0] for line in full] == [line.split(":", 1)[0] for line in sparse]


def test_default_times_match_the_form_defaults():
    trip = TripRequest(
        destination="Paris",
        startDate="2025-06-01",
        endDate="2025-06-03",
        accommodation="Le Marais flat",
    )
    prompt = build_user_prompt(trip)

    assert "Arrival time: 10:00\n" in prompt
    assert "Departure time: 18:00\n" in prompt
    assert "Pace preference: normal\n" in prompt


@pytest.mark.parametrize(
    "field, label, value",
    [
        ("arrivalTime", "Arrival time", "10:00:30"),
        ("arrivalTime", "Arrival time", ""),
        ("departureTime", "Departure time", "late evening"),
        ("startDate", "Date range", "April 1st"),
    ],
)
def test_form_values_are_interpolated_verbatim(field, label, value):
    prompt = build_user_prompt(_make_trip(**{field: value}))

    line = next(line for line in prompt.splitlines() if line.startswith(f"{label}:"))
    assert value in line
    if field != "startDate":
        assert line == f"{label}: {value}"


def test_blank_required_fields_are_rejected():
    with pytest.raises(ValidationError):
        _make_trip(destination="   ")
    with pytest.raises(ValidationError):
        _make_trip(accommodation="")


def test_required_fields_are_trimmed():
    trip = _make_trip(destination="  Tokyo  ")

    assert trip.destination == "Tokyo"
    assert "Destination: Tokyo\n" in build_user_prompt(trip)


def test_system_instruction_fixes_the_output_contract():
    assert SYSTEM_INSTRUCTION.index(PREVIEW_MARKER) < SYSTEM_INSTRUCTION.index(CALENDAR_MARKER)
    assert MAPS_SEARCH_URL.format(place="PLACE_NAME") in SYSTEM_INSTRUCTION
    assert "BEGIN:VCALENDAR" in SYSTEM_INSTRUCTION
    assert "VEVENT" in SYSTEM_INSTRUCTION
    assert 'class="day-card"' in SYSTEM_INSTRUCTION


def test_build_trip_prompt_pairs_constant_instruction_with_user_prompt():
    trip = _make_trip()
    prompt = build_trip_prompt(trip)

    assert prompt.system_instruction is SYSTEM_INSTRUCTION
    assert prompt.user_prompt == build_user_prompt(trip)
