from __future__ import annotations

from trip_calendar.ai.prompts import CALENDAR_MARKER, PREVIEW_MARKER
from trip_calendar.api.models.schemas import TripResult
from trip_calendar.core.errors import TripResponseFormatError
from trip_calendar.core.messages import get_message


def _format_error(marker: str) -> TripResponseFormatError:
    name = marker.strip("=")
    return TripResponseFormatError(name, get_message("format_error", marker=name))


def parse_trip_response(raw: str) -> TripResult:
    """
    Split a completion into the HTML preview and the ICS payload.
    Anything before the preview marker is dropped; both parts are trimmed.
    """
    preview_split = raw.split(PREVIEW_MARKER)
    if len(preview_split) < 2:
        raise _format_error(PREVIEW_MARKER)

    ics_split = preview_split[1].split(CALENDAR_MARKER)
    if len(ics_split) < 2:
        raise _format_error(CALENDAR_MARKER)

    return TripResult(html=ics_split[0].strip(), ics=ics_split[1].strip())
