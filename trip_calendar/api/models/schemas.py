from __future__ import annotations

from datetime import datetime
from typing import Annotated, List, Literal, Optional

from pydantic import BaseModel, StringConstraints

# ---------- TripRequest ----------


Pace = Literal["relaxed", "normal", "packed"]
PACES: List[str] = ["relaxed", "normal", "packed"]

# Required form fields: blank input counts as missing
RequiredText = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class TripRequest(BaseModel):
    destination: RequiredText
    startDate: RequiredText
    endDate: RequiredText
    arrivalTime: str = "10:00"
    departureTime: str = "18:00"
    accommodation: RequiredText
    mustGo: str = ""
    notToGo: str = ""
    preference: Pace = "normal"
    tripType: str = "sightseeing, food, culture"


# ---------- TripResult ----------


class TripResult(BaseModel):
    html: str
    ics: str


# ---------- Session views ----------


TripPhaseValue = Literal["idle", "submitting", "success", "error"]


class TripSessionView(BaseModel):
    id: str
    phase: TripPhaseValue
    request: TripRequest
    result: Optional[TripResult] = None
    error: Optional[str] = None
    loadingMessage: Optional[str] = None
    downloadUrl: Optional[str] = None
    createdAt: datetime
    updatedAt: datetime


# ---------- Meta ----------


class PaceOption(BaseModel):
    id: Pace
    name: str


class LoadingMessages(BaseModel):
    intervalSeconds: float
    messages: List[str]
