from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Dict, FrozenSet, List, Optional

from trip_calendar.api.models.schemas import TripRequest, TripResult, TripSessionView
from trip_calendar.core.errors import InvalidTransitionError


class TripPhase(str, Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCESS = "success"
    ERROR = "error"


_TRANSITIONS: Dict[TripPhase, FrozenSet[TripPhase]] = {
    TripPhase.IDLE: frozenset({TripPhase.SUBMITTING}),
    TripPhase.SUBMITTING: frozenset({TripPhase.SUCCESS, TripPhase.ERROR}),
    TripPhase.SUCCESS: frozenset({TripPhase.IDLE}),
    TripPhase.ERROR: frozenset({TripPhase.IDLE, TripPhase.SUBMITTING}),
}


@dataclass
class TripSession:
    """
    Planning state for one form submission.
    idle -> submitting -> success | error; error can be dismissed or retried,
    success can be restarted (which drops the result).
    """

    id: str
    request: TripRequest
    created_at: datetime
    updated_at: datetime
    phase: TripPhase = TripPhase.IDLE
    result: Optional[TripResult] = None
    error: Optional[str] = None
    submitted_at: Optional[datetime] = field(default=None)

    def _move(self, target: TripPhase, now: Optional[datetime] = None) -> None:
        if target not in _TRANSITIONS[self.phase]:
            raise InvalidTransitionError(self.phase.value, target.value)
        self.phase = target
        self.updated_at = now or datetime.utcnow()

    def begin_submission(self, now: Optional[datetime] = None) -> None:
        self._move(TripPhase.SUBMITTING, now)
        self.error = None
        self.result = None
        self.submitted_at = self.updated_at

    def succeed(self, result: TripResult, now: Optional[datetime] = None) -> None:
        self._move(TripPhase.SUCCESS, now)
        self.result = result
        self.error = None

    def fail(self, message: str, now: Optional[datetime] = None) -> None:
        self._move(TripPhase.ERROR, now)
        self.error = message
        self.result = None

    def dismiss_error(self, now: Optional[datetime] = None) -> None:
        if self.phase is not TripPhase.ERROR:
            raise InvalidTransitionError(self.phase.value, TripPhase.IDLE.value)
        self._move(TripPhase.IDLE, now)
        self.error = None

    def restart(self, now: Optional[datetime] = None) -> None:
        self._move(TripPhase.IDLE, now)
        self.result = None
        self.error = None
        self.submitted_at = None

    def loading_message(self, messages: List[str], interval_seconds: float, now: Optional[datetime] = None) -> Optional[str]:
        # Only shown while a request is in flight
        if self.phase is not TripPhase.SUBMITTING or not messages or self.submitted_at is None:
            return None
        elapsed = ((now or datetime.utcnow()) - self.submitted_at).total_seconds()
        step = int(max(elapsed, 0) // interval_seconds)
        return messages[step % len(messages)]

    def to_api_model(self, loading_message: Optional[str] = None, download_url: Optional[str] = None) -> TripSessionView:
        return TripSessionView(
            id=self.id,
            phase=self.phase.value,
            request=self.request,
            result=self.result,
            error=self.error,
            loadingMessage=loading_message,
            downloadUrl=download_url,
            createdAt=self.created_at,
            updatedAt=self.updated_at,
        )
