from __future__ import annotations

import logging
import re
from datetime import datetime
from typing import Awaitable, Callable, Tuple
from uuid import uuid4

from fastapi import status

from trip_calendar.ai.itinerary_graph import generate_trip_plan
from trip_calendar.api.models.schemas import TripRequest, TripResult
from trip_calendar.core.errors import (
    APIError,
    ConflictError,
    InvalidTransitionError,
    NotFoundError,
    TripGenerationError,
)
from trip_calendar.core.messages import get_message
from trip_calendar.domain.models import TripPhase, TripSession
from trip_calendar.domain.repositories import TripSessionRepository

logger = logging.getLogger(__name__)

TripGenerator = Callable[[TripRequest], Awaitable[TripResult]]

_UNSAFE_FILENAME_CHARS = re.compile(r'[\\/"\r\n]')


def calendar_filename(destination: str, ext: str = "ics") -> str:
    safe = _UNSAFE_FILENAME_CHARS.sub("-", destination.strip())
    return f"trip-to-{safe}.{ext}"


class TripPlannerService:
    def __init__(self, repo: TripSessionRepository, generator: TripGenerator = generate_trip_plan):
        self.repo = repo
        self.generator = generator

    async def plan_trip(self, trip: TripRequest) -> TripSession:
        now = datetime.utcnow()
        session = TripSession(
            id=f"trip_{uuid4().hex[:12]}",
            request=trip,
            created_at=now,
            updated_at=now,
        )
        await self.repo.save(session)
        return await self._run_cycle(session)

    async def retry(self, session_id: str) -> TripSession:
        session = await self._get(session_id)
        return await self._run_cycle(session)

    async def get_session(self, session_id: str) -> TripSession:
        return await self._get(session_id)

    async def dismiss_error(self, session_id: str) -> TripSession:
        session = await self._get(session_id)
        self._transition(session, session.dismiss_error)
        return await self.repo.update(session)

    async def restart(self, session_id: str) -> TripSession:
        session = await self._get(session_id)
        self._transition(session, session.restart)
        return await self.repo.update(session)

    async def calendar_download(self, session_id: str) -> Tuple[str, str]:
        session = await self._get(session_id)
        if session.phase is not TripPhase.SUCCESS or session.result is None:
            raise ConflictError(get_message("no_result"), {"sessionId": session.id, "phase": session.phase.value})
        return calendar_filename(session.request.destination), session.result.ics

    async def preview_html(self, session_id: str) -> str:
        session = await self._get(session_id)
        if session.phase is not TripPhase.SUCCESS or session.result is None:
            raise ConflictError(get_message("no_result"), {"sessionId": session.id, "phase": session.phase.value})
        return session.result.html

    async def _get(self, session_id: str) -> TripSession:
        try:
            return await self.repo.get(session_id)
        except KeyError:
            raise NotFoundError(get_message("session_not_found"), {"sessionId": session_id})

    def _transition(self, session: TripSession, step: Callable[[], None]) -> None:
        try:
            step()
        except InvalidTransitionError as exc:
            raise ConflictError(str(exc), {"sessionId": session.id, "phase": exc.current})

    async def _run_cycle(self, session: TripSession) -> TripSession:
        self._transition(session, session.begin_submission)
        await self.repo.update(session)

        try:
            result = await self.generator(session.request)
        except TripGenerationError as exc:
            session.fail(exc.message)
            await self.repo.update(session)
            details = {"sessionId": session.id}
            marker = getattr(exc, "marker", None)
            if marker:
                details["marker"] = marker
            raise APIError(status.HTTP_502_BAD_GATEWAY, exc.code, exc.message, details) from exc
        except Exception as exc:
            logger.exception("Trip session %s failed unexpectedly: %s", session.id, exc)
            message = get_message("generation_failed")
            session.fail(message)
            await self.repo.update(session)
            raise APIError(
                status.HTTP_500_INTERNAL_SERVER_ERROR, "INTERNAL_ERROR", message, {"sessionId": session.id}
            ) from exc

        session.succeed(result)
        logger.info("Trip session %s generated itinerary for %s", session.id, session.request.destination)
        return await self.repo.update(session)
