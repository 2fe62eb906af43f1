from fastapi import Depends

from trip_calendar.core.config import settings
from trip_calendar.domain.repositories import InMemoryTripSessionRepository, TripSessionRepository
from trip_calendar.domain.services.trip_service import TripPlannerService

_repo: TripSessionRepository = InMemoryTripSessionRepository()


def get_session_repo() -> TripSessionRepository:
    return _repo


def get_trip_service(
    repo: TripSessionRepository = Depends(get_session_repo),
) -> TripPlannerService:
    return TripPlannerService(repo=repo)


__all__ = [
    "get_session_repo",
    "get_trip_service",
    "settings",
]
