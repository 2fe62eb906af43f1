from abc import ABC, abstractmethod
from datetime import datetime
from typing import Dict

from .models import TripSession


class TripSessionRepository(ABC):
    @abstractmethod
    async def save(self, session: TripSession) -> TripSession:
        raise NotImplementedError

    @abstractmethod
    async def get(self, session_id: str) -> TripSession:
        raise NotImplementedError

    @abstractmethod
    async def update(self, session: TripSession) -> TripSession:
        raise NotImplementedError


class InMemoryTripSessionRepository(TripSessionRepository):
    def __init__(self):
        self._store: Dict[str, TripSession] = {}

    async def save(self, session: TripSession) -> TripSession:
        self._store[session.id] = session
        return session

    async def get(self, session_id: str) -> TripSession:
        if session_id not in self._store:
            raise KeyError("Trip session not found")
        return self._store[session_id]

    async def update(self, session: TripSession) -> TripSession:
        session.updated_at = datetime.utcnow()
        self._store[session.id] = session
        return session
