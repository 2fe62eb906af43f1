from typing import List

from fastapi import APIRouter

from trip_calendar.api.models.schemas import PACES, LoadingMessages, PaceOption
from trip_calendar.core.config import settings
from trip_calendar.core.messages import get_message, loading_messages

router = APIRouter(prefix="/meta", tags=["meta"])


@router.get("/paces", response_model=List[PaceOption])
async def list_paces():
    return [PaceOption(id=pace, name=get_message(f"pace_{pace}")) for pace in PACES]


@router.get("/loading-messages", response_model=LoadingMessages)
async def list_loading_messages():
    return LoadingMessages(
        intervalSeconds=settings.loading_message_interval_seconds,
        messages=loading_messages(),
    )
