from urllib.parse import quote

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import HTMLResponse, Response

from trip_calendar.api.models.schemas import TripRequest, TripSessionView
from trip_calendar.core.config import settings
from trip_calendar.core.messages import loading_messages
from trip_calendar.dependencies import get_trip_service
from trip_calendar.domain.models import TripPhase, TripSession
from trip_calendar.domain.services.trip_service import TripPlannerService

router = APIRouter(prefix="/trips", tags=["trips"])


def _to_view(request: Request, session: TripSession) -> TripSessionView:
    download_url = None
    if session.phase is TripPhase.SUCCESS:
        download_url = str(request.url_for("download_calendar", session_id=session.id))
    message = session.loading_message(loading_messages(), settings.loading_message_interval_seconds)
    return session.to_api_model(loading_message=message, download_url=download_url)


def _content_disposition(filename: str) -> str:
    # Header values must be latin-1; keep an ASCII fallback next to the RFC 5987 form
    fallback = filename.encode("ascii", "ignore").decode("ascii") or "trip.ics"
    return f"attachment; filename=\"{fallback}\"; filename*=UTF-8''{quote(filename)}"


@router.post("", response_model=TripSessionView, status_code=status.HTTP_201_CREATED)
async def create_trip(request: Request, body: TripRequest, svc: TripPlannerService = Depends(get_trip_service)):
    session = await svc.plan_trip(body)
    return _to_view(request, session)


@router.get("/{session_id}", response_model=TripSessionView)
async def get_trip(request: Request, session_id: str, svc: TripPlannerService = Depends(get_trip_service)):
    session = await svc.get_session(session_id)
    return _to_view(request, session)


@router.post("/{session_id}/retry", response_model=TripSessionView)
async def retry_trip(request: Request, session_id: str, svc: TripPlannerService = Depends(get_trip_service)):
    session = await svc.retry(session_id)
    return _to_view(request, session)


@router.post("/{session_id}/dismiss-error", response_model=TripSessionView)
async def dismiss_error(request: Request, session_id: str, svc: TripPlannerService = Depends(get_trip_service)):
    session = await svc.dismiss_error(session_id)
    return _to_view(request, session)


@router.post("/{session_id}/restart", response_model=TripSessionView)
async def restart_trip(request: Request, session_id: str, svc: TripPlannerService = Depends(get_trip_service)):
    session = await svc.restart(session_id)
    return _to_view(request, session)


@router.get("/{session_id}/preview", response_class=HTMLResponse)
async def preview_trip(session_id: str, svc: TripPlannerService = Depends(get_trip_service)):
    # Trusted model output, rendered as-is
    html = await svc.preview_html(session_id)
    return HTMLResponse(content=html)


@router.get("/{session_id}/calendar.ics", name="download_calendar")
async def download_calendar(session_id: str, svc: TripPlannerService = Depends(get_trip_service)):
    filename, ics = await svc.calendar_download(session_id)
    return Response(
        content=ics,
        media_type="text/calendar; charset=utf-8",
        headers={"Content-Disposition": _content_disposition(filename)},
    )
