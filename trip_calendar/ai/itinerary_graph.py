from __future__ import annotations

import logging
from typing import Any, Dict, Optional, TypedDict

from langgraph.graph import END, StateGraph
from openai import APIError

from trip_calendar.ai.openai_client import get_client
from trip_calendar.ai.prompts import TripPrompt, build_trip_prompt
from trip_calendar.ai.response_parser import parse_trip_response
from trip_calendar.api.models.schemas import TripRequest, TripResult
from trip_calendar.core.config import settings
from trip_calendar.core.errors import AIServiceError, TripResponseFormatError
from trip_calendar.core.messages import get_message

logger = logging.getLogger(__name__)


class TripState(TypedDict):
    trip: TripRequest
    prompt: Optional[TripPrompt]
    raw_text: str
    result: Optional[TripResult]


def build_prompt(state: TripState) -> Dict[str, Any]:
    return {"prompt": build_trip_prompt(state["trip"])}


async def call_model(state: TripState) -> Dict[str, Any]:
    client = get_client()
    if client is None:
        raise AIServiceError(get_message("missing_api_key"))

    prompt = state["prompt"]
    logger.info(
        "Requesting itinerary for %s (model=%s)",
        state["trip"].destination,
        settings.openai_model_itinerary,
    )
    try:
        resp = await client.chat.completions.create(
            model=settings.openai_model_itinerary,
            messages=[
                {"role": "system", "content": prompt.system_instruction},
                {"role": "user", "content": prompt.user_prompt},
            ],
            temperature=settings.openai_temperature,
        )
    except APIError as exc:
        logger.error("OpenAI itinerary request failed: %s", exc)
        raise AIServiceError(getattr(exc, "message", None) or get_message("generation_failed")) from exc
    finally:
        # One client per call; release its connection pool
        await client.close()

    text = resp.choices[0].message.content if resp.choices else None
    return {"raw_text": text or ""}


def parse_response(state: TripState) -> Dict[str, Any]:
    try:
        result = parse_trip_response(state["raw_text"])
    except TripResponseFormatError as exc:
        logger.warning("Itinerary response missing %s marker (%d chars)", exc.marker, len(state["raw_text"]))
        raise
    return {"result": result}


def build_itinerary_graph():
    builder = StateGraph(TripState)
    builder.add_node("build_prompt", build_prompt)
    builder.add_node("call_model", call_model)
    builder.add_node("parse_response", parse_response)

    builder.set_entry_point("build_prompt")
    builder.add_edge("build_prompt", "call_model")
    builder.add_edge("call_model", "parse_response")
    builder.add_edge("parse_response", END)
    return builder.compile()


_GRAPH = build_itinerary_graph()


async def generate_trip_plan(trip: TripRequest) -> TripResult:
    """
    Run the prompt -> completion -> parse pipeline once.
    Raises AIServiceError or TripResponseFormatError; there is no fallback result.
    """
    initial_state: TripState = {
        "trip": trip,
        "prompt": None,
        "raw_text": "",
        "result": None,
    }
    result = await _GRAPH.ainvoke(initial_state)
    return result["result"]
