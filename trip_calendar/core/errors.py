from typing import Any, Dict, Optional

from fastapi import HTTPException, status


class APIError(HTTPException):
    def __init__(self, status_code: int, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(status_code=status_code, detail=message)
        self.code = code
        self.details = details


class NotFoundError(APIError):
    def __init__(self, message: str = "Not found", details: Optional[Dict[str, Any]] = None):
        super().__init__(status.HTTP_404_NOT_FOUND, "NOT_FOUND", message, details)


class ConflictError(APIError):
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(status.HTTP_409_CONFLICT, "CONFLICT", message, details)


class TripGenerationError(Exception):
    """Base for failures of a single itinerary request cycle."""

    code = "AI_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class TripResponseFormatError(TripGenerationError):
    """The completion text does not follow the two-marker layout."""

    code = "AI_FORMAT_ERROR"

    def __init__(self, marker: str, message: str):
        super().__init__(message)
        self.marker = marker


class AIServiceError(TripGenerationError):
    """The completion call itself failed (network, auth, quota, model)."""

    code = "AI_SERVICE_ERROR"


class InvalidTransitionError(Exception):
    def __init__(self, current: str, target: str):
        super().__init__(f"Cannot move trip session from '{current}' to '{target}'")
        self.current = current
        self.target = target


def error_content(code: str, message: str, details: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    return {"error": {"code": code, "message": message, "details": details}}
