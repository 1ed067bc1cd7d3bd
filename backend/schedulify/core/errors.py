# backend/schedulify/core/errors.py
import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

log = logging.getLogger(__name__)


class ScheduleError(Exception):
    """
    Base for every failure a handler can surface to the client.
    Each subclass fixes the HTTP status and the JSON key the message travels under.
    """
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    body_key = "error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ScheduleError):
    """A required field or precondition is missing from the caller's input."""
    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(ScheduleError):
    """The session has nothing stored under the requested field."""
    status_code = status.HTTP_404_NOT_FOUND
    body_key = "message"


class UpstreamError(ScheduleError):
    """The generation service failed; the cause stays in the server log."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


async def schedule_error_handler(request: Request, exc: ScheduleError) -> JSONResponse:
    log.info("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.message)
    return JSONResponse(status_code=exc.status_code, content={exc.body_key: exc.message})


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ScheduleError, schedule_error_handler)
