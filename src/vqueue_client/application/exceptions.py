from __future__ import annotations

import json
from typing import Any


class AppError(Exception):
    """Base application error."""

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        super().__init__(detail)


class NotFoundError(AppError):
    pass


class QueueNotFoundError(NotFoundError):
    def __init__(self, queue_id: str) -> None:
        self.queue_id = queue_id
        super().__init__(f"Queue not found: {queue_id}")


class TransportError(AppError):
    """The request never produced a response (connect failure, timeout, abort)."""


class RequestError(AppError):
    """The service answered, but not with anything this client can act on.

    The raw response payload is kept on ``response_data`` for diagnostics.
    """

    default_message = "Request failed"

    def __init__(self, response_data: Any, message: str | None = None) -> None:
        self.response_data = response_data
        prefix = message or self.default_message
        super().__init__(f"{prefix}: {_dump(response_data)}")


class ServerError(RequestError):
    def __init__(self, status_code: int, response_data: Any) -> None:
        self.status_code = status_code
        super().__init__(response_data, f"Server error {status_code}")


class UnknownResponseStatusError(RequestError):
    default_message = "Unrecognized response status"


class MalformedResponseError(RequestError):
    default_message = "Malformed response"


class UnmatchedPositionError(RequestError):
    default_message = "No position matches the submitted party"


class StalledJoinError(RequestError):
    default_message = "Join rejected without naming any submitted guest"


def _dump(data: Any) -> str:
    try:
        return json.dumps(data)
    except (TypeError, ValueError):
        return repr(data)
