"""JSON bodies for successful and failed web requests."""

from __future__ import annotations

import dataclasses
import inspect
import json
from dataclasses import dataclass
from typing import Any

DEFAULT_TITLE = "There is something wrong, please try again"
CONTENT_TYPE = "application/json"
STATUS_OK = 200


def _caller_source() -> str:
    frame = inspect.currentframe()
    try:
        caller = frame.f_back.f_back if frame and frame.f_back else None
        if caller is None:
            return ""
        code = caller.f_code
        return f"{code.co_filename}:{caller.f_lineno} {code.co_name}"
    finally:
        del frame


class AppError(Exception):
    """An error carrying a user-facing title and the place it was raised from."""

    def __init__(self, error: str | BaseException, title: str | None = None) -> None:
        super().__init__(str(error))
        self.error = error if isinstance(error, BaseException) else None
        self.title = DEFAULT_TITLE if title is None else title
        self.source = _caller_source()


@dataclass
class Pagination:
    """Links to the current, next and previous pages."""

    current: str = ""
    next: str = ""
    prev: str = ""

    def _as_links(self) -> dict[str, str]:
        links = {"self": self.current, "next": self.next, "prev": self.prev}
        return {key: value for key, value in links.items() if value}


def _default(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    raise TypeError(f"cannot encode {type(value).__name__} as JSON")


def _encode(payload: Any) -> bytes:
    return json.dumps(
        payload, separators=(",", ":"), ensure_ascii=False, default=_default
    ).encode("utf-8")


def error_response(code: int, error: BaseException) -> tuple[int, bytes]:
    """Status and JSON body describing ``error``."""
    if not isinstance(error, AppError):
        error = AppError(error)
    body = {
        "code": str(code),
        "source": {"pointer": error.source},
        "title": error.title,
        "detail": str(error),
    }
    return code, _encode(body)


def success_response(data: Any, pagination: Pagination | None = None) -> tuple[int, bytes]:
    """Status and JSON body wrapping ``data``; raises TypeError if it cannot be encoded."""
    body: dict[str, Any] = {}
    if pagination is not None:
        body["links"] = pagination._as_links()
    body["data"] = data
    return STATUS_OK, _encode(body)


def insert_success_response(new_id: int, message: str) -> tuple[int, bytes]:
    """Body reporting a newly created record's id."""
    return success_response({"message": message, "id": str(new_id)})