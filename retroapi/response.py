"""Decoding of API responses into Python values."""

from __future__ import annotations

import json
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any

__all__ = ["Response", "ResponseError", "response_object", "response_list"]


@dataclass
class Response:
    """Status code and raw body of an HTTP response."""

    status_code: int
    data: bytes


class ResponseError(Exception):
    """Raised when the API answers with an unexpected status code."""

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"error code {status_code} returned: {body}")
        self.status_code = status_code
        self.body = body


def _text(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")


def _decode(data: bytes) -> Any:
    """Decode the first JSON value in ``data``, ignoring anything after it."""
    text = _text(data).lstrip(" \t\r\n")
    value, _ = json.JSONDecoder().raw_decode(text)
    return value


def _is_empty_list(data: bytes) -> bool:
    # The API answers some missing resources with 200 and an empty list.
    try:
        value = _decode(data)
    except ValueError:
        return False
    return value is None or value == []


def response_object(resp: Response) -> dict[str, Any] | None:
    """Decode a response holding a single JSON object.

    Returns ``None`` for a 404 or an empty list body.
    """
    if resp.status_code == HTTPStatus.OK:
        if _is_empty_list(resp.data):
            return None
        value = _decode(resp.data)
        if value is None:
            return None
        if not isinstance(value, dict):
            raise ValueError(
                f"cannot decode {type(value).__name__} into an object"
            )
        return value
    if resp.status_code == HTTPStatus.NOT_FOUND:
        return None
    raise ResponseError(resp.status_code, _text(resp.data))


def response_list(resp: Response) -> list[Any]:
    """Decode a response holding a JSON list."""
    if resp.status_code != HTTPStatus.OK:
        raise ResponseError(resp.status_code, _text(resp.data))
    value = _decode(resp.data)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"cannot decode {type(value).__name__} into a list")
    return value