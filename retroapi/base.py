"""Shared HTTP plumbing for API clients."""

from __future__ import annotations

import functools
from importlib import metadata
from typing import Any
from urllib.error import HTTPError, URLError
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit
from urllib.request import OpenerDirector, build_opener
from urllib.request import Request as UrlRequest

from . import request as detail
from .request import RequestDetail, new_request
from .response import Response, ResponseError, response_list, response_object

__all__ = [
    "RETRO_ACHIEVEMENTS_HOST",
    "EndpointError",
    "BaseClient",
    "default_user_agent",
]

RETRO_ACHIEVEMENTS_HOST = "https://retroachievements.org"

_SUPPORTED_SCHEMES = ("http", "https")


class EndpointError(Exception):
    """Raised when calling an endpoint or decoding its answer fails."""

    def __init__(self, context: str, cause: BaseException) -> None:
        super().__init__(f"{context}: {cause}")
        self.context = context
        self.cause = cause


@functools.cache
def default_user_agent() -> str:
    """User agent naming this library and its installed version."""
    try:
        version = metadata.version("retroapi")
    except metadata.PackageNotFoundError:
        version = "0.0.0"
    return f"retroapi/v{version}"


class BaseClient:
    """Holds connection settings and performs raw API calls."""

    def __init__(
        self,
        host: str,
        user_agent: str,
        secret: str,
        opener: OpenerDirector | Any | None = None,
    ) -> None:
        self.host = host
        self.user_agent = user_agent
        self.secret = secret
        self.opener = opener if opener is not None else build_opener()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(host={self.host!r}, "
            f"user_agent={self.user_agent!r})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BaseClient):
            return NotImplemented
        return (
            self.host == other.host
            and self.user_agent == other.user_agent
            and self.secret == other.secret
            and self.opener is other.opener
        )

    __hash__ = None  # type: ignore[assignment]

    def _details(self, endpoint: str) -> list[RequestDetail]:
        return [
            detail.method("GET"),
            detail.user_agent(self.user_agent),
            detail.path(endpoint),
            detail.api_token(self.secret),
        ]

    def _do(self, *details: RequestDetail) -> Response:
        call = new_request(self.host, *details)
        base = f"{call.host}{call.path}" if call.path else call.host
        parts = urlsplit(base)
        pairs = parse_qsl(parts.query, keep_blank_values=True)
        pairs.extend(call.params.items())
        pairs.sort(key=lambda pair: pair[0])
        url = urlunsplit(parts._replace(query=urlencode(pairs)))

        verb = call.method or "GET"
        op = verb[:1] + verb[1:].lower()
        if parts.scheme not in _SUPPORTED_SCHEMES:
            raise ValueError(
                f'{op} "{url}": unsupported protocol scheme "{parts.scheme}"'
            )

        outgoing = UrlRequest(url, method=verb, headers=dict(call.headers))
        try:
            with self.opener.open(outgoing) as answer:
                return Response(status_code=answer.status, data=answer.read())
        except HTTPError as exc:
            with exc:
                return Response(status_code=exc.code, data=exc.read())
        except URLError as exc:
            raise ConnectionError(f'{op} "{url}": {exc.reason}') from exc
        except OSError as exc:
            raise ConnectionError(f'{op} "{url}": {exc}') from exc

    def _call(self, details: list[RequestDetail]) -> Response:
        try:
            return self._do(*details)
        except (OSError, ValueError) as exc:
            raise EndpointError("calling endpoint", exc) from exc

    def _fetch_object(self, details: list[RequestDetail]) -> dict[str, Any] | None:
        resp = self._call(details)
        try:
            return response_object(resp)
        except (ResponseError, ValueError) as exc:
            raise EndpointError("parsing response object", exc) from exc

    def _fetch_list(self, details: list[RequestDetail]) -> list[Any]:
        resp = self._call(details)
        try:
            return response_list(resp)
        except (ResponseError, ValueError) as exc:
            raise EndpointError("parsing response list", exc) from exc