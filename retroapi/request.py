"""Building blocks for describing an HTTP call to the API."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

__all__ = [
    "Request",
    "RequestDetail",
    "method",
    "api_token",
    "bearer_token",
    "user_agent",
    "path",
    "u",
    "m",
    "f",
    "t",
    "d",
    "i",
    "k",
    "g",
    "c",
    "o",
    "a",
    "h",
    "new_request",
]


@dataclass
class Request:
    """Everything needed to issue one HTTP call."""

    host: str
    path: str = ""
    method: str = ""
    params: dict[str, str] = field(default_factory=dict)
    headers: dict[str, str] = field(default_factory=dict)


RequestDetail = Callable[[Request], None]


def _param(name: str, value: str) -> RequestDetail:
    def apply(request: Request) -> None:
        request.params[name] = value

    return apply


def method(verb: str) -> RequestDetail:
    """Set the HTTP verb of the request."""

    def apply(request: Request) -> None:
        request.method = verb

    return apply


def api_token(token: str) -> RequestDetail:
    """Add the API token as the ``y`` query parameter."""
    return _param("y", token)


def bearer_token(token: str) -> RequestDetail:
    """Add an ``Authorization`` header carrying a bearer token."""

    def apply(request: Request) -> None:
        request.headers["Authorization"] = f"Bearer {token}"

    return apply


def user_agent(agent: str) -> RequestDetail:
    """Set the ``User-Agent`` header."""

    def apply(request: Request) -> None:
        request.headers["User-Agent"] = agent

    return apply


def path(url_path: str) -> RequestDetail:
    """Set the URL path appended to the host."""

    def apply(request: Request) -> None:
        request.path = url_path

    return apply


def u(value: str) -> RequestDetail:
    """Add a ``u`` string query parameter."""
    return _param("u", value)


def m(value: int) -> RequestDetail:
    """Add an ``m`` number query parameter."""
    return _param("m", str(int(value)))


def f(value: int) -> RequestDetail:
    """Add an ``f`` number query parameter."""
    return _param("f", str(int(value)))


def t(value: int) -> RequestDetail:
    """Add a ``t`` number query parameter."""
    return _param("t", str(int(value)))


def d(value: str) -> RequestDetail:
    """Add a ``d`` string query parameter."""
    return _param("d", value)


def i(values: Iterable[str]) -> RequestDetail:
    """Add an ``i`` comma separated list query parameter."""
    return _param("i", ",".join(values))


def k(values: Iterable[str]) -> RequestDetail:
    """Add a ``k`` comma separated list query parameter."""
    return _param("k", ",".join(values))


def g(value: int) -> RequestDetail:
    """Add a ``g`` number query parameter."""
    return _param("g", str(int(value)))


def c(value: int) -> RequestDetail:
    """Add a ``c`` number query parameter."""
    return _param("c", str(int(value)))


def o(value: int) -> RequestDetail:
    """Add an ``o`` number query parameter."""
    return _param("o", str(int(value)))


def a(value: int) -> RequestDetail:
    """Add an ``a`` number query parameter."""
    return _param("a", str(int(value)))


def h(value: int) -> RequestDetail:
    """Add an ``h`` number query parameter."""
    return _param("h", str(int(value)))


def new_request(host: str, *args: RequestDetail) -> Request:
    """Create a request for ``host`` and apply each detail in order."""
    request = Request(host=host)
    for detail in args:
        detail(request)
    return request