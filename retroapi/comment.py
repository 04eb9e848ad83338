"""Comment endpoints."""

from __future__ import annotations

from enum import IntEnum
from typing import Any

from . import request as detail
from .base import BaseClient

__all__ = ["CommentKind", "CommentEndpoints"]


class CommentKind(IntEnum):
    """What the comments are attached to."""

    GAME = 1
    ACHIEVEMENT = 2
    USER = 3


def _identifier(kind: CommentKind, target: int | str) -> str:
    """Check the target against the kind and render it for the query."""
    if kind is CommentKind.USER:
        if not isinstance(target, str):
            raise TypeError("user comments need a username string")
        return target
    if isinstance(target, bool) or not isinstance(target, int):
        raise TypeError(f"{kind.name.lower()} comments need an integer ID")
    return str(target)


class CommentEndpoints(BaseClient):
    """Calls about comments."""

    def get_comments(
        self,
        kind: CommentKind | int,
        target: int | str,
        count: int | None = None,
        offset: int | None = None,
    ) -> dict[str, Any] | None:
        """Get comments on a game, achievement (by ID) or user (by name)."""
        kind = CommentKind(kind)
        identifier = _identifier(kind, target)
        paging = ((detail.c, count), (detail.o, offset))
        return self._fetch_object(
            self._details("/API/API_GetComments.php")
            + [detail.t(kind.value), detail.i([identifier])]
            + [make(value) for make, value in paging if value is not None]
        )