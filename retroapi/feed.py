"""Site-wide feed endpoints: awards, claims and top users."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timezone
from enum import IntEnum
from typing import Any

from . import request as detail
from .base import BaseClient

__all__ = ["PartialAwards", "ClaimKind", "FeedEndpoints"]


@dataclass(frozen=True)
class PartialAwards:
    """Which award kinds to include in the recent game awards feed."""

    beaten_softcore: bool = False
    beaten_hardcore: bool = False
    completed: bool = False
    mastered: bool = False


class ClaimKind(IntEnum):
    """Kind of achievement set development claim."""

    COMPLETED = 1
    DROPPED = 2
    EXPIRED = 3


def _date_param(value: date) -> str:
    """Format a date, or a datetime taken in UTC, as ``YYYY-MM-DD``."""
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    raise TypeError(f"expected a date or datetime, got {type(value).__name__}")


def _award_kinds(awards: PartialAwards) -> list[str]:
    selected = (
        (awards.beaten_softcore, "beaten-softcore"),
        (awards.beaten_hardcore, "beaten-hardcore"),
        (awards.completed, "completed"),
        (awards.mastered, "mastered"),
    )
    return [name for enabled, name in selected if enabled]


class FeedEndpoints(BaseClient):
    """Calls about activity across the whole site."""

    def get_recent_game_awards(
        self,
        starting_date: date | None = None,
        count: int | None = None,
        offset: int | None = None,
        include_partial_awards: PartialAwards | None = None,
    ) -> dict[str, Any] | None:
        """Get recently granted game awards across the site's userbase."""
        details = self._details("/API/API_GetRecentGameAwards.php")
        if starting_date is not None:
            details.append(detail.d(_date_param(starting_date)))
        if count is not None:
            details.append(detail.c(count))
        if offset is not None:
            details.append(detail.o(offset))
        if include_partial_awards is not None:
            kinds = _award_kinds(include_partial_awards)
            if kinds:
                details.append(detail.k(kinds))
        return self._fetch_object(details)

    def get_active_claims(self) -> list[Any]:
        """Get all active set claims (at most 1000)."""
        return self._fetch_list(self._details("/API/API_GetActiveClaims.php"))

    def get_claims(self, kind: ClaimKind | int | None = None) -> list[Any]:
        """Get set claims of one kind: completed, dropped or expired (at most 1000)."""
        details = self._details("/API/API_GetClaims.php")
        if kind is not None:
            details.append(detail.k([str(ClaimKind(kind).value)]))
        return self._fetch_list(details)

    def get_top_ten_users(self) -> list[Any]:
        """Get the current top ten users ranked by hardcore points."""
        return self._fetch_list(self._details("/API/API_GetTopTenUsers.php"))