"""Leaderboard endpoints."""

from __future__ import annotations

from typing import Any

from . import request as detail
from .base import BaseClient

__all__ = ["LeaderboardEndpoints"]


class LeaderboardEndpoints(BaseClient):
    """Calls about game leaderboards."""

    def _paged(
        self, path: str, target_id: int, count: int | None, offset: int | None
    ) -> dict[str, Any] | None:
        extras = [maker(v) for maker, v in ((detail.c, count), (detail.o, offset)) if v is not None]
        return self._fetch_object(
            [*self._details(path), detail.i([str(target_id)]), *extras]
        )

    def get_game_leaderboards(
        self,
        game_id: int,
        count: int | None = None,
        offset: int | None = None,
    ) -> dict[str, Any] | None:
        """Get a game's list of leaderboards."""
        return self._paged("/API/API_GetGameLeaderboards.php", game_id, count, offset)

    def get_leaderboard_entries(
        self,
        leaderboard_id: int,
        count: int | None = None,
        offset: int | None = None,
    ) -> dict[str, Any] | None:
        """Get a leaderboard's entries."""
        return self._paged(
            "/API/API_GetLeaderboardEntries.php", leaderboard_id, count, offset
        )