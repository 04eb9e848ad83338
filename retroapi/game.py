"""Game endpoints."""

from __future__ import annotations

from typing import Any

from . import request as detail
from .base import BaseClient

__all__ = ["GameEndpoints"]


def _unofficial_flag(unofficial: bool | None) -> Any:
    """The ``f`` detail: 5 for unofficial, 3 for official achievements."""
    return None if unofficial is None else detail.f(5 if unofficial else 3)


class GameEndpoints(BaseClient):
    """Calls about games and their achievement sets."""

    def _game_object(self, path: str, game_id: int, *extra: Any) -> dict[str, Any] | None:
        details = [*self._details(path), detail.i([str(game_id)])]
        details.extend(item for item in extra if item is not None)
        return self._fetch_object(details)

    def get_game(self, game_id: int) -> dict[str, Any] | None:
        """Get basic metadata about a game."""
        return self._game_object("/API/API_GetGame.php", game_id)

    def get_game_extended(
        self, game_id: int, unofficial: bool | None = None
    ) -> dict[str, Any] | None:
        """Get extended metadata about a game.

        ``unofficial`` selects unofficial (True) or official (False)
        achievements; when omitted the server default applies.
        """
        return self._game_object(
            "/API/API_GetGameExtended.php", game_id, _unofficial_flag(unofficial)
        )

    def get_game_hashes(self, game_id: int) -> dict[str, Any] | None:
        """Get the hashes linked to a game."""
        return self._game_object("/API/API_GetGameHashes.php", game_id)

    def get_achievement_count(self, game_id: int) -> dict[str, Any] | None:
        """Get the list of achievement IDs for a game."""
        return self._game_object("/API/API_GetAchievementCount.php", game_id)

    def get_achievement_distribution(
        self,
        game_id: int,
        unofficial: bool | None = None,
        hardcore: bool | None = None,
    ) -> dict[str, Any] | None:
        """Get how many players have unlocked how many achievements for a game."""
        return self._game_object(
            "/API/API_GetAchievementDistribution.php",
            game_id,
            _unofficial_flag(unofficial),
            None if hardcore is None else detail.h(1 if hardcore else 0),
        )

    def get_game_rank_and_score(
        self, game_id: int, latest_masters: bool | None = None
    ) -> list[Any]:
        """Get either the latest masters or the highest point earners for a game."""
        details = [*self._details("/API/API_GetGameRankAndScore.php"), detail.g(game_id)]
        if latest_masters is not None:
            details.append(detail.t(1 if latest_masters else 0))
        return self._fetch_list(details)