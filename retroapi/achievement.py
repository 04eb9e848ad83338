"""Achievement endpoints."""

from __future__ import annotations

from typing import Any

from . import request as detail
from .base import BaseClient

__all__ = ["AchievementEndpoints"]


class AchievementEndpoints(BaseClient):
    """Calls about single achievements."""

    def get_achievement_unlocks(
        self,
        achievement_id: int,
        count: int | None = None,
        offset: int | None = None,
    ) -> dict[str, Any] | None:
        """Get the users who have earned an achievement."""
        optional = {detail.c: count, detail.o: offset}
        return self._fetch_object(
            self._details("/API/API_GetAchievementUnlocks.php")
            + [detail.a(achievement_id)]
            + [make(value) for make, value in optional.items() if value is not None]
        )