"""Event endpoints."""

from __future__ import annotations

from typing import Any

from .base import BaseClient

__all__ = ["EventEndpoints"]


class EventEndpoints(BaseClient):
    """Calls about site events."""

    def get_achievement_of_the_week(self) -> dict[str, Any] | None:
        """Get metadata about the current Achievement of the Week."""
        return self._fetch_object(
            self._details("/API/API_GetAchievementOfTheWeek.php")
        )