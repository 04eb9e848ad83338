"""The full API client combining every endpoint group."""

from __future__ import annotations

from .achievement import AchievementEndpoints
from .base import RETRO_ACHIEVEMENTS_HOST, default_user_agent
from .comment import CommentEndpoints
from .event import EventEndpoints
from .feed import FeedEndpoints
from .game import GameEndpoints
from .leaderboards import LeaderboardEndpoints

__all__ = ["RETRO_ACHIEVEMENTS_HOST", "Client", "new_client"]


class Client(
    AchievementEndpoints,
    CommentEndpoints,
    EventEndpoints,
    FeedEndpoints,
    GameEndpoints,
    LeaderboardEndpoints,
):
    """Client for every supported API endpoint.

    Construct it as ``Client(host, user_agent, secret, opener=None)``;
    a default ``urllib`` opener is used when none is given.
    """


def new_client(secret: str) -> Client:
    """Create a client for the public site with the default user agent."""
    return Client(RETRO_ACHIEVEMENTS_HOST, default_user_agent(), secret)