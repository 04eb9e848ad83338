"""Client for the RetroAchievements web API: achievement, comment, event,
feed, game and leaderboard calls returning decoded JSON."""

__version__ = "0.1.0"