class LeaderboardError(Exception):
    """Base class for leaderboard sync failures."""


class ValidationError(LeaderboardError):
    """An update payload does not have the shape of a leaderboard document."""


class StoreUnavailableError(LeaderboardError):
    """The durable store could not be reached or refused the write."""
