"""Leaderboard domain services: shared state, durable store and sync.

Socket handlers and HTTP routes import from here so transport concerns
stay out of the update protocol itself.
"""

from .errors import LeaderboardError, ValidationError, StoreUnavailableError
from .document import default_document, validate_document
from .state import SharedState
from .store import DocumentStore
from .sync import LeaderboardSync

__all__ = [
    'LeaderboardError',
    'ValidationError',
    'StoreUnavailableError',
    'default_document',
    'validate_document',
    'SharedState',
    'DocumentStore',
    'LeaderboardSync',
]
