import copy
import threading
from typing import Any, Dict


class SharedState:
    """Process-wide holder of the current leaderboard document.

    Every read hands out a copy so callers can never mutate the cached
    document behind the lock. `replace` is a full overwrite: whatever the
    last writer sent is the new state, nothing is merged.
    """

    def __init__(self, initial: Dict[str, Any]):
        self._lock = threading.Lock()
        self._document = copy.deepcopy(initial)
        self._revision = 0

    def get(self) -> Dict[str, Any]:
        with self._lock:
            return copy.deepcopy(self._document)

    @property
    def revision(self) -> int:
        with self._lock:
            return self._revision

    def replace(self, document: Dict[str, Any]) -> int:
        snapshot = copy.deepcopy(document)
        with self._lock:
            self._document = snapshot
            self._revision += 1
            return self._revision

    def stamp(self, revision: int, last_updated: str) -> bool:
        """Record the write time, unless a newer replace already landed."""
        with self._lock:
            if revision != self._revision:
                return False
            self._document['lastUpdated'] = last_updated
            return True
