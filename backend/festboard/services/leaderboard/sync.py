import threading
from typing import Any, Dict, List, Set

from flask import current_app

from .document import validate_document
from .errors import StoreUnavailableError, ValidationError
from .state import SharedState
from .store import DocumentStore


class LeaderboardSync:
    """Keeps connected clients, the shared state and the store in step.

    An update goes validate -> commit to state -> save -> broadcast. The
    commit is never rolled back: if the save fails the submitter alone is
    told, and state and store stay apart until the next successful write.
    """

    def __init__(self, state: SharedState, store: DocumentStore, emitter, namespace: str = '/ws'):
        self.state = state
        self.store = store
        self.emitter = emitter
        self.namespace = namespace
        self._clients: Set[str] = set()
        self._clients_lock = threading.Lock()

    def restore(self) -> bool:
        """Replace the defaults with the stored document, if there is one."""
        document = self.store.load()
        if document is None:
            current_app.logger.info("[restore] no stored leaderboard, keeping defaults")
            return False
        self.state.replace(document)
        current_app.logger.info("[restore] leaderboard restored from store")
        return True

    def connect(self, sid: str) -> Dict[str, Any]:
        """Send `initData` to a new client, then add it to the broadcast set.

        Both happen under the clients lock, which broadcasts also hold, so a
        client can never see `dataChanged` before its snapshot.
        """
        with self._clients_lock:
            snapshot = self.state.get()
            self._send('initData', snapshot, sid)
            self._clients.add(sid)
            count = len(self._clients)
        current_app.logger.info(f"[connect] sid={sid} clients={count}")
        return snapshot

    def disconnect(self, sid: str) -> None:
        with self._clients_lock:
            self._clients.discard(sid)
            count = len(self._clients)
        current_app.logger.info(f"[disconnect] sid={sid} clients={count}")

    def connected_clients(self) -> List[str]:
        with self._clients_lock:
            return list(self._clients)

    def apply_update(self, sid: str, new_data: Any) -> bool:
        try:
            document = validate_document(new_data)
        except ValidationError as exc:
            current_app.logger.warning(f"[update] rejected from sid={sid}: {exc}")
            self._send('updateRejected', str(exc), sid)
            return False

        revision = self.state.replace(document)

        try:
            last_updated = self.store.save(document)
        except StoreUnavailableError as exc:
            current_app.logger.error(f"[save] sid={sid} revision={revision} not persisted: {exc}")
            self._send('saveError', f"Changes are live but were not saved: {exc}", sid)
            return False

        self.state.stamp(revision, last_updated)
        # Viewers always converge on the cache, even if a newer commit overtook this one
        self.broadcast_state('dataChanged')
        current_app.logger.info(f"[save] revision={revision} synced at {last_updated}")
        return True

    def broadcast(self, event: str, payload: Any) -> None:
        with self._clients_lock:
            count = self._fan_out(event, payload)
        current_app.logger.info(f"[broadcast] {event} to {count} clients")

    def broadcast_state(self, event: str) -> None:
        """Broadcast the cache as it is when the clients lock is taken."""
        with self._clients_lock:
            count = self._fan_out(event, self.state.get())
        current_app.logger.info(f"[broadcast] {event} to {count} clients")

    def _fan_out(self, event: str, payload: Any) -> int:
        # Caller holds the clients lock
        for client_sid in list(self._clients):
            self._send(event, payload, client_sid)
        return len(self._clients)

    def _send(self, event: str, payload: Any, sid: str) -> None:
        self.emitter.emit(event, payload, to=sid, namespace=self.namespace)
