from flask import current_app, request
from festboard import socketio
from festboard.services.leaderboard import LeaderboardSync

NAMESPACE = '/ws'


def _sync() -> LeaderboardSync:
    return current_app.extensions['festboard']


def _get_sid() -> str:
    # type: ignore: request.sid exists in Socket.IO context
    return request.sid  # type: ignore


def handle_connect(auth=None):
    # Every new connection starts from a full snapshot, never a diff
    _sync().connect(_get_sid())


def handle_disconnect(reason=None):
    _sync().disconnect(_get_sid())


def handle_update_data(data):
    _sync().apply_update(_get_sid(), data)


def handle_error(exc):
    """Last-resort handler: log and keep serving."""
    current_app.logger.exception(f"[socket] unhandled error for sid={_get_sid()}: {exc}")


def register_socketio_handlers() -> None:
    """Register Socket.IO event handlers on the '/ws' namespace."""
    socketio.on_event('connect', handle_connect, namespace=NAMESPACE)
    socketio.on_event('disconnect', handle_disconnect, namespace=NAMESPACE)
    socketio.on_event('updateData', handle_update_data, namespace=NAMESPACE)
    socketio.on_error_default(handle_error)
