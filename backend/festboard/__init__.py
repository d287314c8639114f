from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_cors import CORS
from flask_migrate import Migrate
from flask_socketio import SocketIO
import logging
import threading
import click
from config import Config

db = SQLAlchemy()
migrate = Migrate()
# Handle each connection's events inline so one client's updates keep their order
socketio = SocketIO(async_mode=None, async_handlers=False)


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    # None keeps engine.io's same-origin check for the pages served below
    allowed_origins = flask_app.config.get('CORS_ORIGINS') or None

    db.init_app(flask_app)
    migrate.init_app(flask_app, db)
    if allowed_origins:
        CORS(flask_app, origins=allowed_origins)

    # Initialize Socket.IO after app is created
    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    from festboard.services.leaderboard import (
        DocumentStore, LeaderboardSync, SharedState, default_document,
    )
    from festboard.socketio_events import NAMESPACE, register_socketio_handlers

    sync = LeaderboardSync(SharedState(default_document()), DocumentStore(), socketio, namespace=NAMESPACE)
    flask_app.extensions['festboard'] = sync

    # Import and register blueprints here
    from festboard.main import main
    flask_app.register_blueprint(main)

    from festboard.api.leaderboard import leaderboard
    flask_app.register_blueprint(leaderboard, url_prefix='/api/leaderboard')

    register_socketio_handlers()
    _install_thread_excepthook()

    # The store is authoritative at boot; an unreachable store leaves the defaults
    with flask_app.app_context():
        sync.restore()

    @click.command('leaderboard-reset')
    def leaderboard_reset_command():
        """Recreates the store and seeds it with the default leaderboard."""
        with flask_app.app_context():
            document = default_document()
            document['lastUpdated'] = sync.store.reset(document)
            sync.state.replace(document)
            print('Leaderboard has been reset to defaults!')

    flask_app.cli.add_command(leaderboard_reset_command)

    return flask_app


def _log_thread_exception(args):
    if issubclass(args.exc_type, SystemExit):
        return
    # Same logger as every app's `flask_app.logger`, since they share the name
    logging.getLogger(__name__).error(
        f"[thread] unhandled error in {getattr(args.thread, 'name', '?')}: {args.exc_value!r}",
        exc_info=(args.exc_type, args.exc_value, args.exc_traceback),
    )


def _install_thread_excepthook():
    """Log failures in background threads instead of letting them vanish.

    Process-wide, so installed once however many apps are created.
    """
    if threading.excepthook is not _log_thread_exception:
        threading.excepthook = _log_thread_exception
