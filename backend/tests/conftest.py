import os
import sys
import pytest

# Ensure the backend root (containing the `festboard` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from config import store_engine_options
from festboard import create_app, db, socketio
from festboard.socketio_events import NAMESPACE


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = store_engine_options('sqlite://', 5)
    STORE_TIMEOUT_SEC = 5
    CORS_ORIGINS = None


class RecordingEmitter:
    """Stands in for the SocketIO server: remembers what was sent where."""

    def __init__(self):
        self.sent = []
        self.on_emit = None

    def emit(self, event, payload, to=None, namespace=None):
        self.sent.append((event, payload, to))
        if self.on_emit:
            self.on_emit(event, to)

    def events_for(self, sid):
        return [(event, payload) for event, payload, to in self.sent if to == sid]


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        # Ensure models are imported so tables are created
        import festboard.models  # noqa: F401
        db.create_all()
        yield application
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def sync(flask_app):
    return flask_app.extensions['festboard']


@pytest.fixture()
def emitter():
    return RecordingEmitter()


def _connect(flask_app):
    return socketio.test_client(
        flask_app,
        flask_test_client=flask_app.test_client(),
        namespace=NAMESPACE
    )


@pytest.fixture()
def sio_factory(flask_app):
    clients = []

    def _make():
        test_client = _connect(flask_app)
        clients.append(test_client)
        return test_client

    yield _make
    for test_client in clients:
        try:
            if test_client.is_connected(NAMESPACE):
                test_client.disconnect(namespace=NAMESPACE)
        except RuntimeError:
            pass


@pytest.fixture()
def sio_client(sio_factory):
    return sio_factory()
