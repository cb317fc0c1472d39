import os
import tempfile

# The module-level game logger opens its file on import
os.environ.setdefault('LOG_DIR', tempfile.mkdtemp(prefix='quordle-logs-'))

import pytest

from quordle import create_app
from quordle.config import TestingConfig
from quordle.services.game_service import initialize_game_service
from quordle.services.room_service import initialize_room_service


@pytest.fixture
def game_service():
    return initialize_game_service()


@pytest.fixture
def room_service():
    return initialize_room_service()


@pytest.fixture
def app(game_service, room_service):
    app, socketio = create_app(TestingConfig)
    app.config['TESTING'] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def socket_client(app):
    return app.socketio.test_client(app)
