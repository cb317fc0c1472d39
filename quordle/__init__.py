"""
Quordle Game Server Application Package

Multi-board word guessing (Latin and Hangul) served over HTTP blueprints and a
Socket.IO channel for daily rooms. The pure game core lives in quordle.engine.
"""

from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from .config import Config


def create_app(config_class=Config):
    """
    Application factory pattern for creating Flask app instances.

    Args:
        config_class: Configuration class to use

    Returns:
        Tuple of (Flask application, SocketIO instance)
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    # Services are created once per process unless main() already did it
    from .services.game_service import get_game_service, initialize_game_service
    from .services.room_service import get_room_service, initialize_room_service
    if get_game_service() is None:
        initialize_game_service(config_class.BOARD_COUNT, config_class.DAILY_TIMEZONE)
    if get_room_service() is None:
        initialize_room_service(config_class.BOARD_COUNT, config_class.DAILY_TIMEZONE)

    # Initialize extensions
    CORS(app, origins=config_class.CORS_ORIGINS)
    socketio = SocketIO(app, cors_allowed_origins=config_class.CORS_ORIGINS, logger=False, engineio_logger=False)

    # Register blueprints
    from .controllers.game_controller import game_bp
    from .controllers.room_controller import room_bp

    app.register_blueprint(game_bp, url_prefix='/api')
    app.register_blueprint(room_bp, url_prefix='/api')

    # Register WebSocket handlers
    from .websocket.handlers import register_websocket_handlers
    register_websocket_handlers(socketio)

    # Store socketio instance for use in other modules
    app.socketio = socketio

    return app, socketio
