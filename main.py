"""
Quordle Game Server - Main Entry Point

Initializes the game and room services and starts the Flask-SocketIO application.
"""

from quordle import create_app
from quordle.config import Config, validate_word_list_integrity
from quordle.services.game_service import initialize_game_service
from quordle.services.room_service import initialize_room_service
from quordle.utils.game_logger import game_logger


def main():
    """Main function to initialize services and start the server."""
    try:
        print("Initializing services...")

        validate_word_list_integrity()
        print("✓ Word lists validated")

        initialize_game_service(Config.BOARD_COUNT, Config.DAILY_TIMEZONE)
        print("✓ Game service initialized successfully")

        initialize_room_service(Config.BOARD_COUNT, Config.DAILY_TIMEZONE)
        print("✓ Room service initialized successfully")

        print("Creating Flask application...")
        app, socketio = create_app(Config)
        print("✓ Flask application created successfully")

        game_logger.logger.info("Quordle Server Starting")

        print(f"\nStarting Quordle Game Server on {Config.HOST}:{Config.PORT}")
        print(f"Debug mode: {Config.DEBUG}")
        print(f"Boards per game: {Config.BOARD_COUNT}, daily timezone: {Config.DAILY_TIMEZONE}")
        print("=" * 50)

        socketio.run(app, host=Config.HOST, port=Config.PORT, debug=Config.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Quordle Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
