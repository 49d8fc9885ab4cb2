"""
Brain Teasers Game Server - Main Entry Point

This is the main entry point for the game server.
It initializes all services and starts the Flask-SocketIO application.
"""

import threading
import time
from brainteasers import create_app
from brainteasers.config import (
    Config, CROSSWORD_PUZZLES,
    validate_crossword_integrity, validate_seed_data_integrity, validate_sequence_levels_integrity
)
from brainteasers.services.storage_service import initialize_storage_service
from brainteasers.services.game_service import initialize_game_service, get_game_service
from brainteasers.utils.game_logger import game_logger
from brainteasers.websocket.handlers import broadcast_session_states


def timer_worker(app, socketio):
    """
    Background worker that drives the one-second game clocks.

    Every tick it advances timed sessions and broadcasts their new state;
    every SESSION_CLEANUP_SECONDS it drops sessions idle for too long.
    """
    print("Timer worker started")
    last_cleanup = time.monotonic()
    while True:
        try:
            with app.app_context():
                game_service = get_game_service()

                if game_service:
                    changed = game_service.tick_all()
                    if changed:
                        broadcast_session_states(socketio, changed)

                    if time.monotonic() - last_cleanup >= Config.SESSION_CLEANUP_SECONDS:
                        last_cleanup = time.monotonic()
                        removed = game_service.cleanup_idle_sessions(Config.SESSION_IDLE_TIMEOUT_SECONDS)
                        if removed:
                            game_logger.logger.info(f"Session cleanup: Removed {removed} idle session(s)")

        except Exception as e:
            game_logger.log_error(None, e, 'timer_worker')

        time.sleep(Config.TICK_INTERVAL_SECONDS)


def main():
    """Main function to initialize services and start the server."""
    try:
        print("Validating game data...")
        validate_seed_data_integrity()
        validate_sequence_levels_integrity()
        for puzzle in CROSSWORD_PUZZLES:
            validate_crossword_integrity(puzzle)
        print("✓ Game data validated")

        print("Initializing services...")

        storage = initialize_storage_service()
        print(f"✓ Storage service initialized with {len(storage.get_all_categories())} categories")

        initialize_game_service(
            storage,
            settle_delay=Config.MEMORY_SETTLE_DELAY_SECONDS,
            crossword_time_limit=Config.CROSSWORD_TIME_LIMIT_SECONDS
        )
        print("✓ Game service initialized successfully")

        print("Creating Flask application...")
        app, socketio = create_app(Config)
        print("✓ Flask application created successfully")

        timer_thread = threading.Thread(target=timer_worker, args=(app, socketio), daemon=True)
        timer_thread.start()
        print(f"✓ Timer worker started - ticking every {Config.TICK_INTERVAL_SECONDS}s")

        game_logger.logger.info("Brain Teasers Server starting")

        print(f"\nStarting Brain Teasers Server on {Config.HOST}:{Config.PORT}")
        print(f"Debug mode: {Config.DEBUG}")
        print("=" * 50)

        socketio.run(app, host=Config.HOST, port=Config.PORT, debug=Config.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Brain Teasers Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
