"""
Wikidle Game Server - Main Entry Point

Initializes all services and starts the Flask-SocketIO application.
"""

import os
import threading
import time
from wikidle import create_app
from wikidle.config import config
from wikidle.data import WikidataClient
from wikidle.services.game_service import initialize_game_service, get_game_service
from wikidle.services.settings_service import initialize_settings_service
from wikidle.utils.game_logger import game_logger


def session_cleanup_worker(interval_seconds: int, max_age_seconds: int):
    """
    Background worker that periodically removes idle game sessions.
    """
    game_logger.logger.info("Session cleanup worker started")
    while True:
        try:
            game_service = get_game_service()
            if game_service:
                cleanup_result = game_service.cleanup_stale_games(max_age_seconds)
                if cleanup_result['games_removed'] > 0:
                    game_logger.logger.info(
                        f"Session cleanup: Removed {cleanup_result['games_removed']} idle games"
                    )
                    for game_id in cleanup_result['removed_game_ids']:
                        game_logger.log_game_event(game_id, 'game_expired', max_age_seconds=max_age_seconds)
        except Exception as e:
            game_logger.logger.error(f"Error in session cleanup worker: {e}")

        time.sleep(interval_seconds)


def resolve_config(name: str):
    """
    Looks up a configuration class by WIKIDLE_ENV name.

    Raises:
        ValueError: If the name is not a known environment
    """
    try:
        return config[name]
    except KeyError:
        raise ValueError(
            f"Unknown WIKIDLE_ENV '{name}'. Must be one of: {', '.join(config)}"
        ) from None


def main():
    """Main function to initialize services and start the server."""
    try:
        config_class = resolve_config(os.getenv("WIKIDLE_ENV", "default"))
    except ValueError as e:
        print(f"Error starting server: {e}")
        raise SystemExit(1)

    try:
        print("Initializing services...")

        settings_service = initialize_settings_service(config_class.MONGO_URI)
        if settings_service:
            print("✓ Settings service initialized successfully")
        else:
            print("✗ MongoDB not configured or unreachable - player settings disabled")

        word_source = WikidataClient(
            config_class.WIKIDATA_ENDPOINT,
            config_class.WIKIDATA_USER_AGENT,
            timeout=config_class.WIKIDATA_TIMEOUT_SECONDS
        )
        initialize_game_service(
            word_source,
            settings_service,
            candidate_limit=config_class.CANDIDATE_LIMIT,
            default_max_attempts=config_class.MAX_ATTEMPTS
        )
        print("✓ Game service initialized successfully")

        print("Creating Flask application...")
        app, socketio = create_app(config_class)
        print("✓ Flask application created successfully")

        cleanup_thread = threading.Thread(
            target=session_cleanup_worker,
            args=(config_class.CLEANUP_INTERVAL_SECONDS, config_class.GAME_TTL_SECONDS),
            daemon=True
        )
        cleanup_thread.start()
        print(f"✓ Session cleanup worker started - checking every {config_class.CLEANUP_INTERVAL_SECONDS} seconds")

        game_logger.logger.info("Wikidle Server Starting")

        print(f"\nStarting Wikidle Game Server on {config_class.HOST}:{config_class.PORT}")
        print(f"Debug mode: {config_class.DEBUG}")
        print(f"Settings available: {settings_service is not None}")
        print("=" * 50)

        socketio.run(app, host=config_class.HOST, port=config_class.PORT, debug=config_class.DEBUG, allow_unsafe_werkzeug=True)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Wikidle Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
