"""
Punjabi Wordle Server - Main Entry Point

This is the main entry point for the Punjabi Wordle server.
It initializes all services and starts the Flask application.
"""

from punjabi_wordle import create_app
from punjabi_wordle.config import Config, WORD_LIST, validate_word_list_integrity
from punjabi_wordle.services.game_service import initialize_game_service
from punjabi_wordle.services.word_service import initialize_word_service
from punjabi_wordle.services.word_store import create_word_store
from punjabi_wordle.utils.game_logger import game_logger


def main():
    """Main function to initialize services and start the server."""
    try:
        print("Initializing services...")

        validate_word_list_integrity()
        print(f"✓ Word list loaded ({len(WORD_LIST)} words)")

        # Word store falls back to memory when MongoDB is not configured
        try:
            store = create_word_store(Config.MONGO_URI, Config.MONGO_DB_NAME)
        except Exception as e:
            game_logger.logger.error(f"Word store unavailable, using in-memory store: {e}")
            store = create_word_store(None)
        print(f"✓ Word store initialized (persistent: {store.persistent})")

        initialize_word_service(store)
        print("✓ Word service initialized successfully")

        initialize_game_service(max_rounds=Config.MAX_ROUNDS, relaxed=Config.RELAXED_MATCHING)
        print("✓ Game service initialized successfully")

        print("Creating Flask application...")
        app = create_app(Config)
        print("✓ Flask application created successfully")

        if not Config.ADMIN_PASSWORD.strip():
            game_logger.logger.warning("ADMIN_PASSWORD not set - admin endpoints are open")
        if not (Config.ADMIN_TOKEN_SECRET or "").strip():
            game_logger.logger.warning("ADMIN_TOKEN_SECRET not set - admin token login disabled")

        game_logger.logger.info("Punjabi Wordle Server Starting")

        print(f"\nStarting Punjabi Wordle Server on {Config.HOST}:{Config.PORT}")
        print(f"Debug mode: {Config.DEBUG}")
        print("=" * 50)

        app.run(host=Config.HOST, port=Config.PORT, debug=Config.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Punjabi Wordle Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
