"""
Punjabi Wordle Server Application Package

A Wordle-style game for Gurmukhi-script Punjabi. The engine subpackage
segments words into character units and scores guesses; the rest of the
package wraps it in a Flask API with a daily word store and an admin gate.
"""

from flask import Flask
from flask_cors import CORS
from .config import Config


def create_app(config_class=Config):
    """
    Application factory pattern for creating Flask app instances.

    Args:
        config_class: Configuration class to use

    Returns:
        Flask application instance with all blueprints registered
    """
    app = Flask(__name__)
    app.config.from_object(config_class)
    app.json.ensure_ascii = False

    # Initialize extensions
    CORS(app)

    # Register blueprints
    from .controllers.admin_controller import admin_bp
    from .controllers.game_controller import game_bp
    from .controllers.word_controller import word_bp

    app.register_blueprint(admin_bp, url_prefix='/api/admin')
    app.register_blueprint(game_bp, url_prefix='/api')
    app.register_blueprint(word_bp, url_prefix='/api')

    return app
