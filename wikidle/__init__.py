"""
Wikidle Game Server Application Package

A Wordle-style guessing game whose words come from Wikidata lexemes.
The round logic lives in services/; controllers/ and websocket/ expose it
over HTTP and Socket.IO.
"""

from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from .config import Config


def create_app(config_class=Config):
    """
    Build the Flask app and its Socket.IO server.

    Services are module-level singletons set up by main.py (or the test
    fixtures) before the first request; the app only wires routes to them.

    Args:
        config_class: Configuration class to use

    Returns:
        Tuple of (Flask app, SocketIO)
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    origins = config_class.CORS_ORIGINS
    CORS(app, origins=origins)
    socketio = SocketIO(app, cors_allowed_origins=origins, logger=False, engineio_logger=False)

    from .controllers.game_controller import game_bp
    from .controllers.settings_controller import settings_bp
    app.register_blueprint(game_bp, url_prefix='/api')
    app.register_blueprint(settings_bp, url_prefix='/api')

    from .websocket.handlers import register_websocket_handlers
    register_websocket_handlers(socketio)

    # Exposed for callers that only hold the app
    app.socketio = socketio

    return app, socketio
