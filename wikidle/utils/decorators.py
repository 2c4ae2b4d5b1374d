"""
Service Decorators

Contains decorators that resolve the global services for HTTP and
WebSocket handlers.
"""

from functools import wraps
from flask import jsonify
from flask_socketio import emit


def require_game_service(f):
    """
    Decorator for HTTP endpoints that need the game service.

    Passes the service as the game_service keyword argument.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        from ..services.game_service import get_game_service

        game_service = get_game_service()
        if not game_service:
            return jsonify({
                'success': False,
                'error': 'Game service unavailable'
            }), 500

        kwargs['game_service'] = game_service
        return f(*args, **kwargs)

    return decorated_function


def require_settings_service(f):
    """Decorator for HTTP endpoints that need persisted player settings."""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        from ..services.settings_service import get_settings_service

        settings_service = get_settings_service()
        if not settings_service:
            return jsonify({
                'success': False,
                'error': 'Player settings are not available on this server'
            }), 503

        kwargs['settings_service'] = settings_service
        return f(*args, **kwargs)

    return decorated_function


def websocket_game_required(f):
    """
    Decorator for WebSocket events that target an existing game.

    Emits an error instead of calling the handler when the service is
    down, the payload has no game_id or the game does not exist.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        from ..services.game_service import get_game_service

        game_service = get_game_service()
        if not game_service:
            emit('error', {'error': 'Game service unavailable'})
            return

        data = args[0] if args else None
        if not isinstance(data, dict) or not data.get('game_id'):
            emit('error', {'error': 'Game ID is required'})
            return

        session = game_service.get_session(data['game_id'])
        if session is None:
            emit('error', {'error': 'Game not found', 'error_kind': 'game_not_found'})
            return

        kwargs['game_service'] = game_service
        kwargs['session'] = session
        return f(*args, **kwargs)

    return decorated_function
