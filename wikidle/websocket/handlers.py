"""
WebSocket Event Handlers

Handles Socket.IO events so a client can play a game without polling.
Every client watching a game joins the room game_<game_id> and receives
state updates after each accepted guess or new round.
"""

from flask import request
from flask_socketio import emit, join_room, leave_room
from ..services.game_service import get_game_service
from ..utils.decorators import websocket_game_required
from ..utils.game_logger import game_logger
from ..utils.messages import describe_error


def _room(game_id):
    return f"game_{game_id}"


def _emit_failure(event, error):
    emit(event, {'success': False, 'error': describe_error(error), **error.to_dict()})


def register_websocket_handlers(socketio):
    """Register all WebSocket event handlers."""

    @socketio.on('connect')
    def handle_connect():
        """Handle WebSocket connection."""
        game_logger.logger.debug(f"WebSocket connected: {request.sid}")

    @socketio.on('disconnect')
    def handle_disconnect(*args):
        """Handle WebSocket disconnection."""
        game_logger.logger.debug(f"WebSocket disconnected: {request.sid}")

    @socketio.on('join_game')
    @websocket_game_required
    def handle_join_game(data, game_service=None, session=None):
        """Join a game room and receive the current state."""
        join_room(_room(session.game_id))
        game_logger.logger.info(f"WebSocket: {request.sid} joined game {session.game_id}")

        emit('game_state', {
            'success': True,
            'game': session.describe(),
            'state': session.controller.get_state().to_dict()
        })

    @socketio.on('leave_game')
    @websocket_game_required
    def handle_leave_game(data, game_service=None, session=None):
        """Leave a game room."""
        leave_room(_room(session.game_id))
        emit('left_game', {'success': True, 'game_id': session.game_id})

    @socketio.on('submit_guess')
    @websocket_game_required
    def handle_submit_guess(data, game_service=None, session=None):
        """Submit a guess via WebSocket."""
        guess = data.get('guess')
        if not isinstance(guess, str) or not guess:
            emit('error', {'error': 'Game ID and guess required'})
            return

        result = game_service.make_guess(session.game_id, guess)
        if not result.success:
            _emit_failure('guess_result', result.error)
            return

        emit('guess_result', {'success': True, 'outcome': result.value.to_dict()})
        broadcast_game_state_update(session.game_id, socketio)

    @socketio.on('request_hint')
    @websocket_game_required
    def handle_request_hint(data, game_service=None, session=None):
        """Reveal a hint via WebSocket."""
        kind = data.get('kind')
        if not kind:
            emit('error', {'error': 'Hint kind is required'})
            return

        result = game_service.request_hint(session.game_id, kind)
        if not result.success:
            _emit_failure('hint_result', result.error)
            return

        emit('hint_result', {'success': True, **result.value.to_dict()})

    @socketio.on('restart_round')
    @websocket_game_required
    def handle_restart_round(data, game_service=None, session=None):
        """Start a new round in the same game."""
        result = game_service.restart_game(session.game_id)
        if not result.success:
            _emit_failure('round_started', result.error)
            return

        emit('round_started', {'success': True, 'state': result.value.to_dict()})
        broadcast_game_state_update(session.game_id, socketio)


def broadcast_game_state_update(game_id, socketio):
    """Broadcast the current round state to everyone watching a game."""
    try:
        game_service = get_game_service()
        if not game_service:
            return

        session = game_service.get_session(game_id)
        if session is None:
            return

        socketio.emit('game_state', {
            'success': True,
            'game': session.describe(),
            'state': session.controller.get_state().to_dict()
        }, room=_room(game_id))

    except Exception as e:
        game_logger.logger.error(f"Error broadcasting game state for {game_id}: {e}")
