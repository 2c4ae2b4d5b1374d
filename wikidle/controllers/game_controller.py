"""
Game Controller

Handles all game-related HTTP endpoints.
"""

from flask import Blueprint, request, jsonify
from ..config.game_settings import DIFFICULTY_LEVELS
from ..config.languages import SUPPORTED_LANGUAGES, WORD_KINDS
from ..services.game_service import get_game_service
from ..services.settings_service import get_settings_service
from ..utils.decorators import require_game_service
from ..utils.game_logger import game_logger
from ..utils.helpers import PLAYER_HEADER
from ..utils.messages import error_response

game_bp = Blueprint('game', __name__)


def _session_payload(game_service, game_id):
    session = game_service.get_session(game_id)
    return session.describe() if session else {}


@game_bp.route('/new_game', methods=['POST'])
@require_game_service
def new_game(game_service):
    """Create a new game session and start its first round."""
    try:
        data = request.get_json(silent=True)
        if data is None:
            data = {}
        if not isinstance(data, dict):
            error_body = {'success': False, 'error': 'Request body must be a JSON object'}
            game_logger.log_server_response(request, 'new_game', False, error_body)
            return jsonify(error_body), 400

        language = data.get('language', 'en')
        word_kind = data.get('word_kind')
        difficulty = data.get('difficulty')
        max_attempts = data.get('max_attempts')
        player_id = data.get('player_id') or request.headers.get(PLAYER_HEADER)

        game_logger.log_user_action(
            request, 'new_game',
            language=language, word_kind=word_kind, difficulty=difficulty
        )

        # Validate request options
        error = None
        if language not in SUPPORTED_LANGUAGES:
            error = f"Unsupported language. Must be one of: {', '.join(SUPPORTED_LANGUAGES)}"
        elif word_kind is not None and word_kind not in WORD_KINDS:
            error = f"Unsupported word type. Must be one of: {', '.join(WORD_KINDS)}"
        elif difficulty is not None and difficulty not in DIFFICULTY_LEVELS:
            error = f"Invalid difficulty. Must be one of: {', '.join(DIFFICULTY_LEVELS)}"
        elif max_attempts is not None and (isinstance(max_attempts, bool) or not isinstance(max_attempts, int)):
            error = "max_attempts must be an integer"

        if error:
            error_body = {'success': False, 'error': error}
            game_logger.log_server_response(request, 'new_game', False, error_body)
            return jsonify(error_body), 400

        game_id, result = game_service.create_new_game(
            language, word_kind=word_kind, difficulty=difficulty,
            max_attempts=max_attempts, player_id=player_id
        )

        if not result.success:
            body, status = error_response(result.error)
            body['game_id'] = game_id
            body['game'] = _session_payload(game_service, game_id)
            game_logger.log_server_response(request, 'new_game', False, body, game_id)
            return jsonify(body), status

        response_data = {
            'success': True,
            'game_id': game_id,
            'game': _session_payload(game_service, game_id),
            'state': result.value.to_dict()
        }

        game_logger.log_server_response(
            request, 'new_game', True, response_data, game_id,
            word_length=result.value.target_length, max_attempts=result.value.max_attempts
        )

        return jsonify(response_data)

    except ValueError as e:
        game_logger.log_error(request, e, 'new_game')
        error_body = {'success': False, 'error': str(e)}
        game_logger.log_server_response(request, 'new_game', False, error_body)
        return jsonify(error_body), 400

    except Exception as e:
        game_logger.log_error(request, e, 'new_game')
        error_body = {'success': False, 'error': str(e)}
        game_logger.log_server_response(request, 'new_game', False, error_body)
        return jsonify(error_body), 500


@game_bp.route('/game/<game_id>/state', methods=['GET'])
@require_game_service
def get_state(game_id, game_service):
    """Get current round state."""
    try:
        game_logger.log_user_action(request, 'get_state', game_id)

        state = game_service.get_game_state(game_id)
        if state is None:
            error_body = {'success': False, 'error': 'Game not found'}
            game_logger.log_server_response(request, 'get_state', False, error_body, game_id)
            return jsonify(error_body), 404

        response_data = {
            'success': True,
            'game': _session_payload(game_service, game_id),
            'state': state.to_dict()
        }

        game_logger.log_server_response(
            request, 'get_state', True, response_data, game_id, status=state.status.value
        )

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'get_state', game_id)
        error_body = {'success': False, 'error': str(e)}
        game_logger.log_server_response(request, 'get_state', False, error_body, game_id)
        return jsonify(error_body), 500


@game_bp.route('/game/<game_id>/guess', methods=['POST'])
@require_game_service
def make_guess(game_id, game_service):
    """Submit a guess for evaluation."""
    try:
        data = request.get_json(silent=True)
        if not isinstance(data, dict) or not isinstance(data.get('guess'), str):
            error_body = {'success': False, 'error': 'Guess is required'}
            game_logger.log_server_response(request, 'submit_guess', False, error_body, game_id)
            return jsonify(error_body), 400

        guess = data['guess']

        game_logger.log_user_action(
            request, 'submit_guess', game_id,
            guess=guess, guess_length=len(guess)
        )

        result = game_service.make_guess(game_id, guess)
        if not result.success:
            body, status = error_response(result.error)
            game_logger.log_server_response(
                request, 'submit_guess', False, body, game_id, attempted_guess=guess
            )
            return jsonify(body), status

        outcome = result.value
        # The session may expire between the guess and this snapshot
        state = game_service.get_game_state(game_id)
        response_data = {
            'success': True,
            'outcome': outcome.to_dict(),
            'game': _session_payload(game_service, game_id),
            'state': state.to_dict() if state else None
        }

        game_logger.log_server_response(
            request, 'submit_guess', True, response_data, game_id,
            guess=guess, attempts_remaining=outcome.attempts_remaining,
            terminal=outcome.terminal is not None
        )

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'submit_guess', game_id)
        error_body = {'success': False, 'error': str(e)}
        game_logger.log_server_response(request, 'submit_guess', False, error_body, game_id)
        return jsonify(error_body), 500


@game_bp.route('/game/<game_id>/hint', methods=['POST'])
@require_game_service
def request_hint(game_id, game_service):
    """Reveal a hint about the target word."""
    try:
        data = request.get_json(silent=True)
        if not isinstance(data, dict) or not data.get('kind'):
            error_body = {'success': False, 'error': 'Hint kind is required'}
            game_logger.log_server_response(request, 'request_hint', False, error_body, game_id)
            return jsonify(error_body), 400

        kind = data['kind']
        game_logger.log_user_action(request, 'request_hint', game_id, hint_kind=kind)

        result = game_service.request_hint(game_id, kind)
        if not result.success:
            body, status = error_response(result.error)
            game_logger.log_server_response(request, 'request_hint', False, body, game_id)
            return jsonify(body), status

        response_data = {'success': True, **result.value.to_dict()}
        game_logger.log_server_response(request, 'request_hint', True, response_data, game_id)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'request_hint', game_id)
        error_body = {'success': False, 'error': str(e)}
        game_logger.log_server_response(request, 'request_hint', False, error_body, game_id)
        return jsonify(error_body), 500


@game_bp.route('/game/<game_id>/restart', methods=['POST'])
@require_game_service
def restart_game(game_id, game_service):
    """Abandon the current round and start a new one in the same game."""
    try:
        game_logger.log_user_action(request, 'restart_game', game_id)

        result = game_service.restart_game(game_id)
        if not result.success:
            body, status = error_response(result.error)
            game_logger.log_server_response(request, 'restart_game', False, body, game_id)
            return jsonify(body), status

        response_data = {
            'success': True,
            'game_id': game_id,
            'game': _session_payload(game_service, game_id),
            'state': result.value.to_dict()
        }
        game_logger.log_server_response(request, 'restart_game', True, response_data, game_id)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'restart_game', game_id)
        error_body = {'success': False, 'error': str(e)}
        game_logger.log_server_response(request, 'restart_game', False, error_body, game_id)
        return jsonify(error_body), 500


@game_bp.route('/game/<game_id>', methods=['DELETE'])
@require_game_service
def delete_game(game_id, game_service):
    """Delete a game session."""
    try:
        game_logger.log_user_action(request, 'delete_game', game_id)

        success = game_service.delete_game(game_id)
        response_data = {'success': success}

        game_logger.log_server_response(request, 'delete_game', success, response_data, game_id)

        if success:
            game_logger.log_game_event(game_id, 'game_deleted')

        return jsonify(response_data), 200 if success else 404

    except Exception as e:
        game_logger.log_error(request, e, 'delete_game', game_id)
        error_body = {'success': False, 'error': str(e)}
        game_logger.log_server_response(request, 'delete_game', False, error_body, game_id)
        return jsonify(error_body), 500


@game_bp.route('/languages', methods=['GET'])
def list_languages():
    """Supported languages, word types and difficulty tiers."""
    return jsonify({
        'success': True,
        'languages': [
            {'code': code, 'name': language['name'], 'native_name': language['native_name']}
            for code, language in SUPPORTED_LANGUAGES.items()
        ],
        'word_kinds': list(WORD_KINDS),
        'difficulty_levels': {
            label: [kind.value for kind in kinds] for label, kinds in DIFFICULTY_LEVELS.items()
        }
    })


@game_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    try:
        game_service = get_game_service()

        game_logger.log_user_action(request, 'health_check')

        response_data = {
            'status': 'healthy',
            'active_games': len(game_service.games) if game_service else 0,
            'log_stats': game_logger.get_log_stats(),
            'settings_available': get_settings_service() is not None
        }

        game_logger.log_server_response(request, 'health_check', True, response_data)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'health_check')
        error_body = {'status': 'error', 'error': str(e)}
        game_logger.log_server_response(request, 'health_check', False, error_body)
        return jsonify(error_body), 500
