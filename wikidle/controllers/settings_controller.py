"""
Settings Controller

Handles player settings and statistics endpoints.
"""

from flask import Blueprint, request, jsonify
from ..utils.decorators import require_settings_service
from ..utils.game_logger import game_logger

settings_bp = Blueprint('settings', __name__)


@settings_bp.route('/players/<player_id>/settings', methods=['GET'])
@require_settings_service
def get_settings(player_id, settings_service):
    """Get a player's saved settings (defaults when none are stored)."""
    try:
        game_logger.log_user_action(request, 'get_settings', player=player_id)

        response_data = {
            'success': True,
            'player_id': player_id,
            'settings': settings_service.get_settings(player_id).to_dict()
        }
        game_logger.log_server_response(request, 'get_settings', True, response_data)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'get_settings')
        return jsonify({'success': False, 'error': str(e)}), 500


@settings_bp.route('/players/<player_id>/settings', methods=['PUT'])
@require_settings_service
def update_settings(player_id, settings_service):
    """Update some or all of a player's settings."""
    try:
        data = request.get_json(silent=True)
        game_logger.log_user_action(request, 'update_settings', player=player_id, updates=data)

        result = settings_service.save_settings(player_id, data)
        game_logger.log_server_response(request, 'update_settings', result['success'], result)

        if not result['success']:
            return jsonify(result), 400

        return jsonify({'player_id': player_id, **result})

    except Exception as e:
        game_logger.log_error(request, e, 'update_settings')
        return jsonify({'success': False, 'error': str(e)}), 500


@settings_bp.route('/players/<player_id>/stats', methods=['GET'])
@require_settings_service
def get_stats(player_id, settings_service):
    """Get a player's game statistics."""
    try:
        game_logger.log_user_action(request, 'get_stats', player=player_id)

        response_data = {
            'success': True,
            'player_id': player_id,
            'stats': settings_service.get_stats(player_id).to_dict()
        }
        game_logger.log_server_response(request, 'get_stats', True, response_data)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'get_stats')
        return jsonify({'success': False, 'error': str(e)}), 500
