"""
Admin Controller

Handles the admin endpoints: login, pinning a word to a date and listing the
words pinned for the coming days.
"""

from flask import Blueprint, request, jsonify, current_app
from ..engine.selection import date_key as today_key, parse_date_key
from ..services.admin_service import get_admin_service
from ..services.word_service import get_word_service
from ..utils.decorators import require_admin
from ..utils.game_logger import game_logger

admin_bp = Blueprint('admin', __name__)

_STATUS_BY_ERROR_TYPE = {
    'unauthorized': 401,
    'validation': 400,
    'storage': 500,
    'unavailable': 503,
}


@admin_bp.route('/login', methods=['POST'])
def login():
    """Exchange the admin password for a signed token."""
    try:
        data = request.get_json(silent=True) or {}
        password = data.get('password')

        game_logger.log_user_action(request, 'admin_login')

        result = get_admin_service().login(password)

        if result['success']:
            game_logger.log_server_response(request, 'admin_login', True, result)
            return jsonify(result)

        game_logger.log_server_response(request, 'admin_login', False, result)
        return jsonify(result), _STATUS_BY_ERROR_TYPE.get(result.get('error_type'), 401)

    except Exception as e:
        game_logger.log_error(request, e, 'admin_login')
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'admin_login', False, error_response)
        return jsonify(error_response), 500


@admin_bp.route('/set-word', methods=['POST'])
@require_admin
def set_word():
    """Pin a word to a date (today when no date is given)."""
    try:
        word_service = get_word_service()
        if not word_service:
            return jsonify({
                'success': False,
                'error': 'Word service unavailable'
            }), 500

        data = request.get_json(silent=True) or {}
        word = data.get('word')
        requested_date = data.get('date')

        if not word or not isinstance(word, str):
            error_response = {
                'success': False,
                'error_type': 'validation',
                'error': 'Word is required'
            }
            game_logger.log_server_response(request, 'set_word', False, error_response)
            return jsonify(error_response), 400

        date_key = parse_date_key(requested_date) if requested_date else today_key()
        if date_key is None:
            error_response = {
                'success': False,
                'error_type': 'validation',
                'error': 'Date must be in YYYY-MM-DD format'
            }
            game_logger.log_server_response(request, 'set_word', False, error_response)
            return jsonify(error_response), 400

        game_logger.log_user_action(request, 'set_word', date=date_key)

        result = word_service.set_word(date_key, word)

        if result['success']:
            game_logger.log_server_response(request, 'set_word', True, result)
            game_logger.log_game_event(None, 'word_set', request.remote_addr, date=date_key)
            return jsonify(result)

        game_logger.log_server_response(request, 'set_word', False, result)
        return jsonify(result), _STATUS_BY_ERROR_TYPE.get(result.get('error_type'), 500)

    except Exception as e:
        game_logger.log_error(request, e, 'set_word')
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'set_word', False, error_response)
        return jsonify(error_response), 500


@admin_bp.route('/get-words', methods=['GET'])
@require_admin
def get_words():
    """Words pinned for the next ADMIN_LOOKAHEAD_DAYS days."""
    try:
        word_service = get_word_service()
        if not word_service:
            return jsonify({
                'success': False,
                'error': 'Word service unavailable'
            }), 500

        game_logger.log_user_action(request, 'get_words')

        days = current_app.config.get('ADMIN_LOOKAHEAD_DAYS', 30)
        words = word_service.get_upcoming_words(days)

        response_data = {
            'success': True,
            'words': words,
            'persistent': word_service.store.persistent
        }
        game_logger.log_server_response(request, 'get_words', True, response_data, count=len(words))
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'get_words')
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'get_words', False, error_response)
        return jsonify(error_response), 500
