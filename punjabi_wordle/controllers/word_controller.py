"""
Word Controller

Handles the public word endpoints: word of the day, word validation and the
keyboard layout.
"""

from flask import Blueprint, request, jsonify
from ..engine.gurmukhi import CONSONANT_ROWS, MATRA_ROWS, MATRA_NAMES
from ..engine.selection import parse_date_key
from ..services.word_service import get_word_service
from ..utils.game_logger import game_logger

word_bp = Blueprint('word', __name__)


@word_bp.route('/word-of-day', methods=['GET'])
def word_of_day():
    """Return the word for today, or for ?date=YYYY-MM-DD."""
    try:
        word_service = get_word_service()
        if not word_service:
            return jsonify({
                'success': False,
                'error': 'Word service unavailable'
            }), 500

        date_key = None
        requested_date = request.args.get('date')
        if requested_date:
            date_key = parse_date_key(requested_date)
            if date_key is None:
                error_response = {
                    'success': False,
                    'error': 'Date must be in YYYY-MM-DD format'
                }
                game_logger.log_server_response(request, 'word_of_day', False, error_response)
                return jsonify(error_response), 400

        game_logger.log_user_action(request, 'word_of_day', requested_date=requested_date)

        word, date_key, source = word_service.get_word_of_day(date_key)

        response_data = {
            'success': True,
            'word': word,
            'date': date_key,
            'source': source
        }
        game_logger.log_server_response(request, 'word_of_day', True, response_data, word_source=source)
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'word_of_day')
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'word_of_day', False, error_response)
        return jsonify(error_response), 500


@word_bp.route('/validate-word', methods=['POST'])
def validate_word():
    """Report the unit length of a word and whether it is in the word list."""
    try:
        word_service = get_word_service()
        if not word_service:
            return jsonify({
                'success': False,
                'error': 'Word service unavailable'
            }), 500

        data = request.get_json(silent=True) or {}
        word = data.get('word')
        if not word or not isinstance(word, str):
            error_response = {
                'success': False,
                'error': 'Word is required'
            }
            game_logger.log_server_response(request, 'validate_word', False, error_response)
            return jsonify(error_response), 400

        game_logger.log_user_action(request, 'validate_word', word=word)

        result = word_service.validate_word(word)
        response_data = {'success': True, **result}

        game_logger.log_server_response(request, 'validate_word', True, response_data)
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'validate_word')
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'validate_word', False, error_response)
        return jsonify(error_response), 500


@word_bp.route('/keyboard', methods=['GET'])
def keyboard_layout():
    """On-screen keyboard rows and matra names."""
    return jsonify({
        'success': True,
        'consonants': CONSONANT_ROWS,
        'matras': MATRA_ROWS,
        'matra_names': MATRA_NAMES
    })
