"""
Game Logger Module for Punjabi Wordle Server

Structured logging for player actions, server responses, admin word changes
and game events. Each file entry is one JSON object:

    {"timestamp", "event_type", "action", "user", "game", "details"}

"game" carries the round being played: game id, date key, where the word of
the day came from, round number and the G/Y/- pattern of the latest guess.
"user.admin" is only true once require_admin has accepted the credential.
"""

import json
import logging
from collections import Counter
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

from flask import g, has_request_context

from ..config.app_config import Config
from ..engine.scoring import pattern_string
from ..models.game import Verdict

SENSITIVE_FIELDS = ('token', 'password')

# Keyword arguments promoted from "details" into the "game" block
GAME_FIELDS = ('date', 'word_source', 'round', 'pattern')

_EVENT_COUNTERS = {
    'USER_ACTION': 'user_actions',
    'SERVER_RESPONSE_SUCCESS': 'server_responses',
    'SERVER_RESPONSE_ERROR': 'server_responses',
    'GAME_EVENT': 'game_events',
    'ERROR': 'errors',
}


def _row_pattern(row) -> Optional[str]:
    """G/Y/- pattern of a serialized guess row ([[unit, verdict], ...])."""
    try:
        return pattern_string([Verdict(verdict) for _, verdict in row])
    except (TypeError, ValueError):
        return None


class GameLogger:
    """
    JSON-lines logger for the game server.

    Writes every entry to a daily file under log_dir and mirrors WARNING and
    above to the console.
    """

    def __init__(self, log_dir: str = "logs", level: str = "INFO"):
        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.level = getattr(logging, str(level).upper(), logging.INFO)

        self.logger = self._setup_logger()

    def _log_file(self) -> Path:
        return self.log_dir / f"game_log_{datetime.now().strftime('%Y-%m-%d')}.log"

    def _setup_logger(self) -> logging.Logger:
        """Attach a file handler and a WARNING console handler to the app logger."""
        logger = logging.getLogger('punjabi_wordle')
        logger.setLevel(self.level)

        # Prevent duplicate handlers
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)

        file_handler = logging.FileHandler(self._log_file(), encoding='utf-8')
        file_handler.setLevel(self.level)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s | %(levelname)s | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))

        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))

        logger.addHandler(file_handler)
        logger.addHandler(console_handler)

        return logger

    def _get_user_identity(self, request) -> Dict[str, Any]:
        """Caller IP and whether the admin gate accepted this request."""
        admin = bool(g.get('admin_verified', False)) if has_request_context() else False
        return {
            'user_ip': getattr(request, 'remote_addr', None) or 'unknown',
            'admin': admin
        }

    def _game_context(self,
                      game_id: Optional[str],
                      fields: Dict[str, Any],
                      response_data: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        Build the "game" block, moving GAME_FIELDS out of `fields`.

        Values found in a response (state date, round, last guess pattern,
        word-of-day date) are used unless the caller passed them explicitly.
        """
        game: Dict[str, Any] = {'game_id': game_id}

        if isinstance(response_data, dict):
            state = response_data.get('state')
            if isinstance(state, dict):
                game['game_id'] = game_id or state.get('game_id')
                game['date'] = state.get('date')
                game['round'] = state.get('current_round')
                rows = state.get('guess_results') or []
                if rows:
                    game['pattern'] = _row_pattern(rows[-1])
            elif 'date' in response_data:
                game['date'] = response_data['date']

        for key in GAME_FIELDS:
            if key in fields:
                game[key] = fields.pop(key)

        return game

    def _create_log_entry(self,
                          event_type: str,
                          action: str,
                          user_info: Dict[str, Any],
                          game: Dict[str, Any],
                          details: Dict[str, Any]) -> str:
        log_entry = {
            'timestamp': datetime.now().isoformat(),
            'event_type': event_type,
            'action': action,
            'user': user_info,
            'game': game,
            'details': details
        }
        return json.dumps(log_entry, ensure_ascii=False, default=str)

    def log_user_action(self,
                        request,
                        action: str,
                        game_id: Optional[str] = None,
                        **kwargs):
        """
        Log an incoming player or admin request.

        Args:
            request: Flask request object
            action: Type of action (e.g., 'new_game', 'submit_guess', 'set_word')
            game_id: Game identifier if applicable
            **kwargs: Additional details; GAME_FIELDS go to the game block
        """
        game = self._game_context(game_id, kwargs)
        details = {
            'endpoint': request.endpoint,
            'method': request.method,
            'url': request.url,
            **kwargs
        }

        log_message = self._create_log_entry(
            'USER_ACTION', action, self._get_user_identity(request), game, details
        )
        self.logger.info(log_message)

    def log_server_response(self,
                            request,
                            action: str,
                            success: bool,
                            response_data: Dict[str, Any],
                            game_id: Optional[str] = None,
                            **kwargs):
        """
        Log the response sent for an action.

        Args:
            request: Flask request object
            action: Action that was performed
            success: Whether the action succeeded
            response_data: Data being returned to client
            game_id: Game identifier if applicable
            **kwargs: Additional details; GAME_FIELDS go to the game block
        """
        game = self._game_context(game_id, kwargs, response_data)
        details = {
            'success': success,
            'response_size': len(str(response_data)),
            'response_data': self._sanitize_response_data(response_data),
            **kwargs
        }

        event_type = 'SERVER_RESPONSE_SUCCESS' if success else 'SERVER_RESPONSE_ERROR'
        log_message = self._create_log_entry(
            event_type, action, self._get_user_identity(request), game, details
        )

        if success:
            self.logger.info(log_message)
        else:
            self.logger.error(log_message)

    def log_game_event(self,
                       game_id: Optional[str],
                       event: str,
                       user_ip: str,
                       **kwargs):
        """
        Log a game milestone: 'game_won', 'game_lost', 'game_deleted', 'word_set'.

        Args:
            game_id: Game identifier, None for events outside a game
            event: Event name
            user_ip: Caller IP address
            **kwargs: Additional details; GAME_FIELDS go to the game block
        """
        admin = bool(g.get('admin_verified', False)) if has_request_context() else False
        game = self._game_context(game_id, kwargs)

        log_message = self._create_log_entry(
            'GAME_EVENT', event, {'user_ip': user_ip, 'admin': admin}, game, kwargs
        )
        self.logger.info(log_message)

    def log_error(self,
                  request,
                  error: Exception,
                  action: str,
                  game_id: Optional[str] = None):
        """Log an unexpected exception raised while handling `action`."""
        details = {
            'error_type': type(error).__name__,
            'error_message': str(error),
            'action': action
        }

        log_message = self._create_log_entry(
            'ERROR', action, self._get_user_identity(request), {'game_id': game_id}, details
        )
        self.logger.error(log_message)

    def _sanitize_response_data(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Remove credentials and reduce game state to counters."""
        if not isinstance(data, dict):
            return {'data_type': type(data).__name__}

        sanitized = {key: value for key, value in data.items() if key not in SENSITIVE_FIELDS}

        if 'state' in sanitized and isinstance(sanitized['state'], dict):
            state = sanitized['state']
            sanitized['state'] = {
                'current_round': state.get('current_round'),
                'max_rounds': state.get('max_rounds'),
                'game_over': state.get('game_over'),
                'won': state.get('won'),
                'guesses_count': len(state.get('guesses', [])),
                'answer_revealed': state.get('answer') is not None
            }

        return sanitized

    def get_log_stats(self) -> Dict[str, Any]:
        """
        Summarise today's log file.

        JSON entries are counted by event type and game outcome; plain
        service messages (store fallbacks, startup warnings) are counted
        separately.
        """
        log_file = self._log_file()
        if not log_file.exists():
            return {'error': 'No log file found for today'}

        stats: Dict[str, Any] = {
            'log_file': str(log_file),
            'file_size_mb': round(log_file.stat().st_size / (1024 * 1024), 2),
            'total_entries': 0,
            'user_actions': 0,
            'server_responses': 0,
            'game_events': 0,
            'errors': 0,
            'plain_messages': 0,
        }
        outcomes: Counter = Counter()

        try:
            with open(log_file, 'r', encoding='utf-8') as f:
                for line in f:
                    if not line.strip():
                        continue
                    stats['total_entries'] += 1
                    message = line.rstrip('\n').split(' | ', 2)[-1]
                    try:
                        entry = json.loads(message)
                    except ValueError:
                        stats['plain_messages'] += 1
                        continue
                    if not isinstance(entry, dict):
                        stats['plain_messages'] += 1
                        continue
                    counter = _EVENT_COUNTERS.get(entry.get('event_type'))
                    if counter:
                        stats[counter] += 1
                    if entry.get('event_type') == 'GAME_EVENT':
                        outcomes[entry.get('action')] += 1
        except OSError as e:
            return {'error': f'Failed to get stats: {str(e)}'}

        stats['games_won'] = outcomes['game_won']
        stats['games_lost'] = outcomes['game_lost']
        stats['words_set'] = outcomes['word_set']
        return stats


# Global logger instance
game_logger = GameLogger(Config.LOG_DIR, Config.LOG_LEVEL)
