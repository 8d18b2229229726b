import json

import jwt
from pymongo.errors import PyMongoError

from punjabi_wordle.config import WORD_LIST
from punjabi_wordle.engine.gurmukhi import CONSONANT_ROWS
from punjabi_wordle.engine.selection import date_key, word_for_date
from punjabi_wordle.services.word_service import initialize_word_service
from punjabi_wordle.utils.game_logger import game_logger


class FailingWriteStore:
    persistent = True

    def get(self, key):
        return None

    def set(self, key, word):
        raise PyMongoError("write concern error")

    def get_many(self, keys):
        return {}


def _protect(app, password="letmein"):
    app.config['ADMIN_PASSWORD'] = password
    return {'Authorization': f'Bearer {password}'}


def test_word_of_day(client):
    response = client.get('/api/word-of-day')
    assert response.status_code == 200
    data = response.get_json()
    assert data['success']
    assert data['date'] == date_key()
    assert data['source'] == 'fallback'
    assert data['word'] == word_for_date(date_key(), WORD_LIST)


def test_word_of_day_for_date(client):
    data = client.get('/api/word-of-day?date=2026-10-19').get_json()
    assert data['word'] == word_for_date('2026-10-19', WORD_LIST)
    assert data['date'] == '2026-10-19'


def test_word_of_day_rejects_bad_date(client):
    response = client.get('/api/word-of-day?date=not-a-date')
    assert response.status_code == 400
    assert response.get_json()['success'] is False


def test_validate_word(client):
    data = client.post('/api/validate-word', json={'word': 'ਪਰਮਾਤ'}).get_json()
    assert data == {'success': True, 'word': 'ਪਰਮਾਤ', 'isValid': False, 'unitLength': 4}

    data = client.post('/api/validate-word', json={'word': 'ਪਰਮਾਤਮਾ'}).get_json()
    assert data['isValid'] is True
    assert data['unitLength'] == 5

    assert client.post('/api/validate-word', json={}).status_code == 400


def test_keyboard(client):
    data = client.get('/api/keyboard').get_json()
    assert data['consonants'] == CONSONANT_ROWS
    assert '੍' in data['matras'][-1]


def test_set_word_open_gate(client):
    response = client.post('/api/admin/set-word', json={'word': 'ਅੰਮ੍ਰਿਤਸਰ', 'date': '2026-10-19'})
    assert response.status_code == 200
    data = response.get_json()
    assert data['success']
    assert 'warning' in data

    data = client.get('/api/word-of-day?date=2026-10-19').get_json()
    assert data['word'] == 'ਅੰਮ੍ਰਿਤਸਰ'
    assert data['source'] == 'store'


def test_set_word_defaults_to_today(client):
    client.post('/api/admin/set-word', json={'word': 'ਹਰਿਮੰਦਰ'})
    data = client.get('/api/word-of-day').get_json()
    assert data['word'] == 'ਹਰਿਮੰਦਰ'


def test_set_word_requires_credential(app, client):
    headers = _protect(app)

    response = client.post('/api/admin/set-word', json={'word': 'ਅੰਮ੍ਰਿਤਸਰ'})
    assert response.status_code == 401
    assert response.get_json()['error_type'] == 'unauthorized'

    response = client.post('/api/admin/set-word', json={'word': 'ਅੰਮ੍ਰਿਤਸਰ'},
                           headers={'Authorization': 'Bearer nope'})
    assert response.status_code == 401

    response = client.post('/api/admin/set-word', json={'word': 'ਅੰਮ੍ਰਿਤਸਰ'}, headers=headers)
    assert response.status_code == 200


def test_set_word_validation(client):
    response = client.post('/api/admin/set-word', json={'word': 'ਸੱਚਾ'})
    assert response.status_code == 400
    data = response.get_json()
    assert data['error_type'] == 'validation'
    assert data['unitLength'] == 2

    response = client.post('/api/admin/set-word', json={})
    assert response.status_code == 400

    response = client.post('/api/admin/set-word', json={'word': 'ਅੰਮ੍ਰਿਤਸਰ', 'date': '19/10/2026'})
    assert response.status_code == 400
    assert response.get_json()['error_type'] == 'validation'


def test_set_word_storage_failure(client):
    initialize_word_service(FailingWriteStore())
    response = client.post('/api/admin/set-word', json={'word': 'ਅੰਮ੍ਰਿਤਸਰ'})
    assert response.status_code == 500
    assert response.get_json()['error_type'] == 'storage'


def test_login_and_get_words(app, client):
    _protect(app)

    response = client.post('/api/admin/login', json={'password': 'wrong'})
    assert response.status_code == 401
    assert response.get_json()['error_type'] == 'unauthorized'

    token = client.post('/api/admin/login', json={'password': 'letmein'}).get_json()['token']
    headers = {'Authorization': f'Bearer {token}'}

    client.post('/api/admin/set-word', json={'word': 'ਅੰਮ੍ਰਿਤਸਰ'}, headers=headers)
    response = client.get('/api/admin/get-words', headers=headers)
    assert response.status_code == 200
    data = response.get_json()
    assert data['words'] == {date_key(): 'ਅੰਮ੍ਰਿਤਸਰ'}
    assert data['persistent'] is False

    assert client.get('/api/admin/get-words').status_code == 401


def _start_game(client, store, word='ਪਰਮਾਤਮਾ'):
    store.set(date_key(), word)
    data = client.post('/api/new_game').get_json()
    assert data['success']
    return data['game_id'], data['state']


def test_game_flow(client, store):
    game_id, state = _start_game(client, store)
    assert state['answer'] is None
    assert state['max_rounds'] == 6

    response = client.post(f'/api/game/{game_id}/guess', json={'guess': 'ਹਰਿਮੰਦਰ'})
    assert response.status_code == 200
    state = response.get_json()['state']
    assert state['guess_results'][0][1] == ['ਰਿ', 'present']
    assert state['answer'] is None

    state = client.post(f'/api/game/{game_id}/guess', json={'guess': 'ਪਰਮਾਤਮਾ'}).get_json()['state']
    assert state['won'] is True
    assert state['answer'] == 'ਪਰਮਾਤਮਾ'

    response = client.post(f'/api/game/{game_id}/guess', json={'guess': 'ਪਰਮਾਤਮਾ'})
    assert response.status_code == 400
    assert response.get_json()['error'] == 'Game is already over'


def test_guess_errors(client, store):
    game_id, _ = _start_game(client, store)

    response = client.post(f'/api/game/{game_id}/guess', json={'guess': 'ਪਰਮਾਤ'})
    assert response.status_code == 400
    data = response.get_json()
    assert data['error'] == 'Guess must be exactly 5 letters (got 4)'
    assert data['hint'] == '5 ਅੱਖਰ ਭਰੋ'

    response = client.post(f'/api/game/{game_id}/guess', json={'guess': 'ਕਕਕਕਕ'})
    assert response.status_code == 400
    assert response.get_json()['hint'] == 'ਇਹ ਸ਼ਬਦ ਮਾਨਤਾ ਪ੍ਰਾਪਤ ਨਹੀਂ ਹੈ'

    assert client.post(f'/api/game/{game_id}/guess', json={}).status_code == 400
    assert client.post('/api/game/missing/guess', json={'guess': 'ਪਰਮਾਤਮਾ'}).status_code == 404

    # rejected guesses do not use up a round
    state = client.get(f'/api/game/{game_id}/state').get_json()['state']
    assert state['current_round'] == 0


def test_state_and_delete(client, store):
    game_id, _ = _start_game(client, store)

    assert client.get(f'/api/game/{game_id}/state').status_code == 200
    assert client.delete(f'/api/game/{game_id}').get_json() == {'success': True}
    assert client.get(f'/api/game/{game_id}/state').status_code == 404


def test_health(client, store):
    _start_game(client, store)
    data = client.get('/api/health').get_json()
    assert data['status'] == 'healthy'
    assert data['active_games'] == 1
    assert data['word_store_persistent'] is False


def test_token_forged_with_app_secret_key_is_rejected(app, client):
    _protect(app, 'real-secret-password')
    forged = jwt.encode({'sub': 'admin'}, app.config['SECRET_KEY'], algorithm='HS256')
    headers = {'Authorization': f'Bearer {forged}'}

    response = client.post('/api/admin/set-word', json={'word': 'ਅੰਮ੍ਰਿਤਸਰ'}, headers=headers)
    assert response.status_code == 401
    assert response.get_json()['error_type'] == 'unauthorized'
    assert client.get('/api/admin/get-words', headers=headers).status_code == 401


def test_token_issued_before_password_change_is_rejected(app, client):
    _protect(app, 'first-password')
    token = client.post('/api/admin/login', json={'password': 'first-password'}).get_json()['token']

    _protect(app, 'second-password')
    response = client.get('/api/admin/get-words', headers={'Authorization': f'Bearer {token}'})
    assert response.status_code == 401


def test_login_disabled_without_token_secret(app, client):
    headers = _protect(app)
    app.config['ADMIN_TOKEN_SECRET'] = None

    response = client.post('/api/admin/login', json={'password': 'letmein'})
    assert response.status_code == 503
    assert response.get_json()['error_type'] == 'unavailable'

    # the password itself still works
    assert client.get('/api/admin/get-words', headers=headers).status_code == 200


def _logged_actions(action):
    entries = []
    with open(game_logger._log_file(), encoding='utf-8') as f:
        for line in f:
            try:
                entry = json.loads(line.split(' | ', 2)[-1])
            except ValueError:
                continue
            if entry.get('event_type') == 'USER_ACTION' and entry.get('action') == action:
                entries.append(entry)
    return entries


def test_verified_admin_is_logged_as_admin(app, client):
    headers = _protect(app)
    assert client.get('/api/admin/get-words', headers=headers).status_code == 200
    assert _logged_actions('get_words')[-1]['user']['admin'] is True

    # a player request with some bearer header is not an admin request
    client.get('/api/word-of-day', headers={'Authorization': 'Bearer letmein'})
    assert _logged_actions('word_of_day')[-1]['user']['admin'] is False
