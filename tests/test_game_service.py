import pytest
from punjabi_wordle.models.game import GameState, Verdict
from punjabi_wordle.services.game_service import (
    FILL_ALL_LETTERS_HINT, NOT_RECOGNIZED_HINT, GameService, apply_guess,
)

TARGET = "ਪਰਮਾਤਮਾ"


@pytest.fixture
def service():
    return GameService(max_rounds=6, relaxed=True)


@pytest.fixture
def game_id(service):
    return service.create_new_game(TARGET, "2026-10-19")


def test_new_game_state(service, game_id):
    state = service.get_game_state(game_id)
    assert state.current_round == 0
    assert not state.game_over
    assert state.date == "2026-10-19"
    assert state.to_dict()["answer"] is None


def test_apply_guess_returns_new_state():
    state = GameState(game_id="g", target_word=TARGET, max_rounds=6)
    after = apply_guess(state, "ਹਰਿਮੰਦਰ")

    assert state.guesses == ()
    assert dict(state.keyboard) == {}
    assert after.guesses == ("ਹਰਿਮੰਦਰ",)
    assert [verdict for _, verdict in after.guess_results[0]] == [
        Verdict.ABSENT, Verdict.PRESENT, Verdict.PRESENT, Verdict.ABSENT, Verdict.ABSENT,
    ]
    assert after.keyboard["ਰ"] is Verdict.PRESENT


def test_apply_guess_strict():
    state = GameState(game_id="g", target_word=TARGET, max_rounds=6)
    after = apply_guess(state, "ਹਰਿਮੰਦਰ", relaxed=False)
    assert after.guess_results[0][-1] == ("ਰ", Verdict.PRESENT)


@pytest.mark.parametrize("guess,error,hint", [
    ("ਪਰਮਾਤ", "Guess must be exactly 5 letters (got 4)", FILL_ALL_LETTERS_HINT),
    ("", "Guess must be a valid string", FILL_ALL_LETTERS_HINT),
    (123, "Guess must be a valid string", FILL_ALL_LETTERS_HINT),
    ("ਕਕਕਕਕ", "Word not in word list", NOT_RECOGNIZED_HINT),
])
def test_is_valid_guess_errors(service, game_id, guess, error, hint):
    assert service.is_valid_guess(game_id, guess) == (False, error, hint)


def test_is_valid_guess_unknown_game(service):
    assert service.is_valid_guess("missing", TARGET) == (False, "Game not found", None)


def test_win(service, game_id):
    state = service.make_guess(game_id, "ਹਰਿਮੰਦਰ")
    assert not state.game_over

    state = service.make_guess(game_id, " ਪਰਮਾਤਮਾ ")
    assert state.won
    assert state.game_over
    assert state.current_round == 2

    payload = state.to_dict()
    assert payload["answer"] == TARGET
    assert payload["guess_results"][1] == [[unit, "correct"] for unit in ["ਪ", "ਰ", "ਮਾ", "ਤ", "ਮਾ"]]

    assert service.is_valid_guess(game_id, TARGET) == (False, "Game is already over", None)
    assert service.make_guess(game_id, TARGET) is None


def test_loss_after_max_rounds():
    service = GameService(max_rounds=2)
    game_id = service.create_new_game(TARGET)
    service.make_guess(game_id, "ਹਰਿਮੰਦਰ")
    state = service.make_guess(game_id, "ਅੰਮ੍ਰਿਤਸਰ")

    assert state.game_over
    assert not state.won
    assert state.to_dict()["answer"] == TARGET


def test_to_dict_serializes_verdicts(service, game_id):
    payload = service.make_guess(game_id, "ਹਰਿਮੰਦਰ").to_dict()
    assert payload["guess_results"] == [[
        ["ਹ", "absent"], ["ਰਿ", "present"], ["ਮੰ", "present"], ["ਦ", "absent"], ["ਰ", "absent"],
    ]]
    assert payload["keyboard"]["ਰ"] == "present"
    assert payload["keyboard"]["ਿ"] == "absent"


def test_delete_game(service, game_id):
    assert service.delete_game(game_id)
    assert service.get_game_state(game_id) is None
    assert not service.delete_game(game_id)
