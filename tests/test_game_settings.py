import pytest
from punjabi_wordle.config import (
    MAX_ROUNDS, WORD_LENGTH, WORD_LIST, WORD_SET,
    get_word_statistics, validate_word_list_integrity,
)
from punjabi_wordle.engine.segmenter import count_units


def test_rules():
    assert WORD_LENGTH == 5
    assert MAX_ROUNDS == 6


def test_word_list_is_playable():
    assert WORD_LIST[0] == "ਪਰਮਾਤਮਾ"
    assert all(count_units(word) == WORD_LENGTH for word in WORD_LIST)
    assert len(WORD_SET) == len(WORD_LIST)
    assert validate_word_list_integrity() is True


def test_word_list_holds_composed_nukta_letters():
    assert not any("਼" in word for word in WORD_LIST)


def test_validate_word_list_integrity_rejects_bad_lists():
    with pytest.raises(ValueError):
        validate_word_list_integrity([])
    with pytest.raises(ValueError):
        validate_word_list_integrity(["ਸੱਚਾ"])
    with pytest.raises(ValueError):
        validate_word_list_integrity(["ਪਰਮਾਤਮਾ", "ਪਰਮਾਤਮਾ"])


def test_get_word_statistics():
    stats = get_word_statistics(["ਪਰਮਾਤਮਾ", "ਅੰਮ੍ਰਿਤਸਰ"])
    assert stats["total_words"] == 2
    assert stats["conjunct_words"] == 1
    assert stats["unit_frequency"]["ਮਾ"] == 2
    assert stats["matra_frequency"]["ਾ"] == 2
    assert get_word_statistics([]) == {"error": "Word list is empty"}
