"""
Gurmukhi Character Classification

Classifies single code points of Gurmukhi text into the classes the
segmenter works with. The tables below are closed sets: anything that is
not a matra, the virama or a base letter is "other" and is stripped from
input before segmentation.
"""

from enum import Enum
from typing import Dict, FrozenSet, List


class CharClass(Enum):
    """Segmentation class of a single code point."""
    MATRA = "matra"
    VIRAMA = "virama"
    BASE_LETTER = "base_letter"
    OTHER = "other"


# Vowel signs and diacritics that attach to the preceding letter.
# Nukta (pair bindi) is treated as a matra, as are tippi, adhak and bindi.
MATRAS: FrozenSet[str] = frozenset([
    'ਾ',  # ਾ kanna
    'ਿ',  # ਿ sihari
    'ੀ',  # ੀ bihari
    'ੁ',  # ੁ aunkar
    'ੂ',  # ੂ dulainkar
    'ੇ',  # ੇ lavan
    'ੈ',  # ੈ dulavan
    'ੋ',  # ੋ hora
    'ੌ',  # ੌ kanaura
    'ੰ',  # ੰ tippi
    'ੱ',  # ੱ addak
    'ਂ',  # ਂ bindi
    '਼',  # ਼ nukta
    'ਁ',  # ਁ adak bindi
    'ਃ',  # ਃ visarga
    'ੑ',  # ੑ udaat
    'ੵ',  # ੵ yakash
])

VIRAMA: str = '੍'  # ੍

# Independent vowels and consonants. Both start a character unit.
BASE_LETTERS: FrozenSet[str] = frozenset(
    chr(code_point) for code_point in (
        *range(0x0a05, 0x0a0b),   # ਅ .. ਊ
        0x0a0f, 0x0a10,           # ਏ ਐ
        0x0a13, 0x0a14,           # ਓ ਔ
        *range(0x0a15, 0x0a29),   # ਕ .. ਨ
        *range(0x0a2a, 0x0a31),   # ਪ .. ਰ
        0x0a32, 0x0a33,           # ਲ ਲ਼
        0x0a35, 0x0a36,           # ਵ ਸ਼
        0x0a38, 0x0a39,           # ਸ ਹ
        *range(0x0a59, 0x0a5d),   # ਖ਼ ਗ਼ ਜ਼ ੜ
        0x0a5e,                   # ਫ਼
        0x0a72, 0x0a73,           # ੲ ੳ
    )
)

if MATRAS & BASE_LETTERS or VIRAMA in MATRAS or VIRAMA in BASE_LETTERS:
    raise RuntimeError("Gurmukhi classification tables overlap")


# On-screen keyboard. Nukta letters use their precomposed code points so that
# every key is a single symbol.
CONSONANT_ROWS: List[List[str]] = [
    ['ੳ', 'ਅ', 'ੲ', 'ਸ', 'ਹ', 'ਕ', 'ਖ', 'ਗ', 'ਘ', 'ਙ'],
    ['ਚ', 'ਛ', 'ਜ', 'ਝ', 'ਞ', 'ਟ', 'ਠ', 'ਡ', 'ਢ', 'ਣ'],
    ['ਤ', 'ਥ', 'ਦ', 'ਧ', 'ਨ', 'ਪ', 'ਫ', 'ਬ', 'ਭ', 'ਮ'],
    ['ਯ', 'ਰ', 'ਲ', 'ਵ', 'ੜ', 'ਸ਼', 'ਖ਼', 'ਗ਼', 'ਜ਼', 'ਫ਼', 'ਲ਼'],
]

MATRA_ROWS: List[List[str]] = [
    ['ਾ', 'ਿ', 'ੀ', 'ੁ', 'ੂ', 'ੇ', 'ੈ', 'ੋ', 'ੌ'],
    ['ੰ', 'ੱ', 'ਂ', '਼', VIRAMA],
]

MATRA_NAMES: Dict[str, str] = {
    'ਾ': 'Kanna (ā)',
    'ਿ': 'Sihari (i)',
    'ੀ': 'Bihari (ī)',
    'ੁ': 'Aunkar (u)',
    'ੂ': 'Dulainkar (ū)',
    'ੇ': 'Lavan (e)',
    'ੈ': 'Dulavan (ai)',
    'ੋ': 'Hora (o)',
    'ੌ': 'Kanaura (au)',
    'ੰ': 'Tippi (ṃ)',
    'ੱ': 'Addak (double consonant)',
    'ਂ': 'Bindi (ṃ)',
    '਼': 'Pair Bindi (nukta)',
    VIRAMA: 'Virama (conjunct)',
}


# Letter + nukta sequences and their precomposed letters
NUKTA_COMPOSITIONS: Dict[str, str] = {
    "\u0a38\u0a3c": "\u0a36",  # ਸ਼
    "\u0a16\u0a3c": "\u0a59",  # ਖ਼
    "\u0a17\u0a3c": "\u0a5a",  # ਗ਼
    "\u0a1c\u0a3c": "\u0a5b",  # ਜ਼
    "\u0a2b\u0a3c": "\u0a5e",  # ਫ਼
    "\u0a32\u0a3c": "\u0a33",  # ਲ਼
}


def classify(char: str) -> CharClass:
    """
    Classify a single code point.

    Args:
        char: One-character string

    Returns:
        CharClass of the code point; OTHER for anything outside the tables
    """
    if char in MATRAS:
        return CharClass.MATRA
    if char == VIRAMA:
        return CharClass.VIRAMA
    if char in BASE_LETTERS:
        return CharClass.BASE_LETTER
    return CharClass.OTHER


def is_matra(char: str) -> bool:
    return char in MATRAS


def is_virama(char: str) -> bool:
    return char == VIRAMA


def is_base_letter(char: str) -> bool:
    return char in BASE_LETTERS


def clean_text(text: str) -> str:
    """
    Drop whitespace, punctuation and any non-Gurmukhi code point, and fold
    letter + nukta pairs into their precomposed letters.
    """
    if not text:
        return ""
    cleaned = "".join(char for char in text if classify(char) is not CharClass.OTHER)
    for decomposed, composed in NUKTA_COMPOSITIONS.items():
        cleaned = cleaned.replace(decomposed, composed)
    return cleaned
