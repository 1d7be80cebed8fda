"""
Character handling for Furiawase.

Provides character classification by Unicode block, whole-word
classification, katakana to hiragana conversion and the run tokenizer
used by the alignment engine.
"""

import re
from typing import List

# ============================================================================
# Unicode Blocks
# ============================================================================

HIRAGANA_REGEX = r"[぀-ゟ]"
KATAKANA_REGEX = r"[゠-ヿㇰ-ㇿ]"
# CJK Unified Ideographs, Extension A, and the marks that behave as kanji in words
KANJI_REGEX = r"[一-鿿㐀-䶿々〆]"
KANA_REGEX = f"(?:{HIRAGANA_REGEX}|{KATAKANA_REGEX})"

_HIRAGANA_PATTERN = re.compile(HIRAGANA_REGEX)
_KATAKANA_PATTERN = re.compile(KATAKANA_REGEX)
_KANJI_PATTERN = re.compile(KANJI_REGEX)

# Marks that appear in both hiragana and katakana text
SCRIPT_NEUTRAL_CHARACTERS = "ー・"

# Katakana range that has a hiragana counterpart at a fixed offset
_KATAKANA_CONVERTIBLE_START = ord("ァ")
_KATAKANA_CONVERTIBLE_END = ord("ヶ")
_KANA_OFFSET = ord("ァ") - ord("ぁ")


# ============================================================================
# Character Testing Functions
# ============================================================================

def is_kanji(char: str) -> bool:
    """Check if a character is kanji."""
    return bool(_KANJI_PATTERN.fullmatch(char))


def is_hiragana(char: str) -> bool:
    """Check if a character is in the Hiragana block."""
    return bool(_HIRAGANA_PATTERN.fullmatch(char))


def is_katakana(char: str) -> bool:
    """Check if a character is in the Katakana blocks."""
    return bool(_KATAKANA_PATTERN.fullmatch(char))


def is_kana(char: str) -> bool:
    """Check if a character is hiragana or katakana."""
    return is_hiragana(char) or is_katakana(char)


def char_class(char: str) -> str:
    """
    Get the character class used for tokenizing.

    Args:
        char: A single character.

    Returns:
        'kanji', 'kana' or 'other'.
    """
    if is_kanji(char):
        return 'kanji'
    if is_kana(char):
        return 'kana'
    return 'other'


def test_word(word: str, char_class: str) -> bool:
    """
    Test if a word consists entirely of a specific character class.

    Args:
        word: The word to test.
        char_class: One of 'kanji', 'kana', 'hiragana', 'katakana'.

    Returns:
        True if the word matches the character class entirely.
        An empty word never matches.
    """
    if not word:
        return False

    predicates = {
        'kanji': is_kanji,
        'kana': is_kana,
        'hiragana': is_hiragana,
        'katakana': is_katakana,
    }

    predicate = predicates.get(char_class)
    if predicate is None:
        return False
    return all(predicate(char) for char in word)


def has_kana(word: str) -> bool:
    """Check if any character of the word is kana."""
    return any(is_kana(char) for char in word)


def is_mixed_script(text: str) -> bool:
    """
    Check if text mixes hiragana and katakana.

    The prolonged sound mark and the middle dot are used with both
    scripts and are ignored.
    """
    chars = [char for char in text if char not in SCRIPT_NEUTRAL_CHARACTERS]
    return any(is_hiragana(c) for c in chars) and any(is_katakana(c) for c in chars)


# ============================================================================
# Kana Conversion
# ============================================================================

def as_hiragana(text: str) -> str:
    """
    Convert katakana to hiragana.

    Katakana without a hiragana counterpart (ヷ, ヸ, ー, ...) is kept as is.

    Args:
        text: Text to convert.

    Returns:
        Text with katakana converted to hiragana.
    """
    result = []
    for char in text:
        code = ord(char)
        if _KATAKANA_CONVERTIBLE_START <= code <= _KATAKANA_CONVERTIBLE_END:
            result.append(chr(code - _KANA_OFFSET))
        else:
            result.append(char)
    return ''.join(result)


# ============================================================================
# Tokenizing
# ============================================================================

def tokenize(text: str) -> List[str]:
    """
    Split text into maximal runs of characters of the same class.

    Args:
        text: Text to split.

    Returns:
        List of runs in order. Joining them gives back the text.

    Example:
        >>> tokenize("お見舞い")
        ['お', '見舞', 'い']
    """
    tokens: List[str] = []
    start = 0
    for i in range(1, len(text) + 1):
        if i == len(text) or char_class(text[i]) != char_class(text[start]):
            tokens.append(text[start:i])
            start = i
    return tokens
