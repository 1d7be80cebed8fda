"""
Furigana alignment for Furiawase.

Splits a word written with kanji and kana, together with its full kana
reading, into (annotation, text) pairs for ruby rendering:

    >>> combine_furi("食べる", "たべる")
    [FuriPair(annotation='た', text='食'), FuriPair(annotation='', text='べ'), FuriPair(annotation='', text='る')]

Joining the text of the returned pairs always gives back the word.
"""

import logging
import re
from typing import TYPE_CHECKING, Iterable, List, Optional, Sequence, Tuple, Union

from furiawase import settings
from furiawase.characters import has_kana, is_kana, is_mixed_script, test_word, tokenize
from furiawase.models import FuriPair, Placement, Strategy
from furiawase.placement import PlacementData, parse_furi, validate_placements

if TYPE_CHECKING:
    from furiawase.reading import ReadingService

logger = logging.getLogger(__name__)

LocationLike = Union[Placement, Tuple[Tuple[int, int], str]]


class AlignmentError(ValueError):
    """Raised when a reading cannot be aligned and fallback is disabled."""


# ============================================================================
# Okurigana Stripping
# ============================================================================

def strip_leading_trailing_kana(word: str, reading: str) -> Tuple[str, str, str, str]:
    """
    Split literal kana off both ends of a word and its reading.

    The leading kana of the word that the reading repeats verbatim is the
    bikago (お in お茶). At the other end, the kana directly after the last
    kanji run stays with the core as an anchor for alignment, and the kana
    after it that the reading repeats verbatim is the okurigana (る in 食べる).

    Args:
        word: Word with kanji and kana.
        reading: Full reading of the word.

    Returns:
        Tuple of (bikago, core_word, core_reading, okurigana).
        A word without kana is returned whole as the core.
    """
    if not has_kana(word):
        return '', word, reading, ''

    lead = 0
    while (lead < len(word) and lead < len(reading)
           and is_kana(word[lead]) and word[lead] == reading[lead]):
        lead += 1
    bikago = word[:lead]
    rest_word = word[lead:]
    rest_reading = reading[lead:]

    last = max((i for i, char in enumerate(rest_word) if not is_kana(char)), default=None)
    if last is None:
        return bikago, rest_word, rest_reading, ''

    tail = rest_word[last + 2:]
    okurigana = ''
    for size in range(len(tail), 0, -1):
        suffix = tail[-size:]
        if rest_reading.endswith(suffix):
            okurigana = suffix
            break

    cut = len(okurigana)
    core_word = rest_word[:len(rest_word) - cut]
    core_reading = rest_reading[:len(rest_reading) - cut]
    return bikago, core_word, core_reading, okurigana


# ============================================================================
# Reading Alignment
# ============================================================================

def _skip_redundant_reading(reading: str, text: str) -> FuriPair:
    if not reading or reading == text:
        return FuriPair('', text)
    return FuriPair(reading, text)


def _alignment_pattern(tokens: Iterable[str]) -> str:
    # Kanji runs capture any reading, kana runs must appear verbatim.
    return ''.join(f"({re.escape(token)})" if is_kana(token[0]) else "(.*)" for token in tokens)


def _align_core(core_word: str, core_reading: str) -> Optional[List[FuriPair]]:
    if not has_kana(core_word):
        return [_skip_redundant_reading(core_reading, core_word)]

    tokens = tokenize(core_word)
    match = re.fullmatch(_alignment_pattern(tokens), core_reading, re.DOTALL)
    if match is None:
        return None

    return [_skip_redundant_reading(fragment, token) for fragment, token in zip(match.groups(), tokens)]


def _alignment_mismatch(word: str, reading: str) -> List[FuriPair]:
    if not settings.ALIGNMENT_FALLBACK:
        raise AlignmentError(f"Reading {reading!r} does not match {word!r}")
    logger.warning(f"Reading {reading!r} does not match {word!r}, annotating the whole word")
    return [FuriPair(reading, word)]


def basic_furi(word: str, reading: str = '') -> List[FuriPair]:
    """
    Align a reading against a word and drop redundant kana annotations.

    Each kanji run of the word gets the part of the reading between the
    kana around it. Kana that reads as itself is not annotated.

    Args:
        word: Word with kanji and kana.
        reading: Full kana reading of the word.

    Returns:
        List of FuriPair. If the reading does not fit the word, a single
        pair annotating the whole word (see settings.ALIGNMENT_FALLBACK).

    Raises:
        AlignmentError: If the reading does not fit and fallback is disabled.
    """
    reading = reading or ''
    if not word:
        return []
    if not reading or word == reading or test_word(word, 'kana'):
        return [FuriPair('', word)]

    bikago, core_word, core_reading, okurigana = strip_leading_trailing_kana(word, reading)

    pairs = _align_core(core_word, core_reading)
    if pairs is None:
        return _alignment_mismatch(word, reading)

    if bikago:
        pairs.insert(0, FuriPair('', bikago))
    if okurigana:
        pairs.append(FuriPair('', okurigana))
    return pairs


# ============================================================================
# Placement Pairs
# ============================================================================

def _as_placement(location: LocationLike) -> Placement:
    if isinstance(location, Placement):
        return location
    if len(location) == 3:
        return Placement(*location)
    (start, end), text = location
    return Placement(start, end, text)


def generate_pairs(word: str, furi_locs: Sequence[LocationLike]) -> List[FuriPair]:
    """
    Generate pairs by slicing the word at placement ranges.

    Characters not covered by any placement become pairs without
    annotation. The reading is not consulted.

    Args:
        word: The word to slice.
        furi_locs: Placements, or ((start, end), text) tuples, in ascending order.

    Returns:
        List of FuriPair covering the whole word.

    Raises:
        PlacementError: If a placement does not fit the word.
    """
    placements = [_as_placement(location) for location in furi_locs]
    validate_placements(word, placements)

    pairs: List[FuriPair] = []
    prev_end = 0
    for start, end, furi_text in placements:
        if start > prev_end:
            pairs.append(FuriPair('', word[prev_end:start]))
        pairs.append(FuriPair(furi_text, word[start:end]))
        prev_end = end

    if prev_end < len(word):
        pairs.append(FuriPair('', word[prev_end:]))
    return pairs


# ============================================================================
# Dispatch
# ============================================================================

def choose_strategy(word: str, reading: str, placements: Sequence[Placement]) -> Strategy:
    """
    Decide how combine_furi() annotates a word.

    Args:
        word: The word to annotate.
        reading: Full kana reading of the word.
        placements: Parsed placement data, possibly empty.

    Returns:
        Strategy.LITERAL when there is nothing to annotate, Strategy.BASIC
        to align the reading, Strategy.LOCATION to use the placements.
    """
    if word == reading or test_word(word, 'kana'):
        return Strategy.LITERAL

    # 熟字訓 such as 今日 "0:きょう" carry a single placement for the whole word
    is_special_reading = len(placements) == 1 and test_word(word, 'kanji')
    if not placements or is_special_reading or is_mixed_script(reading):
        return Strategy.BASIC

    return Strategy.LOCATION


def combine_furi(word: str, reading: str = '', furi: PlacementData = None) -> List[FuriPair]:
    """
    Combine a word with its reading into furigana pairs.

    Args:
        word: Word with kanji and kana.
        reading: Full kana reading of the word.
        furi: Optional placement data, see furiawase.placement.

    Returns:
        List of FuriPair whose texts join to the word.

    Raises:
        PlacementError: If the placement data is malformed or does not fit the word.
    """
    reading = reading or ''
    placements = parse_furi(furi)
    if not word:
        return []

    strategy = choose_strategy(word, reading, placements)
    logger.debug(f"{word!r} [{reading!r}] placements={placements}: {strategy.value}")

    if strategy is Strategy.LITERAL:
        return [FuriPair('', word)]
    if strategy is Strategy.BASIC:
        return basic_furi(word, reading)
    return generate_pairs(word, placements)


def furigana_for(word: str, service: "ReadingService", furi: PlacementData = None) -> List[FuriPair]:
    """
    Generate the reading of a word and combine it into furigana pairs.

    Args:
        word: Word with kanji and kana.
        service: Reading service used to generate the reading.
        furi: Optional placement data.

    Returns:
        List of FuriPair.

    Raises:
        ReadingServiceError: If the reading cannot be generated.
    """
    reading = service.generate_reading(word)
    return combine_furi(word, reading, furi)
