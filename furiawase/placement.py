"""
Furigana placement data for Furiawase.

Placement data pins furigana to index ranges of a word. It comes either
as a string in the JMdict furigana format:

    "0-1:きょう;2:び"

or as a mapping of single start indices to furigana text:

    {0: "きょう", "2": "び"}

Both forms are normalized to a list of Placement tuples ordered by start.
"""

import logging
from typing import Dict, List, Optional, Sequence, Union

from furiawase.models import Placement
from furiawase.settings import (
    PLACEMENT_ENTRY_SEPARATOR,
    PLACEMENT_RANGE_SEPARATOR,
    PLACEMENT_TEXT_SEPARATOR,
)

logger = logging.getLogger(__name__)

PlacementData = Union[str, Dict[Union[int, str], str], None]


class PlacementError(ValueError):
    """Raised for placement data that cannot be parsed or does not fit the word."""


# ============================================================================
# Parsing
# ============================================================================

def parse_furi(data: PlacementData) -> List[Placement]:
    """
    Parse furigana placement data.

    Args:
        data: Placement string, mapping of start index to text, or None.

    Returns:
        List of placements ordered by start index. Empty for None or "".

    Raises:
        PlacementError: If an entry is malformed.
    """
    if not data:
        return []
    if isinstance(data, str):
        placements = _parse_furi_string(data)
    elif isinstance(data, dict):
        placements = _parse_furi_mapping(data)
    else:
        raise PlacementError(f"Unsupported placement data: {data!r}")

    placements = sorted(placements, key=lambda p: (p.start, p.end))
    logger.debug(f"Parsed placement data {data!r} into {placements}")
    return placements


def _parse_index(value: str, entry: str) -> int:
    value = value.strip()
    if not value.isdecimal():
        raise PlacementError(f"Invalid index {value!r} in placement entry {entry!r}")
    return int(value)


def _parse_furi_string(locations: str) -> List[Placement]:
    placements = []
    for entry in locations.split(PLACEMENT_ENTRY_SEPARATOR):
        if not entry.strip():
            continue

        indexes, sep, content = entry.partition(PLACEMENT_TEXT_SEPARATOR)
        if not sep:
            raise PlacementError(f"Missing '{PLACEMENT_TEXT_SEPARATOR}' in placement entry {entry!r}")
        if not content:
            raise PlacementError(f"Empty furigana in placement entry {entry!r}")

        start_str, _, end_str = indexes.partition(PLACEMENT_RANGE_SEPARATOR)
        start = _parse_index(start_str, entry)
        end = _parse_index(end_str, entry) if end_str.strip() else start

        # JMdict stores the index of the final character, not one past it.
        # A missing end or end == start covers a single character.
        if end < start:
            raise PlacementError(f"End index before start in placement entry {entry!r}")
        placements.append(Placement(start, end + 1, content))

    return placements


def _parse_furi_mapping(locations: Dict[Union[int, str], str]) -> List[Placement]:
    placements = []
    for key, content in locations.items():
        entry = f"{key}:{content}"
        if isinstance(key, int) and not isinstance(key, bool):
            if key < 0:
                raise PlacementError(f"Invalid index {key!r} in placement entry {entry!r}")
            start = key
        elif isinstance(key, str):
            start = _parse_index(key, entry)
        else:
            raise PlacementError(f"Invalid index {key!r} in placement entry {entry!r}")

        if not isinstance(content, str) or not content:
            raise PlacementError(f"Empty furigana in placement entry {entry!r}")
        placements.append(Placement(start, start + 1, content))

    return placements


# ============================================================================
# Validation
# ============================================================================

def validate_placements(word: str, placements: Sequence[Placement]) -> None:
    """
    Check that placements can be used to slice the word.

    Placements must be non-empty ranges inside the word, in ascending
    order and without overlap.

    Args:
        word: The word the placements refer to.
        placements: Placements to check.

    Raises:
        PlacementError: On the first placement that does not fit.
    """
    prev_end = 0
    for placement in placements:
        start, end, _ = placement
        if start < 0 or end <= start:
            raise PlacementError(f"Empty or negative range {placement!r}")
        if end > len(word):
            raise PlacementError(f"Placement {placement!r} is outside of {word!r} (length {len(word)})")
        if start < prev_end:
            raise PlacementError(f"Placement {placement!r} overlaps or precedes the previous one")
        prev_end = end


def format_furi(placements: Sequence[Placement]) -> Optional[str]:
    """
    Format placements back into the JMdict placement string.

    Args:
        placements: Placements to format.

    Returns:
        Placement string, or None if there are no placements.
    """
    if not placements:
        return None
    entries = []
    for start, end, text in placements:
        if end - start == 1:
            entries.append(f"{start}{PLACEMENT_TEXT_SEPARATOR}{text}")
        else:
            entries.append(f"{start}{PLACEMENT_RANGE_SEPARATOR}{end - 1}{PLACEMENT_TEXT_SEPARATOR}{text}")
    return PLACEMENT_ENTRY_SEPARATOR.join(entries)
