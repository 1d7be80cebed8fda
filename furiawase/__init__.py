"""
Furiawase: furigana alignment for Japanese vocabulary.
Splits a word and its kana reading into ruby (annotation, text) pairs.
"""

import time
from typing import Optional, Tuple

from furiawase.furigana import (
    AlignmentError,
    basic_furi,
    combine_furi,
    furigana_for,
    generate_pairs,
    strip_leading_trailing_kana,
)
from furiawase.models import FuriPair, Placement, Strategy
from furiawase.placement import PlacementError, parse_furi
from furiawase.reading import ReadingService, ReadingServiceError

__version__ = "0.1.0"

__all__ = [
    "AlignmentError",
    "FuriPair",
    "Placement",
    "PlacementError",
    "ReadingService",
    "ReadingServiceError",
    "Strategy",
    "basic_furi",
    "combine_furi",
    "furigana_for",
    "generate_pairs",
    "parse_furi",
    "strip_leading_trailing_kana",
    "warm_up",
]


def warm_up(service: Optional[ReadingService] = None, verbose: bool = False) -> Tuple[float, dict]:
    """
    Pre-initialize the reading service.

    Call this once at application startup to avoid the cold-start latency
    of building the MeCab tagger on the first request.

    Args:
        service: Service to initialize. If None, creates one.
        verbose: If True, print timing information.

    Returns:
        Tuple of (total_time_seconds, timing_details_dict)

    Example:
        >>> import furiawase
        >>> service = furiawase.ReadingService()
        >>> elapsed, details = furiawase.warm_up(service, verbose=True)
        Warming up furiawase...
          Tagger:          85.2ms
        Total warm-up:     85.3ms
    """
    timings = {}
    total_start = time.perf_counter()

    if verbose:
        print("Warming up furiawase...")

    if service is None:
        service = ReadingService()

    timings['tagger'] = service.warm_up() * 1000
    if verbose:
        print(f"  Tagger:         {timings['tagger']:>7.1f}ms")

    total_time = time.perf_counter() - total_start
    timings['total'] = total_time * 1000

    if verbose:
        print(f"Total warm-up:    {timings['total']:>7.1f}ms")

    return total_time, timings
