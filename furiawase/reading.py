"""
Reading generation for Furiawase.

Converts Japanese text to its full hiragana reading with MeCab (through
fugashi and a UniDic dictionary). The tagger is expensive to build, so a
ReadingService builds it once, on first use, and reuses it afterwards.

Create one service and pass it to the code that needs readings:

    service = ReadingService()
    service.generate_reading("今日は")  # 'きょうは'
"""

import logging
import threading
import time
from typing import Any, Callable, Optional

from furiawase import settings
from furiawase.characters import as_hiragana

logger = logging.getLogger(__name__)

TaggerFactory = Callable[[str], Any]


class ReadingServiceError(RuntimeError):
    """Raised when a reading cannot be generated."""


def _default_tagger_factory(mecab_args: str) -> Any:
    try:
        from fugashi import Tagger
    except ImportError as exc:
        raise ReadingServiceError("Reading generation requires 'fugashi' (MeCab) to be installed.") from exc
    return Tagger(mecab_args)


def _token_reading(token: Any) -> str:
    """Kana reading of a tagged token, or its surface when it has none."""
    feature = getattr(token, 'feature', None)
    reading = getattr(feature, 'kana', None) or getattr(feature, 'pron', None)
    if not reading or reading == '*':
        return token.surface
    return reading


class ReadingService:
    """
    Text to reading converter with a lazily built, shared tagger.

    The tagger is built by the first call that needs it. Concurrent first
    calls build it only once. If building fails, the next call tries again.
    """

    def __init__(self, tagger_factory: Optional[TaggerFactory] = None, mecab_args: Optional[str] = None):
        """
        Create a reading service.

        Args:
            tagger_factory: Callable building a tagger from MeCab arguments.
                Defaults to fugashi.Tagger.
            mecab_args: MeCab arguments. Defaults to settings.MECAB_ARGS.
        """
        self._tagger_factory = tagger_factory or _default_tagger_factory
        self._mecab_args = settings.MECAB_ARGS if mecab_args is None else mecab_args
        self._tagger: Any = None
        self._lock = threading.Lock()

    @property
    def is_ready(self) -> bool:
        """True once the tagger has been built."""
        return self._tagger is not None

    def _ensure_tagger(self) -> Any:
        tagger = self._tagger
        if tagger is not None:
            return tagger

        with self._lock:
            if self._tagger is None:
                try:
                    self._tagger = self._tagger_factory(self._mecab_args)
                except ReadingServiceError:
                    raise
                except Exception as exc:
                    logger.error(f"Failed to initialize reading generator: {exc}")
                    raise ReadingServiceError("Failed to initialize reading generator") from exc
                logger.info("Reading generator initialized")
            return self._tagger

    def warm_up(self) -> float:
        """
        Build the tagger now instead of on first use.

        Returns:
            Seconds spent building the tagger (0 if it was already built).
        """
        if self.is_ready:
            return 0.0
        t0 = time.perf_counter()
        self._ensure_tagger()
        return time.perf_counter() - t0

    def generate_reading(self, text: str) -> str:
        """
        Generate the full hiragana reading of Japanese text.

        Args:
            text: Japanese text with kanji and/or kana.

        Returns:
            Hiragana reading. Empty for blank text.

        Raises:
            ReadingServiceError: If the tagger is unavailable, fails, or
                produces no reading.
        """
        if not text or not text.strip():
            return ''

        tagger = self._ensure_tagger()
        try:
            tokens = list(tagger(text))
        except Exception as exc:
            raise ReadingServiceError(f"Error generating reading for {text!r}: {exc}") from exc

        pieces = []
        for token in tokens:
            pieces.append(getattr(token, 'white_space', '') or '')
            pieces.append(_token_reading(token))
        reading = as_hiragana(''.join(pieces))

        if not reading.strip():
            raise ReadingServiceError(f"Empty reading generated for {text!r}")
        logger.debug(f"Reading for {text!r}: {reading!r}")
        return reading
