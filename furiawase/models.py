"""
Data models for Furiawase.

The engine works with small immutable tuples (FuriPair, Placement).
The pydantic models are for results that leave the process, e.g. the
JSON output of the command line interface or an HTTP response:

    from furiawase import combine_furi
    from furiawase.models import FuriganaResult

    pairs = combine_furi("食べる", "たべる")
    FuriganaResult.from_pairs("食べる", "たべる", pairs).model_dump_json()
"""

from enum import Enum
from typing import List, NamedTuple, Sequence, Tuple, Union

from pydantic import BaseModel, Field


# =============================================================================
# Engine Types
# =============================================================================

class FuriPair(NamedTuple):
    """An annotation to show over a contiguous slice of the word."""
    annotation: str  # empty when the text needs no furigana
    text: str


class Placement(NamedTuple):
    """Explicit furigana for word[start:end]."""
    start: int
    end: int  # exclusive
    text: str


class Strategy(Enum):
    """How the dispatcher turns a word into pairs."""
    LITERAL = "literal"  # nothing to annotate
    BASIC = "basic"  # align the reading against the word
    LOCATION = "location"  # slice the word by placement data


# =============================================================================
# Response Models
# =============================================================================

class SegmentResult(BaseModel):
    """Pydantic model for a single ruby segment."""
    annotation: str = Field("", description="Kana shown over the text, empty if none")
    text: str = Field(..., description="Slice of the word shown as base text")

    @property
    def has_annotation(self) -> bool:
        return bool(self.annotation)


class FuriganaResult(BaseModel):
    """
    Pydantic model for the furigana of one word.

    Joining the text of all segments gives back the word.
    """
    word: str = Field(..., description="The word as written")
    reading: str = Field("", description="Full kana reading of the word")
    segments: List[SegmentResult] = Field(default_factory=list, description="Ruby segments in order")

    @classmethod
    def from_pairs(
        cls,
        word: str,
        reading: str,
        pairs: Sequence[Union[FuriPair, Tuple[str, str]]],
    ) -> "FuriganaResult":
        """
        Create a FuriganaResult from engine output.

        Args:
            word: The word that was annotated.
            reading: The reading used for the annotation.
            pairs: Output of combine_furi() or another pair generator.

        Returns:
            FuriganaResult with one segment per pair.
        """
        return cls(
            word=word,
            reading=reading or "",
            segments=[SegmentResult(annotation=annotation, text=text) for annotation, text in pairs],
        )

    @property
    def text(self) -> str:
        """The base text of all segments joined together."""
        return ''.join(segment.text for segment in self.segments)

    def to_pairs(self) -> List[FuriPair]:
        """Convert back to engine pairs."""
        return [FuriPair(segment.annotation, segment.text) for segment in self.segments]
