"""
Tests for models.py - engine tuples and response models.
"""

from furiawase import combine_furi
from furiawase.models import FuriganaResult, FuriPair, Placement, SegmentResult


class TestFuriPair:
    """FuriPair behaves like a plain tuple."""

    def test_tuple_equality(self):
        assert FuriPair("た", "食") == ("た", "食")

    def test_unpacking(self):
        annotation, text = FuriPair("", "べる")
        assert annotation == ""
        assert text == "べる"

    def test_placement_fields(self):
        placement = Placement(0, 2, "きょう")
        assert (placement.start, placement.end, placement.text) == (0, 2, "きょう")


class TestFuriganaResult:
    """Tests for the pydantic response model."""

    def test_from_pairs(self):
        pairs = combine_furi("食べる", "たべる")
        result = FuriganaResult.from_pairs("食べる", "たべる", pairs)
        assert result.word == "食べる"
        assert result.text == "食べる"
        assert [s.has_annotation for s in result.segments] == [True, False, False]
        assert result.to_pairs() == pairs

    def test_none_reading(self):
        result = FuriganaResult.from_pairs("今日", None, [("", "今日")])
        assert result.reading == ""

    def test_json(self):
        result = FuriganaResult.from_pairs("今日", "きょう", [("きょう", "今日")])
        data = result.model_dump()
        assert data == {
            "word": "今日",
            "reading": "きょう",
            "segments": [{"annotation": "きょう", "text": "今日"}],
        }

    def test_segment_default_annotation(self):
        assert SegmentResult(text="る").annotation == ""
