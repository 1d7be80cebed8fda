"""
Shared fixtures for furiawase tests.

The reading service is tested against a fake tagger so the tests do not
depend on a MeCab dictionary being installed.
"""

from types import SimpleNamespace

import pytest

from furiawase.reading import ReadingService


class FakeTagger:
    """Callable returning tokens shaped like fugashi UniDic nodes."""

    def __init__(self, analyses):
        self.analyses = analyses
        self.calls = []

    def __call__(self, text):
        self.calls.append(text)
        return [
            SimpleNamespace(surface=surface, feature=SimpleNamespace(kana=kana), white_space=white_space)
            for surface, kana, white_space in self.analyses.get(text, [])
        ]


# text -> [(surface, katakana reading or None, preceding white space)]
ANALYSES = {
    "食べる": [("食べる", "タベル", "")],
    "今日は": [("今日", "キョウ", ""), ("は", "ハ", "")],
    "食べ物": [("食べ物", "タベモノ", "")],
    "ABC 本": [("ABC", None, ""), ("本", "ホン", " ")],
}


@pytest.fixture
def fake_tagger():
    """A fake tagger knowing a few words."""
    return FakeTagger(ANALYSES)


@pytest.fixture
def reading_service(fake_tagger):
    """A reading service backed by the fake tagger."""
    return ReadingService(tagger_factory=lambda args: fake_tagger)
