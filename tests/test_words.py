"""Tests for word boundary resolution."""

from truncation.graphemes import segment
from truncation.policy import TruncationPolicy
from truncation.words import resolve_cut


def _resolve(text: str, index: int, **policy) -> str:
    return "".join(resolve_cut(segment(text), index, TruncationPolicy(**policy)))


class TestHardCut:
    """Tests for the default hard cut."""

    def test_cuts_inside_word(self):
        assert _resolve("internationalization", 7, length=7) == "interna"

    def test_cut_at_end_keeps_everything(self):
        assert _resolve("a b c d ef", 10, length=10, reserve_last_word=-1) == "a b c d ef"

    def test_clean_boundary_is_kept(self):
        assert _resolve("Hello world from earth", 11, length=11, reserve_last_word=-1) == "Hello world"

    def test_emoji_boundary_is_clean(self):
        text = "Hello there \U0001F60E\U0001F60E\U0001F60E"
        assert _resolve(text, 13, length=13, reserve_last_word=True) == "Hello there \U0001F60E"


class TestReserveLastWordNegative:
    """Tests for dropping a partially cut word."""

    def test_drops_partial_word(self):
        assert _resolve("hello internationalization", 7, length=7, reserve_last_word=-1) == "hello "

    def test_keeps_the_only_word(self):
        result = _resolve("internationalization", 7, length=7, reserve_last_word=-1)

        assert result == "internationalizat"

    def test_trim_the_only_word(self):
        result = _resolve(
            "internationalization",
            7,
            length=7,
            reserve_last_word=-1,
            trim_the_only_word=True,
        )

        assert result == "interna"

    def test_only_word_shorter_than_limit_is_dropped(self):
        # The word did not use the whole configured length
        assert _resolve("abcdef", 4, length=10, reserve_last_word=-1) == ""


class TestReserveLastWordPositive:
    """Tests for finishing a partially cut word."""

    def test_true_exceeds_by_at_most_ten(self):
        result = _resolve("internationalization", 7, length=7, reserve_last_word=True)

        assert result == "internationalizat"

    def test_number_sets_max_exceeded(self):
        result = _resolve("internationalization", 7, length=7, reserve_last_word=20)

        assert result == "internationalization"

    def test_small_number(self):
        assert _resolve("hello world", 7, length=7, reserve_last_word=3) == "hello worl"

    def test_stops_at_word_end(self):
        assert _resolve("hello from earth", 12, length=12, reserve_last_word=True) == "hello from earth"
