"""Tests for splitting long words across ticks."""

import pytest

from textspritzer.services.pacer.segmenter import (
    find_split_index,
    has_inner_hyphen,
    segment_word,
    split_if_needed,
)


MAX_LEN = 13


class TestSplitIfNeeded:
    """Tests for a single split step."""

    def test_short_word_untouched(self):
        assert split_if_needed("cat", MAX_LEN) == ("cat", None)

    def test_word_at_limit_untouched(self):
        word = "a" * MAX_LEN
        assert split_if_needed(word, MAX_LEN) == (word, None)

    def test_hyphenated_word_splits_after_hyphen(self):
        assert split_if_needed("well-known", MAX_LEN) == ("well-", "known")

    def test_hyphen_break_can_be_disabled(self):
        assert split_if_needed("well-known", MAX_LEN, break_at_hyphens=False) == (
            "well-known",
            None,
        )

    @pytest.mark.parametrize("word", ["-dash", "dash-", "-"])
    def test_edge_hyphens_do_not_split_short_words(self, word):
        assert split_if_needed(word, MAX_LEN) == (word, None)

    def test_very_long_word_splits_near_start(self):
        head, remainder = split_if_needed("floccinaucinihilipilification", MAX_LEN)
        assert head == "floccinaucin-"
        assert len(head) <= MAX_LEN
        assert remainder == "ihilipilification"
        assert head[:-1] + remainder == "floccinaucinihilipilification"

    def test_medium_long_word_splits_near_middle(self):
        assert split_if_needed("extraordinarily", MAX_LEN) == ("extraord-", "inarily")

    def test_period_split_keeps_period_without_hyphen(self):
        assert split_if_needed("www.example.com", MAX_LEN) == ("www.", "example.com")

    def test_far_hyphen_falls_back_to_prefix_split(self):
        head, remainder = split_if_needed("abcdefghijklmnop-qr", MAX_LEN)
        assert head == "abcdefgh-"
        assert remainder == "ijklmnop-qr"

    def test_rejects_degenerate_limit(self):
        with pytest.raises(ValueError):
            split_if_needed("anything", 1)


class TestFindSplitIndex:
    """Tests for choosing the split position."""

    @pytest.mark.parametrize(
        "word,expected",
        [
            ("well-known", 5),
            ("www.example.com", 4),
            ("floccinaucinihilipilification", 12),
            ("implementation", 7),
            ("extraordinarily", 8),
            ("abcdefghijklmnopqrstuvwxyz", 13),
            ("abcdefghijklmnop-qr", 8),
            ("abcdefghijklmnopq.r-s", 9),
        ],
    )
    def test_split_index(self, word, expected):
        assert find_split_index(word, MAX_LEN) == expected

    def test_index_never_exceeds_limit(self):
        for length in range(MAX_LEN + 1, 80):
            for word in ("x" * length, "x" * (length - 2) + "-y", "y" * (length - 2) + ".z"):
                index = find_split_index(word, MAX_LEN)
                assert 1 <= index <= MAX_LEN


class TestSegmentWord:
    """Tests for repeated splitting until every segment fits."""

    def test_short_word_is_one_segment(self):
        assert segment_word("cat") == ["cat"]

    def test_floccinaucinihilipilification(self):
        assert segment_word("floccinaucinihilipilification") == [
            "floccinaucin-",
            "ihilipili-",
            "fication",
        ]

    def test_compound_splits_at_each_hyphen(self):
        assert segment_word("mother-in-law") == ["mother-", "in-", "law"]

    @pytest.mark.parametrize(
        "word",
        [
            "cat",
            "well-known",
            "floccinaucinihilipilification",
            "pneumonoultramicroscopicsilicovolcanoconiosis",
            "www.example.com/some-very-long-path.html",
            "state-of-the-art-implementation",
            "a" * 100,
            "...............................",
            "--------------------",
        ],
    )
    def test_segments_reconstruct_word(self, word):
        segments = segment_word(word, MAX_LEN)

        # Only hyphens are ever added
        assert "".join(segments).replace("-", "") == word.replace("-", "")
        assert len("".join(segments)) - len(word) <= len(segments) - 1
        for segment in segments[:-1]:
            assert len(segment) <= MAX_LEN + 1

    @pytest.mark.parametrize("max_len", [2, 3, 5, 8])
    def test_terminates_for_small_limits(self, max_len):
        word = "supercalifragilisticexpialidocious"
        segments = segment_word(word, max_len)
        assert "".join(segments).replace("-", "") == word
        assert all(segment for segment in segments)


def test_has_inner_hyphen():
    assert has_inner_hyphen("well-known")
    assert not has_inner_hyphen("known")
    assert not has_inner_hyphen("-known")
    assert not has_inner_hyphen("known-")
