"""Tests for Hangul character classification."""

import pytest

from hangul_drill.hangul.char_class import HangulCharClass, classify, split_by_class


class TestClassify:
    """Tests for classify."""

    @pytest.mark.parametrize(
        ("char", "expected"),
        [
            ("이", HangulCharClass.SYLLABLES),
            ("가", HangulCharClass.SYLLABLES),
            ("힣", HangulCharClass.SYLLABLES),
            ("ᆸ", HangulCharClass.JAMO),
            ("ᄀ", HangulCharClass.JAMO),
            ("ㄱ", HangulCharClass.COMPATIBILITY_JAMO),
            ("ㅏ", HangulCharClass.COMPATIBILITY_JAMO),
            ("\ua960", HangulCharClass.JAMO_EXTENDED_A),
            ("\ud7b0", HangulCharClass.JAMO_EXTENDED_B),
            ("h", HangulCharClass.NONE),
            (" ", HangulCharClass.NONE),
            ("漢", HangulCharClass.NONE),
        ],
    )
    def test_classify(self, char: str, expected: HangulCharClass) -> None:
        """Test classification of single characters."""
        assert classify(char) == expected

    def test_empty_string_is_none(self) -> None:
        """Test that an empty string has no class."""
        assert classify("") == HangulCharClass.NONE

    def test_unassigned_tail_of_syllable_block(self) -> None:
        """Test that U+D7A4..U+D7AF still count as syllables."""
        assert classify("\ud7a4") == HangulCharClass.SYLLABLES
        assert classify("\ud7af") == HangulCharClass.SYLLABLES

    def test_block_boundaries(self) -> None:
        """Test code points just outside each block."""
        assert classify("\uabff") == HangulCharClass.NONE
        assert classify("\u10ff") == HangulCharClass.NONE
        assert classify("\u1200") == HangulCharClass.NONE
        assert classify("\u312f") == HangulCharClass.NONE
        assert classify("\u3190") == HangulCharClass.NONE

    def test_values_are_names(self) -> None:
        """Test that enum values serialize to their block names."""
        assert HangulCharClass.SYLLABLES.value == "Syllables"
        assert HangulCharClass.JAMO.value == "Jamo"
        assert HangulCharClass.NONE.value == "None"


class TestSplitByClass:
    """Tests for split_by_class."""

    def test_empty(self) -> None:
        """Test that empty text gives no segments."""
        assert split_by_class("") == []

    def test_single_syllable(self) -> None:
        """Test a single syllable."""
        assert split_by_class("이") == [(HangulCharClass.SYLLABLES, "이")]

    def test_mixed_text(self) -> None:
        """Test runs of Latin text around a syllable."""
        assert split_by_class("hi 이 there") == [
            (HangulCharClass.NONE, "hi "),
            (HangulCharClass.SYLLABLES, "이"),
            (HangulCharClass.NONE, " there"),
        ]

    def test_partial_composition(self) -> None:
        """Test syllables followed by a half-typed compatibility jamo."""
        assert split_by_class("안녕ㅎ") == [
            (HangulCharClass.SYLLABLES, "안녕"),
            (HangulCharClass.COMPATIBILITY_JAMO, "ㅎ"),
        ]

    def test_segments_rebuild_text(self) -> None:
        """Test that joining the segments gives back the input."""
        text = "ㄱ가ᄀa가ㄱ"
        segments = split_by_class(text)
        assert "".join(part for _, part in segments) == text
        assert len(segments) == 6

    def test_repeatable(self) -> None:
        """Test that repeated calls return the same segments."""
        assert split_by_class("hi 이") == split_by_class("hi 이")
