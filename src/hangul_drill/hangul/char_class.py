"""Hangul character classification.

한글 유니코드 블록 판별:
- 완성형 음절 (Syllables)
- 첫가끝 자모 (Jamo)
- 호환용 자모 (CompatibilityJamo)
- 자모 확장 A/B (JamoExtendedA, JamoExtendedB)
"""

from __future__ import annotations

from enum import Enum


class HangulCharClass(str, Enum):
    """Korean Unicode block a single character belongs to."""

    COMPATIBILITY_JAMO = "CompatibilityJamo"
    JAMO_EXTENDED_A = "JamoExtendedA"
    JAMO_EXTENDED_B = "JamoExtendedB"
    JAMO = "Jamo"
    SYLLABLES = "Syllables"
    NONE = "None"


# =============================================================================
# Unicode Ranges (inclusive)
# =============================================================================

# The syllable range deliberately extends to 0xD7AF rather than the last
# assigned syllable 0xD7A3 (힣); U+D7A4..U+D7AF are unassigned.
SYLLABLES_RANGE = (0xAC00, 0xD7AF)
JAMO_RANGE = (0x1100, 0x11FF)
COMPATIBILITY_JAMO_RANGE = (0x3130, 0x318F)
JAMO_EXTENDED_A_RANGE = (0xA960, 0xA97F)
JAMO_EXTENDED_B_RANGE = (0xD7B0, 0xD7FF)

_RANGES: tuple[tuple[tuple[int, int], HangulCharClass], ...] = (
    (SYLLABLES_RANGE, HangulCharClass.SYLLABLES),
    (JAMO_RANGE, HangulCharClass.JAMO),
    (COMPATIBILITY_JAMO_RANGE, HangulCharClass.COMPATIBILITY_JAMO),
    (JAMO_EXTENDED_A_RANGE, HangulCharClass.JAMO_EXTENDED_A),
    (JAMO_EXTENDED_B_RANGE, HangulCharClass.JAMO_EXTENDED_B),
)


def classify(char: str) -> HangulCharClass:
    """Classify a character into its Hangul Unicode block.

    Only the first code point is inspected; an empty string is ``NONE``.

    Example: 이 → SYLLABLES, ᆸ → JAMO, ㄱ → COMPATIBILITY_JAMO, h → NONE
    """
    if not char:
        return HangulCharClass.NONE

    code = ord(char[0])
    for (start, end), char_class in _RANGES:
        if start <= code <= end:
            return char_class
    return HangulCharClass.NONE


def split_by_class(text: str) -> list[tuple[HangulCharClass, str]]:
    """Split text into maximal runs of characters sharing a class.

    Example: "hi 이 there" → [(NONE, "hi "), (SYLLABLES, "이"), (NONE, " there")]
    """
    segments: list[tuple[HangulCharClass, str]] = []
    run_class: HangulCharClass | None = None
    run_start = 0

    for idx, char in enumerate(text):
        char_class = classify(char)
        if run_class is None:
            run_class = char_class
        elif char_class != run_class:
            segments.append((run_class, text[run_start:idx]))
            run_class = char_class
            run_start = idx

    if run_class is not None:
        segments.append((run_class, text[run_start:]))
    return segments
