"""Prefix matching of user input against a correct Hangul answer.

Both strings are decomposed down to comparable units, either compatibility
jamo or keyboard keystrokes, and the number of leading units that agree is
counted. Counting stops at the first mismatch, so a trailing half-composed
syllable never lowers the score of what was already typed correctly.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from hangul_drill.core.exceptions import UnknownMatchUnitError
from hangul_drill.hangul.compat import jamo_to_compat_with_fallback
from hangul_drill.hangul.keystrokes import split_into_keystrokes
from hangul_drill.hangul.syllables import decompose_all_syllables


class MatchUnit(str, Enum):
    """Granularity at which answers are compared."""

    JAMO = "jamo"
    KEYSTROKE = "keystroke"


@dataclass(frozen=True)
class MatchResult:
    """Number of leading units typed correctly out of the answer's total."""

    correct: int
    total: int
    unit: MatchUnit = MatchUnit.KEYSTROKE

    @property
    def is_complete(self) -> bool:
        """Whether every unit of a non-empty answer has been matched."""
        return self.total > 0 and self.correct == self.total

    @property
    def ratio(self) -> float:
        """Fraction of the answer matched, 0.0 for an empty answer."""
        if self.total == 0:
            return 0.0
        return self.correct / self.total

    def feedback(self) -> str:
        """Progress label shown while typing, e.g. ``3/6 keystrokes correct``."""
        return f"{self.correct}/{self.total} {self.unit.value}s correct"


# =============================================================================
# Decomposition Pipelines
# =============================================================================

def decompose_to_jamos(text: str) -> list[str]:
    """Decompose text into compatibility jamo display units.

    Example: 안 → [ㅇ, ㅏ, ㄴ]
    """
    return [jamo_to_compat_with_fallback(char) for char in decompose_all_syllables(text)]


def decompose_to_keystrokes(text: str) -> list[str]:
    """Decompose text into the keystrokes needed to type it.

    Example: 과 → [ㄱ, ㅗ, ㅏ]
    """
    keystrokes: list[str] = []
    for jamo in decompose_to_jamos(text):
        keystrokes.extend(split_into_keystrokes(jamo))
    return keystrokes


def _count_matching_prefix(expected: list[str], actual: list[str]) -> int:
    count = 0
    for want, got in zip(expected, actual):
        if want != got:
            break
        count += 1
    return count


# =============================================================================
# Matchers
# =============================================================================

def calculate_correct_jamos(correct_answer: str, user_input: str) -> MatchResult:
    """Count leading compatibility jamo of the answer matched by the input.

    Example: ("안녕", "안") → 3/6, ("안녕", "ㅇ") → 1/6
    """
    expected = decompose_to_jamos(correct_answer)
    actual = decompose_to_jamos(user_input)
    return MatchResult(
        correct=_count_matching_prefix(expected, actual),
        total=len(expected),
        unit=MatchUnit.JAMO,
    )


def calculate_correct_keystrokes(correct_answer: str, user_input: str) -> MatchResult:
    """Count leading keystrokes of the answer matched by the input.

    Compound jamo count as two keystrokes each.

    Example: ("김민지", "김믽") → 7/8
    """
    expected = decompose_to_keystrokes(correct_answer)
    actual = decompose_to_keystrokes(user_input)
    return MatchResult(
        correct=_count_matching_prefix(expected, actual),
        total=len(expected),
        unit=MatchUnit.KEYSTROKE,
    )


def resolve_unit(unit: MatchUnit | str) -> MatchUnit:
    """Turn a unit name into a MatchUnit.

    Raises:
        UnknownMatchUnitError: If the name is neither ``jamo`` nor ``keystroke``.
    """
    if isinstance(unit, MatchUnit):
        return unit
    try:
        return MatchUnit(unit.lower())
    except ValueError as e:
        raise UnknownMatchUnitError(f"Unknown match unit: {unit!r}") from e


def calculate_correct(
    correct_answer: str,
    user_input: str,
    unit: MatchUnit | str = MatchUnit.KEYSTROKE,
) -> MatchResult:
    """Match using the matcher for the given unit."""
    if resolve_unit(unit) == MatchUnit.JAMO:
        return calculate_correct_jamos(correct_answer, user_input)
    return calculate_correct_keystrokes(correct_answer, user_input)
