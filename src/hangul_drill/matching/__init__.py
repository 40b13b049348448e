"""Answer matching for the typing quiz."""

from hangul_drill.matching.matcher import (
    MatchResult,
    MatchUnit,
    calculate_correct,
    calculate_correct_jamos,
    calculate_correct_keystrokes,
    decompose_to_jamos,
    decompose_to_keystrokes,
    resolve_unit,
)
from hangul_drill.matching.selector import BestAnswer, select_best_answer

__all__ = [
    "BestAnswer",
    "MatchResult",
    "MatchUnit",
    "calculate_correct",
    "calculate_correct_jamos",
    "calculate_correct_keystrokes",
    "decompose_to_jamos",
    "decompose_to_keystrokes",
    "resolve_unit",
    "select_best_answer",
]
