"""Best-answer selection across alternate correct answers."""

from __future__ import annotations

import math
from dataclasses import dataclass

from hangul_drill.matching.matcher import calculate_correct_keystrokes, decompose_to_keystrokes


@dataclass(frozen=True)
class BestAnswer:
    """Candidate answer closest to the user's input."""

    answer: str
    correct: int
    total: int
    is_exact_match: bool


def select_best_answer(possible_answers: list[str], user_input: str) -> BestAnswer:
    """Pick the candidate answer the input is closest to.

    A literal match wins immediately, earliest candidate first. Otherwise the
    candidate with the most matching keystrokes wins; ties go to the candidate
    with fewer total keystrokes, and to the later one when totals are equal.

    Args:
        possible_answers: Acceptable answers in priority order.
        user_input: What the user has typed so far.

    Returns:
        BestAnswer for the chosen candidate. An empty candidate list yields an
        empty answer with zero counts.
    """
    best_answer = ""
    best_correct = 0
    best_total: float = math.inf

    for answer in possible_answers:
        if answer == user_input:
            total = len(decompose_to_keystrokes(answer))
            return BestAnswer(answer=answer, correct=total, total=total, is_exact_match=True)

        result = calculate_correct_keystrokes(answer, user_input)
        if result.correct > best_correct or (
            result.correct == best_correct and result.total <= best_total
        ):
            best_answer = answer
            best_correct = result.correct
            best_total = result.total

    if math.isinf(best_total):
        return BestAnswer(answer="", correct=0, total=0, is_exact_match=False)
    return BestAnswer(
        answer=best_answer,
        correct=best_correct,
        total=int(best_total),
        is_exact_match=False,
    )
