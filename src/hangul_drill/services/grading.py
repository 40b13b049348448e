"""Grading service for typed quiz answers."""

from hangul_drill.core.config import get_settings
from hangul_drill.core.logging import get_logger
from hangul_drill.matching.matcher import MatchResult, MatchUnit, calculate_correct, resolve_unit
from hangul_drill.matching.selector import BestAnswer, select_best_answer

logger = get_logger(__name__)


class GradingService:
    """Service grading user input against quiz answers."""

    def __init__(self) -> None:
        """Initialize the grading service.

        Raises:
            ConfigurationError: If the settings fail to load.
        """
        self._settings = get_settings()
        self._default_unit = resolve_unit(self._settings.default_unit)

    @property
    def default_unit(self) -> MatchUnit:
        """Get the unit used when a request names none."""
        return self._default_unit

    def grade(
        self,
        answer: str,
        user_input: str,
        unit: MatchUnit | str | None = None,
    ) -> MatchResult:
        """Grade input against a single correct answer.

        Args:
            answer: The correct Hangul answer.
            user_input: What the user has typed so far.
            unit: Comparison unit; defaults to the configured unit.

        Returns:
            MatchResult with correct and total unit counts.

        Raises:
            UnknownMatchUnitError: If the unit name is not recognised.
        """
        match_unit = self._default_unit if unit is None else resolve_unit(unit)
        result = calculate_correct(answer, user_input, match_unit)

        logger.debug(
            "grading_complete",
            unit=match_unit.value,
            answer_length=len(answer),
            input_length=len(user_input),
            correct=result.correct,
            total=result.total,
        )

        return result

    def best_answer(self, possible_answers: list[str], user_input: str) -> BestAnswer:
        """Grade input against several acceptable answers.

        Args:
            possible_answers: Acceptable answers in priority order.
            user_input: What the user has typed so far.

        Returns:
            BestAnswer for the closest candidate.
        """
        result = select_best_answer(possible_answers, user_input)

        logger.debug(
            "best_answer_selected",
            candidate_count=len(possible_answers),
            correct=result.correct,
            total=result.total,
            is_exact_match=result.is_exact_match,
        )

        return result


# Singleton instance
_grading_service: GradingService | None = None


def get_grading_service() -> GradingService:
    """Get the singleton grading service instance."""
    global _grading_service
    if _grading_service is None:
        _grading_service = GradingService()
    return _grading_service


def reset_grading_service() -> None:
    """Drop the singleton so the next call picks up fresh settings."""
    global _grading_service
    _grading_service = None
