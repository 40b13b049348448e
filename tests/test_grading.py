"""Tests for grading service."""

import pytest

from hangul_drill.core.config import Settings
from hangul_drill.core.exceptions import ConfigurationError, UnknownMatchUnitError
from hangul_drill.matching.matcher import MatchUnit
from hangul_drill.services.grading import (
    GradingService,
    get_grading_service,
    reset_grading_service,
)


class TestGradingService:
    """Tests for GradingService."""

    @pytest.fixture
    def service(self) -> GradingService:
        """Create a fresh grading service instance."""
        return GradingService()

    def test_default_unit(self, service: GradingService) -> None:
        """Test the default unit comes from settings."""
        assert service.default_unit == MatchUnit.KEYSTROKE

    def test_grade_with_default_unit(self, service: GradingService) -> None:
        """Test grading without naming a unit."""
        result = service.grade("김민지", "김믽")
        assert (result.correct, result.total) == (7, 8)
        assert result.unit == MatchUnit.KEYSTROKE

    def test_grade_with_explicit_unit(self, service: GradingService) -> None:
        """Test grading with a unit given by enum and by name."""
        assert service.grade("김민지", "김믽", MatchUnit.JAMO).correct == 5
        assert service.grade("김민지", "김믽", "jamo").correct == 5

    def test_grade_unknown_unit_raises(self, service: GradingService) -> None:
        """Test an unknown unit name."""
        with pytest.raises(UnknownMatchUnitError):
            service.grade("안녕", "안", "syllable")

    def test_best_answer(self, service: GradingService) -> None:
        """Test best answer selection."""
        result = service.best_answer(["안녕하세요", "안녕"], "안녕")
        assert result.answer == "안녕"
        assert result.is_exact_match is True


class TestGradingServiceSettings:
    """Tests for settings-driven behaviour."""

    def test_default_unit_from_environment(self, env_settings: Settings) -> None:
        """Test the configured default unit is used."""
        assert env_settings.default_unit == "jamo"
        service = get_grading_service()
        assert service.default_unit == MatchUnit.JAMO
        assert service.grade("과", "고").unit == MatchUnit.JAMO

    def test_invalid_default_unit_raises(self, fresh_settings: pytest.MonkeyPatch) -> None:
        """Test a bad configured unit fails at construction."""
        fresh_settings.setenv("HANGUL_DEFAULT_UNIT", "syllable")
        with pytest.raises(ConfigurationError, match="default_unit"):
            GradingService()

    def test_singleton(self) -> None:
        """Test the service is shared until reset."""
        reset_grading_service()
        first = get_grading_service()
        assert get_grading_service() is first
        reset_grading_service()
        assert get_grading_service() is not first
