"""Service layer for hangul-drill."""

from hangul_drill.services.grading import (
    GradingService,
    get_grading_service,
    reset_grading_service,
)

__all__ = ["GradingService", "get_grading_service", "reset_grading_service"]
