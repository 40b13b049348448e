"""Pydantic schemas for API request/response models."""

from pydantic import BaseModel, Field, field_validator

from hangul_drill.core.config import get_settings
from hangul_drill.hangul.char_class import HangulCharClass
from hangul_drill.matching.matcher import MatchUnit


def _check_length(value: str) -> str:
    limit = get_settings().max_text_length
    if len(value) > limit:
        raise ValueError(f"Text longer than {limit} characters")
    return value


class MatchRequest(BaseModel):
    """Request model for grading input against one answer."""

    answer: str = Field(..., description="Correct Hangul answer")
    user_input: str = Field(default="", description="What the user has typed so far")
    unit: MatchUnit | None = Field(
        default=None, description="Comparison unit; server default when omitted"
    )

    @field_validator("answer", "user_input")
    @classmethod
    def check_length(cls, value: str) -> str:
        """Reject texts above the configured length limit."""
        return _check_length(value)


class MatchResultModel(BaseModel):
    """Single grading result."""

    answer: str = Field(..., description="Correct answer graded against")
    user_input: str = Field(..., description="Graded input")
    unit: MatchUnit = Field(..., description="Comparison unit used")
    correct: int = Field(..., ge=0, description="Leading units typed correctly")
    total: int = Field(..., ge=0, description="Total units in the answer")
    is_complete: bool = Field(..., description="Whether the whole answer has been typed")
    feedback: str = Field(..., description="Progress label for display")


class MatchResponse(BaseModel):
    """Response model for single answer grading."""

    success: bool = Field(default=True, description="Whether the request was successful")
    result: MatchResultModel = Field(..., description="Grading result")


class BestAnswerRequest(BaseModel):
    """Request model for grading input against alternate answers."""

    possible_answers: list[str] = Field(
        ..., min_length=1, description="Acceptable answers in priority order"
    )
    user_input: str = Field(default="", description="What the user has typed so far")

    @field_validator("possible_answers")
    @classmethod
    def check_candidates(cls, value: list[str]) -> list[str]:
        """Reject oversized candidate lists and oversized candidates."""
        limit = get_settings().max_candidates
        if len(value) > limit:
            raise ValueError(f"More than {limit} candidate answers")
        for answer in value:
            _check_length(answer)
        return value

    @field_validator("user_input")
    @classmethod
    def check_length(cls, value: str) -> str:
        """Reject input above the configured length limit."""
        return _check_length(value)


class BestAnswerResultModel(BaseModel):
    """Chosen candidate answer."""

    answer: str = Field(..., description="Candidate closest to the input")
    correct: int = Field(..., ge=0, description="Leading keystrokes typed correctly")
    total: int = Field(..., ge=0, description="Total keystrokes in the candidate")
    is_exact_match: bool = Field(..., description="Whether the input equals the candidate")


class BestAnswerResponse(BaseModel):
    """Response model for best answer selection."""

    success: bool = Field(default=True, description="Whether the request was successful")
    result: BestAnswerResultModel = Field(..., description="Selected answer")


class DecomposeRequest(BaseModel):
    """Request model for inspecting how a text is decomposed."""

    text: str = Field(..., min_length=1, description="Text to decompose")

    @field_validator("text")
    @classmethod
    def check_length(cls, value: str) -> str:
        """Reject texts above the configured length limit."""
        return _check_length(value)


class SegmentModel(BaseModel):
    """Run of characters sharing a Hangul class."""

    char_class: HangulCharClass = Field(..., description="Hangul Unicode block")
    text: str = Field(..., description="Characters in the run")


class DecomposeResponse(BaseModel):
    """Response model for text decomposition."""

    text: str = Field(..., description="Original text")
    jamos: str = Field(..., description="Text with syllables split into conjoining jamo")
    compat: list[str] = Field(..., description="Compatibility jamo display units")
    keystrokes: list[str] = Field(..., description="Keystrokes needed to type the text")
    segments: list[SegmentModel] = Field(..., description="Runs of same-class characters")


class HealthResponse(BaseModel):
    """Response model for health check."""

    status: str = Field(..., description="Service status")
    version: str = Field(..., description="Service version")
    default_unit: MatchUnit = Field(..., description="Unit used when a request names none")


class ErrorResponse(BaseModel):
    """Response model for errors."""

    success: bool = Field(default=False, description="Always false for errors")
    error: str = Field(..., description="Error message")
    error_code: str = Field(..., description="Error code")
