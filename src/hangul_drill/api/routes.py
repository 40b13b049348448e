"""API routes for hangul-drill."""

from fastapi import APIRouter
from prometheus_client import Counter, Histogram

from hangul_drill import __version__
from hangul_drill.api.schemas import (
    BestAnswerRequest,
    BestAnswerResponse,
    BestAnswerResultModel,
    DecomposeRequest,
    DecomposeResponse,
    ErrorResponse,
    HealthResponse,
    MatchRequest,
    MatchResponse,
    MatchResultModel,
    SegmentModel,
)
from hangul_drill.hangul.char_class import split_by_class
from hangul_drill.hangul.syllables import decompose_all_syllables
from hangul_drill.matching.matcher import decompose_to_jamos, decompose_to_keystrokes
from hangul_drill.services.grading import get_grading_service

# Prometheus metrics
GRADE_REQUESTS = Counter(
    "hangul_grade_requests_total",
    "Total number of grading requests",
    ["endpoint", "unit"],
)
GRADE_LATENCY = Histogram(
    "hangul_grade_latency_seconds",
    "Grading request latency",
    ["endpoint"],
    buckets=[0.0005, 0.001, 0.0025, 0.005, 0.01, 0.025, 0.05, 0.1],
)
COMPLETED_ANSWERS = Counter(
    "hangul_completed_answers_total",
    "Total number of gradings where the whole answer was typed",
)

router = APIRouter()


@router.get("/health", response_model=HealthResponse, tags=["health"])
async def health_check() -> HealthResponse:
    """Check service health status."""
    service = get_grading_service()
    return HealthResponse(
        status="healthy",
        version=__version__,
        default_unit=service.default_unit,
    )


@router.post(
    "/match",
    response_model=MatchResponse,
    responses={400: {"model": ErrorResponse}},
    tags=["grading"],
)
async def match_answer(request: MatchRequest) -> MatchResponse:
    """Grade typed input against a single correct answer.

    Args:
        request: The match request containing answer and input.

    Returns:
        MatchResponse with correct and total unit counts.
    """
    service = get_grading_service()

    with GRADE_LATENCY.labels(endpoint="match").time():
        result = service.grade(request.answer, request.user_input, request.unit)

    GRADE_REQUESTS.labels(endpoint="match", unit=result.unit.value).inc()
    if result.is_complete:
        COMPLETED_ANSWERS.inc()

    return MatchResponse(
        success=True,
        result=MatchResultModel(
            answer=request.answer,
            user_input=request.user_input,
            unit=result.unit,
            correct=result.correct,
            total=result.total,
            is_complete=result.is_complete,
            feedback=result.feedback(),
        ),
    )


@router.post(
    "/best-answer",
    response_model=BestAnswerResponse,
    responses={400: {"model": ErrorResponse}},
    tags=["grading"],
)
async def best_answer(request: BestAnswerRequest) -> BestAnswerResponse:
    """Pick the acceptable answer closest to the typed input.

    Args:
        request: The request containing candidate answers and input.

    Returns:
        BestAnswerResponse with the chosen candidate.
    """
    service = get_grading_service()

    with GRADE_LATENCY.labels(endpoint="best_answer").time():
        result = service.best_answer(request.possible_answers, request.user_input)

    GRADE_REQUESTS.labels(endpoint="best_answer", unit="keystroke").inc()
    if result.is_exact_match:
        COMPLETED_ANSWERS.inc()

    return BestAnswerResponse(
        success=True,
        result=BestAnswerResultModel(
            answer=result.answer,
            correct=result.correct,
            total=result.total,
            is_exact_match=result.is_exact_match,
        ),
    )


@router.post("/decompose", response_model=DecomposeResponse, tags=["debug"])
async def decompose_text(request: DecomposeRequest) -> DecomposeResponse:
    """Show how a text is broken down for grading."""
    return DecomposeResponse(
        text=request.text,
        jamos=decompose_all_syllables(request.text),
        compat=decompose_to_jamos(request.text),
        keystrokes=decompose_to_keystrokes(request.text),
        segments=[
            SegmentModel(char_class=char_class, text=text)
            for char_class, text in split_by_class(request.text)
        ],
    )
