"""Data models for QA Evaluator."""

from .request import EvaluationRequest
from .evaluation import (
    ScoreDimension,
    ScoreSet,
    AggregateScoreSet,
    EvaluationResult,
    f1_from,
)

__all__ = [
    "EvaluationRequest",
    "ScoreDimension",
    "ScoreSet",
    "AggregateScoreSet",
    "EvaluationResult",
    "f1_from",
]
