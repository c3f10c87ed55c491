"""Evaluation result data models."""

from enum import Enum
from pathlib import Path
from typing import Optional
import json

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .request import EvaluationRequest

SCORE_DECIMALS = 2


class ScoreDimension(str, Enum):
    """Quality dimensions reported for an evaluation, in display order."""

    RELEVANCE = "relevance"
    FACTUAL_ACCURACY = "factualAccuracy"
    COHERENCE = "coherence"
    FLUENCY = "fluency"
    RECALL = "recall"
    PRECISION = "precision"
    F1_SCORE = "f1Score"

    @property
    def field_name(self) -> str:
        """Attribute name of this dimension on score models."""
        return _FIELD_NAMES[self]

    @property
    def label(self) -> str:
        """Human readable name."""
        return _LABELS[self]

    @property
    def is_rag_metric(self) -> bool:
        """Whether the dimension is only computed from retrieved context."""
        return self in (ScoreDimension.RECALL, ScoreDimension.PRECISION, ScoreDimension.F1_SCORE)


_FIELD_NAMES = {
    ScoreDimension.RELEVANCE: "relevance",
    ScoreDimension.FACTUAL_ACCURACY: "factual_accuracy",
    ScoreDimension.COHERENCE: "coherence",
    ScoreDimension.FLUENCY: "fluency",
    ScoreDimension.RECALL: "recall",
    ScoreDimension.PRECISION: "precision",
    ScoreDimension.F1_SCORE: "f1_score",
}

_LABELS = {
    ScoreDimension.RELEVANCE: "Relevance",
    ScoreDimension.FACTUAL_ACCURACY: "Factual Accuracy",
    ScoreDimension.COHERENCE: "Coherence",
    ScoreDimension.FLUENCY: "Fluency",
    ScoreDimension.RECALL: "Recall",
    ScoreDimension.PRECISION: "Precision",
    ScoreDimension.F1_SCORE: "F1 Score",
}


def f1_from(recall: float, precision: float, decimals: int = SCORE_DECIMALS) -> float:
    """Harmonic mean of recall and precision, rounded."""
    if recall + precision == 0:
        return 0.0
    return round((2 * recall * precision) / (recall + precision), decimals)


class DimensionScores(BaseModel):
    """Optional score per quality dimension."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    relevance: Optional[float] = Field(default=None, ge=0, le=1)
    factual_accuracy: Optional[float] = Field(default=None, ge=0, le=1, alias="factualAccuracy")
    coherence: Optional[float] = Field(default=None, ge=0, le=1)
    fluency: Optional[float] = Field(default=None, ge=0, le=1)
    recall: Optional[float] = Field(default=None, ge=0, le=1)
    precision: Optional[float] = Field(default=None, ge=0, le=1)
    f1_score: Optional[float] = Field(default=None, ge=0, le=1, alias="f1Score")

    def get(self, dimension: ScoreDimension) -> Optional[float]:
        """Get the score for a dimension, or None if absent."""
        return getattr(self, dimension.field_name)

    def present(self) -> dict[ScoreDimension, float]:
        """Present scores keyed by dimension, in display order."""
        scores = {}
        for dimension in ScoreDimension:
            value = self.get(dimension)
            if value is not None:
                scores[dimension] = value
        return scores

    @property
    def is_empty(self) -> bool:
        return not self.present()

    def to_dict(self) -> dict[str, float]:
        """Dump present scores using camelCase keys."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class ScoreSet(DimensionScores):
    """Scores produced by a single evaluation."""

    @model_validator(mode="after")
    def _check_f1(self) -> "ScoreSet":
        if self.f1_score is None:
            return self
        if self.recall is None or self.precision is None:
            raise ValueError("f1Score requires both recall and precision")
        expected = f1_from(self.recall, self.precision)
        if self.f1_score != expected:
            raise ValueError(
                f"f1Score {self.f1_score} does not match recall/precision (expected {expected})"
            )
        return self


class AggregateScoreSet(DimensionScores):
    """Per-dimension means across a collection of evaluation results."""


class EvaluationResult(EvaluationRequest):
    """The evaluated request together with its scores and feedback."""

    scores: ScoreSet = Field(default_factory=ScoreSet, description="Quality scores")
    feedback: Optional[str] = Field(default=None, description="Free-text feedback")

    @model_validator(mode="after")
    def _check_rag_metrics(self) -> "EvaluationResult":
        if not self.has_context and (
            self.scores.recall is not None or self.scores.precision is not None
        ):
            raise ValueError("recall and precision require retrievedContext")
        return self

    @classmethod
    def from_request(
        cls,
        request: EvaluationRequest,
        scores: ScoreSet,
        feedback: Optional[str] = None,
    ) -> "EvaluationResult":
        """Build a result echoing the fields of the originating request."""
        return cls(
            question=request.question,
            answer=request.answer,
            ground_truth=request.ground_truth,
            retrieved_context=request.retrieved_context,
            scores=scores,
            feedback=feedback,
        )

    @property
    def request(self) -> EvaluationRequest:
        """The request this result was produced from."""
        return EvaluationRequest(
            question=self.question,
            answer=self.answer,
            ground_truth=self.ground_truth,
            retrieved_context=self.retrieved_context,
        )

    def to_json(self, path: Path) -> None:
        """Save evaluation result to JSON file."""
        with open(path, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2, ensure_ascii=False)

    @classmethod
    def from_json(cls, path: Path) -> "EvaluationResult":
        """Load evaluation result from JSON file."""
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        return cls.model_validate(data)
