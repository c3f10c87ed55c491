"""Evaluation request data model."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class EvaluationRequest(BaseModel):
    """A question/answer pair submitted for scoring."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    question: str = Field(..., description="Question that was asked")
    answer: str = Field(..., description="Answer to evaluate")
    ground_truth: Optional[str] = Field(
        default=None, alias="groundTruth", description="Reference answer, if known"
    )
    retrieved_context: Optional[list[str]] = Field(
        default=None,
        alias="retrievedContext",
        description="Passages retrieved for the answer, in retrieval order",
    )

    @property
    def has_context(self) -> bool:
        """Whether retrieved context was supplied (an empty list counts)."""
        return self.retrieved_context is not None

    def to_dict(self) -> dict:
        """Dump to a JSON-compatible dict using camelCase keys."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
