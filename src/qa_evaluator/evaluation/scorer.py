"""Scorers producing quality scores for question/answer pairs."""

import asyncio
import logging
import random
from abc import ABC, abstractmethod
from typing import Optional

from ..models.request import EvaluationRequest
from ..models.evaluation import EvaluationResult, ScoreSet, SCORE_DECIMALS, f1_from
from ..config import EvaluationConfig
from .notifier import Notifier, LoggingNotifier, EVALUATION_FAILED

logger = logging.getLogger(__name__)

FEEDBACK_CATALOG = (
    "The answer addresses the main points of the question.",
    "Some details in the answer could be improved for better accuracy.",
    "The answer is comprehensive and well-structured.",
    "Consider adding more specific information from the retrieved context.",
)

FAILED_FEEDBACK = "Evaluation failed due to an internal error."


class Scorer(ABC):
    """Interface for anything that can score a question/answer pair."""

    @abstractmethod
    async def evaluate(self, request: EvaluationRequest) -> EvaluationResult:
        """Score a single request."""


class MockScorer(Scorer):
    """Placeholder scorer returning random scores after a simulated delay.

    Scores are drawn uniformly from ``config.score_range``. Recall, precision
    and F1 are only produced when the request carries retrieved context.
    Failures are never raised: the caller gets a result with an empty
    ScoreSet and a fixed feedback message instead.
    """

    def __init__(
        self,
        config: Optional[EvaluationConfig] = None,
        notifier: Optional[Notifier] = None,
        rng: Optional[random.Random] = None,
    ):
        """Initialize mock scorer.

        Args:
            config: Evaluation configuration.
            notifier: Receives a notification when scoring fails.
            rng: Random source. Seeded from config.seed when not given.
        """
        self.config = config or EvaluationConfig()
        self.notifier = notifier or LoggingNotifier()
        self.rng = rng or random.Random(self.config.seed)

    async def evaluate(self, request: EvaluationRequest) -> EvaluationResult:
        """Score a question/answer pair.

        Args:
            request: The request to score.

        Returns:
            EvaluationResult echoing the request. Its ScoreSet is empty if
            scoring failed.
        """
        try:
            logger.info(f"Evaluating QA pair: {request.to_dict()}")

            await asyncio.sleep(self.config.processing_delay)

            scores = self._generate_scores(request)
            return EvaluationResult.from_request(
                request, scores=scores, feedback=self._generate_feedback()
            )
        except Exception as e:
            logger.error(f"Evaluation error: {e}")
            self.notifier.notify(EVALUATION_FAILED)
            return EvaluationResult.from_request(
                request, scores=ScoreSet(), feedback=FAILED_FEEDBACK
            )

    def _mock_score(self) -> float:
        low, high = self.config.score_range
        return round(self.rng.uniform(low, high), SCORE_DECIMALS)

    def _generate_scores(self, request: EvaluationRequest) -> ScoreSet:
        relevance = self._mock_score()
        factual_accuracy = self._mock_score()
        coherence = self._mock_score()
        fluency = self._mock_score()

        # RAG-specific metrics
        recall = precision = f1_score = None
        if request.has_context:
            recall = self._mock_score()
            precision = self._mock_score()
            f1_score = f1_from(recall, precision)

        return ScoreSet(
            relevance=relevance,
            factual_accuracy=factual_accuracy,
            coherence=coherence,
            fluency=fluency,
            recall=recall,
            precision=precision,
            f1_score=f1_score,
        )

    def _generate_feedback(self) -> str:
        return self.rng.choice(FEEDBACK_CATALOG)
