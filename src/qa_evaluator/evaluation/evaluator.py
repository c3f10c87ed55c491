"""Evaluation orchestrator for single and batch scoring."""

import asyncio
import logging
from pathlib import Path
from typing import Optional, Sequence

from ..models.request import EvaluationRequest
from ..models.evaluation import EvaluationResult, AggregateScoreSet
from ..config import EvaluationConfig
from ..utils.jsonl import write_jsonl
from .notifier import Notifier, LoggingNotifier, BATCH_EVALUATION_FAILED
from .scorer import Scorer, MockScorer
from .aggregator import ScoreAggregator

logger = logging.getLogger(__name__)


class Evaluator:
    """Orchestrate scoring and aggregation."""

    def __init__(
        self,
        scorer: Optional[Scorer] = None,
        notifier: Optional[Notifier] = None,
        config: Optional[EvaluationConfig] = None,
    ):
        """Initialize evaluator.

        Args:
            scorer: Scorer used for each request. Defaults to a MockScorer.
            notifier: Receives failure notifications.
            config: Evaluation configuration for the default scorer.
        """
        self.config = config or EvaluationConfig()
        self.notifier = notifier or LoggingNotifier()
        self.scorer = scorer or MockScorer(config=self.config, notifier=self.notifier)
        self._aggregator = ScoreAggregator()

    async def evaluate(self, request: EvaluationRequest) -> EvaluationResult:
        """Score a single request."""
        return await self.scorer.evaluate(request)

    async def evaluate_batch(
        self,
        requests: Sequence[EvaluationRequest],
    ) -> list[EvaluationResult]:
        """Score all requests concurrently.

        The batch is all-or-nothing: if any scoring call raises, no partial
        results are returned.

        Args:
            requests: Requests to score.

        Returns:
            Results in input order, or an empty list if any call failed.
        """
        if not requests:
            return []

        logger.info(f"Batch evaluating {len(requests)} QA pairs")

        try:
            results = await asyncio.gather(*(self.scorer.evaluate(r) for r in requests))
        except Exception as e:
            logger.error(f"Batch evaluation error: {e}")
            self.notifier.notify(BATCH_EVALUATION_FAILED)
            return []

        logger.info(f"Batch evaluation complete: {len(results)} results")
        return list(results)

    def aggregate(self, results: Sequence[EvaluationResult]) -> AggregateScoreSet:
        """Average scores across results."""
        return self._aggregator.aggregate(results)

    def save_result(self, result: EvaluationResult, output_path: Path) -> None:
        """Save evaluation result to JSON file.

        Args:
            result: EvaluationResult to save.
            output_path: Path for output JSON file.
        """
        result.to_json(output_path)
        logger.info(f"Saved evaluation result to {output_path}")

    def save_batch_results(
        self,
        results: Sequence[EvaluationResult],
        output_path: Path,
    ) -> None:
        """Save batch results to a JSONL file, one result per line.

        Args:
            results: Evaluation results to save.
            output_path: Path for output JSONL file.
        """
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        write_jsonl(output_path, [r.to_dict() for r in results])
        logger.info(f"Saved {len(results)} results to {output_path}")
