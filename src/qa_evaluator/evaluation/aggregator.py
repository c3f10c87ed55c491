"""Result aggregator for evaluation scores."""

from statistics import mean
from typing import Sequence

from ..models.evaluation import (
    AggregateScoreSet,
    EvaluationResult,
    ScoreDimension,
    SCORE_DECIMALS,
)


class ScoreAggregator:
    """Average each score dimension across evaluation results."""

    def aggregate(self, results: Sequence[EvaluationResult]) -> AggregateScoreSet:
        """Aggregate scores into per-dimension means.

        Only results that supplied a dimension contribute to its mean. A
        dimension no result supplied is left out of the output.

        Args:
            results: Evaluation results to summarize.

        Returns:
            AggregateScoreSet with means rounded to 2 decimals.
        """
        if not results:
            return AggregateScoreSet()

        means = {}
        for dimension in ScoreDimension:
            values = [
                value
                for value in (r.scores.get(dimension) for r in results)
                if value is not None
            ]
            if values:
                means[dimension.field_name] = round(mean(values), SCORE_DECIMALS)

        return AggregateScoreSet(**means)
