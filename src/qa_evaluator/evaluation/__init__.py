"""Evaluation module for question/answer quality scoring."""

from .notifier import Notification, Notifier, LoggingNotifier
from .scorer import Scorer, MockScorer
from .aggregator import ScoreAggregator
from .evaluator import Evaluator

__all__ = [
    "Notification",
    "Notifier",
    "LoggingNotifier",
    "Scorer",
    "MockScorer",
    "ScoreAggregator",
    "Evaluator",
]
