"""Shared pytest fixtures for qa-evaluator tests."""

from unittest.mock import MagicMock

import pytest

from qa_evaluator.config import EvaluationConfig
from qa_evaluator.evaluation.notifier import Notifier
from qa_evaluator.models.request import EvaluationRequest
from qa_evaluator.models.evaluation import EvaluationResult, ScoreSet, f1_from
from qa_evaluator.samples import SAMPLE_QUESTION, SAMPLE_ANSWER, SAMPLE_CONTEXT


@pytest.fixture
def fast_config() -> EvaluationConfig:
    """Evaluation config without simulated latency."""
    return EvaluationConfig(processing_delay=0, seed=42)


@pytest.fixture
def mock_notifier() -> MagicMock:
    """Create a mock notifier."""
    return MagicMock(spec=Notifier)


@pytest.fixture
def sample_request() -> EvaluationRequest:
    """Sample request without retrieved context."""
    return EvaluationRequest(question=SAMPLE_QUESTION, answer=SAMPLE_ANSWER)


@pytest.fixture
def sample_rag_request() -> EvaluationRequest:
    """Sample request with three retrieved context passages."""
    return EvaluationRequest(
        question=SAMPLE_QUESTION,
        answer=SAMPLE_ANSWER,
        retrieved_context=list(SAMPLE_CONTEXT),
    )


@pytest.fixture
def sample_results() -> list[EvaluationResult]:
    """Results with hand-picked scores; only the first carries RAG metrics."""
    return [
        EvaluationResult(
            question="What is RAG?",
            answer="Retrieval augmented generation.",
            retrieved_context=["RAG combines retrieval with generation."],
            scores=ScoreSet(
                relevance=0.7,
                factual_accuracy=0.9,
                coherence=0.8,
                fluency=1.0,
                recall=0.8,
                precision=0.9,
                f1_score=f1_from(0.8, 0.9),
            ),
            feedback="The answer is comprehensive and well-structured.",
        ),
        EvaluationResult(
            question="What is a transformer?",
            answer="A neural network architecture based on attention.",
            scores=ScoreSet(relevance=0.8, factual_accuracy=0.7, coherence=0.9, fluency=0.9),
            feedback="The answer addresses the main points of the question.",
        ),
        EvaluationResult(
            question="What is a token?",
            answer="A unit of text.",
            scores=ScoreSet(relevance=0.95, factual_accuracy=0.75, coherence=0.7, fluency=0.8),
            feedback="Some details in the answer could be improved for better accuracy.",
        ),
    ]
