"""QA Evaluator - mocked quality scoring for question/answer pairs."""

__version__ = "0.1.0"
