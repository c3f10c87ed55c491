"""Utility functions for QA Evaluator."""

from .jsonl import stream_jsonl, write_jsonl, load_models

__all__ = [
    "stream_jsonl",
    "write_jsonl",
    "load_models",
]
