"""JSONL reading and writing for requests and results."""

import json
import logging
from pathlib import Path
from typing import Any, Iterator, TypeVar

from pydantic import BaseModel

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def stream_jsonl(path: Path) -> Iterator[dict[str, Any]]:
    """Stream a JSONL file line by line.

    Args:
        path: Path to the JSONL file.

    Yields:
        Parsed JSON objects one at a time. Blank lines are ignored.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        json.JSONDecodeError: If a line is invalid.
    """
    with open(path, "r", encoding="utf-8") as f:
        for line_num, line in enumerate(f, 1):
            line = line.strip()
            if not line:
                continue

            try:
                yield json.loads(line)
            except json.JSONDecodeError:
                logger.error(f"Malformed line {line_num} in {path}")
                raise


def write_jsonl(path: Path, data: list[dict[str, Any]]) -> None:
    """Write a list of objects to a JSONL file.

    Args:
        path: Path to the output file.
        data: List of objects to write.
    """
    with open(path, "w", encoding="utf-8") as f:
        for item in data:
            f.write(json.dumps(item, ensure_ascii=False) + "\n")


def load_models(path: Path, model: type[ModelT]) -> list[ModelT]:
    """Read a JSONL file and validate every line as ``model``.

    Raises:
        pydantic.ValidationError: If a line does not match the model.
    """
    return [model.model_validate(item) for item in stream_jsonl(path)]
