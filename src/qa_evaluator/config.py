"""Configuration management for QA Evaluator."""

import os
from dataclasses import dataclass, field, asdict
from typing import Optional, Tuple, Any
from pathlib import Path

import yaml
from dotenv import load_dotenv


@dataclass
class EvaluationConfig:
    """Configuration for the mock scorer."""

    processing_delay: float = 1.5  # seconds
    score_range: Tuple[float, float] = field(default_factory=lambda: (0.7, 1.0))
    seed: Optional[int] = None

    def __post_init__(self):
        low, high = self.score_range
        if not 0 <= low <= high <= 1:
            raise ValueError(f"score_range must lie within [0, 1], got {self.score_range}")
        if self.processing_delay < 0:
            raise ValueError("processing_delay must not be negative")


@dataclass
class Config:
    """Main configuration container."""

    evaluation: EvaluationConfig = field(default_factory=EvaluationConfig)
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Config":
        """Create configuration from environment variables."""
        load_dotenv()
        evaluation_data: dict[str, Any] = {}
        delay = os.getenv("QA_EVALUATOR_PROCESSING_DELAY")
        if delay:
            evaluation_data["processing_delay"] = float(delay)
        seed = os.getenv("QA_EVALUATOR_SEED")
        if seed:
            evaluation_data["seed"] = int(seed)
        return cls(
            evaluation=EvaluationConfig(**evaluation_data),
            log_level=os.getenv("QA_EVALUATOR_LOG_LEVEL", "INFO"),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary for serialization."""
        data = asdict(self)
        # Convert tuple to list for YAML compatibility
        data["evaluation"]["score_range"] = list(self.evaluation.score_range)
        if data["evaluation"]["seed"] is None:
            del data["evaluation"]["seed"]
        return data

    def to_yaml(self, path: Path) -> None:
        """Save configuration to YAML file."""
        with open(path, "w") as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)

    @classmethod
    def from_yaml(cls, path: Path) -> "Config":
        """Load configuration from YAML file."""
        with open(path) as f:
            data = yaml.safe_load(f) or {}
        return cls._from_dict(data)

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> "Config":
        """Create Config from dictionary."""
        evaluation_data = dict(data.get("evaluation") or {})

        # Handle score_range tuple
        if "score_range" in evaluation_data:
            evaluation_data["score_range"] = tuple(evaluation_data["score_range"])

        return cls(
            evaluation=EvaluationConfig(**evaluation_data),
            log_level=data.get("log_level", "INFO"),
        )
