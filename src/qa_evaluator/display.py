"""Text rendering of evaluation results for the terminal."""

from enum import Enum

import click

from .models.evaluation import DimensionScores, EvaluationResult

GOOD_THRESHOLD = 0.8
POOR_THRESHOLD = 0.6


class ScoreRating(str, Enum):
    """Colour band a score falls into."""

    GOOD = "good"
    NEUTRAL = "neutral"
    POOR = "poor"

    @classmethod
    def from_score(cls, score: float) -> "ScoreRating":
        if score >= GOOD_THRESHOLD:
            return cls.GOOD
        if score < POOR_THRESHOLD:
            return cls.POOR
        return cls.NEUTRAL

    @property
    def color(self) -> str:
        return {"good": "green", "neutral": "yellow", "poor": "red"}[self.value]


def format_score(score: float, color: bool = True) -> str:
    """Format a score, coloured by its rating."""
    text = f"{score:.2f}"
    if not color:
        return text
    return click.style(text, fg=ScoreRating.from_score(score).color, bold=True)


def format_scores(scores: DimensionScores, color: bool = True) -> list[str]:
    """One line per present dimension, in display order."""
    return [
        f"  - {dimension.label}: {format_score(value, color=color)}"
        for dimension, value in scores.present().items()
    ]


def format_result(result: EvaluationResult, color: bool = True) -> str:
    """Render a full result: echoed question/answer, scores and feedback."""
    lines = [
        "Question:",
        f"  {result.question}",
        "Answer:",
        f"  {result.answer}",
        "Quality Scores:",
    ]
    if result.scores.is_empty:
        lines.append("  (none)")
    else:
        lines.extend(format_scores(result.scores, color=color))

    if result.feedback:
        lines.append("Feedback:")
        lines.append(f"  {result.feedback}")
    return "\n".join(lines)
