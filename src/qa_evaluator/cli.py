"""CLI entry points for QA Evaluator."""

import asyncio
import logging
import sys
from pathlib import Path
from typing import Optional

import click
from dotenv import load_dotenv

from .config import Config
from .display import format_result, format_scores
from .models.request import EvaluationRequest
from .models.evaluation import EvaluationResult
from .evaluation.evaluator import Evaluator
from .evaluation.notifier import Notification, Notifier, EVALUATION_COMPLETE
from .samples import SAMPLE_QUESTION, SAMPLE_ANSWER, SAMPLE_CONTEXT
from .utils.jsonl import load_models


def setup_logging(verbose: bool, log_level: str = "INFO") -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else getattr(logging, log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


class EchoNotifier(Notifier):
    """Print notifications to stderr."""

    def notify(self, notification: Notification) -> None:
        fg = "red" if notification.variant == "destructive" else "green"
        click.echo(click.style(notification.title, fg=fg, bold=True), err=True)
        if notification.description:
            click.echo(notification.description, err=True)


def _build_evaluator(ctx: click.Context) -> Evaluator:
    cfg: Config = ctx.obj["config"]
    return Evaluator(notifier=EchoNotifier(), config=cfg.evaluation)


def _fail(ctx: click.Context, action: str, error: Exception) -> None:
    click.echo(f"Error during {action}: {error}", err=True)
    if ctx.obj.get("verbose"):
        import traceback

        traceback.print_exc()
    sys.exit(1)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to YAML config file (defaults to environment settings)",
)
@click.pass_context
def main(ctx: click.Context, verbose: bool, config: Optional[Path]) -> None:
    """QA Evaluator - score question/answer pairs for answer quality."""
    load_dotenv()
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    try:
        cfg = Config.from_yaml(config) if config else Config.from_env()
    except (ValueError, TypeError) as e:
        _fail(ctx, "configuration", e)
    setup_logging(verbose, cfg.log_level)
    ctx.obj["config"] = cfg


@main.command()
@click.option("--question", "-q", type=str, default=None, help="Question that was asked")
@click.option("--answer", "-a", type=str, default=None, help="Answer to evaluate")
@click.option(
    "--ground-truth", "-g", type=str, default=None, help="Reference answer (optional)"
)
@click.option(
    "--context",
    "-x",
    "contexts",
    type=str,
    multiple=True,
    help="Retrieved context passage; repeat for several passages",
)
@click.option(
    "--sample",
    is_flag=True,
    help="Use the built-in sample question, answer and context",
)
@click.option(
    "--no-context",
    is_flag=True,
    help="Evaluate without retrieved context, even with --sample",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(path_type=Path),
    default=None,
    help="Save the result as JSON to this path",
)
@click.pass_context
def evaluate(
    ctx: click.Context,
    question: Optional[str],
    answer: Optional[str],
    ground_truth: Optional[str],
    contexts: tuple[str, ...],
    sample: bool,
    no_context: bool,
    output: Optional[Path],
) -> None:
    """Evaluate a single question/answer pair."""
    if sample:
        question = SAMPLE_QUESTION if question is None else question
        answer = SAMPLE_ANSWER if answer is None else answer
        contexts = contexts or tuple(SAMPLE_CONTEXT)
    if question is None or answer is None:
        raise click.UsageError("--question and --answer are required unless --sample is given")

    request = EvaluationRequest(
        question=question,
        answer=answer,
        ground_truth=ground_truth,
        retrieved_context=None if no_context or not contexts else list(contexts),
    )

    try:
        evaluator = _build_evaluator(ctx)
        result = asyncio.run(evaluator.evaluate(request))

        if not result.scores.is_empty:
            evaluator.notifier.notify(EVALUATION_COMPLETE)

        click.echo("\nEvaluation Results:")
        click.echo(format_result(result))

        if output:
            evaluator.save_result(result, output)
            click.echo(f"\nSaved result to: {output}")

    except Exception as e:
        _fail(ctx, "evaluation", e)


@main.command("evaluate-batch")
@click.argument("requests_file", type=click.Path(exists=True, path_type=Path))
@click.option(
    "--output",
    "-o",
    type=click.Path(path_type=Path),
    default=None,
    help="Save results as JSONL to this path",
)
@click.pass_context
def evaluate_batch(ctx: click.Context, requests_file: Path, output: Optional[Path]) -> None:
    """Evaluate every request in a JSONL file and print aggregate scores."""
    click.echo(f"Loading requests from: {requests_file}")

    try:
        requests = load_models(requests_file, EvaluationRequest)
        if not requests:
            click.echo(f"No requests found in {requests_file}", err=True)
            sys.exit(1)
        click.echo(f"Loaded {len(requests)} requests")

        evaluator = _build_evaluator(ctx)
        results = asyncio.run(evaluator.evaluate_batch(requests))
        if not results:
            click.echo("Batch evaluation produced no results", err=True)
            sys.exit(1)

        for i, result in enumerate(results, 1):
            click.echo(f"\n--- Result {i}/{len(results)} ---")
            click.echo(format_result(result))

        _echo_aggregate(evaluator, results)

        if output:
            evaluator.save_batch_results(results, output)
            click.echo(f"\nSaved {len(results)} results to: {output}")

    except Exception as e:
        _fail(ctx, "batch evaluation", e)


@main.command()
@click.argument("results_file", type=click.Path(exists=True, path_type=Path))
@click.pass_context
def aggregate(ctx: click.Context, results_file: Path) -> None:
    """Print mean scores across saved results (JSONL)."""
    try:
        results = load_models(results_file, EvaluationResult)
        _echo_aggregate(Evaluator(notifier=EchoNotifier()), results)
    except Exception as e:
        _fail(ctx, "aggregation", e)


def _echo_aggregate(evaluator: Evaluator, results: list[EvaluationResult]) -> None:
    aggregates = evaluator.aggregate(results)
    click.echo("\nAggregate Scores:")
    click.echo(f"  Results: {len(results)}")
    if aggregates.is_empty:
        click.echo("  (none)")
    for line in format_scores(aggregates):
        click.echo(line)


if __name__ == "__main__":
    main()
