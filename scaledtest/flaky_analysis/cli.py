"""CLI entry point for flaky test analysis."""

import asyncio
import json
import logging
import sys
from pathlib import Path

import typer

from scaledtest.flaky_analysis.config_loader import load_analysis_config
from scaledtest.flaky_analysis.error_analysis import (
    analyze_error_patterns,
    categorize_errors,
)
from scaledtest.flaky_analysis.flaky_detector import (
    classify_flaky_tests,
    score_band,
    summarize_flaky_tests,
)
from scaledtest.flaky_analysis.models.analysis_config import AnalysisConfig
from scaledtest.flaky_analysis.models.test_execution import TestExecutionRecord
from scaledtest.flaky_analysis.report_loader import load_execution_records

# Configure logging - force reconfiguration
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    stream=sys.stderr,
    force=True,
)
logger = logging.getLogger(__name__)

app = typer.Typer()


def _load_config(config_path: Path | None) -> AnalysisConfig:
    """Load the analysis config or exit with an error."""
    try:
        return load_analysis_config(config_path)
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Failed to load config: {e}")
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


def _load_records(paths: list[Path]) -> list[TestExecutionRecord]:
    """Load execution records or exit with an error."""
    try:
        records = asyncio.run(load_execution_records(paths))
    except ValueError as e:
        logger.error(f"Failed to load reports: {e}")
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if not records:
        logger.warning("No test executions found")
    return records


@app.command()
def flaky(
    paths: list[Path] = typer.Argument(..., help="CTRF report files or directories"),  # noqa: B008
    config_path: Path | None = typer.Option(  # noqa: B008
        None, "--config", help="Path to a YAML analysis config"
    ),
    limit: int | None = typer.Option(
        None, min=1, help="Maximum number of tests to list"
    ),
    only_flaky: bool = typer.Option(
        False, "--only-flaky", help="List only tests classified as flaky"
    ),
    fail_on_flaky: bool = typer.Option(
        False, "--fail-on-flaky", help="Exit with code 1 if any test is flaky"
    ),
) -> None:
    """Detect flaky tests across CTRF reports."""
    config = _load_config(config_path)
    if limit is not None:
        config.limit = limit
    if only_flaky:
        config.include_non_flaky = False

    logger.info(f"Analyzing {len(paths)} report paths for flaky tests")
    records = _load_records(paths)

    results = classify_flaky_tests(records)
    if not config.include_non_flaky:
        results = [r for r in results if r.is_flaky]

    summary = summarize_flaky_tests(results)
    shown = results[: config.limit] if config.limit else results

    for result in shown:
        marker = "!" if result.is_flaky else "-"
        logger.info(
            f"{marker} {result.suite_name}/{result.test_name}: "
            f"{result.flaky_score}% of {result.total_runs} runs failed"
        )

    output = {
        **summary.model_dump(),
        "tests": [
            {**result.model_dump(), "band": score_band(result)} for result in shown
        ],
    }
    typer.echo(json.dumps(output, indent=2))

    if fail_on_flaky and summary.truly_flaky:
        logger.error(f"Flaky tests detected: {summary.truly_flaky}/{summary.total}")
        raise typer.Exit(code=1)


@app.command()
def errors(
    paths: list[Path] = typer.Argument(..., help="CTRF report files or directories"),  # noqa: B008
    config_path: Path | None = typer.Option(  # noqa: B008
        None, "--config", help="Path to a YAML analysis config"
    ),
    limit: int | None = typer.Option(
        None, min=1, help="Maximum number of error patterns to list"
    ),
) -> None:
    """Group failure messages across CTRF reports into error patterns."""
    config = _load_config(config_path)
    if limit is not None:
        config.error_limit = limit

    logger.info(f"Analyzing {len(paths)} report paths for error patterns")
    records = _load_records(paths)

    patterns = analyze_error_patterns(records)
    shown = patterns[: config.error_limit] if config.error_limit else patterns

    output = {
        "total": len(patterns),
        "categories": categorize_errors(patterns),
        "patterns": [pattern.model_dump() for pattern in shown],
    }
    typer.echo(json.dumps(output, indent=2))


if __name__ == "__main__":  # pragma: no cover
    app()
