"""
Flex Character Accuracy CLI.

Command-line interface comparing a ground truth file with an OCR result.

Usage:
    python -m scripts.cli flex <ground_truth> <result>
    python -m scripts.cli baseline <ground_truth> <result>
"""

import json
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from flexacc import CharacterAccuracy, CostFunction, FlexCharacterAccuracy, __version__
from flexacc.lines import strip_line_breaks
from flexacc.logging_config import get_log_level, setup_logging
from flexacc.settings import get_settings


console = Console()

COST_FUNCTION_KEYS = [member.key for member in CostFunction]


def _read_text(path: str) -> str:
    try:
        return Path(path).read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise click.FileError(path, hint=f"not valid UTF-8 text ({exc.reason} at byte {exc.start})") from exc


def _resolve_cost_function(key):
    if key is None:
        return get_settings().cost_function
    return CostFunction.from_key(key)


@click.group()
@click.version_option(version=__version__)
def cli():
    """Flex Character Accuracy CLI - reading-order tolerant OCR evaluation."""
    setup_logging(level=get_log_level("FLEXACC_LOG_LEVEL"))


@cli.command()
@click.argument("ground_truth", type=click.Path(exists=True, dir_okay=False))
@click.argument("result", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--cost-function", "-c",
    type=click.Choice(COST_FUNCTION_KEYS, case_sensitive=False),
    default=None,
    help="Edit cost function (default: FLEXACC_COST_FUNCTION or INS1_DEL1_SUBST1)",
)
@click.option("--legacy-bounds", is_flag=True, help="Use historic one-short alignment windows")
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON")
def flex(ground_truth: str, result: str, cost_function, legacy_bounds, as_json: bool):
    """Compute flex character accuracy of RESULT against GROUND_TRUTH."""
    reference = _read_text(ground_truth)
    candidate = _read_text(result)
    cost = _resolve_cost_function(cost_function)
    legacy_bounds = legacy_bounds or get_settings().legacy_bounds

    evaluator = FlexCharacterAccuracy(cost, legacy_bounds=legacy_bounds)
    if as_json:
        evaluation = evaluator.evaluate_detailed(reference, candidate)
        metrics = evaluation.sweep_metrics
        payload = {
            "costFunction": cost.key,
            **evaluation.result.model_dump(by_alias=True),
            "characterAccuracy": evaluation.baseline.accuracy,
            "sweep": metrics.to_dict() if metrics else None,
        }
        click.echo(json.dumps(payload, ensure_ascii=False, indent=2))
        return

    with console.status("Sweeping alignment coefficients...", spinner="dots"):
        evaluation = evaluator.evaluate_detailed(reference, candidate)
    flex_result = evaluation.result
    baseline = evaluation.baseline

    table = Table(title=flex_result.caption)
    table.add_column("Measure", style="dim")
    table.add_column("Value", style="cyan", justify="right")
    table.add_row("Cost function", cost.key)
    table.add_row("Flex character accuracy", f"{flex_result.accuracy:.4f}")
    table.add_row("Character accuracy", f"{baseline.accuracy:.4f}")
    table.add_row("Chars in ground truth", str(flex_result.reference_char_count))
    table.add_row("Chars in result", str(flex_result.candidate_char_count))
    console.print(table)


@cli.command()
@click.argument("ground_truth", type=click.Path(exists=True, dir_okay=False))
@click.argument("result", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--cost-function", "-c",
    type=click.Choice(COST_FUNCTION_KEYS, case_sensitive=False),
    default=None,
    help="Edit cost function (default: FLEXACC_COST_FUNCTION or INS1_DEL1_SUBST1)",
)
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON")
def baseline(ground_truth: str, result: str, cost_function, as_json: bool):
    """Compute plain character accuracy with line breaks removed."""
    cost = _resolve_cost_function(cost_function)
    res = CharacterAccuracy(cost).evaluate(
        strip_line_breaks(_read_text(ground_truth)),
        strip_line_breaks(_read_text(result)),
    )

    if as_json:
        click.echo(json.dumps({"costFunction": cost.key, **res.model_dump(by_alias=True)}, indent=2))
        return

    console.print(f"[bold]{res.caption}[/bold]: [cyan]{res.accuracy:.4f}[/cyan]")
    console.print(f"  Chars in ground truth: {res.reference_char_count}")
    console.print(f"  Chars in result: {res.candidate_char_count}")


if __name__ == "__main__":
    cli()
