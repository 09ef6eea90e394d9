"""CLI interface for MutationGrader"""

import click
import json
from pathlib import Path
from typing import Optional
import logging
import sys

from mutationgrader import __version__
from mutationgrader.config import DEFAULT_CONFIG_FILE, DEFAULT_REPORT_FILE, get_config
from mutationgrader.classifier import unit_mutants
from mutationgrader.exceptions import ConfigError, GradingError
from mutationgrader.grading_config import load_grading_config, unit_names, validate_config
from mutationgrader.mutation_report import load_mutation_report
from mutationgrader.scoring import GraderOutput, grade_results

logger = logging.getLogger(__name__)

FAILURE_FOOTER = (
    "\n\n^^^^ERROR OCCURRED. This submission could not be graded until this/these errors are resolved.\n"
)


def _write_output(res: GraderOutput, output: Optional[str]):
    payload = json.dumps(res.to_dict(), indent=2)
    if output:
        output_path = Path(output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, 'w') as f:
            f.write(payload)
        logger.info(f"Score report written to {output_path}")
    click.echo(payload)


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log per-unit mutant counts")
def main(verbose: bool):
    """MutationGrader - grade student test suites from mutation testing results

    Mutants attributed to each graded unit that the submitted tests killed are
    counted and mapped to points through the unit's break point table.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


@main.command()
@click.argument("config", type=click.Path(), default=str(DEFAULT_CONFIG_FILE))
def validate(config: str):
    """Validate a grading configuration (grading.yml)"""
    try:
        grading_config = load_grading_config(config)
        validate_config(grading_config)
    except ConfigError as e:
        click.echo(f"[ERROR] {e}", err=True)
        sys.exit(1)

    click.echo(f"[OK] {config}: {len(grading_config.graded_units)} graded unit(s)")
    for unit in grading_config.graded_units:
        click.echo(f"  {unit.name}: max {unit.max_score} points, "
                   f"{len(unit.break_points)} break point(s), {len(unit.locations)} location(s)")


@main.command()
@click.option("--config", "config_path", type=click.Path(), default=str(DEFAULT_CONFIG_FILE),
              help="Path to grading.yml")
@click.option("--report", "report_path", type=click.Path(), default=str(DEFAULT_REPORT_FILE),
              help="Path to the mutation report JSON")
@click.option("--output", type=click.Path(), help="Also write the score report to this file")
def grade(config_path: str, report_path: str, output: Optional[str]):
    """Grade a mutation report and print the score report JSON

    If grading cannot proceed, a visible score-0 report carrying the error is
    produced instead and the command exits with status 1.
    """
    try:
        grading_config = load_grading_config(config_path)
        report = load_mutation_report(report_path)
        res = grade_results(grading_config, report)
    except GradingError as e:
        logger.error(str(e))
        _write_output(GraderOutput.failure(str(e) + FAILURE_FOOTER), output)
        sys.exit(1)

    res.output = "Tests successfully ran"
    _write_output(res, output)


@main.command()
@click.option("--config", "config_path", type=click.Path(), default=str(DEFAULT_CONFIG_FILE),
              help="Path to grading.yml")
@click.option("--report", "report_path", type=click.Path(), default=str(DEFAULT_REPORT_FILE),
              help="Path to the mutation report JSON")
@click.option("--unit", "unit_name", required=True, help="Graded unit name")
def locate(config_path: str, report_path: str, unit_name: str):
    """List the mutants attributed to a graded unit"""
    try:
        grading_config = load_grading_config(config_path)
        validate_config(grading_config)
        report = load_mutation_report(report_path)
        unit = grading_config.get_unit(unit_name)
    except GradingError as e:
        click.echo(f"[ERROR] {e}", err=True)
        sys.exit(1)
    except KeyError:
        click.echo(f"[ERROR] Unknown unit {unit_name}. Known units: {', '.join(unit_names(grading_config))}",
                   err=True)
        sys.exit(1)

    count = 0
    for file_path, mutant in unit_mutants(report, unit.location_ranges):
        count += 1
        mutator = f" {mutant.mutator_name}" if mutant.mutator_name else ""
        click.echo(f"  {file_path}:{mutant.line}  {mutant.status}{mutator}")
    click.echo(f"{count} mutant(s) attributed to {unit.name}")


@main.command("show-config")
def show_config():
    """Print default paths and recognised mutant statuses"""
    click.echo(json.dumps(get_config(), indent=2))


if __name__ == "__main__":
    main()
