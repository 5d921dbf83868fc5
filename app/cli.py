"""Command line tools for question CSV files.

Example:
    exam-authoring validate questions.csv
    exam-authoring template --output exam_template.csv
"""

import sys
from pathlib import Path

import click

from app.core.logging import setup_logging
from app.services.importer import SAMPLE_CSV, CSVParseError, run_import


@click.group()
@click.option("--log-level", default="WARNING", help="Log level for the JSON logger")
def cli(log_level: str) -> None:
    """Exam authoring tools."""
    setup_logging(log_level)


@cli.command()
@click.argument("csv_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--encoding", default=None, help="File encoding (defaults to IMPORT_ENCODING)")
def validate(csv_file: Path, encoding: str | None) -> None:
    """Validate CSV_FILE and print the question preview or every error."""
    try:
        outcome = run_import(csv_file.read_bytes(), encoding=encoding)
    except CSVParseError as e:
        click.echo(f"Could not read {csv_file.name}: {e}", err=True)
        sys.exit(2)

    if not outcome.valid:
        click.echo("CSV Validation Errors:", err=True)
        for message in outcome.messages:
            click.echo(f"  - {message}", err=True)
        sys.exit(1)

    click.echo(f"{len(outcome.questions)} questions loaded from {csv_file.name}")
    for number, question in enumerate(outcome.questions, start=1):
        kind = question.type.value.replace("-", " ")
        click.echo(f"{number}. [{kind}] {question.question}")
        for letter, text in question.options().items():
            marker = "*" if question.is_correct(letter) else " "
            click.echo(f"   {marker} {letter}: {text}")


@cli.command()
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    help="Write to a file instead of stdout",
)
def template(output: Path | None) -> None:
    """Print the sample question CSV."""
    if output is None:
        click.echo(SAMPLE_CSV)
        return
    output.write_text(SAMPLE_CSV + "\n", encoding="utf-8")
    click.echo(f"Template written to {output}")


if __name__ == "__main__":
    cli()
