"""Common CLI options for the CLI."""

import typer

from cistatus.core.jobs import SubmitKind

ConfigOpt = typer.Option(
    ...,
    "--config",
    "-c",
    help="IntegrationConfig JSON file declaring the jobs",
    exists=True,
    dir_okay=False,
)

NameOpt = typer.Option(
    [],
    "--name",
    help="Regex on job name. This is reusable.",
    show_default=False,
)

SubmitOpt = typer.Option(
    SubmitKind.PRE_SUBMIT,
    "--submit",
    help="Event family that triggered the PipelineRun",
    case_sensitive=False,
)

UseOrOpt = typer.Option(
    False,
    "--or",
    help="Use OR instead of AND between name patterns",
)

SelectOpt = typer.Option(
    False,
    "--select",
    "-s",
    help="Pick the jobs to resolve interactively",
)

BaseShaOpt = typer.Option(
    "",
    "--base-sha",
    help="Base commit SHA to embed in the status description",
)

MaxLengthOpt = typer.Option(
    None,
    "--max-length",
    help="Maximum description length (default: $CISTATUS_DESCRIPTION_MAX_LENGTH or 140)",
)

VerboseOpt = typer.Option(
    False,
    "--verbose",
    "-v",
    help="Enable debug logging",
)
