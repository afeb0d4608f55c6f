"""CLI application for commit status tooling."""

import typer

from cistatus.cli.commands.description import app as description_app
from cistatus.cli.commands.jobs import app as jobs_app
from cistatus.cli.common.logs import configure_logging
from cistatus.cli.common.options import VerboseOpt

app = typer.Typer(
    help="cistatus - pipeline job status and commit status descriptions",
    no_args_is_help=True,
)

app.add_typer(jobs_app, name="jobs", help="Resolve job states of a PipelineRun.")
app.add_typer(description_app, name="description")


@app.callback()
def _init(verbose: bool = VerboseOpt):
    """Configure logging once per invocation."""
    configure_logging(verbose)


if __name__ == "__main__":
    app()
