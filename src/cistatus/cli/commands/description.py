"""Commands for encoding and decoding commit status descriptions."""

import typer

from cistatus.cli.common.context import build_description_config
from cistatus.cli.common.exits import warn_exit
from cistatus.cli.common.options import BaseShaOpt, MaxLengthOpt
from cistatus.core.description import append_base_sha, parse_base_sha

app = typer.Typer(
    help="Encode / decode base commit SHAs in status descriptions",
    no_args_is_help=True,
)


@app.command()
def encode(
    text: str = typer.Argument(..., help="Free-text description"),
    base_sha: str = BaseShaOpt,
    max_length: int | None = MaxLengthOpt,
):
    """
    Print the description with the base SHA appended, within the length limit.
    """
    config = build_description_config(max_length)
    typer.echo(append_base_sha(text, base_sha, config))


@app.command()
def decode(
    text: str = typer.Argument(..., help="Description previously produced by encode"),
):
    """
    Print the base SHA recorded in a description.
    """
    sha = parse_base_sha(text, build_description_config(None))
    if not sha:
        warn_exit("No base SHA found", code=1)
    typer.echo(sha)
