"""Commands for resolving job statuses of a pipeline execution."""

from pathlib import Path

import typer

from cistatus.cli.common.context import JobsAppContext, build_jobs_context
from cistatus.cli.common.exits import die, warn_exit
from cistatus.cli.common.options import (
    BaseShaOpt,
    ConfigOpt,
    MaxLengthOpt,
    NameOpt,
    SelectOpt,
    SubmitOpt,
    UseOrOpt,
)
from cistatus.cli.common.output import out
from cistatus.cli.common.selector_builder import build_selector
from cistatus.cli.tui import select_jobs as tui_select_jobs
from cistatus.core.description import append_base_sha, describe_state
from cistatus.core.jobs import CommitStatusState, SubmitKind
from cistatus.core.jobs import select_jobs as core_select_jobs
from cistatus.core.resolver import resolve_jobs

app = typer.Typer(
    help="Resolve declared jobs against a pipeline execution",
    no_args_is_help=True,
)


@app.command()
def status(
    snapshot: Path = typer.Argument(
        ...,
        help="PipelineRun JSON file (full object or its status)",
        exists=True,
        dir_okay=False,
    ),
    config: Path = ConfigOpt,
    name: list[str] = NameOpt,
    submit: SubmitKind = SubmitOpt,
    use_or: bool = UseOrOpt,
    select: bool = SelectOpt,
    base_sha: str = BaseShaOpt,
    max_length: int | None = MaxLengthOpt,
):
    """
    Show the commit status each job would report.
    """
    with out.status("Loading PipelineRun..."):
        appctx: JobsAppContext = build_jobs_context(
            snapshot, config, max_length=max_length
        )

    try:
        selector = build_selector(names=name, submit=submit, use_or=use_or)
    except ValueError as e:
        die(str(e), code=1)

    jobs = core_select_jobs(appctx.jobs.all(), selector)

    if not jobs:
        warn_exit("No jobs found", code=0)

    if select:
        jobs = tui_select_jobs(jobs)
        if not jobs:
            warn_exit("No jobs selected", code=0)

    results = resolve_jobs(appctx.snapshot, jobs)

    if appctx.snapshot.name:
        out.kv({"PipelineRun": appctx.snapshot.name})

    rows = [
        (
            job_status,
            append_base_sha(
                describe_state(job_status.state, job_status.message),
                base_sha,
                appctx.description_config,
            ),
        )
        for job_status in results
    ]
    out.job_status_table(rows)

    failed = any(s.state == CommitStatusState.FAILURE for s in results)
    if failed:
        raise typer.Exit(1)

    if all(s.state == CommitStatusState.SUCCESS for s in results):
        out.success(f"All {len(results)} {submit.value} job(s) passed")
