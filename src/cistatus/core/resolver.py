"""Job status resolution against a pipeline execution snapshot.

This module maps the sub-execution records of a pipeline execution to one
commit status state per declared job. Resolution is a pure function of
(snapshot, job): it keeps no memory across calls and never raises, because
a sub-execution that has not been reported yet is a normal transient state
of a running pipeline.
"""

from __future__ import annotations

import logging
from typing import Iterable

from cistatus.core.conditions import Condition, ConditionStatus, reduce_conditions
from cistatus.core.executions import PipelineExecutionSnapshot
from cistatus.core.jobs import CommitStatusState, JobDefinition, JobStatus

logger = logging.getLogger(__name__)


def _deciding_message(conditions: tuple[Condition, ...]) -> str:
    """Return the message of the condition that decides the reduced state."""
    for wanted in (ConditionStatus.FALSE, ConditionStatus.TRUE):
        for condition in conditions:
            if condition.status == wanted:
                return condition.message
    return conditions[-1].message if conditions else ""


def resolve(
    snapshot: PipelineExecutionSnapshot, job: JobDefinition
) -> CommitStatusState:
    """
    Determine the commit status state of a job.

    The sub-execution declared under the job's name is looked up among the
    task runs first and the custom runs second. An unmatched job, or a
    matched sub-execution without a status, is PENDING; otherwise the
    state is reduced from the sub-execution's conditions.

    Args:
        snapshot: Pipeline execution to inspect. Never mutated.
        job: Job whose state is requested.

    Returns:
        Exactly one CommitStatusState.
    """
    sub = snapshot.find(job.name)
    if sub is None:
        logger.debug(
            "Job %s not observed in %s yet", job.name, snapshot.name or "snapshot"
        )
        return CommitStatusState.PENDING
    if sub.status is None:
        return CommitStatusState.PENDING
    return reduce_conditions(c.status for c in sub.status.conditions)


def resolve_job_status(
    snapshot: PipelineExecutionSnapshot, job: JobDefinition
) -> JobStatus:
    """
    Resolve a job's state together with its message and timestamps.

    The state is always the one returned by `resolve`; timestamps are
    informational and never change it.
    """
    state = resolve(snapshot, job)
    sub = snapshot.find(job.name)
    if sub is None or sub.status is None:
        return JobStatus(name=job.name, state=state)

    status = sub.status
    return JobStatus(
        name=job.name,
        state=state,
        message=_deciding_message(status.conditions),
        start_time=status.start_time,
        completion_time=status.completion_time,
    )


def resolve_jobs(
    snapshot: PipelineExecutionSnapshot, jobs: Iterable[JobDefinition]
) -> list[JobStatus]:
    """
    Resolve every job against the same snapshot.

    Returns:
        One JobStatus per job, in input order.
    """
    results = [resolve_job_status(snapshot, job) for job in jobs]
    logger.debug(
        "Resolved %d job(s): %s",
        len(results),
        ", ".join(f"{s.name}={s.state.value}" for s in results),
    )
    return results
