"""Core job domain models plus selection logic.

This module defines the job data structures (JobDefinition, IntegrationJobs,
CommitStatusState, JobStatus) shared by the status resolver and the CLI.
It is intentionally free of CLI concerns and of any knowledge about how a
pipeline execution is stored, so it can be reused by different frontends
(reconcile loops, automation, tests).
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum
from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from cistatus.core.selectors import JobSelector


class SubmitKind(str, Enum):
    """
    Source-control event family a job is declared for.

    Values:
        PRE_SUBMIT: Jobs triggered by pull-request events.
        POST_SUBMIT: Jobs triggered by push events (including tags).
    """

    PRE_SUBMIT = "preSubmit"
    POST_SUBMIT = "postSubmit"


class CommitStatusState(str, Enum):
    """
    Commit status reported to the code host for a single job.

    The values are the ones accepted by commit-status APIs.
    """

    PENDING = "pending"
    SUCCESS = "success"
    FAILURE = "failure"


class DuplicateJobError(ValueError):
    """Raised when two jobs of the same kind share a name."""


@dataclass(frozen=True)
class JobDefinition:
    """
    Represents a declared unit of work.

    Attributes:
        name: Job name. Must match the pipeline task name of exactly one
              sub-execution in a pipeline execution.
        submit: Event family the job was declared for.
    """

    name: str
    submit: SubmitKind = SubmitKind.PRE_SUBMIT


@dataclass(frozen=True)
class JobStatus:
    """
    Resolved status of a job within one pipeline execution.

    Attributes:
        name: Name of the resolved job.
        state: Aggregated commit status state.
        message: Message of the condition that decided the state, if any.
        start_time: Start of the matched sub-execution, if known.
        completion_time: Completion of the matched sub-execution, if known.
    """

    name: str
    state: CommitStatusState
    message: str = ""
    start_time: datetime | None = None
    completion_time: datetime | None = None

    @property
    def duration(self) -> timedelta | None:
        """Elapsed time of the sub-execution, or None while incomplete."""
        if self.start_time is None or self.completion_time is None:
            return None
        return self.completion_time - self.start_time


def _check_unique(jobs: Iterable[JobDefinition], kind: SubmitKind) -> None:
    seen: set[str] = set()
    for job in jobs:
        if job.name in seen:
            raise DuplicateJobError(f"Duplicate {kind.value} job name: '{job.name}'")
        seen.add(job.name)


@dataclass(frozen=True)
class IntegrationJobs:
    """
    The jobs declared by an integration config, grouped by event family.

    Job names are unique within each group; a status is resolved per name,
    so two jobs sharing a name could never be told apart.
    """

    pre_submit: tuple[JobDefinition, ...] = ()
    post_submit: tuple[JobDefinition, ...] = ()

    def __post_init__(self) -> None:
        _check_unique(self.pre_submit, SubmitKind.PRE_SUBMIT)
        _check_unique(self.post_submit, SubmitKind.POST_SUBMIT)

    def for_kind(self, kind: SubmitKind) -> tuple[JobDefinition, ...]:
        """Return the jobs declared for one event family."""
        if kind == SubmitKind.POST_SUBMIT:
            return self.post_submit
        return self.pre_submit

    def all(self) -> list[JobDefinition]:
        """Return every declared job, pre-submit jobs first."""
        return [*self.pre_submit, *self.post_submit]


def select_jobs(
    jobs: Iterable[JobDefinition], selector: JobSelector
) -> list[JobDefinition]:
    """
    Select job definitions using a selector strategy.

    Args:
        jobs: Job definitions to filter.
        selector: JobSelector instance defining the matching strategy.

    Returns:
        The job definitions that match the selector, in input order.
    """
    return [job for job in jobs if selector.matches(job)]
