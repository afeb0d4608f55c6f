"""Pipeline execution snapshot models.

A snapshot is a point-in-time, read-only view of a pipeline execution. It
holds two mappings of sub-executions (task runs and custom runs), keyed by an
internal record identifier whose ordering carries no meaning.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterator, Mapping, Protocol

from cistatus.core.conditions import Condition


@dataclass(frozen=True)
class ExecutionStatus:
    """
    Observed status of a sub-execution.

    Attributes:
        conditions: Ordered condition entries reported for the sub-execution.
        start_time: When the sub-execution started, if known.
        completion_time: When the sub-execution completed, if known.
    """

    conditions: tuple[Condition, ...] = ()
    start_time: datetime | None = None
    completion_time: datetime | None = None


class SubExecution(Protocol):
    """Anything with a declared pipeline task name and an optional status."""

    @property
    def pipeline_task_name(self) -> str: ...

    @property
    def status(self) -> ExecutionStatus | None: ...


@dataclass(frozen=True)
class TaskExecution:
    """
    A task-run record inside a pipeline execution.

    A missing status means the task run has not been observed yet.
    """

    pipeline_task_name: str
    status: ExecutionStatus | None = None
    pod_name: str = ""


@dataclass(frozen=True)
class RunExecution:
    """
    A custom-run record inside a pipeline execution.

    A missing status means the run has not been observed yet.
    """

    pipeline_task_name: str
    status: ExecutionStatus | None = None


@dataclass(frozen=True)
class PipelineExecutionSnapshot:
    """
    Point-in-time view of a pipeline execution.

    Attributes:
        task_runs: Task-run records keyed by internal identifier.
        runs: Custom-run records keyed by internal identifier.
        name: Name of the pipeline execution, informational only.
    """

    task_runs: Mapping[str, TaskExecution] = field(default_factory=dict)
    runs: Mapping[str, RunExecution] = field(default_factory=dict)
    name: str = ""

    def sub_executions(self) -> Iterator[SubExecution]:
        """Yield every task run, then every custom run."""
        yield from self.task_runs.values()
        yield from self.runs.values()

    def find(self, pipeline_task_name: str) -> SubExecution | None:
        """Return the first sub-execution declared under the given name.

        Task runs are searched before custom runs.
        """
        for sub in self.sub_executions():
            if sub.pipeline_task_name == pipeline_task_name:
                return sub
        return None
