"""Tekton and IntegrationConfig JSON adapter.

Converts a decoded PipelineRun document into a PipelineExecutionSnapshot and
an IntegrationConfig document into IntegrationJobs, so the resolver never
sees raw Kubernetes objects.
"""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Mapping

from cistatus.core.conditions import Condition, ConditionStatus
from cistatus.core.executions import (
    ExecutionStatus,
    PipelineExecutionSnapshot,
    RunExecution,
    TaskExecution,
)
from cistatus.core.jobs import IntegrationJobs, JobDefinition, SubmitKind


class SnapshotFormatError(ValueError):
    """Raised when a PipelineRun or IntegrationConfig document is malformed."""


def load_json(path: Path) -> Any:
    """Read and decode a JSON document."""
    try:
        return json.loads(path.read_text())
    except OSError as exc:
        raise SnapshotFormatError(f"Cannot read {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise SnapshotFormatError(f"Invalid JSON in {path}: {exc}") from exc


def _as_mapping(value: Any, what: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise SnapshotFormatError(f"{what} must be an object")
    return value


def _parse_time(raw: Any, what: str) -> datetime | None:
    """Parse an RFC 3339 timestamp as written by Kubernetes."""
    if raw is None or raw == "":
        return None
    try:
        return datetime.fromisoformat(str(raw).replace("Z", "+00:00"))
    except ValueError as exc:
        raise SnapshotFormatError(f"{what}: invalid timestamp {raw!r}") from exc


def _parse_status(raw: Any, what: str) -> ExecutionStatus | None:
    if raw is None:
        return None
    status = _as_mapping(raw, f"{what}.status")
    conditions = tuple(
        Condition(
            status=ConditionStatus.parse(item.get("status")),
            message=str(item.get("message") or ""),
            reason=str(item.get("reason") or ""),
        )
        for item in status.get("conditions") or []
        if isinstance(item, Mapping)
    )
    return ExecutionStatus(
        conditions=conditions,
        start_time=_parse_time(status.get("startTime"), f"{what}.startTime"),
        completion_time=_parse_time(
            status.get("completionTime"), f"{what}.completionTime"
        ),
    )


def _task_name(entry: Mapping[str, Any], what: str) -> str:
    name = entry.get("pipelineTaskName")
    if not name:
        raise SnapshotFormatError(f"{what}: missing pipelineTaskName")
    return str(name)


def snapshot_from_dict(payload: Any) -> PipelineExecutionSnapshot:
    """
    Build a snapshot from a PipelineRun document or its bare status.

    Args:
        payload: Decoded JSON of a PipelineRun (`metadata` + `status`) or
                 of a status object holding `taskRuns` and `runs` maps.

    Returns:
        A PipelineExecutionSnapshot.

    Raises:
        SnapshotFormatError: If the document does not have the expected shape.
    """
    doc = _as_mapping(payload, "PipelineRun")
    name = ""
    status = doc
    if "status" in doc or "metadata" in doc:
        name = str(_as_mapping(doc.get("metadata"), "metadata").get("name") or "")
        status = _as_mapping(doc.get("status"), "status")

    task_runs: dict[str, TaskExecution] = {}
    for key, raw in _as_mapping(status.get("taskRuns"), "taskRuns").items():
        entry = _as_mapping(raw, f"taskRuns.{key}")
        what = f"taskRuns.{key}"
        raw_status = entry.get("status")
        task_runs[key] = TaskExecution(
            pipeline_task_name=_task_name(entry, what),
            status=_parse_status(raw_status, what),
            pod_name=str(_as_mapping(raw_status, what).get("podName") or ""),
        )

    runs: dict[str, RunExecution] = {}
    for key, raw in _as_mapping(status.get("runs"), "runs").items():
        entry = _as_mapping(raw, f"runs.{key}")
        what = f"runs.{key}"
        runs[key] = RunExecution(
            pipeline_task_name=_task_name(entry, what),
            status=_parse_status(entry.get("status"), what),
        )

    return PipelineExecutionSnapshot(task_runs=task_runs, runs=runs, name=name)


def _parse_jobs(raw: Any, kind: SubmitKind) -> tuple[JobDefinition, ...]:
    if raw is None:
        return ()
    if not isinstance(raw, list):
        raise SnapshotFormatError(f"jobs.{kind.value} must be a list")
    jobs = []
    for idx, item in enumerate(raw):
        entry = _as_mapping(item, f"jobs.{kind.value}[{idx}]")
        name = entry.get("name")
        if not name:
            raise SnapshotFormatError(f"jobs.{kind.value}[{idx}]: missing name")
        jobs.append(JobDefinition(name=str(name), submit=kind))
    return tuple(jobs)


def jobs_from_dict(payload: Any) -> IntegrationJobs:
    """
    Build the declared jobs from an IntegrationConfig document.

    Accepts a full IntegrationConfig (`spec.jobs`) or a bare jobs object
    with `preSubmit` / `postSubmit` lists.

    Raises:
        SnapshotFormatError: If the document does not have the expected shape.
        DuplicateJobError: If a job name repeats within one event family.
    """
    doc = _as_mapping(payload, "IntegrationConfig")
    if "spec" in doc:
        doc = _as_mapping(_as_mapping(doc["spec"], "spec").get("jobs"), "spec.jobs")
    return IntegrationJobs(
        pre_submit=_parse_jobs(
            doc.get(SubmitKind.PRE_SUBMIT.value), SubmitKind.PRE_SUBMIT
        ),
        post_submit=_parse_jobs(
            doc.get(SubmitKind.POST_SUBMIT.value), SubmitKind.POST_SUBMIT
        ),
    )
