import json
from datetime import datetime, timezone

import pytest

from cistatus.core.adapters.tekton import (
    SnapshotFormatError,
    jobs_from_dict,
    load_json,
    snapshot_from_dict,
)
from cistatus.core.conditions import ConditionStatus
from cistatus.core.executions import RunExecution, TaskExecution
from cistatus.core.jobs import DuplicateJobError, JobDefinition, SubmitKind

PIPELINE_RUN = {
    "apiVersion": "tekton.dev/v1beta1",
    "kind": "PipelineRun",
    "metadata": {"name": "ic-pr-42"},
    "status": {
        "taskRuns": {
            "ic-pr-42-build-abcde": {
                "pipelineTaskName": "build",
                "status": {
                    "podName": "ic-pr-42-build-abcde-pod",
                    "conditions": [
                        {
                            "type": "Succeeded",
                            "status": "True",
                            "message": "All Steps have completed executing",
                        }
                    ],
                    "startTime": "2021-06-01T11:00:00Z",
                    "completionTime": "2021-06-01T11:05:30Z",
                },
            },
            "ic-pr-42-lint-fghij": {"pipelineTaskName": "lint"},
        },
        "runs": {
            "ic-pr-42-approve-klmno": {
                "pipelineTaskName": "approve",
                "status": {
                    "conditions": [{"status": "Maybe", "reason": "Waiting"}],
                    "startTime": "2021-06-01T11:00:00+00:00",
                },
            }
        },
    },
}


def test_snapshot_from_full_pipeline_run():
    snapshot = snapshot_from_dict(PIPELINE_RUN)

    assert snapshot.name == "ic-pr-42"
    build = snapshot.task_runs["ic-pr-42-build-abcde"]
    assert isinstance(build, TaskExecution)
    assert build.pod_name == "ic-pr-42-build-abcde-pod"
    assert build.status is not None
    assert build.status.conditions[0].status == ConditionStatus.TRUE
    assert build.status.conditions[0].message == "All Steps have completed executing"
    assert build.status.start_time == datetime(2021, 6, 1, 11, 0, tzinfo=timezone.utc)
    assert build.status.completion_time == datetime(
        2021, 6, 1, 11, 5, 30, tzinfo=timezone.utc
    )
    assert snapshot.task_runs["ic-pr-42-lint-fghij"].status is None

    approve = snapshot.runs["ic-pr-42-approve-klmno"]
    assert isinstance(approve, RunExecution)
    assert approve.status is not None
    assert approve.status.conditions[0].status == ConditionStatus.UNKNOWN
    assert approve.status.conditions[0].reason == "Waiting"
    assert approve.status.completion_time is None


def test_snapshot_from_bare_status():
    snapshot = snapshot_from_dict(PIPELINE_RUN["status"])

    assert snapshot.name == ""
    assert snapshot.find("build") is not None
    assert snapshot.find("approve") is not None


def test_snapshot_from_empty_status():
    snapshot = snapshot_from_dict({"metadata": {"name": "fresh"}})

    assert snapshot.name == "fresh"
    assert dict(snapshot.task_runs) == {}
    assert dict(snapshot.runs) == {}


@pytest.mark.parametrize(
    "payload, match",
    [
        ([], "PipelineRun"),
        ({"taskRuns": []}, "taskRuns"),
        ({"taskRuns": {"x": {"status": {}}}}, "pipelineTaskName"),
        ({"runs": {"x": {"pipelineTaskName": "a", "status": "done"}}}, "status"),
        (
            {"taskRuns": {"x": {"pipelineTaskName": "a", "status": {"startTime": "yesterday"}}}},
            "timestamp",
        ),
    ],
)
def test_snapshot_from_dict_rejects_malformed(payload, match):
    with pytest.raises(SnapshotFormatError, match=match):
        snapshot_from_dict(payload)


def test_jobs_from_integration_config():
    payload = {
        "kind": "IntegrationConfig",
        "spec": {
            "jobs": {
                "preSubmit": [{"name": "build", "image": "golang:1.16"}, {"name": "lint"}],
                "postSubmit": [{"name": "build"}, {"name": "publish"}],
            }
        },
    }

    jobs = jobs_from_dict(payload)

    assert jobs.pre_submit == (
        JobDefinition("build", SubmitKind.PRE_SUBMIT),
        JobDefinition("lint", SubmitKind.PRE_SUBMIT),
    )
    assert [j.name for j in jobs.for_kind(SubmitKind.POST_SUBMIT)] == ["build", "publish"]
    assert len(jobs.all()) == 4


def test_jobs_from_bare_jobs_object():
    jobs = jobs_from_dict({"postSubmit": [{"name": "publish"}]})

    assert jobs.pre_submit == ()
    assert jobs.post_submit == (JobDefinition("publish", SubmitKind.POST_SUBMIT),)


def test_jobs_from_dict_rejects_duplicates():
    with pytest.raises(DuplicateJobError, match="build"):
        jobs_from_dict({"preSubmit": [{"name": "build"}, {"name": "build"}]})


@pytest.mark.parametrize(
    "payload",
    [
        {"preSubmit": {"name": "build"}},
        {"preSubmit": [{"image": "alpine"}]},
        {"spec": "nope"},
    ],
)
def test_jobs_from_dict_rejects_malformed(payload):
    with pytest.raises(SnapshotFormatError):
        jobs_from_dict(payload)


def test_load_json(tmp_path):
    path = tmp_path / "pr.json"
    path.write_text(json.dumps(PIPELINE_RUN))

    assert load_json(path) == PIPELINE_RUN


def test_load_json_invalid(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json")

    with pytest.raises(SnapshotFormatError, match="Invalid JSON"):
        load_json(path)

    with pytest.raises(SnapshotFormatError, match="Cannot read"):
        load_json(tmp_path / "missing.json")
