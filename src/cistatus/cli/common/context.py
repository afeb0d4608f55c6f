"""Application context management for the CLI."""

from dataclasses import dataclass
from pathlib import Path

from cistatus.cli.common.exits import die
from cistatus.core.adapters.tekton import jobs_from_dict, load_json, snapshot_from_dict
from cistatus.core.description import DescriptionConfig
from cistatus.core.executions import PipelineExecutionSnapshot
from cistatus.core.jobs import IntegrationJobs


@dataclass
class JobsAppContext:
    """Application context holding the loaded snapshot, jobs and codec config."""

    snapshot: PipelineExecutionSnapshot
    jobs: IntegrationJobs
    description_config: DescriptionConfig


def build_description_config(max_length: int | None) -> DescriptionConfig:
    """Return the codec config, preferring an explicit max length over the env."""
    try:
        if max_length is not None:
            return DescriptionConfig(max_length=max_length)
        return DescriptionConfig.from_env()
    except ValueError as exc:
        die(str(exc), code=1)


def build_jobs_context(
    snapshot_path: Path, config_path: Path, *, max_length: int | None = None
) -> JobsAppContext:
    """Load the PipelineRun and IntegrationConfig documents.

    Args:
        snapshot_path: JSON file holding a PipelineRun or its status.
        config_path: JSON file holding an IntegrationConfig or its jobs.
        max_length: Optional description length override.

    Returns:
        JobsAppContext: Context ready for status resolution.
    """
    try:
        snapshot = snapshot_from_dict(load_json(snapshot_path))
        jobs = jobs_from_dict(load_json(config_path))
    except ValueError as exc:
        die(str(exc), code=1)
    return JobsAppContext(
        snapshot=snapshot,
        jobs=jobs,
        description_config=build_description_config(max_length),
    )
