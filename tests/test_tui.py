from cistatus.cli.tui import _MAX_JOB_NAME_WIDTH, _job_choice_title, _truncate
from cistatus.core.jobs import JobDefinition, SubmitKind


def test_job_choice_title_shows_name_before_kind_and_aligns_column():
    first = _job_choice_title(JobDefinition("build"), name_width=12)
    second = _job_choice_title(
        JobDefinition("publish", SubmitKind.POST_SUBMIT), name_width=12
    )

    assert first.startswith("build")
    assert second.startswith("publish")
    assert first.index("(") == second.index("(")
    assert first.endswith("(preSubmit)")
    assert second.endswith("(postSubmit)")


def test_job_choice_title_truncates_long_names():
    long_name = "x" * (_MAX_JOB_NAME_WIDTH + 10)
    rendered = _job_choice_title(
        JobDefinition(long_name),
        name_width=_MAX_JOB_NAME_WIDTH,
    )

    assert "..." in rendered
    assert "(preSubmit)" in rendered
    assert _truncate(long_name, _MAX_JOB_NAME_WIDTH).endswith("...")
