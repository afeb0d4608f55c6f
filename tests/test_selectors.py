import pytest

from cistatus.core.jobs import JobDefinition, SubmitKind
from cistatus.core.selectors import (
    AndSelector,
    NameRegexSelector,
    OrSelector,
    SubmitKindSelector,
)


def test_name_regex_selector_matches():
    job = JobDefinition("unit-test")
    selector = NameRegexSelector("test")

    assert selector.matches(job) is True


def test_name_regex_selector_no_match():
    job = JobDefinition("lint")
    selector = NameRegexSelector("test")

    assert selector.matches(job) is False


def test_name_regex_selector_invalid_pattern():
    with pytest.raises(ValueError, match="Invalid regex"):
        NameRegexSelector("(")


def test_submit_kind_selector():
    selector = SubmitKindSelector(SubmitKind.POST_SUBMIT)

    assert selector.matches(JobDefinition("publish", SubmitKind.POST_SUBMIT)) is True
    assert selector.matches(JobDefinition("publish", SubmitKind.PRE_SUBMIT)) is False


def test_and_or_selectors():
    job = JobDefinition("unit-test", SubmitKind.PRE_SUBMIT)

    name_sel = NameRegexSelector("test")
    kind_sel = SubmitKindSelector(SubmitKind.PRE_SUBMIT)
    post_sel = SubmitKindSelector(SubmitKind.POST_SUBMIT)

    assert AndSelector([name_sel, kind_sel]).matches(job) is True
    assert AndSelector([name_sel, post_sel]).matches(job) is False
    assert OrSelector([name_sel, post_sel]).matches(job) is True
