"""Selector construction utilities.

This module translates CLI arguments into concrete JobSelector instances.
It centralizes validation and composition logic for selectors, so commands
can work with a single selector abstraction.
"""

from typing import Iterable

from cistatus.core.jobs import SubmitKind
from cistatus.core.selectors import (
    AndSelector,
    JobSelector,
    NameRegexSelector,
    OrSelector,
    SubmitKindSelector,
)


def build_selector(
    *,
    names: Iterable[str],
    submit: SubmitKind,
    use_or: bool,
) -> JobSelector:
    """
    Build a composite JobSelector from user-provided criteria.

    A pipeline execution is triggered by a single event, so the result
    always restricts jobs to one event family. Name patterns are combined
    among themselves and then narrowed to that family.

    Args:
        names: Regular expressions used to match job names.
        submit: Event family the jobs must be declared for.
        use_or: If True, a job matching any name pattern is selected.
                If False, it must match all of them.

    Returns:
        A JobSelector instance representing the composed selection logic.

    Raises:
        ValueError: If a name regex is invalid.
    """
    kind_selector = SubmitKindSelector(submit)
    name_selectors: list[JobSelector] = [NameRegexSelector(n) for n in names if n]

    if not name_selectors:
        return kind_selector

    if len(name_selectors) == 1:
        name_selector = name_selectors[0]
    elif use_or:
        name_selector = OrSelector(name_selectors)
    else:
        name_selector = AndSelector(name_selectors)

    return AndSelector([kind_selector, name_selector])
