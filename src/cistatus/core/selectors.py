"""Job selector abstractions and implementations.

This module defines the selector system used to decide whether a declared
job takes part in a status query. Selectors encapsulate matching logic and
can be composed using logical operators (AND / OR) to express complex
selection rules.

Selectors are pure, side-effect-free objects.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cistatus.core.jobs import JobDefinition, SubmitKind


class JobSelector(ABC):
    """
    Abstract base class for all job selectors.

    A JobSelector encapsulates a single piece of matching logic that
    determines whether a given JobDefinition satisfies a specific criterion.
    """

    @abstractmethod
    def matches(self, job: JobDefinition) -> bool:
        """
        Determine whether the given job matches this selector.

        Args:
            job: JobDefinition instance to evaluate.

        Returns:
            True if the job matches the selector criteria, False otherwise.
        """
        ...


class NameRegexSelector(JobSelector):
    """
    Selector that matches jobs based on a regular expression applied
    to the job name.
    """

    def __init__(self, pattern: str):
        try:
            self.regex = re.compile(pattern)
        except re.error as exc:
            raise ValueError(f"Invalid regex expression: {exc}") from exc

    def matches(self, job: JobDefinition) -> bool:
        return bool(self.regex.search(job.name))


class SubmitKindSelector(JobSelector):
    """
    Selector that matches jobs declared for one event family.
    """

    def __init__(self, kind: SubmitKind):
        self.kind = kind

    def matches(self, job: JobDefinition) -> bool:
        return job.submit == self.kind


class AndSelector(JobSelector):
    """
    Composite selector that matches a job only if all child selectors match.
    """

    def __init__(self, selectors: list[JobSelector]):
        self.selectors = selectors

    def matches(self, job: JobDefinition) -> bool:
        return all(s.matches(job) for s in self.selectors)


class OrSelector(JobSelector):
    """
    Composite selector that matches a job if any child selector matches.
    """

    def __init__(self, selectors: list[JobSelector]):
        self.selectors = selectors

    def matches(self, job: JobDefinition) -> bool:
        return any(s.matches(job) for s in self.selectors)
