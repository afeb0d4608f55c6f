"""Condition models and the condition-sequence reducer.

A sub-execution reports its outcome as an ordered sequence of conditions,
each carrying a tri-state status. This module reduces such a sequence to a
single commit status state.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from cistatus.core.jobs import CommitStatusState


class ConditionStatus(str, Enum):
    """
    Tri-state status of a condition, using the Kubernetes spelling.
    """

    TRUE = "True"
    FALSE = "False"
    UNKNOWN = "Unknown"

    @classmethod
    def parse(cls, value: object) -> ConditionStatus:
        """Return the matching status, or UNKNOWN for anything unrecognised."""
        try:
            return cls(value)
        except ValueError:
            return cls.UNKNOWN


@dataclass(frozen=True)
class Condition:
    """
    A single observation on a sub-execution.

    Attributes:
        status: Tri-state outcome.
        message: Human-readable message attached to the observation.
        reason: Short machine-readable reason, if reported.
    """

    status: ConditionStatus
    message: str = ""
    reason: str = ""


def reduce_conditions(statuses: Iterable[ConditionStatus]) -> CommitStatusState:
    """
    Reduce an ordered sequence of condition statuses to a commit status state.

    A FALSE anywhere in the sequence yields FAILURE, even when TRUE entries
    are also present. Otherwise a TRUE yields SUCCESS. An empty or
    all-unknown sequence yields PENDING.
    """
    seen_true = False
    for status in statuses:
        if status == ConditionStatus.FALSE:
            return CommitStatusState.FAILURE
        if status == ConditionStatus.TRUE:
            seen_true = True
    return CommitStatusState.SUCCESS if seen_true else CommitStatusState.PENDING
