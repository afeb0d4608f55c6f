"""Commit status description codec.

Code hosts cap the length of a commit status description. The reconcile
loop still needs to remember which base commit a job was tested against,
and the status report is the only place that value is persisted. This
module embeds the base commit SHA as a trailing `BaseSHA:<sha>` marker in a
bounded description and recovers it later.

The description is truncated, never the marker, so a well-formed SHA written
by `append_base_sha` can always be read back by `parse_base_sha`.
"""

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass

from cistatus.core.jobs import CommitStatusState

logger = logging.getLogger(__name__)

SHA_LENGTH = 40
_SHA_RE = re.compile(r"[0-9a-f]{40}")

MAX_LENGTH_ENV = "CISTATUS_DESCRIPTION_MAX_LENGTH"

_STATE_DESCRIPTIONS = {
    CommitStatusState.PENDING: "Job is running...",
    CommitStatusState.SUCCESS: "Job is successful",
    CommitStatusState.FAILURE: "Job failed",
}


@dataclass(frozen=True)
class DescriptionConfig:
    """
    Length budget and markers used to build status descriptions.

    Attributes:
        max_length: Maximum length of a rendered description.
        ellipsis: Marker appended to a truncated description.
        base_sha_key: Marker preceding the embedded base commit SHA.
    """

    max_length: int = 140
    ellipsis: str = "..."
    base_sha_key: str = "BaseSHA:"

    def __post_init__(self) -> None:
        if not self.base_sha_key:
            raise ValueError("base_sha_key must not be empty")
        needed = len(self.ellipsis) + len(self.base_sha_key) + SHA_LENGTH
        if self.max_length < needed:
            raise ValueError(
                f"max_length must be >= {needed} to hold a full base SHA "
                f"(got {self.max_length})"
            )

    @classmethod
    def from_env(cls) -> DescriptionConfig:
        """Build a config, honoring the max-length env override."""
        raw = os.getenv(MAX_LENGTH_ENV)
        if raw is None:
            return cls()
        try:
            return cls(max_length=int(raw))
        except ValueError:
            logger.warning("Ignoring invalid %s=%r", MAX_LENGTH_ENV, raw)
            return cls()


DEFAULT_CONFIG = DescriptionConfig()


def append_base_sha(
    description: str,
    base_sha: str,
    config: DescriptionConfig = DEFAULT_CONFIG,
) -> str:
    """
    Append a base commit SHA marker to a description.

    Without a SHA the description is only capped at the maximum length.
    When description and marker do not fit together, the description is
    shortened and ellipsized so the result is exactly `max_length` long.
    A base SHA longer than the budget allows is kept by its tail only, which
    drops the leading marker and makes the result unparseable.

    Args:
        description: Free-text description.
        base_sha: Base commit SHA to embed; may be empty.
        config: Length budget and markers.

    Returns:
        A description of at most `config.max_length` characters.
    """
    max_length = config.max_length
    if not base_sha:
        return description[:max_length]

    suffix = config.base_sha_key + base_sha
    if len(description) + len(suffix) <= max_length:
        return description + suffix

    keep = max(max_length - len(suffix) - len(config.ellipsis), 0)
    appended = description[:keep] + config.ellipsis + suffix
    return appended[-max_length:]


def parse_base_sha(
    full_description: str,
    config: DescriptionConfig = DEFAULT_CONFIG,
) -> str:
    """
    Recover the base commit SHA from a description.

    The text after the last base SHA marker must be exactly 40 lowercase
    hex characters; anything else (no marker, a short, long or non-hex
    payload) yields an empty string.
    """
    idx = full_description.rfind(config.base_sha_key)
    if idx < 0:
        return ""
    candidate = full_description[idx + len(config.base_sha_key) :]
    if not _SHA_RE.fullmatch(candidate):
        logger.debug("Ignoring malformed base SHA payload %r", candidate)
        return ""
    return candidate


def describe_state(state: CommitStatusState, message: str = "") -> str:
    """Return the human text for a job state, preferring a reported message."""
    return message or _STATE_DESCRIPTIONS[state]
