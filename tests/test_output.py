from datetime import timedelta

import pytest

from cistatus.cli.common.output import format_duration


@pytest.mark.parametrize(
    "duration, expected",
    [
        (None, "-"),
        (timedelta(seconds=0), "0s"),
        (timedelta(seconds=42), "42s"),
        (timedelta(minutes=5, seconds=3), "5m03s"),
        (timedelta(hours=1, minutes=2, seconds=3), "1h02m03s"),
        (timedelta(seconds=-5), "0s"),
    ],
)
def test_format_duration(duration, expected):
    assert format_duration(duration) == expected
