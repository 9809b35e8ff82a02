"""Parsing of kubectl duration flags such as ``--request-timeout``.

kubectl accepts Go durations ("30s", "1m30s", "250ms") and bare integers,
which are read as seconds.
"""

from __future__ import annotations

import re

_UNIT_SECONDS: dict[str, float] = {
    "ns": 1e-9,
    "us": 1e-6,
    "µs": 1e-6,
    "ms": 1e-3,
    "s": 1.0,
    "m": 60.0,
    "h": 3600.0,
}

_BARE_SECONDS_PATTERN = re.compile(r"^\d+$")
_DURATION_PATTERN = re.compile(r"^(?:(?:\d+(?:\.\d*)?|\.\d+)(?:ns|us|µs|ms|s|m|h))+$")
_DURATION_TERM_PATTERN = re.compile(r"(\d+(?:\.\d*)?|\.\d+)(ns|us|µs|ms|s|m|h)")


def parse_duration_seconds(value: str) -> float:
    """Parse a kubectl duration into seconds.

    Args:
        value: Duration such as ``"30s"``, ``"1m30s"``, ``"1500ms"`` or ``"45"``.

    Returns:
        The duration in seconds. Zero means no timeout.

    Raises:
        ValueError: If ``value`` is not a duration kubectl accepts.
    """
    text = value.strip()
    if _BARE_SECONDS_PATTERN.match(text):
        return float(text)
    if not _DURATION_PATTERN.match(text):
        raise ValueError(
            f"invalid duration {value!r}; expected e.g. 30s, 1m30s, 500ms or 1h"
        )
    return sum(
        float(number) * _UNIT_SECONDS[unit]
        for number, unit in _DURATION_TERM_PATTERN.findall(text)
    )
