"""Resource parsing utilities for Kubernetes quantities.

Provides functions to parse Kubernetes quantity strings into exact decimals:
- Quantities: parsed to ``Decimal`` base units (cores, bytes, pods)
- CPU: reported in millicores (int)
- Memory: reported in bytes (int)

Integer conversions round up, matching the API server's ``MilliValue()`` and
``Value()`` accessors.
"""

from __future__ import annotations

import re
from decimal import ROUND_CEILING, Decimal, InvalidOperation
from typing import Any

# Suffix multipliers, binary before decimal so "Mi" is not read as "M".
_BINARY_SUFFIXES: tuple[tuple[str, int], ...] = (
    ("Ki", 1024),
    ("Mi", 1024**2),
    ("Gi", 1024**3),
    ("Ti", 1024**4),
    ("Pi", 1024**5),
    ("Ei", 1024**6),
)
_DECIMAL_SUFFIXES: tuple[tuple[str, Decimal], ...] = (
    ("n", Decimal("1e-9")),
    ("u", Decimal("1e-6")),
    ("m", Decimal("1e-3")),
    ("k", Decimal("1e3")),
    ("M", Decimal("1e6")),
    ("G", Decimal("1e9")),
    ("T", Decimal("1e12")),
    ("P", Decimal("1e15")),
    ("E", Decimal("1e18")),
)
_QUANTITY_PATTERN = re.compile(
    r"^(?P<number>[+-]?(?:\d+(?:\.\d*)?|\.\d+))"
    r"(?:(?P<suffix>[A-Za-z]{1,2})|[eE](?P<exponent>[+-]?\d+))?$"
)

ZERO = Decimal(0)


def parse_quantity(value: Any) -> Decimal:
    """Parse a Kubernetes quantity into a decimal amount of base units.

    Handles the quantity formats the API server emits:
    - Decimal SI: "100m" -> 0.1, "1k" -> 1000, "1G" -> 1000000000
    - Binary SI: "1Ki" -> 1024, "512Mi" -> 536870912
    - Exponent: "1e3" -> 1000
    - Plain: "1.5" -> 1.5, 2 -> 2

    Args:
        value: Quantity as string or number. ``None`` and "" mean zero.

    Returns:
        The exact amount as ``Decimal``.

    Raises:
        ValueError: If the value is not a valid quantity.
    """
    if value is None:
        return ZERO
    if isinstance(value, bool):
        raise ValueError(f"invalid quantity: {value!r}")
    if isinstance(value, Decimal):
        return value
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, float):
        return Decimal(str(value))

    text = str(value).strip()
    if not text:
        return ZERO

    match = _QUANTITY_PATTERN.match(text)
    if match is None:
        raise ValueError(f"invalid quantity: {value!r}")

    try:
        number = Decimal(match.group("number"))
    except InvalidOperation as exc:
        raise ValueError(f"invalid quantity: {value!r}") from exc

    exponent = match.group("exponent")
    if exponent is not None:
        return number.scaleb(int(exponent))

    suffix = match.group("suffix")
    if not suffix:
        return number

    for known, mult in _BINARY_SUFFIXES:
        if suffix == known:
            return number * mult
    for known, scale in _DECIMAL_SUFFIXES:
        if suffix == known:
            return number * scale

    raise ValueError(f"invalid quantity suffix in {value!r}")


def to_milli_value(quantity: Decimal) -> int:
    """Return the quantity in milli-units, rounded up."""
    return int((quantity * 1000).to_integral_value(rounding=ROUND_CEILING))


def to_value(quantity: Decimal) -> int:
    """Return the quantity in base units, rounded up."""
    return int(quantity.to_integral_value(rounding=ROUND_CEILING))


def cpu_to_millicores(value: Any) -> int:
    """Parse a CPU quantity ("250m", "2") into millicores."""
    return to_milli_value(parse_quantity(value))


def memory_to_bytes(value: Any) -> int:
    """Parse a memory quantity ("512Mi", "8Gi") into bytes."""
    return to_value(parse_quantity(value))


def add_quantities(
    target: dict[str, Decimal], delta: dict[str, Decimal]
) -> dict[str, Decimal]:
    """Add every quantity in ``delta`` into ``target`` in-place.

    Resource names absent from ``target`` start at zero.

    Returns:
        The updated ``target`` mapping.
    """
    for name, amount in delta.items():
        target[name] = target.get(name, ZERO) + amount
    return target
