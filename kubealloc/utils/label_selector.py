"""Label selector parsing for node filtering.

Supports the equality-based selector grammar:
- ``key=value`` and ``key==value`` (equals)
- ``key!=value`` (not equals)
- Comma-separated terms are ANDed together

The parsed selector is validated and normalized, then handed to kubectl
as-is. No filtering happens client side.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from kubealloc.constants.limits import LABEL_NAME_MAX_LENGTH, LABEL_PREFIX_MAX_LENGTH
from kubealloc.errors import InvalidSelectorError

# Longest operators first so "!=" and "==" are not split on "=".
_OPERATORS: tuple[str, ...] = ("!=", "==", "=")

_LABEL_NAME_PATTERN = re.compile(r"^[A-Za-z0-9]([-A-Za-z0-9_.]*[A-Za-z0-9])?$")
_DNS_SUBDOMAIN_PATTERN = re.compile(
    r"^[a-z0-9]([-a-z0-9]*[a-z0-9])?(\.[a-z0-9]([-a-z0-9]*[a-z0-9])?)*$"
)


@dataclass(frozen=True)
class SelectorRequirement:
    """A single ``key<op>value`` term."""

    key: str
    operator: str
    value: str

    def __str__(self) -> str:
        return f"{self.key}{self.operator}{self.value}"


@dataclass(frozen=True)
class LabelSelector:
    """Conjunction of selector requirements."""

    requirements: tuple[SelectorRequirement, ...] = ()

    @property
    def is_empty(self) -> bool:
        """True when the selector matches every node."""
        return not self.requirements

    def __str__(self) -> str:
        return ",".join(str(requirement) for requirement in self.requirements)


def _validate_key(key: str, term: str) -> None:
    if not key:
        raise InvalidSelectorError(f"invalid selector term {term!r}: empty key")

    prefix, _, name = key.rpartition("/")
    if "/" in key and not prefix:
        raise InvalidSelectorError(f"invalid selector term {term!r}: empty key prefix")
    if prefix and (
        len(prefix) > LABEL_PREFIX_MAX_LENGTH
        or not _DNS_SUBDOMAIN_PATTERN.match(prefix)
    ):
        raise InvalidSelectorError(
            f"invalid selector term {term!r}: key prefix {prefix!r} is not a DNS subdomain"
        )
    if len(name) > LABEL_NAME_MAX_LENGTH or not _LABEL_NAME_PATTERN.match(name):
        raise InvalidSelectorError(
            f"invalid selector term {term!r}: {name!r} is not a valid label name"
        )


def _validate_value(value: str, term: str) -> None:
    if not value:
        return
    if len(value) > LABEL_NAME_MAX_LENGTH or not _LABEL_NAME_PATTERN.match(value):
        raise InvalidSelectorError(
            f"invalid selector term {term!r}: {value!r} is not a valid label value"
        )


def _parse_term(term: str) -> SelectorRequirement:
    for operator in _OPERATORS:
        index = term.find(operator)
        if index < 0:
            continue
        key = term[:index].strip()
        value = term[index + len(operator):].strip()
        _validate_key(key, term)
        _validate_value(value, term)
        # "==" is an alias of "="
        return SelectorRequirement(
            key=key,
            operator="!=" if operator == "!=" else "=",
            value=value,
        )
    raise InvalidSelectorError(
        f"invalid selector term {term!r}: expected key=value, key==value or key!=value"
    )


def parse_label_selector(expression: str | None) -> LabelSelector:
    """Parse a label selector expression.

    Args:
        expression: Selector such as ``"role=worker,zone!=us-east-1a"``.
            ``None`` or an empty string selects everything.

    Returns:
        The parsed, normalized LabelSelector.

    Raises:
        InvalidSelectorError: If any term cannot be parsed.
    """
    if expression is None:
        return LabelSelector()
    if not isinstance(expression, str):
        raise InvalidSelectorError(f"selector must be a string, got {type(expression).__name__}")

    requirements: list[SelectorRequirement] = []
    for raw_term in expression.split(","):
        term = raw_term.strip()
        if not term:
            continue
        requirements.append(_parse_term(term))
    return LabelSelector(requirements=tuple(requirements))
