"""Validation log: failure messages accumulated per field.

Two ways to record outcomes, same underlying shape
(``dict[str, list[str]]``, field name to messages in the order recorded).

Free function, thread the dict through each call::

    errors = None
    errors = check(errors, "name", name != "", "Name cannot be blank")
    errors = check(errors, "name", is_in_char_limit(name, 2, 50), "Too short")

Accumulator object, several already-evaluated rules per call::

    log = ValidationLog()
    log.check(
        "age",
        Rule(is_int(age), "Must be a whole number"),
        Rule(age != "0", "Must not be zero"),
    )
    if not log.ok:
        ...

Neither form runs predicates. The caller evaluates, the log records.
"""

import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from peck.result import ValidationResult

logger = logging.getLogger("peck.log")


@dataclass(frozen=True, slots=True)
class Rule:
    """One already-evaluated check: its outcome and the message to record on failure."""

    ok: bool
    message: str


def check(
    errors: dict[str, list[str]] | None,
    field: str,
    ok: bool,
    message: str,
) -> dict[str, list[str]]:
    """Record the outcome of one check for *field*.

    If *ok* is false, *message* is appended to ``errors[field]``; empty
    messages are recorded like any other. If *errors* is ``None`` a new
    dict is allocated, so the return value must be kept, usually in
    the same variable::

        errors = None
        errors = check(errors, "name", True, "not recorded")
        errors = check(errors, "name", False, "required")
        # errors == {"name": ["required"]}

    Returns:
        The updated dict (the same object when one was passed in).
    """
    if errors is None:
        errors = {}
    if not ok:
        errors.setdefault(field, []).append(message)
        logger.debug("check failed for %r: %s", field, message)
    return errors


class ValidationLog:
    """Accumulates failure messages per field for one validation session.

    A fresh log is valid. Recording a failure makes it invalid for good:
    messages are only ever appended, never retracted. The log is falsy
    when invalid, like ``ValidationResult``.

    A log belongs to a single session (one request, one form submission)
    and must not be shared. To validate fields independently, give each
    its own log and fold them together with ``merge()``.
    """

    __slots__ = ("_errors",)

    def __init__(self) -> None:
        self._errors: dict[str, list[str]] = {}

    def check(self, field: str, *rules: Rule) -> None:
        """Append the message of every failing rule to *field*, in rule order.

        Passing rules are ignored. Repeated calls for the same field
        extend its list.
        """
        for rule in rules:
            if not rule.ok:
                self.add(field, rule.message)

    def add(self, field: str, message: str) -> None:
        """Record an unconditional failure for *field*."""
        self._errors.setdefault(field, []).append(message)
        logger.debug("check failed for %r: %s", field, message)

    def merge(self, other: "ValidationLog | Mapping[str, Iterable[str]]") -> None:
        """Append every message from *other*, field by field, preserving order.

        Accepts another log or a plain ``field -> messages`` mapping, such
        as the dict built up with ``check()``.
        """
        source = other.errors if isinstance(other, ValidationLog) else other
        # Snapshot first: merging a log into itself must not chase its own appends
        snapshot = [(field, list(messages)) for field, messages in source.items()]
        for field, messages in snapshot:
            for message in messages:
                self.add(field, message)

    @property
    def errors(self) -> Mapping[str, list[str]]:
        """Read-only view of the recorded messages, keyed by field."""
        return MappingProxyType(self._errors)

    def messages(self, field: str) -> list[str]:
        """Messages recorded for *field* (a copy), or an empty list."""
        return list(self._errors.get(field, ()))

    @property
    def ok(self) -> bool:
        """True if no failure has been recorded."""
        return not self._errors

    @property
    def is_valid(self) -> bool:
        """Alias for ``ok``, matching ``ValidationResult.is_valid``."""
        return self.ok

    def result(self, data: Mapping[str, str] | None = None) -> ValidationResult:
        """Freeze the log into a ``ValidationResult``.

        Fields of *data* with no recorded failure become the cleaned data.
        """
        cleaned = {
            name: value
            for name, value in (data or {}).items()
            if name not in self._errors
        }
        errors = {name: list(messages) for name, messages in self._errors.items()}
        return ValidationResult(data=cleaned, errors=errors)

    def __bool__(self) -> bool:
        return self.ok

    def __contains__(self, field: object) -> bool:
        return field in self._errors

    def __iter__(self) -> Iterator[str]:
        return iter(self._errors)

    def __len__(self) -> int:
        return len(self._errors)

    def __repr__(self) -> str:
        return f"ValidationLog({self._errors!r})"
