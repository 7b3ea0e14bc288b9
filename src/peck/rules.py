"""Built-in validation rules for ``validate()``.

Each validator is a callable with the signature::

    def rule(value: str) -> str | None:
        '''Return error message, or None if valid.'''

Parameterized validators are factory functions that return a validator,
built on the predicates in ``peck.predicates``::

    def max_length(n: int) -> Callable[[str], str | None]:
        def check(value: str) -> str | None:
            if not is_in_char_limit(value, 0, n):
                return f"Must be at most {n} characters"
            return None
        return check

Factories check their own parameters and raise ``ConfigurationError``
when a rule is defined with impossible settings, so mistakes surface at
import time rather than on the first request.

Custom validators follow the same protocol: any callable matching
``(str) -> str | None`` works with ``validate()``.
"""

import re
import sys
from collections.abc import Callable
from typing import TypeAlias

from peck.errors import ConfigurationError
from peck.predicates import (
    Clock,
    is_bool,
    is_float,
    is_in_char_limit,
    is_int,
    is_member,
    is_time,
    is_time_future,
    is_time_past,
    is_uint,
    is_url,
    utcnow,
)

# Type alias for a validator function
Validator: TypeAlias = Callable[[str], str | None]


# ---------------------------------------------------------------------------
# Presence
# ---------------------------------------------------------------------------


def required(value: str) -> str | None:
    """Field must be present and non-empty."""
    if not value or not value.strip():
        return "This field is required"
    return None


# ---------------------------------------------------------------------------
# Length
# ---------------------------------------------------------------------------


def char_limit(minimum: int, maximum: int, message: str | None = None) -> Validator:
    """String must be between *minimum* and *maximum* characters, inclusive."""
    if minimum < 0 or minimum > maximum:
        raise ConfigurationError(
            f"char_limit() needs 0 <= minimum <= maximum, got {minimum}..{maximum}"
        )

    def check(value: str) -> str | None:
        if not is_in_char_limit(value, minimum, maximum):
            if message is None:
                return f"Must be between {minimum} and {maximum} characters"
            return message
        return None

    return check


def max_length(n: int) -> Validator:
    """String must be at most *n* characters."""
    if n < 0:
        raise ConfigurationError(f"max_length() needs n >= 0, got {n}")

    def check(value: str) -> str | None:
        if not is_in_char_limit(value, 0, n):
            return f"Must be at most {n} characters"
        return None

    return check


def min_length(n: int) -> Validator:
    """String must be at least *n* characters."""
    if n < 0:
        raise ConfigurationError(f"min_length() needs n >= 0, got {n}")

    def check(value: str) -> str | None:
        if not is_in_char_limit(value, n, sys.maxsize):
            return f"Must be at least {n} characters"
        return None

    return check


# ---------------------------------------------------------------------------
# Format
# ---------------------------------------------------------------------------


def url(value: str) -> str | None:
    """Value must be a valid request URI (absolute URL or absolute path)."""
    if not is_url(value):
        return "Must be a valid URL"
    return None


def matches(pattern: str, message: str | None = None) -> Validator:
    """Value must match the given regex pattern."""
    try:
        compiled = re.compile(pattern)
    except re.error as exc:
        raise ConfigurationError(f"matches() got an invalid pattern {pattern!r}: {exc}") from exc

    def check(value: str) -> str | None:
        if not compiled.match(value):
            return f"Must match pattern: {pattern}" if message is None else message
        return None

    return check


# ---------------------------------------------------------------------------
# Time
# ---------------------------------------------------------------------------


def _require_layout(factory: str, layout: str) -> None:
    if not isinstance(layout, str) or not layout:
        raise ConfigurationError(f"{factory}() needs a strftime layout, got {layout!r}")


def time_format(layout: str, message: str | None = None) -> Validator:
    """Value must parse as a date/time with *layout* (``strftime`` directives)."""
    _require_layout("time_format", layout)

    def check(value: str) -> str | None:
        if not is_time(value, layout):
            if message is None:
                return f"Must be a date/time in the format {layout}"
            return message
        return None

    return check


def past(layout: str, message: str | None = None, *, clock: Clock = utcnow) -> Validator:
    """Value must parse with *layout* and lie before the current time."""
    _require_layout("past", layout)

    def check(value: str) -> str | None:
        if not is_time_past(value, layout, clock=clock):
            return "Must be in the past" if message is None else message
        return None

    return check


def future(layout: str, message: str | None = None, *, clock: Clock = utcnow) -> Validator:
    """Value must parse with *layout* and lie after the current time."""
    _require_layout("future", layout)

    def check(value: str) -> str | None:
        if not is_time_future(value, layout, clock=clock):
            return "Must be in the future" if message is None else message
        return None

    return check


# ---------------------------------------------------------------------------
# Choice
# ---------------------------------------------------------------------------


def one_of(*choices: str, message: str | None = None) -> Validator:
    """Value must be exactly one of the given choices."""
    if not choices:
        raise ConfigurationError("one_of() needs at least one choice")
    allowed = frozenset(choices)

    def check(value: str) -> str | None:
        if not is_member(value, allowed):
            options = ", ".join(sorted(allowed))
            return f"Must be one of: {options}" if message is None else message
        return None

    return check


# ---------------------------------------------------------------------------
# Type coercion
# ---------------------------------------------------------------------------


def _require_int_params(factory: str, base: int, bit_size: int) -> None:
    if base != 0 and not 2 <= base <= 36:
        raise ConfigurationError(f"{factory}() base must be 0 or 2..36, got {base}")
    if not 0 <= bit_size <= 64:
        raise ConfigurationError(f"{factory}() bit_size must be 0..64, got {bit_size}")


def boolean(value: str) -> str | None:
    """Value must be a boolean literal (true/false, yes/no, on/off, 1/0, ...)."""
    if not is_bool(value):
        return "Must be true or false"
    return None


def integer(base: int = 10, bit_size: int = 64, message: str | None = None) -> Validator:
    """Value must be a whole number in *base* that fits in *bit_size* signed bits."""
    _require_int_params("integer", base, bit_size)

    def check(value: str) -> str | None:
        if not is_int(value, base, bit_size):
            return "Must be a whole number" if message is None else message
        return None

    return check


def unsigned(base: int = 10, bit_size: int = 64, message: str | None = None) -> Validator:
    """Value must be a whole number with no sign that fits in *bit_size* bits."""
    _require_int_params("unsigned", base, bit_size)

    def check(value: str) -> str | None:
        if not is_uint(value, base, bit_size):
            return "Must be a non-negative whole number" if message is None else message
        return None

    return check


def number(bit_size: int = 64, message: str | None = None) -> Validator:
    """Value must be a valid number (int or float) representable in *bit_size* bits."""
    if bit_size not in (32, 64):
        raise ConfigurationError(f"number() bit_size must be 32 or 64, got {bit_size}")

    def check(value: str) -> str | None:
        if not is_float(value, bit_size):
            return "Must be a number" if message is None else message
        return None

    return check
