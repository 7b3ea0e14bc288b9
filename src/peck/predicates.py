"""Format predicates: pure, total checks on string input.

Each predicate has the shape::

    def is_something(value: str, *params) -> bool: ...

Predicates never raise. Anything the underlying parser rejects
(``strptime``, ``urlsplit``, ``int``, ``float``) comes back as ``False``,
and so does a value that is not a ``str`` at all. No detail about *why*
a value failed is kept: a predicate answers "does it satisfy the
constraint?" and nothing more. Attach the human-readable reason when
recording the outcome::

    from peck.log import check
    from peck.predicates import is_in_char_limit

    errors = check(errors, "name", is_in_char_limit(name, 1, 50),
                   "Must be between 1 and 50 characters")
"""

import math
import re
import struct
from collections.abc import Callable, Iterable
from datetime import UTC, datetime
from typing import TypeAlias
from urllib.parse import urlsplit

Clock: TypeAlias = Callable[[], datetime]


def utcnow() -> datetime:
    """Current instant as an aware UTC datetime."""
    return datetime.now(UTC)


# ---------------------------------------------------------------------------
# Membership & length
# ---------------------------------------------------------------------------


def is_member(value: str, candidates: Iterable[str]) -> bool:
    """True if *value* equals one of *candidates* exactly.

    Comparison is plain string equality: no case folding, no stripping.
    An empty collection never matches.
    """
    if not isinstance(value, str):
        return False
    return any(value == candidate for candidate in candidates)


def is_in_char_limit(value: str, minimum: int, maximum: int) -> bool:
    """True if the code point count of *value* is within ``[minimum, maximum]``.

    Counts characters, not encoded bytes, so ``"héllo"`` is five long.
    """
    if not isinstance(value, str):
        return False
    return minimum <= len(value) <= maximum


# ---------------------------------------------------------------------------
# Time
# ---------------------------------------------------------------------------


def _parse_time(value: object, layout: object) -> datetime | None:
    if not isinstance(value, str) or not isinstance(layout, str):
        return None
    try:
        return datetime.strptime(value, layout)
    except (ValueError, TypeError):
        return None


def _parse_utc(value: object, layout: object) -> datetime | None:
    parsed = _parse_time(value, layout)
    if parsed is None:
        return None
    # Naive values carry no zone information; read them as UTC
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=UTC)
    try:
        return parsed.astimezone(UTC)
    except OverflowError:
        return None


def _now(clock: Clock) -> datetime:
    now = clock()
    if now.tzinfo is None:
        return now.replace(tzinfo=UTC)
    return now.astimezone(UTC)


def is_time(value: str, layout: str) -> bool:
    """True if *value* parses with ``datetime.strptime(value, layout)``.

    *layout* uses the ``strftime`` directive language, e.g. ``"%Y-%m-%d"``
    or ``"%Y-%m-%dT%H:%M:%S%z"``. A mismatching value and a malformed
    layout are both ``False``.
    """
    return _parse_time(value, layout) is not None


def is_time_past(value: str, layout: str, *, clock: Clock = utcnow) -> bool:
    """True if *value* parses per *layout* and lies strictly before now.

    The parsed instant is normalized to UTC (naive values are taken to
    be UTC already) and compared against ``clock()``, read fresh on
    every call. Results near the boundary depend on when you ask.
    """
    parsed = _parse_utc(value, layout)
    if parsed is None:
        return False
    return parsed < _now(clock)


def is_time_future(value: str, layout: str, *, clock: Clock = utcnow) -> bool:
    """True if *value* parses per *layout* and lies strictly after now.

    Mirror of ``is_time_past``; for one instant the two are never both true.
    """
    parsed = _parse_utc(value, layout)
    if parsed is None:
        return False
    return parsed > _now(clock)


# ---------------------------------------------------------------------------
# URL
# ---------------------------------------------------------------------------

# RFC 3986 scheme: ALPHA *( ALPHA / DIGIT / "+" / "-" / "." )
_SCHEME_RE = re.compile(r"[A-Za-z][A-Za-z0-9+.\-]*")

# RFC 3986 port: *DIGIT, no range limit
_PORT_RE = re.compile(r"[0-9]*")

# A "%" not followed by two hex digits
_BAD_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def is_url(value: str) -> bool:
    """True if *value* is a syntactically valid request URI.

    Accepted forms:

    - absolute URI with a scheme: ``https://example.com/a?b=1``,
      ``mailto:someone@example.com``
    - absolute path: ``/search?q=peck``
    - the asterisk form: ``*``

    Relative references that do not start with ``/`` (``example.com``,
    ``../up``) are rejected, as is anything containing whitespace or
    control characters.

    Examples::

        >>> is_url("https://example.com")
        True
        >>> is_url("/dashboard")
        True
        >>> is_url("not a url")
        False
    """
    if not value or not isinstance(value, str):
        return False
    if any(ch.isspace() or ord(ch) < 0x20 or ord(ch) == 0x7F for ch in value):
        return False
    if value == "*":
        return True

    rest = value
    if not value.startswith("/"):
        scheme, sep, rest = value.partition(":")
        if not sep or not _SCHEME_RE.fullmatch(scheme):
            return False

    # Opaque forms (mailto:...) are kept raw; only authority and path
    # forms decode their escapes, and never in the query
    if rest.startswith("/") and _BAD_ESCAPE_RE.search(rest.partition("?")[0]):
        return False

    try:
        parts = urlsplit(value)
    except ValueError:
        return False
    return _PORT_RE.fullmatch(_port_of(parts.netloc)) is not None


def _port_of(netloc: str) -> str:
    """The text after the host's port colon, or "" when there is none."""
    hostinfo = netloc.rpartition("@")[2]
    if hostinfo.startswith("["):
        after = hostinfo.partition("]")[2]
        return after[1:] if after.startswith(":") else after
    return hostinfo.rpartition(":")[2] if ":" in hostinfo else ""


# ---------------------------------------------------------------------------
# Boolean
# ---------------------------------------------------------------------------

_TRUE_LITERALS = frozenset({"1", "t", "true", "y", "yes", "on"})
_FALSE_LITERALS = frozenset({"0", "f", "false", "n", "no", "off"})


def is_bool(value: str) -> bool:
    """True if *value* is a recognised boolean literal (case-insensitive).

    Accepts ``1 t true y yes on`` and ``0 f false n no off``.
    """
    if not isinstance(value, str):
        return False
    lowered = value.lower()
    return lowered in _TRUE_LITERALS or lowered in _FALSE_LITERALS


# ---------------------------------------------------------------------------
# Numbers
# ---------------------------------------------------------------------------

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
_RADIX_PREFIXES = {"b": 2, "o": 8, "x": 16}

# Single underscores between digits
_GROUPED_RE = re.compile(r"[^_](?:_?[^_])*")
# Same, but one underscore may also follow a radix prefix
_PREFIXED_GROUPED_RE = re.compile(r"_?[^_](?:_?[^_])*")

_DEC = r"\d(?:_?\d)*"
_HEX = r"[0-9a-fA-F](?:_?[0-9a-fA-F])*"
_DECIMAL_FLOAT_RE = re.compile(
    rf"[+-]?(?:{_DEC}\.?(?:{_DEC})?|\.{_DEC})(?:[eE][+-]?{_DEC})?",
    re.ASCII,
)
_HEX_FLOAT_RE = re.compile(
    rf"[+-]?0[xX](?:_?{_HEX}\.?(?:{_HEX})?|\.{_HEX})[pP][+-]?{_DEC}",
    re.ASCII,
)
_SPECIAL_FLOAT_RE = re.compile(r"[+-]?inf(?:inity)?|nan", re.IGNORECASE)


def _bit_width(bit_size: int) -> int | None:
    """Resolve an integer bit size; 0 means 64. None if unsupported."""
    if not isinstance(bit_size, int):
        return None
    if bit_size == 0:
        return 64
    if 0 < bit_size <= 64:
        return bit_size
    return None


def _parse_magnitude(digits: str, base: int) -> int | None:
    """Parse an unsigned integer literal, or None if it is malformed.

    Base 0 infers the radix from a prefix (``0x``, ``0o``, ``0b``, or a
    bare leading ``0`` for octal) and allows single underscores between
    digits, or right after a prefix. Explicit bases accept plain digits only.
    """
    if not digits or not digits.isascii() or not isinstance(base, int):
        return None

    if base == 0:
        base = 10
        prefixed = digits[0] == "0"
        if prefixed:
            radix = _RADIX_PREFIXES.get(digits[1:2].lower())
            if len(digits) >= 3 and radix is not None:
                base, digits = radix, digits[2:]
            else:
                base, digits = 8, digits[1:]
        if "_" in digits:
            grouped = _PREFIXED_GROUPED_RE if prefixed else _GROUPED_RE
            if not grouped.fullmatch(digits):
                return None
            digits = digits.replace("_", "")
        if not digits:
            # The literal was a lone "0"
            return 0
    elif not 2 <= base <= 36:
        return None

    allowed = _DIGITS[:base]
    if not digits or any(ch not in allowed for ch in digits.lower()):
        return None
    return int(digits, base)


def is_int(value: str, base: int = 10, bit_size: int = 64) -> bool:
    """True if *value* is a signed integer literal that fits in *bit_size* bits.

    *base* is 2..36, or 0 to infer it from a radix prefix. One leading
    ``+`` or ``-`` is allowed. Decimal points, surrounding whitespace,
    digits outside the base, and values outside
    ``[-2**(bit_size-1), 2**(bit_size-1))`` are all ``False``.
    """
    width = _bit_width(bit_size)
    if width is None or not value or not isinstance(value, str):
        return False

    negative = value[0] == "-"
    digits = value[1:] if value[0] in "+-" else value
    magnitude = _parse_magnitude(digits, base)
    if magnitude is None:
        return False

    cutoff = 1 << (width - 1)
    if negative:
        return magnitude <= cutoff
    return magnitude < cutoff


def is_uint(value: str, base: int = 10, bit_size: int = 64) -> bool:
    """True if *value* is an unsigned integer literal that fits in *bit_size* bits.

    Same rules as ``is_int``, except that any sign character, including
    an explicit ``+``, fails.
    """
    width = _bit_width(bit_size)
    if width is None or not value or not isinstance(value, str):
        return False
    if value[0] in "+-":
        return False

    magnitude = _parse_magnitude(value, base)
    if magnitude is None:
        return False
    return magnitude < (1 << width)


def is_float(value: str, bit_size: int = 64) -> bool:
    """True if *value* is a float literal representable in *bit_size* bits.

    *bit_size* is 32 (single precision) or 64 (double precision). Accepts
    decimal literals (``3.14``, ``.5``, ``1e-3``), hex literals with a
    binary exponent (``0x1.8p1``), ``inf``/``infinity`` with an optional
    sign, and ``nan``. Single underscores may separate digits
    (``1_000.5``). A finite literal too large for the width is
    ``False``; one too small rounds to zero and is accepted.
    """
    if bit_size not in (32, 64) or not isinstance(value, str):
        return False
    if _SPECIAL_FLOAT_RE.fullmatch(value):
        return True

    if _HEX_FLOAT_RE.fullmatch(value):
        parse = float.fromhex
    elif _DECIMAL_FLOAT_RE.fullmatch(value):
        parse = float
    else:
        return False

    try:
        number = parse(value.replace("_", ""))
        if math.isinf(number):
            return False
        if bit_size == 32:
            # Raises once the value rounds past the float32 maximum
            struct.pack(">f", number)
    except (OverflowError, ValueError):
        return False
    return True
