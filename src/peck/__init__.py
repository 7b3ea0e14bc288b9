"""Peck: small predicates and a failure log for validating form fields.

Usage::

    from peck import validate, required, max_length, integer

    result = validate(form, {
        "title": [required, max_length(200)],
        "age": [required, integer(bit_size=8)],
    })
    if not result:
        return render("form.html", form=form, errors=result.errors)
    # result.data has cleaned values

Or compose predicates by hand and record outcomes yourself::

    from peck import ValidationLog, Rule
    from peck.predicates import is_time_future

    log = ValidationLog()
    log.check("starts", Rule(is_time_future(starts, "%Y-%m-%d"), "Must be in the future"))
"""

import logging
from collections.abc import Mapping

from peck.config import ValidationConfig
from peck.errors import ConfigurationError, PeckError
from peck.log import Rule, ValidationLog, check
from peck.result import ValidationResult
from peck.rules import (
    Validator,
    boolean,
    char_limit,
    future,
    integer,
    matches,
    max_length,
    min_length,
    number,
    one_of,
    past,
    required,
    time_format,
    unsigned,
    url,
)

__version__ = "0.1.0-dev"
__all__ = [
    "ConfigurationError",
    "PeckError",
    "Rule",
    "ValidationConfig",
    "ValidationLog",
    "ValidationResult",
    "Validator",
    "boolean",
    "char_limit",
    "check",
    "future",
    "integer",
    "matches",
    "max_length",
    "min_length",
    "number",
    "one_of",
    "past",
    "required",
    "time_format",
    "unsigned",
    "url",
    "validate",
]

logger = logging.getLogger("peck.validate")

_DEFAULT_CONFIG = ValidationConfig()


def validate(
    data: Mapping[str, str],
    rules: dict[str, list[Validator]],
    *,
    config: ValidationConfig | None = None,
) -> ValidationResult:
    """Validate data against a set of rules.

    Args:
        data: Any mapping of field names to string values, such as a
            parsed form, query parameters, or a plain ``dict``.
        rules: A dict mapping field names to lists of validator
            functions. Each validator returns an error message string
            on failure, or ``None`` on success.
        config: Optional ``ValidationConfig``; defaults apply otherwise.

    Returns:
        A ``ValidationResult`` with ``.data`` (cleaned values) and
        ``.errors`` (field -> list of error messages).

    Example::

        result = validate(form, {
            "title": [required, max_length(200)],
            "body": [required, min_length(10)],
        })
        if not result:
            # result.errors == {"body": ["Must be at least 10 characters"]}
            ...
    """
    config = config or _DEFAULT_CONFIG
    log = ValidationLog()
    cleaned: dict[str, str] = {}

    for field_name, validators in rules.items():
        if config.skip_missing and field_name not in data:
            continue

        value = data.get(field_name) or ""
        if config.strip:
            value = value.strip()

        for validator in validators:
            error = validator(value)
            if error is None:
                continue
            log.add(field_name, error)
            if config.stop_on_required and validator is required:
                break

        if field_name not in log:
            cleaned[field_name] = value

    logger.debug(
        "validated %d field(s): %d failed",
        len(rules),
        len(log),
    )
    return log.result(cleaned)
