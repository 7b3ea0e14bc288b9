"""Peck exception hierarchy.

Validation failures are data (messages in a ``ValidationLog``), never
exceptions. The only errors raised are for mistakes in how rules are
defined, and they surface when the rule is built, not when it runs.
"""


class PeckError(Exception):
    """Base for all peck-specific errors."""


class ConfigurationError(PeckError):
    """Raised when a rule or config is defined with invalid parameters.

    Typically raised by a rule factory at import time::

        integer(base=1)  # ConfigurationError: base must be 0 or 2..36
    """
