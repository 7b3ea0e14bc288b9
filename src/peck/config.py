"""Validation configuration.

ValidationConfig is a frozen dataclass: immutable after creation,
IDE-autocompletable, no string-key dict lookups.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ValidationConfig:
    """Controls how ``validate()`` walks fields and rules.

    All fields have sensible defaults. Override what you need::

        config = ValidationConfig(strip=True, skip_missing=True)
        result = validate(form, rules, config=config)
    """

    # Stop a field's chain once ``required`` fails (no point running
    # max_length on an empty string)
    stop_on_required: bool = True

    # Strip surrounding whitespace before validating; cleaned data holds
    # the stripped value
    strip: bool = False

    # Fields absent from the data are not validated at all (PATCH-style
    # partial updates). When False, a missing field is treated as ""
    skip_missing: bool = False
