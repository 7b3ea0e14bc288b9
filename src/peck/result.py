"""Validation result: a frozen snapshot of a finished ``ValidationLog``."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """What a validation session ended with, detached from its log.

    Built by ``ValidationLog.result()`` (and so by ``validate()``). Later
    writes to the log do not reach it. Falsy when any field failed::

        result = validate(form, rules)
        if not result:
            return render("form.html", form=form, errors=result.errors)

    ``data`` holds the cleaned values of the fields that passed.
    ``errors`` keeps each failing field's messages in the order they
    were recorded, empty messages included.
    """

    data: dict[str, str]
    errors: dict[str, list[str]]

    @property
    def is_valid(self) -> bool:
        """True if no field recorded a failure."""
        return not self.errors

    def messages(self, field: str) -> list[str]:
        """Messages recorded for *field* in order (a copy), or an empty list."""
        return list(self.errors.get(field, ()))

    def __bool__(self) -> bool:
        return self.is_valid

    def __repr__(self) -> str:
        if self.is_valid:
            return f"ValidationResult(valid, {len(self.data)} field(s))"
        failed = ", ".join(f"{name}={len(msgs)}" for name, msgs in self.errors.items())
        return f"ValidationResult(invalid: {failed})"
