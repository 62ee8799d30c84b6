"""
Validation outcome types shared by every validator.

A validator never raises for a policy violation; it returns a
ValidationOutcome carrying zero or more Violations. The request layer
aggregates outcomes per field and decides whether to reject the request.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Violation:
    """A single rejected field with an actionable message."""

    field: str
    code: str
    message: str


@dataclass(frozen=True)
class ValidationOutcome:
    """Result of one or more validation checks."""

    violations: tuple[Violation, ...] = ()

    @property
    def valid(self) -> bool:
        return not self.violations

    @classmethod
    def ok(cls) -> ValidationOutcome:
        return cls()

    @classmethod
    def reject(cls, field: str, code: str, message: str) -> ValidationOutcome:
        return cls(violations=(Violation(field=field, code=code, message=message),))

    @classmethod
    def merge(cls, *outcomes: ValidationOutcome) -> ValidationOutcome:
        """Concatenate violations, preserving the order they were produced in."""
        violations: list[Violation] = []
        for outcome in outcomes:
            violations.extend(outcome.violations)
        return cls(violations=tuple(violations))

    def errors_by_field(self) -> dict[str, str]:
        """
        Collapse violations into a field -> message map.

        The first message recorded for a field wins.
        """
        errors: dict[str, str] = {}
        for violation in self.violations:
            errors.setdefault(violation.field, violation.message)
        return errors

    def first(self) -> Violation | None:
        return self.violations[0] if self.violations else None
