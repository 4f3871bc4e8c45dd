"""Error kinds, warnings and validation results for the FHIR R4 codec.

Every structural failure is reported as a :class:`FHIRCodecError`
subclass carrying a machine-readable :class:`ErrorKind` and a structural
path such as ``Bundle.entry[3].resource.valueQuantity.value``.  The
exceptions subclass :class:`ValueError` so callers that only care about
"bad input" can catch that.

Lenient decoding downgrades some kinds to :class:`CodecWarning` records,
and the collecting validator returns a :class:`ValidationResult` instead
of raising.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Sequence


class ErrorKind(str, Enum):
    """Closed set of structural error kinds."""

    UNKNOWN_RESOURCE_TYPE = "unknown-resource-type"
    MISSING_REQUIRED_FIELD = "missing-required-field"
    WRONG_TYPE = "wrong-type"
    AMBIGUOUS_CHOICE = "ambiguous-choice"
    INVALID_ENUMERATION = "invalid-enumeration"
    CARDINALITY_VIOLATION = "cardinality-violation"
    UNKNOWN_FIELD = "unknown-field"
    RECURSION_TOO_DEEP = "recursion-too-deep"
    MALFORMED_JSON = "malformed-json"

    def __str__(self) -> str:
        return self.value


class FHIRCodecError(ValueError):
    """Base class for all codec errors."""

    kind: ErrorKind

    def __init__(self, path: str, detail: str) -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"{self.kind.value} at {path}: {detail}")


class UnknownResourceTypeError(FHIRCodecError):
    kind = ErrorKind.UNKNOWN_RESOURCE_TYPE

    def __init__(self, name: str, path: str) -> None:
        self.name = name
        super().__init__(path, f"unknown resource type {name!r}")


class MissingRequiredFieldError(FHIRCodecError):
    kind = ErrorKind.MISSING_REQUIRED_FIELD

    def __init__(self, path: str, detail: str = "missing required field") -> None:
        super().__init__(path, detail)


class WrongTypeError(FHIRCodecError):
    kind = ErrorKind.WRONG_TYPE

    def __init__(self, path: str, expected: str, actual: str) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(path, f"expected {expected}, got {actual}")


class AmbiguousChoiceError(FHIRCodecError):
    kind = ErrorKind.AMBIGUOUS_CHOICE

    def __init__(self, path: str, variants: Sequence[str]) -> None:
        self.variants = list(variants)
        super().__init__(
            path, f"more than one variant present: {', '.join(self.variants)}"
        )


class InvalidEnumerationError(FHIRCodecError):
    kind = ErrorKind.INVALID_ENUMERATION

    def __init__(self, path: str, value: Any, allowed: Sequence[str]) -> None:
        self.value = value
        self.allowed = tuple(allowed)
        super().__init__(
            path, f"{value!r} is not one of {', '.join(self.allowed)}"
        )


class CardinalityViolationError(FHIRCodecError):
    kind = ErrorKind.CARDINALITY_VIOLATION

    def __init__(self, path: str, actual_count: int, bound: str) -> None:
        self.actual_count = actual_count
        self.bound = bound
        if actual_count == 0:
            detail = "required non-empty list empty"
        else:
            detail = f"found {actual_count} value(s), allowed {bound}"
        super().__init__(path, detail)


class UnknownFieldError(FHIRCodecError):
    kind = ErrorKind.UNKNOWN_FIELD

    def __init__(self, path: str) -> None:
        super().__init__(path, "unknown field")


class RecursionTooDeepError(FHIRCodecError):
    kind = ErrorKind.RECURSION_TOO_DEEP

    def __init__(self, path: str, limit: int, detail: Optional[str] = None) -> None:
        self.limit = limit
        super().__init__(path, detail or f"nesting exceeds limit {limit}")


class MalformedJSONError(FHIRCodecError):
    kind = ErrorKind.MALFORMED_JSON

    def __init__(
        self,
        offset: Optional[int],
        reason: str,
        path: Optional[str] = None,
    ) -> None:
        self.offset = offset
        self.reason = reason
        where = "$" if offset is None else f"offset {offset}"
        if path is not None:
            super().__init__(path, f"{reason} ({where})")
        else:
            super().__init__(where, reason)


# ── Non-fatal findings ────────────────────────────────────────────


@dataclass
class CodecWarning:
    """A finding that lenient mode retained instead of rejecting."""

    path: str
    kind: str
    message: str


@dataclass
class ValidationResult:
    """Outcome of a collecting validation run.

    Attributes:
        valid:    True when no errors were found.
        errors:   Every structural error, in discovery order.
        warnings: Lenient-mode findings and advisory notes.
    """

    valid: bool
    errors: list[FHIRCodecError] = field(default_factory=list)
    warnings: list[CodecWarning] = field(default_factory=list)

    def to_operation_outcome(self, registry: Any = None) -> Any:
        """Render this result as an ``OperationOutcome`` resource node.

        Errors become ``severity=error`` issues, warnings become
        ``severity=warning`` issues; each issue carries the structural
        path in ``expression``.  A clean result yields a single
        ``informational`` issue, since OperationOutcome requires at least
        one.
        """
        from fhir_codec.registry import default_registry

        reg = registry if registry is not None else default_registry()
        outcome_cls = reg.resource_class("OperationOutcome")
        issue_cls = reg.datatype_class("OperationOutcome.issue")

        issues = []
        for err in self.errors:
            issues.append(issue_cls(
                severity="error",
                code=_ISSUE_CODES.get(err.kind.value, "structure"),
                diagnostics=err.detail,
                expression=[err.path],
            ))
        for warning in self.warnings:
            issues.append(issue_cls(
                severity="warning",
                code=_ISSUE_CODES.get(warning.kind, "informational"),
                diagnostics=warning.message,
                expression=[warning.path],
            ))
        if not issues:
            issues.append(issue_cls(
                severity="information",
                code="informational",
                diagnostics="No issues detected",
            ))
        return outcome_cls(issue=issues)


# FHIR issue-type codes (http://hl7.org/fhir/issue-type) per error kind.
_ISSUE_CODES: dict[str, str] = {
    "unknown-resource-type": "not-supported",
    "missing-required-field": "required",
    "wrong-type": "value",
    "ambiguous-choice": "structure",
    "invalid-enumeration": "code-invalid",
    "cardinality-violation": "structure",
    "unknown-field": "structure",
    "recursion-too-deep": "too-costly",
    "malformed-json": "invalid",
    "duplicate-id": "duplicate",
}
