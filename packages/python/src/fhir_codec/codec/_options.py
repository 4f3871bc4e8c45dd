"""Codec configuration."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any, Optional


@dataclass(frozen=True)
class CodecOptions:
    """Policy knobs for one encode or decode call.

    Attributes:
        strict_unknown_fields: Reject JSON keys the shape does not declare
            (otherwise drop them with a warning).
        strict_enumerations: Reject codes outside a required binding
            (otherwise keep them verbatim with a warning).
        strict_resource_types: Reject unknown ``resourceType`` values
            (otherwise keep the object as an :class:`OpaqueResource`).
        max_recursion_depth: How many times one shape may nest inside
            itself (``CodeSystem.concept`` in ``CodeSystem.concept`` ...).
        max_document_depth: Overall object nesting limit.
        preserve_decimal_precision: Carry ``decimal`` values as
            :class:`decimal.Decimal` instead of ``float``.
    """

    strict_unknown_fields: bool = True
    strict_enumerations: bool = True
    strict_resource_types: bool = True
    max_recursion_depth: int = 64
    max_document_depth: int = 512
    preserve_decimal_precision: bool = True

    def __post_init__(self) -> None:
        for name in ("max_recursion_depth", "max_document_depth"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")
        for name in (
            "strict_unknown_fields",
            "strict_enumerations",
            "strict_resource_types",
            "preserve_decimal_precision",
        ):
            if not isinstance(getattr(self, name), bool):
                raise TypeError(f"{name} must be a bool")

    def merged(self, **overrides: Any) -> "CodecOptions":
        """Return a copy with *overrides* applied.

        Raises:
            TypeError: On an unknown option name.
        """
        known = {f.name for f in fields(self)}
        unknown = set(overrides) - known
        if unknown:
            raise TypeError(f"Unknown codec option(s): {', '.join(sorted(unknown))}")
        return replace(self, **overrides) if overrides else self


DEFAULT_OPTIONS = CodecOptions()

LENIENT_OPTIONS = CodecOptions(
    strict_unknown_fields=False,
    strict_enumerations=False,
    strict_resource_types=False,
)


def resolve_options(
    options: Optional[CodecOptions],
    overrides: dict[str, Any],
) -> CodecOptions:
    """Merge per-call keyword overrides over *options* (or the defaults)."""
    base = options if options is not None else DEFAULT_OPTIONS
    return base.merged(**overrides)
