"""FHIR R4 primitive types.

Primitives stay textual on the wire: dates, times, instants, URIs, codes
and base64 payloads are carried as Python ``str`` and never normalised.
Booleans and the integer family use their JSON-native forms.  ``decimal``
values are carried as :class:`decimal.Decimal` when precision is
preserved, so ``1.50`` round-trips as ``1.50`` rather than ``1.5``.

Lexical checks follow the regular expressions published with the R4
specification for each primitive.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Optional


# ── Lexical patterns (FHIR R4 §2.24.0.1) ─────────────────────────

_YEAR = r"([0-9]([0-9]([0-9][1-9]|[1-9]0)|[1-9]00)|[1-9]000)"
_MONTH = r"(0[1-9]|1[0-2])"
_DAY = r"(0[1-9]|[1-2][0-9]|3[0-1])"
_CLOCK = r"([01][0-9]|2[0-3]):[0-5][0-9]:([0-5][0-9]|60)(\.[0-9]+)?"
_ZONE = r"(Z|(\+|-)((0[0-9]|1[0-3]):[0-5][0-9]|14:00))"

_PATTERNS: dict[str, re.Pattern[str]] = {
    "date": re.compile(rf"{_YEAR}(-{_MONTH}(-{_DAY})?)?"),
    "dateTime": re.compile(
        rf"{_YEAR}(-{_MONTH}(-{_DAY}(T{_CLOCK}{_ZONE})?)?)?"
    ),
    "instant": re.compile(rf"{_YEAR}-{_MONTH}-{_DAY}T{_CLOCK}{_ZONE}"),
    "time": re.compile(_CLOCK),
    "id": re.compile(r"[A-Za-z0-9\-\.]{1,64}"),
    "oid": re.compile(r"urn:oid:[0-2](\.(0|[1-9][0-9]*))+"),
    "uuid": re.compile(
        r"urn:uuid:[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}"
    ),
    "code": re.compile(r"[^\s]+( [^\s]+)*"),
    "base64Binary": re.compile(r"(\s*([0-9a-zA-Z\+/=]){4}\s*)+"),
}

_INT32_MIN = -2147483648
_INT32_MAX = 2147483647


@dataclass(frozen=True)
class PrimitiveType:
    """Wire description of one FHIR primitive.

    Attributes:
        name:      FHIR type name (``dateTime``, ``positiveInt`` ...).
        json_kind: JSON carrier: ``string``, ``boolean``, ``integer`` or
                   ``decimal``.
        minimum:   Inclusive lower bound for integer kinds.
        maximum:   Inclusive upper bound for integer kinds.
    """

    name: str
    json_kind: str
    minimum: Optional[int] = None
    maximum: Optional[int] = None

    @property
    def pattern(self) -> Optional[re.Pattern[str]]:
        return _PATTERNS.get(self.name)


_STRING_TYPES = (
    "string", "code", "id", "markdown", "uri", "url", "canonical", "oid",
    "uuid", "base64Binary", "date", "dateTime", "instant", "time", "xhtml",
)

PRIMITIVE_TYPES: dict[str, PrimitiveType] = {
    name: PrimitiveType(name, "string") for name in _STRING_TYPES
}
PRIMITIVE_TYPES.update({
    "boolean": PrimitiveType("boolean", "boolean"),
    "integer": PrimitiveType("integer", "integer", _INT32_MIN, _INT32_MAX),
    "unsignedInt": PrimitiveType("unsignedInt", "integer", 0, _INT32_MAX),
    "positiveInt": PrimitiveType("positiveInt", "integer", 1, _INT32_MAX),
    "decimal": PrimitiveType("decimal", "decimal"),
})


def is_primitive(type_name: str) -> bool:
    """Return True when *type_name* names a FHIR primitive."""
    return type_name in PRIMITIVE_TYPES


def json_type_name(value: Any) -> str:
    """Describe a Python value by its JSON type, for error messages."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return "integer"
    if isinstance(value, (float, Decimal)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


class PrimitiveMismatch(Exception):
    """Raised by :func:`coerce_primitive`; the codec adds the path."""

    def __init__(self, expected: str, actual: str) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"expected {expected}, got {actual}")


def coerce_primitive(
    type_name: str,
    value: Any,
    *,
    preserve_decimal: bool = True,
) -> Any:
    """Check *value* against a primitive type and return its carrier form.

    Used in both directions: decoded JSON values and in-memory values
    about to be emitted pass through the same checks.

    Args:
        type_name: FHIR primitive name.
        value: Candidate value.
        preserve_decimal: Carry ``decimal`` as :class:`Decimal` (True) or
            ``float`` (False).

    Returns:
        The value in carrier form (``Decimal``/``float`` for decimals,
        otherwise unchanged).

    Raises:
        PrimitiveMismatch: If the value has the wrong JSON type, is out of
            range, or fails the lexical pattern.
    """
    ptype = PRIMITIVE_TYPES[type_name]
    kind = ptype.json_kind

    if kind == "string":
        if not isinstance(value, str):
            raise PrimitiveMismatch(type_name, json_type_name(value))
        pattern = ptype.pattern
        if pattern is not None and not pattern.fullmatch(value):
            raise PrimitiveMismatch(type_name, f"string {value!r}")
        return value

    if kind == "boolean":
        if not isinstance(value, bool):
            raise PrimitiveMismatch(type_name, json_type_name(value))
        return value

    if kind == "integer":
        # bool is an int subclass; exclude it explicitly
        if isinstance(value, bool) or not isinstance(value, int):
            if isinstance(value, Decimal) and value == value.to_integral_value() \
                    and value.as_tuple().exponent == 0:
                value = int(value)
            else:
                raise PrimitiveMismatch(type_name, json_type_name(value))
        if ptype.minimum is not None and value < ptype.minimum:
            raise PrimitiveMismatch(type_name, f"{value} (below {ptype.minimum})")
        if ptype.maximum is not None and value > ptype.maximum:
            raise PrimitiveMismatch(type_name, f"{value} (above {ptype.maximum})")
        return value

    # decimal
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        raise PrimitiveMismatch(type_name, json_type_name(value))
    if isinstance(value, float) and not math.isfinite(value):
        raise PrimitiveMismatch(type_name, repr(value))
    if isinstance(value, Decimal) and not value.is_finite():
        raise PrimitiveMismatch(type_name, str(value))
    if preserve_decimal:
        if isinstance(value, float):
            return Decimal(repr(value))
        if isinstance(value, int):
            return Decimal(value)
        return value
    return float(value)


# ── Partial date/time values ──────────────────────────────────────

_LAYOUTS: dict[str, str] = {
    "year": "%Y",
    "month": "%Y-%m",
    "day": "%Y-%m-%d",
}


@dataclass(frozen=True)
class FHIRDateTime:
    """A FHIR date/dateTime/instant value with its recorded precision.

    FHIR allows partial values (``"2016"``, ``"2016-01"``); a bare
    :class:`datetime` cannot say which parts were actually given, so the
    precision travels alongside it.
    """

    value: datetime
    precision: str

    def isoformat(self) -> str:
        """Render the value back to FHIR text at its recorded precision."""
        if self.precision in _LAYOUTS:
            return self.value.strftime(_LAYOUTS[self.precision])
        if self.precision == "second":
            text = self.value.isoformat()
            if self.value.utcoffset() is not None and \
                    self.value.utcoffset().total_seconds() == 0:
                text = text[: -len("+00:00")] + "Z"
            return text
        raise ValueError(f"Unknown precision {self.precision!r}")


def parse_datetime(text: str) -> FHIRDateTime:
    """Parse FHIR date/dateTime/instant text, keeping its precision.

    Accepts ``YYYY``, ``YYYY-MM``, ``YYYY-MM-DD`` and full timestamps with
    a zone offset (``Z`` or ``±hh:mm``), optionally with fractional
    seconds.

    Raises:
        ValueError: If *text* is not a valid FHIR dateTime.
    """
    text = text.strip()
    if not _PATTERNS["dateTime"].fullmatch(text):
        raise ValueError(f"Not a FHIR dateTime: {text!r}")
    if "T" in text:
        parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        return FHIRDateTime(parsed, "second")
    for precision in ("day", "month", "year"):
        try:
            return FHIRDateTime(
                datetime.strptime(text, _LAYOUTS[precision]), precision
            )
        except ValueError:
            continue
    raise ValueError(f"Not a FHIR dateTime: {text!r}")
