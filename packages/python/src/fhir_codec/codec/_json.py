"""JSON text in and out.

Reading uses :mod:`json` with hooks that reject duplicate object keys
and the non-standard ``NaN``/``Infinity`` literals, and that read
fractional numbers as :class:`~decimal.Decimal` when precision is
preserved.

Writing uses a small deterministic writer instead of :func:`json.dumps`
so that ``Decimal`` values are emitted in positional notation with their
digits and trailing zeros intact (``1.50`` stays ``1.50``, ``0.00000001``
stays ``0.00000001``).  Exponent input (``1e-8``) is indistinguishable
once parsed and comes back positional.  Object keys are written in
insertion order; the encoder inserts them in shape order.
"""

from __future__ import annotations

import json
import math
from decimal import Decimal
from typing import Any, Union

from fhir_codec.errors import MalformedJSONError, RecursionTooDeepError

JSONInput = Union[bytes, bytearray, memoryview, str]


class _DuplicateKey(Exception):
    def __init__(self, key: str) -> None:
        self.key = key


class _BadConstant(Exception):
    def __init__(self, name: str) -> None:
        self.name = name


def _unique_pairs(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
    obj: dict[str, Any] = {}
    for key, value in pairs:
        if key in obj:
            raise _DuplicateKey(key)
        obj[key] = value
    return obj


def _reject_constant(name: str) -> Any:
    raise _BadConstant(name)


def load_json(
    data: JSONInput,
    *,
    preserve_decimal: bool = True,
    max_depth: int = 512,
) -> Any:
    """Parse JSON text into Python values.

    Raises:
        MalformedJSONError: On invalid UTF-8, invalid JSON, duplicate keys
            or non-finite number literals.
        RecursionTooDeepError: If the text nests deeper than the
            interpreter can parse.
    """
    if isinstance(data, (bytes, bytearray, memoryview)):
        try:
            text = bytes(data).decode("utf-8-sig")
        except UnicodeDecodeError as exc:
            raise MalformedJSONError(exc.start, f"invalid UTF-8: {exc.reason}") from exc
    elif isinstance(data, str):
        text = data
    else:
        raise TypeError(
            f"Expected bytes, str or a parsed JSON object, got {type(data).__name__}"
        )

    try:
        return json.loads(
            text,
            object_pairs_hook=_unique_pairs,
            parse_constant=_reject_constant,
            parse_float=Decimal if preserve_decimal else float,
        )
    except json.JSONDecodeError as exc:
        raise MalformedJSONError(exc.pos, exc.msg) from exc
    except _DuplicateKey as exc:
        raise MalformedJSONError(None, f"duplicate object key {exc.key!r}") from None
    except _BadConstant as exc:
        raise MalformedJSONError(None, f"non-finite number {exc.name}") from None
    except ValueError as exc:
        # e.g. integer literals beyond the interpreter's digit limit
        raise MalformedJSONError(None, str(exc)) from exc
    except RecursionError:
        raise RecursionTooDeepError(
            "$", max_depth, "document nests deeper than the parser can follow"
        ) from None


# ── Writer ────────────────────────────────────────────────────────


def dump_json(value: Any, indent: Union[int, None] = None) -> str:
    """Serialize JSON-ready Python values deterministically.

    Args:
        value: ``dict``/``list``/``str``/``int``/``float``/``Decimal``/
            ``bool``/``None`` tree.
        indent: Spaces per level for pretty output; ``None`` for compact.
    """
    parts: list[str] = []
    _write(value, parts, indent, 0)
    return "".join(parts)


def _write(value: Any, out: list[str], indent: Union[int, None], level: int) -> None:
    if isinstance(value, dict):
        if not value:
            out.append("{}")
            return
        out.append("{")
        first = True
        for key, item in value.items():
            if not first:
                out.append(",")
            first = False
            _newline(out, indent, level + 1)
            out.append(json.dumps(key, ensure_ascii=False))
            out.append(": " if indent is not None else ":")
            _write(item, out, indent, level + 1)
        _newline(out, indent, level)
        out.append("}")
    elif isinstance(value, list):
        if not value:
            out.append("[]")
            return
        out.append("[")
        for i, item in enumerate(value):
            if i:
                out.append(",")
            _newline(out, indent, level + 1)
            _write(item, out, indent, level + 1)
        _newline(out, indent, level)
        out.append("]")
    elif isinstance(value, str):
        out.append(json.dumps(value, ensure_ascii=False))
    elif value is True:
        out.append("true")
    elif value is False:
        out.append("false")
    elif value is None:
        out.append("null")
    elif isinstance(value, int):
        out.append(str(value))
    elif isinstance(value, Decimal):
        out.append(_decimal_text(value))
    elif isinstance(value, float):
        if not math.isfinite(value):
            raise ValueError(f"Cannot write non-finite number {value!r}")
        out.append(repr(value))
    else:
        raise TypeError(f"Cannot write {type(value).__name__} as JSON")


def _newline(out: list[str], indent: Union[int, None], level: int) -> None:
    if indent is not None:
        out.append("\n" + " " * (indent * level))


def _decimal_text(value: Decimal) -> str:
    if not value.is_finite():
        raise ValueError(f"Cannot write non-finite number {value}")
    return format(value, "f")
