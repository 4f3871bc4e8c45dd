"""Schema-driven decoder: parsed JSON values to node trees.

One :class:`Decoder` handles one document.  It walks the JSON object
against the shape of each node, dispatching every key to a primitive,
datatype, choice variant, list, backbone or embedded-resource member.

In fail-fast mode (the default) the first error is raised.  In
collecting mode every recoverable error is recorded and the walk goes
on; depth and discriminator failures still stop the walk.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Iterator, Optional

from fhir_codec.errors import (
    AmbiguousChoiceError,
    CardinalityViolationError,
    CodecWarning,
    ErrorKind,
    FHIRCodecError,
    InvalidEnumerationError,
    MissingRequiredFieldError,
    RecursionTooDeepError,
    UnknownFieldError,
    UnknownResourceTypeError,
    WrongTypeError,
)
from fhir_codec.model import FHIRNode, OpaqueResource
from fhir_codec.primitives import (
    PrimitiveMismatch,
    coerce_primitive,
    is_primitive,
    json_type_name,
)
from fhir_codec.shapes import RESOURCE_TYPE, FieldDef, KeyInfo, Shape

from fhir_codec.codec._options import CodecOptions

logger = logging.getLogger(__name__)

_MISSING = object()


@dataclass
class DecodeResult:
    """A decoded node plus the warnings lenient decoding produced."""

    node: Any
    warnings: list[CodecWarning] = field(default_factory=list)


class Decoder:
    """Decode one JSON document into nodes.

    Args:
        registry: Shape registry to resolve types against.
        options: Codec policy.
        collect: Record recoverable errors in :attr:`errors` instead of
            raising the first one.
    """

    def __init__(self, registry: Any, options: CodecOptions, *, collect: bool = False) -> None:
        self.registry = registry
        self.options = options
        self.collect = collect
        self.warnings: list[CodecWarning] = []
        self.errors: list[FHIRCodecError] = []
        self._nesting: dict[str, int] = {}
        self._depth = 0

    # ── Entry points ──────────────────────────────────────────────

    def decode_resource(
        self,
        obj: Any,
        *,
        prefix: str = "",
        expected: Optional[Shape] = None,
    ) -> Any:
        """Decode a top-level resource object.

        Args:
            obj: Parsed JSON value.
            prefix: Path prefix (``line[3].`` for NDJSON input).
            expected: Resource shape the object must have.
        """
        where = prefix.rstrip(".") or "$"
        if not isinstance(obj, dict):
            raise WrongTypeError(where, "object", json_type_name(obj))
        name = obj.get("resourceType")
        if expected is not None:
            if name is not None and name != expected.name:
                raise WrongTypeError(
                    f"{prefix}{expected.name}.resourceType",
                    expected.name,
                    repr(name),
                )
            return self._node(obj, expected, prefix + expected.name)
        if name is None:
            raise MissingRequiredFieldError(f"{prefix}resourceType")
        if not isinstance(name, str):
            raise WrongTypeError(f"{prefix}resourceType", "string", json_type_name(name))
        return self._embedded(obj, prefix + name, where)

    def decode_element(self, obj: Any, shape: Shape, *, prefix: str = "") -> Any:
        """Decode a datatype or backbone object rooted at *shape*."""
        return self._node(obj, shape, prefix + shape.name)

    # ── Reporting ─────────────────────────────────────────────────

    def _fail(self, err: FHIRCodecError) -> Any:
        if not self.collect:
            raise err
        self.errors.append(err)
        return _MISSING

    def _warn(self, path: str, kind: str, message: str) -> None:
        self.warnings.append(CodecWarning(path, kind, message))
        logger.warning("%s at %s: %s", kind, path, message)

    # ── Nodes ─────────────────────────────────────────────────────

    def _enter(self, shape: Shape, path: str) -> None:
        if self._depth >= self.options.max_document_depth:
            raise RecursionTooDeepError(path, self.options.max_document_depth)
        count = self._nesting.get(shape.name, 0) + 1
        if count > self.options.max_recursion_depth:
            raise RecursionTooDeepError(path, self.options.max_recursion_depth)
        self._depth += 1
        self._nesting[shape.name] = count

    def _leave(self, shape: Shape) -> None:
        self._depth -= 1
        self._nesting[shape.name] -= 1

    def _node(self, obj: Any, shape: Shape, path: str) -> Any:
        if not isinstance(obj, dict):
            return self._fail(WrongTypeError(path, shape.name, json_type_name(obj)))
        self._enter(shape, path)
        try:
            return self._fields(obj, shape, path)
        finally:
            self._leave(shape)

    def _embedded(self, obj: Any, path: str, where: Optional[str] = None) -> Any:
        if not isinstance(obj, dict):
            return self._fail(WrongTypeError(path, RESOURCE_TYPE, json_type_name(obj)))
        name = obj.get("resourceType")
        if name is None:
            return self._fail(MissingRequiredFieldError(f"{path}.resourceType"))
        if not isinstance(name, str):
            return self._fail(
                WrongTypeError(f"{path}.resourceType", "string", json_type_name(name))
            )
        shape = self.registry.lookup(name)
        if shape is None:
            if self.options.strict_resource_types:
                raise UnknownResourceTypeError(name, where or path)
            self._warn(
                where or path,
                ErrorKind.UNKNOWN_RESOURCE_TYPE.value,
                f"unknown resource type {name!r} kept verbatim",
            )
            return OpaqueResource(
                name, {k: v for k, v in obj.items() if k != "resourceType"}
            )
        return self._node(obj, shape, path)

    def _fields(self, obj: dict[str, Any], shape: Shape, path: str) -> FHIRNode:
        node = self.registry.class_for(shape)()
        keys = shape.keys
        variants_seen: dict[str, list[str]] = {}

        for key, raw in obj.items():
            if key == "resourceType" and shape.is_resource:
                continue
            info = keys.get(key)
            child = f"{path}.{key}"
            if info is None:
                self._unknown_field(child)
                continue
            value = self._member(info, raw, child)
            if value is _MISSING:
                continue
            if info.field.choice and not info.sibling:
                variants_seen.setdefault(info.field.name, []).append(key)
            node._store(key, value)

        for name, variants in variants_seen.items():
            if len(variants) > 1:
                self._fail(AmbiguousChoiceError(f"{path}.{name}[x]", variants))

        self._check_required(obj, shape, path)
        if shape.one_of:
            self._check_one_of(obj, shape, path)
        self._check_primitive_lists(node, shape, path)
        if node.get("contained"):
            self._check_contained_ids(node["contained"], path)
        return node

    def _unknown_field(self, path: str) -> None:
        if self.options.strict_unknown_fields:
            self._fail(UnknownFieldError(path))
        else:
            self._warn(path, ErrorKind.UNKNOWN_FIELD.value, "unknown field ignored")

    # ── Members ───────────────────────────────────────────────────

    def _member(self, info: KeyInfo, raw: Any, path: str) -> Any:
        fdef = info.field
        if info.sibling:
            return self._sibling(fdef, raw, path)
        if not fdef.is_list:
            if isinstance(raw, list):
                return self._fail(WrongTypeError(path, info.type_name, "array"))
            return self._value(info, raw, path)

        if not isinstance(raw, list):
            return self._fail(
                WrongTypeError(path, f"array of {info.type_name}", json_type_name(raw))
            )
        if not raw:
            if fdef.required:
                return self._fail(CardinalityViolationError(path, 0, fdef.cardinality))
            return _MISSING
        if fdef.max is not None and len(raw) > fdef.max:
            self._fail(CardinalityViolationError(path, len(raw), fdef.cardinality))

        primitive = is_primitive(info.type_name)
        items = []
        for i, item in enumerate(raw):
            if item is None and primitive:
                # Checked against the ``_name`` sibling once both are read.
                items.append(None)
                continue
            value = self._value(info, item, f"{path}[{i}]")
            items.append(None if value is _MISSING else value)
        return items

    def _value(self, info: KeyInfo, raw: Any, path: str) -> Any:
        type_name = info.type_name
        if raw is None:
            return self._fail(WrongTypeError(path, type_name, "null"))
        if is_primitive(type_name):
            return self._primitive(info.field, type_name, raw, path)
        if type_name == RESOURCE_TYPE:
            return self._embedded(raw, path)
        return self._node(raw, self.registry.resolve(type_name), path)

    def _primitive(self, fdef: FieldDef, type_name: str, raw: Any, path: str) -> Any:
        try:
            value = coerce_primitive(
                type_name, raw,
                preserve_decimal=self.options.preserve_decimal_precision,
            )
        except PrimitiveMismatch as exc:
            return self._fail(WrongTypeError(path, exc.expected, exc.actual))
        if fdef.enum is not None and value not in fdef.enum:
            if self.options.strict_enumerations:
                return self._fail(InvalidEnumerationError(path, value, fdef.enum))
            self._warn(
                path,
                ErrorKind.INVALID_ENUMERATION.value,
                f"{value!r} is not one of {', '.join(fdef.enum)}; kept verbatim",
            )
        return value

    def _sibling(self, fdef: FieldDef, raw: Any, path: str) -> Any:
        element = self.registry.resolve("Element")
        if not fdef.is_list:
            return self._node(raw, element, path)
        if not isinstance(raw, list):
            return self._fail(
                WrongTypeError(path, "array of Element", json_type_name(raw))
            )
        items = []
        for i, item in enumerate(raw):
            if item is None:
                items.append(None)
                continue
            value = self._node(item, element, f"{path}[{i}]")
            items.append(None if value is _MISSING else value)
        return items

    # ── Node-level checks ─────────────────────────────────────────

    def _check_required(self, obj: dict[str, Any], shape: Shape, path: str) -> None:
        for fdef in shape.all_fields:
            if fdef.required and not _has_member(obj, fdef):
                self._fail(MissingRequiredFieldError(f"{path}.{fdef.display_name}"))

    def _check_one_of(self, obj: dict[str, Any], shape: Shape, path: str) -> None:
        members = [shape.member(name) for name in shape.one_of]
        present = [f.display_name for f in members if _has_member(obj, f)]
        if len(present) > 1:
            self._fail(AmbiguousChoiceError(path, present))
        elif not present:
            names = ", ".join(f.display_name for f in members)
            self._fail(MissingRequiredFieldError(path, f"one of {names} is required"))

    def _check_primitive_lists(self, node: FHIRNode, shape: Shape, path: str) -> None:
        data = node._raw()
        for fdef in shape.all_fields:
            for err in primitive_list_errors(fdef, data, path):
                self._fail(err)

    def _check_contained_ids(self, contained: list[Any], path: str) -> None:
        seen: set[str] = set()
        for i, resource in enumerate(contained):
            rid = resource.get("id") if resource is not None else None
            if rid is None:
                continue
            if rid in seen:
                self._warn(
                    f"{path}.contained[{i}].id",
                    "duplicate-id",
                    f"contained id {rid!r} is not unique",
                )
            seen.add(rid)


def _has_member(obj: dict[str, Any], fdef: FieldDef) -> bool:
    for key, _ in fdef.variants():
        for candidate in (key, "_" + key):
            value = obj.get(candidate)
            if value is not None and value != []:
                return True
    return False


def primitive_list_errors(
    fdef: FieldDef,
    data: Mapping[str, Any],
    path: str,
) -> Iterator[FHIRCodecError]:
    """Yield alignment errors between a primitive list and its ``_name`` list.

    The two lists must have equal length, and every index must carry a
    value, a sibling element, or both.  Empty lists count as absent.
    """
    if not fdef.is_list or not is_primitive(fdef.type):
        return
    values = data.get(fdef.name) or None
    extras = data.get("_" + fdef.name) or None
    if values is not None and extras is not None:
        if len(extras) != len(values):
            yield CardinalityViolationError(
                f"{path}._{fdef.name}", len(extras), str(len(values)),
            )
            return
        for i, value in enumerate(values):
            if value is None and extras[i] is None:
                yield WrongTypeError(f"{path}.{fdef.name}[{i}]", fdef.type, "null")
    elif values is not None:
        for i, value in enumerate(values):
            if value is None:
                yield WrongTypeError(f"{path}.{fdef.name}[{i}]", fdef.type, "null")
    elif extras is not None:
        for i, extra in enumerate(extras):
            if extra is None:
                yield WrongTypeError(f"{path}._{fdef.name}[{i}]", "Element", "null")
