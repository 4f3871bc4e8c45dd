"""Schema-driven encoder: node trees to JSON-ready Python values.

The whole tree is checked and converted before any text is produced, so
a structurally invalid tree never yields partial output.  Members are
emitted in shape order with ``resourceType`` first; absent members and
empty lists are omitted.
"""

from __future__ import annotations

from typing import Any

from fhir_codec.errors import (
    AmbiguousChoiceError,
    CardinalityViolationError,
    InvalidEnumerationError,
    MissingRequiredFieldError,
    RecursionTooDeepError,
    UnknownFieldError,
    WrongTypeError,
)
from fhir_codec.model import FHIRNode, OpaqueResource, Resource
from fhir_codec.primitives import (
    PrimitiveMismatch,
    coerce_primitive,
    is_primitive,
    json_type_name,
)
from fhir_codec.shapes import RESOURCE_TYPE, FieldDef, Shape

from fhir_codec.codec._decode import primitive_list_errors
from fhir_codec.codec._options import CodecOptions


def _type_label(value: Any) -> str:
    if isinstance(value, FHIRNode):
        return type(value).__name__
    return json_type_name(value)


class Encoder:
    """Convert one node tree into plain JSON values."""

    def __init__(self, registry: Any, options: CodecOptions) -> None:
        self.registry = registry
        self.options = options
        self._active: set[int] = set()
        self._nesting: dict[str, int] = {}

    def encode(self, node: Any) -> dict[str, Any]:
        """Encode a resource or element node rooted at its own shape."""
        if isinstance(node, OpaqueResource):
            return node.to_json()
        if not isinstance(node, FHIRNode) or type(node)._shape is None:
            raise TypeError(f"Cannot encode {type(node).__name__}")
        shape = type(node)._shape
        return self._node(node, shape, shape.name)

    # ── Nodes ─────────────────────────────────────────────────────

    def _node(self, node: FHIRNode, shape: Shape, path: str) -> dict[str, Any]:
        marker = id(node)
        if marker in self._active:
            raise RecursionTooDeepError(
                path, self.options.max_recursion_depth,
                "cycle detected: node contains itself",
            )
        count = self._nesting.get(shape.name, 0) + 1
        if count > self.options.max_recursion_depth:
            raise RecursionTooDeepError(path, self.options.max_recursion_depth)
        self._active.add(marker)
        self._nesting[shape.name] = count
        try:
            return self._fields(node, shape, path)
        finally:
            self._active.discard(marker)
            self._nesting[shape.name] -= 1

    def _fields(self, node: FHIRNode, shape: Shape, path: str) -> dict[str, Any]:
        data = node._raw()
        for key in data:
            if key not in shape.keys:
                raise UnknownFieldError(f"{path}.{key}")

        out: dict[str, Any] = {}
        if shape.is_resource:
            out["resourceType"] = shape.name

        for fdef in shape.all_fields:
            present = [
                (key, type_name)
                for key, type_name in fdef.variants()
                if _is_set(data.get(key)) or _is_set(data.get("_" + key))
            ]
            if fdef.choice:
                valued = [key for key, _ in present if _is_set(data.get(key))]
                if len(valued) > 1:
                    raise AmbiguousChoiceError(f"{path}.{fdef.display_name}", valued)
            if not present:
                if fdef.required:
                    if fdef.is_list and data.get(fdef.name) == []:
                        raise CardinalityViolationError(
                            f"{path}.{fdef.name}", 0, fdef.cardinality,
                        )
                    raise MissingRequiredFieldError(f"{path}.{fdef.display_name}")
                continue
            for key, type_name in present:
                child = f"{path}.{key}"
                value = data.get(key)
                if _is_set(value):
                    out[key] = self._member(fdef, type_name, value, child)
                extra = data.get("_" + key)
                if _is_set(extra):
                    out["_" + key] = self._sibling(fdef, extra, f"{path}._{key}")
            for err in primitive_list_errors(fdef, data, path):
                raise err

        if shape.one_of:
            self._check_one_of(data, shape, path)
        return out

    def _check_one_of(self, data: dict[str, Any], shape: Shape, path: str) -> None:
        members = [shape.member(name) for name in shape.one_of]
        present = [
            f.display_name for f in members
            if any(_is_set(data.get(key)) or _is_set(data.get("_" + key))
                   for key, _ in f.variants())
        ]
        if len(present) > 1:
            raise AmbiguousChoiceError(path, present)
        if not present:
            names = ", ".join(f.display_name for f in members)
            raise MissingRequiredFieldError(path, f"one of {names} is required")

    # ── Members ───────────────────────────────────────────────────

    def _member(self, fdef: FieldDef, type_name: str, value: Any, path: str) -> Any:
        if not fdef.is_list:
            if isinstance(value, (list, tuple)):
                raise WrongTypeError(path, type_name, "array")
            return self._value(fdef, type_name, value, path)
        if not isinstance(value, (list, tuple)):
            raise WrongTypeError(path, f"array of {type_name}", _type_label(value))
        if fdef.max is not None and len(value) > fdef.max:
            raise CardinalityViolationError(path, len(value), fdef.cardinality)
        primitive = is_primitive(type_name)
        items = []
        for i, item in enumerate(value):
            if item is None and primitive:
                items.append(None)
                continue
            items.append(self._value(fdef, type_name, item, f"{path}[{i}]"))
        return items

    def _value(self, fdef: FieldDef, type_name: str, value: Any, path: str) -> Any:
        if value is None:
            raise WrongTypeError(path, type_name, "null")
        if is_primitive(type_name):
            return self._primitive(fdef, type_name, value, path)
        if type_name == RESOURCE_TYPE:
            return self._resource(value, path)
        shape = self.registry.resolve(type_name)
        expected = self.registry.class_for(shape)
        if not isinstance(value, expected):
            raise WrongTypeError(path, shape.name, _type_label(value))
        return self._node(value, type(value)._shape, path)

    def _primitive(self, fdef: FieldDef, type_name: str, value: Any, path: str) -> Any:
        try:
            value = coerce_primitive(type_name, value, preserve_decimal=True)
        except PrimitiveMismatch as exc:
            raise WrongTypeError(path, exc.expected, exc.actual) from None
        if (
            fdef.enum is not None
            and value not in fdef.enum
            and self.options.strict_enumerations
        ):
            raise InvalidEnumerationError(path, value, fdef.enum)
        return value

    def _resource(self, value: Any, path: str) -> Any:
        if isinstance(value, OpaqueResource):
            return value.to_json()
        if not isinstance(value, Resource) or type(value)._shape is None:
            raise WrongTypeError(path, RESOURCE_TYPE, _type_label(value))
        return self._node(value, type(value)._shape, path)

    def _sibling(self, fdef: FieldDef, value: Any, path: str) -> Any:
        element = self.registry.resolve("Element")
        if not fdef.is_list:
            return self._element(element, value, path)
        if not isinstance(value, (list, tuple)):
            raise WrongTypeError(path, "array of Element", _type_label(value))
        return [
            None if item is None else self._element(element, item, f"{path}[{i}]")
            for i, item in enumerate(value)
        ]

    def _element(self, shape: Shape, value: Any, path: str) -> Any:
        if not isinstance(value, self.registry.class_for(shape)):
            raise WrongTypeError(path, "Element", _type_label(value))
        return self._node(value, shape, path)


def _is_set(value: Any) -> bool:
    return value is not None and not (isinstance(value, (list, tuple)) and not value)
