"""Public decode/encode/validate functions."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional, Union

from fhir_codec.errors import (
    FHIRCodecError,
    RecursionTooDeepError,
    UnknownResourceTypeError,
    ValidationResult,
)
from fhir_codec.model import FHIRNode, Resource
from fhir_codec.registry import ShapeRegistry, default_registry
from fhir_codec.shapes import Shape

from fhir_codec.codec._decode import DecodeResult, Decoder
from fhir_codec.codec._encode import Encoder
from fhir_codec.codec._json import dump_json, load_json
from fhir_codec.codec._options import CodecOptions, resolve_options

Expected = Union[str, Shape, type, None]


def _registry(registry: Optional[ShapeRegistry]) -> ShapeRegistry:
    reg = registry if registry is not None else default_registry()
    reg.freeze()
    return reg


def _expected_shape(registry: ShapeRegistry, expected: Expected) -> Optional[Shape]:
    if expected is None or isinstance(expected, Shape):
        return expected
    if isinstance(expected, type):
        shape = getattr(expected, "_shape", None)
        if shape is None:
            raise TypeError(f"{expected.__name__} is not a node class")
        return shape
    shape = registry.lookup(expected) or registry.datatype(expected)
    if shape is None:
        raise UnknownResourceTypeError(expected, "$")
    return shape


def _load(data: Any, options: CodecOptions) -> Any:
    if isinstance(data, Mapping):
        return data
    return load_json(
        data,
        preserve_decimal=options.preserve_decimal_precision,
        max_depth=options.max_document_depth,
    )


def _run(decoder: Decoder, obj: Any, shape: Optional[Shape], prefix: str = "") -> Any:
    try:
        if shape is None or shape.is_resource:
            return decoder.decode_resource(obj, prefix=prefix, expected=shape)
        return decoder.decode_element(obj, shape, prefix=prefix)
    except RecursionError:
        raise RecursionTooDeepError(
            prefix.rstrip(".") or "$",
            decoder.options.max_document_depth,
            "nesting exceeds the interpreter stack",
        ) from None


# ── Decoding ──────────────────────────────────────────────────────


def decode(
    data: Any,
    expected: Expected = None,
    *,
    options: Optional[CodecOptions] = None,
    registry: Optional[ShapeRegistry] = None,
    **overrides: Any,
) -> DecodeResult:
    """Decode FHIR JSON into a node, returning it with any warnings.

    Args:
        data: JSON as ``bytes``/``str``, or an already-parsed ``dict``.
        expected: Shape the top-level object must have: a resource or
            datatype name, a :class:`Shape`, or a node class.  When
            omitted, ``resourceType`` selects the shape.
        options: Base :class:`CodecOptions` (defaults when omitted).
        registry: Shape registry (the R4 catalog when omitted).
        **overrides: Individual option fields, e.g.
            ``strict_enumerations=False``.

    Raises:
        FHIRCodecError: The first structural error, with its path.
    """
    opts = resolve_options(options, overrides)
    reg = _registry(registry)
    shape = _expected_shape(reg, expected)
    obj = _load(data, opts)
    decoder = Decoder(reg, opts)
    node = _run(decoder, obj, shape)
    return DecodeResult(node, decoder.warnings)


def parse_resource(
    data: Any,
    *,
    resource_type: Optional[str] = None,
    options: Optional[CodecOptions] = None,
    registry: Optional[ShapeRegistry] = None,
    **overrides: Any,
) -> Resource:
    """Decode one FHIR resource.

    >>> patient = parse_resource(b'{"resourceType": "Patient", "id": "p1"}')
    >>> patient.id
    'p1'
    """
    reg = _registry(registry)
    if resource_type is not None and reg.lookup(resource_type) is None:
        raise UnknownResourceTypeError(resource_type, "$")
    return decode(
        data, resource_type, options=options, registry=reg, **overrides
    ).node


def from_json(
    obj: Any,
    expected: Expected = None,
    *,
    options: Optional[CodecOptions] = None,
    registry: Optional[ShapeRegistry] = None,
    **overrides: Any,
) -> Any:
    """Decode an already-parsed JSON value into a node."""
    opts = resolve_options(options, overrides)
    reg = _registry(registry)
    decoder = Decoder(reg, opts)
    return _run(decoder, obj, _expected_shape(reg, expected))


def validate_resource(
    data: Any,
    *,
    resource_type: Optional[str] = None,
    options: Optional[CodecOptions] = None,
    registry: Optional[ShapeRegistry] = None,
    **overrides: Any,
) -> ValidationResult:
    """Check a resource and report every structural error found.

    Unlike :func:`parse_resource` this does not stop at the first error.
    Depth, JSON syntax and discriminator failures still end the walk,
    and are reported as the last error.
    """
    opts = resolve_options(options, overrides)
    reg = _registry(registry)
    decoder = Decoder(reg, opts, collect=True)
    try:
        shape = _expected_shape(reg, resource_type)
        _run(decoder, _load(data, opts), shape)
    except FHIRCodecError as exc:
        decoder.errors.append(exc)
    return ValidationResult(
        valid=not decoder.errors,
        errors=decoder.errors,
        warnings=decoder.warnings,
    )


# ── Encoding ──────────────────────────────────────────────────────


def to_json(
    node: Any,
    *,
    options: Optional[CodecOptions] = None,
    registry: Optional[ShapeRegistry] = None,
    **overrides: Any,
) -> dict[str, Any]:
    """Encode a node into plain JSON values (``dict``/``list``/...).

    ``decimal`` members come back as :class:`decimal.Decimal`.
    """
    opts = resolve_options(options, overrides)
    if registry is None and isinstance(node, FHIRNode) and type(node)._registry is not None:
        registry = type(node)._registry
    reg = _registry(registry)
    try:
        return Encoder(reg, opts).encode(node)
    except RecursionError:
        raise RecursionTooDeepError(
            "$", opts.max_document_depth, "nesting exceeds the interpreter stack"
        ) from None


def encode(
    node: Any,
    *,
    indent: Optional[int] = None,
    options: Optional[CodecOptions] = None,
    registry: Optional[ShapeRegistry] = None,
    **overrides: Any,
) -> bytes:
    """Encode any resource or element node to UTF-8 JSON bytes.

    Output is deterministic: the same tree always yields the same bytes.
    """
    value = to_json(node, options=options, registry=registry, **overrides)
    return dump_json(value, indent).encode("utf-8")


def serialize_resource(
    resource: Resource,
    *,
    indent: Optional[int] = None,
    options: Optional[CodecOptions] = None,
    registry: Optional[ShapeRegistry] = None,
    **overrides: Any,
) -> bytes:
    """Encode a resource to UTF-8 JSON bytes with its ``resourceType``.

    Raises:
        TypeError: If *resource* is not a resource node.
        FHIRCodecError: If the tree is structurally invalid; nothing is
            written in that case.
    """
    if not isinstance(resource, Resource):
        raise TypeError(f"Not a resource: {type(resource).__name__}")
    return encode(
        resource, indent=indent, options=options, registry=registry, **overrides
    )
