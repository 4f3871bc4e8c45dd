"""FHIR R4 JSON codec.

Schema-driven encode/decode over the shapes held by a
:class:`~fhir_codec.registry.ShapeRegistry`.
"""

from __future__ import annotations

from typing import Any, Iterator, Optional

from fhir_codec.errors import CodecWarning, ValidationResult
from fhir_codec.model import Resource
from fhir_codec.registry import ShapeRegistry, default_registry

from fhir_codec.codec._api import (
    decode,
    encode,
    from_json,
    parse_resource,
    serialize_resource,
    to_json,
    validate_resource,
)
from fhir_codec.codec._decode import DecodeResult
from fhir_codec.codec._json import dump_json, load_json
from fhir_codec.codec._options import (
    DEFAULT_OPTIONS,
    LENIENT_OPTIONS,
    CodecOptions,
    resolve_options,
)
from fhir_codec.codec._stream import aparse_resource, iter_ndjson, iter_resources


class FHIRCodec:
    """One set of options bound to one registry.

    >>> codec = FHIRCodec(strict_enumerations=False)
    >>> patient = codec.parse('{"resourceType": "Patient", "gender": "martian"}')
    """

    def __init__(
        self,
        options: Optional[CodecOptions] = None,
        registry: Optional[ShapeRegistry] = None,
        **overrides: Any,
    ) -> None:
        self.options = resolve_options(options, overrides)
        self.registry = registry if registry is not None else default_registry()

    def parse(self, data: Any, resource_type: Optional[str] = None) -> Resource:
        return parse_resource(
            data, resource_type=resource_type,
            options=self.options, registry=self.registry,
        )

    def decode(self, data: Any, expected: Any = None) -> DecodeResult:
        return decode(data, expected, options=self.options, registry=self.registry)

    def serialize(self, resource: Resource, indent: Optional[int] = None) -> bytes:
        return serialize_resource(
            resource, indent=indent, options=self.options, registry=self.registry,
        )

    def validate(self, data: Any, resource_type: Optional[str] = None) -> ValidationResult:
        return validate_resource(
            data, resource_type=resource_type,
            options=self.options, registry=self.registry,
        )

    def to_json(self, node: Any) -> dict[str, Any]:
        return to_json(node, options=self.options, registry=self.registry)

    def from_json(self, obj: Any, expected: Any = None) -> Any:
        return from_json(obj, expected, options=self.options, registry=self.registry)

    def iter_ndjson(
        self,
        source: Any,
        warnings: Optional[list[CodecWarning]] = None,
    ) -> Iterator[Resource]:
        return iter_ndjson(
            source, options=self.options, registry=self.registry, warnings=warnings,
        )


__all__ = [
    "CodecOptions",
    "DEFAULT_OPTIONS",
    "DecodeResult",
    "FHIRCodec",
    "LENIENT_OPTIONS",
    "aparse_resource",
    "decode",
    "dump_json",
    "encode",
    "from_json",
    "iter_ndjson",
    "iter_resources",
    "load_json",
    "parse_resource",
    "serialize_resource",
    "to_json",
    "validate_resource",
]
