"""
fhir-codec: HL7 FHIR R4 JSON codec

Schema-driven decoding and encoding of FHIR R4 resources.  Every
resource type and datatype of R4 is declared once as a shape; one
generic codec reads and writes all of them, reporting structural
errors with the path of the offending element.
"""

import logging

__version__ = "0.1.0"

from fhir_codec.errors import (
    AmbiguousChoiceError,
    CardinalityViolationError,
    CodecWarning,
    ErrorKind,
    FHIRCodecError,
    InvalidEnumerationError,
    MalformedJSONError,
    MissingRequiredFieldError,
    RecursionTooDeepError,
    UnknownFieldError,
    UnknownResourceTypeError,
    ValidationResult,
    WrongTypeError,
)
from fhir_codec.primitives import FHIRDateTime, parse_datetime
from fhir_codec.shapes import FieldDef, Shape
from fhir_codec.model import (
    BackboneElement,
    DomainResource,
    Element,
    FHIRNode,
    OpaqueResource,
    Resource,
)
from fhir_codec.registry import (
    ShapeRegistry,
    default_registry,
    register_datatype,
    register_resource_shape,
    resource_type_of,
)
from fhir_codec.codec import (
    DEFAULT_OPTIONS,
    LENIENT_OPTIONS,
    CodecOptions,
    DecodeResult,
    FHIRCodec,
    aparse_resource,
    decode,
    encode,
    from_json,
    iter_ndjson,
    iter_resources,
    parse_resource,
    serialize_resource,
    to_json,
    validate_resource,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Errors
    "AmbiguousChoiceError",
    "CardinalityViolationError",
    "CodecWarning",
    "ErrorKind",
    "FHIRCodecError",
    "InvalidEnumerationError",
    "MalformedJSONError",
    "MissingRequiredFieldError",
    "RecursionTooDeepError",
    "UnknownFieldError",
    "UnknownResourceTypeError",
    "ValidationResult",
    "WrongTypeError",
    # Primitives
    "FHIRDateTime",
    "parse_datetime",
    # Shapes and nodes
    "BackboneElement",
    "DomainResource",
    "Element",
    "FHIRNode",
    "FieldDef",
    "OpaqueResource",
    "Resource",
    "Shape",
    # Registry
    "ShapeRegistry",
    "default_registry",
    "register_datatype",
    "register_resource_shape",
    "resource_type_of",
    # Codec
    "CodecOptions",
    "DEFAULT_OPTIONS",
    "DecodeResult",
    "FHIRCodec",
    "LENIENT_OPTIONS",
    "aparse_resource",
    "decode",
    "encode",
    "from_json",
    "iter_ndjson",
    "iter_resources",
    "parse_resource",
    "serialize_resource",
    "to_json",
    "validate_resource",
]
