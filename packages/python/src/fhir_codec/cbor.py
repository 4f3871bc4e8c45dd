"""
CBOR transport for FHIR resources.

Binary-efficient serialization of resources using CBOR (RFC 8949).
The structural codec runs in both directions exactly as it does for
JSON: :func:`to_cbor` refuses an invalid tree and :func:`from_cbor`
reports the same errors with the same paths as :func:`parse_resource`.

``decimal`` values travel as CBOR decimal fractions (tag 4), so
``1.50`` survives the trip with its precision.

Requires the ``cbor2`` package::

    pip install fhir-codec[cbor]
"""

from __future__ import annotations

import gzip
from dataclasses import dataclass
from typing import Any, Optional

from fhir_codec.codec import CodecOptions, encode, from_json, to_json
from fhir_codec.errors import MalformedJSONError
from fhir_codec.model import Resource
from fhir_codec.registry import ShapeRegistry

try:
    import cbor2

    _HAS_CBOR2 = True
except ImportError:
    _HAS_CBOR2 = False


def _require_cbor2() -> None:
    if not _HAS_CBOR2:
        raise ImportError(
            "cbor2 is required for CBOR transport. "
            "Install it with: pip install fhir-codec[cbor]"
        )


@dataclass
class PayloadStats:
    """Comparison of serialization sizes for a resource."""

    json_bytes: int
    cbor_bytes: int
    gzip_json_bytes: int
    gzip_cbor_bytes: int

    @property
    def cbor_ratio(self) -> float:
        """CBOR size as a fraction of JSON size (lower = better)."""
        if self.json_bytes == 0:
            return 0.0
        return self.cbor_bytes / self.json_bytes

    @property
    def gzip_cbor_ratio(self) -> float:
        if self.json_bytes == 0:
            return 0.0
        return self.gzip_cbor_bytes / self.json_bytes


# ═══════════════════════════════════════════════════════════════════
# SERIALIZATION
# ═══════════════════════════════════════════════════════════════════


def to_cbor(
    resource: Resource,
    *,
    options: Optional[CodecOptions] = None,
    registry: Optional[ShapeRegistry] = None,
) -> bytes:
    """Serialize a resource to CBOR.

    Raises:
        ImportError: If ``cbor2`` is not installed.
        TypeError: If *resource* is not a resource node.
        FHIRCodecError: If the tree is structurally invalid.
    """
    _require_cbor2()
    if not isinstance(resource, Resource):
        raise TypeError(f"Not a resource: {type(resource).__name__}")
    value = to_json(resource, options=options, registry=registry)
    return cbor2.dumps(value)


def from_cbor(
    data: bytes,
    *,
    options: Optional[CodecOptions] = None,
    registry: Optional[ShapeRegistry] = None,
) -> Any:
    """Deserialize CBOR bytes back into a resource node.

    Raises:
        ImportError: If ``cbor2`` is not installed.
        MalformedJSONError: If the bytes are not valid CBOR.
        FHIRCodecError: On any structural error in the decoded value.
    """
    _require_cbor2()
    try:
        decoded = cbor2.loads(data)
    except cbor2.CBORDecodeError as exc:
        raise MalformedJSONError(None, f"invalid CBOR: {exc}") from exc
    return from_json(decoded, options=options, registry=registry)


# ═══════════════════════════════════════════════════════════════════
# PAYLOAD STATISTICS
# ═══════════════════════════════════════════════════════════════════


def payload_stats(
    resource: Resource,
    *,
    registry: Optional[ShapeRegistry] = None,
) -> PayloadStats:
    """Compare JSON, CBOR, gzipped JSON and gzipped CBOR sizes.

    Useful for benchmarking bulk transfers of resources.
    """
    _require_cbor2()
    json_bytes = encode(resource, registry=registry)
    cbor_bytes = to_cbor(resource, registry=registry)

    return PayloadStats(
        json_bytes=len(json_bytes),
        cbor_bytes=len(cbor_bytes),
        gzip_json_bytes=len(gzip.compress(json_bytes)),
        gzip_cbor_bytes=len(gzip.compress(cbor_bytes)),
    )
