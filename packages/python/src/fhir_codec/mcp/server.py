"""
fhir-codec MCP Server: Model Context Protocol integration.

Exposes the FHIR R4 codec as MCP tools for LLM agents.  Five read-only
tools: structural validation, normalization, catalog listing, shape
description and Bundle summaries.

Usage::

    python -m fhir_codec.mcp          # stdio transport (default)
    python -m fhir_codec.mcp --http   # streamable HTTP

Requires: pip install fhir-codec[mcp]
"""

from __future__ import annotations

from collections import Counter
from typing import Any, Optional

from mcp.server.fastmcp import FastMCP

from fhir_codec.codec import (
    DEFAULT_OPTIONS,
    LENIENT_OPTIONS,
    iter_resources,
    parse_resource,
    serialize_resource,
    validate_resource as _validate_resource_raw,
)
from fhir_codec.errors import FHIRCodecError
from fhir_codec.registry import default_registry
from fhir_codec.shapes import FieldDef, Shape


# ═══════════════════════════════════════════════════════════════════
# Server instance
# ═══════════════════════════════════════════════════════════════════

mcp = FastMCP(
    "fhir-codec",
    instructions=(
        "HL7 FHIR R4 JSON codec. Validates resources against the R4 "
        "structure definitions, normalizes them to canonical JSON, and "
        "describes resource and datatype shapes. All tools are "
        "read-only and stateless."
    ),
)


# ── Helpers ────────────────────────────────────────────────────────


def _options(lenient: bool):
    return LENIENT_OPTIONS if lenient else DEFAULT_OPTIONS


def _error_to_dict(err: FHIRCodecError) -> dict:
    return {"kind": err.kind.value, "path": err.path, "message": err.detail}


def _field_to_dict(fdef: FieldDef) -> dict:
    entry: dict[str, Any] = {
        "name": fdef.display_name,
        "types": list(fdef.types),
        "cardinality": fdef.cardinality,
    }
    if fdef.choice:
        entry["keys"] = [key for key, _ in fdef.variants()]
    if fdef.enum is not None:
        entry["codes"] = list(fdef.enum)
    return entry


# ═══════════════════════════════════════════════════════════════════
# Validation and normalization
# ═══════════════════════════════════════════════════════════════════


@mcp.tool()
def validate_resource(
    resource_json: str,
    resource_type: Optional[str] = None,
    lenient: bool = False,
) -> dict:
    """Validate a FHIR R4 resource against its structure definition.

    Reports every structural problem found: unknown fields, wrong JSON
    types, missing required members, cardinality violations, codes
    outside required bindings and ambiguous ``[x]`` choices.  Each
    finding carries the path of the offending element, such as
    ``Bundle.entry[2].resource.valueQuantity.value``.

    Args:
        resource_json: JSON text of the resource.
        resource_type: Expected resourceType.  When omitted the
            document's own ``resourceType`` is used.
        lenient: Downgrade unknown fields, unknown codes and unknown
            resource types to warnings.

    Returns:
        Dict with 'valid' (bool), 'errors' and 'warnings' (lists of
        {kind, path, message}).
    """
    result = _validate_resource_raw(
        resource_json,
        resource_type=resource_type,
        options=_options(lenient),
    )
    return {
        "valid": result.valid,
        "errors": [_error_to_dict(e) for e in result.errors],
        "warnings": [
            {"kind": w.kind, "path": w.path, "message": w.message}
            for w in result.warnings
        ],
    }


@mcp.tool()
def normalize_resource(
    resource_json: str,
    indent: Optional[int] = 2,
    lenient: bool = False,
) -> str:
    """Rewrite a resource as canonical FHIR JSON.

    Members are emitted in structure-definition order, empty values are
    dropped and decimals keep their exact precision.  In lenient mode
    unknown fields are removed.

    Args:
        resource_json: JSON text of the resource.
        indent: Spaces per indent level; ``null`` for compact output.
        lenient: Accept and drop unknown fields and codes.

    Returns:
        The normalized JSON text.

    Raises:
        ValueError: If the resource is structurally invalid.
    """
    opts = _options(lenient)
    resource = parse_resource(resource_json, options=opts)
    return serialize_resource(resource, indent=indent, options=opts).decode("utf-8")


# ═══════════════════════════════════════════════════════════════════
# Catalog
# ═══════════════════════════════════════════════════════════════════


@mcp.tool()
def list_resource_types() -> list[str]:
    """List every FHIR R4 resource type the codec knows, sorted."""
    return default_registry().resource_types()


@mcp.tool()
def describe_shape(type_name: str) -> dict:
    """Describe the structure of a resource, datatype or backbone element.

    Args:
        type_name: A resource type (``Patient``), datatype
            (``HumanName``) or backbone path (``Bundle.entry``).

    Returns:
        Dict with 'name', 'kind', 'base', 'one_of', 'fields' (each with
        name, types, cardinality, and for choices the JSON keys) and
        'backbones' (nested backbone paths).

    Raises:
        ValueError: If the type is unknown.
    """
    try:
        shape: Shape = default_registry().resolve(type_name)
    except KeyError:
        raise ValueError(f"Unknown FHIR type: {type_name!r}") from None
    return {
        "name": shape.name,
        "kind": shape.kind,
        "base": shape.base.name if shape.base is not None else None,
        "one_of": list(shape.one_of),
        "fields": [_field_to_dict(f) for f in shape.all_fields],
        "backbones": [inner.name for inner in shape.nested],
    }


# ═══════════════════════════════════════════════════════════════════
# Bundles
# ═══════════════════════════════════════════════════════════════════


@mcp.tool()
def summarize_bundle(bundle_json: str, lenient: bool = False) -> dict:
    """Summarize the contents of a Bundle.

    Counts every resource embedded in the Bundle by type, including
    contained resources and nested Bundles.

    Args:
        bundle_json: JSON text of a Bundle resource.
        lenient: Accept unknown fields, codes and resource types.

    Returns:
        Dict with 'type' (Bundle.type), 'entries' (entry count),
        'total' (Bundle.total or null) and 'resource_counts'
        (resourceType -> count, excluding the Bundle itself).

    Raises:
        ValueError: If the input is not a valid Bundle.
    """
    bundle = parse_resource(
        bundle_json, resource_type="Bundle", options=_options(lenient),
    )
    embedded = list(iter_resources(bundle))[1:]
    counts = Counter(r.resource_type for r in embedded)
    return {
        "type": bundle.type,
        "entries": len(bundle.entry or []),
        "total": bundle.total,
        "resource_counts": dict(sorted(counts.items())),
    }
