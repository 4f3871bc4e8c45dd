"""Streaming input and tree walking.

``iter_ndjson`` reads newline-delimited FHIR JSON as produced by bulk
data export, one resource per line.  ``aparse_resource`` drains an
async byte source before decoding.  ``iter_resources`` walks a decoded
tree for every embedded resource.
"""

from __future__ import annotations

from typing import Any, AsyncIterable, Iterable, Iterator, Optional, Union

from fhir_codec.errors import CodecWarning, MalformedJSONError
from fhir_codec.model import FHIRNode, OpaqueResource, Resource
from fhir_codec.registry import ShapeRegistry

from fhir_codec.codec._api import _registry, _run, parse_resource
from fhir_codec.codec._decode import Decoder
from fhir_codec.codec._json import load_json
from fhir_codec.codec._options import CodecOptions, resolve_options

Lines = Union[str, bytes, Iterable[Union[str, bytes]]]


def iter_ndjson(
    source: Lines,
    *,
    options: Optional[CodecOptions] = None,
    registry: Optional[ShapeRegistry] = None,
    warnings: Optional[list[CodecWarning]] = None,
    **overrides: Any,
) -> Iterator[Resource]:
    """Yield resources from NDJSON text in read order.

    Args:
        source: The whole text (``str``/``bytes``) or any iterable of
            lines, such as an open file.
        warnings: List that receives the lenient-mode warnings of each
            line as that line is yielded.

    Blank lines are skipped.  Error paths start with the 1-based line
    number, e.g. ``line[3].Patient.gender``.
    """
    opts = resolve_options(options, overrides)
    reg = _registry(registry)
    lines = source.splitlines() if isinstance(source, (str, bytes)) else source
    for number, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        prefix = f"line[{number}]."
        try:
            obj = load_json(
                line,
                preserve_decimal=opts.preserve_decimal_precision,
                max_depth=opts.max_document_depth,
            )
        except MalformedJSONError as exc:
            raise MalformedJSONError(
                exc.offset, exc.reason, path=f"line[{number}]"
            ) from exc
        decoder = Decoder(reg, opts)
        resource = _run(decoder, obj, None, prefix)
        if warnings is not None:
            warnings.extend(decoder.warnings)
        yield resource


async def aparse_resource(
    chunks: AsyncIterable[Union[bytes, str]],
    **kwargs: Any,
) -> Resource:
    """Read an async byte source to completion, then decode it.

    Keyword arguments are those of :func:`parse_resource`.
    """
    buffer = bytearray()
    async for chunk in chunks:
        buffer.extend(chunk.encode("utf-8") if isinstance(chunk, str) else chunk)
    return parse_resource(bytes(buffer), **kwargs)


def iter_resources(resource: Resource) -> Iterator[Resource]:
    """Yield *resource* and, depth-first, every resource embedded in it.

    Covers contained resources, Bundle entries and responses, and
    Parameters resources.
    """
    yield resource
    if not isinstance(resource, OpaqueResource):
        yield from _embedded(resource)


def _embedded(node: FHIRNode) -> Iterator[Resource]:
    for value in node.values():
        for item in value if isinstance(value, list) else (value,):
            if isinstance(item, Resource):
                yield from iter_resources(item)
            elif isinstance(item, FHIRNode):
                yield from _embedded(item)
