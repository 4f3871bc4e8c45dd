"""Generated datatype and backbone classes.

Datatypes are exposed under their FHIR names (``HumanName``); backbone
elements under their joined path (``BundleEntry`` for ``Bundle.entry``).
"""

from __future__ import annotations

from typing import Any

from fhir_codec.model import class_name
from fhir_codec.registry import default_registry


def _by_class_name() -> dict[str, str]:
    registry = default_registry()
    return {
        class_name(shape.name): shape.name
        for shape in registry
        if not shape.is_resource
    }


def __getattr__(name: str) -> Any:
    if name.startswith("_"):
        raise AttributeError(name)
    shape_name = _by_class_name().get(name)
    if shape_name is None:
        raise AttributeError(f"module {__name__!r} has no datatype {name!r}")
    return default_registry().datatype_class(shape_name)


def __dir__() -> list[str]:
    return sorted(_by_class_name())
