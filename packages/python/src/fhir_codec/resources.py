"""Generated resource classes, looked up on first attribute access.

>>> from fhir_codec.resources import Patient
>>> Patient(id="p1").resource_type
'Patient'

Classes come from the default registry; classes for a custom registry
are available through :meth:`ShapeRegistry.resource_class`.
"""

from __future__ import annotations

from typing import Any

from fhir_codec.registry import default_registry


def __getattr__(name: str) -> Any:
    if name.startswith("_"):
        raise AttributeError(name)
    registry = default_registry()
    if registry.lookup(name) is None:
        raise AttributeError(f"module {__name__!r} has no resource type {name!r}")
    return registry.resource_class(name)


def __dir__() -> list[str]:
    return default_registry().resource_types()
