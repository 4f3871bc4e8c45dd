"""The FHIR R4 shape catalog.

Every resource type and datatype of R4 is declared in the private
modules of this package, grouped the way FHIR R4 groups them.
:func:`install` loads all of them into a registry.

Extra profiles or local resources can be declared with the same
vocabulary and registered alongside::

    from fhir_codec.catalog import element, resource

    registry.register("Widget", resource(
        "Widget",
        element("code", "CodeableConcept", "1..1"),
    ))
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fhir_codec.shapes import backbone, choice, element

from fhir_codec.catalog import (
    _administration,
    _clinical,
    _conformance,
    _definitional,
    _diagnostics,
    _financial,
    _foundation,
    _medications,
    _products,
    _terminology,
    _workflow,
)
from fhir_codec.catalog._base import datatype, resource
from fhir_codec.catalog._datatypes import DATATYPES

if TYPE_CHECKING:
    from fhir_codec.registry import ShapeRegistry

logger = logging.getLogger(__name__)

_RESOURCE_MODULES = (
    _foundation,
    _conformance,
    _terminology,
    _administration,
    _clinical,
    _diagnostics,
    _medications,
    _workflow,
    _financial,
    _definitional,
    _products,
)


def install(registry: "ShapeRegistry") -> None:
    """Register every R4 datatype and resource shape in *registry*."""
    for shape in DATATYPES:
        registry.register_datatype(shape.name, shape)
    for module in _RESOURCE_MODULES:
        for shape in module.RESOURCES:
            registry.register(shape.name, shape)
        logger.debug("Loaded %d shapes from %s", len(module.RESOURCES), module.__name__)


__all__ = [
    "DATATYPES",
    "backbone",
    "choice",
    "datatype",
    "element",
    "install",
    "resource",
]
