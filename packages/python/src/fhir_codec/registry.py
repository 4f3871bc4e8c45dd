"""Shape registry: resource-type and datatype names to shapes and classes.

The registry is filled once from the catalog and becomes read-only the
first time the codec uses it.  Node classes are generated lazily, one
per shape, and cached.
"""

from __future__ import annotations

import functools
import logging
import threading
from typing import Any, Iterator, Optional

from fhir_codec.model import NODE_BASES, Resource, class_name
from fhir_codec.shapes import Shape

logger = logging.getLogger(__name__)


class ShapeRegistry:
    """Mapping from ``resourceType`` strings and datatype names to shapes."""

    def __init__(self) -> None:
        self._resources: dict[str, Shape] = {}
        self._datatypes: dict[str, Shape] = {}
        self._classes: dict[str, type] = {}
        self._frozen = False
        self._lock = threading.Lock()

    @classmethod
    def from_catalog(cls) -> "ShapeRegistry":
        """Build a fresh, unfrozen registry holding the full R4 catalog."""
        from fhir_codec.catalog import install

        registry = cls()
        install(registry)
        logger.debug(
            "Registry built: %d resource types, %d datatypes",
            len(registry._resources), len(registry._datatypes),
        )
        return registry

    # ── Registration ──────────────────────────────────────────────

    def register(self, name: str, shape: Shape) -> None:
        """Add a resource shape under its ``resourceType``.

        Raises:
            ValueError: If *name* is already registered or does not match
                the shape.
            RuntimeError: If the registry has already been used.
        """
        self._check_open(name)
        if not shape.is_resource:
            raise ValueError(f"{shape.name} is a {shape.kind}, not a resource")
        self._add(self._resources, name, shape)

    def register_datatype(self, name: str, shape: Shape) -> None:
        """Add a datatype shape under *name*.

        Raises:
            ValueError: If *name* is already registered or does not match
                the shape.
            RuntimeError: If the registry has already been used.
        """
        self._check_open(name)
        if shape.is_resource:
            raise ValueError(f"{shape.name} is a resource; use register()")
        self._add(self._datatypes, name, shape)

    def _check_open(self, name: str) -> None:
        if self._frozen:
            raise RuntimeError(
                f"Cannot register {name!r}: registry is read-only once in use"
            )

    def _add(self, table: dict[str, Shape], name: str, shape: Shape) -> None:
        if shape.name != name:
            raise ValueError(f"Shape {shape.name!r} registered as {name!r}")
        inner = list(shape.walk())
        for candidate in inner:
            if candidate.name in self._resources or candidate.name in self._datatypes:
                raise ValueError(f"{candidate.name!r} is already registered")
        table[name] = shape
        for nested in inner[1:]:
            self._datatypes[nested.name] = nested

    def freeze(self) -> None:
        """Make the registry read-only.  Idempotent."""
        if not self._frozen:
            self._frozen = True
            logger.debug("Registry frozen with %d resource types", len(self._resources))

    @property
    def frozen(self) -> bool:
        return self._frozen

    # ── Lookup ────────────────────────────────────────────────────

    def lookup(self, name: str) -> Optional[Shape]:
        """Return the resource shape for *name*, or ``None``."""
        return self._resources.get(name)

    def datatype(self, name: str) -> Optional[Shape]:
        """Return the datatype or backbone shape for *name*, or ``None``."""
        return self._datatypes.get(name)

    def resolve(self, type_name: str) -> Shape:
        """Return the shape for any registered type name.

        Raises:
            KeyError: If *type_name* is unknown.
        """
        shape = self._datatypes.get(type_name) or self._resources.get(type_name)
        if shape is None:
            raise KeyError(f"Unknown type {type_name!r}")
        return shape

    def shape_of(self, resource: Any) -> str:
        """Return the ``resourceType`` a resource is emitted with."""
        if isinstance(resource, Resource):
            return resource.resource_type
        raise TypeError(f"Not a resource: {type(resource).__name__}")

    def resource_types(self) -> list[str]:
        return sorted(self._resources)

    def datatype_names(self) -> list[str]:
        return sorted(n for n, s in self._datatypes.items() if s.kind == "datatype")

    def __contains__(self, name: object) -> bool:
        return name in self._resources or name in self._datatypes

    def __iter__(self) -> Iterator[Shape]:
        yield from self._resources.values()
        yield from self._datatypes.values()

    def __len__(self) -> int:
        return len(self._resources) + len(self._datatypes)

    # ── Node classes ──────────────────────────────────────────────

    def resource_class(self, name: str) -> type:
        """Return the node class for resource type *name*.

        Raises:
            KeyError: If *name* is not a registered resource type.
        """
        shape = self._resources.get(name)
        if shape is None:
            raise KeyError(f"Unknown resource type {name!r}")
        return self.class_for(shape)

    def datatype_class(self, name: str) -> type:
        """Return the node class for datatype or backbone *name*."""
        shape = self._datatypes.get(name)
        if shape is None:
            raise KeyError(f"Unknown datatype {name!r}")
        return self.class_for(shape)

    def class_for(self, shape: Shape) -> type:
        cls = self._classes.get(shape.name)
        if cls is not None:
            return cls
        base = self._python_base(shape)
        with self._lock:
            cls = self._classes.get(shape.name)
            if cls is None:
                cls = self._make_class(shape, base)
                self._classes[shape.name] = cls
        return cls

    def _python_base(self, shape: Shape) -> type:
        if shape.base is None or shape.name in NODE_BASES:
            return NODE_BASES[shape.name]
        if shape.base.abstract:
            return NODE_BASES[shape.base.name]
        return self.class_for(shape.base)

    def _make_class(self, shape: Shape, base: type) -> type:
        module = "fhir_codec.resources" if shape.is_resource else "fhir_codec.datatypes"
        name = class_name(shape.name)
        namespace: dict[str, Any] = {
            "__slots__": (),
            "__module__": module,
            "__qualname__": name,
            "__doc__": f"FHIR R4 ``{shape.name}`` {shape.kind}.",
            "_shape": shape,
            "_registry": self,
        }
        if shape.is_resource:
            namespace["resource_type"] = shape.name
        return type(name, (base,), namespace)


@functools.lru_cache(maxsize=None)
def default_registry() -> ShapeRegistry:
    """The process-wide registry built from the R4 catalog."""
    return ShapeRegistry.from_catalog()


def register_resource_shape(
    name: str,
    shape: Shape,
    registry: Optional[ShapeRegistry] = None,
) -> None:
    """Register an additional resource shape (default registry if omitted)."""
    _resolve(registry).register(name, shape)


def register_datatype(
    name: str,
    shape: Shape,
    registry: Optional[ShapeRegistry] = None,
) -> None:
    """Register an additional datatype shape (default registry if omitted)."""
    _resolve(registry).register_datatype(name, shape)


def resource_type_of(resource: Any) -> str:
    """Return the ``resourceType`` of a resource node.

    Raises:
        TypeError: If *resource* is not a resource node.
    """
    if isinstance(resource, Resource):
        return resource.resource_type
    raise TypeError(f"Not a resource: {type(resource).__name__}")


def _resolve(registry: Optional[ShapeRegistry]) -> ShapeRegistry:
    return registry if registry is not None else default_registry()
