"""In-memory node model.

Every registered shape gets one generated class (``Patient``,
``HumanName``, ``CodeSystemConcept`` ...) deriving from one of the bases
defined here.  Nodes are mutable mappings keyed by FHIR JSON keys::

    patient = Patient(id="p1", active=True)
    patient.name = [HumanName(family="Doe", given=["Jane"])]
    patient["_birthDate"] = {"extension": [...]}

Declared members are also attributes; an absent member reads as
``None`` and assigning ``None`` removes it.  Keys the shape does not
declare are rejected at assignment time.  Plain dicts assigned to a
complex member are converted to the member's node class.

Values are not type-checked on assignment; the encoder checks the whole
tree before it writes anything.
"""

from __future__ import annotations

import copy
from collections.abc import Mapping, MutableMapping
from typing import Any, ClassVar, Iterator, Optional

from fhir_codec.errors import AmbiguousChoiceError
from fhir_codec.primitives import is_primitive
from fhir_codec.shapes import RESOURCE_TYPE, KeyInfo, Shape


class FHIRNode(MutableMapping):
    """Mapping over the JSON keys of one shape."""

    __slots__ = ("__data",)

    _shape: ClassVar[Optional[Shape]] = None
    _registry: ClassVar[Any] = None

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        object.__setattr__(self, "_FHIRNode__data", {})
        self.update(*args, **kwargs)

    # ── Mapping protocol ──────────────────────────────────────────

    def __getitem__(self, key: str) -> Any:
        return self.__data[key]

    def __setitem__(self, key: str, value: Any) -> None:
        info = self._key_info(key)
        if value is None:
            self.__data.pop(key, None)
        else:
            self.__data[key] = self._adopt(info, value)

    def __delitem__(self, key: str) -> None:
        del self.__data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self.__data)

    def __len__(self) -> int:
        return len(self.__data)

    # ── Attribute access ──────────────────────────────────────────

    def __getattr__(self, name: str) -> Any:
        shape = type(self)._shape
        if shape is not None and name in shape.keys:
            return self.__data.get(name)
        raise AttributeError(
            f"{type(self).__name__!r} object has no attribute {name!r}"
        )

    def __setattr__(self, name: str, value: Any) -> None:
        shape = type(self)._shape
        if shape is None or name not in shape.keys:
            raise AttributeError(
                f"{type(self).__name__!r} object has no field {name!r}"
            )
        self[name] = value

    def __delattr__(self, name: str) -> None:
        shape = type(self)._shape
        if shape is None or name not in shape.keys:
            raise AttributeError(name)
        self.__data.pop(name, None)

    # ── Equality, display, copying ────────────────────────────────

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return _compact(self.__data) == _compact(other._raw())

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.__data!r})"

    def __copy__(self) -> "FHIRNode":
        new = type(self).__new__(type(self))
        object.__setattr__(new, "_FHIRNode__data", dict(self.__data))
        return new

    def __deepcopy__(self, memo: dict) -> "FHIRNode":
        new = type(self).__new__(type(self))
        memo[id(self)] = new
        object.__setattr__(
            new, "_FHIRNode__data", copy.deepcopy(self.__data, memo)
        )
        return new

    # ── Internals shared with the codec ───────────────────────────

    def _raw(self) -> dict[str, Any]:
        return self.__data

    def _store(self, key: str, value: Any) -> None:
        self.__data[key] = value

    def _key_info(self, key: str) -> KeyInfo:
        shape = type(self)._shape
        if shape is None:
            raise TypeError(f"{type(self).__name__} is abstract")
        info = shape.keys.get(key)
        if info is None:
            raise KeyError(f"{shape.name} has no field {key!r}")
        return info

    def _adopt(self, info: KeyInfo, value: Any) -> Any:
        if info.field.is_list and isinstance(value, (list, tuple)):
            return [self._adopt_item(info, item) for item in value]
        return self._adopt_item(info, value)

    def _adopt_item(self, info: KeyInfo, value: Any) -> Any:
        if not isinstance(value, Mapping) or isinstance(value, FHIRNode):
            return value
        registry = self._registry
        if info.sibling:
            return registry.datatype_class("Element")(value)
        if is_primitive(info.type_name):
            return value
        if info.type_name == RESOURCE_TYPE:
            data = dict(value)
            name = data.pop("resourceType", None)
            if not isinstance(name, str) or registry.lookup(name) is None:
                return value
            return registry.resource_class(name)(data)
        return registry.datatype_class(info.type_name)(value)

    # ── Choice groups ─────────────────────────────────────────────

    def choice(self, name: str) -> Optional[tuple[str, Any]]:
        """Return the ``(type_name, value)`` set for choice group *name*.

        Returns ``None`` when no variant is set.

        Raises:
            KeyError: If *name* is not a choice group of this shape.
            AmbiguousChoiceError: If more than one variant is set.
        """
        fdef = self._choice_field(name)
        present = [
            (type_name, self.__data[key])
            for key, type_name in fdef.variants()
            if key in self.__data
        ]
        if len(present) > 1:
            raise AmbiguousChoiceError(
                f"{self._shape.name}.{fdef.display_name}",
                [fdef.variant_key(t) for t, _ in present],
            )
        return present[0] if present else None

    def set_choice(self, name: str, type_name: str, value: Any) -> None:
        """Set one variant of choice group *name*, clearing the others."""
        fdef = self._choice_field(name)
        if type_name not in fdef.types:
            raise KeyError(f"{fdef.display_name} does not accept {type_name!r}")
        for key, _ in fdef.variants():
            self.__data.pop(key, None)
        self[fdef.variant_key(type_name)] = value

    def _choice_field(self, name: str):
        shape = type(self)._shape
        fdef = shape.member(name) if shape is not None else None
        if fdef is None or not fdef.choice:
            raise KeyError(f"{type(self).__name__} has no choice group {name!r}")
        return fdef


def _compact(data: dict[str, Any]) -> dict[str, Any]:
    return {k: v for k, v in data.items() if v != []}


def _append(node: FHIRNode, key: str, item: Any) -> None:
    items = node.get(key)
    if items is None:
        node[key] = [item]
    else:
        items.append(item)


class _ExtensionCarrier:
    """``extension`` helpers for nodes that carry extensions."""

    __slots__ = ()

    def add_extension(self, url: str, **value: Any) -> "FHIRNode":
        """Append an Extension with *url* and one ``value[x]`` or nested
        ``extension`` list, e.g. ``add_extension(url, valueCode="year")``.
        """
        ext = self._registry.datatype_class("Extension")(url=url, **value)
        _append(self, "extension", ext)
        return ext

    def iter_extensions(self, url: Optional[str] = None) -> Iterator["FHIRNode"]:
        for ext in self.get("extension") or ():
            if url is None or ext.get("url") == url:
                yield ext

    def get_extension(self, url: str) -> Optional["FHIRNode"]:
        return next(self.iter_extensions(url), None)


class _ModifierExtensionCarrier:
    """``modifierExtension`` helpers."""

    __slots__ = ()

    def add_modifier_extension(self, url: str, **value: Any) -> "FHIRNode":
        ext = self._registry.datatype_class("Extension")(url=url, **value)
        _append(self, "modifierExtension", ext)
        return ext

    def iter_modifier_extensions(
        self, url: Optional[str] = None,
    ) -> Iterator["FHIRNode"]:
        for ext in self.get("modifierExtension") or ():
            if url is None or ext.get("url") == url:
                yield ext


# ── Node bases ────────────────────────────────────────────────────


class Element(_ExtensionCarrier, FHIRNode):
    """Base of every datatype node: ``id`` plus ``extension``."""

    __slots__ = ()


class BackboneElement(_ModifierExtensionCarrier, Element):
    """Base of inline sub-structures; adds ``modifierExtension``."""

    __slots__ = ()


class Resource(FHIRNode):
    """Base of every resource node."""

    __slots__ = ()

    resource_type: ClassVar[Optional[str]] = None


class DomainResource(_ModifierExtensionCarrier, _ExtensionCarrier, Resource):
    """Resource with narrative, contained resources and extensions."""

    __slots__ = ()


class OpaqueResource(Resource):
    """A resource whose type the registry does not know.

    Produced only when unknown resource types are tolerated.  The JSON
    members are kept verbatim (minus ``resourceType``) and written back
    unchanged.
    """

    __slots__ = ("_type",)

    def __init__(self, resource_type: str, data: Optional[Mapping] = None) -> None:
        object.__setattr__(self, "_type", resource_type)
        super().__init__()
        for key, value in (data or {}).items():
            self[key] = value

    @property
    def resource_type(self) -> str:  # type: ignore[override]
        return self._type

    def __setitem__(self, key: str, value: Any) -> None:
        if key == "resourceType":
            raise KeyError("resourceType is fixed for an opaque resource")
        if value is None:
            self._raw().pop(key, None)
        else:
            self._store(key, value)

    def __getattr__(self, name: str) -> Any:
        raise AttributeError(name)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"use item access on {self._type} members")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OpaqueResource):
            return NotImplemented
        return self._type == other._type and self._raw() == other._raw()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"OpaqueResource({self._type!r}, {self._raw()!r})"

    def __copy__(self) -> "OpaqueResource":
        return OpaqueResource(self._type, self._raw())

    def __deepcopy__(self, memo: dict) -> "OpaqueResource":
        return OpaqueResource(self._type, copy.deepcopy(self._raw(), memo))

    def to_json(self) -> dict[str, Any]:
        """Return the resource as it was read, ``resourceType`` first."""
        return {"resourceType": self._type, **copy.deepcopy(self._raw())}


NODE_BASES: dict[str, type] = {
    "Element": Element,
    "BackboneElement": BackboneElement,
    "Resource": Resource,
    "DomainResource": DomainResource,
}


def class_name(shape_name: str) -> str:
    """``CodeSystem.concept`` -> ``CodeSystemConcept``."""
    return "".join(part[0].upper() + part[1:] for part in shape_name.split("."))
