"""Shape descriptors and the declaration vocabulary used by the catalog.

A :class:`Shape` describes one record kind: a resource (``Patient``), a
datatype (``HumanName``) or a backbone element nested inside another
shape (``Bundle.entry``).  Each shape lists its :class:`FieldDef` members
in wire order; inherited members (``id``, ``extension``, ``meta`` ...)
come from the shape's ``base``.

The catalog is written with five helpers::

    resource("Bundle",
        element("type", "code", "1..1", enum=BUNDLE_TYPE),
        backbone("entry", "0..*",
            element("fullUrl", "uri"),
            element("resource", "Resource"),
        ),
        base="Resource",
    )

``choice("value", ["Quantity", "string"])`` declares a ``value[x]``
group.  A type written ``"#CodeSystem.concept"`` is a content reference
to another backbone shape and is how recursive members are declared.
Type names are resolved lazily through the registry, so declaration
order never matters.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, NamedTuple, Optional, Sequence, Union

from fhir_codec.primitives import is_primitive


RESOURCE_TYPE = "Resource"
"""Type name of a slot that holds any resource, discriminated by
``resourceType``."""


# ── Field declarations ────────────────────────────────────────────


@dataclass(frozen=True)
class FieldDef:
    """One member of a shape.

    Attributes:
        name:    JSON key, or the group prefix for a choice (``value``).
        types:   Declared type name(s); several for a choice group.
        min:     Minimum occurrences (0 or 1 in practice).
        max:     Maximum occurrences; ``None`` means unbounded.
        enum:    Closed set of accepted codes for required bindings.
        choice:  True for a ``[x]`` group.
    """

    name: str
    types: tuple[str, ...]
    min: int = 0
    max: Optional[int] = 1
    enum: Optional[tuple[str, ...]] = None
    choice: bool = False

    @property
    def type(self) -> str:
        return self.types[0]

    @property
    def is_list(self) -> bool:
        return self.max is None or self.max > 1

    @property
    def required(self) -> bool:
        return self.min > 0

    @property
    def display_name(self) -> str:
        return f"{self.name}[x]" if self.choice else self.name

    @property
    def cardinality(self) -> str:
        upper = "*" if self.max is None else str(self.max)
        return f"{self.min}..{upper}"

    def variant_key(self, type_name: str) -> str:
        """JSON key of one choice variant: ``value`` + ``Quantity``."""
        return self.name + type_name[0].upper() + type_name[1:]

    def variants(self) -> Iterator[tuple[str, str]]:
        """Yield ``(json_key, type_name)`` for every key this field owns."""
        if self.choice:
            for type_name in self.types:
                yield self.variant_key(type_name), type_name
        else:
            yield self.name, self.type


class KeyInfo(NamedTuple):
    """What a JSON key means within a shape."""

    field: FieldDef
    type_name: str
    sibling: bool  # True for the ``_name`` primitive extension key


@dataclass(eq=False)
class Shape:
    """Declared structure of one record kind.

    Attributes:
        name:     Registry name (``Patient``, ``HumanName``,
                  ``CodeSystem.concept``).
        kind:     ``resource``, ``datatype`` or ``backbone``.
        fields:   Members declared on this shape, in wire order.
        base:     Parent shape whose members precede these ones.
        abstract: Abstract shapes are never instantiated from JSON.
        one_of:   Member names of which exactly one must be present.
        nested:   Backbone shapes declared inside this one.
    """

    name: str
    kind: str
    fields: tuple[FieldDef, ...] = ()
    base: Optional["Shape"] = None
    abstract: bool = False
    one_of: tuple[str, ...] = ()
    nested: list["Shape"] = field(default_factory=list, repr=False)
    _all_fields: Optional[tuple[FieldDef, ...]] = field(
        default=None, init=False, repr=False, compare=False,
    )
    _keys: Optional[dict[str, KeyInfo]] = field(
        default=None, init=False, repr=False, compare=False,
    )

    @property
    def is_resource(self) -> bool:
        return self.kind == "resource"

    @property
    def all_fields(self) -> tuple[FieldDef, ...]:
        """Inherited members first, then this shape's own."""
        if self._all_fields is None:
            inherited = self.base.all_fields if self.base is not None else ()
            self._all_fields = inherited + self.fields
        return self._all_fields

    @property
    def keys(self) -> dict[str, KeyInfo]:
        """Map every accepted JSON key to its :class:`KeyInfo`."""
        if self._keys is None:
            keys: dict[str, KeyInfo] = {}
            for fdef in self.all_fields:
                for key, type_name in fdef.variants():
                    keys[key] = KeyInfo(fdef, type_name, False)
                    if is_primitive(type_name):
                        keys["_" + key] = KeyInfo(fdef, type_name, True)
            self._keys = keys
        return self._keys

    def member(self, name: str) -> Optional[FieldDef]:
        """Look up a member by name (choice groups by their prefix)."""
        for fdef in self.all_fields:
            if fdef.name == name:
                return fdef
        return None

    def walk(self) -> Iterator["Shape"]:
        """Yield this shape and every backbone shape nested in it."""
        yield self
        for inner in self.nested:
            yield from inner.walk()


# ── Declaration vocabulary ────────────────────────────────────────


def _cardinality(card: str) -> tuple[int, Optional[int]]:
    low, _, high = card.partition("..")
    if not high:
        raise ValueError(f"Invalid cardinality {card!r}")
    return int(low), (None if high == "*" else int(high))


def element(
    name: str,
    type_name: str,
    card: str = "0..1",
    *,
    enum: Optional[Sequence[str]] = None,
) -> FieldDef:
    """Declare a single-typed member."""
    low, high = _cardinality(card)
    return FieldDef(
        name=name,
        types=(type_name.lstrip("#"),),
        min=low,
        max=high,
        enum=tuple(enum) if enum is not None else None,
    )


def choice(
    name: str,
    types: Iterable[str],
    card: str = "0..1",
) -> FieldDef:
    """Declare a ``name[x]`` choice-of-type member."""
    low, high = _cardinality(card)
    return FieldDef(
        name=name, types=tuple(types), min=low, max=high, choice=True,
    )


@dataclass(frozen=True)
class _BackboneSpec:
    name: str
    card: str
    members: tuple["Member", ...]
    one_of: tuple[str, ...]


Member = Union[FieldDef, _BackboneSpec]


def backbone(
    name: str,
    card: str,
    *members: Member,
    one_of: Sequence[str] = (),
) -> _BackboneSpec:
    """Declare an inline backbone element (an anonymous sub-structure).

    The backbone becomes its own shape named ``<Parent>.<name>``.
    """
    return _BackboneSpec(name, card, tuple(members), tuple(one_of))


def _build(
    name: str,
    kind: str,
    members: Sequence[Member],
    base: Optional[Shape],
    backbone_base: Optional[Shape],
    one_of: Sequence[str] = (),
    abstract: bool = False,
) -> Shape:
    fields: list[FieldDef] = []
    nested: list[Shape] = []
    for member in members:
        if isinstance(member, _BackboneSpec):
            path = f"{name}.{member.name}"
            inner = _build(
                path, "backbone", member.members, backbone_base,
                backbone_base, member.one_of,
            )
            nested.append(inner)
            fields.append(element(member.name, path, member.card))
        else:
            fields.append(member)
    _check_unique(name, base, fields)
    return Shape(
        name=name,
        kind=kind,
        fields=tuple(fields),
        base=base,
        abstract=abstract,
        one_of=tuple(one_of),
        nested=nested,
    )


def _check_unique(name: str, base: Optional[Shape], fields: list[FieldDef]) -> None:
    seen = {f.name for f in base.all_fields} if base is not None else set()
    for fdef in fields:
        if fdef.name in seen:
            raise ValueError(f"{name}: member {fdef.name!r} declared twice")
        seen.add(fdef.name)


class ShapeBuilder:
    """Builds shapes against a fixed set of base shapes.

    The catalog creates one builder holding ``Element``,
    ``BackboneElement``, ``Resource`` and ``DomainResource`` and then
    declares every other shape through it.  Backbones nested in a
    resource derive from ``BackboneElement``; those nested in a datatype
    derive from ``Element``.
    """

    def __init__(self, bases: dict[str, Shape]) -> None:
        self.bases = bases

    def _base(self, base: Union[str, Shape]) -> Shape:
        return self.bases[base] if isinstance(base, str) else base

    def resource(
        self,
        name: str,
        *members: Member,
        base: Union[str, Shape] = "DomainResource",
    ) -> Shape:
        return _build(
            name, "resource", members, self._base(base),
            self.bases["BackboneElement"],
        )

    def datatype(
        self,
        name: str,
        *members: Member,
        base: Union[str, Shape] = "Element",
        one_of: Sequence[str] = (),
        abstract: bool = False,
    ) -> Shape:
        return _build(
            name, "datatype", members, self._base(base),
            self.bases["Element"], one_of, abstract,
        )


def base_shape(
    name: str,
    kind: str,
    *members: Member,
    base: Optional[Shape] = None,
) -> Shape:
    """Declare one of the abstract root shapes."""
    return _build(name, kind, members, base, None, abstract=True)
