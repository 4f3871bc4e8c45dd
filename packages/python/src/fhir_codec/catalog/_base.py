"""Root shapes, the shared builder, and member groups reused across the
catalog.
"""

from __future__ import annotations

from fhir_codec.shapes import FieldDef, ShapeBuilder, base_shape, element

from fhir_codec.catalog._valuesets import PUBLICATION_STATUS


ELEMENT = base_shape(
    "Element", "datatype",
    element("id", "string"),
    element("extension", "Extension", "0..*"),
)

BACKBONE_ELEMENT = base_shape(
    "BackboneElement", "datatype",
    element("modifierExtension", "Extension", "0..*"),
    base=ELEMENT,
)

RESOURCE = base_shape(
    "Resource", "resource",
    element("id", "id"),
    element("meta", "Meta"),
    element("implicitRules", "uri"),
    element("language", "code"),
)

DOMAIN_RESOURCE = base_shape(
    "DomainResource", "resource",
    element("text", "Narrative"),
    element("contained", "Resource", "0..*"),
    element("extension", "Extension", "0..*"),
    element("modifierExtension", "Extension", "0..*"),
    base=RESOURCE,
)

_builder = ShapeBuilder({
    "Element": ELEMENT,
    "BackboneElement": BACKBONE_ELEMENT,
    "Resource": RESOURCE,
    "DomainResource": DOMAIN_RESOURCE,
})

resource = _builder.resource
datatype = _builder.datatype


# Types allowed in an open ``[x]`` slot (Extension.value, Parameters
# values, ElementDefinition fixed/pattern/default values ...).
OPEN_TYPES = (
    "base64Binary", "boolean", "canonical", "code", "date", "dateTime",
    "decimal", "id", "instant", "integer", "markdown", "oid", "positiveInt",
    "string", "time", "unsignedInt", "uri", "url", "uuid",
    "Address", "Age", "Annotation", "Attachment", "CodeableConcept", "Coding",
    "ContactPoint", "Count", "Distance", "Duration", "HumanName", "Identifier",
    "Money", "Period", "Quantity", "Range", "Ratio", "Reference",
    "SampledData", "Signature", "Timing",
    "ContactDetail", "Contributor", "DataRequirement", "Expression",
    "ParameterDefinition", "RelatedArtifact", "TriggerDefinition",
    "UsageContext", "Dosage", "Meta",
)


_CANONICAL = (
    ("url", "uri", "0..1"),
    ("identifier", "Identifier", "0..*"),
    ("version", "string", "0..1"),
    ("name", "string", "0..1"),
    ("title", "string", "0..1"),
    ("status", "code", "1..1"),
    ("experimental", "boolean", "0..1"),
    ("date", "dateTime", "0..1"),
    ("publisher", "string", "0..1"),
    ("contact", "ContactDetail", "0..*"),
    ("description", "markdown", "0..1"),
    ("useContext", "UsageContext", "0..*"),
    ("jurisdiction", "CodeableConcept", "0..*"),
    ("purpose", "markdown", "0..1"),
    ("copyright", "markdown", "0..1"),
)


def canonical(*, omit=(), required=(), cards=None, status=PUBLICATION_STATUS):
    """Members of a canonical (definitional) resource header.

    ``omit`` drops members, ``required`` makes them ``1..1`` and
    ``cards`` overrides individual cardinalities.
    """
    cards = cards or {}
    members = []
    for name, type_name, card in _CANONICAL:
        if name in omit:
            continue
        if name in required:
            card = "1..1"
        card = cards.get(name, card)
        members.append(element(
            name, type_name, card, enum=status if name == "status" else None,
        ))
    return tuple(members)


def artifact_review() -> tuple[FieldDef, ...]:
    """Review and authorship members shared by knowledge artifacts."""
    return (
        element("approvalDate", "date"),
        element("lastReviewDate", "date"),
        element("effectivePeriod", "Period"),
        element("topic", "CodeableConcept", "0..*"),
        element("author", "ContactDetail", "0..*"),
        element("editor", "ContactDetail", "0..*"),
        element("reviewer", "ContactDetail", "0..*"),
        element("endorser", "ContactDetail", "0..*"),
        element("relatedArtifact", "RelatedArtifact", "0..*"),
    )
