"""General-purpose, metadata and special-purpose datatypes."""

from __future__ import annotations

from fhir_codec.shapes import backbone, choice, element

from fhir_codec.catalog._base import (
    BACKBONE_ELEMENT,
    ELEMENT,
    OPEN_TYPES,
    datatype,
)
from fhir_codec.catalog._valuesets import (
    ADDRESS_TYPE,
    ADDRESS_USE,
    AGGREGATION_MODE,
    BINDING_STRENGTH,
    CONSTRAINT_SEVERITY,
    CONTACT_POINT_SYSTEM,
    CONTACT_POINT_USE,
    CONTRIBUTOR_TYPE,
    DAYS_OF_WEEK,
    DISCRIMINATOR_TYPE,
    EVENT_TIMING,
    IDENTIFIER_USE,
    NAME_USE,
    NARRATIVE_STATUS,
    OPERATION_PARAMETER_USE,
    PROPERTY_REPRESENTATION,
    QUANTITY_COMPARATOR,
    REFERENCE_VERSION_RULES,
    RELATED_ARTIFACT_TYPE,
    SLICING_RULES,
    SORT_DIRECTION,
    TRIGGER_TYPE,
    UNITS_OF_TIME,
)


QUANTITY = datatype(
    "Quantity",
    element("value", "decimal"),
    element("comparator", "code", enum=QUANTITY_COMPARATOR),
    element("unit", "string"),
    element("system", "uri"),
    element("code", "code"),
)

_BOUNDED_VALUES = (
    "date", "dateTime", "instant", "time", "decimal", "integer",
    "positiveInt", "unsignedInt", "Quantity",
)


DATATYPES = [
    ELEMENT,
    BACKBONE_ELEMENT,

    datatype(
        "Extension",
        element("url", "uri", "1..1"),
        choice("value", OPEN_TYPES),
        one_of=("extension", "value"),
    ),
    datatype(
        "Narrative",
        element("status", "code", "1..1", enum=NARRATIVE_STATUS),
        element("div", "xhtml", "1..1"),
    ),
    datatype(
        "Meta",
        element("versionId", "id"),
        element("lastUpdated", "instant"),
        element("source", "uri"),
        element("profile", "canonical", "0..*"),
        element("security", "Coding", "0..*"),
        element("tag", "Coding", "0..*"),
    ),

    # ── General purpose ───────────────────────────────────────────

    datatype(
        "Identifier",
        element("use", "code", enum=IDENTIFIER_USE),
        element("type", "CodeableConcept"),
        element("system", "uri"),
        element("value", "string"),
        element("period", "Period"),
        element("assigner", "Reference"),
    ),
    datatype(
        "HumanName",
        element("use", "code", enum=NAME_USE),
        element("text", "string"),
        element("family", "string"),
        element("given", "string", "0..*"),
        element("prefix", "string", "0..*"),
        element("suffix", "string", "0..*"),
        element("period", "Period"),
    ),
    datatype(
        "Address",
        element("use", "code", enum=ADDRESS_USE),
        element("type", "code", enum=ADDRESS_TYPE),
        element("text", "string"),
        element("line", "string", "0..*"),
        element("city", "string"),
        element("district", "string"),
        element("state", "string"),
        element("postalCode", "string"),
        element("country", "string"),
        element("period", "Period"),
    ),
    datatype(
        "ContactPoint",
        element("system", "code", enum=CONTACT_POINT_SYSTEM),
        element("value", "string"),
        element("use", "code", enum=CONTACT_POINT_USE),
        element("rank", "positiveInt"),
        element("period", "Period"),
    ),
    datatype(
        "Coding",
        element("system", "uri"),
        element("version", "string"),
        element("code", "code"),
        element("display", "string"),
        element("userSelected", "boolean"),
    ),
    datatype(
        "CodeableConcept",
        element("coding", "Coding", "0..*"),
        element("text", "string"),
    ),
    QUANTITY,
    datatype("Age", base=QUANTITY),
    datatype("Count", base=QUANTITY),
    datatype("Distance", base=QUANTITY),
    datatype("Duration", base=QUANTITY),
    datatype("SimpleQuantity", base=QUANTITY),
    datatype("MoneyQuantity", base=QUANTITY),
    datatype(
        "Range",
        element("low", "Quantity"),
        element("high", "Quantity"),
    ),
    datatype(
        "Ratio",
        element("numerator", "Quantity"),
        element("denominator", "Quantity"),
    ),
    datatype(
        "Period",
        element("start", "dateTime"),
        element("end", "dateTime"),
    ),
    datatype(
        "SampledData",
        element("origin", "Quantity", "1..1"),
        element("period", "decimal", "1..1"),
        element("factor", "decimal"),
        element("lowerLimit", "decimal"),
        element("upperLimit", "decimal"),
        element("dimensions", "positiveInt", "1..1"),
        element("data", "string"),
    ),
    datatype(
        "Attachment",
        element("contentType", "code"),
        element("language", "code"),
        element("data", "base64Binary"),
        element("url", "url"),
        element("size", "unsignedInt"),
        element("hash", "base64Binary"),
        element("title", "string"),
        element("creation", "dateTime"),
    ),
    datatype(
        "Annotation",
        choice("author", ["Reference", "string"]),
        element("time", "dateTime"),
        element("text", "markdown", "1..1"),
    ),
    datatype(
        "Signature",
        element("type", "Coding", "1..*"),
        element("when", "instant", "1..1"),
        element("who", "Reference", "1..1"),
        element("onBehalfOf", "Reference"),
        element("targetFormat", "code"),
        element("sigFormat", "code"),
        element("data", "base64Binary"),
    ),
    datatype(
        "Money",
        element("value", "decimal"),
        element("currency", "code"),
    ),
    datatype(
        "Reference",
        element("reference", "string"),
        element("type", "uri"),
        element("identifier", "Identifier"),
        element("display", "string"),
    ),
    datatype(
        "Timing",
        element("event", "dateTime", "0..*"),
        backbone(
            "repeat", "0..1",
            choice("bounds", ["Duration", "Range", "Period"]),
            element("count", "positiveInt"),
            element("countMax", "positiveInt"),
            element("duration", "decimal"),
            element("durationMax", "decimal"),
            element("durationUnit", "code", enum=UNITS_OF_TIME),
            element("frequency", "positiveInt"),
            element("frequencyMax", "positiveInt"),
            element("period", "decimal"),
            element("periodMax", "decimal"),
            element("periodUnit", "code", enum=UNITS_OF_TIME),
            element("dayOfWeek", "code", "0..*", enum=DAYS_OF_WEEK),
            element("timeOfDay", "time", "0..*"),
            element("when", "code", "0..*", enum=EVENT_TIMING),
            element("offset", "unsignedInt"),
        ),
        element("code", "CodeableConcept"),
        base="BackboneElement",
    ),
    datatype(
        "Dosage",
        element("sequence", "integer"),
        element("text", "string"),
        element("additionalInstruction", "CodeableConcept", "0..*"),
        element("patientInstruction", "string"),
        element("timing", "Timing"),
        choice("asNeeded", ["boolean", "CodeableConcept"]),
        element("site", "CodeableConcept"),
        element("route", "CodeableConcept"),
        element("method", "CodeableConcept"),
        backbone(
            "doseAndRate", "0..*",
            element("type", "CodeableConcept"),
            choice("dose", ["Range", "Quantity"]),
            choice("rate", ["Ratio", "Range", "Quantity"]),
        ),
        element("maxDosePerPeriod", "Ratio"),
        element("maxDosePerAdministration", "Quantity"),
        element("maxDosePerLifetime", "Quantity"),
        base="BackboneElement",
    ),

    # ── Metadata ──────────────────────────────────────────────────

    datatype(
        "ContactDetail",
        element("name", "string"),
        element("telecom", "ContactPoint", "0..*"),
    ),
    datatype(
        "Contributor",
        element("type", "code", "1..1", enum=CONTRIBUTOR_TYPE),
        element("name", "string", "1..1"),
        element("contact", "ContactDetail", "0..*"),
    ),
    datatype(
        "DataRequirement",
        element("type", "code", "1..1"),
        element("profile", "canonical", "0..*"),
        choice("subject", ["CodeableConcept", "Reference"]),
        element("mustSupport", "string", "0..*"),
        backbone(
            "codeFilter", "0..*",
            element("path", "string"),
            element("searchParam", "string"),
            element("valueSet", "canonical"),
            element("code", "Coding", "0..*"),
        ),
        backbone(
            "dateFilter", "0..*",
            element("path", "string"),
            element("searchParam", "string"),
            choice("value", ["dateTime", "Period", "Duration"]),
        ),
        element("limit", "positiveInt"),
        backbone(
            "sort", "0..*",
            element("path", "string", "1..1"),
            element("direction", "code", "1..1", enum=SORT_DIRECTION),
        ),
    ),
    datatype(
        "Expression",
        element("description", "string"),
        element("name", "id"),
        element("language", "code", "1..1"),
        element("expression", "string"),
        element("reference", "uri"),
    ),
    datatype(
        "ParameterDefinition",
        element("name", "code"),
        element("use", "code", "1..1", enum=OPERATION_PARAMETER_USE),
        element("min", "integer"),
        element("max", "string"),
        element("documentation", "string"),
        element("type", "code", "1..1"),
        element("profile", "canonical"),
    ),
    datatype(
        "RelatedArtifact",
        element("type", "code", "1..1", enum=RELATED_ARTIFACT_TYPE),
        element("label", "string"),
        element("display", "string"),
        element("citation", "markdown"),
        element("url", "url"),
        element("document", "Attachment"),
        element("resource", "canonical"),
    ),
    datatype(
        "TriggerDefinition",
        element("type", "code", "1..1", enum=TRIGGER_TYPE),
        element("name", "string"),
        choice("timing", ["Timing", "Reference", "date", "dateTime"]),
        element("data", "DataRequirement", "0..*"),
        element("condition", "Expression"),
    ),
    datatype(
        "UsageContext",
        element("code", "Coding", "1..1"),
        choice("value", ["CodeableConcept", "Quantity", "Range", "Reference"], "1..1"),
    ),

    # ── Special purpose ───────────────────────────────────────────

    datatype(
        "ElementDefinition",
        element("path", "string", "1..1"),
        element("representation", "code", "0..*", enum=PROPERTY_REPRESENTATION),
        element("sliceName", "string"),
        element("sliceIsConstraining", "boolean"),
        element("label", "string"),
        element("code", "Coding", "0..*"),
        backbone(
            "slicing", "0..1",
            backbone(
                "discriminator", "0..*",
                element("type", "code", "1..1", enum=DISCRIMINATOR_TYPE),
                element("path", "string", "1..1"),
            ),
            element("description", "string"),
            element("ordered", "boolean"),
            element("rules", "code", "1..1", enum=SLICING_RULES),
        ),
        element("short", "string"),
        element("definition", "markdown"),
        element("comment", "markdown"),
        element("requirements", "markdown"),
        element("alias", "string", "0..*"),
        element("min", "unsignedInt"),
        element("max", "string"),
        backbone(
            "base", "0..1",
            element("path", "string", "1..1"),
            element("min", "unsignedInt", "1..1"),
            element("max", "string", "1..1"),
        ),
        element("contentReference", "uri"),
        backbone(
            "type", "0..*",
            element("code", "uri", "1..1"),
            element("profile", "canonical", "0..*"),
            element("targetProfile", "canonical", "0..*"),
            element("aggregation", "code", "0..*", enum=AGGREGATION_MODE),
            element("versioning", "code", enum=REFERENCE_VERSION_RULES),
        ),
        choice("defaultValue", OPEN_TYPES),
        element("meaningWhenMissing", "markdown"),
        element("orderMeaning", "string"),
        choice("fixed", OPEN_TYPES),
        choice("pattern", OPEN_TYPES),
        backbone(
            "example", "0..*",
            element("label", "string", "1..1"),
            choice("value", OPEN_TYPES, "1..1"),
        ),
        choice("minValue", _BOUNDED_VALUES),
        choice("maxValue", _BOUNDED_VALUES),
        element("maxLength", "integer"),
        element("condition", "id", "0..*"),
        backbone(
            "constraint", "0..*",
            element("key", "id", "1..1"),
            element("requirements", "string"),
            element("severity", "code", "1..1", enum=CONSTRAINT_SEVERITY),
            element("human", "string", "1..1"),
            element("expression", "string"),
            element("xpath", "string"),
            element("source", "canonical"),
        ),
        element("mustSupport", "boolean"),
        element("isModifier", "boolean"),
        element("isModifierReason", "string"),
        element("isSummary", "boolean"),
        backbone(
            "binding", "0..1",
            element("strength", "code", "1..1", enum=BINDING_STRENGTH),
            element("description", "string"),
            element("valueSet", "canonical"),
        ),
        backbone(
            "mapping", "0..*",
            element("identity", "id", "1..1"),
            element("language", "code"),
            element("map", "string", "1..1"),
            element("comment", "string"),
        ),
        base="BackboneElement",
    ),
    datatype(
        "MarketingStatus",
        element("country", "CodeableConcept", "1..1"),
        element("jurisdiction", "CodeableConcept"),
        element("status", "CodeableConcept", "1..1"),
        element("dateRange", "Period", "1..1"),
        element("restoreDate", "dateTime"),
        base="BackboneElement",
    ),
    datatype(
        "Population",
        choice("age", ["Range", "CodeableConcept"]),
        element("gender", "CodeableConcept"),
        element("race", "CodeableConcept"),
        element("physiologicalCondition", "CodeableConcept"),
        base="BackboneElement",
    ),
    datatype(
        "ProdCharacteristic",
        element("height", "Quantity"),
        element("width", "Quantity"),
        element("depth", "Quantity"),
        element("weight", "Quantity"),
        element("nominalVolume", "Quantity"),
        element("externalDiameter", "Quantity"),
        element("shape", "string"),
        element("color", "string", "0..*"),
        element("imprint", "string", "0..*"),
        element("image", "Attachment", "0..*"),
        element("scoring", "CodeableConcept"),
        base="BackboneElement",
    ),
    datatype(
        "ProductShelfLife",
        element("identifier", "Identifier"),
        element("type", "CodeableConcept", "1..1"),
        element("period", "Quantity", "1..1"),
        element("specialPrecautionsForStorage", "CodeableConcept", "0..*"),
        base="BackboneElement",
    ),
    datatype(
        "SubstanceAmount",
        choice("amount", ["Quantity", "Range", "string"]),
        element("amountType", "CodeableConcept"),
        element("amountText", "string"),
        backbone(
            "referenceRange", "0..1",
            element("lowLimit", "Quantity"),
            element("highLimit", "Quantity"),
        ),
        base="BackboneElement",
    ),
]
