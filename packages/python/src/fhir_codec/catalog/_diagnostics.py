"""Diagnostic resources: observations, reports, imaging, specimens and
questionnaires."""

from __future__ import annotations

from fhir_codec.shapes import backbone, choice, element

from fhir_codec.catalog._base import artifact_review, canonical, resource
from fhir_codec.catalog._valuesets import (
    BIOLOGICAL_PRODUCT_CATEGORY,
    BIOLOGICAL_PRODUCT_STATUS,
    BIOLOGICAL_STORAGE_SCALE,
    DIAGNOSTIC_REPORT_STATUS,
    IMAGING_STUDY_STATUS,
    MEDIA_STATUS,
    OBSERVATION_STATUS,
    QUESTIONNAIRE_ENABLE_BEHAVIOR,
    QUESTIONNAIRE_ENABLE_OPERATOR,
    QUESTIONNAIRE_ITEM_TYPE,
    QUESTIONNAIRE_RESPONSE_STATUS,
    SEQUENCE_ORIENTATION,
    SEQUENCE_QUALITY_TYPE,
    SEQUENCE_REPOSITORY_TYPE,
    SEQUENCE_STRAND,
    SEQUENCE_TYPE,
    SPECIMEN_STATUS,
)

OBSERVATION_VALUE_TYPES = [
    "Quantity", "CodeableConcept", "string", "boolean", "integer", "Range",
    "Ratio", "SampledData", "time", "dateTime", "Period",
]

_ANSWER_TYPES = [
    "boolean", "decimal", "integer", "date", "dateTime", "time", "string",
    "uri", "Attachment", "Coding", "Quantity", "Reference",
]


RESOURCES = [
    resource(
        "Observation",
        element("identifier", "Identifier", "0..*"),
        element("basedOn", "Reference", "0..*"),
        element("partOf", "Reference", "0..*"),
        element("status", "code", "1..1", enum=OBSERVATION_STATUS),
        element("category", "CodeableConcept", "0..*"),
        element("code", "CodeableConcept", "1..1"),
        element("subject", "Reference"),
        element("focus", "Reference", "0..*"),
        element("encounter", "Reference"),
        choice("effective", ["dateTime", "Period", "Timing", "instant"]),
        element("issued", "instant"),
        element("performer", "Reference", "0..*"),
        choice("value", OBSERVATION_VALUE_TYPES),
        element("dataAbsentReason", "CodeableConcept"),
        element("interpretation", "CodeableConcept", "0..*"),
        element("note", "Annotation", "0..*"),
        element("bodySite", "CodeableConcept"),
        element("method", "CodeableConcept"),
        element("specimen", "Reference"),
        element("device", "Reference"),
        backbone(
            "referenceRange", "0..*",
            element("low", "Quantity"),
            element("high", "Quantity"),
            element("type", "CodeableConcept"),
            element("appliesTo", "CodeableConcept", "0..*"),
            element("age", "Range"),
            element("text", "string"),
        ),
        element("hasMember", "Reference", "0..*"),
        element("derivedFrom", "Reference", "0..*"),
        backbone(
            "component", "0..*",
            element("code", "CodeableConcept", "1..1"),
            choice("value", OBSERVATION_VALUE_TYPES),
            element("dataAbsentReason", "CodeableConcept"),
            element("interpretation", "CodeableConcept", "0..*"),
            element("referenceRange", "#Observation.referenceRange", "0..*"),
        ),
    ),
    resource(
        "DiagnosticReport",
        element("identifier", "Identifier", "0..*"),
        element("basedOn", "Reference", "0..*"),
        element("status", "code", "1..1", enum=DIAGNOSTIC_REPORT_STATUS),
        element("category", "CodeableConcept", "0..*"),
        element("code", "CodeableConcept", "1..1"),
        element("subject", "Reference"),
        element("encounter", "Reference"),
        choice("effective", ["dateTime", "Period"]),
        element("issued", "instant"),
        element("performer", "Reference", "0..*"),
        element("resultsInterpreter", "Reference", "0..*"),
        element("specimen", "Reference", "0..*"),
        element("result", "Reference", "0..*"),
        element("imagingStudy", "Reference", "0..*"),
        backbone(
            "media", "0..*",
            element("comment", "string"),
            element("link", "Reference", "1..1"),
        ),
        element("conclusion", "string"),
        element("conclusionCode", "CodeableConcept", "0..*"),
        element("presentedForm", "Attachment", "0..*"),
    ),
    resource(
        "ImagingStudy",
        element("identifier", "Identifier", "0..*"),
        element("status", "code", "1..1", enum=IMAGING_STUDY_STATUS),
        element("modality", "Coding", "0..*"),
        element("subject", "Reference", "1..1"),
        element("encounter", "Reference"),
        element("started", "dateTime"),
        element("basedOn", "Reference", "0..*"),
        element("referrer", "Reference"),
        element("interpreter", "Reference", "0..*"),
        element("endpoint", "Reference", "0..*"),
        element("numberOfSeries", "unsignedInt"),
        element("numberOfInstances", "unsignedInt"),
        element("procedureReference", "Reference"),
        element("procedureCode", "CodeableConcept", "0..*"),
        element("location", "Reference"),
        element("reasonCode", "CodeableConcept", "0..*"),
        element("reasonReference", "Reference", "0..*"),
        element("note", "Annotation", "0..*"),
        element("description", "string"),
        backbone(
            "series", "0..*",
            element("uid", "id", "1..1"),
            element("number", "unsignedInt"),
            element("modality", "Coding", "1..1"),
            element("description", "string"),
            element("numberOfInstances", "unsignedInt"),
            element("endpoint", "Reference", "0..*"),
            element("bodySite", "Coding"),
            element("laterality", "Coding"),
            element("specimen", "Reference", "0..*"),
            element("started", "dateTime"),
            backbone(
                "performer", "0..*",
                element("function", "CodeableConcept"),
                element("actor", "Reference", "1..1"),
            ),
            backbone(
                "instance", "0..*",
                element("uid", "id", "1..1"),
                element("sopClass", "Coding", "1..1"),
                element("number", "unsignedInt"),
                element("title", "string"),
            ),
        ),
    ),
    resource(
        "Media",
        element("identifier", "Identifier", "0..*"),
        element("basedOn", "Reference", "0..*"),
        element("partOf", "Reference", "0..*"),
        element("status", "code", "1..1", enum=MEDIA_STATUS),
        element("type", "CodeableConcept"),
        element("modality", "CodeableConcept"),
        element("view", "CodeableConcept"),
        element("subject", "Reference"),
        element("encounter", "Reference"),
        choice("created", ["dateTime", "Period"]),
        element("issued", "instant"),
        element("operator", "Reference"),
        element("reasonCode", "CodeableConcept", "0..*"),
        element("bodySite", "CodeableConcept"),
        element("deviceName", "string"),
        element("device", "Reference"),
        element("height", "positiveInt"),
        element("width", "positiveInt"),
        element("frames", "positiveInt"),
        element("duration", "decimal"),
        element("content", "Attachment", "1..1"),
        element("note", "Annotation", "0..*"),
    ),
    resource(
        "MolecularSequence",
        element("identifier", "Identifier", "0..*"),
        element("type", "code", enum=SEQUENCE_TYPE),
        element("coordinateSystem", "integer", "1..1"),
        element("patient", "Reference"),
        element("specimen", "Reference"),
        element("device", "Reference"),
        element("performer", "Reference"),
        element("quantity", "Quantity"),
        backbone(
            "referenceSeq", "0..1",
            element("chromosome", "CodeableConcept"),
            element("genomeBuild", "string"),
            element("orientation", "code", enum=SEQUENCE_ORIENTATION),
            element("referenceSeqId", "CodeableConcept"),
            element("referenceSeqPointer", "Reference"),
            element("referenceSeqString", "string"),
            element("strand", "code", enum=SEQUENCE_STRAND),
            element("windowStart", "integer"),
            element("windowEnd", "integer"),
        ),
        backbone(
            "variant", "0..*",
            element("start", "integer"),
            element("end", "integer"),
            element("observedAllele", "string"),
            element("referenceAllele", "string"),
            element("cigar", "string"),
            element("variantPointer", "Reference"),
        ),
        element("observedSeq", "string"),
        backbone(
            "quality", "0..*",
            element("type", "code", "1..1", enum=SEQUENCE_QUALITY_TYPE),
            element("standardSequence", "CodeableConcept"),
            element("start", "integer"),
            element("end", "integer"),
            element("score", "Quantity"),
            element("method", "CodeableConcept"),
            element("truthTP", "decimal"),
            element("queryTP", "decimal"),
            element("truthFN", "decimal"),
            element("queryFP", "decimal"),
            element("gtFP", "decimal"),
            element("precision", "decimal"),
            element("recall", "decimal"),
            element("fScore", "decimal"),
            backbone(
                "roc", "0..1",
                element("score", "integer", "0..*"),
                element("numTP", "integer", "0..*"),
                element("numFP", "integer", "0..*"),
                element("numFN", "integer", "0..*"),
                element("precision", "decimal", "0..*"),
                element("sensitivity", "decimal", "0..*"),
                element("fMeasure", "decimal", "0..*"),
            ),
        ),
        element("readCoverage", "integer"),
        backbone(
            "repository", "0..*",
            element("type", "code", "1..1", enum=SEQUENCE_REPOSITORY_TYPE),
            element("url", "uri"),
            element("name", "string"),
            element("datasetId", "string"),
            element("variantsetId", "string"),
            element("readsetId", "string"),
        ),
        element("pointer", "Reference", "0..*"),
        backbone(
            "structureVariant", "0..*",
            element("variantType", "CodeableConcept"),
            element("exact", "boolean"),
            element("length", "integer"),
            backbone(
                "outer", "0..1",
                element("start", "integer"),
                element("end", "integer"),
            ),
            element("inner", "#MolecularSequence.structureVariant.outer"),
        ),
    ),
    resource(
        "Specimen",
        element("identifier", "Identifier", "0..*"),
        element("accessionIdentifier", "Identifier"),
        element("status", "code", enum=SPECIMEN_STATUS),
        element("type", "CodeableConcept"),
        element("subject", "Reference"),
        element("receivedTime", "dateTime"),
        element("parent", "Reference", "0..*"),
        element("request", "Reference", "0..*"),
        backbone(
            "collection", "0..1",
            element("collector", "Reference"),
            choice("collected", ["dateTime", "Period"]),
            element("duration", "Duration"),
            element("quantity", "Quantity"),
            element("method", "CodeableConcept"),
            element("bodySite", "CodeableConcept"),
            choice("fastingStatus", ["CodeableConcept", "Duration"]),
        ),
        backbone(
            "processing", "0..*",
            element("description", "string"),
            element("procedure", "CodeableConcept"),
            element("additive", "Reference", "0..*"),
            choice("time", ["dateTime", "Period"]),
        ),
        backbone(
            "container", "0..*",
            element("identifier", "Identifier", "0..*"),
            element("description", "string"),
            element("type", "CodeableConcept"),
            element("capacity", "Quantity"),
            element("specimenQuantity", "Quantity"),
            choice("additive", ["CodeableConcept", "Reference"]),
        ),
        element("condition", "CodeableConcept", "0..*"),
        element("note", "Annotation", "0..*"),
    ),
    resource(
        "Questionnaire",
        *canonical(),
        element("derivedFrom", "canonical", "0..*"),
        element("subjectType", "code", "0..*"),
        *artifact_review()[:3],
        element("code", "Coding", "0..*"),
        backbone(
            "item", "0..*",
            element("linkId", "string", "1..1"),
            element("definition", "uri"),
            element("code", "Coding", "0..*"),
            element("prefix", "string"),
            element("text", "string"),
            element("type", "code", "1..1", enum=QUESTIONNAIRE_ITEM_TYPE),
            backbone(
                "enableWhen", "0..*",
                element("question", "string", "1..1"),
                element("operator", "code", "1..1",
                        enum=QUESTIONNAIRE_ENABLE_OPERATOR),
                choice(
                    "answer",
                    ["boolean", "decimal", "integer", "date", "dateTime",
                     "time", "string", "Coding", "Quantity", "Reference"],
                    "1..1",
                ),
            ),
            element("enableBehavior", "code", enum=QUESTIONNAIRE_ENABLE_BEHAVIOR),
            element("required", "boolean"),
            element("repeats", "boolean"),
            element("readOnly", "boolean"),
            element("maxLength", "integer"),
            element("answerValueSet", "canonical"),
            backbone(
                "answerOption", "0..*",
                choice(
                    "value",
                    ["integer", "date", "time", "string", "Coding", "Reference"],
                    "1..1",
                ),
                element("initialSelected", "boolean"),
            ),
            backbone(
                "initial", "0..*",
                choice("value", _ANSWER_TYPES, "1..1"),
            ),
            element("item", "#Questionnaire.item", "0..*"),
        ),
    ),
    resource(
        "QuestionnaireResponse",
        element("identifier", "Identifier"),
        element("basedOn", "Reference", "0..*"),
        element("partOf", "Reference", "0..*"),
        element("questionnaire", "canonical"),
        element("status", "code", "1..1", enum=QUESTIONNAIRE_RESPONSE_STATUS),
        element("subject", "Reference"),
        element("encounter", "Reference"),
        element("authored", "dateTime"),
        element("author", "Reference"),
        element("source", "Reference"),
        backbone(
            "item", "0..*",
            element("linkId", "string", "1..1"),
            element("definition", "uri"),
            element("text", "string"),
            backbone(
                "answer", "0..*",
                choice("value", _ANSWER_TYPES),
                element("item", "#QuestionnaireResponse.item", "0..*"),
            ),
            element("item", "#QuestionnaireResponse.item", "0..*"),
        ),
    ),
    resource(
        "BiologicallyDerivedProduct",
        element("identifier", "Identifier", "0..*"),
        element("productCategory", "code", enum=BIOLOGICAL_PRODUCT_CATEGORY),
        element("productCode", "CodeableConcept"),
        element("status", "code", enum=BIOLOGICAL_PRODUCT_STATUS),
        element("request", "Reference", "0..*"),
        element("quantity", "integer"),
        element("parent", "Reference", "0..*"),
        backbone(
            "collection", "0..1",
            element("collector", "Reference"),
            element("source", "Reference"),
            choice("collected", ["dateTime", "Period"]),
        ),
        backbone(
            "processing", "0..*",
            element("description", "string"),
            element("procedure", "CodeableConcept"),
            element("additive", "Reference"),
            choice("time", ["dateTime", "Period"]),
        ),
        backbone(
            "manipulation", "0..1",
            element("description", "string"),
            choice("time", ["dateTime", "Period"]),
        ),
        backbone(
            "storage", "0..*",
            element("description", "string"),
            element("temperature", "decimal"),
            element("scale", "code", enum=BIOLOGICAL_STORAGE_SCALE),
            element("duration", "Period"),
        ),
    ),
]
