"""Knowledge artifacts, quality measures and research resources."""

from __future__ import annotations

from fhir_codec.shapes import backbone, choice, element

from fhir_codec.catalog._base import artifact_review, canonical, resource
from fhir_codec.catalog._valuesets import (
    ADMINISTRATIVE_GENDER,
    EXPOSURE_STATE,
    GROUP_MEASURE,
    MEASURE_REPORT_STATUS,
    MEASURE_REPORT_TYPE,
    OBSERVATION_DATA_TYPE,
    OBSERVATION_RANGE_CATEGORY,
    RESEARCH_ELEMENT_TYPE,
    RESEARCH_STUDY_STATUS,
    RESEARCH_SUBJECT_STATUS,
    SPECIMEN_PREFERENCE,
    VARIABLE_TYPE,
)

_SUBJECT = choice("subject", ["CodeableConcept", "Reference"])
_EFFECTIVE = ["dateTime", "Period", "Duration", "Timing"]


def _knowledge_header():
    """Header of the knowledge artifacts that carry a usage subject."""
    return (
        *canonical(),
        element("subtitle", "string"),
        _SUBJECT,
        element("usage", "string"),
        *artifact_review(),
    )


def _evidence_header():
    """Header shared by the evidence-based medicine resources."""
    return (
        *canonical(omit=("experimental", "purpose")),
        element("shortTitle", "string"),
        element("subtitle", "string"),
        element("note", "Annotation", "0..*"),
        *artifact_review(),
    )


def _certainty():
    return backbone(
        "certainty", "0..*",
        element("rating", "CodeableConcept", "0..*"),
        element("note", "Annotation", "0..*"),
        backbone(
            "certaintySubcomponent", "0..*",
            element("type", "CodeableConcept"),
            element("rating", "CodeableConcept", "0..*"),
            element("note", "Annotation", "0..*"),
        ),
    )


def _precision_estimate():
    return backbone(
        "precisionEstimate", "0..*",
        element("type", "CodeableConcept"),
        element("level", "decimal"),
        element("from", "decimal"),
        element("to", "decimal"),
    )


def _measure_population():
    return backbone(
        "population", "0..*",
        element("code", "CodeableConcept"),
        element("count", "integer"),
        element("subjectResults", "Reference"),
    )


RESOURCES = [
    resource(
        "Library",
        *canonical(),
        element("subtitle", "string"),
        element("type", "CodeableConcept", "1..1"),
        _SUBJECT,
        element("usage", "string"),
        *artifact_review(),
        element("parameter", "ParameterDefinition", "0..*"),
        element("dataRequirement", "DataRequirement", "0..*"),
        element("content", "Attachment", "0..*"),
    ),
    resource(
        "Measure",
        *_knowledge_header(),
        element("library", "canonical", "0..*"),
        element("disclaimer", "markdown"),
        element("scoring", "CodeableConcept"),
        element("compositeScoring", "CodeableConcept"),
        element("type", "CodeableConcept", "0..*"),
        element("riskAdjustment", "string"),
        element("rateAggregation", "string"),
        element("rationale", "markdown"),
        element("clinicalRecommendationStatement", "markdown"),
        element("improvementNotation", "CodeableConcept"),
        element("definition", "markdown", "0..*"),
        element("guidance", "markdown"),
        backbone(
            "group", "0..*",
            element("code", "CodeableConcept"),
            element("description", "string"),
            backbone(
                "population", "0..*",
                element("code", "CodeableConcept"),
                element("description", "string"),
                element("criteria", "Expression", "1..1"),
            ),
            backbone(
                "stratifier", "0..*",
                element("code", "CodeableConcept"),
                element("description", "string"),
                element("criteria", "Expression"),
                backbone(
                    "component", "0..*",
                    element("code", "CodeableConcept"),
                    element("description", "string"),
                    element("criteria", "Expression", "1..1"),
                ),
            ),
        ),
        backbone(
            "supplementalData", "0..*",
            element("code", "CodeableConcept"),
            element("usage", "CodeableConcept", "0..*"),
            element("description", "string"),
            element("criteria", "Expression", "1..1"),
        ),
    ),
    resource(
        "MeasureReport",
        element("identifier", "Identifier", "0..*"),
        element("status", "code", "1..1", enum=MEASURE_REPORT_STATUS),
        element("type", "code", "1..1", enum=MEASURE_REPORT_TYPE),
        element("measure", "canonical", "1..1"),
        element("subject", "Reference"),
        element("date", "dateTime"),
        element("reporter", "Reference"),
        element("period", "Period", "1..1"),
        element("improvementNotation", "CodeableConcept"),
        backbone(
            "group", "0..*",
            element("code", "CodeableConcept"),
            _measure_population(),
            element("measureScore", "Quantity"),
            backbone(
                "stratifier", "0..*",
                element("code", "CodeableConcept", "0..*"),
                backbone(
                    "stratum", "0..*",
                    element("value", "CodeableConcept"),
                    backbone(
                        "component", "0..*",
                        element("code", "CodeableConcept", "1..1"),
                        element("value", "CodeableConcept", "1..1"),
                    ),
                    _measure_population(),
                    element("measureScore", "Quantity"),
                ),
            ),
        ),
        element("evaluatedResource", "Reference", "0..*"),
    ),
    resource(
        "EventDefinition",
        *_knowledge_header(),
        element("trigger", "TriggerDefinition", "1..*"),
    ),
    resource(
        "ResearchDefinition",
        *canonical(),
        element("shortTitle", "string"),
        element("subtitle", "string"),
        _SUBJECT,
        element("comment", "string", "0..*"),
        element("usage", "string"),
        *artifact_review(),
        element("library", "canonical", "0..*"),
        element("population", "Reference", "1..1"),
        element("exposure", "Reference"),
        element("exposureAlternative", "Reference"),
        element("outcome", "Reference"),
    ),
    resource(
        "ResearchElementDefinition",
        *canonical(),
        element("shortTitle", "string"),
        element("subtitle", "string"),
        _SUBJECT,
        element("comment", "string", "0..*"),
        element("usage", "string"),
        *artifact_review(),
        element("library", "canonical", "0..*"),
        element("type", "code", "1..1", enum=RESEARCH_ELEMENT_TYPE),
        element("variableType", "code", enum=VARIABLE_TYPE),
        backbone(
            "characteristic", "1..*",
            choice(
                "definition",
                ["CodeableConcept", "canonical", "Expression", "DataRequirement"],
                "1..1",
            ),
            element("usageContext", "UsageContext", "0..*"),
            element("exclude", "boolean"),
            element("unitOfMeasure", "CodeableConcept"),
            element("studyEffectiveDescription", "string"),
            choice("studyEffective", _EFFECTIVE),
            element("studyEffectiveTimeFromStart", "Duration"),
            element("studyEffectiveGroupMeasure", "code", enum=GROUP_MEASURE),
            element("participantEffectiveDescription", "string"),
            choice("participantEffective", _EFFECTIVE),
            element("participantEffectiveTimeFromStart", "Duration"),
            element("participantEffectiveGroupMeasure", "code", enum=GROUP_MEASURE),
        ),
    ),
    resource(
        "ResearchStudy",
        element("identifier", "Identifier", "0..*"),
        element("title", "string"),
        element("protocol", "Reference", "0..*"),
        element("partOf", "Reference", "0..*"),
        element("status", "code", "1..1", enum=RESEARCH_STUDY_STATUS),
        element("primaryPurposeType", "CodeableConcept"),
        element("phase", "CodeableConcept"),
        element("category", "CodeableConcept", "0..*"),
        element("focus", "CodeableConcept", "0..*"),
        element("condition", "CodeableConcept", "0..*"),
        element("contact", "ContactDetail", "0..*"),
        element("relatedArtifact", "RelatedArtifact", "0..*"),
        element("keyword", "CodeableConcept", "0..*"),
        element("location", "CodeableConcept", "0..*"),
        element("description", "markdown"),
        element("enrollment", "Reference", "0..*"),
        element("period", "Period"),
        element("sponsor", "Reference"),
        element("principalInvestigator", "Reference"),
        element("site", "Reference", "0..*"),
        element("reasonStopped", "CodeableConcept"),
        element("note", "Annotation", "0..*"),
        backbone(
            "arm", "0..*",
            element("name", "string", "1..1"),
            element("type", "CodeableConcept"),
            element("description", "string"),
        ),
        backbone(
            "objective", "0..*",
            element("name", "string"),
            element("type", "CodeableConcept"),
        ),
    ),
    resource(
        "ResearchSubject",
        element("identifier", "Identifier", "0..*"),
        element("status", "code", "1..1", enum=RESEARCH_SUBJECT_STATUS),
        element("period", "Period"),
        element("study", "Reference", "1..1"),
        element("individual", "Reference", "1..1"),
        element("assignedArm", "string"),
        element("actualArm", "string"),
        element("consent", "Reference"),
    ),
    resource(
        "Evidence",
        *_evidence_header(),
        element("exposureBackground", "Reference", "1..1"),
        element("exposureVariant", "Reference", "0..*"),
        element("outcome", "Reference", "0..*"),
    ),
    resource(
        "EvidenceVariable",
        *_evidence_header(),
        element("type", "code", enum=VARIABLE_TYPE),
        backbone(
            "characteristic", "1..*",
            element("description", "string"),
            choice(
                "definition",
                ["Reference", "canonical", "CodeableConcept", "Expression",
                 "DataRequirement", "TriggerDefinition"],
                "1..1",
            ),
            element("usageContext", "UsageContext", "0..*"),
            element("exclude", "boolean"),
            choice("participantEffective", _EFFECTIVE),
            element("timeFromStart", "Duration"),
            element("groupMeasure", "code", enum=GROUP_MEASURE),
        ),
    ),
    resource(
        "EffectEvidenceSynthesis",
        *_evidence_header(),
        element("synthesisType", "CodeableConcept"),
        element("studyType", "CodeableConcept"),
        element("population", "Reference", "1..1"),
        element("exposure", "Reference", "1..1"),
        element("exposureAlternative", "Reference", "1..1"),
        element("outcome", "Reference", "1..1"),
        backbone(
            "sampleSize", "0..1",
            element("description", "string"),
            element("numberOfStudies", "integer"),
            element("numberOfParticipants", "integer"),
        ),
        backbone(
            "resultsByExposure", "0..*",
            element("description", "string"),
            element("exposureState", "code", enum=EXPOSURE_STATE),
            element("variantState", "CodeableConcept"),
            element("riskEvidenceSynthesis", "Reference", "1..1"),
        ),
        backbone(
            "effectEstimate", "0..*",
            element("description", "string"),
            element("type", "CodeableConcept"),
            element("variantState", "CodeableConcept"),
            element("value", "decimal"),
            element("unitOfMeasure", "CodeableConcept"),
            _precision_estimate(),
        ),
        _certainty(),
    ),
    resource(
        "RiskEvidenceSynthesis",
        *_evidence_header(),
        element("synthesisType", "CodeableConcept"),
        element("studyType", "CodeableConcept"),
        element("population", "Reference", "1..1"),
        element("exposure", "Reference"),
        element("outcome", "Reference", "1..1"),
        backbone(
            "sampleSize", "0..1",
            element("description", "string"),
            element("numberOfStudies", "integer"),
            element("numberOfParticipants", "integer"),
        ),
        backbone(
            "riskEstimate", "0..1",
            element("description", "string"),
            element("type", "CodeableConcept"),
            element("value", "decimal"),
            element("unitOfMeasure", "CodeableConcept"),
            element("denominatorCount", "integer"),
            element("numeratorCount", "integer"),
            _precision_estimate(),
        ),
        _certainty(),
    ),
    resource(
        "ObservationDefinition",
        element("category", "CodeableConcept", "0..*"),
        element("code", "CodeableConcept", "1..1"),
        element("identifier", "Identifier", "0..*"),
        element("permittedDataType", "code", "0..*", enum=OBSERVATION_DATA_TYPE),
        element("multipleResultsAllowed", "boolean"),
        element("method", "CodeableConcept"),
        element("preferredReportName", "string"),
        backbone(
            "quantitativeDetails", "0..1",
            element("customaryUnit", "CodeableConcept"),
            element("unit", "CodeableConcept"),
            element("conversionFactor", "decimal"),
            element("decimalPrecision", "integer"),
        ),
        backbone(
            "qualifiedInterval", "0..*",
            element("category", "code", enum=OBSERVATION_RANGE_CATEGORY),
            element("range", "Range"),
            element("context", "CodeableConcept"),
            element("appliesTo", "CodeableConcept", "0..*"),
            element("gender", "code", enum=ADMINISTRATIVE_GENDER),
            element("age", "Range"),
            element("gestationalAge", "Range"),
            element("condition", "string"),
        ),
        element("validCodedValueSet", "Reference"),
        element("normalCodedValueSet", "Reference"),
        element("abnormalCodedValueSet", "Reference"),
        element("criticalCodedValueSet", "Reference"),
    ),
    resource(
        "SpecimenDefinition",
        element("identifier", "Identifier"),
        element("typeCollected", "CodeableConcept"),
        element("patientPreparation", "CodeableConcept", "0..*"),
        element("timeAspect", "string"),
        element("collection", "CodeableConcept", "0..*"),
        backbone(
            "typeTested", "0..*",
            element("isDerived", "boolean"),
            element("type", "CodeableConcept"),
            element("preference", "code", "1..1", enum=SPECIMEN_PREFERENCE),
            backbone(
                "container", "0..1",
                element("material", "CodeableConcept"),
                element("type", "CodeableConcept"),
                element("cap", "CodeableConcept"),
                element("description", "string"),
                element("capacity", "Quantity"),
                choice("minimumVolume", ["Quantity", "string"]),
                backbone(
                    "additive", "0..*",
                    choice("additive", ["CodeableConcept", "Reference"], "1..1"),
                ),
                element("preparation", "string"),
            ),
            element("requirement", "string"),
            element("retentionTime", "Duration"),
            element("rejectionCriterion", "CodeableConcept", "0..*"),
            backbone(
                "handling", "0..*",
                element("temperatureQualifier", "CodeableConcept"),
                element("temperatureRange", "Range"),
                element("maxDuration", "Duration"),
                element("instruction", "string"),
            ),
        ),
    ),
]
