"""Clinical summary and care-provision resources."""

from __future__ import annotations

from fhir_codec.shapes import backbone, choice, element

from fhir_codec.catalog._base import resource
from fhir_codec.catalog._valuesets import (
    ADVERSE_EVENT_ACTUALITY,
    ALLERGY_CATEGORY,
    ALLERGY_CRITICALITY,
    ALLERGY_TYPE,
    CARE_PLAN_ACTIVITY_KIND,
    CARE_PLAN_ACTIVITY_STATUS,
    CARE_PLAN_INTENT,
    CARE_TEAM_STATUS,
    CLINICAL_IMPRESSION_STATUS,
    DETECTED_ISSUE_SEVERITY,
    DETECTED_ISSUE_STATUS,
    EVENT_STATUS,
    FAMILY_HISTORY_STATUS,
    FINANCIAL_STATUS,
    GOAL_LIFECYCLE_STATUS,
    REACTION_SEVERITY,
    REQUEST_STATUS,
    RISK_ASSESSMENT_STATUS,
    VISION_BASE,
    VISION_EYE,
)

_ONSET_TYPES = ["dateTime", "Age", "Period", "Range", "string"]


RESOURCES = [
    resource(
        "AllergyIntolerance",
        element("identifier", "Identifier", "0..*"),
        element("clinicalStatus", "CodeableConcept"),
        element("verificationStatus", "CodeableConcept"),
        element("type", "code", enum=ALLERGY_TYPE),
        element("category", "code", "0..*", enum=ALLERGY_CATEGORY),
        element("criticality", "code", enum=ALLERGY_CRITICALITY),
        element("code", "CodeableConcept"),
        element("patient", "Reference", "1..1"),
        element("encounter", "Reference"),
        choice("onset", _ONSET_TYPES),
        element("recordedDate", "dateTime"),
        element("recorder", "Reference"),
        element("asserter", "Reference"),
        element("lastOccurrence", "dateTime"),
        element("note", "Annotation", "0..*"),
        backbone(
            "reaction", "0..*",
            element("substance", "CodeableConcept"),
            element("manifestation", "CodeableConcept", "1..*"),
            element("description", "string"),
            element("onset", "dateTime"),
            element("severity", "code", enum=REACTION_SEVERITY),
            element("exposureRoute", "CodeableConcept"),
            element("note", "Annotation", "0..*"),
        ),
    ),
    resource(
        "AdverseEvent",
        element("identifier", "Identifier"),
        element("actuality", "code", "1..1", enum=ADVERSE_EVENT_ACTUALITY),
        element("category", "CodeableConcept", "0..*"),
        element("event", "CodeableConcept"),
        element("subject", "Reference", "1..1"),
        element("encounter", "Reference"),
        element("date", "dateTime"),
        element("detected", "dateTime"),
        element("recordedDate", "dateTime"),
        element("resultingCondition", "Reference", "0..*"),
        element("location", "Reference"),
        element("seriousness", "CodeableConcept"),
        element("severity", "CodeableConcept"),
        element("outcome", "CodeableConcept"),
        element("recorder", "Reference"),
        element("contributor", "Reference", "0..*"),
        backbone(
            "suspectEntity", "0..*",
            element("instance", "Reference", "1..1"),
            backbone(
                "causality", "0..*",
                element("assessment", "CodeableConcept"),
                element("productRelatedness", "string"),
                element("author", "Reference"),
                element("method", "CodeableConcept"),
            ),
        ),
        element("subjectMedicalHistory", "Reference", "0..*"),
        element("referenceDocument", "Reference", "0..*"),
        element("study", "Reference", "0..*"),
    ),
    resource(
        "Condition",
        element("identifier", "Identifier", "0..*"),
        element("clinicalStatus", "CodeableConcept"),
        element("verificationStatus", "CodeableConcept"),
        element("category", "CodeableConcept", "0..*"),
        element("severity", "CodeableConcept"),
        element("code", "CodeableConcept"),
        element("bodySite", "CodeableConcept", "0..*"),
        element("subject", "Reference", "1..1"),
        element("encounter", "Reference"),
        choice("onset", _ONSET_TYPES),
        choice("abatement", _ONSET_TYPES),
        element("recordedDate", "dateTime"),
        element("recorder", "Reference"),
        element("asserter", "Reference"),
        backbone(
            "stage", "0..*",
            element("summary", "CodeableConcept"),
            element("assessment", "Reference", "0..*"),
            element("type", "CodeableConcept"),
        ),
        backbone(
            "evidence", "0..*",
            element("code", "CodeableConcept", "0..*"),
            element("detail", "Reference", "0..*"),
        ),
        element("note", "Annotation", "0..*"),
    ),
    resource(
        "Procedure",
        element("identifier", "Identifier", "0..*"),
        element("instantiatesCanonical", "canonical", "0..*"),
        element("instantiatesUri", "uri", "0..*"),
        element("basedOn", "Reference", "0..*"),
        element("partOf", "Reference", "0..*"),
        element("status", "code", "1..1", enum=EVENT_STATUS),
        element("statusReason", "CodeableConcept"),
        element("category", "CodeableConcept"),
        element("code", "CodeableConcept"),
        element("subject", "Reference", "1..1"),
        element("encounter", "Reference"),
        choice("performed", ["dateTime", "Period", "string", "Age", "Range"]),
        element("recorder", "Reference"),
        element("asserter", "Reference"),
        backbone(
            "performer", "0..*",
            element("function", "CodeableConcept"),
            element("actor", "Reference", "1..1"),
            element("onBehalfOf", "Reference"),
        ),
        element("location", "Reference"),
        element("reasonCode", "CodeableConcept", "0..*"),
        element("reasonReference", "Reference", "0..*"),
        element("bodySite", "CodeableConcept", "0..*"),
        element("outcome", "CodeableConcept"),
        element("report", "Reference", "0..*"),
        element("complication", "CodeableConcept", "0..*"),
        element("complicationDetail", "Reference", "0..*"),
        element("followUp", "CodeableConcept", "0..*"),
        element("note", "Annotation", "0..*"),
        backbone(
            "focalDevice", "0..*",
            element("action", "CodeableConcept"),
            element("manipulated", "Reference", "1..1"),
        ),
        element("usedReference", "Reference", "0..*"),
        element("usedCode", "CodeableConcept", "0..*"),
    ),
    resource(
        "FamilyMemberHistory",
        element("identifier", "Identifier", "0..*"),
        element("instantiatesCanonical", "canonical", "0..*"),
        element("instantiatesUri", "uri", "0..*"),
        element("status", "code", "1..1", enum=FAMILY_HISTORY_STATUS),
        element("dataAbsentReason", "CodeableConcept"),
        element("patient", "Reference", "1..1"),
        element("date", "dateTime"),
        element("name", "string"),
        element("relationship", "CodeableConcept", "1..1"),
        element("sex", "CodeableConcept"),
        choice("born", ["Period", "date", "string"]),
        choice("age", ["Age", "Range", "string"]),
        element("estimatedAge", "boolean"),
        choice("deceased", ["boolean", "Age", "Range", "date", "string"]),
        element("reasonCode", "CodeableConcept", "0..*"),
        element("reasonReference", "Reference", "0..*"),
        element("note", "Annotation", "0..*"),
        backbone(
            "condition", "0..*",
            element("code", "CodeableConcept", "1..1"),
            element("outcome", "CodeableConcept"),
            element("contributedToDeath", "boolean"),
            choice("onset", ["Age", "Range", "Period", "string"]),
            element("note", "Annotation", "0..*"),
        ),
    ),
    resource(
        "ClinicalImpression",
        element("identifier", "Identifier", "0..*"),
        element("status", "code", "1..1", enum=CLINICAL_IMPRESSION_STATUS),
        element("statusReason", "CodeableConcept"),
        element("code", "CodeableConcept"),
        element("description", "string"),
        element("subject", "Reference", "1..1"),
        element("encounter", "Reference"),
        choice("effective", ["dateTime", "Period"]),
        element("date", "dateTime"),
        element("assessor", "Reference"),
        element("previous", "Reference"),
        element("problem", "Reference", "0..*"),
        backbone(
            "investigation", "0..*",
            element("code", "CodeableConcept", "1..1"),
            element("item", "Reference", "0..*"),
        ),
        element("protocol", "uri", "0..*"),
        element("summary", "string"),
        backbone(
            "finding", "0..*",
            element("itemCodeableConcept", "CodeableConcept"),
            element("itemReference", "Reference"),
            element("basis", "string"),
        ),
        element("prognosisCodeableConcept", "CodeableConcept", "0..*"),
        element("prognosisReference", "Reference", "0..*"),
        element("supportingInfo", "Reference", "0..*"),
        element("note", "Annotation", "0..*"),
    ),
    resource(
        "DetectedIssue",
        element("identifier", "Identifier", "0..*"),
        element("status", "code", "1..1", enum=DETECTED_ISSUE_STATUS),
        element("code", "CodeableConcept"),
        element("severity", "code", enum=DETECTED_ISSUE_SEVERITY),
        element("patient", "Reference"),
        choice("identified", ["dateTime", "Period"]),
        element("author", "Reference"),
        element("implicated", "Reference", "0..*"),
        backbone(
            "evidence", "0..*",
            element("code", "CodeableConcept", "0..*"),
            element("detail", "Reference", "0..*"),
        ),
        element("detail", "string"),
        element("reference", "uri"),
        backbone(
            "mitigation", "0..*",
            element("action", "CodeableConcept", "1..1"),
            element("date", "dateTime"),
            element("author", "Reference"),
        ),
    ),
    resource(
        "CarePlan",
        element("identifier", "Identifier", "0..*"),
        element("instantiatesCanonical", "canonical", "0..*"),
        element("instantiatesUri", "uri", "0..*"),
        element("basedOn", "Reference", "0..*"),
        element("replaces", "Reference", "0..*"),
        element("partOf", "Reference", "0..*"),
        element("status", "code", "1..1", enum=REQUEST_STATUS),
        element("intent", "code", "1..1", enum=CARE_PLAN_INTENT),
        element("category", "CodeableConcept", "0..*"),
        element("title", "string"),
        element("description", "string"),
        element("subject", "Reference", "1..1"),
        element("encounter", "Reference"),
        element("period", "Period"),
        element("created", "dateTime"),
        element("author", "Reference"),
        element("contributor", "Reference", "0..*"),
        element("careTeam", "Reference", "0..*"),
        element("addresses", "Reference", "0..*"),
        element("supportingInfo", "Reference", "0..*"),
        element("goal", "Reference", "0..*"),
        backbone(
            "activity", "0..*",
            element("outcomeCodeableConcept", "CodeableConcept", "0..*"),
            element("outcomeReference", "Reference", "0..*"),
            element("progress", "Annotation", "0..*"),
            element("reference", "Reference"),
            backbone(
                "detail", "0..1",
                element("kind", "code", enum=CARE_PLAN_ACTIVITY_KIND),
                element("instantiatesCanonical", "canonical", "0..*"),
                element("instantiatesUri", "uri", "0..*"),
                element("code", "CodeableConcept"),
                element("reasonCode", "CodeableConcept", "0..*"),
                element("reasonReference", "Reference", "0..*"),
                element("goal", "Reference", "0..*"),
                element("status", "code", "1..1", enum=CARE_PLAN_ACTIVITY_STATUS),
                element("statusReason", "CodeableConcept"),
                element("doNotPerform", "boolean"),
                choice("scheduled", ["Timing", "Period", "string"]),
                element("location", "Reference"),
                element("performer", "Reference", "0..*"),
                choice("product", ["CodeableConcept", "Reference"]),
                element("dailyAmount", "Quantity"),
                element("quantity", "Quantity"),
                element("description", "string"),
            ),
        ),
        element("note", "Annotation", "0..*"),
    ),
    resource(
        "CareTeam",
        element("identifier", "Identifier", "0..*"),
        element("status", "code", enum=CARE_TEAM_STATUS),
        element("category", "CodeableConcept", "0..*"),
        element("name", "string"),
        element("subject", "Reference"),
        element("encounter", "Reference"),
        element("period", "Period"),
        backbone(
            "participant", "0..*",
            element("role", "CodeableConcept", "0..*"),
            element("member", "Reference"),
            element("onBehalfOf", "Reference"),
            element("period", "Period"),
        ),
        element("reasonCode", "CodeableConcept", "0..*"),
        element("reasonReference", "Reference", "0..*"),
        element("managingOrganization", "Reference", "0..*"),
        element("telecom", "ContactPoint", "0..*"),
        element("note", "Annotation", "0..*"),
    ),
    resource(
        "Goal",
        element("identifier", "Identifier", "0..*"),
        element("lifecycleStatus", "code", "1..1", enum=GOAL_LIFECYCLE_STATUS),
        element("achievementStatus", "CodeableConcept"),
        element("category", "CodeableConcept", "0..*"),
        element("priority", "CodeableConcept"),
        element("description", "CodeableConcept", "1..1"),
        element("subject", "Reference", "1..1"),
        choice("start", ["date", "CodeableConcept"]),
        backbone(
            "target", "0..*",
            element("measure", "CodeableConcept"),
            choice(
                "detail",
                ["Quantity", "Range", "CodeableConcept", "string", "boolean",
                 "integer", "Ratio"],
            ),
            choice("due", ["date", "Duration"]),
        ),
        element("statusDate", "date"),
        element("statusReason", "string"),
        element("expressedBy", "Reference"),
        element("addresses", "Reference", "0..*"),
        element("note", "Annotation", "0..*"),
        element("outcomeCode", "CodeableConcept", "0..*"),
        element("outcomeReference", "Reference", "0..*"),
    ),
    resource(
        "RiskAssessment",
        element("identifier", "Identifier", "0..*"),
        element("basedOn", "Reference"),
        element("parent", "Reference"),
        element("status", "code", "1..1", enum=RISK_ASSESSMENT_STATUS),
        element("method", "CodeableConcept"),
        element("code", "CodeableConcept"),
        element("subject", "Reference", "1..1"),
        element("encounter", "Reference"),
        choice("occurrence", ["dateTime", "Period"]),
        element("condition", "Reference"),
        element("performer", "Reference"),
        element("reasonCode", "CodeableConcept", "0..*"),
        element("reasonReference", "Reference", "0..*"),
        element("basis", "Reference", "0..*"),
        backbone(
            "prediction", "0..*",
            element("outcome", "CodeableConcept"),
            choice("probability", ["decimal", "Range"]),
            element("qualitativeRisk", "CodeableConcept"),
            element("relativeRisk", "decimal"),
            choice("when", ["Period", "Range"]),
            element("rationale", "string"),
        ),
        element("mitigation", "string"),
        element("note", "Annotation", "0..*"),
    ),
    resource(
        "VisionPrescription",
        element("identifier", "Identifier", "0..*"),
        element("status", "code", "1..1", enum=FINANCIAL_STATUS),
        element("created", "dateTime", "1..1"),
        element("patient", "Reference", "1..1"),
        element("encounter", "Reference"),
        element("dateWritten", "dateTime", "1..1"),
        element("prescriber", "Reference", "1..1"),
        backbone(
            "lensSpecification", "1..*",
            element("product", "CodeableConcept", "1..1"),
            element("eye", "code", "1..1", enum=VISION_EYE),
            element("sphere", "decimal"),
            element("cylinder", "decimal"),
            element("axis", "integer"),
            backbone(
                "prism", "0..*",
                element("amount", "decimal", "1..1"),
                element("base", "code", "1..1", enum=VISION_BASE),
            ),
            element("add", "decimal"),
            element("power", "decimal"),
            element("backCurve", "decimal"),
            element("diameter", "decimal"),
            element("duration", "Quantity"),
            element("color", "string"),
            element("brand", "string"),
            element("note", "Annotation", "0..*"),
        ),
    ),
    resource(
        "BodyStructure",
        element("identifier", "Identifier", "0..*"),
        element("active", "boolean"),
        element("morphology", "CodeableConcept"),
        element("location", "CodeableConcept"),
        element("locationQualifier", "CodeableConcept", "0..*"),
        element("description", "string"),
        element("image", "Attachment", "0..*"),
        element("patient", "Reference", "1..1"),
    ),
]
