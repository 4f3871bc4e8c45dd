"""Request, task and orchestration resources."""

from __future__ import annotations

from fhir_codec.shapes import backbone, choice, element

from fhir_codec.catalog._base import OPEN_TYPES, artifact_review, canonical, resource
from fhir_codec.catalog._valuesets import (
    ACTION_CARDINALITY_BEHAVIOR,
    ACTION_CONDITION_KIND,
    ACTION_GROUPING_BEHAVIOR,
    ACTION_PARTICIPANT_TYPE,
    ACTION_PRECHECK_BEHAVIOR,
    ACTION_RELATIONSHIP,
    ACTION_REQUIRED_BEHAVIOR,
    ACTION_SELECTION_BEHAVIOR,
    DEVICE_USE_STATUS,
    EVENT_STATUS,
    GUIDANCE_RESPONSE_STATUS,
    REQUEST_INTENT,
    REQUEST_PRIORITY,
    REQUEST_STATUS,
    SUPPLY_DELIVERY_STATUS,
    SUPPLY_REQUEST_STATUS,
    TASK_INTENT,
    TASK_STATUS,
)

_OCCURRENCE = ["dateTime", "Period", "Timing"]
_ACTION_TIMING = ["dateTime", "Age", "Period", "Duration", "Range", "Timing"]
_PARAMETER_VALUE = ["CodeableConcept", "Quantity", "Range", "boolean"]


def _request_header():
    return (
        element("identifier", "Identifier", "0..*"),
        element("instantiatesCanonical", "canonical", "0..*"),
        element("instantiatesUri", "uri", "0..*"),
        element("basedOn", "Reference", "0..*"),
    )


def _action_members(recursive_path):
    """Members shared by ``RequestGroup.action`` and
    ``PlanDefinition.action``; nested actions point back at
    ``recursive_path``."""
    return (
        element("prefix", "string"),
        element("title", "string"),
        element("description", "string"),
        element("textEquivalent", "string"),
        element("priority", "code", enum=REQUEST_PRIORITY),
        element("code", "CodeableConcept", "0..*"),
        element("documentation", "RelatedArtifact", "0..*"),
        backbone(
            "condition", "0..*",
            element("kind", "code", "1..1", enum=ACTION_CONDITION_KIND),
            element("expression", "Expression"),
        ),
        backbone(
            "relatedAction", "0..*",
            element("actionId", "id", "1..1"),
            element("relationship", "code", "1..1", enum=ACTION_RELATIONSHIP),
            choice("offset", ["Duration", "Range"]),
        ),
        choice("timing", _ACTION_TIMING),
        element("type", "CodeableConcept"),
        element("groupingBehavior", "code", enum=ACTION_GROUPING_BEHAVIOR),
        element("selectionBehavior", "code", enum=ACTION_SELECTION_BEHAVIOR),
        element("requiredBehavior", "code", enum=ACTION_REQUIRED_BEHAVIOR),
        element("precheckBehavior", "code", enum=ACTION_PRECHECK_BEHAVIOR),
        element("cardinalityBehavior", "code", enum=ACTION_CARDINALITY_BEHAVIOR),
        element("action", recursive_path, "0..*"),
    )


RESOURCES = [
    resource(
        "Task",
        element("identifier", "Identifier", "0..*"),
        element("instantiatesCanonical", "canonical"),
        element("instantiatesUri", "uri"),
        element("basedOn", "Reference", "0..*"),
        element("groupIdentifier", "Identifier"),
        element("partOf", "Reference", "0..*"),
        element("status", "code", "1..1", enum=TASK_STATUS),
        element("statusReason", "CodeableConcept"),
        element("businessStatus", "CodeableConcept"),
        element("intent", "code", "1..1", enum=TASK_INTENT),
        element("priority", "code", enum=REQUEST_PRIORITY),
        element("code", "CodeableConcept"),
        element("description", "string"),
        element("focus", "Reference"),
        element("for", "Reference"),
        element("encounter", "Reference"),
        element("executionPeriod", "Period"),
        element("authoredOn", "dateTime"),
        element("lastModified", "dateTime"),
        element("requester", "Reference"),
        element("performerType", "CodeableConcept", "0..*"),
        element("owner", "Reference"),
        element("location", "Reference"),
        element("reasonCode", "CodeableConcept"),
        element("reasonReference", "Reference"),
        element("insurance", "Reference", "0..*"),
        element("note", "Annotation", "0..*"),
        element("relevantHistory", "Reference", "0..*"),
        backbone(
            "restriction", "0..1",
            element("repetitions", "positiveInt"),
            element("period", "Period"),
            element("recipient", "Reference", "0..*"),
        ),
        backbone(
            "input", "0..*",
            element("type", "CodeableConcept", "1..1"),
            choice("value", OPEN_TYPES, "1..1"),
        ),
        element("output", "#Task.input", "0..*"),
    ),
    resource(
        "ServiceRequest",
        *_request_header(),
        element("replaces", "Reference", "0..*"),
        element("requisition", "Identifier"),
        element("status", "code", "1..1", enum=REQUEST_STATUS),
        element("intent", "code", "1..1", enum=REQUEST_INTENT),
        element("category", "CodeableConcept", "0..*"),
        element("priority", "code", enum=REQUEST_PRIORITY),
        element("doNotPerform", "boolean"),
        element("code", "CodeableConcept"),
        element("orderDetail", "CodeableConcept", "0..*"),
        choice("quantity", ["Quantity", "Ratio", "Range"]),
        element("subject", "Reference", "1..1"),
        element("encounter", "Reference"),
        choice("occurrence", _OCCURRENCE),
        choice("asNeeded", ["boolean", "CodeableConcept"]),
        element("authoredOn", "dateTime"),
        element("requester", "Reference"),
        element("performerType", "CodeableConcept"),
        element("performer", "Reference", "0..*"),
        element("locationCode", "CodeableConcept", "0..*"),
        element("locationReference", "Reference", "0..*"),
        element("reasonCode", "CodeableConcept", "0..*"),
        element("reasonReference", "Reference", "0..*"),
        element("insurance", "Reference", "0..*"),
        element("supportingInfo", "Reference", "0..*"),
        element("specimen", "Reference", "0..*"),
        element("bodySite", "CodeableConcept", "0..*"),
        element("note", "Annotation", "0..*"),
        element("patientInstruction", "string"),
        element("relevantHistory", "Reference", "0..*"),
    ),
    resource(
        "CommunicationRequest",
        element("identifier", "Identifier", "0..*"),
        element("basedOn", "Reference", "0..*"),
        element("replaces", "Reference", "0..*"),
        element("groupIdentifier", "Identifier"),
        element("status", "code", "1..1", enum=REQUEST_STATUS),
        element("statusReason", "CodeableConcept"),
        element("category", "CodeableConcept", "0..*"),
        element("priority", "code", enum=REQUEST_PRIORITY),
        element("doNotPerform", "boolean"),
        element("medium", "CodeableConcept", "0..*"),
        element("subject", "Reference"),
        element("about", "Reference", "0..*"),
        element("encounter", "Reference"),
        backbone(
            "payload", "0..*",
            choice("content", ["string", "Attachment", "Reference"], "1..1"),
        ),
        choice("occurrence", ["dateTime", "Period"]),
        element("authoredOn", "dateTime"),
        element("requester", "Reference"),
        element("recipient", "Reference", "0..*"),
        element("sender", "Reference"),
        element("reasonCode", "CodeableConcept", "0..*"),
        element("reasonReference", "Reference", "0..*"),
        element("note", "Annotation", "0..*"),
    ),
    resource(
        "Communication",
        *_request_header(),
        element("partOf", "Reference", "0..*"),
        element("inResponseTo", "Reference", "0..*"),
        element("status", "code", "1..1", enum=EVENT_STATUS),
        element("statusReason", "CodeableConcept"),
        element("category", "CodeableConcept", "0..*"),
        element("priority", "code", enum=REQUEST_PRIORITY),
        element("medium", "CodeableConcept", "0..*"),
        element("subject", "Reference"),
        element("topic", "CodeableConcept"),
        element("about", "Reference", "0..*"),
        element("encounter", "Reference"),
        element("sent", "dateTime"),
        element("received", "dateTime"),
        element("recipient", "Reference", "0..*"),
        element("sender", "Reference"),
        element("reasonCode", "CodeableConcept", "0..*"),
        element("reasonReference", "Reference", "0..*"),
        backbone(
            "payload", "0..*",
            choice("content", ["string", "Attachment", "Reference"], "1..1"),
        ),
        element("note", "Annotation", "0..*"),
    ),
    resource(
        "DeviceRequest",
        *_request_header(),
        element("priorRequest", "Reference", "0..*"),
        element("groupIdentifier", "Identifier"),
        element("status", "code", enum=REQUEST_STATUS),
        element("intent", "code", "1..1", enum=REQUEST_INTENT),
        element("priority", "code", enum=REQUEST_PRIORITY),
        choice("code", ["Reference", "CodeableConcept"], "1..1"),
        backbone(
            "parameter", "0..*",
            element("code", "CodeableConcept"),
            choice("value", _PARAMETER_VALUE),
        ),
        element("subject", "Reference", "1..1"),
        element("encounter", "Reference"),
        choice("occurrence", _OCCURRENCE),
        element("authoredOn", "dateTime"),
        element("requester", "Reference"),
        element("performerType", "CodeableConcept"),
        element("performer", "Reference"),
        element("reasonCode", "CodeableConcept", "0..*"),
        element("reasonReference", "Reference", "0..*"),
        element("insurance", "Reference", "0..*"),
        element("supportingInfo", "Reference", "0..*"),
        element("note", "Annotation", "0..*"),
        element("relevantHistory", "Reference", "0..*"),
    ),
    resource(
        "DeviceUseStatement",
        element("identifier", "Identifier", "0..*"),
        element("basedOn", "Reference", "0..*"),
        element("status", "code", "1..1", enum=DEVICE_USE_STATUS),
        element("subject", "Reference", "1..1"),
        element("derivedFrom", "Reference", "0..*"),
        choice("timing", ["Timing", "Period", "dateTime"]),
        element("recordedOn", "dateTime"),
        element("source", "Reference"),
        element("device", "Reference", "1..1"),
        element("reasonCode", "CodeableConcept", "0..*"),
        element("reasonReference", "Reference", "0..*"),
        element("bodySite", "CodeableConcept"),
        element("note", "Annotation", "0..*"),
    ),
    resource(
        "SupplyRequest",
        element("identifier", "Identifier", "0..*"),
        element("status", "code", enum=SUPPLY_REQUEST_STATUS),
        element("category", "CodeableConcept"),
        element("priority", "code", enum=REQUEST_PRIORITY),
        choice("item", ["CodeableConcept", "Reference"], "1..1"),
        element("quantity", "Quantity", "1..1"),
        backbone(
            "parameter", "0..*",
            element("code", "CodeableConcept"),
            choice("value", _PARAMETER_VALUE),
        ),
        choice("occurrence", _OCCURRENCE),
        element("authoredOn", "dateTime"),
        element("requester", "Reference"),
        element("supplier", "Reference", "0..*"),
        element("reasonCode", "CodeableConcept", "0..*"),
        element("reasonReference", "Reference", "0..*"),
        element("deliverFrom", "Reference"),
        element("deliverTo", "Reference"),
    ),
    resource(
        "SupplyDelivery",
        element("identifier", "Identifier", "0..*"),
        element("basedOn", "Reference", "0..*"),
        element("partOf", "Reference", "0..*"),
        element("status", "code", enum=SUPPLY_DELIVERY_STATUS),
        element("patient", "Reference"),
        element("type", "CodeableConcept"),
        backbone(
            "suppliedItem", "0..1",
            element("quantity", "Quantity"),
            choice("item", ["CodeableConcept", "Reference"]),
        ),
        choice("occurrence", _OCCURRENCE),
        element("supplier", "Reference"),
        element("destination", "Reference"),
        element("receiver", "Reference", "0..*"),
    ),
    resource(
        "GuidanceResponse",
        element("requestIdentifier", "Identifier"),
        element("identifier", "Identifier", "0..*"),
        choice("module", ["uri", "canonical", "CodeableConcept"], "1..1"),
        element("status", "code", "1..1", enum=GUIDANCE_RESPONSE_STATUS),
        element("subject", "Reference"),
        element("encounter", "Reference"),
        element("occurrenceDateTime", "dateTime"),
        element("performer", "Reference"),
        element("reasonCode", "CodeableConcept", "0..*"),
        element("reasonReference", "Reference", "0..*"),
        element("note", "Annotation", "0..*"),
        element("evaluationMessage", "Reference", "0..*"),
        element("outputParameters", "Reference"),
        element("result", "Reference"),
        element("dataRequirement", "DataRequirement", "0..*"),
    ),
    resource(
        "RequestGroup",
        *_request_header(),
        element("replaces", "Reference", "0..*"),
        element("groupIdentifier", "Identifier"),
        element("status", "code", "1..1", enum=REQUEST_STATUS),
        element("intent", "code", "1..1", enum=REQUEST_INTENT),
        element("priority", "code", enum=REQUEST_PRIORITY),
        element("code", "CodeableConcept"),
        element("subject", "Reference"),
        element("encounter", "Reference"),
        element("authoredOn", "dateTime"),
        element("author", "Reference"),
        element("reasonCode", "CodeableConcept", "0..*"),
        element("reasonReference", "Reference", "0..*"),
        element("note", "Annotation", "0..*"),
        backbone(
            "action", "0..*",
            *_action_members("#RequestGroup.action"),
            element("participant", "Reference", "0..*"),
            element("resource", "Reference"),
        ),
    ),
    resource(
        "ActivityDefinition",
        *canonical(),
        element("subtitle", "string"),
        choice("subject", ["CodeableConcept", "Reference"]),
        element("usage", "string"),
        *artifact_review(),
        element("library", "canonical", "0..*"),
        element("kind", "code"),
        element("profile", "canonical"),
        element("code", "CodeableConcept"),
        element("intent", "code", enum=REQUEST_INTENT),
        element("priority", "code", enum=REQUEST_PRIORITY),
        element("doNotPerform", "boolean"),
        choice("timing", _ACTION_TIMING),
        element("location", "Reference"),
        backbone(
            "participant", "0..*",
            element("type", "code", "1..1", enum=ACTION_PARTICIPANT_TYPE),
            element("role", "CodeableConcept"),
        ),
        choice("product", ["Reference", "CodeableConcept"]),
        element("quantity", "Quantity"),
        element("dosage", "Dosage", "0..*"),
        element("bodySite", "CodeableConcept", "0..*"),
        element("specimenRequirement", "Reference", "0..*"),
        element("observationRequirement", "Reference", "0..*"),
        element("observationResultRequirement", "Reference", "0..*"),
        element("transform", "canonical"),
        backbone(
            "dynamicValue", "0..*",
            element("path", "string", "1..1"),
            element("expression", "Expression", "1..1"),
        ),
    ),
    resource(
        "PlanDefinition",
        *canonical(),
        element("subtitle", "string"),
        element("type", "CodeableConcept"),
        choice("subject", ["CodeableConcept", "Reference"]),
        element("usage", "string"),
        *artifact_review(),
        element("library", "canonical", "0..*"),
        backbone(
            "goal", "0..*",
            element("category", "CodeableConcept"),
            element("description", "CodeableConcept", "1..1"),
            element("priority", "CodeableConcept"),
            element("start", "CodeableConcept"),
            element("addresses", "CodeableConcept", "0..*"),
            element("documentation", "RelatedArtifact", "0..*"),
            backbone(
                "target", "0..*",
                element("measure", "CodeableConcept"),
                choice("detail", ["Quantity", "Range", "CodeableConcept"]),
                element("due", "Duration"),
            ),
        ),
        backbone(
            "action", "0..*",
            *_action_members("#PlanDefinition.action"),
            element("reason", "CodeableConcept", "0..*"),
            element("goalId", "id", "0..*"),
            choice("subject", ["CodeableConcept", "Reference"]),
            element("trigger", "TriggerDefinition", "0..*"),
            element("input", "DataRequirement", "0..*"),
            element("output", "DataRequirement", "0..*"),
            backbone(
                "participant", "0..*",
                element("type", "code", "1..1", enum=ACTION_PARTICIPANT_TYPE),
                element("role", "CodeableConcept"),
            ),
            choice("definition", ["canonical", "uri"]),
            element("transform", "canonical"),
            backbone(
                "dynamicValue", "0..*",
                element("path", "string"),
                element("expression", "Expression"),
            ),
        ),
    ),
]
