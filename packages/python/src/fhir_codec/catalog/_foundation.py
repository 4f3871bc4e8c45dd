"""Foundation resources: exchange, documents, messaging and security."""

from __future__ import annotations

from fhir_codec.shapes import backbone, choice, element

from fhir_codec.catalog._base import OPEN_TYPES, canonical, resource
from fhir_codec.catalog._valuesets import (
    AUDIT_EVENT_ACTION,
    AUDIT_EVENT_OUTCOME,
    AUDIT_NETWORK_TYPE,
    BUNDLE_TYPE,
    COMPOSITION_ATTESTATION_MODE,
    COMPOSITION_STATUS,
    CONSENT_DATA_MEANING,
    CONSENT_PROVISION_TYPE,
    CONSENT_STATE,
    DOCUMENT_REFERENCE_STATUS,
    DOCUMENT_RELATIONSHIP,
    HTTP_VERB,
    ISSUE_SEVERITY,
    ISSUE_TYPE,
    LINKAGE_TYPE,
    LIST_MODE,
    LIST_STATUS,
    MESSAGE_SIGNIFICANCE_CATEGORY,
    MESSAGEHEADER_RESPONSE_REQUEST,
    PROVENANCE_ENTITY_ROLE,
    PUBLICATION_STATUS,
    RESPONSE_CODE,
    SEARCH_ENTRY_MODE,
    SUBSCRIPTION_CHANNEL_TYPE,
    SUBSCRIPTION_STATUS,
)


RESOURCES = [
    resource(
        "Bundle",
        element("identifier", "Identifier"),
        element("type", "code", "1..1", enum=BUNDLE_TYPE),
        element("timestamp", "instant"),
        element("total", "unsignedInt"),
        backbone(
            "link", "0..*",
            element("relation", "string", "1..1"),
            element("url", "uri", "1..1"),
        ),
        backbone(
            "entry", "0..*",
            element("link", "#Bundle.link", "0..*"),
            element("fullUrl", "uri"),
            element("resource", "Resource"),
            backbone(
                "search", "0..1",
                element("mode", "code", enum=SEARCH_ENTRY_MODE),
                element("score", "decimal"),
            ),
            backbone(
                "request", "0..1",
                element("method", "code", "1..1", enum=HTTP_VERB),
                element("url", "uri", "1..1"),
                element("ifNoneMatch", "string"),
                element("ifModifiedSince", "instant"),
                element("ifMatch", "string"),
                element("ifNoneExist", "string"),
            ),
            backbone(
                "response", "0..1",
                element("status", "string", "1..1"),
                element("location", "uri"),
                element("etag", "string"),
                element("lastModified", "instant"),
                element("outcome", "Resource"),
            ),
        ),
        element("signature", "Signature"),
        base="Resource",
    ),
    resource(
        "Binary",
        element("contentType", "code", "1..1"),
        element("securityContext", "Reference"),
        element("data", "base64Binary"),
        base="Resource",
    ),
    resource(
        "Parameters",
        backbone(
            "parameter", "0..*",
            element("name", "string", "1..1"),
            choice("value", OPEN_TYPES),
            element("resource", "Resource"),
            element("part", "#Parameters.parameter", "0..*"),
            one_of=("value", "resource", "part"),
        ),
        base="Resource",
    ),
    resource(
        "OperationOutcome",
        backbone(
            "issue", "1..*",
            element("severity", "code", "1..1", enum=ISSUE_SEVERITY),
            element("code", "code", "1..1", enum=ISSUE_TYPE),
            element("details", "CodeableConcept"),
            element("diagnostics", "string"),
            element("location", "string", "0..*"),
            element("expression", "string", "0..*"),
        ),
    ),
    resource(
        "Basic",
        element("identifier", "Identifier", "0..*"),
        element("code", "CodeableConcept", "1..1"),
        element("subject", "Reference"),
        element("created", "date"),
        element("author", "Reference"),
    ),
    resource(
        "Linkage",
        element("active", "boolean"),
        element("author", "Reference"),
        backbone(
            "item", "1..*",
            element("type", "code", "1..1", enum=LINKAGE_TYPE),
            element("resource", "Reference", "1..1"),
        ),
    ),
    resource(
        "MessageHeader",
        choice("event", ["Coding", "uri"], "1..1"),
        backbone(
            "destination", "0..*",
            element("name", "string"),
            element("target", "Reference"),
            element("endpoint", "url", "1..1"),
            element("receiver", "Reference"),
        ),
        element("sender", "Reference"),
        element("enterer", "Reference"),
        element("author", "Reference"),
        backbone(
            "source", "1..1",
            element("name", "string"),
            element("software", "string"),
            element("version", "string"),
            element("contact", "ContactPoint"),
            element("endpoint", "url", "1..1"),
        ),
        element("responsible", "Reference"),
        element("reason", "CodeableConcept"),
        backbone(
            "response", "0..1",
            element("identifier", "id", "1..1"),
            element("code", "code", "1..1", enum=RESPONSE_CODE),
            element("details", "Reference"),
        ),
        element("focus", "Reference", "0..*"),
        element("definition", "canonical"),
    ),
    resource(
        "MessageDefinition",
        *canonical(required=("date",)),
        element("base", "canonical"),
        element("parent", "canonical", "0..*"),
        element("replaces", "canonical", "0..*"),
        choice("event", ["Coding", "uri"], "1..1"),
        element("category", "code", enum=MESSAGE_SIGNIFICANCE_CATEGORY),
        backbone(
            "focus", "0..*",
            element("code", "code", "1..1"),
            element("profile", "canonical"),
            element("min", "unsignedInt", "1..1"),
            element("max", "string"),
        ),
        element("responseRequired", "code", enum=MESSAGEHEADER_RESPONSE_REQUEST),
        backbone(
            "allowedResponse", "0..*",
            element("message", "canonical", "1..1"),
            element("situation", "markdown"),
        ),
        element("graph", "canonical", "0..*"),
    ),
    resource(
        "Subscription",
        element("status", "code", "1..1", enum=SUBSCRIPTION_STATUS),
        element("contact", "ContactPoint", "0..*"),
        element("end", "instant"),
        element("reason", "string", "1..1"),
        element("criteria", "string", "1..1"),
        element("error", "string"),
        backbone(
            "channel", "1..1",
            element("type", "code", "1..1", enum=SUBSCRIPTION_CHANNEL_TYPE),
            element("endpoint", "url"),
            element("payload", "code"),
            element("header", "string", "0..*"),
        ),
    ),
    resource(
        "AuditEvent",
        element("type", "Coding", "1..1"),
        element("subtype", "Coding", "0..*"),
        element("action", "code", enum=AUDIT_EVENT_ACTION),
        element("period", "Period"),
        element("recorded", "instant", "1..1"),
        element("outcome", "code", enum=AUDIT_EVENT_OUTCOME),
        element("outcomeDesc", "string"),
        element("purposeOfEvent", "CodeableConcept", "0..*"),
        backbone(
            "agent", "1..*",
            element("type", "CodeableConcept"),
            element("role", "CodeableConcept", "0..*"),
            element("who", "Reference"),
            element("altId", "string"),
            element("name", "string"),
            element("requestor", "boolean", "1..1"),
            element("location", "Reference"),
            element("policy", "uri", "0..*"),
            element("media", "Coding"),
            backbone(
                "network", "0..1",
                element("address", "string"),
                element("type", "code", enum=AUDIT_NETWORK_TYPE),
            ),
            element("purposeOfUse", "CodeableConcept", "0..*"),
        ),
        backbone(
            "source", "1..1",
            element("site", "string"),
            element("observer", "Reference", "1..1"),
            element("type", "Coding", "0..*"),
        ),
        backbone(
            "entity", "0..*",
            element("what", "Reference"),
            element("type", "Coding"),
            element("role", "Coding"),
            element("lifecycle", "Coding"),
            element("securityLabel", "Coding", "0..*"),
            element("name", "string"),
            element("description", "string"),
            element("query", "base64Binary"),
            backbone(
                "detail", "0..*",
                element("type", "string", "1..1"),
                choice("value", ["string", "base64Binary"], "1..1"),
            ),
        ),
    ),
    resource(
        "Provenance",
        element("target", "Reference", "1..*"),
        choice("occurred", ["Period", "dateTime"]),
        element("recorded", "instant", "1..1"),
        element("policy", "uri", "0..*"),
        element("location", "Reference"),
        element("reason", "CodeableConcept", "0..*"),
        element("activity", "CodeableConcept"),
        backbone(
            "agent", "1..*",
            element("type", "CodeableConcept"),
            element("role", "CodeableConcept", "0..*"),
            element("who", "Reference", "1..1"),
            element("onBehalfOf", "Reference"),
        ),
        backbone(
            "entity", "0..*",
            element("role", "code", "1..1", enum=PROVENANCE_ENTITY_ROLE),
            element("what", "Reference", "1..1"),
            element("agent", "#Provenance.agent", "0..*"),
        ),
        element("signature", "Signature", "0..*"),
    ),
    resource(
        "Consent",
        element("identifier", "Identifier", "0..*"),
        element("status", "code", "1..1", enum=CONSENT_STATE),
        element("scope", "CodeableConcept", "1..1"),
        element("category", "CodeableConcept", "1..*"),
        element("patient", "Reference"),
        element("dateTime", "dateTime"),
        element("performer", "Reference", "0..*"),
        element("organization", "Reference", "0..*"),
        choice("source", ["Attachment", "Reference"]),
        backbone(
            "policy", "0..*",
            element("authority", "uri"),
            element("uri", "uri"),
        ),
        element("policyRule", "CodeableConcept"),
        backbone(
            "verification", "0..*",
            element("verified", "boolean", "1..1"),
            element("verifiedWith", "Reference"),
            element("verificationDate", "dateTime"),
        ),
        backbone(
            "provision", "0..1",
            element("type", "code", enum=CONSENT_PROVISION_TYPE),
            element("period", "Period"),
            backbone(
                "actor", "0..*",
                element("role", "CodeableConcept", "1..1"),
                element("reference", "Reference", "1..1"),
            ),
            element("action", "CodeableConcept", "0..*"),
            element("securityLabel", "Coding", "0..*"),
            element("purpose", "Coding", "0..*"),
            element("class", "Coding", "0..*"),
            element("code", "CodeableConcept", "0..*"),
            element("dataPeriod", "Period"),
            backbone(
                "data", "0..*",
                element("meaning", "code", "1..1", enum=CONSENT_DATA_MEANING),
                element("reference", "Reference", "1..1"),
            ),
            element("provision", "#Consent.provision", "0..*"),
        ),
    ),
    resource(
        "Composition",
        element("identifier", "Identifier"),
        element("status", "code", "1..1", enum=COMPOSITION_STATUS),
        element("type", "CodeableConcept", "1..1"),
        element("category", "CodeableConcept", "0..*"),
        element("subject", "Reference"),
        element("encounter", "Reference"),
        element("date", "dateTime", "1..1"),
        element("author", "Reference", "1..*"),
        element("title", "string", "1..1"),
        element("confidentiality", "code"),
        backbone(
            "attester", "0..*",
            element("mode", "code", "1..1", enum=COMPOSITION_ATTESTATION_MODE),
            element("time", "dateTime"),
            element("party", "Reference"),
        ),
        element("custodian", "Reference"),
        backbone(
            "relatesTo", "0..*",
            element("code", "code", "1..1", enum=DOCUMENT_RELATIONSHIP),
            choice("target", ["Identifier", "Reference"], "1..1"),
        ),
        backbone(
            "event", "0..*",
            element("code", "CodeableConcept", "0..*"),
            element("period", "Period"),
            element("detail", "Reference", "0..*"),
        ),
        backbone(
            "section", "0..*",
            element("title", "string"),
            element("code", "CodeableConcept"),
            element("author", "Reference", "0..*"),
            element("focus", "Reference"),
            element("text", "Narrative"),
            element("mode", "code", enum=LIST_MODE),
            element("orderedBy", "CodeableConcept"),
            element("entry", "Reference", "0..*"),
            element("emptyReason", "CodeableConcept"),
            element("section", "#Composition.section", "0..*"),
        ),
    ),
    resource(
        "DocumentManifest",
        element("masterIdentifier", "Identifier"),
        element("identifier", "Identifier", "0..*"),
        element("status", "code", "1..1", enum=DOCUMENT_REFERENCE_STATUS),
        element("type", "CodeableConcept"),
        element("subject", "Reference"),
        element("created", "dateTime"),
        element("author", "Reference", "0..*"),
        element("recipient", "Reference", "0..*"),
        element("source", "uri"),
        element("description", "string"),
        element("content", "Reference", "1..*"),
        backbone(
            "related", "0..*",
            element("identifier", "Identifier"),
            element("ref", "Reference"),
        ),
    ),
    resource(
        "DocumentReference",
        element("masterIdentifier", "Identifier"),
        element("identifier", "Identifier", "0..*"),
        element("status", "code", "1..1", enum=DOCUMENT_REFERENCE_STATUS),
        element("docStatus", "code", enum=COMPOSITION_STATUS),
        element("type", "CodeableConcept"),
        element("category", "CodeableConcept", "0..*"),
        element("subject", "Reference"),
        element("date", "instant"),
        element("author", "Reference", "0..*"),
        element("authenticator", "Reference"),
        element("custodian", "Reference"),
        backbone(
            "relatesTo", "0..*",
            element("code", "code", "1..1", enum=DOCUMENT_RELATIONSHIP),
            element("target", "Reference", "1..1"),
        ),
        element("description", "string"),
        element("securityLabel", "CodeableConcept", "0..*"),
        backbone(
            "content", "1..*",
            element("attachment", "Attachment", "1..1"),
            element("format", "Coding"),
        ),
        backbone(
            "context", "0..1",
            element("encounter", "Reference", "0..*"),
            element("event", "CodeableConcept", "0..*"),
            element("period", "Period"),
            element("facilityType", "CodeableConcept"),
            element("practiceSetting", "CodeableConcept"),
            element("sourcePatientInfo", "Reference"),
            element("related", "Reference", "0..*"),
        ),
    ),
    resource(
        "List",
        element("identifier", "Identifier", "0..*"),
        element("status", "code", "1..1", enum=LIST_STATUS),
        element("mode", "code", "1..1", enum=LIST_MODE),
        element("title", "string"),
        element("code", "CodeableConcept"),
        element("subject", "Reference"),
        element("encounter", "Reference"),
        element("date", "dateTime"),
        element("source", "Reference"),
        element("orderedBy", "CodeableConcept"),
        element("note", "Annotation", "0..*"),
        backbone(
            "entry", "0..*",
            element("flag", "CodeableConcept"),
            element("deleted", "boolean"),
            element("date", "dateTime"),
            element("item", "Reference", "1..1"),
        ),
        element("emptyReason", "CodeableConcept"),
    ),
    resource(
        "CatalogEntry",
        element("identifier", "Identifier", "0..*"),
        element("type", "CodeableConcept"),
        element("orderable", "boolean", "1..1"),
        element("referencedItem", "Reference", "1..1"),
        element("additionalIdentifier", "Identifier", "0..*"),
        element("classification", "CodeableConcept", "0..*"),
        element("status", "code", enum=PUBLICATION_STATUS),
        element("validityPeriod", "Period"),
        element("validTo", "dateTime"),
        element("lastUpdated", "dateTime"),
        element("additionalCharacteristic", "CodeableConcept", "0..*"),
        element("additionalClassification", "CodeableConcept", "0..*"),
        backbone(
            "relatedEntry", "0..*",
            element("relationtype", "code", "1..1",
                    enum=("triggers", "is-replaced-by")),
            element("item", "Reference", "1..1"),
        ),
    ),
]
