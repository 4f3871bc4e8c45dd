"""Administration resources: people, organizations, devices, scheduling
and encounters.
"""

from __future__ import annotations

from fhir_codec.shapes import backbone, choice, element

from fhir_codec.catalog._base import resource
from fhir_codec.catalog._valuesets import (
    ADMINISTRATIVE_GENDER,
    APPOINTMENT_STATUS,
    DAYS_OF_WEEK,
    DEVICE_NAME_TYPE,
    DEVICE_STATUS,
    ENCOUNTER_LOCATION_STATUS,
    ENCOUNTER_STATUS,
    ENDPOINT_STATUS,
    EPISODE_OF_CARE_STATUS,
    FLAG_STATUS,
    GROUP_TYPE,
    IDENTITY_ASSURANCE_LEVEL,
    LINK_TYPE,
    LOCATION_MODE,
    LOCATION_STATUS,
    METRIC_CALIBRATION_STATE,
    METRIC_CALIBRATION_TYPE,
    METRIC_CATEGORY,
    METRIC_COLOR,
    METRIC_OPERATIONAL_STATUS,
    PARTICIPANT_REQUIRED,
    PARTICIPATION_STATUS,
    RESOURCE_STATUS,
    SLOT_STATUS,
    UDI_ENTRY_TYPE,
    VERIFICATION_RESULT_STATUS,
)


# Reused by PractitionerRole and HealthcareService; each owner gets its
# own nested shape.
_AVAILABLE_TIME = backbone(
    "availableTime", "0..*",
    element("daysOfWeek", "code", "0..*", enum=DAYS_OF_WEEK),
    element("allDay", "boolean"),
    element("availableStartTime", "time"),
    element("availableEndTime", "time"),
)

_NOT_AVAILABLE = backbone(
    "notAvailable", "0..*",
    element("description", "string", "1..1"),
    element("during", "Period"),
)

_COMMUNICATION = backbone(
    "communication", "0..*",
    element("language", "CodeableConcept", "1..1"),
    element("preferred", "boolean"),
)

_DEVICE_NAME = backbone(
    "deviceName", "0..*",
    element("name", "string", "1..1"),
    element("type", "code", "1..1", enum=DEVICE_NAME_TYPE),
)


RESOURCES = [
    resource(
        "Patient",
        element("identifier", "Identifier", "0..*"),
        element("active", "boolean"),
        element("name", "HumanName", "0..*"),
        element("telecom", "ContactPoint", "0..*"),
        element("gender", "code", enum=ADMINISTRATIVE_GENDER),
        element("birthDate", "date"),
        choice("deceased", ["boolean", "dateTime"]),
        element("address", "Address", "0..*"),
        element("maritalStatus", "CodeableConcept"),
        choice("multipleBirth", ["boolean", "integer"]),
        element("photo", "Attachment", "0..*"),
        backbone(
            "contact", "0..*",
            element("relationship", "CodeableConcept", "0..*"),
            element("name", "HumanName"),
            element("telecom", "ContactPoint", "0..*"),
            element("address", "Address"),
            element("gender", "code", enum=ADMINISTRATIVE_GENDER),
            element("organization", "Reference"),
            element("period", "Period"),
        ),
        _COMMUNICATION,
        element("generalPractitioner", "Reference", "0..*"),
        element("managingOrganization", "Reference"),
        backbone(
            "link", "0..*",
            element("other", "Reference", "1..1"),
            element("type", "code", "1..1", enum=LINK_TYPE),
        ),
    ),
    resource(
        "Practitioner",
        element("identifier", "Identifier", "0..*"),
        element("active", "boolean"),
        element("name", "HumanName", "0..*"),
        element("telecom", "ContactPoint", "0..*"),
        element("address", "Address", "0..*"),
        element("gender", "code", enum=ADMINISTRATIVE_GENDER),
        element("birthDate", "date"),
        element("photo", "Attachment", "0..*"),
        backbone(
            "qualification", "0..*",
            element("identifier", "Identifier", "0..*"),
            element("code", "CodeableConcept", "1..1"),
            element("period", "Period"),
            element("issuer", "Reference"),
        ),
        element("communication", "CodeableConcept", "0..*"),
    ),
    resource(
        "PractitionerRole",
        element("identifier", "Identifier", "0..*"),
        element("active", "boolean"),
        element("period", "Period"),
        element("practitioner", "Reference"),
        element("organization", "Reference"),
        element("code", "CodeableConcept", "0..*"),
        element("specialty", "CodeableConcept", "0..*"),
        element("location", "Reference", "0..*"),
        element("healthcareService", "Reference", "0..*"),
        element("telecom", "ContactPoint", "0..*"),
        _AVAILABLE_TIME,
        _NOT_AVAILABLE,
        element("availabilityExceptions", "string"),
        element("endpoint", "Reference", "0..*"),
    ),
    resource(
        "RelatedPerson",
        element("identifier", "Identifier", "0..*"),
        element("active", "boolean"),
        element("patient", "Reference", "1..1"),
        element("relationship", "CodeableConcept", "0..*"),
        element("name", "HumanName", "0..*"),
        element("telecom", "ContactPoint", "0..*"),
        element("gender", "code", enum=ADMINISTRATIVE_GENDER),
        element("birthDate", "date"),
        element("address", "Address", "0..*"),
        element("photo", "Attachment", "0..*"),
        element("period", "Period"),
        _COMMUNICATION,
    ),
    resource(
        "Person",
        element("identifier", "Identifier", "0..*"),
        element("name", "HumanName", "0..*"),
        element("telecom", "ContactPoint", "0..*"),
        element("gender", "code", enum=ADMINISTRATIVE_GENDER),
        element("birthDate", "date"),
        element("address", "Address", "0..*"),
        element("photo", "Attachment"),
        element("managingOrganization", "Reference"),
        element("active", "boolean"),
        backbone(
            "link", "0..*",
            element("target", "Reference", "1..1"),
            element("assurance", "code", enum=IDENTITY_ASSURANCE_LEVEL),
        ),
    ),
    resource(
        "Organization",
        element("identifier", "Identifier", "0..*"),
        element("active", "boolean"),
        element("type", "CodeableConcept", "0..*"),
        element("name", "string"),
        element("alias", "string", "0..*"),
        element("telecom", "ContactPoint", "0..*"),
        element("address", "Address", "0..*"),
        element("partOf", "Reference"),
        backbone(
            "contact", "0..*",
            element("purpose", "CodeableConcept"),
            element("name", "HumanName"),
            element("telecom", "ContactPoint", "0..*"),
            element("address", "Address"),
        ),
        element("endpoint", "Reference", "0..*"),
    ),
    resource(
        "OrganizationAffiliation",
        element("identifier", "Identifier", "0..*"),
        element("active", "boolean"),
        element("period", "Period"),
        element("organization", "Reference"),
        element("participatingOrganization", "Reference"),
        element("network", "Reference", "0..*"),
        element("code", "CodeableConcept", "0..*"),
        element("specialty", "CodeableConcept", "0..*"),
        element("location", "Reference", "0..*"),
        element("healthcareService", "Reference", "0..*"),
        element("telecom", "ContactPoint", "0..*"),
        element("endpoint", "Reference", "0..*"),
    ),
    resource(
        "HealthcareService",
        element("identifier", "Identifier", "0..*"),
        element("active", "boolean"),
        element("providedBy", "Reference"),
        element("category", "CodeableConcept", "0..*"),
        element("type", "CodeableConcept", "0..*"),
        element("specialty", "CodeableConcept", "0..*"),
        element("location", "Reference", "0..*"),
        element("name", "string"),
        element("comment", "string"),
        element("extraDetails", "markdown"),
        element("photo", "Attachment"),
        element("telecom", "ContactPoint", "0..*"),
        element("coverageArea", "Reference", "0..*"),
        element("serviceProvisionCode", "CodeableConcept", "0..*"),
        backbone(
            "eligibility", "0..*",
            element("code", "CodeableConcept"),
            element("comment", "markdown"),
        ),
        element("program", "CodeableConcept", "0..*"),
        element("characteristic", "CodeableConcept", "0..*"),
        element("communication", "CodeableConcept", "0..*"),
        element("referralMethod", "CodeableConcept", "0..*"),
        element("appointmentRequired", "boolean"),
        _AVAILABLE_TIME,
        _NOT_AVAILABLE,
        element("availabilityExceptions", "string"),
        element("endpoint", "Reference", "0..*"),
    ),
    resource(
        "Endpoint",
        element("identifier", "Identifier", "0..*"),
        element("status", "code", "1..1", enum=ENDPOINT_STATUS),
        element("connectionType", "Coding", "1..1"),
        element("name", "string"),
        element("managingOrganization", "Reference"),
        element("contact", "ContactPoint", "0..*"),
        element("period", "Period"),
        element("payloadType", "CodeableConcept", "1..*"),
        element("payloadMimeType", "code", "0..*"),
        element("address", "url", "1..1"),
        element("header", "string", "0..*"),
    ),
    resource(
        "Location",
        element("identifier", "Identifier", "0..*"),
        element("status", "code", enum=LOCATION_STATUS),
        element("operationalStatus", "Coding"),
        element("name", "string"),
        element("alias", "string", "0..*"),
        element("description", "string"),
        element("mode", "code", enum=LOCATION_MODE),
        element("type", "CodeableConcept", "0..*"),
        element("telecom", "ContactPoint", "0..*"),
        element("address", "Address"),
        element("physicalType", "CodeableConcept"),
        backbone(
            "position", "0..1",
            element("longitude", "decimal", "1..1"),
            element("latitude", "decimal", "1..1"),
            element("altitude", "decimal"),
        ),
        element("managingOrganization", "Reference"),
        element("partOf", "Reference"),
        backbone(
            "hoursOfOperation", "0..*",
            element("daysOfWeek", "code", "0..*", enum=DAYS_OF_WEEK),
            element("allDay", "boolean"),
            element("openingTime", "time"),
            element("closingTime", "time"),
        ),
        element("availabilityExceptions", "string"),
        element("endpoint", "Reference", "0..*"),
    ),
    resource(
        "Group",
        element("identifier", "Identifier", "0..*"),
        element("active", "boolean"),
        element("type", "code", "1..1", enum=GROUP_TYPE),
        element("actual", "boolean", "1..1"),
        element("code", "CodeableConcept"),
        element("name", "string"),
        element("quantity", "unsignedInt"),
        element("managingEntity", "Reference"),
        backbone(
            "characteristic", "0..*",
            element("code", "CodeableConcept", "1..1"),
            choice(
                "value",
                ["CodeableConcept", "boolean", "Quantity", "Range", "Reference"],
                "1..1",
            ),
            element("exclude", "boolean", "1..1"),
            element("period", "Period"),
        ),
        backbone(
            "member", "0..*",
            element("entity", "Reference", "1..1"),
            element("period", "Period"),
            element("inactive", "boolean"),
        ),
    ),
    resource(
        "Device",
        element("identifier", "Identifier", "0..*"),
        element("definition", "Reference"),
        backbone(
            "udiCarrier", "0..*",
            element("deviceIdentifier", "string"),
            element("issuer", "uri"),
            element("jurisdiction", "uri"),
            element("carrierAIDC", "base64Binary"),
            element("carrierHRF", "string"),
            element("entryType", "code", enum=UDI_ENTRY_TYPE),
        ),
        element("status", "code", enum=DEVICE_STATUS),
        element("statusReason", "CodeableConcept", "0..*"),
        element("distinctIdentifier", "string"),
        element("manufacturer", "string"),
        element("manufactureDate", "dateTime"),
        element("expirationDate", "dateTime"),
        element("lotNumber", "string"),
        element("serialNumber", "string"),
        _DEVICE_NAME,
        element("modelNumber", "string"),
        element("partNumber", "string"),
        element("type", "CodeableConcept"),
        backbone(
            "specialization", "0..*",
            element("systemType", "CodeableConcept", "1..1"),
            element("version", "string"),
        ),
        backbone(
            "version", "0..*",
            element("type", "CodeableConcept"),
            element("component", "Identifier"),
            element("value", "string", "1..1"),
        ),
        backbone(
            "property", "0..*",
            element("type", "CodeableConcept", "1..1"),
            element("valueQuantity", "Quantity", "0..*"),
            element("valueCode", "CodeableConcept", "0..*"),
        ),
        element("patient", "Reference"),
        element("owner", "Reference"),
        element("contact", "ContactPoint", "0..*"),
        element("location", "Reference"),
        element("url", "uri"),
        element("note", "Annotation", "0..*"),
        element("safety", "CodeableConcept", "0..*"),
        element("parent", "Reference"),
    ),
    resource(
        "DeviceDefinition",
        element("identifier", "Identifier", "0..*"),
        backbone(
            "udiDeviceIdentifier", "0..*",
            element("deviceIdentifier", "string", "1..1"),
            element("issuer", "uri", "1..1"),
            element("jurisdiction", "uri", "1..1"),
        ),
        choice("manufacturer", ["string", "Reference"]),
        _DEVICE_NAME,
        element("modelNumber", "string"),
        element("type", "CodeableConcept"),
        backbone(
            "specialization", "0..*",
            element("systemType", "string", "1..1"),
            element("version", "string"),
        ),
        element("version", "string", "0..*"),
        element("safety", "CodeableConcept", "0..*"),
        element("shelfLifeStorage", "ProductShelfLife", "0..*"),
        element("physicalCharacteristics", "ProdCharacteristic"),
        element("languageCode", "CodeableConcept", "0..*"),
        backbone(
            "capability", "0..*",
            element("type", "CodeableConcept", "1..1"),
            element("description", "CodeableConcept", "0..*"),
        ),
        backbone(
            "property", "0..*",
            element("type", "CodeableConcept", "1..1"),
            element("valueQuantity", "Quantity", "0..*"),
            element("valueCode", "CodeableConcept", "0..*"),
        ),
        element("owner", "Reference"),
        element("contact", "ContactPoint", "0..*"),
        element("url", "uri"),
        element("onlineInformation", "uri"),
        element("note", "Annotation", "0..*"),
        element("quantity", "Quantity"),
        element("parentDevice", "Reference"),
        backbone(
            "material", "0..*",
            element("substance", "CodeableConcept", "1..1"),
            element("alternate", "boolean"),
            element("allergenicIndicator", "boolean"),
        ),
    ),
    resource(
        "DeviceMetric",
        element("identifier", "Identifier", "0..*"),
        element("type", "CodeableConcept", "1..1"),
        element("unit", "CodeableConcept"),
        element("source", "Reference"),
        element("parent", "Reference"),
        element("operationalStatus", "code", enum=METRIC_OPERATIONAL_STATUS),
        element("color", "code", enum=METRIC_COLOR),
        element("category", "code", "1..1", enum=METRIC_CATEGORY),
        element("measurementPeriod", "Timing"),
        backbone(
            "calibration", "0..*",
            element("type", "code", enum=METRIC_CALIBRATION_TYPE),
            element("state", "code", enum=METRIC_CALIBRATION_STATE),
            element("time", "instant"),
        ),
    ),
    resource(
        "Substance",
        element("identifier", "Identifier", "0..*"),
        element("status", "code", enum=RESOURCE_STATUS),
        element("category", "CodeableConcept", "0..*"),
        element("code", "CodeableConcept", "1..1"),
        element("description", "string"),
        backbone(
            "instance", "0..*",
            element("identifier", "Identifier"),
            element("expiry", "dateTime"),
            element("quantity", "Quantity"),
        ),
        backbone(
            "ingredient", "0..*",
            element("quantity", "Ratio"),
            choice("substance", ["CodeableConcept", "Reference"], "1..1"),
        ),
    ),
    resource(
        "Schedule",
        element("identifier", "Identifier", "0..*"),
        element("active", "boolean"),
        element("serviceCategory", "CodeableConcept", "0..*"),
        element("serviceType", "CodeableConcept", "0..*"),
        element("specialty", "CodeableConcept", "0..*"),
        element("actor", "Reference", "1..*"),
        element("planningHorizon", "Period"),
        element("comment", "string"),
    ),
    resource(
        "Slot",
        element("identifier", "Identifier", "0..*"),
        element("serviceCategory", "CodeableConcept", "0..*"),
        element("serviceType", "CodeableConcept", "0..*"),
        element("specialty", "CodeableConcept", "0..*"),
        element("appointmentType", "CodeableConcept"),
        element("schedule", "Reference", "1..1"),
        element("status", "code", "1..1", enum=SLOT_STATUS),
        element("start", "instant", "1..1"),
        element("end", "instant", "1..1"),
        element("overbooked", "boolean"),
        element("comment", "string"),
    ),
    resource(
        "Appointment",
        element("identifier", "Identifier", "0..*"),
        element("status", "code", "1..1", enum=APPOINTMENT_STATUS),
        element("cancelationReason", "CodeableConcept"),
        element("serviceCategory", "CodeableConcept", "0..*"),
        element("serviceType", "CodeableConcept", "0..*"),
        element("specialty", "CodeableConcept", "0..*"),
        element("appointmentType", "CodeableConcept"),
        element("reasonCode", "CodeableConcept", "0..*"),
        element("reasonReference", "Reference", "0..*"),
        element("priority", "unsignedInt"),
        element("description", "string"),
        element("supportingInformation", "Reference", "0..*"),
        element("start", "instant"),
        element("end", "instant"),
        element("minutesDuration", "positiveInt"),
        element("slot", "Reference", "0..*"),
        element("created", "dateTime"),
        element("comment", "string"),
        element("patientInstruction", "string"),
        element("basedOn", "Reference", "0..*"),
        backbone(
            "participant", "1..*",
            element("type", "CodeableConcept", "0..*"),
            element("actor", "Reference"),
            element("required", "code", enum=PARTICIPANT_REQUIRED),
            element("status", "code", "1..1", enum=PARTICIPATION_STATUS),
            element("period", "Period"),
        ),
        element("requestedPeriod", "Period", "0..*"),
    ),
    resource(
        "AppointmentResponse",
        element("identifier", "Identifier", "0..*"),
        element("appointment", "Reference", "1..1"),
        element("start", "instant"),
        element("end", "instant"),
        element("participantType", "CodeableConcept", "0..*"),
        element("actor", "Reference"),
        element("participantStatus", "code", "1..1", enum=PARTICIPATION_STATUS),
        element("comment", "string"),
    ),
    resource(
        "Encounter",
        element("identifier", "Identifier", "0..*"),
        element("status", "code", "1..1", enum=ENCOUNTER_STATUS),
        backbone(
            "statusHistory", "0..*",
            element("status", "code", "1..1", enum=ENCOUNTER_STATUS),
            element("period", "Period", "1..1"),
        ),
        element("class", "Coding", "1..1"),
        backbone(
            "classHistory", "0..*",
            element("class", "Coding", "1..1"),
            element("period", "Period", "1..1"),
        ),
        element("type", "CodeableConcept", "0..*"),
        element("serviceType", "CodeableConcept"),
        element("priority", "CodeableConcept"),
        element("subject", "Reference"),
        element("episodeOfCare", "Reference", "0..*"),
        element("basedOn", "Reference", "0..*"),
        backbone(
            "participant", "0..*",
            element("type", "CodeableConcept", "0..*"),
            element("period", "Period"),
            element("individual", "Reference"),
        ),
        element("appointment", "Reference", "0..*"),
        element("period", "Period"),
        element("length", "Duration"),
        element("reasonCode", "CodeableConcept", "0..*"),
        element("reasonReference", "Reference", "0..*"),
        backbone(
            "diagnosis", "0..*",
            element("condition", "Reference", "1..1"),
            element("use", "CodeableConcept"),
            element("rank", "positiveInt"),
        ),
        element("account", "Reference", "0..*"),
        backbone(
            "hospitalization", "0..1",
            element("preAdmissionIdentifier", "Identifier"),
            element("origin", "Reference"),
            element("admitSource", "CodeableConcept"),
            element("reAdmission", "CodeableConcept"),
            element("dietPreference", "CodeableConcept", "0..*"),
            element("specialCourtesy", "CodeableConcept", "0..*"),
            element("specialArrangement", "CodeableConcept", "0..*"),
            element("destination", "Reference"),
            element("dischargeDisposition", "CodeableConcept"),
        ),
        backbone(
            "location", "0..*",
            element("location", "Reference", "1..1"),
            element("status", "code", enum=ENCOUNTER_LOCATION_STATUS),
            element("physicalType", "CodeableConcept"),
            element("period", "Period"),
        ),
        element("serviceProvider", "Reference"),
        element("partOf", "Reference"),
    ),
    resource(
        "EpisodeOfCare",
        element("identifier", "Identifier", "0..*"),
        element("status", "code", "1..1", enum=EPISODE_OF_CARE_STATUS),
        backbone(
            "statusHistory", "0..*",
            element("status", "code", "1..1", enum=EPISODE_OF_CARE_STATUS),
            element("period", "Period", "1..1"),
        ),
        element("type", "CodeableConcept", "0..*"),
        backbone(
            "diagnosis", "0..*",
            element("condition", "Reference", "1..1"),
            element("role", "CodeableConcept"),
            element("rank", "positiveInt"),
        ),
        element("patient", "Reference", "1..1"),
        element("managingOrganization", "Reference"),
        element("period", "Period"),
        element("referralRequest", "Reference", "0..*"),
        element("careManager", "Reference"),
        element("team", "Reference", "0..*"),
        element("account", "Reference", "0..*"),
    ),
    resource(
        "Flag",
        element("identifier", "Identifier", "0..*"),
        element("status", "code", "1..1", enum=FLAG_STATUS),
        element("category", "CodeableConcept", "0..*"),
        element("code", "CodeableConcept", "1..1"),
        element("subject", "Reference", "1..1"),
        element("period", "Period"),
        element("encounter", "Reference"),
        element("author", "Reference"),
    ),
    resource(
        "VerificationResult",
        element("target", "Reference", "0..*"),
        element("targetLocation", "string", "0..*"),
        element("need", "CodeableConcept"),
        element("status", "code", "1..1", enum=VERIFICATION_RESULT_STATUS),
        element("statusDate", "dateTime"),
        element("validationType", "CodeableConcept"),
        element("validationProcess", "CodeableConcept", "0..*"),
        element("frequency", "Timing"),
        element("lastPerformed", "dateTime"),
        element("nextScheduled", "date"),
        element("failureAction", "CodeableConcept"),
        backbone(
            "primarySource", "0..*",
            element("who", "Reference"),
            element("type", "CodeableConcept", "0..*"),
            element("communicationMethod", "CodeableConcept", "0..*"),
            element("validationStatus", "CodeableConcept"),
            element("validationDate", "dateTime"),
            element("canPushUpdates", "CodeableConcept"),
            element("pushTypeAvailable", "CodeableConcept", "0..*"),
        ),
        backbone(
            "attestation", "0..1",
            element("who", "Reference"),
            element("onBehalfOf", "Reference"),
            element("communicationMethod", "CodeableConcept"),
            element("date", "date"),
            element("sourceIdentityCertificate", "string"),
            element("proxyIdentityCertificate", "string"),
            element("proxySignature", "Signature"),
            element("sourceSignature", "Signature"),
        ),
        backbone(
            "validator", "0..*",
            element("organization", "Reference", "1..1"),
            element("identityCertificate", "string"),
            element("attestationSignature", "Signature"),
        ),
    ),
]
