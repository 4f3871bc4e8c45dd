"""Medication, immunization and nutrition resources."""

from __future__ import annotations

from fhir_codec.shapes import backbone, choice, element

from fhir_codec.catalog._base import resource
from fhir_codec.catalog._valuesets import (
    IMMUNIZATION_EVALUATION_STATUS,
    IMMUNIZATION_STATUS,
    MEDICATION_ADMINISTRATION_STATUS,
    MEDICATION_DISPENSE_STATUS,
    MEDICATION_REQUEST_INTENT,
    MEDICATION_REQUEST_STATUS,
    MEDICATION_STATEMENT_STATUS,
    MEDICATION_STATUS,
    NUTRITION_ORDER_STATUS,
    REQUEST_INTENT,
    REQUEST_PRIORITY,
)

_MEDICATION = choice("medication", ["CodeableConcept", "Reference"], "1..1")
_DOSE_NUMBER = ["positiveInt", "string"]


def _performer():
    return backbone(
        "performer", "0..*",
        element("function", "CodeableConcept"),
        element("actor", "Reference", "1..1"),
    )


def _ingredient():
    return backbone(
        "ingredient", "0..*",
        choice("item", ["CodeableConcept", "Reference"], "1..1"),
        element("isActive", "boolean"),
        element("strength", "Ratio"),
    )


RESOURCES = [
    resource(
        "Medication",
        element("identifier", "Identifier", "0..*"),
        element("code", "CodeableConcept"),
        element("status", "code", enum=MEDICATION_STATUS),
        element("manufacturer", "Reference"),
        element("form", "CodeableConcept"),
        element("amount", "Ratio"),
        _ingredient(),
        backbone(
            "batch", "0..1",
            element("lotNumber", "string"),
            element("expirationDate", "dateTime"),
        ),
    ),
    resource(
        "MedicationRequest",
        element("identifier", "Identifier", "0..*"),
        element("status", "code", "1..1", enum=MEDICATION_REQUEST_STATUS),
        element("statusReason", "CodeableConcept"),
        element("intent", "code", "1..1", enum=MEDICATION_REQUEST_INTENT),
        element("category", "CodeableConcept", "0..*"),
        element("priority", "code", enum=REQUEST_PRIORITY),
        element("doNotPerform", "boolean"),
        choice("reported", ["boolean", "Reference"]),
        _MEDICATION,
        element("subject", "Reference", "1..1"),
        element("encounter", "Reference"),
        element("supportingInformation", "Reference", "0..*"),
        element("authoredOn", "dateTime"),
        element("requester", "Reference"),
        element("performer", "Reference"),
        element("performerType", "CodeableConcept"),
        element("recorder", "Reference"),
        element("reasonCode", "CodeableConcept", "0..*"),
        element("reasonReference", "Reference", "0..*"),
        element("instantiatesCanonical", "canonical", "0..*"),
        element("instantiatesUri", "uri", "0..*"),
        element("basedOn", "Reference", "0..*"),
        element("groupIdentifier", "Identifier"),
        element("courseOfTherapyType", "CodeableConcept"),
        element("insurance", "Reference", "0..*"),
        element("note", "Annotation", "0..*"),
        element("dosageInstruction", "Dosage", "0..*"),
        backbone(
            "dispenseRequest", "0..1",
            backbone(
                "initialFill", "0..1",
                element("quantity", "Quantity"),
                element("duration", "Duration"),
            ),
            element("dispenseInterval", "Duration"),
            element("validityPeriod", "Period"),
            element("numberOfRepeatsAllowed", "unsignedInt"),
            element("quantity", "Quantity"),
            element("expectedSupplyDuration", "Duration"),
            element("performer", "Reference"),
        ),
        backbone(
            "substitution", "0..1",
            choice("allowed", ["boolean", "CodeableConcept"], "1..1"),
            element("reason", "CodeableConcept"),
        ),
        element("priorPrescription", "Reference"),
        element("detectedIssue", "Reference", "0..*"),
        element("eventHistory", "Reference", "0..*"),
    ),
    resource(
        "MedicationAdministration",
        element("identifier", "Identifier", "0..*"),
        element("instantiates", "uri", "0..*"),
        element("partOf", "Reference", "0..*"),
        element("status", "code", "1..1", enum=MEDICATION_ADMINISTRATION_STATUS),
        element("statusReason", "CodeableConcept", "0..*"),
        element("category", "CodeableConcept"),
        _MEDICATION,
        element("subject", "Reference", "1..1"),
        element("context", "Reference"),
        element("supportingInformation", "Reference", "0..*"),
        choice("effective", ["dateTime", "Period"], "1..1"),
        _performer(),
        element("reasonCode", "CodeableConcept", "0..*"),
        element("reasonReference", "Reference", "0..*"),
        element("request", "Reference"),
        element("device", "Reference", "0..*"),
        element("note", "Annotation", "0..*"),
        backbone(
            "dosage", "0..1",
            element("text", "string"),
            element("site", "CodeableConcept"),
            element("route", "CodeableConcept"),
            element("method", "CodeableConcept"),
            element("dose", "Quantity"),
            choice("rate", ["Ratio", "Quantity"]),
        ),
        element("eventHistory", "Reference", "0..*"),
    ),
    resource(
        "MedicationDispense",
        element("identifier", "Identifier", "0..*"),
        element("partOf", "Reference", "0..*"),
        element("status", "code", "1..1", enum=MEDICATION_DISPENSE_STATUS),
        choice("statusReason", ["CodeableConcept", "Reference"]),
        element("category", "CodeableConcept"),
        _MEDICATION,
        element("subject", "Reference"),
        element("context", "Reference"),
        element("supportingInformation", "Reference", "0..*"),
        _performer(),
        element("location", "Reference"),
        element("authorizingPrescription", "Reference", "0..*"),
        element("type", "CodeableConcept"),
        element("quantity", "Quantity"),
        element("daysSupply", "Quantity"),
        element("whenPrepared", "dateTime"),
        element("whenHandedOver", "dateTime"),
        element("destination", "Reference"),
        element("receiver", "Reference", "0..*"),
        element("note", "Annotation", "0..*"),
        element("dosageInstruction", "Dosage", "0..*"),
        backbone(
            "substitution", "0..1",
            element("wasSubstituted", "boolean", "1..1"),
            element("type", "CodeableConcept"),
            element("reason", "CodeableConcept", "0..*"),
            element("responsibleParty", "Reference", "0..*"),
        ),
        element("detectedIssue", "Reference", "0..*"),
        element("eventHistory", "Reference", "0..*"),
    ),
    resource(
        "MedicationStatement",
        element("identifier", "Identifier", "0..*"),
        element("basedOn", "Reference", "0..*"),
        element("partOf", "Reference", "0..*"),
        element("status", "code", "1..1", enum=MEDICATION_STATEMENT_STATUS),
        element("statusReason", "CodeableConcept", "0..*"),
        element("category", "CodeableConcept"),
        _MEDICATION,
        element("subject", "Reference", "1..1"),
        element("context", "Reference"),
        choice("effective", ["dateTime", "Period"]),
        element("dateAsserted", "dateTime"),
        element("informationSource", "Reference"),
        element("derivedFrom", "Reference", "0..*"),
        element("reasonCode", "CodeableConcept", "0..*"),
        element("reasonReference", "Reference", "0..*"),
        element("note", "Annotation", "0..*"),
        element("dosage", "Dosage", "0..*"),
    ),
    resource(
        "MedicationKnowledge",
        element("code", "CodeableConcept"),
        element("status", "code", enum=MEDICATION_STATUS),
        element("manufacturer", "Reference"),
        element("doseForm", "CodeableConcept"),
        element("amount", "Quantity"),
        element("synonym", "string", "0..*"),
        backbone(
            "relatedMedicationKnowledge", "0..*",
            element("type", "CodeableConcept", "1..1"),
            element("reference", "Reference", "1..*"),
        ),
        element("associatedMedication", "Reference", "0..*"),
        element("productType", "CodeableConcept", "0..*"),
        backbone(
            "monograph", "0..*",
            element("type", "CodeableConcept"),
            element("source", "Reference"),
        ),
        _ingredient(),
        element("preparationInstruction", "markdown"),
        element("intendedRoute", "CodeableConcept", "0..*"),
        backbone(
            "cost", "0..*",
            element("type", "CodeableConcept", "1..1"),
            element("source", "string"),
            element("cost", "Money", "1..1"),
        ),
        backbone(
            "monitoringProgram", "0..*",
            element("type", "CodeableConcept"),
            element("name", "string"),
        ),
        backbone(
            "administrationGuidelines", "0..*",
            backbone(
                "dosage", "0..*",
                element("type", "CodeableConcept", "1..1"),
                element("dosage", "Dosage", "1..*"),
            ),
            choice("indication", ["CodeableConcept", "Reference"]),
            backbone(
                "patientCharacteristics", "0..*",
                choice("characteristic", ["CodeableConcept", "Quantity"], "1..1"),
                element("value", "string", "0..*"),
            ),
        ),
        backbone(
            "medicineClassification", "0..*",
            element("type", "CodeableConcept", "1..1"),
            element("classification", "CodeableConcept", "0..*"),
        ),
        backbone(
            "packaging", "0..1",
            element("type", "CodeableConcept"),
            element("quantity", "Quantity"),
        ),
        backbone(
            "drugCharacteristic", "0..*",
            element("type", "CodeableConcept"),
            choice(
                "value",
                ["CodeableConcept", "string", "Quantity", "base64Binary"],
            ),
        ),
        element("contraindication", "Reference", "0..*"),
        backbone(
            "regulatory", "0..*",
            element("regulatoryAuthority", "Reference", "1..1"),
            backbone(
                "substitution", "0..*",
                element("type", "CodeableConcept", "1..1"),
                element("allowed", "boolean", "1..1"),
            ),
            backbone(
                "schedule", "0..*",
                element("schedule", "CodeableConcept", "1..1"),
            ),
            backbone(
                "maxDispense", "0..1",
                element("quantity", "Quantity", "1..1"),
                element("period", "Duration"),
            ),
        ),
        backbone(
            "kinetics", "0..*",
            element("areaUnderCurve", "Quantity", "0..*"),
            element("lethalDose50", "Quantity", "0..*"),
            element("halfLifePeriod", "Duration"),
        ),
    ),
    resource(
        "Immunization",
        element("identifier", "Identifier", "0..*"),
        element("status", "code", "1..1", enum=IMMUNIZATION_STATUS),
        element("statusReason", "CodeableConcept"),
        element("vaccineCode", "CodeableConcept", "1..1"),
        element("patient", "Reference", "1..1"),
        element("encounter", "Reference"),
        choice("occurrence", ["dateTime", "string"], "1..1"),
        element("recorded", "dateTime"),
        element("primarySource", "boolean"),
        element("reportOrigin", "CodeableConcept"),
        element("location", "Reference"),
        element("manufacturer", "Reference"),
        element("lotNumber", "string"),
        element("expirationDate", "date"),
        element("site", "CodeableConcept"),
        element("route", "CodeableConcept"),
        element("doseQuantity", "Quantity"),
        _performer(),
        element("note", "Annotation", "0..*"),
        element("reasonCode", "CodeableConcept", "0..*"),
        element("reasonReference", "Reference", "0..*"),
        element("isSubpotent", "boolean"),
        element("subpotentReason", "CodeableConcept", "0..*"),
        backbone(
            "education", "0..*",
            element("documentType", "string"),
            element("reference", "uri"),
            element("publicationDate", "dateTime"),
            element("presentationDate", "dateTime"),
        ),
        element("programEligibility", "CodeableConcept", "0..*"),
        element("fundingSource", "CodeableConcept"),
        backbone(
            "reaction", "0..*",
            element("date", "dateTime"),
            element("detail", "Reference"),
            element("reported", "boolean"),
        ),
        backbone(
            "protocolApplied", "0..*",
            element("series", "string"),
            element("authority", "Reference"),
            element("targetDisease", "CodeableConcept", "0..*"),
            choice("doseNumber", _DOSE_NUMBER, "1..1"),
            choice("seriesDoses", _DOSE_NUMBER),
        ),
    ),
    resource(
        "ImmunizationEvaluation",
        element("identifier", "Identifier", "0..*"),
        element("status", "code", "1..1", enum=IMMUNIZATION_EVALUATION_STATUS),
        element("patient", "Reference", "1..1"),
        element("date", "dateTime"),
        element("authority", "Reference"),
        element("targetDisease", "CodeableConcept", "1..1"),
        element("immunizationEvent", "Reference", "1..1"),
        element("doseStatus", "CodeableConcept", "1..1"),
        element("doseStatusReason", "CodeableConcept", "0..*"),
        element("description", "string"),
        element("series", "string"),
        choice("doseNumber", _DOSE_NUMBER),
        choice("seriesDoses", _DOSE_NUMBER),
    ),
    resource(
        "ImmunizationRecommendation",
        element("identifier", "Identifier", "0..*"),
        element("patient", "Reference", "1..1"),
        element("date", "dateTime", "1..1"),
        element("authority", "Reference"),
        backbone(
            "recommendation", "1..*",
            element("vaccineCode", "CodeableConcept", "0..*"),
            element("targetDisease", "CodeableConcept"),
            element("contraindicatedVaccineCode", "CodeableConcept", "0..*"),
            element("forecastStatus", "CodeableConcept", "1..1"),
            element("forecastReason", "CodeableConcept", "0..*"),
            backbone(
                "dateCriterion", "0..*",
                element("code", "CodeableConcept", "1..1"),
                element("value", "dateTime", "1..1"),
            ),
            element("description", "string"),
            element("series", "string"),
            choice("doseNumber", _DOSE_NUMBER),
            choice("seriesDoses", _DOSE_NUMBER),
            element("supportingImmunization", "Reference", "0..*"),
            element("supportingPatientInformation", "Reference", "0..*"),
        ),
    ),
    resource(
        "NutritionOrder",
        element("identifier", "Identifier", "0..*"),
        element("instantiatesCanonical", "canonical", "0..*"),
        element("instantiatesUri", "uri", "0..*"),
        element("instantiates", "uri", "0..*"),
        element("status", "code", "1..1", enum=NUTRITION_ORDER_STATUS),
        element("intent", "code", "1..1", enum=REQUEST_INTENT),
        element("patient", "Reference", "1..1"),
        element("encounter", "Reference"),
        element("dateTime", "dateTime", "1..1"),
        element("orderer", "Reference"),
        element("allergyIntolerance", "Reference", "0..*"),
        element("foodPreferenceModifier", "CodeableConcept", "0..*"),
        element("excludeFoodModifier", "CodeableConcept", "0..*"),
        backbone(
            "oralDiet", "0..1",
            element("type", "CodeableConcept", "0..*"),
            element("schedule", "Timing", "0..*"),
            backbone(
                "nutrient", "0..*",
                element("modifier", "CodeableConcept"),
                element("amount", "Quantity"),
            ),
            backbone(
                "texture", "0..*",
                element("modifier", "CodeableConcept"),
                element("foodType", "CodeableConcept"),
            ),
            element("fluidConsistencyType", "CodeableConcept", "0..*"),
            element("instruction", "string"),
        ),
        backbone(
            "supplement", "0..*",
            element("type", "CodeableConcept"),
            element("productName", "string"),
            element("schedule", "Timing", "0..*"),
            element("quantity", "Quantity"),
            element("instruction", "string"),
        ),
        backbone(
            "enteralFormula", "0..1",
            element("baseFormulaType", "CodeableConcept"),
            element("baseFormulaProductName", "string"),
            element("additiveType", "CodeableConcept"),
            element("additiveProductName", "string"),
            element("caloricDensity", "Quantity"),
            element("routeofAdministration", "CodeableConcept"),
            backbone(
                "administration", "0..*",
                element("schedule", "Timing"),
                element("quantity", "Quantity"),
                choice("rate", ["Quantity", "Ratio"]),
            ),
            element("maxVolumeToDeliver", "Quantity"),
            element("administrationInstruction", "string"),
        ),
        element("note", "Annotation", "0..*"),
    ),
]
