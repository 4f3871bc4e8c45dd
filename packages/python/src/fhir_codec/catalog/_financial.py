"""Billing, insurance and payment resources."""

from __future__ import annotations

from fhir_codec.shapes import backbone, choice, element

from fhir_codec.catalog._base import canonical, resource
from fhir_codec.catalog._valuesets import (
    ACCOUNT_STATUS,
    CHARGE_ITEM_STATUS,
    CLAIM_USE,
    CONTRACT_PUBLICATION_STATUS,
    CONTRACT_STATUS,
    ELIGIBILITY_PURPOSE,
    FINANCIAL_STATUS,
    INVOICE_STATUS,
    NOTE_TYPE,
    PRICE_COMPONENT_TYPE,
    PUBLICATION_STATUS,
    REMITTANCE_OUTCOME,
)

_SERVICED = ["date", "Period"]
_LOCATION = ["CodeableConcept", "Address", "Reference"]
_ALLOWANCE = ["unsignedInt", "string", "Money"]
_CONTENT = ["Attachment", "Reference"]

_CLAIM_RESPONSE_ADJUDICATION = "#ClaimResponse.item.adjudication"
_EOB_ADJUDICATION = "#ExplanationOfBenefit.item.adjudication"


def _price_component():
    return backbone(
        "priceComponent", "0..*",
        element("type", "code", "1..1", enum=PRICE_COMPONENT_TYPE),
        element("code", "CodeableConcept"),
        element("factor", "decimal"),
        element("amount", "Money"),
    )


def _charge_lines():
    """Pricing members repeated at every claim item level."""
    return (
        element("revenue", "CodeableConcept"),
        element("category", "CodeableConcept"),
        element("productOrService", "CodeableConcept", "1..1"),
        element("modifier", "CodeableConcept", "0..*"),
        element("programCode", "CodeableConcept", "0..*"),
        element("quantity", "Quantity"),
        element("unitPrice", "Money"),
        element("factor", "decimal"),
        element("net", "Money"),
        element("udi", "Reference", "0..*"),
    )


def _added_charge():
    return (
        element("productOrService", "CodeableConcept", "1..1"),
        element("modifier", "CodeableConcept", "0..*"),
        element("quantity", "Quantity"),
        element("unitPrice", "Money"),
        element("factor", "decimal"),
        element("net", "Money"),
        element("noteNumber", "positiveInt", "0..*"),
    )


def _adjudicated(path, card="1..*"):
    return (
        element("noteNumber", "positiveInt", "0..*"),
        element("adjudication", path, card),
    )


def _added_item(adjudication):
    """The ``addItem`` tree of ClaimResponse and ExplanationOfBenefit."""
    return backbone(
        "addItem", "0..*",
        element("itemSequence", "positiveInt", "0..*"),
        element("detailSequence", "positiveInt", "0..*"),
        element("subDetailSequence", "positiveInt", "0..*"),
        element("provider", "Reference", "0..*"),
        element("programCode", "CodeableConcept", "0..*"),
        choice("serviced", _SERVICED),
        choice("location", _LOCATION),
        element("bodySite", "CodeableConcept"),
        element("subSite", "CodeableConcept", "0..*"),
        *_added_charge(),
        element("adjudication", adjudication, "1..*"),
        backbone(
            "detail", "0..*",
            *_added_charge(),
            element("adjudication", adjudication, "1..*"),
            backbone(
                "subDetail", "0..*",
                *_added_charge(),
                element("adjudication", adjudication, "1..*"),
            ),
        ),
    )


def _related():
    return backbone(
        "related", "0..*",
        element("claim", "Reference"),
        element("relationship", "CodeableConcept"),
        element("reference", "Identifier"),
    )


def _payee(card_type="1..1"):
    return backbone(
        "payee", "0..1",
        element("type", "CodeableConcept", card_type),
        element("party", "Reference"),
    )


def _care_team():
    return backbone(
        "careTeam", "0..*",
        element("sequence", "positiveInt", "1..1"),
        element("provider", "Reference", "1..1"),
        element("responsible", "boolean"),
        element("role", "CodeableConcept"),
        element("qualification", "CodeableConcept"),
    )


def _supporting_info(reason_type):
    return backbone(
        "supportingInfo", "0..*",
        element("sequence", "positiveInt", "1..1"),
        element("category", "CodeableConcept", "1..1"),
        element("code", "CodeableConcept"),
        choice("timing", _SERVICED),
        choice("value", ["boolean", "string", "Quantity", "Attachment", "Reference"]),
        element("reason", reason_type),
    )


def _diagnosis():
    return backbone(
        "diagnosis", "0..*",
        element("sequence", "positiveInt", "1..1"),
        choice("diagnosis", ["CodeableConcept", "Reference"], "1..1"),
        element("type", "CodeableConcept", "0..*"),
        element("onAdmission", "CodeableConcept"),
        element("packageCode", "CodeableConcept"),
    )


def _procedure():
    return backbone(
        "procedure", "0..*",
        element("sequence", "positiveInt", "1..1"),
        element("type", "CodeableConcept", "0..*"),
        element("date", "dateTime"),
        choice("procedure", ["CodeableConcept", "Reference"], "1..1"),
        element("udi", "Reference", "0..*"),
    )


def _accident(date_card):
    return backbone(
        "accident", "0..1",
        element("date", "date", date_card),
        element("type", "CodeableConcept"),
        choice("location", ["Address", "Reference"]),
    )


def _item_sequences():
    return (
        element("sequence", "positiveInt", "1..1"),
        element("careTeamSequence", "positiveInt", "0..*"),
        element("diagnosisSequence", "positiveInt", "0..*"),
        element("procedureSequence", "positiveInt", "0..*"),
        element("informationSequence", "positiveInt", "0..*"),
    )


def _item_placement():
    return (
        choice("serviced", _SERVICED),
        choice("location", _LOCATION),
        element("bodySite", "CodeableConcept"),
        element("subSite", "CodeableConcept", "0..*"),
        element("encounter", "Reference", "0..*"),
    )


def _total():
    return backbone(
        "total", "0..*",
        element("category", "CodeableConcept", "1..1"),
        element("amount", "Money", "1..1"),
    )


def _payment():
    return backbone(
        "payment", "0..1",
        element("type", "CodeableConcept"),
        element("adjustment", "Money"),
        element("adjustmentReason", "CodeableConcept"),
        element("date", "date"),
        element("amount", "Money"),
        element("identifier", "Identifier"),
    )


def _process_note(text_card="1..1"):
    return backbone(
        "processNote", "0..*",
        element("number", "positiveInt"),
        element("type", "code", enum=NOTE_TYPE),
        element("text", "string", text_card),
        element("language", "CodeableConcept"),
    )


def _valued_item():
    return backbone(
        "valuedItem", "0..*",
        choice("entity", ["CodeableConcept", "Reference"]),
        element("identifier", "Identifier"),
        element("effectiveTime", "dateTime"),
        element("quantity", "Quantity"),
        element("unitPrice", "Money"),
        element("factor", "decimal"),
        element("points", "decimal"),
        element("net", "Money"),
        element("payment", "string"),
        element("paymentDate", "dateTime"),
        element("responsible", "Reference"),
        element("recipient", "Reference"),
        element("linkId", "string", "0..*"),
        element("securityLabelNumber", "unsignedInt", "0..*"),
    )


RESOURCES = [
    resource(
        "Account",
        element("identifier", "Identifier", "0..*"),
        element("status", "code", "1..1", enum=ACCOUNT_STATUS),
        element("type", "CodeableConcept"),
        element("name", "string"),
        element("subject", "Reference", "0..*"),
        element("servicePeriod", "Period"),
        backbone(
            "coverage", "0..*",
            element("coverage", "Reference", "1..1"),
            element("priority", "positiveInt"),
        ),
        element("owner", "Reference"),
        element("description", "string"),
        backbone(
            "guarantor", "0..*",
            element("party", "Reference", "1..1"),
            element("onHold", "boolean"),
            element("period", "Period"),
        ),
        element("partOf", "Reference"),
    ),
    resource(
        "ChargeItem",
        element("identifier", "Identifier", "0..*"),
        element("definitionUri", "uri", "0..*"),
        element("definitionCanonical", "canonical", "0..*"),
        element("status", "code", "1..1", enum=CHARGE_ITEM_STATUS),
        element("partOf", "Reference", "0..*"),
        element("code", "CodeableConcept", "1..1"),
        element("subject", "Reference", "1..1"),
        element("context", "Reference"),
        choice("occurrence", ["dateTime", "Period", "Timing"]),
        backbone(
            "performer", "0..*",
            element("function", "CodeableConcept"),
            element("actor", "Reference", "1..1"),
        ),
        element("performingOrganization", "Reference"),
        element("requestingOrganization", "Reference"),
        element("costCenter", "Reference"),
        element("quantity", "Quantity"),
        element("bodysite", "CodeableConcept", "0..*"),
        element("factorOverride", "decimal"),
        element("priceOverride", "Money"),
        element("overrideReason", "string"),
        element("enterer", "Reference"),
        element("enteredDate", "dateTime"),
        element("reason", "CodeableConcept", "0..*"),
        element("service", "Reference", "0..*"),
        choice("product", ["Reference", "CodeableConcept"]),
        element("account", "Reference", "0..*"),
        element("note", "Annotation", "0..*"),
        element("supportingInformation", "Reference", "0..*"),
    ),
    resource(
        "ChargeItemDefinition",
        *canonical(omit=("name", "purpose"), required=("url",)),
        element("derivedFromUri", "uri", "0..*"),
        element("partOf", "canonical", "0..*"),
        element("replaces", "canonical", "0..*"),
        element("approvalDate", "date"),
        element("lastReviewDate", "date"),
        element("effectivePeriod", "Period"),
        element("code", "CodeableConcept"),
        element("instance", "Reference", "0..*"),
        backbone(
            "applicability", "0..*",
            element("description", "string"),
            element("language", "string"),
            element("expression", "string"),
        ),
        backbone(
            "propertyGroup", "0..*",
            element("applicability", "#ChargeItemDefinition.applicability", "0..*"),
            _price_component(),
        ),
    ),
    resource(
        "Invoice",
        element("identifier", "Identifier", "0..*"),
        element("status", "code", "1..1", enum=INVOICE_STATUS),
        element("cancelledReason", "string"),
        element("type", "CodeableConcept"),
        element("subject", "Reference"),
        element("recipient", "Reference"),
        element("date", "dateTime"),
        backbone(
            "participant", "0..*",
            element("role", "CodeableConcept"),
            element("actor", "Reference", "1..1"),
        ),
        element("issuer", "Reference"),
        element("account", "Reference"),
        backbone(
            "lineItem", "0..*",
            element("sequence", "positiveInt"),
            choice("chargeItem", ["Reference", "CodeableConcept"], "1..1"),
            _price_component(),
        ),
        element("totalPriceComponent", "#Invoice.lineItem.priceComponent", "0..*"),
        element("totalNet", "Money"),
        element("totalGross", "Money"),
        element("paymentTerms", "markdown"),
        element("note", "Annotation", "0..*"),
    ),
    resource(
        "Claim",
        element("identifier", "Identifier", "0..*"),
        element("status", "code", "1..1", enum=FINANCIAL_STATUS),
        element("type", "CodeableConcept", "1..1"),
        element("subType", "CodeableConcept"),
        element("use", "code", "1..1", enum=CLAIM_USE),
        element("patient", "Reference", "1..1"),
        element("billablePeriod", "Period"),
        element("created", "dateTime", "1..1"),
        element("enterer", "Reference"),
        element("insurer", "Reference"),
        element("provider", "Reference", "1..1"),
        element("priority", "CodeableConcept", "1..1"),
        element("fundsReserve", "CodeableConcept"),
        _related(),
        element("prescription", "Reference"),
        element("originalPrescription", "Reference"),
        _payee(),
        element("referral", "Reference"),
        element("facility", "Reference"),
        _care_team(),
        _supporting_info("CodeableConcept"),
        _diagnosis(),
        _procedure(),
        backbone(
            "insurance", "1..*",
            element("sequence", "positiveInt", "1..1"),
            element("focal", "boolean", "1..1"),
            element("identifier", "Identifier"),
            element("coverage", "Reference", "1..1"),
            element("businessArrangement", "string"),
            element("preAuthRef", "string", "0..*"),
            element("claimResponse", "Reference"),
        ),
        _accident("1..1"),
        backbone(
            "item", "0..*",
            *_item_sequences(),
            *_charge_lines(),
            *_item_placement(),
            backbone(
                "detail", "0..*",
                element("sequence", "positiveInt", "1..1"),
                *_charge_lines(),
                backbone(
                    "subDetail", "0..*",
                    element("sequence", "positiveInt", "1..1"),
                    *_charge_lines(),
                ),
            ),
        ),
        element("total", "Money"),
    ),
    resource(
        "ClaimResponse",
        element("identifier", "Identifier", "0..*"),
        element("status", "code", "1..1", enum=FINANCIAL_STATUS),
        element("type", "CodeableConcept", "1..1"),
        element("subType", "CodeableConcept"),
        element("use", "code", "1..1", enum=CLAIM_USE),
        element("patient", "Reference", "1..1"),
        element("created", "dateTime", "1..1"),
        element("insurer", "Reference", "1..1"),
        element("requestor", "Reference"),
        element("request", "Reference"),
        element("outcome", "code", "1..1", enum=REMITTANCE_OUTCOME),
        element("disposition", "string"),
        element("preAuthRef", "string"),
        element("preAuthPeriod", "Period"),
        element("payeeType", "CodeableConcept"),
        backbone(
            "item", "0..*",
            element("itemSequence", "positiveInt", "1..1"),
            element("noteNumber", "positiveInt", "0..*"),
            backbone(
                "adjudication", "1..*",
                element("category", "CodeableConcept", "1..1"),
                element("reason", "CodeableConcept"),
                element("amount", "Money"),
                element("value", "decimal"),
            ),
            backbone(
                "detail", "0..*",
                element("detailSequence", "positiveInt", "1..1"),
                *_adjudicated(_CLAIM_RESPONSE_ADJUDICATION),
                backbone(
                    "subDetail", "0..*",
                    element("subDetailSequence", "positiveInt", "1..1"),
                    *_adjudicated(_CLAIM_RESPONSE_ADJUDICATION, "0..*"),
                ),
            ),
        ),
        _added_item(_CLAIM_RESPONSE_ADJUDICATION),
        element("adjudication", _CLAIM_RESPONSE_ADJUDICATION, "0..*"),
        _total(),
        _payment(),
        element("fundsReserve", "CodeableConcept"),
        element("formCode", "CodeableConcept"),
        element("form", "Attachment"),
        _process_note(),
        element("communicationRequest", "Reference", "0..*"),
        backbone(
            "insurance", "0..*",
            element("sequence", "positiveInt", "1..1"),
            element("focal", "boolean", "1..1"),
            element("coverage", "Reference", "1..1"),
            element("businessArrangement", "string"),
            element("claimResponse", "Reference"),
        ),
        backbone(
            "error", "0..*",
            element("itemSequence", "positiveInt"),
            element("detailSequence", "positiveInt"),
            element("subDetailSequence", "positiveInt"),
            element("code", "CodeableConcept", "1..1"),
        ),
    ),
    resource(
        "Coverage",
        element("identifier", "Identifier", "0..*"),
        element("status", "code", "1..1", enum=FINANCIAL_STATUS),
        element("type", "CodeableConcept"),
        element("policyHolder", "Reference"),
        element("subscriber", "Reference"),
        element("subscriberId", "string"),
        element("beneficiary", "Reference", "1..1"),
        element("dependent", "string"),
        element("relationship", "CodeableConcept"),
        element("period", "Period"),
        element("payor", "Reference", "1..*"),
        backbone(
            "class", "0..*",
            element("type", "CodeableConcept", "1..1"),
            element("value", "string", "1..1"),
            element("name", "string"),
        ),
        element("order", "positiveInt"),
        element("network", "string"),
        backbone(
            "costToBeneficiary", "0..*",
            element("type", "CodeableConcept"),
            choice("value", ["Quantity", "Money"], "1..1"),
            backbone(
                "exception", "0..*",
                element("type", "CodeableConcept", "1..1"),
                element("period", "Period"),
            ),
        ),
        element("subrogation", "boolean"),
        element("contract", "Reference", "0..*"),
    ),
    resource(
        "CoverageEligibilityRequest",
        element("identifier", "Identifier", "0..*"),
        element("status", "code", "1..1", enum=FINANCIAL_STATUS),
        element("priority", "CodeableConcept"),
        element("purpose", "code", "1..*", enum=ELIGIBILITY_PURPOSE),
        element("patient", "Reference", "1..1"),
        choice("serviced", _SERVICED),
        element("created", "dateTime", "1..1"),
        element("enterer", "Reference"),
        element("provider", "Reference"),
        element("insurer", "Reference", "1..1"),
        element("facility", "Reference"),
        backbone(
            "supportingInfo", "0..*",
            element("sequence", "positiveInt", "1..1"),
            element("information", "Reference", "1..1"),
            element("appliesToAll", "boolean"),
        ),
        backbone(
            "insurance", "0..*",
            element("focal", "boolean"),
            element("coverage", "Reference", "1..1"),
            element("businessArrangement", "string"),
        ),
        backbone(
            "item", "0..*",
            element("supportingInfoSequence", "positiveInt", "0..*"),
            element("category", "CodeableConcept"),
            element("productOrService", "CodeableConcept"),
            element("modifier", "CodeableConcept", "0..*"),
            element("provider", "Reference"),
            element("quantity", "Quantity"),
            element("unitPrice", "Money"),
            element("facility", "Reference"),
            backbone(
                "diagnosis", "0..*",
                choice("diagnosis", ["CodeableConcept", "Reference"]),
            ),
            element("detail", "Reference", "0..*"),
        ),
    ),
    resource(
        "CoverageEligibilityResponse",
        element("identifier", "Identifier", "0..*"),
        element("status", "code", "1..1", enum=FINANCIAL_STATUS),
        element("purpose", "code", "1..*", enum=ELIGIBILITY_PURPOSE),
        element("patient", "Reference", "1..1"),
        choice("serviced", _SERVICED),
        element("created", "dateTime", "1..1"),
        element("requestor", "Reference"),
        element("request", "Reference", "1..1"),
        element("outcome", "code", "1..1", enum=REMITTANCE_OUTCOME),
        element("disposition", "string"),
        element("insurer", "Reference", "1..1"),
        backbone(
            "insurance", "0..*",
            element("coverage", "Reference", "1..1"),
            element("inforce", "boolean"),
            element("benefitPeriod", "Period"),
            backbone(
                "item", "0..*",
                element("category", "CodeableConcept"),
                element("productOrService", "CodeableConcept"),
                element("modifier", "CodeableConcept", "0..*"),
                element("provider", "Reference"),
                element("excluded", "boolean"),
                element("name", "string"),
                element("description", "string"),
                element("network", "CodeableConcept"),
                element("unit", "CodeableConcept"),
                element("term", "CodeableConcept"),
                backbone(
                    "benefit", "0..*",
                    element("type", "CodeableConcept", "1..1"),
                    choice("allowed", _ALLOWANCE),
                    choice("used", _ALLOWANCE),
                ),
                element("authorizationRequired", "boolean"),
                element("authorizationSupporting", "CodeableConcept", "0..*"),
                element("authorizationUrl", "uri"),
            ),
        ),
        element("preAuthRef", "string"),
        element("form", "CodeableConcept"),
        backbone(
            "error", "0..*",
            element("code", "CodeableConcept", "1..1"),
        ),
    ),
    resource(
        "EnrollmentRequest",
        element("identifier", "Identifier", "0..*"),
        element("status", "code", enum=FINANCIAL_STATUS),
        element("created", "dateTime"),
        element("insurer", "Reference"),
        element("provider", "Reference"),
        element("candidate", "Reference"),
        element("coverage", "Reference"),
    ),
    resource(
        "EnrollmentResponse",
        element("identifier", "Identifier", "0..*"),
        element("status", "code", enum=FINANCIAL_STATUS),
        element("request", "Reference"),
        element("outcome", "code", enum=REMITTANCE_OUTCOME),
        element("disposition", "string"),
        element("created", "dateTime"),
        element("organization", "Reference"),
        element("requestProvider", "Reference"),
    ),
    resource(
        "ExplanationOfBenefit",
        element("identifier", "Identifier", "0..*"),
        element("status", "code", "1..1", enum=FINANCIAL_STATUS),
        element("type", "CodeableConcept", "1..1"),
        element("subType", "CodeableConcept"),
        element("use", "code", "1..1", enum=CLAIM_USE),
        element("patient", "Reference", "1..1"),
        element("billablePeriod", "Period"),
        element("created", "dateTime", "1..1"),
        element("enterer", "Reference"),
        element("insurer", "Reference", "1..1"),
        element("provider", "Reference", "1..1"),
        element("priority", "CodeableConcept"),
        element("fundsReserveRequested", "CodeableConcept"),
        element("fundsReserve", "CodeableConcept"),
        _related(),
        element("prescription", "Reference"),
        element("originalPrescription", "Reference"),
        _payee("0..1"),
        element("referral", "Reference"),
        element("facility", "Reference"),
        element("claim", "Reference"),
        element("claimResponse", "Reference"),
        element("outcome", "code", "1..1", enum=REMITTANCE_OUTCOME),
        element("disposition", "string"),
        element("preAuthRef", "string", "0..*"),
        element("preAuthRefPeriod", "Period", "0..*"),
        _care_team(),
        _supporting_info("Coding"),
        _diagnosis(),
        _procedure(),
        element("precedence", "positiveInt"),
        backbone(
            "insurance", "1..*",
            element("focal", "boolean", "1..1"),
            element("coverage", "Reference", "1..1"),
            element("preAuthRef", "string", "0..*"),
        ),
        _accident("0..1"),
        backbone(
            "item", "0..*",
            *_item_sequences(),
            *_charge_lines(),
            *_item_placement(),
            element("noteNumber", "positiveInt", "0..*"),
            backbone(
                "adjudication", "0..*",
                element("category", "CodeableConcept", "1..1"),
                element("reason", "CodeableConcept"),
                element("amount", "Money"),
                element("value", "decimal"),
            ),
            backbone(
                "detail", "0..*",
                element("sequence", "positiveInt", "1..1"),
                *_charge_lines(),
                *_adjudicated(_EOB_ADJUDICATION, "0..*"),
                backbone(
                    "subDetail", "0..*",
                    element("sequence", "positiveInt", "1..1"),
                    *_charge_lines(),
                    *_adjudicated(_EOB_ADJUDICATION, "0..*"),
                ),
            ),
        ),
        _added_item(_EOB_ADJUDICATION),
        element("adjudication", _EOB_ADJUDICATION, "0..*"),
        _total(),
        _payment(),
        element("formCode", "CodeableConcept"),
        element("form", "Attachment"),
        _process_note("0..1"),
        element("benefitPeriod", "Period"),
        backbone(
            "benefitBalance", "0..*",
            element("category", "CodeableConcept", "1..1"),
            element("excluded", "boolean"),
            element("name", "string"),
            element("description", "string"),
            element("network", "CodeableConcept"),
            element("unit", "CodeableConcept"),
            element("term", "CodeableConcept"),
            backbone(
                "financial", "0..*",
                element("type", "CodeableConcept", "1..1"),
                choice("allowed", _ALLOWANCE),
                choice("used", ["unsignedInt", "Money"]),
            ),
        ),
    ),
    resource(
        "InsurancePlan",
        element("identifier", "Identifier", "0..*"),
        element("status", "code", enum=PUBLICATION_STATUS),
        element("type", "CodeableConcept", "0..*"),
        element("name", "string"),
        element("alias", "string", "0..*"),
        element("period", "Period"),
        element("ownedBy", "Reference"),
        element("administeredBy", "Reference"),
        element("coverageArea", "Reference", "0..*"),
        backbone(
            "contact", "0..*",
            element("purpose", "CodeableConcept"),
            element("name", "HumanName"),
            element("telecom", "ContactPoint", "0..*"),
            element("address", "Address"),
        ),
        element("endpoint", "Reference", "0..*"),
        element("network", "Reference", "0..*"),
        backbone(
            "coverage", "0..*",
            element("type", "CodeableConcept", "1..1"),
            element("network", "Reference", "0..*"),
            backbone(
                "benefit", "1..*",
                element("type", "CodeableConcept", "1..1"),
                element("requirement", "string"),
                backbone(
                    "limit", "0..*",
                    element("value", "Quantity"),
                    element("code", "CodeableConcept"),
                ),
            ),
        ),
        backbone(
            "plan", "0..*",
            element("identifier", "Identifier", "0..*"),
            element("type", "CodeableConcept"),
            element("coverageArea", "Reference", "0..*"),
            element("network", "Reference", "0..*"),
            backbone(
                "generalCost", "0..*",
                element("type", "CodeableConcept"),
                element("groupSize", "positiveInt"),
                element("cost", "Money"),
                element("comment", "string"),
            ),
            backbone(
                "specificCost", "0..*",
                element("category", "CodeableConcept", "1..1"),
                backbone(
                    "benefit", "0..*",
                    element("type", "CodeableConcept", "1..1"),
                    backbone(
                        "cost", "0..*",
                        element("type", "CodeableConcept", "1..1"),
                        element("applicability", "CodeableConcept"),
                        element("qualifiers", "CodeableConcept", "0..*"),
                        element("value", "Quantity"),
                    ),
                ),
            ),
        ),
    ),
    resource(
        "PaymentNotice",
        element("identifier", "Identifier", "0..*"),
        element("status", "code", "1..1", enum=FINANCIAL_STATUS),
        element("request", "Reference"),
        element("response", "Reference"),
        element("created", "dateTime", "1..1"),
        element("provider", "Reference"),
        element("payment", "Reference", "1..1"),
        element("paymentDate", "date"),
        element("payee", "Reference"),
        element("recipient", "Reference", "1..1"),
        element("amount", "Money", "1..1"),
        element("paymentStatus", "CodeableConcept"),
    ),
    resource(
        "PaymentReconciliation",
        element("identifier", "Identifier", "0..*"),
        element("status", "code", "1..1", enum=FINANCIAL_STATUS),
        element("period", "Period"),
        element("created", "dateTime", "1..1"),
        element("paymentIssuer", "Reference"),
        element("request", "Reference"),
        element("requestor", "Reference"),
        element("outcome", "code", enum=REMITTANCE_OUTCOME),
        element("disposition", "string"),
        element("paymentDate", "date", "1..1"),
        element("paymentAmount", "Money", "1..1"),
        element("paymentIdentifier", "Identifier"),
        backbone(
            "detail", "0..*",
            element("identifier", "Identifier"),
            element("predecessor", "Identifier"),
            element("type", "CodeableConcept", "1..1"),
            element("request", "Reference"),
            element("submitter", "Reference"),
            element("response", "Reference"),
            element("date", "date"),
            element("responsible", "Reference"),
            element("payee", "Reference"),
            element("amount", "Money"),
        ),
        element("formCode", "CodeableConcept"),
        backbone(
            "processNote", "0..*",
            element("type", "code", enum=NOTE_TYPE),
            element("text", "string"),
        ),
    ),
    resource(
        "Contract",
        element("identifier", "Identifier", "0..*"),
        element("url", "uri"),
        element("version", "string"),
        element("status", "code", enum=CONTRACT_STATUS),
        element("legalState", "CodeableConcept"),
        element("instantiatesCanonical", "Reference"),
        element("instantiatesUri", "uri"),
        element("contentDerivative", "CodeableConcept"),
        element("issued", "dateTime"),
        element("applies", "Period"),
        element("expirationType", "CodeableConcept"),
        element("subject", "Reference", "0..*"),
        element("authority", "Reference", "0..*"),
        element("domain", "Reference", "0..*"),
        element("site", "Reference", "0..*"),
        element("name", "string"),
        element("title", "string"),
        element("subtitle", "string"),
        element("alias", "string", "0..*"),
        element("author", "Reference"),
        element("scope", "CodeableConcept"),
        choice("topic", ["CodeableConcept", "Reference"]),
        element("type", "CodeableConcept"),
        element("subType", "CodeableConcept", "0..*"),
        backbone(
            "contentDefinition", "0..1",
            element("type", "CodeableConcept", "1..1"),
            element("subType", "CodeableConcept"),
            element("publisher", "Reference"),
            element("publicationDate", "dateTime"),
            element("publicationStatus", "code", "1..1",
                    enum=CONTRACT_PUBLICATION_STATUS),
            element("copyright", "markdown"),
        ),
        backbone(
            "term", "0..*",
            element("identifier", "Identifier"),
            element("issued", "dateTime"),
            element("applies", "Period"),
            choice("topic", ["CodeableConcept", "Reference"]),
            element("type", "CodeableConcept"),
            element("subType", "CodeableConcept"),
            element("text", "string"),
            backbone(
                "securityLabel", "0..*",
                element("number", "unsignedInt", "0..*"),
                element("classification", "Coding", "1..1"),
                element("category", "Coding", "0..*"),
                element("control", "Coding", "0..*"),
            ),
            backbone(
                "offer", "1..1",
                element("identifier", "Identifier", "0..*"),
                backbone(
                    "party", "0..*",
                    element("reference", "Reference", "1..*"),
                    element("role", "CodeableConcept", "1..1"),
                ),
                element("topic", "Reference"),
                element("type", "CodeableConcept"),
                element("decision", "CodeableConcept"),
                element("decisionMode", "CodeableConcept", "0..*"),
                backbone(
                    "answer", "0..*",
                    choice(
                        "value",
                        ["boolean", "decimal", "integer", "date", "dateTime",
                         "time", "string", "uri", "Attachment", "Coding",
                         "Quantity", "Reference"],
                        "1..1",
                    ),
                ),
                element("text", "string"),
                element("linkId", "string", "0..*"),
                element("securityLabelNumber", "unsignedInt", "0..*"),
            ),
            backbone(
                "asset", "0..*",
                element("scope", "CodeableConcept"),
                element("type", "CodeableConcept", "0..*"),
                element("typeReference", "Reference", "0..*"),
                element("subtype", "CodeableConcept", "0..*"),
                element("relationship", "Coding"),
                backbone(
                    "context", "0..*",
                    element("reference", "Reference"),
                    element("code", "CodeableConcept", "0..*"),
                    element("text", "string"),
                ),
                element("condition", "string"),
                element("periodType", "CodeableConcept", "0..*"),
                element("period", "Period", "0..*"),
                element("usePeriod", "Period", "0..*"),
                element("text", "string"),
                element("linkId", "string", "0..*"),
                element("answer", "#Contract.term.offer.answer", "0..*"),
                element("securityLabelNumber", "unsignedInt", "0..*"),
                _valued_item(),
            ),
            backbone(
                "action", "0..*",
                element("doNotPerform", "boolean"),
                element("type", "CodeableConcept", "1..1"),
                backbone(
                    "subject", "0..*",
                    element("reference", "Reference", "1..*"),
                    element("role", "CodeableConcept"),
                ),
                element("intent", "CodeableConcept", "1..1"),
                element("linkId", "string", "0..*"),
                element("status", "CodeableConcept", "1..1"),
                element("context", "Reference"),
                element("contextLinkId", "string", "0..*"),
                choice("occurrence", ["dateTime", "Period", "Timing"]),
                element("requester", "Reference", "0..*"),
                element("requesterLinkId", "string", "0..*"),
                element("performerType", "CodeableConcept", "0..*"),
                element("performerRole", "CodeableConcept"),
                element("performer", "Reference"),
                element("performerLinkId", "string", "0..*"),
                element("reasonCode", "CodeableConcept", "0..*"),
                element("reasonReference", "Reference", "0..*"),
                element("reason", "string", "0..*"),
                element("reasonLinkId", "string", "0..*"),
                element("note", "Annotation", "0..*"),
                element("securityLabelNumber", "unsignedInt", "0..*"),
            ),
            element("group", "#Contract.term", "0..*"),
        ),
        element("supportingInfo", "Reference", "0..*"),
        element("relevantHistory", "Reference", "0..*"),
        backbone(
            "signer", "0..*",
            element("type", "Coding", "1..1"),
            element("party", "Reference", "1..1"),
            element("signature", "Signature", "1..*"),
        ),
        backbone("friendly", "0..*", choice("content", _CONTENT, "1..1")),
        backbone("legal", "0..*", choice("content", _CONTENT, "1..1")),
        backbone("rule", "0..*", choice("content", _CONTENT, "1..1")),
        choice("legallyBinding", _CONTENT),
    ),
]
