"""Required-binding value sets (FHIR R4 4.0.1).

Only bindings of strength ``required`` are closed; anything bound more
loosely is carried as plain ``code``/``CodeableConcept`` without a
member check.
"""

from __future__ import annotations


def _codes(text: str) -> tuple[str, ...]:
    return tuple(text.split())


# ── Shared across many resources ──────────────────────────────────

PUBLICATION_STATUS = _codes("draft active retired unknown")
REQUEST_STATUS = _codes("draft active on-hold revoked completed entered-in-error unknown")
REQUEST_INTENT = _codes(
    "proposal plan directive order original-order reflex-order filler-order "
    "instance-order option"
)
REQUEST_PRIORITY = _codes("routine urgent asap stat")
EVENT_STATUS = _codes(
    "preparation in-progress not-done on-hold stopped completed "
    "entered-in-error unknown"
)
FINANCIAL_STATUS = _codes("active cancelled draft entered-in-error")
REMITTANCE_OUTCOME = _codes("queued complete error partial")
NOTE_TYPE = _codes("display print printoper")
CLAIM_USE = _codes("claim preauthorization predetermination")
DAYS_OF_WEEK = _codes("mon tue wed thu fri sat sun")
ADMINISTRATIVE_GENDER = _codes("male female other unknown")
ACTION_PARTICIPANT_TYPE = _codes("patient practitioner related-person device")
ACTION_CONDITION_KIND = _codes("applicability start stop")
ACTION_RELATIONSHIP = _codes(
    "before-start before before-end concurrent-with-start concurrent "
    "concurrent-with-end after-start after after-end"
)
ACTION_GROUPING_BEHAVIOR = _codes("visual-group logical-group sentence-group")
ACTION_SELECTION_BEHAVIOR = _codes(
    "any all all-or-none exactly-one at-most-one one-or-more"
)
ACTION_REQUIRED_BEHAVIOR = _codes("must could must-unless-documented")
ACTION_PRECHECK_BEHAVIOR = _codes("yes no")
ACTION_CARDINALITY_BEHAVIOR = _codes("single multiple")
GROUP_MEASURE = _codes(
    "mean median mean-of-mean mean-of-median median-of-mean median-of-median"
)
VARIABLE_TYPE = _codes("dichotomous continuous descriptive")
DOCUMENT_RELATIONSHIP = _codes("replaces transforms signs appends")
DOCUMENT_REFERENCE_STATUS = _codes("current superseded entered-in-error")
COMPOSITION_STATUS = _codes("preliminary final amended entered-in-error")
PRICE_COMPONENT_TYPE = _codes("base surcharge deduction discount tax informational")
SEARCH_PARAM_TYPE = _codes(
    "number date string token reference composite quantity uri special"
)
BINDING_STRENGTH = _codes("required extensible preferred example")
RESOURCE_STATUS = _codes("active inactive entered-in-error")
FHIR_VERSION = _codes(
    "0.01 0.05 0.06 0.11 0.0.80 0.0.81 0.0.82 0.4.0 0.5.0 1.0.0 1.0.1 1.0.2 "
    "1.1.0 1.4.0 1.6.0 1.8.0 3.0.0 3.0.1 3.3.0 3.5.0 4.0.0 4.0.1"
)
MIME_JSON_XML = _codes("xml json ttl mime")

# ── Datatypes ─────────────────────────────────────────────────────

NARRATIVE_STATUS = _codes("generated extensions additional empty")
IDENTIFIER_USE = _codes("usual official temp secondary old")
NAME_USE = _codes("usual official temp nickname anonymous old maiden")
ADDRESS_USE = _codes("home work temp old billing")
ADDRESS_TYPE = _codes("postal physical both")
CONTACT_POINT_SYSTEM = _codes("phone fax email pager url sms other")
CONTACT_POINT_USE = _codes("home work temp old mobile")
QUANTITY_COMPARATOR = _codes("< <= >= >")
UNITS_OF_TIME = _codes("s min h d wk mo a")
EVENT_TIMING = _codes(
    "MORN MORN.early MORN.late NOON AFT AFT.early AFT.late EVE EVE.early "
    "EVE.late NIGHT PHS HS WAKE C CM CD CV AC ACM ACD ACV PC PCM PCD PCV"
)
CONTRIBUTOR_TYPE = _codes("author editor reviewer endorser")
RELATED_ARTIFACT_TYPE = _codes(
    "documentation justification citation predecessor successor derived-from "
    "depends-on composed-of"
)
TRIGGER_TYPE = _codes(
    "named-event periodic data-changed data-added data-modified data-removed "
    "data-accessed data-access-ended"
)
EXPRESSION_LANGUAGE = _codes("text/cql text/fhirpath application/x-fhir-query")
OPERATION_PARAMETER_USE = _codes("in out")
SORT_DIRECTION = _codes("ascending descending")
PROPERTY_REPRESENTATION = _codes("xmlAttr xmlText typeAttr cdaText xhtml")
DISCRIMINATOR_TYPE = _codes("value exists pattern type profile")
SLICING_RULES = _codes("closed open openAtEnd")
AGGREGATION_MODE = _codes("contained referenced bundled")
REFERENCE_VERSION_RULES = _codes("either independent specific")
CONSTRAINT_SEVERITY = _codes("error warning")

# ── Foundation ────────────────────────────────────────────────────

BUNDLE_TYPE = _codes(
    "document message transaction transaction-response batch batch-response "
    "history searchset collection"
)
SEARCH_ENTRY_MODE = _codes("match include outcome")
HTTP_VERB = _codes("GET HEAD POST PUT DELETE PATCH")
ISSUE_SEVERITY = _codes("fatal error warning information")
ISSUE_TYPE = _codes(
    "invalid structure required value invariant security login unknown expired "
    "forbidden suppressed processing not-supported duplicate multiple-matches "
    "not-found deleted too-long code-invalid extension too-costly "
    "business-rule conflict transient lock-error no-store exception timeout "
    "incomplete throttled informational"
)
AUDIT_EVENT_ACTION = _codes("C R U D E")
AUDIT_EVENT_OUTCOME = _codes("0 4 8 12")
AUDIT_NETWORK_TYPE = _codes("1 2 3 4 5")
PROVENANCE_ENTITY_ROLE = _codes("derivation revision quotation source removal")
CONSENT_STATE = _codes("draft proposed active rejected inactive entered-in-error")
CONSENT_PROVISION_TYPE = _codes("deny permit")
CONSENT_DATA_MEANING = _codes("instance related dependents authoredby")
SUBSCRIPTION_STATUS = _codes("requested active error off")
SUBSCRIPTION_CHANNEL_TYPE = _codes("rest-hook websocket email sms message")
RESPONSE_CODE = _codes("ok transient-error fatal-error")
MESSAGE_SIGNIFICANCE_CATEGORY = _codes("consequence currency notification")
MESSAGEHEADER_RESPONSE_REQUEST = _codes("always on-error never on-success")
COMPOSITION_ATTESTATION_MODE = _codes("personal professional legal official")
LIST_STATUS = _codes("current retired entered-in-error")
LIST_MODE = _codes("working snapshot changes")
LINKAGE_TYPE = _codes("source alternate historical")
DOCUMENT_MODE = _codes("producer consumer")

# ── Conformance ───────────────────────────────────────────────────

CAPABILITY_STATEMENT_KIND = _codes("instance capability requirements")
RESTFUL_CAPABILITY_MODE = _codes("client server")
TYPE_RESTFUL_INTERACTION = _codes(
    "read vread update patch delete history-instance history-type create "
    "search-type"
)
SYSTEM_RESTFUL_INTERACTION = _codes("transaction batch search-system history-system")
VERSIONING_POLICY = _codes("no-version versioned versioned-update")
CONDITIONAL_READ_STATUS = _codes("not-supported modified-since not-match full-support")
CONDITIONAL_DELETE_STATUS = _codes("not-supported single multiple")
REFERENCE_HANDLING_POLICY = _codes("literal logical resolves enforced local")
EVENT_CAPABILITY_MODE = _codes("sender receiver")
STRUCTURE_DEFINITION_KIND = _codes("primitive-type complex-type resource logical")
TYPE_DERIVATION_RULE = _codes("specialization constraint")
EXTENSION_CONTEXT_TYPE = _codes("fhirpath element extension")
GUIDE_PAGE_GENERATION = _codes("html markdown xml generated")
GUIDE_PARAMETER_CODE = _codes(
    "apply path-resource path-pages path-tx-cache expansion-parameter "
    "rule-broken-links generate-xml generate-json generate-turtle html-template"
)
SEARCH_XPATH_USAGE = _codes("normal phonetic nearby distance other")
SEARCH_COMPARATOR = _codes("eq ne gt lt ge le sa eb ap")
SEARCH_MODIFIER_CODE = _codes(
    "missing exact contains not text in not-in below above type identifier ofType"
)
OPERATION_KIND = _codes("operation query")
COMPARTMENT_TYPE = _codes("Patient Encounter RelatedPerson Practitioner Device")
GRAPH_COMPARTMENT_RULE = _codes("identical matching different custom")
GRAPH_COMPARTMENT_USE = _codes("condition requirement")
EXAMPLE_SCENARIO_ACTOR_TYPE = _codes("person entity")
STRUCTURE_MAP_MODEL_MODE = _codes("source queried target produced")
STRUCTURE_MAP_GROUP_TYPE_MODE = _codes("none types type-and-types")
STRUCTURE_MAP_INPUT_MODE = _codes("source target")
STRUCTURE_MAP_SOURCE_LIST_MODE = _codes("first not_first last not_last only_one")
STRUCTURE_MAP_CONTEXT_TYPE = _codes("type variable")
STRUCTURE_MAP_TARGET_LIST_MODE = _codes("first share last collate")
STRUCTURE_MAP_TRANSFORM = _codes(
    "create copy truncate escape cast append translate reference dateOp uuid "
    "pointer evaluate cc c qty id cp"
)
CODE_SEARCH_SUPPORT = _codes("explicit all")
ASSERTION_DIRECTION = _codes("response request")
ASSERTION_OPERATOR = _codes(
    "equals notEquals in notIn greaterThan lessThan empty notEmpty contains "
    "notContains eval"
)
ASSERTION_RESPONSE = _codes(
    "okay created noContent notModified bad forbidden notFound "
    "methodNotAllowed conflict gone preconditionFailed unprocessable"
)
TEST_HTTP_METHOD = _codes("delete get options patch post put head")
REPORT_STATUS = _codes("completed in-progress waiting stopped entered-in-error")
REPORT_RESULT = _codes("pass fail pending")
REPORT_PARTICIPANT_TYPE = _codes("test-engine client server")
REPORT_ACTION_RESULT = _codes("pass skip fail warning error")
NAMING_SYSTEM_TYPE = _codes("codesystem identifier root")
NAMING_SYSTEM_ID_TYPE = _codes("oid uuid uri other")

# ── Terminology ───────────────────────────────────────────────────

CODE_SYSTEM_CONTENT_MODE = _codes("not-present example fragment complete supplement")
CODE_SYSTEM_HIERARCHY_MEANING = _codes("grouped-by is-a part-of classified-with")
FILTER_OPERATOR = _codes(
    "= is-a descendent-of is-not-a regex in not-in generalizes exists"
)
CONCEPT_PROPERTY_TYPE = _codes("code Coding string integer boolean dateTime decimal")
CONCEPT_MAP_EQUIVALENCE = _codes(
    "relatedto equivalent equal wider subsumes narrower specializes inexact "
    "unmatched disjoint"
)
CONCEPT_MAP_UNMAPPED_MODE = _codes("provided fixed other-map")

# ── Administration ────────────────────────────────────────────────

LINK_TYPE = _codes("replaced-by replaces refer seealso")
IDENTITY_ASSURANCE_LEVEL = _codes("level1 level2 level3 level4")
GROUP_TYPE = _codes("person animal practitioner device medication substance")
LOCATION_STATUS = _codes("active suspended inactive")
LOCATION_MODE = _codes("instance kind")
ENDPOINT_STATUS = _codes("active suspended error off entered-in-error test")
ENCOUNTER_STATUS = _codes(
    "planned arrived triaged in-progress onleave finished cancelled "
    "entered-in-error unknown"
)
ENCOUNTER_LOCATION_STATUS = _codes("planned active reserved completed")
EPISODE_OF_CARE_STATUS = _codes(
    "planned waitlist active onhold finished cancelled entered-in-error"
)
FLAG_STATUS = _codes("active inactive entered-in-error")
APPOINTMENT_STATUS = _codes(
    "proposed pending booked arrived fulfilled cancelled noshow "
    "entered-in-error checked-in waitlist"
)
PARTICIPANT_REQUIRED = _codes("required optional information-only")
PARTICIPATION_STATUS = _codes("accepted declined tentative needs-action")
SLOT_STATUS = _codes("busy free busy-unavailable busy-tentative entered-in-error")
ACCOUNT_STATUS = _codes("active inactive entered-in-error on-hold unknown")
CHARGE_ITEM_STATUS = _codes(
    "planned billable not-billable aborted billed entered-in-error unknown"
)
INVOICE_STATUS = _codes("draft issued balanced cancelled entered-in-error")
DEVICE_STATUS = _codes("active inactive entered-in-error unknown")
UDI_ENTRY_TYPE = _codes("barcode rfid manual card self-reported unknown")
DEVICE_NAME_TYPE = _codes(
    "udi-label-name user-friendly-name patient-reported-name manufacturer-name "
    "model-name other"
)
METRIC_OPERATIONAL_STATUS = _codes("on off standby entered-in-error")
METRIC_COLOR = _codes("black red green yellow blue magenta cyan white")
METRIC_CATEGORY = _codes("measurement setting calculation unspecified")
METRIC_CALIBRATION_TYPE = _codes("unspecified offset gain two-point")
METRIC_CALIBRATION_STATE = _codes(
    "not-calibrated calibration-required calibrated unspecified"
)
VERIFICATION_RESULT_STATUS = _codes(
    "attested validated in-process req-revalid val-fail reval-fail"
)

# ── Clinical ──────────────────────────────────────────────────────

ALLERGY_TYPE = _codes("allergy intolerance")
ALLERGY_CATEGORY = _codes("food medication environment biologic")
ALLERGY_CRITICALITY = _codes("low high unable-to-assess")
REACTION_SEVERITY = _codes("mild moderate severe")
OBSERVATION_STATUS = _codes(
    "registered preliminary final amended corrected cancelled entered-in-error "
    "unknown"
)
DIAGNOSTIC_REPORT_STATUS = _codes(
    "registered partial preliminary final amended corrected appended cancelled "
    "entered-in-error unknown"
)
IMAGING_STUDY_STATUS = _codes("registered available cancelled entered-in-error unknown")
SPECIMEN_STATUS = _codes("available unavailable unsatisfactory entered-in-error")
SPECIMEN_CONTAINED_PREFERENCE = _codes("preferred alternate")
FAMILY_HISTORY_STATUS = _codes("partial completed entered-in-error health-unknown")
CLINICAL_IMPRESSION_STATUS = _codes("in-progress completed entered-in-error")
DETECTED_ISSUE_STATUS = _codes(
    "registered preliminary final amended corrected cancelled entered-in-error "
    "unknown"
)
DETECTED_ISSUE_SEVERITY = _codes("high moderate low")
ADVERSE_EVENT_ACTUALITY = _codes("actual potential")
CARE_PLAN_INTENT = _codes("proposal plan order option")
CARE_PLAN_ACTIVITY_KIND = _codes(
    "Appointment CommunicationRequest DeviceRequest MedicationRequest "
    "NutritionOrder Task ServiceRequest VisionPrescription"
)
CARE_PLAN_ACTIVITY_STATUS = _codes(
    "not-started scheduled in-progress on-hold completed cancelled stopped "
    "unknown entered-in-error"
)
CARE_TEAM_STATUS = _codes("proposed active suspended inactive entered-in-error")
GOAL_LIFECYCLE_STATUS = _codes(
    "proposed planned accepted active on-hold completed cancelled "
    "entered-in-error rejected"
)
RISK_ASSESSMENT_STATUS = OBSERVATION_STATUS
VISION_EYE = _codes("right left")
VISION_BASE = _codes("up down in out")
QUESTIONNAIRE_ITEM_TYPE = _codes(
    "group display question boolean decimal integer date dateTime time string "
    "text url choice open-choice attachment reference quantity"
)
QUESTIONNAIRE_ENABLE_OPERATOR = _codes("exists = != > < >= <=")
QUESTIONNAIRE_ENABLE_BEHAVIOR = _codes("all any")
QUESTIONNAIRE_RESPONSE_STATUS = _codes(
    "in-progress completed amended entered-in-error stopped"
)
SEQUENCE_TYPE = _codes("aa dna rna")
SEQUENCE_ORIENTATION = _codes("sense antisense")
SEQUENCE_STRAND = _codes("watson crick")
SEQUENCE_QUALITY_TYPE = _codes("indel snp unknown")
SEQUENCE_REPOSITORY_TYPE = _codes("directlink openapi login oauth other")
MEDIA_STATUS = EVENT_STATUS
BIOLOGICAL_PRODUCT_CATEGORY = _codes("organ tissue fluid cells biologicalAgent")
BIOLOGICAL_PRODUCT_STATUS = _codes("available unavailable")
BIOLOGICAL_STORAGE_SCALE = _codes("farenheit celsius kelvin")
OBSERVATION_DATA_TYPE = _codes(
    "Quantity CodeableConcept string boolean integer Range Ratio SampledData "
    "time dateTime Period"
)
OBSERVATION_RANGE_CATEGORY = _codes("reference critical absolute")
SPECIMEN_PREFERENCE = _codes("preferred alternate")

# ── Medications ───────────────────────────────────────────────────

MEDICATION_STATUS = _codes("active inactive entered-in-error")
MEDICATION_REQUEST_STATUS = _codes(
    "active on-hold cancelled completed entered-in-error stopped draft unknown"
)
MEDICATION_REQUEST_INTENT = _codes(
    "proposal plan order original-order reflex-order filler-order "
    "instance-order option"
)
MEDICATION_ADMINISTRATION_STATUS = _codes(
    "in-progress not-done on-hold completed entered-in-error stopped unknown"
)
MEDICATION_DISPENSE_STATUS = _codes(
    "preparation in-progress cancelled on-hold completed entered-in-error "
    "stopped declined unknown"
)
MEDICATION_STATEMENT_STATUS = _codes(
    "active completed entered-in-error intended stopped on-hold unknown "
    "not-taken"
)
IMMUNIZATION_STATUS = _codes("completed entered-in-error not-done")
IMMUNIZATION_EVALUATION_STATUS = _codes("completed entered-in-error")
NUTRITION_ORDER_STATUS = REQUEST_STATUS

# ── Workflow ──────────────────────────────────────────────────────

TASK_STATUS = _codes(
    "draft requested received accepted rejected ready cancelled in-progress "
    "on-hold failed completed entered-in-error"
)
TASK_INTENT = _codes(
    "unknown proposal plan order original-order reflex-order filler-order "
    "instance-order option"
)
DEVICE_USE_STATUS = _codes(
    "active completed entered-in-error intended stopped on-hold"
)
SUPPLY_REQUEST_STATUS = _codes(
    "draft active suspended cancelled completed entered-in-error unknown"
)
SUPPLY_DELIVERY_STATUS = _codes("in-progress completed abandoned entered-in-error")
GUIDANCE_RESPONSE_STATUS = _codes(
    "success data-requested data-required in-progress failure entered-in-error"
)
DOCUMENT_MANIFEST_STATUS = DOCUMENT_REFERENCE_STATUS

# ── Financial ─────────────────────────────────────────────────────

ELIGIBILITY_PURPOSE = _codes("auth-requirements benefits discovery validation")
CONTRACT_STATUS = _codes(
    "amended appended cancelled disputed entered-in-error executable executed "
    "negotiable offered policy rejected renewed revoked resolved terminated"
)
CONTRACT_PUBLICATION_STATUS = CONTRACT_STATUS

# ── Definitional / research ───────────────────────────────────────

RESEARCH_STUDY_STATUS = _codes(
    "active administratively-completed approved closed-to-accrual "
    "closed-to-accrual-and-intervention completed disapproved in-review "
    "temporarily-closed-to-accrual "
    "temporarily-closed-to-accrual-and-intervention withdrawn"
)
RESEARCH_SUBJECT_STATUS = _codes(
    "candidate eligible follow-up ineligible not-registered off-study on-study "
    "on-study-intervention on-study-observation pending-on-study "
    "potential-candidate screening withdrawn"
)
RESEARCH_ELEMENT_TYPE = _codes("population exposure outcome")
EXPOSURE_STATE = _codes("exposure exposure-alternative")
MEASURE_REPORT_STATUS = _codes("complete pending error")
MEASURE_REPORT_TYPE = _codes("individual subject-list summary data-collection")
