"""Conformance resources: capability, profiling, search and testing."""

from __future__ import annotations

from fhir_codec.shapes import backbone, choice, element

from fhir_codec.catalog._base import OPEN_TYPES, canonical, resource
from fhir_codec.catalog._valuesets import (
    ASSERTION_DIRECTION,
    ASSERTION_OPERATOR,
    ASSERTION_RESPONSE,
    BINDING_STRENGTH,
    CAPABILITY_STATEMENT_KIND,
    CODE_SEARCH_SUPPORT,
    COMPARTMENT_TYPE,
    CONDITIONAL_DELETE_STATUS,
    CONDITIONAL_READ_STATUS,
    DOCUMENT_MODE,
    EVENT_CAPABILITY_MODE,
    EXAMPLE_SCENARIO_ACTOR_TYPE,
    EXTENSION_CONTEXT_TYPE,
    FHIR_VERSION,
    GRAPH_COMPARTMENT_RULE,
    GRAPH_COMPARTMENT_USE,
    GUIDE_PAGE_GENERATION,
    GUIDE_PARAMETER_CODE,
    NAMING_SYSTEM_ID_TYPE,
    NAMING_SYSTEM_TYPE,
    OPERATION_KIND,
    OPERATION_PARAMETER_USE,
    REFERENCE_HANDLING_POLICY,
    REPORT_ACTION_RESULT,
    REPORT_PARTICIPANT_TYPE,
    REPORT_RESULT,
    REPORT_STATUS,
    RESTFUL_CAPABILITY_MODE,
    SEARCH_COMPARATOR,
    SEARCH_MODIFIER_CODE,
    SEARCH_PARAM_TYPE,
    SEARCH_XPATH_USAGE,
    STRUCTURE_DEFINITION_KIND,
    STRUCTURE_MAP_CONTEXT_TYPE,
    STRUCTURE_MAP_GROUP_TYPE_MODE,
    STRUCTURE_MAP_INPUT_MODE,
    STRUCTURE_MAP_MODEL_MODE,
    STRUCTURE_MAP_SOURCE_LIST_MODE,
    STRUCTURE_MAP_TARGET_LIST_MODE,
    STRUCTURE_MAP_TRANSFORM,
    SYSTEM_RESTFUL_INTERACTION,
    TEST_HTTP_METHOD,
    TYPE_DERIVATION_RULE,
    TYPE_RESTFUL_INTERACTION,
    VERSIONING_POLICY,
)


RESOURCES = [
    resource(
        "CapabilityStatement",
        *canonical(omit=("identifier",), required=("date",)),
        element("kind", "code", "1..1", enum=CAPABILITY_STATEMENT_KIND),
        element("instantiates", "canonical", "0..*"),
        element("imports", "canonical", "0..*"),
        backbone(
            "software", "0..1",
            element("name", "string", "1..1"),
            element("version", "string"),
            element("releaseDate", "dateTime"),
        ),
        backbone(
            "implementation", "0..1",
            element("description", "string", "1..1"),
            element("url", "url"),
            element("custodian", "Reference"),
        ),
        element("fhirVersion", "code", "1..1", enum=FHIR_VERSION),
        element("format", "code", "1..*"),
        element("patchFormat", "code", "0..*"),
        element("implementationGuide", "canonical", "0..*"),
        backbone(
            "rest", "0..*",
            element("mode", "code", "1..1", enum=RESTFUL_CAPABILITY_MODE),
            element("documentation", "markdown"),
            backbone(
                "security", "0..1",
                element("cors", "boolean"),
                element("service", "CodeableConcept", "0..*"),
                element("description", "markdown"),
            ),
            backbone(
                "resource", "0..*",
                element("type", "code", "1..1"),
                element("profile", "canonical"),
                element("supportedProfile", "canonical", "0..*"),
                element("documentation", "markdown"),
                backbone(
                    "interaction", "0..*",
                    element("code", "code", "1..1", enum=TYPE_RESTFUL_INTERACTION),
                    element("documentation", "markdown"),
                ),
                element("versioning", "code", enum=VERSIONING_POLICY),
                element("readHistory", "boolean"),
                element("updateCreate", "boolean"),
                element("conditionalCreate", "boolean"),
                element("conditionalRead", "code", enum=CONDITIONAL_READ_STATUS),
                element("conditionalUpdate", "boolean"),
                element("conditionalDelete", "code", enum=CONDITIONAL_DELETE_STATUS),
                element("referencePolicy", "code", "0..*",
                        enum=REFERENCE_HANDLING_POLICY),
                element("searchInclude", "string", "0..*"),
                element("searchRevInclude", "string", "0..*"),
                backbone(
                    "searchParam", "0..*",
                    element("name", "string", "1..1"),
                    element("definition", "canonical"),
                    element("type", "code", "1..1", enum=SEARCH_PARAM_TYPE),
                    element("documentation", "markdown"),
                ),
                backbone(
                    "operation", "0..*",
                    element("name", "string", "1..1"),
                    element("definition", "canonical", "1..1"),
                    element("documentation", "markdown"),
                ),
            ),
            backbone(
                "interaction", "0..*",
                element("code", "code", "1..1", enum=SYSTEM_RESTFUL_INTERACTION),
                element("documentation", "markdown"),
            ),
            element("searchParam", "#CapabilityStatement.rest.resource.searchParam", "0..*"),
            element("operation", "#CapabilityStatement.rest.resource.operation", "0..*"),
            element("compartment", "canonical", "0..*"),
        ),
        backbone(
            "messaging", "0..*",
            backbone(
                "endpoint", "0..*",
                element("protocol", "Coding", "1..1"),
                element("address", "url", "1..1"),
            ),
            element("reliableCache", "unsignedInt"),
            element("documentation", "markdown"),
            backbone(
                "supportedMessage", "0..*",
                element("mode", "code", "1..1", enum=EVENT_CAPABILITY_MODE),
                element("definition", "canonical", "1..1"),
            ),
        ),
        backbone(
            "document", "0..*",
            element("mode", "code", "1..1", enum=DOCUMENT_MODE),
            element("documentation", "markdown"),
            element("profile", "canonical", "1..1"),
        ),
    ),
    resource(
        "StructureDefinition",
        *canonical(required=("url", "name")),
        element("keyword", "Coding", "0..*"),
        element("fhirVersion", "code", enum=FHIR_VERSION),
        backbone(
            "mapping", "0..*",
            element("identity", "id", "1..1"),
            element("uri", "uri"),
            element("name", "string"),
            element("comment", "string"),
        ),
        element("kind", "code", "1..1", enum=STRUCTURE_DEFINITION_KIND),
        element("abstract", "boolean", "1..1"),
        backbone(
            "context", "0..*",
            element("type", "code", "1..1", enum=EXTENSION_CONTEXT_TYPE),
            element("expression", "string", "1..1"),
        ),
        element("contextInvariant", "string", "0..*"),
        element("type", "uri", "1..1"),
        element("baseDefinition", "canonical"),
        element("derivation", "code", enum=TYPE_DERIVATION_RULE),
        backbone(
            "snapshot", "0..1",
            element("element", "ElementDefinition", "1..*"),
        ),
        backbone(
            "differential", "0..1",
            element("element", "ElementDefinition", "1..*"),
        ),
    ),
    resource(
        "ImplementationGuide",
        *canonical(omit=("identifier", "purpose"), required=("url", "name")),
        element("packageId", "id", "1..1"),
        element("license", "code"),
        element("fhirVersion", "code", "1..*", enum=FHIR_VERSION),
        backbone(
            "dependsOn", "0..*",
            element("uri", "canonical", "1..1"),
            element("packageId", "id"),
            element("version", "string"),
        ),
        backbone(
            "global", "0..*",
            element("type", "code", "1..1"),
            element("profile", "canonical", "1..1"),
        ),
        backbone(
            "definition", "0..1",
            backbone(
                "grouping", "0..*",
                element("name", "string", "1..1"),
                element("description", "string"),
            ),
            backbone(
                "resource", "1..*",
                element("reference", "Reference", "1..1"),
                element("fhirVersion", "code", "0..*", enum=FHIR_VERSION),
                element("name", "string"),
                element("description", "string"),
                choice("example", ["boolean", "canonical"]),
                element("groupingId", "id"),
            ),
            backbone(
                "page", "0..1",
                choice("name", ["url", "Reference"], "1..1"),
                element("title", "string", "1..1"),
                element("generation", "code", "1..1", enum=GUIDE_PAGE_GENERATION),
                element("page", "#ImplementationGuide.definition.page", "0..*"),
            ),
            backbone(
                "parameter", "0..*",
                element("code", "code", "1..1", enum=GUIDE_PARAMETER_CODE),
                element("value", "string", "1..1"),
            ),
            backbone(
                "template", "0..*",
                element("code", "code", "1..1"),
                element("source", "string", "1..1"),
                element("scope", "string"),
            ),
        ),
        backbone(
            "manifest", "0..1",
            element("rendering", "url"),
            backbone(
                "resource", "1..*",
                element("reference", "Reference", "1..1"),
                choice("example", ["boolean", "canonical"]),
                element("relativePath", "url"),
            ),
            backbone(
                "page", "0..*",
                element("name", "string", "1..1"),
                element("title", "string"),
                element("anchor", "string", "0..*"),
            ),
            element("image", "string", "0..*"),
            element("other", "string", "0..*"),
        ),
    ),
    resource(
        "SearchParameter",
        *canonical(
            omit=("identifier", "title", "copyright"),
            required=("url", "name", "description"),
        ),
        element("derivedFrom", "canonical"),
        element("code", "code", "1..1"),
        element("base", "code", "1..*"),
        element("type", "code", "1..1", enum=SEARCH_PARAM_TYPE),
        element("expression", "string"),
        element("xpath", "string"),
        element("xpathUsage", "code", enum=SEARCH_XPATH_USAGE),
        element("target", "code", "0..*"),
        element("multipleOr", "boolean"),
        element("multipleAnd", "boolean"),
        element("comparator", "code", "0..*", enum=SEARCH_COMPARATOR),
        element("modifier", "code", "0..*", enum=SEARCH_MODIFIER_CODE),
        element("chain", "string", "0..*"),
        backbone(
            "component", "0..*",
            element("definition", "canonical", "1..1"),
            element("expression", "string", "1..1"),
        ),
    ),
    resource(
        "OperationDefinition",
        *canonical(omit=("identifier", "copyright"), required=("name",)),
        element("kind", "code", "1..1", enum=OPERATION_KIND),
        element("affectsState", "boolean"),
        element("code", "code", "1..1"),
        element("comment", "markdown"),
        element("base", "canonical"),
        element("resource", "code", "0..*"),
        element("system", "boolean", "1..1"),
        element("type", "boolean", "1..1"),
        element("instance", "boolean", "1..1"),
        element("inputProfile", "canonical"),
        element("outputProfile", "canonical"),
        backbone(
            "parameter", "0..*",
            element("name", "code", "1..1"),
            element("use", "code", "1..1", enum=OPERATION_PARAMETER_USE),
            element("min", "integer", "1..1"),
            element("max", "string", "1..1"),
            element("documentation", "string"),
            element("type", "code"),
            element("targetProfile", "canonical", "0..*"),
            element("searchType", "code", enum=SEARCH_PARAM_TYPE),
            backbone(
                "binding", "0..1",
                element("strength", "code", "1..1", enum=BINDING_STRENGTH),
                element("valueSet", "canonical", "1..1"),
            ),
            backbone(
                "referencedFrom", "0..*",
                element("source", "string", "1..1"),
                element("sourceId", "string"),
            ),
            element("part", "#OperationDefinition.parameter", "0..*"),
        ),
        backbone(
            "overload", "0..*",
            element("parameterName", "string", "0..*"),
            element("comment", "string"),
        ),
    ),
    resource(
        "CompartmentDefinition",
        *canonical(
            omit=("identifier", "title", "jurisdiction", "copyright"),
            required=("url", "name"),
        ),
        element("code", "code", "1..1", enum=COMPARTMENT_TYPE),
        element("search", "boolean", "1..1"),
        backbone(
            "resource", "0..*",
            element("code", "code", "1..1"),
            element("param", "string", "0..*"),
            element("documentation", "string"),
        ),
    ),
    resource(
        "GraphDefinition",
        *canonical(omit=("identifier", "title", "copyright"), required=("name",)),
        element("start", "code", "1..1"),
        element("profile", "canonical"),
        backbone(
            "link", "0..*",
            element("path", "string"),
            element("sliceName", "string"),
            element("min", "integer"),
            element("max", "string"),
            element("description", "string"),
            backbone(
                "target", "0..*",
                element("type", "code", "1..1"),
                element("params", "string"),
                element("profile", "canonical"),
                backbone(
                    "compartment", "0..*",
                    element("use", "code", "1..1", enum=GRAPH_COMPARTMENT_USE),
                    element("code", "code", "1..1", enum=COMPARTMENT_TYPE),
                    element("rule", "code", "1..1", enum=GRAPH_COMPARTMENT_RULE),
                    element("expression", "string"),
                    element("description", "string"),
                ),
                element("link", "#GraphDefinition.link", "0..*"),
            ),
        ),
    ),
    resource(
        "ExampleScenario",
        *canonical(omit=("title", "description")),
        backbone(
            "actor", "0..*",
            element("actorId", "string", "1..1"),
            element("type", "code", "1..1", enum=EXAMPLE_SCENARIO_ACTOR_TYPE),
            element("name", "string"),
            element("description", "markdown"),
        ),
        backbone(
            "instance", "0..*",
            element("resourceId", "string", "1..1"),
            element("resourceType", "code", "1..1"),
            element("name", "string"),
            element("description", "markdown"),
            backbone(
                "version", "0..*",
                element("versionId", "string", "1..1"),
                element("description", "markdown", "1..1"),
            ),
            backbone(
                "containedInstance", "0..*",
                element("resourceId", "string", "1..1"),
                element("versionId", "string"),
            ),
        ),
        backbone(
            "process", "0..*",
            element("title", "string", "1..1"),
            element("description", "markdown"),
            element("preConditions", "markdown"),
            element("postConditions", "markdown"),
            backbone(
                "step", "0..*",
                element("process", "#ExampleScenario.process", "0..*"),
                element("pause", "boolean"),
                backbone(
                    "operation", "0..1",
                    element("number", "string", "1..1"),
                    element("type", "string"),
                    element("name", "string"),
                    element("initiator", "string"),
                    element("receiver", "string"),
                    element("description", "markdown"),
                    element("initiatorActive", "boolean"),
                    element("receiverActive", "boolean"),
                    element("request", "#ExampleScenario.instance.containedInstance"),
                    element("response", "#ExampleScenario.instance.containedInstance"),
                ),
                backbone(
                    "alternative", "0..*",
                    element("title", "string", "1..1"),
                    element("description", "markdown"),
                    element("step", "#ExampleScenario.process.step", "0..*"),
                ),
            ),
        ),
        element("workflow", "canonical", "0..*"),
    ),
    resource(
        "StructureMap",
        *canonical(required=("url", "name")),
        backbone(
            "structure", "0..*",
            element("url", "canonical", "1..1"),
            element("mode", "code", "1..1", enum=STRUCTURE_MAP_MODEL_MODE),
            element("alias", "string"),
            element("documentation", "string"),
        ),
        element("import", "canonical", "0..*"),
        backbone(
            "group", "1..*",
            element("name", "id", "1..1"),
            element("extends", "id"),
            element("typeMode", "code", "1..1", enum=STRUCTURE_MAP_GROUP_TYPE_MODE),
            element("documentation", "string"),
            backbone(
                "input", "1..*",
                element("name", "id", "1..1"),
                element("type", "string"),
                element("mode", "code", "1..1", enum=STRUCTURE_MAP_INPUT_MODE),
                element("documentation", "string"),
            ),
            backbone(
                "rule", "1..*",
                element("name", "id", "1..1"),
                backbone(
                    "source", "1..*",
                    element("context", "id", "1..1"),
                    element("min", "integer"),
                    element("max", "string"),
                    element("type", "string"),
                    choice("defaultValue", OPEN_TYPES),
                    element("element", "string"),
                    element("listMode", "code", enum=STRUCTURE_MAP_SOURCE_LIST_MODE),
                    element("variable", "id"),
                    element("condition", "string"),
                    element("check", "string"),
                    element("logMessage", "string"),
                ),
                backbone(
                    "target", "0..*",
                    element("context", "id"),
                    element("contextType", "code", enum=STRUCTURE_MAP_CONTEXT_TYPE),
                    element("element", "string"),
                    element("variable", "id"),
                    element("listMode", "code", "0..*",
                            enum=STRUCTURE_MAP_TARGET_LIST_MODE),
                    element("listRuleId", "id"),
                    element("transform", "code", enum=STRUCTURE_MAP_TRANSFORM),
                    backbone(
                        "parameter", "0..*",
                        choice("value", ["id", "string", "boolean", "integer", "decimal"],
                               "1..1"),
                    ),
                ),
                element("rule", "#StructureMap.group.rule", "0..*"),
                backbone(
                    "dependent", "0..*",
                    element("name", "id", "1..1"),
                    element("variable", "string", "1..*"),
                ),
                element("documentation", "string"),
            ),
        ),
    ),
    resource(
        "TerminologyCapabilities",
        *canonical(omit=("identifier",), required=("date",)),
        element("kind", "code", "1..1", enum=CAPABILITY_STATEMENT_KIND),
        backbone(
            "software", "0..1",
            element("name", "string", "1..1"),
            element("version", "string"),
        ),
        backbone(
            "implementation", "0..1",
            element("description", "string", "1..1"),
            element("url", "url"),
        ),
        element("lockedDate", "boolean"),
        backbone(
            "codeSystem", "0..*",
            element("uri", "canonical"),
            backbone(
                "version", "0..*",
                element("code", "string"),
                element("isDefault", "boolean"),
                element("compositional", "boolean"),
                element("language", "code", "0..*"),
                backbone(
                    "filter", "0..*",
                    element("code", "code", "1..1"),
                    element("op", "code", "1..*"),
                ),
                element("property", "code", "0..*"),
            ),
            element("subsumption", "boolean"),
        ),
        backbone(
            "expansion", "0..1",
            element("hierarchical", "boolean"),
            element("paging", "boolean"),
            element("incomplete", "boolean"),
            backbone(
                "parameter", "0..*",
                element("name", "code", "1..1"),
                element("documentation", "string"),
            ),
            element("textFilter", "markdown"),
        ),
        element("codeSearch", "code", enum=CODE_SEARCH_SUPPORT),
        backbone(
            "validateCode", "0..1",
            element("translations", "boolean", "1..1"),
        ),
        backbone(
            "translation", "0..1",
            element("needsMap", "boolean", "1..1"),
        ),
        backbone(
            "closure", "0..1",
            element("translation", "boolean"),
        ),
    ),
    resource(
        "TestScript",
        *canonical(required=("url", "name"), cards={"identifier": "0..1"}),
        backbone(
            "origin", "0..*",
            element("index", "integer", "1..1"),
            element("profile", "Coding", "1..1"),
        ),
        backbone(
            "destination", "0..*",
            element("index", "integer", "1..1"),
            element("profile", "Coding", "1..1"),
        ),
        backbone(
            "metadata", "0..1",
            backbone(
                "link", "0..*",
                element("url", "uri", "1..1"),
                element("description", "string"),
            ),
            backbone(
                "capability", "1..*",
                element("required", "boolean", "1..1"),
                element("validated", "boolean", "1..1"),
                element("description", "string"),
                element("origin", "integer", "0..*"),
                element("destination", "integer"),
                element("link", "uri", "0..*"),
                element("capabilities", "canonical", "1..1"),
            ),
        ),
        backbone(
            "fixture", "0..*",
            element("autocreate", "boolean", "1..1"),
            element("autodelete", "boolean", "1..1"),
            element("resource", "Reference"),
        ),
        element("profile", "Reference", "0..*"),
        backbone(
            "variable", "0..*",
            element("name", "string", "1..1"),
            element("defaultValue", "string"),
            element("description", "string"),
            element("expression", "string"),
            element("headerField", "string"),
            element("hint", "string"),
            element("path", "string"),
            element("sourceId", "id"),
        ),
        backbone(
            "setup", "0..1",
            backbone(
                "action", "1..*",
                backbone(
                    "operation", "0..1",
                    element("type", "Coding"),
                    element("resource", "code"),
                    element("label", "string"),
                    element("description", "string"),
                    element("accept", "code"),
                    element("contentType", "code"),
                    element("destination", "integer"),
                    element("encodeRequestUrl", "boolean", "1..1"),
                    element("method", "code", enum=TEST_HTTP_METHOD),
                    element("origin", "integer"),
                    element("params", "string"),
                    backbone(
                        "requestHeader", "0..*",
                        element("field", "string", "1..1"),
                        element("value", "string", "1..1"),
                    ),
                    element("requestId", "id"),
                    element("responseId", "id"),
                    element("sourceId", "id"),
                    element("targetId", "id"),
                    element("url", "string"),
                ),
                backbone(
                    "assert", "0..1",
                    element("label", "string"),
                    element("description", "string"),
                    element("direction", "code", enum=ASSERTION_DIRECTION),
                    element("compareToSourceId", "string"),
                    element("compareToSourceExpression", "string"),
                    element("compareToSourcePath", "string"),
                    element("contentType", "code"),
                    element("expression", "string"),
                    element("headerField", "string"),
                    element("minimumId", "string"),
                    element("navigationLinks", "boolean"),
                    element("operator", "code", enum=ASSERTION_OPERATOR),
                    element("path", "string"),
                    element("requestMethod", "code", enum=TEST_HTTP_METHOD),
                    element("requestURL", "string"),
                    element("resource", "code"),
                    element("response", "code", enum=ASSERTION_RESPONSE),
                    element("responseCode", "string"),
                    element("sourceId", "id"),
                    element("validateProfileId", "id"),
                    element("value", "string"),
                    element("warningOnly", "boolean", "1..1"),
                ),
            ),
        ),
        backbone(
            "test", "0..*",
            element("name", "string"),
            element("description", "string"),
            backbone(
                "action", "1..*",
                element("operation", "#TestScript.setup.action.operation"),
                element("assert", "#TestScript.setup.action.assert"),
            ),
        ),
        backbone(
            "teardown", "0..1",
            backbone(
                "action", "1..*",
                element("operation", "#TestScript.setup.action.operation", "1..1"),
            ),
        ),
    ),
    resource(
        "TestReport",
        element("identifier", "Identifier"),
        element("name", "string"),
        element("status", "code", "1..1", enum=REPORT_STATUS),
        element("testScript", "Reference", "1..1"),
        element("result", "code", "1..1", enum=REPORT_RESULT),
        element("score", "decimal"),
        element("tester", "string"),
        element("issued", "dateTime"),
        backbone(
            "participant", "0..*",
            element("type", "code", "1..1", enum=REPORT_PARTICIPANT_TYPE),
            element("uri", "uri", "1..1"),
            element("display", "string"),
        ),
        backbone(
            "setup", "0..1",
            backbone(
                "action", "1..*",
                backbone(
                    "operation", "0..1",
                    element("result", "code", "1..1", enum=REPORT_ACTION_RESULT),
                    element("message", "markdown"),
                    element("detail", "uri"),
                ),
                backbone(
                    "assert", "0..1",
                    element("result", "code", "1..1", enum=REPORT_ACTION_RESULT),
                    element("message", "markdown"),
                    element("detail", "string"),
                ),
            ),
        ),
        backbone(
            "test", "0..*",
            element("name", "string"),
            element("description", "string"),
            backbone(
                "action", "1..*",
                element("operation", "#TestReport.setup.action.operation"),
                element("assert", "#TestReport.setup.action.assert"),
            ),
        ),
        backbone(
            "teardown", "0..1",
            backbone(
                "action", "1..*",
                element("operation", "#TestReport.setup.action.operation", "1..1"),
            ),
        ),
    ),
    resource(
        "NamingSystem",
        *canonical(
            omit=("url", "identifier", "version", "title", "experimental",
                  "purpose", "copyright"),
            required=("name", "date"),
        ),
        element("kind", "code", "1..1", enum=NAMING_SYSTEM_TYPE),
        element("responsible", "string"),
        element("type", "CodeableConcept"),
        element("usage", "string"),
        backbone(
            "uniqueId", "1..*",
            element("type", "code", "1..1", enum=NAMING_SYSTEM_ID_TYPE),
            element("value", "string", "1..1"),
            element("preferred", "boolean"),
            element("comment", "string"),
            element("period", "Period"),
        ),
    ),
]
