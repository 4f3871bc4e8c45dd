"""Terminology resources."""

from __future__ import annotations

from fhir_codec.shapes import backbone, choice, element

from fhir_codec.catalog._base import canonical, resource
from fhir_codec.catalog._valuesets import (
    CODE_SYSTEM_CONTENT_MODE,
    CODE_SYSTEM_HIERARCHY_MEANING,
    CONCEPT_MAP_EQUIVALENCE,
    CONCEPT_MAP_UNMAPPED_MODE,
    CONCEPT_PROPERTY_TYPE,
    FILTER_OPERATOR,
)


RESOURCES = [
    resource(
        "CodeSystem",
        *canonical(),
        element("caseSensitive", "boolean"),
        element("valueSet", "canonical"),
        element("hierarchyMeaning", "code", enum=CODE_SYSTEM_HIERARCHY_MEANING),
        element("compositional", "boolean"),
        element("versionNeeded", "boolean"),
        element("content", "code", "1..1", enum=CODE_SYSTEM_CONTENT_MODE),
        element("supplements", "canonical"),
        element("count", "unsignedInt"),
        backbone(
            "filter", "0..*",
            element("code", "code", "1..1"),
            element("description", "string"),
            element("operator", "code", "1..*", enum=FILTER_OPERATOR),
            element("value", "string", "1..1"),
        ),
        backbone(
            "property", "0..*",
            element("code", "code", "1..1"),
            element("uri", "uri"),
            element("description", "string"),
            element("type", "code", "1..1", enum=CONCEPT_PROPERTY_TYPE),
        ),
        backbone(
            "concept", "0..*",
            element("code", "code", "1..1"),
            element("display", "string"),
            element("definition", "string"),
            backbone(
                "designation", "0..*",
                element("language", "code"),
                element("use", "Coding"),
                element("value", "string", "1..1"),
            ),
            backbone(
                "property", "0..*",
                element("code", "code", "1..1"),
                choice(
                    "value",
                    ["code", "Coding", "string", "integer", "boolean",
                     "dateTime", "decimal"],
                    "1..1",
                ),
            ),
            element("concept", "#CodeSystem.concept", "0..*"),
        ),
    ),
    resource(
        "ValueSet",
        *canonical(),
        element("immutable", "boolean"),
        backbone(
            "compose", "0..1",
            element("lockedDate", "date"),
            element("inactive", "boolean"),
            backbone(
                "include", "1..*",
                element("system", "uri"),
                element("version", "string"),
                backbone(
                    "concept", "0..*",
                    element("code", "code", "1..1"),
                    element("display", "string"),
                    backbone(
                        "designation", "0..*",
                        element("language", "code"),
                        element("use", "Coding"),
                        element("value", "string", "1..1"),
                    ),
                ),
                backbone(
                    "filter", "0..*",
                    element("property", "code", "1..1"),
                    element("op", "code", "1..1", enum=FILTER_OPERATOR),
                    element("value", "string", "1..1"),
                ),
                element("valueSet", "canonical", "0..*"),
            ),
            element("exclude", "#ValueSet.compose.include", "0..*"),
        ),
        backbone(
            "expansion", "0..1",
            element("identifier", "uri"),
            element("timestamp", "dateTime", "1..1"),
            element("total", "integer"),
            element("offset", "integer"),
            backbone(
                "parameter", "0..*",
                element("name", "string", "1..1"),
                choice(
                    "value",
                    ["string", "boolean", "integer", "decimal", "uri", "code",
                     "dateTime"],
                ),
            ),
            backbone(
                "contains", "0..*",
                element("system", "uri"),
                element("abstract", "boolean"),
                element("inactive", "boolean"),
                element("version", "string"),
                element("code", "code"),
                element("display", "string"),
                element("designation", "#ValueSet.compose.include.concept.designation",
                        "0..*"),
                element("contains", "#ValueSet.expansion.contains", "0..*"),
            ),
        ),
    ),
    resource(
        "ConceptMap",
        *canonical(cards={"identifier": "0..1"}),
        choice("source", ["uri", "canonical"]),
        choice("target", ["uri", "canonical"]),
        backbone(
            "group", "0..*",
            element("source", "uri"),
            element("sourceVersion", "string"),
            element("target", "uri"),
            element("targetVersion", "string"),
            backbone(
                "element", "1..*",
                element("code", "code"),
                element("display", "string"),
                backbone(
                    "target", "0..*",
                    element("code", "code"),
                    element("display", "string"),
                    element("equivalence", "code", "1..1",
                            enum=CONCEPT_MAP_EQUIVALENCE),
                    element("comment", "string"),
                    backbone(
                        "dependsOn", "0..*",
                        element("property", "uri", "1..1"),
                        element("system", "canonical"),
                        element("value", "string", "1..1"),
                        element("display", "string"),
                    ),
                    element("product", "#ConceptMap.group.element.target.dependsOn",
                            "0..*"),
                ),
            ),
            backbone(
                "unmapped", "0..1",
                element("mode", "code", "1..1", enum=CONCEPT_MAP_UNMAPPED_MODE),
                element("code", "code"),
                element("display", "string"),
                element("url", "canonical"),
            ),
        ),
    ),
]
