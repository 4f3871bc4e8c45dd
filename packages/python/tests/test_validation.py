"""Tests for the collecting validator and the FHIRCodec facade."""

import json

import pytest

from fhir_codec import (
    LENIENT_OPTIONS,
    CodecOptions,
    ErrorKind,
    FHIRCodec,
    InvalidEnumerationError,
    ShapeRegistry,
    serialize_resource,
    validate_resource,
)
from fhir_codec.catalog import element, resource


class TestValidateResource:
    def test_valid(self):
        result = validate_resource('{"resourceType":"Patient","gender":"male"}')
        assert result.valid
        assert result.errors == []
        assert result.warnings == []

    def test_collects_every_error(self):
        result = validate_resource(
            '{"resourceType":"Patient","gender":"martian","active":"yes","foo":1}'
        )
        assert not result.valid
        assert [(e.kind, e.path) for e in result.errors] == [
            (ErrorKind.INVALID_ENUMERATION, "Patient.gender"),
            (ErrorKind.WRONG_TYPE, "Patient.active"),
            (ErrorKind.UNKNOWN_FIELD, "Patient.foo"),
        ]

    def test_missing_required_members(self):
        result = validate_resource('{"resourceType":"Observation"}')
        assert [e.path for e in result.errors] == [
            "Observation.status",
            "Observation.code",
        ]

    def test_errors_in_nested_entries(self):
        result = validate_resource({
            "resourceType": "Bundle",
            "type": "collection",
            "entry": [
                {"resource": {"resourceType": "Patient", "gender": "x"}},
                {"resource": {"resourceType": "Patient", "birthDate": 1990}},
            ],
        })
        assert [e.path for e in result.errors] == [
            "Bundle.entry[0].resource.gender",
            "Bundle.entry[1].resource.birthDate",
        ]

    def test_malformed_json_is_reported(self):
        result = validate_resource('{"resourceType":')
        assert not result.valid
        assert result.errors[0].kind is ErrorKind.MALFORMED_JSON

    def test_unknown_resource_type_is_reported(self):
        result = validate_resource('{"resourceType":"Spaceship"}')
        assert result.errors[0].kind is ErrorKind.UNKNOWN_RESOURCE_TYPE

    def test_expected_type_mismatch(self):
        result = validate_resource(
            '{"resourceType":"Patient"}', resource_type="Observation",
        )
        assert result.errors[0].path == "Observation.resourceType"

    def test_lenient_findings_are_warnings(self):
        result = validate_resource(
            '{"resourceType":"Patient","gender":"martian","foo":1}',
            options=LENIENT_OPTIONS,
        )
        assert result.valid
        assert [w.kind for w in result.warnings] == [
            "invalid-enumeration", "unknown-field",
        ]

    def test_depth_error_ends_walk(self):
        result = validate_resource(
            {
                "resourceType": "CodeSystem",
                "status": "active",
                "content": "complete",
                "concept": [{"code": "a", "concept": [
                    {"code": "b", "concept": [{"code": "c"}]},
                ]}],
            },
            max_recursion_depth=2,
        )
        assert result.errors[-1].kind is ErrorKind.RECURSION_TOO_DEEP


class TestOperationOutcome:
    def test_errors_become_issues(self):
        result = validate_resource(
            '{"resourceType":"Patient","gender":"martian","foo":1}'
        )
        outcome = result.to_operation_outcome()
        assert outcome.resource_type == "OperationOutcome"
        issues = outcome.issue
        assert [i.severity for i in issues] == ["error", "error"]
        assert [i.code for i in issues] == ["code-invalid", "structure"]
        assert issues[0].expression == ["Patient.gender"]

    def test_warnings_become_issues(self):
        result = validate_resource(
            '{"resourceType":"Patient","foo":1}', options=LENIENT_OPTIONS,
        )
        issues = result.to_operation_outcome().issue
        assert [(i.severity, i.code) for i in issues] == [("warning", "structure")]

    def test_clean_result(self):
        outcome = validate_resource('{"resourceType":"Patient"}').to_operation_outcome()
        assert [i.severity for i in outcome.issue] == ["information"]

    def test_outcome_serializes(self):
        result = validate_resource('{"resourceType":"Observation"}')
        data = json.loads(serialize_resource(result.to_operation_outcome()))
        assert data["resourceType"] == "OperationOutcome"
        assert data["issue"][0]["code"] == "required"
        assert data["issue"][0]["expression"] == ["Observation.status"]


class TestFHIRCodec:
    def test_overrides(self):
        codec = FHIRCodec(strict_enumerations=False)
        patient = codec.parse('{"resourceType":"Patient","gender":"martian"}')
        assert patient.gender == "martian"

    def test_options_object(self):
        codec = FHIRCodec(CodecOptions(strict_unknown_fields=False))
        patient = codec.parse('{"resourceType":"Patient","foo":1}')
        assert "foo" not in patient

    def test_options_plus_overrides(self):
        codec = FHIRCodec(LENIENT_OPTIONS, strict_enumerations=True)
        with pytest.raises(InvalidEnumerationError):
            codec.parse('{"resourceType":"Patient","gender":"martian"}')

    def test_unknown_option(self):
        with pytest.raises(TypeError):
            FHIRCodec(strict_everything=True)

    def test_expected_type(self):
        codec = FHIRCodec()
        assert codec.parse('{"active":true}', "Patient").active is True

    def test_serialize(self):
        codec = FHIRCodec()
        patient = codec.parse('{"resourceType":"Patient","id":"a"}')
        assert codec.serialize(patient) == b'{"resourceType":"Patient","id":"a"}'

    def test_decode_returns_warnings(self):
        codec = FHIRCodec(LENIENT_OPTIONS)
        result = codec.decode('{"resourceType":"Patient","foo":1}')
        assert result.node.resource_type == "Patient"
        assert result.warnings[0].path == "Patient.foo"

    def test_validate(self):
        assert not FHIRCodec().validate('{"resourceType":"Observation"}').valid

    def test_json_values(self):
        codec = FHIRCodec()
        quantity = codec.from_json({"value": 1.5, "unit": "mg"}, "Quantity")
        assert codec.to_json(quantity) == {"value": quantity.value, "unit": "mg"}

    def test_ndjson(self):
        codec = FHIRCodec()
        ids = [r.id for r in codec.iter_ndjson('{"resourceType":"Patient","id":"x"}\n')]
        assert ids == ["x"]

    def test_custom_registry(self):
        registry = ShapeRegistry.from_catalog()
        registry.register("Widget", resource("Widget", element("size", "integer")))
        codec = FHIRCodec(registry=registry)
        widget = codec.parse('{"resourceType":"Widget","size":2}')
        assert codec.serialize(widget) == b'{"resourceType":"Widget","size":2}'
