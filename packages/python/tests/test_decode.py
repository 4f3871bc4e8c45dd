"""Tests for the decoder: error kinds, structural paths and lenient mode."""

import json
from decimal import Decimal

import pytest

from fhir_codec import (
    LENIENT_OPTIONS,
    AmbiguousChoiceError,
    CardinalityViolationError,
    ErrorKind,
    FHIRCodecError,
    MalformedJSONError,
    MissingRequiredFieldError,
    OpaqueResource,
    RecursionTooDeepError,
    UnknownFieldError,
    UnknownResourceTypeError,
    WrongTypeError,
    decode,
    from_json,
    parse_resource,
    serialize_resource,
)
from fhir_codec.resources import Observation, Patient


def _parse(doc, **kwargs):
    return parse_resource(json.dumps(doc), **kwargs)


def _observation(**members):
    doc = {"resourceType": "Observation", "status": "final", "code": {"text": "x"}}
    doc.update(members)
    return doc


# ═══════════════════════════════════════════════════════════════════
# Input forms
# ═══════════════════════════════════════════════════════════════════


class TestInputForms:
    def test_bytes(self):
        assert parse_resource(b'{"resourceType":"Patient","id":"a"}').id == "a"

    def test_str(self):
        assert parse_resource('{"resourceType":"Patient","id":"a"}').id == "a"

    def test_dict(self):
        assert parse_resource({"resourceType": "Patient", "id": "a"}).id == "a"

    def test_utf8_bom_accepted(self):
        data = b'\xef\xbb\xbf{"resourceType":"Patient","id":"a"}'
        assert parse_resource(data).id == "a"

    def test_unsupported_input_type(self):
        with pytest.raises(TypeError):
            parse_resource(42)


# ═══════════════════════════════════════════════════════════════════
# Discriminator
# ═══════════════════════════════════════════════════════════════════


class TestResourceType:
    def test_missing_resource_type(self):
        with pytest.raises(MissingRequiredFieldError) as exc_info:
            parse_resource('{"id":"a"}')
        assert exc_info.value.path == "resourceType"

    def test_unknown_resource_type(self):
        with pytest.raises(UnknownResourceTypeError) as exc_info:
            parse_resource('{"resourceType":"Spaceship"}')
        assert exc_info.value.name == "Spaceship"
        assert exc_info.value.kind is ErrorKind.UNKNOWN_RESOURCE_TYPE

    def test_non_string_resource_type(self):
        with pytest.raises(WrongTypeError):
            parse_resource('{"resourceType":7}')

    def test_top_level_not_object(self):
        with pytest.raises(WrongTypeError) as exc_info:
            parse_resource("[1, 2]")
        assert exc_info.value.actual == "array"

    def test_expected_type_matches(self):
        patient = parse_resource('{"resourceType":"Patient"}', resource_type="Patient")
        assert isinstance(patient, Patient)

    def test_expected_type_mismatch(self):
        with pytest.raises(WrongTypeError) as exc_info:
            parse_resource('{"resourceType":"Patient"}', resource_type="Observation")
        assert exc_info.value.path == "Observation.resourceType"

    def test_expected_type_without_discriminator(self):
        patient = parse_resource('{"id":"a"}', resource_type="Patient")
        assert patient.id == "a"

    def test_expected_type_unknown(self):
        with pytest.raises(UnknownResourceTypeError):
            parse_resource('{"resourceType":"Patient"}', resource_type="Spaceship")

    def test_unknown_embedded_type_path(self):
        doc = {
            "resourceType": "Bundle",
            "type": "collection",
            "entry": [{"resource": {"resourceType": "Spaceship"}}],
        }
        with pytest.raises(UnknownResourceTypeError) as exc_info:
            _parse(doc)
        assert exc_info.value.path == "Bundle.entry[0].resource"


# ═══════════════════════════════════════════════════════════════════
# Structural errors and their paths
# ═══════════════════════════════════════════════════════════════════


class TestStructuralErrors:
    def test_unknown_field(self):
        with pytest.raises(UnknownFieldError) as exc_info:
            _parse({"resourceType": "Patient", "nickname": "JD"})
        assert exc_info.value.path == "Patient.nickname"

    def test_unknown_field_in_datatype(self):
        doc = {"resourceType": "Patient", "name": [{"family": "Doe", "middle": "Q"}]}
        with pytest.raises(UnknownFieldError) as exc_info:
            _parse(doc)
        assert exc_info.value.path == "Patient.name[0].middle"

    def test_missing_required(self):
        with pytest.raises(MissingRequiredFieldError) as exc_info:
            _parse({"resourceType": "Observation", "status": "final"})
        assert exc_info.value.path == "Observation.code"

    def test_missing_required_choice(self):
        doc = {"resourceType": "MessageHeader", "source": {"endpoint": "http://a"}}
        with pytest.raises(MissingRequiredFieldError) as exc_info:
            _parse(doc)
        assert exc_info.value.path == "MessageHeader.event[x]"

    def test_required_satisfied_by_sibling_only(self):
        doc = _observation()
        del doc["status"]
        doc["_status"] = {"extension": [{"url": "http://x", "valueString": "?"}]}
        obs = _parse(doc)
        assert obs.status is None
        assert json.loads(serialize_resource(obs)) == doc

    def test_wrong_primitive_type(self):
        with pytest.raises(WrongTypeError) as exc_info:
            _parse({"resourceType": "Patient", "active": "yes"})
        err = exc_info.value
        assert err.path == "Patient.active"
        assert err.expected == "boolean"
        assert err.actual == "string"

    def test_lexical_mismatch(self):
        with pytest.raises(WrongTypeError) as exc_info:
            _parse({"resourceType": "Patient", "birthDate": "12/01/1970"})
        assert exc_info.value.expected == "date"

    def test_object_where_list_expected(self):
        doc = {"resourceType": "Patient", "name": {"family": "Doe"}}
        with pytest.raises(WrongTypeError) as exc_info:
            _parse(doc)
        assert exc_info.value.path == "Patient.name"
        assert exc_info.value.actual == "object"

    def test_list_where_single_expected(self):
        with pytest.raises(WrongTypeError) as exc_info:
            _parse({"resourceType": "Patient", "gender": ["male"]})
        assert exc_info.value.actual == "array"

    def test_null_value_rejected(self):
        with pytest.raises(WrongTypeError) as exc_info:
            _parse({"resourceType": "Patient", "gender": None})
        assert exc_info.value.actual == "null"

    def test_nested_path(self):
        doc = {
            "resourceType": "Bundle",
            "type": "collection",
            "entry": [
                {"resource": {"resourceType": "Patient"}},
                {"resource": _observation(valueQuantity={"value": "high"})},
            ],
        }
        with pytest.raises(WrongTypeError) as exc_info:
            _parse(doc)
        assert exc_info.value.path == "Bundle.entry[1].resource.valueQuantity.value"

    def test_ambiguous_choice(self):
        doc = _observation(valueString="a", valueBoolean=True)
        with pytest.raises(AmbiguousChoiceError) as exc_info:
            _parse(doc)
        assert exc_info.value.path == "Observation.value[x]"
        assert exc_info.value.variants == ["valueString", "valueBoolean"]

    def test_choice_prefix_is_not_a_variant(self):
        with pytest.raises(UnknownFieldError):
            _parse(_observation(valueSimpleQuantity={"value": 1}))

    def test_empty_required_list(self):
        doc = {"resourceType": "OperationOutcome", "issue": []}
        with pytest.raises(CardinalityViolationError) as exc_info:
            _parse(doc)
        err = exc_info.value
        assert err.path == "OperationOutcome.issue"
        assert err.actual_count == 0
        assert err.detail == "required non-empty list empty"

    def test_empty_optional_list_dropped(self):
        patient = _parse({"resourceType": "Patient", "name": []})
        assert "name" not in patient

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            _parse({"resourceType": "Patient", "active": 1})


# ═══════════════════════════════════════════════════════════════════
# Shape-level exactly-one-of
# ═══════════════════════════════════════════════════════════════════


class TestOneOf:
    def test_extension_needs_value_or_children(self):
        doc = {"resourceType": "Patient", "extension": [{"url": "http://x"}]}
        with pytest.raises(MissingRequiredFieldError) as exc_info:
            _parse(doc)
        assert exc_info.value.path == "Patient.extension[0]"

    def test_extension_value_and_children(self):
        doc = {
            "resourceType": "Patient",
            "extension": [{
                "url": "http://x",
                "valueString": "a",
                "extension": [{"url": "http://y", "valueInteger": 1}],
            }],
        }
        with pytest.raises(AmbiguousChoiceError):
            _parse(doc)

    def test_nested_extensions(self):
        doc = {
            "resourceType": "Patient",
            "extension": [{
                "url": "http://x",
                "extension": [{"url": "http://y", "valueInteger": 1}],
            }],
        }
        patient = _parse(doc)
        assert patient.extension[0].extension[0].valueInteger == 1

    def test_parameters_part_recursion(self):
        doc = {
            "resourceType": "Parameters",
            "parameter": [{
                "name": "outer",
                "part": [{"name": "inner", "valueBoolean": True}],
            }],
        }
        params = _parse(doc)
        assert params.parameter[0].part[0].valueBoolean is True

    def test_parameters_resource(self):
        doc = {
            "resourceType": "Parameters",
            "parameter": [{"name": "p", "resource": {"resourceType": "Patient"}}],
        }
        params = _parse(doc)
        assert params.parameter[0].resource.resource_type == "Patient"


# ═══════════════════════════════════════════════════════════════════
# Primitive lists with sibling arrays
# ═══════════════════════════════════════════════════════════════════


class TestPrimitiveLists:
    def test_aligned_sibling_list(self):
        doc = {
            "resourceType": "Patient",
            "name": [{
                "given": ["Jane", None],
                "_given": [None, {"extension": [{"url": "http://x", "valueString": "B"}]}],
            }],
        }
        patient = _parse(doc)
        name = patient.name[0]
        assert name.given == ["Jane", None]
        assert name["_given"][0] is None
        assert json.loads(serialize_resource(patient)) == doc

    def test_null_without_sibling(self):
        doc = {"resourceType": "Patient", "name": [{"given": ["Jane", None]}]}
        with pytest.raises(WrongTypeError) as exc_info:
            _parse(doc)
        assert exc_info.value.path == "Patient.name[0].given[1]"

    def test_misaligned_sibling(self):
        doc = {
            "resourceType": "Patient",
            "name": [{"given": ["A", "B"], "_given": [None]}],
        }
        with pytest.raises(CardinalityViolationError) as exc_info:
            _parse(doc)
        assert exc_info.value.path == "Patient.name[0]._given"

    def test_null_hole_in_sibling_only_list(self):
        doc = {"resourceType": "Patient", "name": [{"_given": [None]}]}
        with pytest.raises(WrongTypeError) as exc_info:
            _parse(doc)
        assert exc_info.value.path == "Patient.name[0]._given[0]"

    def test_sibling_only_list(self):
        doc = {"resourceType": "Patient", "name": [{"_given": [{"id": "g"}]}]}
        assert _parse(doc).name[0]["_given"][0].id == "g"


# ═══════════════════════════════════════════════════════════════════
# JSON syntax
# ═══════════════════════════════════════════════════════════════════


class TestMalformedJSON:
    def test_syntax_error_offset(self):
        with pytest.raises(MalformedJSONError) as exc_info:
            parse_resource('{"resourceType": "Patient",}')
        assert exc_info.value.offset is not None

    def test_duplicate_keys(self):
        with pytest.raises(MalformedJSONError) as exc_info:
            parse_resource('{"resourceType":"Patient","id":"a","id":"b"}')
        assert "duplicate" in exc_info.value.reason

    def test_nan_rejected(self):
        text = '{"resourceType":"Observation","status":"final","code":{},"valueDecimal":NaN}'
        with pytest.raises(MalformedJSONError):
            parse_resource(text)

    def test_invalid_utf8(self):
        with pytest.raises(MalformedJSONError):
            parse_resource(b'{"resourceType":"Patient","id":"\xff"}')

    def test_empty_input(self):
        with pytest.raises(MalformedJSONError):
            parse_resource(b"")


# ═══════════════════════════════════════════════════════════════════
# Depth
# ═══════════════════════════════════════════════════════════════════


class TestDepth:
    def test_deep_extension_nesting(self):
        ext = {"url": "http://leaf", "valueString": "x"}
        for _ in range(80):
            ext = {"url": "http://x", "extension": [ext]}
        doc = {"resourceType": "Patient", "extension": [ext]}
        with pytest.raises(RecursionTooDeepError) as exc_info:
            _parse(doc)
        assert exc_info.value.limit == 64

    def test_adversarial_json_nesting(self):
        text = '{"resourceType":"Patient","extension":' + "[" * 100000 + "]" * 100000 + "}"
        with pytest.raises((RecursionTooDeepError, WrongTypeError)):
            parse_resource(text)

    def test_contained_bundle_chain(self):
        doc = {"resourceType": "Bundle", "type": "collection"}
        for _ in range(70):
            doc = {"resourceType": "Bundle", "type": "collection",
                   "entry": [{"resource": doc}]}
        with pytest.raises(RecursionTooDeepError):
            _parse(doc)


# ═══════════════════════════════════════════════════════════════════
# Decimals
# ═══════════════════════════════════════════════════════════════════


class TestDecimals:
    def test_precision_preserved(self):
        text = '{"resourceType":"Observation","status":"final","code":{},"valueQuantity":{"value":1.50}}'
        obs = parse_resource(text)
        assert obs.valueQuantity.value == Decimal("1.50")
        assert b'"value":1.50' in serialize_resource(obs)

    def test_float_mode(self):
        text = '{"resourceType":"Observation","status":"final","code":{},"valueQuantity":{"value":1.50}}'
        obs = parse_resource(text, preserve_decimal_precision=False)
        assert isinstance(obs.valueQuantity.value, float)
        assert obs.valueQuantity.value == 1.5

    def test_integer_literal_accepted_as_decimal(self):
        obs = _parse(_observation(valueQuantity={"value": 3}))
        assert obs.valueQuantity.value == Decimal(3)

    def test_large_precision(self):
        text = '{"resourceType":"Observation","status":"final","code":{},"valueDecimal":3.14159265358979323846}'
        out = serialize_resource(parse_resource(text))
        assert b"3.14159265358979323846" in out

    def test_integer_out_of_range(self):
        with pytest.raises(WrongTypeError):
            _parse(_observation(valueInteger=2 ** 31))

    def test_unsigned_int_negative(self):
        doc = {"resourceType": "Patient", "multipleBirthInteger": 0}
        assert _parse(doc).multipleBirthInteger == 0
        bundle = {"resourceType": "Bundle", "type": "searchset", "total": -1}
        with pytest.raises(WrongTypeError):
            _parse(bundle)


# ═══════════════════════════════════════════════════════════════════
# Lenient mode
# ═══════════════════════════════════════════════════════════════════


class TestLenientMode:
    def test_unknown_fields_dropped_with_warning(self):
        result = decode(
            '{"resourceType":"Patient","nickname":"JD","id":"a"}',
            strict_unknown_fields=False,
        )
        assert result.node.id == "a"
        assert "nickname" not in result.node
        assert result.warnings[0].kind == "unknown-field"
        assert result.warnings[0].path == "Patient.nickname"

    def test_unknown_resource_kept_opaque(self):
        doc = {
            "resourceType": "Bundle",
            "type": "collection",
            "entry": [{"resource": {"resourceType": "Spaceship", "warp": 9.5}}],
        }
        result = decode(json.dumps(doc), options=LENIENT_OPTIONS)
        ship = result.node.entry[0].resource
        assert isinstance(ship, OpaqueResource)
        assert ship.resource_type == "Spaceship"
        assert ship["warp"] == Decimal("9.5")
        assert json.loads(serialize_resource(result.node)) == doc

    def test_other_kinds_stay_fatal(self):
        with pytest.raises(MissingRequiredFieldError):
            decode('{"resourceType":"Observation"}', options=LENIENT_OPTIONS)

    def test_warnings_logged(self, caplog):
        with caplog.at_level("WARNING", logger="fhir_codec"):
            decode('{"resourceType":"Patient","gender":"x"}', strict_enumerations=False)
        assert "invalid-enumeration" in caplog.text

    def test_unknown_option_rejected(self):
        with pytest.raises(TypeError):
            decode('{"resourceType":"Patient"}', strict_everything=False)


# ═══════════════════════════════════════════════════════════════════
# Contained resources
# ═══════════════════════════════════════════════════════════════════


class TestContained:
    def test_contained_decoded(self):
        doc = {
            "resourceType": "Observation",
            "status": "final",
            "code": {"text": "x"},
            "contained": [{"resourceType": "Patient", "id": "p"}],
            "subject": {"reference": "#p"},
        }
        obs = _parse(doc)
        assert obs.contained[0].resource_type == "Patient"

    def test_duplicate_contained_ids_warn(self):
        doc = _observation(contained=[
            {"resourceType": "Patient", "id": "p"},
            {"resourceType": "Patient", "id": "p"},
        ])
        result = decode(json.dumps(doc))
        assert [w.kind for w in result.warnings] == ["duplicate-id"]
        assert result.warnings[0].path == "Observation.contained[1].id"


# ═══════════════════════════════════════════════════════════════════
# Element decoding
# ═══════════════════════════════════════════════════════════════════


class TestFromJson:
    def test_datatype_root(self):
        name = from_json({"family": "Doe"}, "HumanName")
        assert name.family == "Doe"

    def test_node_class_as_expected(self):
        obs = from_json(_observation(), Observation)
        assert isinstance(obs, Observation)

    def test_datatype_root_path(self):
        with pytest.raises(UnknownFieldError) as exc_info:
            from_json({"nope": 1}, "HumanName")
        assert exc_info.value.path == "HumanName.nope"
