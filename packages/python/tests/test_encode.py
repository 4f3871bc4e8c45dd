"""Tests for the encoder: emission rules, determinism and encode-time errors."""

import json
from decimal import Decimal

import pytest

from fhir_codec import (
    AmbiguousChoiceError,
    CardinalityViolationError,
    InvalidEnumerationError,
    MissingRequiredFieldError,
    RecursionTooDeepError,
    UnknownFieldError,
    WrongTypeError,
    encode,
    parse_resource,
    serialize_resource,
    to_json,
)
from fhir_codec.datatypes import (
    BundleEntry,
    CodeableConcept,
    Coding,
    CodeSystemConcept,
    HumanName,
    Quantity,
)
from fhir_codec.resources import Bundle, CodeSystem, Observation, Patient


def _observation(**members):
    return Observation(status="final", code=CodeableConcept(text="x"), **members)


class TestEmission:
    def test_resource_type_present(self):
        out = json.loads(serialize_resource(Patient(id="a")))
        assert out == {"resourceType": "Patient", "id": "a"}

    def test_shape_order(self):
        patient = Patient(gender="female", id="a", active=True)
        out = serialize_resource(patient)
        assert out == b'{"resourceType":"Patient","id":"a","active":true,"gender":"female"}'

    def test_empty_list_omitted(self):
        patient = Patient(id="a")
        patient["name"] = []
        assert json.loads(serialize_resource(patient)) == {
            "resourceType": "Patient", "id": "a",
        }

    def test_none_assignment_removes(self):
        patient = Patient(id="a", active=True)
        patient.active = None
        assert "active" not in json.loads(serialize_resource(patient))

    def test_embedded_resources_carry_type(self):
        bundle = Bundle(type="collection", entry=[
            BundleEntry(resource=Patient(id="p")),
            BundleEntry(resource=_observation(id="o")),
        ])
        out = json.loads(serialize_resource(bundle))
        assert [e["resource"]["resourceType"] for e in out["entry"]] == [
            "Patient", "Observation",
        ]

    def test_plain_dicts_adopted(self):
        patient = Patient(name=[{"family": "Doe"}])
        assert isinstance(patient.name[0], HumanName)
        bundle = Bundle(type="collection", entry=[{"resource": {"resourceType": "Patient"}}])
        assert isinstance(bundle.entry[0].resource, Patient)

    def test_indent(self):
        out = serialize_resource(Patient(id="a"), indent=2)
        assert out == b'{\n  "resourceType": "Patient",\n  "id": "a"\n}'

    def test_non_ascii_written_verbatim(self):
        out = serialize_resource(Patient(name=[HumanName(family="Müller")]))
        assert "Müller".encode("utf-8") in out

    def test_decimal_exact(self):
        obs = _observation(valueQuantity=Quantity(value=Decimal("0.10")))
        assert b'"value":0.10' in serialize_resource(obs)

    def test_float_value_written(self):
        obs = _observation(valueQuantity=Quantity(value=2.5))
        assert json.loads(serialize_resource(obs))["valueQuantity"]["value"] == 2.5

    def test_encode_datatype(self):
        coding = Coding(system="http://loinc.org", code="1234-5")
        assert encode(coding) == b'{"system":"http://loinc.org","code":"1234-5"}'

    def test_to_json_returns_values(self):
        obs = _observation(valueQuantity=Quantity(value=Decimal("1.0")))
        out = to_json(obs)
        assert out["valueQuantity"]["value"] == Decimal("1.0")

    @pytest.mark.parametrize("value,text", [
        (Decimal("0.00000001"), b"0.00000001"),
        (Decimal("1E-10"), b"0.0000000001"),
        (Decimal("1.5E+3"), b"1500"),
        (Decimal("-0.000000500"), b"-0.000000500"),
    ])
    def test_decimal_positional(self, value, text):
        obs = _observation(valueQuantity=Quantity(value=value))
        assert b'"value":' + text + b"}" in serialize_resource(obs)

    def test_small_decimal_round_trip(self):
        doc = (
            '{"resourceType":"Observation","status":"final","code":{"text":"x"},'
            '"valueQuantity":{"value":0.00000001}}'
        )
        assert serialize_resource(parse_resource(doc)) == doc.encode("utf-8")


class TestDeterminism:
    def test_same_tree_same_bytes(self):
        patient = Patient(
            id="a",
            name=[HumanName(given=["A", "B"], family="C")],
            birthDate="1970-01-01",
        )
        assert serialize_resource(patient) == serialize_resource(patient)

    def test_assignment_order_irrelevant(self):
        first = Patient(id="a", gender="male", active=False)
        second = Patient(active=False, gender="male", id="a")
        assert serialize_resource(first) == serialize_resource(second)

    def test_idempotent_emission(self):
        text = (
            '{"resourceType":"Patient","gender":"male","id":"x",'
            '"name":[{"given":["A"],"family":"B"}]}'
        )
        once = serialize_resource(parse_resource(text))
        twice = serialize_resource(parse_resource(once))
        assert once == twice


class TestEncodeErrors:
    def test_two_variants(self):
        obs = _observation(valueString="a", valueBoolean=True)
        with pytest.raises(AmbiguousChoiceError) as exc_info:
            serialize_resource(obs)
        assert exc_info.value.path == "Observation.value[x]"

    def test_missing_required(self):
        with pytest.raises(MissingRequiredFieldError) as exc_info:
            serialize_resource(Observation(status="final"))
        assert exc_info.value.path == "Observation.code"

    def test_required_list_empty(self):
        from fhir_codec.resources import OperationOutcome

        outcome = OperationOutcome()
        outcome["issue"] = []
        with pytest.raises(CardinalityViolationError):
            serialize_resource(outcome)

    def test_invalid_code(self):
        with pytest.raises(InvalidEnumerationError) as exc_info:
            serialize_resource(Patient(gender="martian"))
        assert exc_info.value.path == "Patient.gender"

    def test_invalid_code_lenient(self):
        out = serialize_resource(Patient(gender="martian"), strict_enumerations=False)
        assert b'"gender":"martian"' in out

    def test_wrong_primitive(self):
        with pytest.raises(WrongTypeError) as exc_info:
            serialize_resource(Patient(active="yes"))
        assert exc_info.value.path == "Patient.active"

    def test_wrong_node_class(self):
        patient = Patient()
        patient["name"] = [Coding(code="x")]
        with pytest.raises(WrongTypeError) as exc_info:
            serialize_resource(patient)
        assert exc_info.value.path == "Patient.name[0]"
        assert exc_info.value.actual == "Coding"

    def test_single_value_for_list(self):
        patient = Patient()
        patient["name"] = HumanName(family="Doe")
        with pytest.raises(WrongTypeError):
            serialize_resource(patient)

    def test_nested_error_path(self):
        bundle = Bundle(type="collection", entry=[
            BundleEntry(resource=Patient()),
            BundleEntry(resource=Observation(status="final")),
        ])
        with pytest.raises(MissingRequiredFieldError) as exc_info:
            serialize_resource(bundle)
        assert exc_info.value.path == "Bundle.entry[1].resource.code"

    def test_non_resource_rejected(self):
        with pytest.raises(TypeError):
            serialize_resource(HumanName(family="Doe"))

    def test_unknown_key_rejected_on_assignment(self):
        patient = Patient()
        with pytest.raises(KeyError):
            patient["nickname"] = "JD"
        with pytest.raises(AttributeError):
            patient.nickname = "JD"

    def test_unknown_key_smuggled_in(self):
        patient = Patient()
        patient._store("nickname", "JD")
        with pytest.raises(UnknownFieldError) as exc_info:
            serialize_resource(patient)
        assert exc_info.value.path == "Patient.nickname"

    def test_no_partial_output_on_error(self):
        bundle = Bundle(type="collection", entry=[
            BundleEntry(resource=Patient(id="ok")),
            BundleEntry(resource=Patient(gender="martian")),
        ])
        with pytest.raises(InvalidEnumerationError):
            serialize_resource(bundle)


class TestCycles:
    def test_self_containing_node(self):
        concept = CodeSystemConcept(code="a")
        concept["concept"] = [concept]
        cs = CodeSystem(status="active", content="complete", concept=[concept])
        with pytest.raises(RecursionTooDeepError) as exc_info:
            serialize_resource(cs)
        assert "cycle" in exc_info.value.detail

    def test_depth_limit_on_encode(self):
        leaf = CodeSystemConcept(code="c")
        mid = CodeSystemConcept(code="b", concept=[leaf])
        top = CodeSystemConcept(code="a", concept=[mid])
        cs = CodeSystem(status="active", content="complete", concept=[top])
        serialize_resource(cs)
        with pytest.raises(RecursionTooDeepError):
            serialize_resource(cs, max_recursion_depth=2)


# ═══════════════════════════════════════════════════════════════════
# Primitive lists with sibling arrays
# ═══════════════════════════════════════════════════════════════════


class TestPrimitiveListAlignment:
    def test_sibling_list_longer_than_values(self):
        name = HumanName(given=["a"], _given=[{"id": "x"}, {"id": "y"}])
        with pytest.raises(CardinalityViolationError) as exc_info:
            serialize_resource(Patient(name=[name]))
        assert exc_info.value.path == "Patient.name[0]._given"
        assert exc_info.value.actual_count == 2

    def test_null_value_without_sibling(self):
        with pytest.raises(WrongTypeError) as exc_info:
            serialize_resource(Patient(name=[HumanName(given=[None])]))
        assert exc_info.value.path == "Patient.name[0].given[0]"
        assert exc_info.value.actual == "null"

    def test_null_value_and_null_sibling(self):
        name = HumanName(given=["a", None], _given=[None, None])
        with pytest.raises(WrongTypeError) as exc_info:
            serialize_resource(Patient(name=[name]))
        assert exc_info.value.path == "Patient.name[0].given[1]"

    def test_null_hole_in_sibling_only_list(self):
        with pytest.raises(WrongTypeError) as exc_info:
            serialize_resource(Patient(name=[HumanName(_given=[None])]))
        assert exc_info.value.path == "Patient.name[0]._given[0]"

    def test_aligned_lists_round_trip(self):
        name = HumanName(given=[None, "b"], _given=[{"id": "x"}, None])
        out = serialize_resource(Patient(name=[name]))
        assert out == (
            b'{"resourceType":"Patient","name":[{"given":[null,"b"],'
            b'"_given":[{"id":"x"},null]}]}'
        )
        assert serialize_resource(parse_resource(out)) == out

    def test_sibling_only_list_round_trip(self):
        out = serialize_resource(Patient(name=[HumanName(_given=[{"id": "x"}])]))
        assert out == b'{"resourceType":"Patient","name":[{"_given":[{"id":"x"}]}]}'
        assert serialize_resource(parse_resource(out)) == out
