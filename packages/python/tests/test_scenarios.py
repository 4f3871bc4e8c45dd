"""End-to-end decode/encode scenarios.

Each test drives literal FHIR JSON through ``parse_resource`` and
``serialize_resource`` and checks the decoded tree and the re-encoded
bytes.
"""

import json

import pytest

from fhir_codec import (
    AmbiguousChoiceError,
    InvalidEnumerationError,
    RecursionTooDeepError,
    parse_resource,
    resource_type_of,
    serialize_resource,
)
from fhir_codec.datatypes import HumanName


def _round_trip(text):
    return json.loads(serialize_resource(parse_resource(text)))


# ═══════════════════════════════════════════════════════════════════
# 1. Minimal Patient
# ═══════════════════════════════════════════════════════════════════


class TestMinimalPatient:
    TEXT = (
        '{"resourceType":"Patient","id":"p1","active":true,'
        '"name":[{"family":"Doe","given":["Jane"]}]}'
    )

    def test_decoded_fields(self):
        patient = parse_resource(self.TEXT)
        assert resource_type_of(patient) == "Patient"
        assert patient.id == "p1"
        assert patient.active is True
        assert patient.name == [HumanName(family="Doe", given=["Jane"])]

    def test_absent_optional_reads_none(self):
        patient = parse_resource(self.TEXT)
        assert patient.gender is None
        assert "gender" not in patient

    def test_reencode_matches_input(self):
        assert _round_trip(self.TEXT) == json.loads(self.TEXT)

    def test_resource_type_emitted_first(self):
        out = serialize_resource(parse_resource(self.TEXT))
        assert out.startswith(b'{"resourceType":"Patient"')


# ═══════════════════════════════════════════════════════════════════
# 2. Bundle with embedded resources
# ═══════════════════════════════════════════════════════════════════


class TestBundleEmbeddedResources:
    DOC = {
        "resourceType": "Bundle",
        "type": "searchset",
        "total": 2,
        "entry": [
            {"resource": {"resourceType": "Patient", "id": "p1"}},
            {
                "resource": {
                    "resourceType": "Observation",
                    "id": "o1",
                    "status": "final",
                    "code": {"text": "glucose"},
                },
            },
        ],
    }

    def test_entry_shapes(self):
        bundle = parse_resource(json.dumps(self.DOC))
        assert bundle.type == "searchset"
        assert bundle.total == 2
        assert resource_type_of(bundle.entry[0].resource) == "Patient"
        assert resource_type_of(bundle.entry[1].resource) == "Observation"
        assert bundle.entry[1].resource.code.text == "glucose"

    def test_reencode_keeps_discriminators(self):
        out = _round_trip(json.dumps(self.DOC))
        assert out == self.DOC
        kinds = [e["resource"]["resourceType"] for e in out["entry"]]
        assert kinds == ["Patient", "Observation"]


# ═══════════════════════════════════════════════════════════════════
# 3. Observation value[x]
# ═══════════════════════════════════════════════════════════════════


class TestObservationChoice:
    TEXT = json.dumps({
        "resourceType": "Observation",
        "status": "final",
        "code": {"text": "glucose"},
        "valueQuantity": {"value": 5.4, "unit": "mg/dL"},
    })

    def test_decode_quantity_variant(self):
        obs = parse_resource(self.TEXT)
        type_name, value = obs.choice("value")
        assert type_name == "Quantity"
        assert str(value.value) == "5.4"
        assert value.unit == "mg/dL"

    def test_second_variant_fails_encode(self):
        obs = parse_resource(self.TEXT)
        obs["valueString"] = "high"
        with pytest.raises(AmbiguousChoiceError) as exc_info:
            serialize_resource(obs)
        assert exc_info.value.path == "Observation.value[x]"
        assert sorted(exc_info.value.variants) == ["valueQuantity", "valueString"]

    def test_set_choice_replaces_variant(self):
        obs = parse_resource(self.TEXT)
        obs.set_choice("value", "string", "high")
        out = json.loads(serialize_resource(obs))
        assert out["valueString"] == "high"
        assert "valueQuantity" not in out


# ═══════════════════════════════════════════════════════════════════
# 4. CodeSystem recursion
# ═══════════════════════════════════════════════════════════════════


def _concept(code, *children):
    concept = {"code": code}
    if children:
        concept["concept"] = list(children)
    return concept


class TestCodeSystemRecursion:
    TEXT = json.dumps({
        "resourceType": "CodeSystem",
        "status": "active",
        "content": "complete",
        "concept": [_concept("a", _concept("b", _concept("c")))],
    })

    def test_three_levels_decode(self):
        cs = parse_resource(self.TEXT)
        leaf = cs.concept[0].concept[0].concept[0]
        assert leaf.code == "c"
        assert leaf.concept is None

    def test_depth_limit(self):
        with pytest.raises(RecursionTooDeepError) as exc_info:
            parse_resource(self.TEXT, max_recursion_depth=2)
        assert exc_info.value.limit == 2
        assert exc_info.value.path == "CodeSystem.concept[0].concept[0].concept[0]"

    def test_limit_equal_to_depth_passes(self):
        cs = parse_resource(self.TEXT, max_recursion_depth=3)
        assert cs.concept[0].concept[0].concept[0].code == "c"


# ═══════════════════════════════════════════════════════════════════
# 5. Unknown code
# ═══════════════════════════════════════════════════════════════════


class TestUnknownCode:
    TEXT = '{"resourceType":"Patient","gender":"martian"}'

    def test_strict_rejects(self):
        with pytest.raises(InvalidEnumerationError) as exc_info:
            parse_resource(self.TEXT)
        err = exc_info.value
        assert err.path == "Patient.gender"
        assert err.value == "martian"
        assert "female" in err.allowed

    def test_lenient_keeps_value(self):
        from fhir_codec import decode

        result = decode(self.TEXT, strict_enumerations=False)
        assert result.node.gender == "martian"
        assert [w.kind for w in result.warnings] == ["invalid-enumeration"]
        assert result.warnings[0].path == "Patient.gender"


# ═══════════════════════════════════════════════════════════════════
# 6. Primitive sibling extension
# ═══════════════════════════════════════════════════════════════════


class TestPrimitiveSiblingExtension:
    DOC = {
        "resourceType": "Patient",
        "birthDate": "1970",
        "_birthDate": {
            "extension": [
                {"url": "http://example/precision", "valueCode": "year"},
            ],
        },
    }

    def test_round_trip_preserves_both(self):
        assert _round_trip(json.dumps(self.DOC)) == self.DOC

    def test_sibling_is_element(self):
        patient = parse_resource(json.dumps(self.DOC))
        assert patient.birthDate == "1970"
        ext = patient["_birthDate"].get_extension("http://example/precision")
        assert ext.valueCode == "year"
