"""Tests for CBOR transport."""

import json
from decimal import Decimal

import pytest

cbor2 = pytest.importorskip("cbor2")

from fhir_codec import (  # noqa: E402
    LENIENT_OPTIONS,
    InvalidEnumerationError,
    MalformedJSONError,
    parse_resource,
    serialize_resource,
)
from fhir_codec.cbor import PayloadStats, from_cbor, payload_stats, to_cbor  # noqa: E402
from fhir_codec.resources import Patient  # noqa: E402


OBSERVATION = (
    '{"resourceType":"Observation","status":"final","code":{"text":"weight"},'
    '"valueQuantity":{"value":72.50,"unit":"kg"}}'
)


class TestRoundTrip:
    def test_patient(self):
        patient = parse_resource(
            '{"resourceType":"Patient","id":"p1","name":[{"family":"Doe"}]}'
        )
        restored = from_cbor(to_cbor(patient))
        assert restored == patient

    def test_decimal_precision(self):
        observation = parse_resource(OBSERVATION)
        restored = from_cbor(to_cbor(observation))
        assert restored.valueQuantity.value == Decimal("72.50")
        assert serialize_resource(restored) == OBSERVATION.encode("utf-8")

    def test_plain_cbor_map(self):
        data = cbor2.dumps({"resourceType": "Patient", "active": True})
        assert from_cbor(data).active is True

    def test_bundle(self):
        bundle = parse_resource({
            "resourceType": "Bundle",
            "type": "collection",
            "entry": [{"resource": {"resourceType": "Patient", "id": "x"}}],
        })
        restored = from_cbor(to_cbor(bundle))
        assert restored.entry[0].resource.id == "x"


class TestErrors:
    def test_invalid_cbor(self):
        with pytest.raises(MalformedJSONError):
            from_cbor(b"\xff\xff\xff")

    def test_structural_errors_keep_paths(self):
        data = cbor2.dumps({"resourceType": "Patient", "gender": "martian"})
        with pytest.raises(InvalidEnumerationError) as exc_info:
            from_cbor(data)
        assert exc_info.value.path == "Patient.gender"

    def test_lenient_options(self):
        data = cbor2.dumps({"resourceType": "Patient", "gender": "martian"})
        assert from_cbor(data, options=LENIENT_OPTIONS).gender == "martian"

    def test_not_a_resource(self):
        with pytest.raises(TypeError):
            to_cbor({"resourceType": "Patient"})

    def test_invalid_tree_refused(self):
        patient = Patient()
        patient._store("gender", "martian")
        with pytest.raises(InvalidEnumerationError):
            to_cbor(patient)


class TestPayloadStats:
    def test_sizes(self):
        observation = parse_resource(OBSERVATION)
        stats = payload_stats(observation)
        assert stats.json_bytes == len(serialize_resource(observation))
        assert 0 < stats.cbor_bytes
        assert stats.cbor_ratio == stats.cbor_bytes / stats.json_bytes

    def test_empty_ratio(self):
        stats = PayloadStats(0, 0, 0, 0)
        assert stats.cbor_ratio == 0.0
        assert stats.gzip_cbor_ratio == 0.0

    def test_json_matches_serializer(self):
        patient = parse_resource('{"resourceType":"Patient","id":"a"}')
        assert json.loads(serialize_resource(patient)) == {
            "resourceType": "Patient", "id": "a",
        }
