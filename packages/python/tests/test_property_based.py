"""
Property-based tests for the codec using Hypothesis.

Patients, Observations and CodeSystems are generated as JSON values,
decoded, and re-encoded.  The properties checked are the ones every
caller relies on: encoding is stable, a decoded tree survives a
round trip unchanged, a choice group never holds two variants, and
nesting limits are enforced exactly.
"""

import json
from decimal import Decimal

import pytest
from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from fhir_codec import (
    AmbiguousChoiceError,
    RecursionTooDeepError,
    parse_resource,
    serialize_resource,
)

# ═══════════════════════════════════════════════════════════════════
# Strategies
# ═══════════════════════════════════════════════════════════════════

_ids = st.from_regex(r"[A-Za-z0-9\-\.]{1,64}", fullmatch=True)
_words = st.text(
    alphabet="abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789 äöüé",
    min_size=1,
    max_size=20,
).filter(lambda s: s.strip() == s and s)
_dates = st.dates().map(lambda d: d.isoformat())
_decimal_text = st.builds(
    lambda whole, frac: f"{whole}.{frac}" if frac else str(whole),
    st.integers(min_value=-10**6, max_value=10**6),
    st.one_of(st.just(""), st.from_regex(r"[0-9]{1,12}", fullmatch=True)),
)


@st.composite
def human_names(draw):
    name = {}
    if draw(st.booleans()):
        name["family"] = draw(_words)
    given_names = draw(st.lists(_words, max_size=3))
    if given_names:
        name["given"] = given_names
    if draw(st.booleans()):
        name["use"] = draw(st.sampled_from(["usual", "official", "nickname"]))
    return name


@st.composite
def patients(draw):
    patient = {"resourceType": "Patient"}
    if draw(st.booleans()):
        patient["id"] = draw(_ids)
    if draw(st.booleans()):
        patient["active"] = draw(st.booleans())
    names = [n for n in draw(st.lists(human_names(), max_size=3)) if n]
    if names:
        patient["name"] = names
    if draw(st.booleans()):
        patient["gender"] = draw(st.sampled_from(["male", "female", "other", "unknown"]))
    if draw(st.booleans()):
        patient["birthDate"] = draw(_dates)
    if draw(st.booleans()):
        patient["deceasedBoolean"] = draw(st.booleans())
    return patient


_OBSERVATION_VALUES = {
    "valueQuantity": st.builds(
        lambda v: {"value": v, "unit": "mg"}, _decimal_text.map(Decimal),
    ),
    "valueString": _words,
    "valueBoolean": st.booleans(),
    "valueInteger": st.integers(min_value=-2**31, max_value=2**31 - 1),
    "valueDateTime": _dates,
    "valueCodeableConcept": st.builds(lambda t: {"text": t}, _words),
    "valuePeriod": st.builds(lambda d: {"start": d}, _dates),
}


@st.composite
def observations(draw, variants=st.integers(min_value=0, max_value=1)):
    obs = {
        "resourceType": "Observation",
        "status": "final",
        "code": {"text": draw(_words)},
    }
    count = draw(variants)
    keys = draw(st.lists(
        st.sampled_from(sorted(_OBSERVATION_VALUES)),
        min_size=count, max_size=count, unique=True,
    ))
    for key in keys:
        obs[key] = draw(_OBSERVATION_VALUES[key])
    return obs


def _code_system(depth):
    concept = {"code": f"c{depth}"}
    for level in range(depth - 1, 0, -1):
        concept = {"code": f"c{level}", "concept": [concept]}
    return {
        "resourceType": "CodeSystem",
        "status": "active",
        "content": "complete",
        "concept": [concept],
    }


# ═══════════════════════════════════════════════════════════════════
# Round trip
# ═══════════════════════════════════════════════════════════════════


class TestRoundTrip:
    @given(patient=patients())
    def test_patient_decode_encode_decode(self, patient):
        first = parse_resource(patient)
        second = parse_resource(serialize_resource(first))
        assert second == first

    @given(patient=patients())
    def test_patient_json_preserved(self, patient):
        encoded = json.loads(serialize_resource(parse_resource(patient)))
        assert encoded == patient

    @given(obs=observations())
    def test_observation_decode_encode_decode(self, obs):
        first = parse_resource(obs)
        assert parse_resource(serialize_resource(first)) == first

    @given(text=_decimal_text)
    def test_decimal_text_preserved(self, text):
        doc = (
            '{"resourceType":"Observation","status":"final","code":{"text":"x"},'
            f'"valueQuantity":{{"value":{text}}}}}'
        )
        assert serialize_resource(parse_resource(doc)) == doc.encode("utf-8")


# ═══════════════════════════════════════════════════════════════════
# Determinism
# ═══════════════════════════════════════════════════════════════════


class TestDeterminism:
    @given(patient=patients())
    def test_encoding_idempotent(self, patient):
        once = serialize_resource(parse_resource(patient))
        twice = serialize_resource(parse_resource(once))
        assert once == twice

    @given(patient=patients())
    def test_key_order_irrelevant(self, patient):
        reversed_doc = dict(reversed(list(patient.items())))
        assert (
            serialize_resource(parse_resource(reversed_doc))
            == serialize_resource(parse_resource(patient))
        )

    @given(patient=patients(), indent=st.integers(min_value=0, max_value=4))
    def test_indent_only_changes_whitespace(self, patient, indent):
        resource = parse_resource(patient)
        compact = json.loads(serialize_resource(resource))
        pretty = json.loads(serialize_resource(resource, indent=indent))
        assert compact == pretty


# ═══════════════════════════════════════════════════════════════════
# Choice groups
# ═══════════════════════════════════════════════════════════════════


class TestChoiceUniqueness:
    @given(obs=observations(variants=st.integers(min_value=2, max_value=4)))
    def test_multiple_variants_rejected(self, obs):
        with pytest.raises(AmbiguousChoiceError) as exc_info:
            parse_resource(obs)
        assert exc_info.value.path == "Observation.value[x]"

    @given(obs=observations(variants=st.just(1)))
    def test_single_variant_reported(self, obs):
        observation = parse_resource(obs)
        type_name, _ = observation.choice("value")
        key = next(k for k in obs if k.startswith("value"))
        assert key == "value" + type_name[0].upper() + type_name[1:]


# ═══════════════════════════════════════════════════════════════════
# Depth limits
# ═══════════════════════════════════════════════════════════════════


class TestDepthSafety:
    @given(
        depth=st.integers(min_value=1, max_value=12),
        limit=st.integers(min_value=1, max_value=12),
    )
    @settings(suppress_health_check=[HealthCheck.too_slow])
    def test_limit_is_exact(self, depth, limit):
        doc = _code_system(depth)
        if depth > limit:
            with pytest.raises(RecursionTooDeepError):
                parse_resource(doc, max_recursion_depth=limit)
        else:
            parsed = parse_resource(doc, max_recursion_depth=limit)
            assert json.loads(serialize_resource(parsed)) == doc

    @given(depth=st.integers(min_value=600, max_value=2000))
    @settings(max_examples=5, deadline=None)
    def test_deep_documents_fail_cleanly(self, depth):
        text = '{"resourceType":"CodeSystem","status":"active","content":"complete",'
        text += '"concept":[{"code":"c","concept":[' * depth
        text += '{"code":"leaf"}' + "]}" * depth + "]}"
        with pytest.raises(RecursionTooDeepError):
            parse_resource(text)
