"""Tests for NDJSON input, async sources and resource walking."""

import asyncio
import io

import pytest

from fhir_codec import (
    LENIENT_OPTIONS,
    FHIRCodec,
    InvalidEnumerationError,
    MalformedJSONError,
    OpaqueResource,
    UnknownResourceTypeError,
    aparse_resource,
    iter_ndjson,
    iter_resources,
    parse_resource,
    resource_type_of,
)


NDJSON = (
    '{"resourceType":"Patient","id":"p1"}\n'
    '{"resourceType":"Observation","id":"o1","status":"final",'
    '"code":{"text":"x"},"subject":{"reference":"Patient/p1"}}\n'
    "\n"
    '{"resourceType":"Patient","id":"p2","gender":"female"}\n'
)


class TestIterNdjson:
    def test_text(self):
        resources = list(iter_ndjson(NDJSON))
        assert [r.id for r in resources] == ["p1", "o1", "p2"]
        assert [resource_type_of(r) for r in resources] == [
            "Patient", "Observation", "Patient",
        ]

    def test_bytes(self):
        resources = list(iter_ndjson(NDJSON.encode("utf-8")))
        assert len(resources) == 3

    def test_file_object(self):
        resources = list(iter_ndjson(io.StringIO(NDJSON)))
        assert resources[2].gender == "female"

    def test_blank_and_whitespace_lines(self):
        text = '\n   \n{"resourceType":"Patient"}\n\n'
        assert len(list(iter_ndjson(text))) == 1

    def test_empty(self):
        assert list(iter_ndjson("")) == []

    def test_lazy(self):
        text = '{"resourceType":"Patient"}\n{not json}\n'
        stream = iter_ndjson(text)
        assert resource_type_of(next(stream)) == "Patient"
        with pytest.raises(MalformedJSONError):
            next(stream)

    def test_error_path_has_line_number(self):
        text = (
            '{"resourceType":"Patient"}\n'
            '\n'
            '{"resourceType":"Patient","gender":"martian"}\n'
        )
        with pytest.raises(InvalidEnumerationError) as exc_info:
            list(iter_ndjson(text))
        assert exc_info.value.path == "line[3].Patient.gender"

    def test_malformed_line_path(self):
        with pytest.raises(MalformedJSONError) as exc_info:
            list(iter_ndjson('{"resourceType":"Patient"}\n{"a":\n'))
        assert exc_info.value.path == "line[2]"

    def test_unknown_type_path(self):
        with pytest.raises(UnknownResourceTypeError) as exc_info:
            list(iter_ndjson('{"resourceType":"Spaceship"}\n'))
        assert exc_info.value.path == "line[1]"

    def test_lenient_overrides(self):
        text = '{"resourceType":"Patient","gender":"martian"}\n'
        (patient,) = iter_ndjson(text, strict_enumerations=False)
        assert patient.gender == "martian"

    def test_lenient_warnings_collected(self):
        text = (
            '{"resourceType":"Patient","gender":"martian"}\n'
            '{"resourceType":"Patient"}\n'
            '{"resourceType":"Patient","nickname":"JD"}\n'
        )
        found = []
        resources = list(iter_ndjson(text, options=LENIENT_OPTIONS, warnings=found))
        assert len(resources) == 3
        assert [(w.kind, w.path) for w in found] == [
            ("invalid-enumeration", "line[1].Patient.gender"),
            ("unknown-field", "line[3].Patient.nickname"),
        ]

    def test_warnings_arrive_with_their_line(self):
        text = (
            '{"resourceType":"Patient","nickname":"a"}\n'
            '{"resourceType":"Patient","nickname":"b"}\n'
        )
        found = []
        stream = iter_ndjson(text, options=LENIENT_OPTIONS, warnings=found)
        next(stream)
        assert len(found) == 1
        next(stream)
        assert len(found) == 2

    def test_facade_collects_warnings(self):
        found = []
        codec = FHIRCodec(LENIENT_OPTIONS)
        list(codec.iter_ndjson('{"resourceType":"Patient","x":1}\n', warnings=found))
        assert found[0].path == "line[1].Patient.x"


class TestAparseResource:
    @staticmethod
    async def _chunks(*parts):
        for part in parts:
            await asyncio.sleep(0)
            yield part

    def test_bytes_chunks(self):
        source = self._chunks(b'{"resourceType":"Pat', b'ient","id":"a"}')
        patient = asyncio.run(aparse_resource(source))
        assert patient.id == "a"

    def test_str_chunks(self):
        source = self._chunks('{"resourceType":', '"Patient","active":true}')
        patient = asyncio.run(aparse_resource(source))
        assert patient.active is True

    def test_multibyte_split_across_chunks(self):
        data = '{"resourceType":"Patient","name":[{"family":"Müller"}]}'.encode("utf-8")
        cut = data.index(b"\xc3") + 1
        source = self._chunks(data[:cut], data[cut:])
        patient = asyncio.run(aparse_resource(source))
        assert patient.name[0].family == "Müller"

    def test_keyword_arguments(self):
        source = self._chunks(b'{"resourceType":"Patient","gender":"martian"}')
        patient = asyncio.run(aparse_resource(source, strict_enumerations=False))
        assert patient.gender == "martian"

    def test_errors_propagate(self):
        source = self._chunks(b'{"resourceType":')
        with pytest.raises(MalformedJSONError):
            asyncio.run(aparse_resource(source))


class TestIterResources:
    BUNDLE = {
        "resourceType": "Bundle",
        "type": "collection",
        "entry": [
            {"resource": {
                "resourceType": "Patient",
                "id": "p1",
                "contained": [{"resourceType": "Organization", "id": "org"}],
            }},
            {"resource": {
                "resourceType": "Bundle",
                "type": "collection",
                "entry": [{"resource": {"resourceType": "Practitioner"}}],
            }},
            {"response": {
                "status": "201 Created",
                "outcome": {
                    "resourceType": "OperationOutcome",
                    "issue": [{"severity": "information", "code": "informational"}],
                },
            }},
        ],
    }

    def test_depth_first_order(self):
        bundle = parse_resource(self.BUNDLE)
        types = [resource_type_of(r) for r in iter_resources(bundle)]
        assert types == [
            "Bundle", "Patient", "Organization", "Bundle", "Practitioner",
            "OperationOutcome",
        ]

    def test_first_is_root(self):
        patient = parse_resource('{"resourceType":"Patient"}')
        assert list(iter_resources(patient)) == [patient]

    def test_parameters(self):
        params = parse_resource({
            "resourceType": "Parameters",
            "parameter": [
                {"name": "a", "resource": {"resourceType": "Patient"}},
                {"name": "b", "part": [
                    {"name": "c", "resource": {"resourceType": "Location"}},
                ]},
            ],
        })
        types = [resource_type_of(r) for r in iter_resources(params)]
        assert types == ["Parameters", "Patient", "Location"]

    def test_opaque_not_descended(self):
        bundle = parse_resource(
            {
                "resourceType": "Bundle",
                "type": "collection",
                "entry": [{"resource": {
                    "resourceType": "Spaceship",
                    "crew": {"resourceType": "Patient"},
                }}],
            },
            strict_resource_types=False,
        )
        found = list(iter_resources(bundle))
        assert len(found) == 2
        assert isinstance(found[1], OpaqueResource)
