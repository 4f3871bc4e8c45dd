"""Tests for the fhir-codec MCP server.

Calls the tool handler functions directly (no transport needed).  Each
tool accepts JSON strings and returns dicts, lists or strings, mirroring
the MCP tool interface.
"""

import json

import pytest

# Guard: skip entire module if `mcp` is not installed.
mcp = pytest.importorskip("mcp", reason="MCP SDK not installed (pip install mcp)")

from fhir_codec.mcp.server import mcp as mcp_server  # noqa: E402


def _get_tool_fn(name: str):
    """Retrieve a registered tool's underlying function by name."""
    tool_manager = mcp_server._tool_manager
    tool = tool_manager._tools.get(name)
    if tool is None:
        available = list(tool_manager._tools.keys())
        raise KeyError(f"Tool '{name}' not found. Available: {available}")
    return tool.fn


EXPECTED_TOOLS = {
    "validate_resource",
    "normalize_resource",
    "list_resource_types",
    "describe_shape",
    "summarize_bundle",
}


class TestToolRegistration:
    def test_all_tools_registered(self):
        assert set(mcp_server._tool_manager._tools) == EXPECTED_TOOLS

    def test_tools_documented(self):
        for tool in mcp_server._tool_manager._tools.values():
            assert tool.description


class TestValidateResource:
    def test_valid(self):
        fn = _get_tool_fn("validate_resource")
        result = fn('{"resourceType":"Patient","gender":"female"}')
        assert result == {"valid": True, "errors": [], "warnings": []}

    def test_errors(self):
        fn = _get_tool_fn("validate_resource")
        result = fn('{"resourceType":"Patient","gender":"martian","foo":1}')
        assert not result["valid"]
        assert result["errors"][0]["kind"] == "invalid-enumeration"
        assert result["errors"][0]["path"] == "Patient.gender"
        assert result["errors"][1] == {
            "kind": "unknown-field", "path": "Patient.foo", "message": "unknown field",
        }

    def test_lenient(self):
        fn = _get_tool_fn("validate_resource")
        result = fn('{"resourceType":"Patient","gender":"martian"}', lenient=True)
        assert result["valid"]
        assert result["warnings"][0]["kind"] == "invalid-enumeration"

    def test_expected_type(self):
        fn = _get_tool_fn("validate_resource")
        result = fn('{"resourceType":"Patient"}', resource_type="Observation")
        assert not result["valid"]
        assert result["errors"][0]["kind"] == "wrong-type"

    def test_malformed(self):
        fn = _get_tool_fn("validate_resource")
        result = fn("{not json")
        assert result["errors"][0]["kind"] == "malformed-json"


class TestNormalizeResource:
    def test_reorders_and_indents(self):
        fn = _get_tool_fn("normalize_resource")
        text = fn('{"gender":"male","id":"p","resourceType":"Patient"}')
        assert text == (
            '{\n  "resourceType": "Patient",\n  "id": "p",\n  "gender": "male"\n}'
        )

    def test_compact(self):
        fn = _get_tool_fn("normalize_resource")
        text = fn('{"resourceType":"Patient","name":[]}', indent=None)
        assert text == '{"resourceType":"Patient"}'

    def test_lenient_drops_unknown(self):
        fn = _get_tool_fn("normalize_resource")
        text = fn('{"resourceType":"Patient","foo":1}', indent=None, lenient=True)
        assert json.loads(text) == {"resourceType": "Patient"}

    def test_invalid_raises(self):
        fn = _get_tool_fn("normalize_resource")
        with pytest.raises(ValueError):
            fn('{"resourceType":"Patient","gender":"martian"}')


class TestCatalogTools:
    def test_list_resource_types(self):
        names = _get_tool_fn("list_resource_types")()
        assert len(names) == 146
        assert "Patient" in names
        assert names == sorted(names)

    def test_describe_resource(self):
        info = _get_tool_fn("describe_shape")("Observation")
        assert info["kind"] == "resource"
        assert info["base"] == "DomainResource"
        fields = {f["name"]: f for f in info["fields"]}
        assert fields["status"]["cardinality"] == "1..1"
        assert "final" in fields["status"]["codes"]
        assert "valueQuantity" in fields["value[x]"]["keys"]
        assert "Observation.component" in info["backbones"]

    def test_describe_datatype(self):
        info = _get_tool_fn("describe_shape")("Extension")
        assert info["kind"] == "datatype"
        assert info["one_of"] == ["extension", "value"]

    def test_describe_backbone(self):
        info = _get_tool_fn("describe_shape")("Bundle.entry")
        assert info["kind"] == "backbone"
        assert info["base"] == "BackboneElement"

    def test_describe_unknown(self):
        with pytest.raises(ValueError):
            _get_tool_fn("describe_shape")("Spaceship")


class TestSummarizeBundle:
    BUNDLE = json.dumps({
        "resourceType": "Bundle",
        "type": "searchset",
        "total": 2,
        "entry": [
            {"resource": {"resourceType": "Patient", "id": "a"}},
            {"resource": {"resourceType": "Patient", "id": "b",
                          "contained": [{"resourceType": "Organization"}]}},
            {"resource": {"resourceType": "Observation", "status": "final",
                          "code": {"text": "x"}}},
        ],
    })

    def test_counts(self):
        summary = _get_tool_fn("summarize_bundle")(self.BUNDLE)
        assert summary == {
            "type": "searchset",
            "entries": 3,
            "total": 2,
            "resource_counts": {"Observation": 1, "Organization": 1, "Patient": 2},
        }

    def test_not_a_bundle(self):
        with pytest.raises(ValueError):
            _get_tool_fn("summarize_bundle")('{"resourceType":"Patient"}')
