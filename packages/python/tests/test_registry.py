"""Tests for the shape registry."""

import pytest

from fhir_codec import (
    ShapeRegistry,
    default_registry,
    parse_resource,
    register_resource_shape,
    resource_type_of,
    serialize_resource,
)
from fhir_codec.catalog import backbone, datatype, element, resource
from fhir_codec.resources import Patient


def _widget_shape():
    return resource(
        "Widget",
        element("code", "CodeableConcept", "1..1"),
        element("size", "positiveInt"),
    )


class TestDefaultRegistry:
    def test_singleton(self):
        assert default_registry() is default_registry()

    def test_lookup(self):
        reg = default_registry()
        assert reg.lookup("Patient").name == "Patient"
        assert reg.lookup("HumanName") is None
        assert reg.lookup("Spaceship") is None

    def test_datatype_lookup(self):
        reg = default_registry()
        assert reg.datatype("HumanName").kind == "datatype"
        assert reg.datatype("Bundle.entry").kind == "backbone"

    def test_resolve(self):
        reg = default_registry()
        assert reg.resolve("Patient").is_resource
        assert reg.resolve("CodeSystem.concept").name == "CodeSystem.concept"
        with pytest.raises(KeyError):
            reg.resolve("Nope")

    def test_contains(self):
        reg = default_registry()
        assert "Patient" in reg
        assert "Quantity" in reg
        assert "Spaceship" not in reg

    def test_shape_of(self):
        assert default_registry().shape_of(Patient()) == "Patient"
        with pytest.raises(TypeError):
            default_registry().shape_of({"resourceType": "Patient"})

    def test_frozen_after_use(self):
        parse_resource('{"resourceType":"Patient"}')
        reg = default_registry()
        assert reg.frozen
        with pytest.raises(RuntimeError):
            reg.register("Widget", _widget_shape())

    def test_module_level_registration_after_use(self):
        parse_resource('{"resourceType":"Patient"}')
        with pytest.raises(RuntimeError):
            register_resource_shape("Widget", _widget_shape())


class TestCustomRegistry:
    def test_register_and_round_trip(self):
        reg = ShapeRegistry.from_catalog()
        reg.register("Widget", _widget_shape())
        text = b'{"resourceType":"Widget","code":{"text":"w"},"size":3}'
        widget = parse_resource(text, registry=reg)
        assert resource_type_of(widget) == "Widget"
        assert widget.size == 3
        assert serialize_resource(widget) == text

    def test_node_class_remembers_registry(self):
        reg = ShapeRegistry.from_catalog()
        reg.register("Widget", _widget_shape())
        widget = reg.resource_class("Widget")(code={"text": "w"})
        assert serialize_resource(widget).startswith(b'{"resourceType":"Widget"')

    def test_separate_from_default(self):
        reg = ShapeRegistry.from_catalog()
        reg.register("Widget", _widget_shape())
        assert "Widget" not in default_registry()
        assert reg.resource_class("Patient") is not Patient

    def test_duplicate_name(self):
        reg = ShapeRegistry.from_catalog()
        with pytest.raises(ValueError):
            reg.register("Patient", resource("Patient"))

    def test_name_mismatch(self):
        reg = ShapeRegistry()
        with pytest.raises(ValueError):
            reg.register("Gadget", _widget_shape())

    def test_datatype_as_resource(self):
        reg = ShapeRegistry()
        with pytest.raises(ValueError):
            reg.register("Thing", datatype("Thing", element("x", "string")))

    def test_resource_as_datatype(self):
        reg = ShapeRegistry()
        with pytest.raises(ValueError):
            reg.register_datatype("Widget", _widget_shape())

    def test_register_datatype(self):
        reg = ShapeRegistry.from_catalog()
        reg.register_datatype("Dimension", datatype(
            "Dimension",
            element("width", "decimal", "1..1"),
            element("height", "decimal", "1..1"),
        ))
        reg.register("Crate", resource(
            "Crate", element("size", "Dimension"),
        ))
        crate = parse_resource(
            '{"resourceType":"Crate","size":{"width":1.0,"height":2}}', registry=reg,
        )
        assert str(crate.size.width) == "1.0"

    def test_freeze_idempotent(self):
        reg = ShapeRegistry()
        reg.freeze()
        reg.freeze()
        assert reg.frozen

    def test_unknown_resource_class(self):
        with pytest.raises(KeyError):
            ShapeRegistry().resource_class("Patient")

    def test_backbones_registered_with_resource(self):
        reg = ShapeRegistry.from_catalog()
        reg.register("Crate", resource(
            "Crate",
            backbone("slot", "0..*", element("label", "string", "1..1")),
        ))
        assert reg.datatype("Crate.slot").kind == "backbone"


class TestResourceTypeOf:
    def test_resource(self):
        assert resource_type_of(Patient()) == "Patient"

    def test_non_resource(self):
        with pytest.raises(TypeError):
            resource_type_of({"resourceType": "Patient"})
