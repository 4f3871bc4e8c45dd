"""Tests for the in-memory node model."""

import copy

import pytest

from fhir_codec import (
    AmbiguousChoiceError,
    BackboneElement,
    DomainResource,
    Element,
    OpaqueResource,
    Resource,
    resource_type_of,
)
from fhir_codec.datatypes import (
    BundleEntry,
    CodeableConcept,
    Extension,
    HumanName,
    Quantity,
)
from fhir_codec.resources import Binary, Bundle, Observation, Patient


class TestNodeClasses:
    def test_resource_bases(self):
        assert issubclass(Patient, DomainResource)
        assert issubclass(Bundle, Resource)
        assert not issubclass(Bundle, DomainResource)

    def test_datatype_bases(self):
        assert issubclass(HumanName, Element)
        assert not issubclass(HumanName, BackboneElement)
        assert issubclass(BundleEntry, BackboneElement)

    def test_class_names(self):
        assert Patient.__name__ == "Patient"
        assert BundleEntry.__name__ == "BundleEntry"
        assert Patient.__module__ == "fhir_codec.resources"
        assert HumanName.__module__ == "fhir_codec.datatypes"

    def test_resource_type_class_attribute(self):
        assert Patient.resource_type == "Patient"
        assert resource_type_of(Patient()) == "Patient"

    def test_classes_cached(self):
        from fhir_codec import default_registry

        assert default_registry().resource_class("Patient") is Patient

    def test_unknown_class_lookup(self):
        import fhir_codec.resources as resources

        with pytest.raises(AttributeError):
            resources.Spaceship

    def test_quantity_specializations(self):
        from fhir_codec.datatypes import Age, Duration

        assert issubclass(Age, Quantity)
        assert issubclass(Duration, Quantity)

    def test_binary_data_member(self):
        binary = Binary(contentType="text/plain", data="aGVsbG8=")
        assert binary.data == "aGVsbG8="


class TestMappingBehaviour:
    def test_attribute_and_item_access(self):
        patient = Patient(id="a")
        patient.active = True
        assert patient["active"] is True
        assert dict(patient) == {"id": "a", "active": True}
        assert len(patient) == 2

    def test_absent_member_is_none(self):
        assert Patient().birthDate is None

    def test_undeclared_attribute(self):
        with pytest.raises(AttributeError):
            Patient().nickname

    def test_resource_type_not_a_key(self):
        with pytest.raises(KeyError):
            Patient()["resourceType"] = "Observation"

    def test_keyword_member_through_items(self):
        from fhir_codec.resources import SubstancePolymer

        polymer = SubstancePolymer()
        polymer["class"] = CodeableConcept(text="linear")
        assert polymer["class"].text == "linear"

    def test_delete(self):
        patient = Patient(id="a", active=True)
        del patient.active
        del patient["id"]
        assert len(patient) == 0

    def test_sibling_key_adopts_element(self):
        patient = Patient()
        patient["_birthDate"] = {"id": "bd"}
        assert isinstance(patient["_birthDate"], Element)


class TestEquality:
    def test_structural_equality(self):
        assert HumanName(family="Doe") == HumanName(family="Doe")
        assert HumanName(family="Doe") != HumanName(family="Roe")

    def test_empty_list_equals_absent(self):
        left = HumanName(family="Doe")
        right = HumanName(family="Doe")
        right["given"] = []
        assert left == right

    def test_different_classes_differ(self):
        assert Patient(id="a") != Observation(id="a")

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(Patient())

    def test_deepcopy(self):
        patient = Patient(name=[HumanName(family="Doe")])
        clone = copy.deepcopy(patient)
        clone.name[0].family = "Roe"
        assert patient.name[0].family == "Doe"

    def test_copy_is_shallow(self):
        patient = Patient(name=[HumanName(family="Doe")])
        clone = copy.copy(patient)
        assert clone == patient
        assert clone.name is patient.name


class TestChoiceAccess:
    def test_choice_none_when_unset(self):
        obs = Observation()
        assert obs.choice("value") is None

    def test_choice_returns_variant(self):
        obs = Observation(valueString="high")
        assert obs.choice("value") == ("string", "high")

    def test_choice_ambiguous(self):
        obs = Observation(valueString="high", valueBoolean=True)
        with pytest.raises(AmbiguousChoiceError):
            obs.choice("value")

    def test_choice_unknown_group(self):
        with pytest.raises(KeyError):
            Observation().choice("status")

    def test_set_choice_rejects_foreign_type(self):
        with pytest.raises(KeyError):
            Observation().set_choice("value", "HumanName", HumanName())

    def test_set_choice_adopts_dict(self):
        obs = Observation()
        obs.set_choice("value", "Quantity", {"value": 1, "unit": "mg"})
        assert isinstance(obs.valueQuantity, Quantity)


class TestExtensions:
    URL = "http://example.org/ext"

    def test_add_and_get(self):
        patient = Patient()
        patient.add_extension(self.URL, valueString="x")
        assert patient.get_extension(self.URL).valueString == "x"
        assert isinstance(patient.extension[0], Extension)

    def test_iter_by_url(self):
        name = HumanName()
        name.add_extension(self.URL, valueInteger=1)
        name.add_extension("http://other", valueInteger=2)
        name.add_extension(self.URL, valueInteger=3)
        assert [e.valueInteger for e in name.iter_extensions(self.URL)] == [1, 3]
        assert len(list(name.iter_extensions())) == 3

    def test_get_missing(self):
        assert Patient().get_extension(self.URL) is None

    def test_modifier_extensions(self):
        entry = BundleEntry()
        entry.add_modifier_extension(self.URL, valueBoolean=True)
        assert [e.url for e in entry.iter_modifier_extensions()] == [self.URL]

    def test_datatypes_have_no_modifier_extensions(self):
        assert not hasattr(HumanName(), "add_modifier_extension")


class TestOpaqueResource:
    def test_verbatim(self):
        opaque = OpaqueResource("Spaceship", {"warp": 9})
        assert opaque.resource_type == "Spaceship"
        assert opaque.to_json() == {"resourceType": "Spaceship", "warp": 9}

    def test_resource_type_fixed(self):
        opaque = OpaqueResource("Spaceship")
        with pytest.raises(KeyError):
            opaque["resourceType"] = "Patient"

    def test_attribute_assignment_refused(self):
        with pytest.raises(AttributeError):
            OpaqueResource("Spaceship").warp = 9

    def test_equality(self):
        assert OpaqueResource("A", {"x": 1}) == OpaqueResource("A", {"x": 1})
        assert OpaqueResource("A", {"x": 1}) != OpaqueResource("B", {"x": 1})
