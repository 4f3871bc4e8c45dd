"""Integrity checks over the R4 shape catalog."""

import pytest

from fhir_codec import default_registry
from fhir_codec.primitives import is_primitive
from fhir_codec.shapes import RESOURCE_TYPE


@pytest.fixture(scope="module")
def registry():
    return default_registry()


def _all_shapes(registry):
    return list(registry)


class TestResourceTypes:
    def test_full_r4_list(self, registry):
        assert len(registry.resource_types()) == 146

    def test_sorted(self, registry):
        names = registry.resource_types()
        assert names == sorted(names)

    @pytest.mark.parametrize("name", [
        "Patient", "Observation", "Bundle", "CodeSystem", "ValueSet",
        "Questionnaire", "QuestionnaireResponse", "Parameters", "Binary",
        "MedicationRequest", "ExplanationOfBenefit", "PlanDefinition",
        "StructureDefinition", "SubstanceSpecification",
        "MedicinalProductPackaged", "TestScript",
    ])
    def test_present(self, registry, name):
        assert registry.lookup(name) is not None

    def test_not_resources(self, registry):
        for name in ("Resource", "DomainResource", "HumanName", "Extension"):
            assert registry.lookup(name) is None

    @pytest.mark.parametrize("name,base", [
        ("Bundle", "Resource"),
        ("Binary", "Resource"),
        ("Parameters", "Resource"),
        ("Patient", "DomainResource"),
        ("CodeSystem", "DomainResource"),
    ])
    def test_base(self, registry, name, base):
        assert registry.lookup(name).base.name == base


class TestReferences:
    def test_every_type_resolves(self, registry):
        missing = []
        for shape in _all_shapes(registry):
            for fdef in shape.all_fields:
                for type_name in fdef.types:
                    if is_primitive(type_name) or type_name == RESOURCE_TYPE:
                        continue
                    if type_name not in registry:
                        missing.append(f"{shape.name}.{fdef.name}: {type_name}")
        assert missing == []

    def test_nested_shapes_registered(self, registry):
        for shape in registry.resource_types():
            for inner in registry.lookup(shape).walk():
                assert registry.resolve(inner.name) is inner

    @pytest.mark.parametrize("owner,member,target", [
        ("CodeSystem.concept", "concept", "CodeSystem.concept"),
        ("ValueSet.expansion.contains", "contains", "ValueSet.expansion.contains"),
        ("Questionnaire.item", "item", "Questionnaire.item"),
        ("QuestionnaireResponse.item", "item", "QuestionnaireResponse.item"),
        ("PlanDefinition.action", "action", "PlanDefinition.action"),
        ("RequestGroup.action", "action", "RequestGroup.action"),
        ("Contract.term", "group", "Contract.term"),
        ("GraphDefinition.link.target", "link", "GraphDefinition.link"),
        ("ExampleScenario.process.step.alternative", "step", "ExampleScenario.process.step"),
    ])
    def test_recursive_shapes(self, registry, owner, member, target):
        assert registry.resolve(owner).member(member).type == target

    def test_questionnaire_response_answer_items(self, registry):
        answer = registry.resolve("QuestionnaireResponse.item.answer")
        assert answer.member("item").type == "QuestionnaireResponse.item"


class TestKeys:
    def test_choice_keys_unique(self, registry):
        for shape in _all_shapes(registry):
            owners = {}
            for fdef in shape.all_fields:
                for key, _ in fdef.variants():
                    assert key not in owners, (shape.name, key, owners.get(key))
                    owners[key] = fdef.name

    def test_sibling_keys_for_primitives_only(self, registry):
        patient = registry.lookup("Patient")
        assert "_birthDate" in patient.keys
        assert patient.keys["_birthDate"].sibling
        assert "_name" not in patient.keys

    def test_choice_variant_keys(self, registry):
        observation = registry.lookup("Observation")
        value = observation.member("value")
        keys = dict(value.variants())
        assert keys["valueQuantity"] == "Quantity"
        assert keys["valueString"] == "string"
        assert keys["valueDateTime"] == "dateTime"
        assert value.display_name == "value[x]"

    def test_backbone_kinds(self, registry):
        assert registry.resolve("Bundle.entry").kind == "backbone"
        assert registry.resolve("Bundle.entry").base.name == "BackboneElement"
        assert registry.resolve("Timing.repeat").base.name == "Element"


class TestConstraints:
    def test_extension_one_of(self, registry):
        assert registry.resolve("Extension").one_of == ("extension", "value")

    def test_parameters_one_of(self, registry):
        parameter = registry.resolve("Parameters.parameter")
        assert set(parameter.one_of) == {"value", "resource", "part"}

    def test_required_members(self, registry):
        assert registry.lookup("Observation").member("status").required
        assert registry.lookup("Observation").member("code").required
        assert not registry.lookup("Patient").member("gender").required

    def test_patient_gender_binding(self, registry):
        gender = registry.lookup("Patient").member("gender")
        assert set(gender.enum) == {"male", "female", "other", "unknown"}

    def test_bundle_type_binding(self, registry):
        assert "transaction" in registry.lookup("Bundle").member("type").enum

    def test_abstract_roots(self, registry):
        assert registry.resolve("Element").abstract
        assert registry.resolve("BackboneElement").abstract

    def test_datatype_names(self, registry):
        names = registry.datatype_names()
        for name in ("HumanName", "Quantity", "Age", "Dosage", "Meta", "Extension"):
            assert name in names
        assert "Bundle.entry" not in names
