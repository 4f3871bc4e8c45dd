"""
Example 01: Parse and Serialize
================================

Decodes a Patient from FHIR JSON, reads and edits it through attribute
access, and writes it back as canonical JSON.

Use case: normalizing resources received from an EHR interface.
"""

from fhir_codec import parse_resource, resource_type_of, serialize_resource
from fhir_codec.datatypes import HumanName

# ── 1. Decoding ──────────────────────────────────────────────────

print("=== 1. Decoding ===\n")

incoming = b"""{
    "gender": "female",
    "name": [{"given": ["Jane"], "family": "Doe"}],
    "resourceType": "Patient",
    "birthDate": "1984-07-12",
    "id": "p1"
}"""

patient = parse_resource(incoming)
print(f"Type:       {resource_type_of(patient)}")
print(f"Id:         {patient.id}")
print(f"Name:       {patient.name[0].given[0]} {patient.name[0].family}")
print(f"Birth date: {patient.birthDate}")

# ── 2. Canonical output ──────────────────────────────────────────

print("\n=== 2. Canonical Output ===\n")

# Members come out in structure-definition order, whatever order they
# arrived in.
print(serialize_resource(patient).decode("utf-8"))

# ── 3. Editing ───────────────────────────────────────────────────

print("\n=== 3. Editing ===\n")

patient.active = True
patient.name.append(HumanName(use="nickname", given=["JD"]))
print(serialize_resource(patient, indent=2).decode("utf-8"))

# ── 4. Primitive extensions ──────────────────────────────────────

print("\n=== 4. Primitive Extensions ===\n")

masked = parse_resource(
    '{"resourceType":"Patient","_birthDate":{"extension":[{'
    '"url":"http://hl7.org/fhir/StructureDefinition/data-absent-reason",'
    '"valueCode":"masked"}]}}'
)
print(f"birthDate value:   {masked.get('birthDate')}")
print(f"birthDate reason:  {masked['_birthDate'].extension[0].valueCode}")
print(serialize_resource(masked).decode("utf-8"))
