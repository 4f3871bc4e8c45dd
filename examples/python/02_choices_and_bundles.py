"""
Example 02: Choice Types and Bundles
=====================================

Works with ``value[x]`` choice members on an Observation and walks the
resources embedded in a Bundle.

Use case: extracting lab results from a search response.
"""

from fhir_codec import (
    AmbiguousChoiceError,
    iter_resources,
    parse_resource,
    resource_type_of,
)
from fhir_codec.datatypes import Quantity

# ── 1. Reading a choice ──────────────────────────────────────────

print("=== 1. Reading a Choice ===\n")

observation = parse_resource({
    "resourceType": "Observation",
    "status": "final",
    "code": {"coding": [{"system": "http://loinc.org", "code": "29463-7"}]},
    "valueQuantity": {"value": 72.50, "unit": "kg"},
})

type_name, value = observation.choice("value")
print(f"value[x] holds a {type_name}: {value.value} {value.unit}")

# ── 2. Replacing a choice ────────────────────────────────────────

print("\n=== 2. Replacing a Choice ===\n")

observation.set_choice("value", "string", "not measured")
print(f"value[x] now: {observation.choice('value')}")
print(f"valueQuantity present: {'valueQuantity' in observation}")

observation.set_choice("value", "Quantity", Quantity(value=71, unit="kg"))
print(f"value[x] now: {observation.choice('value')[0]}")

# ── 3. Two variants at once ──────────────────────────────────────

print("\n=== 3. Two Variants at Once ===\n")

try:
    parse_resource({
        "resourceType": "Observation",
        "status": "final",
        "code": {"text": "weight"},
        "valueQuantity": {"value": 72},
        "valueString": "72 kg",
    })
except AmbiguousChoiceError as e:
    print(f"  ✗ {e.path}: {e.detail}")

# ── 4. Walking a Bundle ──────────────────────────────────────────

print("\n=== 4. Walking a Bundle ===\n")

bundle = parse_resource({
    "resourceType": "Bundle",
    "type": "searchset",
    "entry": [
        {"fullUrl": "urn:uuid:1", "resource": {"resourceType": "Patient", "id": "a"}},
        {"resource": {
            "resourceType": "Observation",
            "status": "final",
            "code": {"text": "heart rate"},
            "valueQuantity": {"value": 64, "unit": "/min"},
            "subject": {"reference": "Patient/a"},
        }},
    ],
})

for resource in iter_resources(bundle):
    print(f"  {resource_type_of(resource)}/{resource.get('id', '-')}")
