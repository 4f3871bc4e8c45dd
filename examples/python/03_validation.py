"""
Example 03: Validation
=======================

Shows strict and lenient decoding, the collecting validator and its
OperationOutcome rendering.

Use case: an intake endpoint that reports every problem in a submitted
resource at once.
"""

from fhir_codec import (
    FHIRCodec,
    FHIRCodecError,
    LENIENT_OPTIONS,
    parse_resource,
    serialize_resource,
    validate_resource,
)

submitted = (
    '{"resourceType":"Patient","gender":"martian",'
    '"active":"yes","nickname":"JD"}'
)

# ── 1. Strict decoding stops at the first error ──────────────────

print("=== 1. Strict Decoding ===\n")

try:
    parse_resource(submitted)
except FHIRCodecError as e:
    print(f"  ✗ [{e.kind}] {e.path}: {e.detail}")

# ── 2. The validator reports every error ─────────────────────────

print("\n=== 2. Collecting Validator ===\n")

result = validate_resource(submitted)
print(f"Valid: {result.valid}")
for err in result.errors:
    print(f"  ✗ [{err.kind}] {err.path}: {err.detail}")

# ── 3. OperationOutcome ──────────────────────────────────────────

print("\n=== 3. OperationOutcome ===\n")

outcome = result.to_operation_outcome()
print(serialize_resource(outcome, indent=2).decode("utf-8"))

# ── 4. Lenient decoding ──────────────────────────────────────────

print("\n=== 4. Lenient Decoding ===\n")

codec = FHIRCodec(LENIENT_OPTIONS)
decoded = codec.decode('{"resourceType":"Patient","gender":"martian","nickname":"JD"}')
print(f"gender kept verbatim: {decoded.node.gender}")
for warning in decoded.warnings:
    print(f"  ⚠ [{warning.kind}] {warning.path}: {warning.message}")
print(codec.serialize(decoded.node).decode("utf-8"))
