"""
Example 04: Bulk Data and Nesting Limits
=========================================

Streams newline-delimited resources as produced by a bulk data export
and shows the nesting limits that protect the decoder.

Use case: loading a nightly export into a warehouse.
"""

from collections import Counter

from fhir_codec import RecursionTooDeepError, iter_ndjson, parse_resource

# ── 1. NDJSON ────────────────────────────────────────────────────

print("=== 1. NDJSON ===\n")

export = """\
{"resourceType":"Patient","id":"p1","gender":"male"}
{"resourceType":"Patient","id":"p2","gender":"female"}

{"resourceType":"Encounter","id":"e1","status":"finished","class":{"code":"AMB"}}
"""

counts = Counter(r.resource_type for r in iter_ndjson(export))
for name, count in sorted(counts.items()):
    print(f"  {name}: {count}")

# ── 2. Errors carry the line number ──────────────────────────────

print("\n=== 2. Line Numbers in Errors ===\n")

try:
    list(iter_ndjson(export + '{"resourceType":"Patient","gender":"martian"}\n'))
except ValueError as e:
    print(f"  ✗ {e}")

# ── 3. Recursion limit ───────────────────────────────────────────

print("\n=== 3. Recursion Limit ===\n")


def code_system(depth: int) -> dict:
    concept = {"code": f"c{depth}"}
    for level in range(depth - 1, 0, -1):
        concept = {"code": f"c{level}", "concept": [concept]}
    return {
        "resourceType": "CodeSystem",
        "status": "active",
        "content": "complete",
        "concept": [concept],
    }


for depth in (3, 10):
    try:
        parse_resource(code_system(depth), max_recursion_depth=5)
        print(f"  Depth {depth}: ✓ Accepted")
    except RecursionTooDeepError as e:
        print(f"  Depth {depth}: ✗ Blocked at {e.path}")
