"""Model Context Protocol tool server for fhir-codec.

Requires: pip install fhir-codec[mcp]
"""
