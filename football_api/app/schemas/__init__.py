"""
Pydantic schema definitions for API payloads.

Schemas are separated from the persistence records in ``models`` so
the JSON contract (French field names, camelCase ids) does not leak
into the storage layer.
"""
