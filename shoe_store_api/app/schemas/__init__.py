"""
Pydantic schema definitions for API payloads.

Schemas double as the stored document format of the durable map, so
the JSON written to disk matches what the API returns.
"""
