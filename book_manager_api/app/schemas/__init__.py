"""
Pydantic schema definitions for API payloads.

Schemas are separated from the domain dataclasses in ``models`` to
decouple the HTTP representation from the store.
"""
