"""
Pydantic schema definitions for API payloads.

Each entity (users, orders) defines its request bodies and its frozen
record type in its own module.
"""
