"""
Service layer abstraction.

Each service encapsulates the logic for one entity type on top of its
record store.  Endpoints talk to services, never to stores directly.
"""
