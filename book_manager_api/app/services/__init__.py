"""
Service layer abstraction.

Each service encapsulates the logic for a domain on top of its
repository.  API handlers talk to services only, so the in‑memory
repository could be replaced without changing the routes.
"""
