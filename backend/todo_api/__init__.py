"""Todo API Package — CRUD service over a single MongoDB-backed todo collection.

Invariants:
    - Package root holds only the version string (import side-effects prohibited)

Design Decisions:
    - No re-exports: explicit imports only, no star exports
"""

__version__ = "1.0.0"
