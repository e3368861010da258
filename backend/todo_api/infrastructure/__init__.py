"""Infrastructure Layer — MongoDB client, repository and logging setup.

Invariants:
    - Every driver failure leaves this layer as DatabaseError (core/errors.py)
"""
