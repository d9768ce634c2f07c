"""Infrastructure Layer - external service clients and cross-cutting concerns.

Invariants:
    - Infrastructure never imports core state machine logic (errors only)
    - Every external failure is mapped to a CitySearchError subclass

Design Decisions:
    - Thin wrappers over raw clients: error mapping lives in one place
"""
