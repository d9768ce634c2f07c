"""Pydantic Schemas - validation at system boundaries.

Invariants:
    - opendatasoft.py validates what the remote endpoint returns
    - browser.py validates what the presentation layer sends and receives
    - Domain enums from core/ used for enum fields
"""
