"""Core Layer - pure search state machine, no IO, no async, no HTTP.

Invariants:
    - No module in core/ imports from services/, api/, schemas/ or infrastructure/
    - State mutation happens only through CityBrowserState entry points
    - Projections (sort, suggestions) never mutate the ResultStore

Design Decisions:
    - Functional core separated from imperative shell: services/ runs the fetches
"""
