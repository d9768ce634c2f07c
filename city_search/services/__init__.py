"""Services Layer - imperative shell around the pure search state machine.

Invariants:
    - Services perform IO (HTTP) and feed results back through core entry points
    - No service mutates CityBrowserState fields directly
"""
