"""Live feed domain services: registry, events, odds, clock and spawner.

This package contains the simulation logic that should be driven by the
scheduler and read by socket handlers and HTTP routes, keeping transport
concerns separated from core match mechanics.
"""
