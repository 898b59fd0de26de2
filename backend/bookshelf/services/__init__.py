"""Services Layer: shared store handle and action dispatch.

Invariants:
    - Every store call goes through the shared handle's lock
    - Dispatch uses an explicit dict mapping (no auto-discovery)
"""
