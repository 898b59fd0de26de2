"""Pydantic Schemas: record shapes and the inbound action protocol.

Invariants:
    - Schemas validate at the system boundary (inbound WebSocket frames)
"""
