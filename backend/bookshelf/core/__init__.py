"""Core Layer: record store, identifiers, errors and reply formatting.

Invariants:
    - No module in core/ imports from services/, api/ or infrastructure/
    - Nothing here is async; locking is the shell's job
"""
