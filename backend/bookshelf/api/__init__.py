"""API Layer: FastAPI routes, the record WebSocket and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Routes never touch the store directly (delegate to services)
"""
