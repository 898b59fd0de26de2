"""Bookshelf: WebSocket CRUD server over an in-memory record store.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
