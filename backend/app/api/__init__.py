"""API Layer — routers, per-request dependencies and the error envelope.

Invariants:
    - Routes validate the body, resolve the caller and hand both to a handler;
      they never touch the session directly
"""
