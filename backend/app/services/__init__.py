"""Services Layer — per-entity handlers, the authorization gate and media cleanup.

Invariants:
    - Every mutating handler runs the gate before staging any write
    - Handlers commit once per request; media cleanup is scheduled after the commit

Design Decisions:
    - One handler file per entity for locality
"""
