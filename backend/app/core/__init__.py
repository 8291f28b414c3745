"""Core Layer — domain vocabulary shared by every other layer.

Invariants:
    - Imports nothing from api/, services/, infrastructure/, db/ or models/
    - No IO: asset id derivation and the error hierarchy are plain functions and classes
"""
