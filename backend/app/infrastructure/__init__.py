"""Infrastructure Layer — database, media host, identity and logging adapters.

Invariants:
    - Infrastructure never imports from services/
    - External calls wrapped with retry/error mapping where the collaborator can fail transiently
    - Each adapter is a process singleton built in the lifespan from explicit settings
"""
