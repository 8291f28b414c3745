"""Store Admin API — owner-facing admin backend for multi-store e-commerce catalogs.

Layout: api/ (HTTP) → services/ (gate + handlers) → models/ (ORM) and
infrastructure/ (database, media host, identity, logging), with core/ below all.
"""
