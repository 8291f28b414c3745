"""Database Layer — the declarative Base that models and migrations share."""
