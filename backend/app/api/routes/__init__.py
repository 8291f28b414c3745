"""Route Modules — one APIRouter per resource, included explicitly by main.py.

Store-scoped resources live under /api/{store_id}/<plural>; their GETs are the
public storefront reads, every other method goes through the ownership gate.
"""
