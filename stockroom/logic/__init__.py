"""Core business logic layer.

Subpackages:
- stock: read-only stock reports (expiring soon, low stock, stock value)

Catalog mutations live on the domain aggregates; this package only reads.
"""
__all__ = ["stock"]
