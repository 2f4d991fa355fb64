"""
Catalog infrastructure adapters.

Concrete implementations of the catalog domain ports.
"""
