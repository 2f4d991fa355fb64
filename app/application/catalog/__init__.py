"""
Catalog application layer.

One use case per catalog operation. Use cases depend on the
ProductRepository port only.
"""
