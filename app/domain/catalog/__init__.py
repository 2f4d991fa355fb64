"""
Catalog bounded context: domain layer.

This module contains all domain logic for the product catalog:
- Product entity and query results
- Field validation rules
- Search, filtering, pagination and statistics
"""
