"""
Product Catalog API.

Application package root. A small HTTP service exposing CRUD and query
operations over an in-memory product catalog, laid out as hexagonal
architecture (ports & adapters).

Bounded contexts:
    - catalog: Product records, search, filtering, pagination, statistics.

Layers:
    - domain: Pure business logic, entities, field rules, ports (ABCs), errors.
    - application: Use cases, DTOs, orchestration.
    - infrastructure: Adapters implementing domain ports (in-memory store).
    - interfaces: FastAPI routers, Pydantic schemas, request pipeline stages.
    - shared: Cross-cutting concerns (errors, security, logging).
"""
