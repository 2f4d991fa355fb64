"""
Interfaces layer package.

Contains FastAPI routers, Pydantic response schemas, and the
request pipeline stages. No business logic belongs here.
Routes call use cases and return responses.
"""
