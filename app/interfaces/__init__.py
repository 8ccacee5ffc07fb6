"""
Interfaces layer package.

Contains FastAPI routers, request records bound by the binding engine,
and Pydantic response schemas. No business logic belongs here.
Routes call use cases and return responses.
"""
