"""
Yahime API: a CRUD service for users, categories, subcategories and summaries.

Application package root. This is a modular monolith using
hexagonal architecture (ports & adapters) with domain-driven design.

Bounded contexts:
    - catalog: Users, categories, subcategories and summaries.

Layers:
    - domain: Pure business logic, entities, ports (ABCs), errors.
    - application: Use cases, DTOs, orchestration.
    - infrastructure: Adapters (SQLAlchemy) implementing domain ports.
    - interfaces: FastAPI routers, request records, Pydantic response schemas.
    - shared: Cross-cutting concerns (binding engine, errors, middleware, logging).
"""
