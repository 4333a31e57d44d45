# Services package init
"""
Todo API — Services Layer
==========================

What:  Logic sitting between routes (HTTP) and the store / framework internals.

Service Inventory:
    - TodoService:       Todo CRUD over a TodoStore, raising NotFoundError on misses
    - openapi_service:   OpenAPI document generation and serialization
    - explorer_service:  Swagger UI asset lookup and rendering
"""
