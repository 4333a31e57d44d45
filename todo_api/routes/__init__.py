# Routes package init
"""
Todo API — API Routes Package
==============================

Route Inventory:
    - todos.py:     GET    /todos              (list todos)
                    POST   /todos              (create a todo)
                    GET    /todos/{todo_id}    (get one todo)
                    PUT    /todos/{todo_id}    (update one todo)
                    DELETE /todos/{todo_id}    (delete one todo)
    - explorer.py:  GET    /explorer/swagger.json  (OpenAPI document)
                    GET    /explorer/{path}        (Swagger UI assets)

Anything else falls through to the catch-all 404 registered in main.py.

Design Principle:
    Routes are THIN: they declare the HTTP contract and delegate to services.
"""
