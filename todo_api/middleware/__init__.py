# Middleware package init
"""
Todo API — Middleware Package
==============================

Middleware Chain:
    Request → [Request ID] → [Logging] → Route Handler

    1. Request ID: Assign correlation ID (returned as X-Request-ID)
    2. Logging: One access line per request, tagged with the request ID
"""
