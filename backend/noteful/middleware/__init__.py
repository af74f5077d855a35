# Middleware package init
"""
Noteful Backend — Middleware Package
======================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters!):
    Request → [CORS] → [GZip] → [Request ID] → [Logging] → [Bearer Auth] → Route Handler

    Why this order:
    1. CORS first: browser preflight (OPTIONS) requests carry no token and
       must be answered before the auth gate sees them
    2. GZip: Compresses bodies over 500 bytes (Starlette built-in)
    3. Request ID: Generate correlation ID for logging and tracing
    4. Logging: Logs every request, including the ones auth rejects
    5. Bearer Auth: Rejects unauthenticated calls before any resource logic
"""
