# Middleware package init
"""
Blog API — Middleware Package
==============================

Middleware Chain (order matters):
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    Responses travel back through the chain in reverse, so the request id
    header is set and the access log sees the final status code.
"""
