# Middleware package init
"""
QuickNotes Backend - Middleware Package
========================================

Middleware Chain:
    Request → [Request ID] → [CORS] → [Logging] → [GZip] → Route Handler

    - Request ID outermost: every response, including preflights, carries
      X-Request-ID
    - CORS next: OPTIONS preflights are answered (204) before the router
      runs, and every response gets the allow-list headers on the way out
    - Request ID before Logging so the access line carries the ID
"""
