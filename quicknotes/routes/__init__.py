# Routes package init
"""
QuickNotes Backend - API Routes Package
========================================

Route Inventory:
    - notes.py:   GET/POST       /api/notes
                  GET/PUT/DELETE /api/notes/{id}
    - health.py:  GET            /healthz, /health

Routes stay thin: read the request, call NoteService, pick the status code.
"""
