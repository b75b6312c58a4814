# Services package init
"""
QuickNotes Backend - Services Layer
====================================

What:  Business logic layer sitting between routes (HTTP) and the note store.
How:   Services accept plain values, apply business rules, and return schemas.
       They're injected into routes via FastAPI's dependency injection.

Service Inventory:
    - NoteService: list / get / create / update / delete over a NoteStore
"""
