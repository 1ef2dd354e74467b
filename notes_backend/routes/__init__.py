# Routes package init
"""
Simple Notes Backend: API Routes Package
==========================================

Route Inventory:
    - notes.py:   GET/POST /notes, GET/PUT/DELETE /notes/{id}
    - health.py:  GET /  and  GET /health

Routes stay thin: extract data from the request, call NoteService, return
the schema with the right status code.
"""
