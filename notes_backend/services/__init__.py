# Services package init
"""
Simple Notes Backend: Services Layer
======================================

Service Inventory:
    - NoteService: maps /notes requests onto NotesStore operations and
      NotesStore results onto response schemas
"""
