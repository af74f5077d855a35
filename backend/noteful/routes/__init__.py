# Routes package init
"""
Noteful Backend — API Routes Package
======================================

What:  HTTP route handlers that accept requests and return responses.

Route Inventory:
    - folders.py:  /api/folders, /api/folders/{folder_id}
    - notes.py:    /api/notes, /api/notes/{note_id}

Design Principle:
    Routes stay THIN: resolve the record, run the field checks, call the
    store, serialize. SQL lives in the stores, presence rules in
    services/validation.py, escaping in services/sanitizer.py.
"""
