# Services package init
"""
Noteful Backend — Services Layer
==================================

What:  Everything between the routes (HTTP) and the database.

Service Inventory:
    - validation:     Required / at-least-one field checks on request bodies
    - folder_store:   FolderStore, SQL for noteful_folders
    - note_store:     NoteStore, SQL for noteful_notes
    - sanitizer:      clean_html(), neutralizes markup in free-text fields
    - serialization:  Stored record → response model

Stores receive their AsyncSession through FastAPI's dependency injection
(`get_folder_store`, `get_note_store`); nothing in this package reaches for
a global connection.
"""
