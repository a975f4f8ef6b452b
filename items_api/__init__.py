"""
Items API: a CRUD service for ``(id, title)`` items kept in SQLite and
mirrored in an in-process read cache.

Build the application with :func:`items_api.app.main.create_app`.
"""
