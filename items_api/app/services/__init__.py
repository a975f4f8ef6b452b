"""
Service layer.

``item_store`` talks to the database, ``item_cache`` holds the shared
in-memory copies, and ``item_service`` orchestrates the two for each
API operation.  API handlers only ever call ``ItemService``.
"""
