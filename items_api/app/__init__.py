"""
Application package initializer.

This package contains the application factory for the Items API and
its submodules.  Configuration, logging and database access live in
``core``; request and response models in ``schemas``; the store, the
read cache and the orchestration between them in ``services``; and
the HTTP routes under ``api/<version>/``.

Unlike a typical module-level ``app`` object, the application is built
on demand by :func:`items_api.app.main.create_app` so that tests and
the launcher can inject their own store and cache.
"""
