"""
HTTP routing layer.

``router`` aggregates the domain routers defined in ``endpoints`` and
is mounted by ``create_app``.  ``deps`` exposes the services stored on
the application state as FastAPI dependencies.
"""
