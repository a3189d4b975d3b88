"""
Application package initializer.

The project is organised into layers: ``core`` (configuration,
logging, storage and security primitives), ``repositories`` (storage
abstractions for admins, events and participations), ``services``
(business rules) and ``api`` (HTTP routing).  The ``create_app``
factory in ``main`` wires them together.
"""

from .main import create_app  # noqa: F401
