"""
Service layer.

Each service encapsulates the business rules of a domain and talks to
storage only through the repository interfaces, so the API handlers
never see the storage engine.
"""
