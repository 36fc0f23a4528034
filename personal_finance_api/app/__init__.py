"""
Application package initializer.

The API is split by concern: ``core`` (configuration, logging, database
and security helpers), ``schemas`` (pydantic request/response models),
``services`` (one MongoDB-backed service per entity) and ``api``
(versioned FastAPI routers).  ``seed`` loads fixture data into empty
collections at startup.
"""
