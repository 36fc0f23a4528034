"""
Service layer.

Each service wraps one MongoDB collection behind the interfaces in
``interfaces.py``.  Services are created once at startup and handed to
the API routes through the registry stored on ``app.state``.
"""
