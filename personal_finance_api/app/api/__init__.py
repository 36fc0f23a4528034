"""HTTP API package.  Versioned routers live in subpackages (``v1``)."""
