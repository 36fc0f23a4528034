"""Personal Finance API package."""
