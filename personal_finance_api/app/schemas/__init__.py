"""
Pydantic schema definitions for API payloads.

Each entity (accounts, goals, tags, transactions, users) defines its own
``<Entity>Create`` model for request bodies and ``<Entity>Read`` model for
responses.  Schemas are kept separate from the stored BSON documents;
the service layer converts between the two.
"""
