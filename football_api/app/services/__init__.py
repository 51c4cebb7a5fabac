"""
Service layer.

Each service encapsulates the business rules of one domain (teams,
players) and owns the transaction boundary of every call it serves.
API handlers talk to services only, never to repositories.
"""
