"""
Application package.

``main`` assembles the FastAPI app; ``core`` holds configuration,
logging, database access and the error types; ``repositories``,
``services`` and ``api`` are the storage, business and HTTP layers.
"""

from .main import app  # noqa: F401
