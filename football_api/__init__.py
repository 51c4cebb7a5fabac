"""
Top-level package for the Football API.

All functionality lives in submodules under ``app``; run the server
with ``uvicorn football_api.app.main:app`` or ``python run.py``.
"""

__all__ = []
