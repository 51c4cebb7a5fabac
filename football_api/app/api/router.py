"""
Top-level API router.

Aggregates the domain routers under ``/api``: teams under
``/equipes`` and players under ``/joueurs``.
"""

from fastapi import APIRouter

from .endpoints import equipes, joueurs

router = APIRouter()

router.include_router(equipes.router, prefix="/equipes", tags=["equipes"])
router.include_router(joueurs.router, prefix="/joueurs", tags=["joueurs"])
