"""
Repository layer.

One repository per table, each wrapping an open ``sqlite3.Connection``
handed over by the service that owns the transaction.
"""

from .equipe_repository import EquipeRepository
from .joueur_repository import JoueurRepository
from .paging import PageRequest, PageResult

__all__ = ["EquipeRepository", "JoueurRepository", "PageRequest", "PageResult"]
