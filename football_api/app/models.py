"""
Persistence records for teams and players.

These are plain dataclasses mirroring the ``equipes`` and ``joueurs``
tables.  A player only stores the id of its team; the team name shown
in player views is looked up by id rather than held as an object
reference.
"""

import sqlite3
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

BUDGET_QUANTUM = Decimal("0.01")


def to_budget(value) -> Decimal:
    """Normalise a budget to a two-decimal ``Decimal``."""
    return Decimal(str(value)).quantize(BUDGET_QUANTUM)


@dataclass
class Equipe:
    nom: str
    acronyme: str
    budget: Decimal
    id: Optional[int] = None

    @classmethod
    def from_row(cls, row: sqlite3.Row) -> "Equipe":
        return cls(
            id=row["id"],
            nom=row["nom"],
            acronyme=row["acronyme"],
            budget=to_budget(row["budget"]),
        )


@dataclass
class Joueur:
    nom: str
    position: str
    equipe_id: Optional[int] = None
    id: Optional[int] = None

    @classmethod
    def from_row(cls, row: sqlite3.Row) -> "Joueur":
        return cls(
            id=row["id"],
            nom=row["nom"],
            position=row["position"],
            equipe_id=row["equipe_id"],
        )
