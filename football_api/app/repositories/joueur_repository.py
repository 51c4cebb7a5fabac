"""
Data access for the ``joueurs`` table.
"""

import sqlite3
from typing import Dict, Iterable, List, Optional

from football_api.app.core.errors import DuplicateError
from football_api.app.models import Joueur
from football_api.app.repositories.paging import PageRequest, PageResult, contains_pattern

SORTABLE_COLUMNS = {"nom", "position"}


class JoueurRepository:
    """Queries and mutations on players, bound to one open connection."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        self.conn = conn

    def find_by_id(self, joueur_id: int) -> Optional[Joueur]:
        row = self.conn.execute("SELECT * FROM joueurs WHERE id = ?", (joueur_id,)).fetchone()
        return Joueur.from_row(row) if row else None

    def find_by_nom(self, nom: str) -> Optional[Joueur]:
        row = self.conn.execute("SELECT * FROM joueurs WHERE nom = ?", (nom,)).fetchone()
        return Joueur.from_row(row) if row else None

    def exists_by_nom(self, nom: str) -> bool:
        row = self.conn.execute("SELECT 1 FROM joueurs WHERE nom = ? LIMIT 1", (nom,)).fetchone()
        return row is not None

    def find_by_equipe_id(self, equipe_id: int) -> List[Joueur]:
        """Return a team's roster in the order players joined the table."""
        rows = self.conn.execute(
            "SELECT * FROM joueurs WHERE equipe_id = ? ORDER BY id", (equipe_id,)
        ).fetchall()
        return [Joueur.from_row(row) for row in rows]

    def find_by_equipe_ids(self, equipe_ids: Iterable[int]) -> Dict[int, List[Joueur]]:
        """Load the rosters of several teams with a single query."""
        ids = list(equipe_ids)
        rosters: Dict[int, List[Joueur]] = {equipe_id: [] for equipe_id in ids}
        if not ids:
            return rosters
        placeholders = ", ".join("?" for _ in ids)
        rows = self.conn.execute(
            f"SELECT * FROM joueurs WHERE equipe_id IN ({placeholders}) ORDER BY id", ids
        ).fetchall()
        for row in rows:
            rosters[row["equipe_id"]].append(Joueur.from_row(row))
        return rosters

    def count_by_equipe_id(self, equipe_id: int) -> int:
        row = self.conn.execute(
            "SELECT COUNT(*) AS total FROM joueurs WHERE equipe_id = ?", (equipe_id,)
        ).fetchone()
        return row["total"]

    def save(self, joueur: Joueur) -> Joueur:
        """Insert ``joueur`` when it has no id yet, otherwise update it."""
        try:
            if joueur.id is None:
                cursor = self.conn.execute(
                    "INSERT INTO joueurs (nom, position, equipe_id) VALUES (?, ?, ?)",
                    (joueur.nom, joueur.position, joueur.equipe_id),
                )
                joueur.id = cursor.lastrowid
            else:
                self.conn.execute(
                    "UPDATE joueurs SET nom = ?, position = ?, equipe_id = ? WHERE id = ?",
                    (joueur.nom, joueur.position, joueur.equipe_id, joueur.id),
                )
        except sqlite3.IntegrityError as e:
            if "UNIQUE" not in str(e):
                raise
            raise DuplicateError(f"Un joueur avec le nom '{joueur.nom}' existe déjà") from e
        return joueur

    def delete_by_id(self, joueur_id: int) -> bool:
        cursor = self.conn.execute("DELETE FROM joueurs WHERE id = ?", (joueur_id,))
        return cursor.rowcount > 0

    def find_page(
        self,
        page_request: PageRequest,
        equipe_id: Optional[int] = None,
        position: Optional[str] = None,
    ) -> PageResult[Joueur]:
        """Return one sorted page of players.

        Filters combine as follows: team and position both given, the
        player must be on that team and its position must contain the
        text (case-insensitive); only one given, that filter alone;
        neither, every player.
        """
        if page_request.sort_field not in SORTABLE_COLUMNS:
            raise ValueError(f"Cannot sort players by {page_request.sort_field!r}")

        where_clauses: List[str] = []
        params: list = []
        if equipe_id is not None:
            where_clauses.append("equipe_id = ?")
            params.append(equipe_id)
        if position is not None:
            where_clauses.append("ulower(position) LIKE ? ESCAPE '\\'")
            params.append(contains_pattern(position))
        where_sql = (" WHERE " + " AND ".join(where_clauses)) if where_clauses else ""

        total = self.conn.execute(f"SELECT COUNT(*) AS total FROM joueurs{where_sql}", params).fetchone()["total"]
        rows = self.conn.execute(
            f"SELECT * FROM joueurs{where_sql} ORDER BY {page_request.order_by()} LIMIT ? OFFSET ?",
            (*params, page_request.size, page_request.offset),
        ).fetchall()
        return PageResult(
            items=[Joueur.from_row(row) for row in rows],
            total=total,
            page=page_request.page,
            size=page_request.size,
        )
