"""
Data access for the ``equipes`` table.
"""

import sqlite3
from typing import List, Optional

from football_api.app.core.errors import DuplicateError
from football_api.app.models import Equipe
from football_api.app.repositories.paging import PageRequest, PageResult, contains_pattern

SORTABLE_COLUMNS = {"nom", "acronyme", "budget"}


class EquipeRepository:
    """Queries and mutations on teams, bound to one open connection."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        self.conn = conn

    def find_by_id(self, equipe_id: int) -> Optional[Equipe]:
        row = self.conn.execute("SELECT * FROM equipes WHERE id = ?", (equipe_id,)).fetchone()
        return Equipe.from_row(row) if row else None

    def find_by_acronyme(self, acronyme: str) -> Optional[Equipe]:
        row = self.conn.execute("SELECT * FROM equipes WHERE acronyme = ?", (acronyme,)).fetchone()
        return Equipe.from_row(row) if row else None

    def find_by_nom(self, nom: str) -> Optional[Equipe]:
        row = self.conn.execute("SELECT * FROM equipes WHERE nom = ?", (nom,)).fetchone()
        return Equipe.from_row(row) if row else None

    def exists_by_acronyme(self, acronyme: str) -> bool:
        return self._exists("acronyme = ?", acronyme)

    def exists_by_nom(self, nom: str) -> bool:
        return self._exists("nom = ?", nom)

    def save(self, equipe: Equipe) -> Equipe:
        """Insert ``equipe`` when it has no id yet, otherwise update it.

        Raises ``DuplicateError`` if SQLite rejects the row on one of the
        unique columns.
        """
        try:
            if equipe.id is None:
                cursor = self.conn.execute(
                    "INSERT INTO equipes (nom, acronyme, budget) VALUES (?, ?, ?)",
                    (equipe.nom, equipe.acronyme, equipe.budget),
                )
                equipe.id = cursor.lastrowid
            else:
                self.conn.execute(
                    "UPDATE equipes SET nom = ?, acronyme = ?, budget = ? WHERE id = ?",
                    (equipe.nom, equipe.acronyme, equipe.budget, equipe.id),
                )
        except sqlite3.IntegrityError as e:
            if "UNIQUE" not in str(e):
                raise
            raise DuplicateError(
                f"Une équipe avec le nom '{equipe.nom}' ou l'acronyme '{equipe.acronyme}' existe déjà"
            ) from e
        return equipe

    def delete_by_id(self, equipe_id: int) -> bool:
        """Delete a team; its players go with it through ON DELETE CASCADE."""
        cursor = self.conn.execute("DELETE FROM equipes WHERE id = ?", (equipe_id,))
        return cursor.rowcount > 0

    def find_page(
        self,
        page_request: PageRequest,
        nom: Optional[str] = None,
        acronyme: Optional[str] = None,
    ) -> PageResult[Equipe]:
        """Return one sorted page of teams.

        ``nom`` and ``acronyme`` are optional case-insensitive substring
        filters; when both are given a team must match both.
        """
        if page_request.sort_field not in SORTABLE_COLUMNS:
            raise ValueError(f"Cannot sort teams by {page_request.sort_field!r}")

        where_clauses: List[str] = []
        params: list = []
        if nom:
            where_clauses.append("ulower(nom) LIKE ? ESCAPE '\\'")
            params.append(contains_pattern(nom))
        if acronyme:
            where_clauses.append("ulower(acronyme) LIKE ? ESCAPE '\\'")
            params.append(contains_pattern(acronyme))
        where_sql = (" WHERE " + " AND ".join(where_clauses)) if where_clauses else ""

        total = self.conn.execute(f"SELECT COUNT(*) AS total FROM equipes{where_sql}", params).fetchone()["total"]
        rows = self.conn.execute(
            f"SELECT * FROM equipes{where_sql} ORDER BY {page_request.order_by()} LIMIT ? OFFSET ?",
            (*params, page_request.size, page_request.offset),
        ).fetchall()
        return PageResult(
            items=[Equipe.from_row(row) for row in rows],
            total=total,
            page=page_request.page,
            size=page_request.size,
        )

    def _exists(self, condition: str, value) -> bool:
        row = self.conn.execute(f"SELECT 1 FROM equipes WHERE {condition} LIMIT 1", (value,)).fetchone()
        return row is not None
