"""
Service layer for teams.

``EquipeService`` enforces the team business rules (unique name and
acronym, a player belongs to at most one team) and returns teams with
their full roster.  Each public method runs in a single database
transaction; any error raised inside it rolls back every write made by
that call.
"""

import logging
from typing import Optional

from football_api.app.core.db import transaction
from football_api.app.core.errors import ConflictError, DuplicateError, NotFoundError
from football_api.app.models import Equipe, Joueur, to_budget
from football_api.app.repositories import EquipeRepository, JoueurRepository, PageRequest
from football_api.app.schemas.equipe import CreateEquipeRequest, EquipeDto
from football_api.app.schemas.page import Page
from football_api.app.services.mappers import equipe_to_dto
from football_api.app.services.sorting import is_descending, resolve_sort_field

logger = logging.getLogger(__name__)

SORT_ALIASES = {
    "nom": "nom",
    "name": "nom",
    "acronyme": "acronyme",
    "acronym": "acronyme",
    "budget": "budget",
}


class EquipeService:
    """Business operations on teams and their rosters."""

    @classmethod
    async def list_equipes(
        cls,
        page: int,
        size: int,
        sort_by: Optional[str] = "nom",
        sort_direction: Optional[str] = "asc",
        nom: Optional[str] = None,
        acronyme: Optional[str] = None,
    ) -> Page[EquipeDto]:
        """Return a page of teams, each with its players.

        ``sort_by`` accepts ``nom``, ``acronyme`` or ``budget`` (English
        aliases ``name`` and ``acronym`` too); anything else sorts by
        ``nom``.  ``nom`` and ``acronyme`` optionally narrow the result
        to teams whose name/acronym contains the given text.
        """
        logger.info(
            "Listing teams - page: %s, size: %s, sortBy: %s, sortDirection: %s",
            page, size, sort_by, sort_direction,
        )
        page_request = PageRequest(
            page=page,
            size=size,
            sort_field=resolve_sort_field(sort_by, SORT_ALIASES, "nom"),
            descending=is_descending(sort_direction),
        )
        with transaction() as conn:
            equipes = EquipeRepository(conn).find_page(page_request, nom=nom, acronyme=acronyme)
            rosters = JoueurRepository(conn).find_by_equipe_ids(equipe.id for equipe in equipes.items)
        return Page[EquipeDto].from_result(equipes.map(lambda equipe: equipe_to_dto(equipe, rosters[equipe.id])))

    @classmethod
    async def create_equipe(cls, request: CreateEquipeRequest) -> EquipeDto:
        """Create a team and, if supplied, its players.

        The acronym is checked before the name.  Players are created in
        request order and bound to the new team; if any of them fails
        (e.g. a taken player name) nothing is persisted.
        """
        logger.info(
            "Creating team nom=%r acronyme=%r with %s player(s)",
            request.nom, request.acronyme, len(request.joueurs or []),
        )
        with transaction() as conn:
            equipes = EquipeRepository(conn)
            joueurs = JoueurRepository(conn)

            if equipes.exists_by_acronyme(request.acronyme):
                logger.warning("Team acronym already taken: %s", request.acronyme)
                raise DuplicateError(f"Une équipe avec l'acronyme '{request.acronyme}' existe déjà")
            if equipes.exists_by_nom(request.nom):
                logger.warning("Team name already taken: %s", request.nom)
                raise DuplicateError(f"Une équipe avec le nom '{request.nom}' existe déjà")

            equipe = equipes.save(Equipe(nom=request.nom, acronyme=request.acronyme, budget=to_budget(request.budget)))
            logger.info("Created team %s", equipe.id)

            roster = []
            for joueur_request in request.joueurs or []:
                if joueurs.exists_by_nom(joueur_request.nom):
                    logger.warning("Player name already taken: %s", joueur_request.nom)
                    raise DuplicateError(f"Un joueur avec le nom '{joueur_request.nom}' existe déjà")
                joueur = joueurs.save(
                    Joueur(nom=joueur_request.nom, position=joueur_request.position, equipe_id=equipe.id)
                )
                logger.info("Added player %r to team %r", joueur.nom, equipe.nom)
                roster.append(joueur)
        return equipe_to_dto(equipe, roster)

    @classmethod
    async def get_equipe(cls, equipe_id: int) -> Optional[EquipeDto]:
        """Retrieve a team by id, or ``None``."""
        logger.info("Fetching team %s", equipe_id)
        with transaction() as conn:
            equipe = EquipeRepository(conn).find_by_id(equipe_id)
            return cls._with_roster(conn, equipe)

    @classmethod
    async def get_equipe_by_acronyme(cls, acronyme: str) -> Optional[EquipeDto]:
        """Retrieve a team by exact acronym, or ``None``."""
        logger.info("Fetching team with acronym %s", acronyme)
        with transaction() as conn:
            equipe = EquipeRepository(conn).find_by_acronyme(acronyme)
            return cls._with_roster(conn, equipe)

    @classmethod
    async def get_equipe_by_nom(cls, nom: str) -> Optional[EquipeDto]:
        """Retrieve a team by exact name, or ``None``."""
        logger.info("Fetching team with name %s", nom)
        with transaction() as conn:
            equipe = EquipeRepository(conn).find_by_nom(nom)
            return cls._with_roster(conn, equipe)

    @classmethod
    async def add_joueur(cls, equipe_id: int, joueur_id: int) -> EquipeDto:
        """Put an unassigned player on a team.

        Raises ``NotFoundError`` if either id is unknown and
        ``ConflictError`` if the player already belongs to a team (this
        one included).
        """
        logger.info("Adding player %s to team %s", joueur_id, equipe_id)
        with transaction() as conn:
            equipe, joueur = cls._load_pair(conn, equipe_id, joueur_id)
            if joueur.equipe_id is not None:
                raise ConflictError("Le joueur est déjà dans une équipe")

            joueur.equipe_id = equipe.id
            JoueurRepository(conn).save(joueur)
            logger.info("Player %s added to team %s", joueur_id, equipe_id)
            return cls._with_roster(conn, equipe)

    @classmethod
    async def remove_joueur(cls, equipe_id: int, joueur_id: int) -> EquipeDto:
        """Take a player off a team's roster, leaving it unassigned.

        Raises ``NotFoundError`` if either id is unknown and
        ``ConflictError`` if the player is not on this team.
        """
        logger.info("Removing player %s from team %s", joueur_id, equipe_id)
        with transaction() as conn:
            equipe, joueur = cls._load_pair(conn, equipe_id, joueur_id)
            if joueur.equipe_id != equipe.id:
                raise ConflictError("Le joueur n'appartient pas à cette équipe")

            joueur.equipe_id = None
            JoueurRepository(conn).save(joueur)
            logger.info("Player %s removed from team %s", joueur_id, equipe_id)
            return cls._with_roster(conn, equipe)

    @classmethod
    async def delete_equipe(cls, equipe_id: int) -> bool:
        """Delete a team together with every player on its roster.

        Returns ``True`` if the team existed, ``False`` otherwise.
        """
        logger.info("Deleting team %s", equipe_id)
        with transaction() as conn:
            roster_size = JoueurRepository(conn).count_by_equipe_id(equipe_id)
            deleted = EquipeRepository(conn).delete_by_id(equipe_id)
        if deleted:
            logger.info("Deleted team %s and %s player(s)", equipe_id, roster_size)
        else:
            logger.warning("Team %s not found for deletion", equipe_id)
        return deleted

    @staticmethod
    def _load_pair(conn, equipe_id: int, joueur_id: int):
        equipe = EquipeRepository(conn).find_by_id(equipe_id)
        if equipe is None:
            raise NotFoundError(f"Équipe non trouvée avec l'ID: {equipe_id}")
        joueur = JoueurRepository(conn).find_by_id(joueur_id)
        if joueur is None:
            raise NotFoundError(f"Joueur non trouvé avec l'ID: {joueur_id}")
        return equipe, joueur

    @staticmethod
    def _with_roster(conn, equipe: Optional[Equipe]) -> Optional[EquipeDto]:
        if equipe is None:
            return None
        return equipe_to_dto(equipe, JoueurRepository(conn).find_by_equipe_id(equipe.id))
