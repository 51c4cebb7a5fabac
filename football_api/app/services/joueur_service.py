"""
Service layer for players.

Players can be created on their own (optionally straight onto a team),
listed with team/position filters, transferred and deleted.  The owning
team's name is looked up by id whenever a player view is built.
"""

import logging
from typing import Dict, List, Optional

from football_api.app.core.db import transaction
from football_api.app.core.errors import DuplicateError, NotFoundError
from football_api.app.models import Joueur
from football_api.app.repositories import EquipeRepository, JoueurRepository, PageRequest
from football_api.app.schemas.joueur import CreateJoueurRequest, JoueurDto
from football_api.app.schemas.page import Page
from football_api.app.services.mappers import joueur_to_dto
from football_api.app.services.sorting import is_descending, resolve_sort_field

logger = logging.getLogger(__name__)

SORT_ALIASES = {
    "nom": "nom",
    "name": "nom",
    "position": "position",
}


class JoueurService:
    """Business operations on players."""

    @classmethod
    async def list_joueurs(
        cls,
        page: int,
        size: int,
        sort_by: Optional[str] = "nom",
        sort_direction: Optional[str] = "asc",
        equipe_id: Optional[int] = None,
        position: Optional[str] = None,
    ) -> Page[JoueurDto]:
        """Return a page of players.

        - ``sort_by``: ``nom`` (alias ``name``) or ``position``; anything
          else sorts by ``nom``.
        - ``equipe_id``: only players of that team.
        - ``position``: only players whose position contains the text,
          ignoring case.  Combined with ``equipe_id`` both must hold.
        """
        logger.info(
            "Listing players - page: %s, size: %s, sortBy: %s, sortDirection: %s, equipeId: %s, position: %s",
            page, size, sort_by, sort_direction, equipe_id, position,
        )
        page_request = PageRequest(
            page=page,
            size=size,
            sort_field=resolve_sort_field(sort_by, SORT_ALIASES, "nom"),
            descending=is_descending(sort_direction),
        )
        with transaction() as conn:
            result = JoueurRepository(conn).find_page(page_request, equipe_id=equipe_id, position=position)
            team_names = cls._team_names(conn, result.items)
        return Page[JoueurDto].from_result(
            result.map(lambda joueur: joueur_to_dto(joueur, team_names.get(joueur.equipe_id)))
        )

    @classmethod
    async def create_joueur(cls, request: CreateJoueurRequest) -> JoueurDto:
        """Create a player, unassigned or on the team given by ``equipe_id``.

        Raises ``DuplicateError`` if the name is taken and
        ``NotFoundError`` if ``equipe_id`` does not resolve.
        """
        logger.info("Creating player nom=%r position=%r equipeId=%s", request.nom, request.position, request.equipe_id)
        with transaction() as conn:
            joueurs = JoueurRepository(conn)
            if joueurs.exists_by_nom(request.nom):
                logger.warning("Player name already taken: %s", request.nom)
                raise DuplicateError(f"Un joueur avec le nom '{request.nom}' existe déjà")

            equipe = None
            if request.equipe_id is not None:
                equipe = EquipeRepository(conn).find_by_id(request.equipe_id)
                if equipe is None:
                    raise NotFoundError(f"Équipe avec l'ID {request.equipe_id} non trouvée")

            joueur = joueurs.save(
                Joueur(nom=request.nom, position=request.position, equipe_id=equipe.id if equipe else None)
            )
            logger.info("Created player %s", joueur.id)
        return joueur_to_dto(joueur, equipe.nom if equipe else None)

    @classmethod
    async def get_joueur(cls, joueur_id: int) -> Optional[JoueurDto]:
        """Retrieve a player by id, or ``None``."""
        logger.info("Fetching player %s", joueur_id)
        with transaction() as conn:
            joueur = JoueurRepository(conn).find_by_id(joueur_id)
            if joueur is None:
                return None
            return joueur_to_dto(joueur, cls._team_names(conn, [joueur]).get(joueur.equipe_id))

    @classmethod
    async def list_joueurs_by_equipe(cls, equipe_id: int) -> List[JoueurDto]:
        """Return the whole roster of a team, unpaged."""
        logger.info("Listing players of team %s", equipe_id)
        with transaction() as conn:
            equipe = EquipeRepository(conn).find_by_id(equipe_id)
            if equipe is None:
                raise NotFoundError(f"Équipe avec l'ID {equipe_id} non trouvée")
            return [joueur_to_dto(joueur, equipe.nom) for joueur in JoueurRepository(conn).find_by_equipe_id(equipe_id)]

    @classmethod
    async def transfer_joueur(cls, joueur_id: int, equipe_id: int) -> JoueurDto:
        """Move a player to another team.

        The player's current team, if any, is overwritten without any
        further check.  Raises ``NotFoundError`` if either id is unknown.
        """
        logger.info("Transferring player %s to team %s", joueur_id, equipe_id)
        with transaction() as conn:
            joueurs = JoueurRepository(conn)
            joueur = joueurs.find_by_id(joueur_id)
            if joueur is None:
                raise NotFoundError(f"Joueur avec l'ID {joueur_id} non trouvé")
            equipe = EquipeRepository(conn).find_by_id(equipe_id)
            if equipe is None:
                raise NotFoundError(f"Équipe avec l'ID {equipe_id} non trouvée")

            joueur.equipe_id = equipe.id
            joueurs.save(joueur)
        logger.info("Player %r transferred to team %r", joueur.nom, equipe.nom)
        return joueur_to_dto(joueur, equipe.nom)

    @classmethod
    async def delete_joueur(cls, joueur_id: int) -> bool:
        """Delete a player by id.

        Returns ``True`` if a record was deleted, ``False`` otherwise.
        """
        logger.info("Deleting player %s", joueur_id)
        with transaction() as conn:
            deleted = JoueurRepository(conn).delete_by_id(joueur_id)
        if deleted:
            logger.info("Deleted player %s", joueur_id)
        else:
            logger.warning("Player %s not found for deletion", joueur_id)
        return deleted

    @staticmethod
    def _team_names(conn, joueurs: List[Joueur]) -> Dict[int, str]:
        """Look up the names of the teams owning ``joueurs``."""
        equipes = EquipeRepository(conn)
        names: Dict[int, str] = {}
        for equipe_id in {joueur.equipe_id for joueur in joueurs if joueur.equipe_id is not None}:
            equipe = equipes.find_by_id(equipe_id)
            if equipe is not None:
                names[equipe_id] = equipe.nom
        return names
