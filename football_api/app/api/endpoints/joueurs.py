"""
Player endpoints.

These routes list, create, fetch, transfer and delete players.  The
list endpoint accepts optional ``equipeId`` and ``position`` filters.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Query, Response, status

from football_api.app.api.responses import (
    SQLITE_INTEGER_MAX,
    SQLITE_INTEGER_MIN,
    TRANSFER_ERROR,
    VALIDATION_ERROR,
    EntityId,
    error_response,
    paging_is_valid,
)
from football_api.app.core.config import settings
from football_api.app.core.errors import DuplicateError, NotFoundError, ValidationError
from football_api.app.schemas.joueur import CreateJoueurRequest, JoueurDto, validate_create_joueur
from football_api.app.schemas.page import Page
from football_api.app.services.joueur_service import JoueurService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=Page[JoueurDto])
async def list_joueurs(
    page: int = Query(0),
    size: int = Query(settings.default_page_size),
    sort_by: str = Query("nom", alias="sortBy"),
    sort_direction: str = Query("asc", alias="sortDirection"),
    equipe_id: Optional[int] = Query(None, alias="equipeId", ge=SQLITE_INTEGER_MIN, le=SQLITE_INTEGER_MAX),
    position: Optional[str] = Query(None),
):
    """Paginated list of players.

    - **sortBy**: `nom` or `position`; other values sort by `nom`.
    - **equipeId**: only players of this team.
    - **position**: only players whose position contains this text (case-insensitive).
    """
    logger.info(
        "GET /api/joueurs - page: %s, size: %s, sortBy: %s, sortDirection: %s, equipeId: %s, position: %s",
        page, size, sort_by, sort_direction, equipe_id, position,
    )
    if not paging_is_valid(page, size):
        return Response(status_code=status.HTTP_400_BAD_REQUEST)

    joueurs = await JoueurService.list_joueurs(page, size, sort_by, sort_direction, equipe_id, position)
    logger.info("Returning %s player(s) for page %s", joueurs.number_of_elements, page)
    return joueurs


@router.post("", response_model=JoueurDto, status_code=status.HTTP_201_CREATED)
async def create_joueur(request: CreateJoueurRequest):
    """Create a player.

    Returns 409 if the name is taken and 404 if ``equipeId`` is unknown.
    """
    logger.info("POST /api/joueurs - nom=%r position=%r equipeId=%s", request.nom, request.position, request.equipe_id)
    errors = validate_create_joueur(request)
    if errors:
        raise ValidationError(errors)

    try:
        joueur = await JoueurService.create_joueur(request)
    except DuplicateError as e:
        logger.warning("Player creation rejected: %s", e.message)
        return error_response(status.HTTP_409_CONFLICT, VALIDATION_ERROR, e.message)
    except NotFoundError as e:
        logger.warning("Player creation rejected: %s", e.message)
        return error_response(status.HTTP_404_NOT_FOUND, VALIDATION_ERROR, e.message)
    logger.info("Player created - id: %s, nom: %s", joueur.id, joueur.nom)
    return joueur


@router.get("/{joueur_id}", response_model=JoueurDto)
async def get_joueur(joueur_id: EntityId):
    logger.info("GET /api/joueurs/%s", joueur_id)
    joueur = await JoueurService.get_joueur(joueur_id)
    if joueur is None:
        logger.warning("No player with id %s", joueur_id)
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return joueur


@router.put("/{joueur_id}/transfer", response_model=JoueurDto)
async def transfer_joueur(
    joueur_id: EntityId,
    equipe_id: int = Query(..., alias="equipeId", ge=SQLITE_INTEGER_MIN, le=SQLITE_INTEGER_MAX),
):
    """Move a player to the team ``equipeId``, whatever its current team."""
    logger.info("PUT /api/joueurs/%s/transfer to team %s", joueur_id, equipe_id)
    try:
        joueur = await JoueurService.transfer_joueur(joueur_id, equipe_id)
    except NotFoundError as e:
        logger.warning("Transfer rejected: %s", e.message)
        return error_response(status.HTTP_404_NOT_FOUND, TRANSFER_ERROR, e.message)
    return joueur


@router.delete("/{joueur_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_joueur(joueur_id: EntityId) -> Response:
    logger.info("DELETE /api/joueurs/%s", joueur_id)
    if not await JoueurService.delete_joueur(joueur_id):
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
