"""
Team endpoints.

These routes list and create teams, look them up by id, name or
acronym, and add or remove players from a roster.  Roster mutations
answer every business failure (unknown team, unknown player, player
already assigned, player not on the team) with 400.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Query, Response, status

from football_api.app.api.responses import VALIDATION_ERROR, EntityId, error_response, paging_is_valid
from football_api.app.core.config import settings
from football_api.app.core.errors import ConflictError, DuplicateError, NotFoundError, ValidationError
from football_api.app.schemas.equipe import CreateEquipeRequest, EquipeDto, validate_create_equipe
from football_api.app.schemas.joueur import JoueurDto
from football_api.app.schemas.page import Page
from football_api.app.services.equipe_service import EquipeService
from football_api.app.services.joueur_service import JoueurService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=Page[EquipeDto])
async def list_equipes(
    page: int = Query(0),
    size: int = Query(settings.default_page_size),
    sort_by: str = Query("nom", alias="sortBy"),
    sort_direction: str = Query("asc", alias="sortDirection"),
    nom: Optional[str] = Query(None, description="Filtre: le nom contient ce texte"),
    acronyme: Optional[str] = Query(None, description="Filtre: l'acronyme contient ce texte"),
):
    """Paginated list of teams with their players.

    - **page** starts at 0; **size** must be between 1 and 100.
    - **sortBy**: `nom`, `acronyme` or `budget`; other values sort by `nom`.
    - **sortDirection**: `desc` for descending, anything else ascending.
    """
    logger.info(
        "GET /api/equipes - page: %s, size: %s, sortBy: %s, sortDirection: %s",
        page, size, sort_by, sort_direction,
    )
    if not paging_is_valid(page, size):
        return Response(status_code=status.HTTP_400_BAD_REQUEST)

    equipes = await EquipeService.list_equipes(page, size, sort_by, sort_direction, nom=nom, acronyme=acronyme)
    logger.info("Returning %s team(s) for page %s", equipes.number_of_elements, page)
    return equipes


@router.post("", response_model=EquipeDto, status_code=status.HTTP_201_CREATED)
async def create_equipe(request: CreateEquipeRequest):
    """Create a team, optionally with its players.

    Returns 409 if the acronym or the name is already used.
    """
    logger.info("POST /api/equipes - nom=%r acronyme=%r", request.nom, request.acronyme)
    errors = validate_create_equipe(request)
    if errors:
        raise ValidationError(errors)

    try:
        equipe = await EquipeService.create_equipe(request)
    except DuplicateError as e:
        logger.warning("Team creation rejected: %s", e.message)
        return error_response(status.HTTP_409_CONFLICT, VALIDATION_ERROR, e.message)
    logger.info("Team created - id: %s, nom: %s", equipe.id, equipe.nom)
    return equipe


@router.get("/acronyme/{acronyme}", response_model=EquipeDto)
async def get_equipe_by_acronyme(acronyme: str):
    logger.info("GET /api/equipes/acronyme/%s", acronyme)
    equipe = await EquipeService.get_equipe_by_acronyme(acronyme)
    if equipe is None:
        logger.warning("No team with acronym %s", acronyme)
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return equipe


@router.get("/nom/{nom}", response_model=EquipeDto)
async def get_equipe_by_nom(nom: str):
    logger.info("GET /api/equipes/nom/%s", nom)
    equipe = await EquipeService.get_equipe_by_nom(nom)
    if equipe is None:
        logger.warning("No team named %s", nom)
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return equipe


@router.get("/{equipe_id}", response_model=EquipeDto)
async def get_equipe(equipe_id: EntityId):
    """Retrieve a team with its players; 404 if it does not exist."""
    logger.info("GET /api/equipes/%s", equipe_id)
    equipe = await EquipeService.get_equipe(equipe_id)
    if equipe is None:
        logger.warning("No team with id %s", equipe_id)
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return equipe


@router.get("/{equipe_id}/joueurs", response_model=List[JoueurDto])
async def list_equipe_joueurs(equipe_id: EntityId):
    """Unpaged roster of a team."""
    logger.info("GET /api/equipes/%s/joueurs", equipe_id)
    try:
        return await JoueurService.list_joueurs_by_equipe(equipe_id)
    except NotFoundError:
        return Response(status_code=status.HTTP_404_NOT_FOUND)


@router.post("/{equipe_id}/joueurs/{joueur_id}", response_model=EquipeDto)
async def add_joueur(equipe_id: EntityId, joueur_id: EntityId):
    """Put an unassigned player on the team and return the updated team."""
    logger.info("POST /api/equipes/%s/joueurs/%s", equipe_id, joueur_id)
    try:
        equipe = await EquipeService.add_joueur(equipe_id, joueur_id)
    except (NotFoundError, ConflictError) as e:
        logger.warning("Cannot add player %s to team %s: %s", joueur_id, equipe_id, e.message)
        return error_response(status.HTTP_400_BAD_REQUEST, VALIDATION_ERROR, e.message)
    return equipe


@router.delete("/{equipe_id}/joueurs/{joueur_id}", response_model=EquipeDto)
async def remove_joueur(equipe_id: EntityId, joueur_id: EntityId):
    """Take a player off the team and return the updated team."""
    logger.info("DELETE /api/equipes/%s/joueurs/%s", equipe_id, joueur_id)
    try:
        equipe = await EquipeService.remove_joueur(equipe_id, joueur_id)
    except (NotFoundError, ConflictError) as e:
        logger.warning("Cannot remove player %s from team %s: %s", joueur_id, equipe_id, e.message)
        return error_response(status.HTTP_400_BAD_REQUEST, VALIDATION_ERROR, e.message)
    return equipe


@router.delete("/{equipe_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_equipe(equipe_id: EntityId) -> Response:
    """Delete a team and all of its players."""
    logger.info("DELETE /api/equipes/%s", equipe_id)
    if not await EquipeService.delete_equipe(equipe_id):
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
