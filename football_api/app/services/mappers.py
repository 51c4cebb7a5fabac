"""
Conversion of persistence records into API schemas.
"""

from typing import Iterable, Optional

from football_api.app.models import Equipe, Joueur
from football_api.app.schemas.equipe import EquipeDto
from football_api.app.schemas.joueur import JoueurDto


def joueur_to_dto(joueur: Joueur, equipe_nom: Optional[str]) -> JoueurDto:
    """Build a player view; ``equipe_nom`` is the owning team's name, if any."""
    return JoueurDto(
        id=joueur.id,
        nom=joueur.nom,
        position=joueur.position,
        equipe_id=joueur.equipe_id,
        equipe_nom=equipe_nom if joueur.equipe_id is not None else None,
    )


def equipe_to_dto(equipe: Equipe, joueurs: Iterable[Joueur]) -> EquipeDto:
    return EquipeDto(
        id=equipe.id,
        nom=equipe.nom,
        acronyme=equipe.acronyme,
        budget=equipe.budget,
        joueurs=[joueur_to_dto(joueur, equipe.nom) for joueur in joueurs],
    )
