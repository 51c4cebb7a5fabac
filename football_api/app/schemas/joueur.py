"""
Pydantic models for player data.

``CreateJoueurRequest`` is the payload of ``POST /api/joueurs`` and of
each entry in a team creation's ``joueurs`` list.  Its fields are typed
loosely on purpose: blank or missing values are reported by
``validate_create_joueur`` as field errors rather than by pydantic.
``JoueurDto`` is the API view of a player, with the owning team's id
and name copied in.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from football_api.app.core.errors import FieldError

NOM_MAX_LENGTH = 100
POSITION_MAX_LENGTH = 50


class CreateJoueurRequest(BaseModel):
    nom: Optional[str] = Field(None, examples=["Schmeichel"])
    position: Optional[str] = Field(None, examples=["Gardien"])
    equipe_id: Optional[int] = Field(None, alias="equipeId", examples=[1])

    model_config = {
        "populate_by_name": True,
    }


class JoueurDto(BaseModel):
    """Schema for reading a player from the API."""

    id: int
    nom: str
    position: str
    equipe_id: Optional[int] = Field(None, alias="equipeId")
    equipe_nom: Optional[str] = Field(None, alias="equipeNom")

    model_config = {
        "populate_by_name": True,
        "from_attributes": True,
    }


def validate_joueur_fields(request: CreateJoueurRequest, prefix: str = "") -> List[FieldError]:
    """Check the name and position of a player request.

    ``prefix`` is prepended to field names so nested players report
    paths such as ``joueurs[2].nom``.
    """
    errors: List[FieldError] = []
    if request.nom is None or not request.nom.strip():
        errors.append(FieldError(f"{prefix}nom", "Le nom du joueur est obligatoire"))
    elif len(request.nom) > NOM_MAX_LENGTH:
        errors.append(
            FieldError(f"{prefix}nom", f"Le nom du joueur ne peut pas dépasser {NOM_MAX_LENGTH} caractères")
        )
    if request.position is None or not request.position.strip():
        errors.append(FieldError(f"{prefix}position", "La position est obligatoire"))
    elif len(request.position) > POSITION_MAX_LENGTH:
        errors.append(
            FieldError(
                f"{prefix}position", f"La position ne peut pas dépasser {POSITION_MAX_LENGTH} caractères"
            )
        )
    return errors


def validate_create_joueur(request: CreateJoueurRequest) -> List[FieldError]:
    """Return every field error of a standalone player creation request."""
    return validate_joueur_fields(request)
