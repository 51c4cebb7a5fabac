"""
Pydantic models for team data.

A team is created from ``CreateEquipeRequest``, optionally with a list
of players to create alongside it, and is returned as ``EquipeDto``
with its full roster.  Budgets are exact decimals internally and are
written to JSON as plain numbers (``50000000.0``).
"""

from decimal import Decimal
from typing import Annotated, List, Optional

from pydantic import BaseModel, Field, PlainSerializer

from football_api.app.core.errors import FieldError
from football_api.app.models import BUDGET_QUANTUM
from football_api.app.schemas.joueur import CreateJoueurRequest, JoueurDto, validate_joueur_fields

NOM_MAX_LENGTH = 100
ACRONYME_MAX_LENGTH = 10
# Matches the NUMERIC(15, 2) column: 13 digits before the point, 2 after.
BUDGET_INTEGER_DIGITS = 13
BUDGET_FRACTION_DIGITS = 2

Budget = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class CreateEquipeRequest(BaseModel):
    """Schema for creating a team, with or without players."""

    nom: Optional[str] = Field(None, examples=["OGC Nice"])
    acronyme: Optional[str] = Field(None, examples=["OGC"])
    budget: Optional[Decimal] = Field(None, examples=[50000000.00])
    joueurs: Optional[List[CreateJoueurRequest]] = None


class EquipeDto(BaseModel):
    """Schema for reading a team and its roster."""

    id: int
    nom: str
    acronyme: str
    budget: Budget
    joueurs: List[JoueurDto] = Field(default_factory=list)

    model_config = {
        "from_attributes": True,
    }


def validate_create_equipe(request: CreateEquipeRequest) -> List[FieldError]:
    """Return every field error of a team creation request.

    Nested players are checked with the same rules as a standalone
    player creation.
    """
    errors: List[FieldError] = []
    if request.nom is None or not request.nom.strip():
        errors.append(FieldError("nom", "Le nom de l'équipe est obligatoire"))
    elif len(request.nom) > NOM_MAX_LENGTH:
        errors.append(
            FieldError("nom", f"Le nom de l'équipe ne peut pas dépasser {NOM_MAX_LENGTH} caractères")
        )

    if request.acronyme is None or not request.acronyme.strip():
        errors.append(FieldError("acronyme", "L'acronyme est obligatoire"))
    elif len(request.acronyme) > ACRONYME_MAX_LENGTH:
        errors.append(
            FieldError("acronyme", f"L'acronyme ne peut pas dépasser {ACRONYME_MAX_LENGTH} caractères")
        )

    if request.budget is None:
        errors.append(FieldError("budget", "Le budget est obligatoire"))
    elif not request.budget.is_finite():
        errors.append(FieldError("budget", "Le budget doit être un nombre"))
    elif request.budget < 0:
        errors.append(FieldError("budget", "Le budget doit être positif ou nul"))
    elif request.budget.adjusted() >= BUDGET_INTEGER_DIGITS:
        errors.append(
            FieldError("budget", f"Le budget ne peut pas dépasser {BUDGET_INTEGER_DIGITS} chiffres avant la virgule")
        )
    elif request.budget.quantize(BUDGET_QUANTUM) != request.budget:
        errors.append(
            FieldError("budget", f"Le budget ne peut pas avoir plus de {BUDGET_FRACTION_DIGITS} décimales")
        )

    for index, joueur in enumerate(request.joueurs or []):
        errors.extend(validate_joueur_fields(joueur, prefix=f"joueurs[{index}]."))
    return errors
