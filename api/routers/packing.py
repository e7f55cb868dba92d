"""Ad-hoc packing list calculation."""

from typing import List, Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from api.dependencies import get_event_service
from barprep.models.events import Event
from barprep.models.packing import PackingList
from barprep.models.recipes import CocktailRecipe
from barprep.services import EventService, compute_packing_list

router = APIRouter()


class ComputeRequest(BaseModel):
    """Event to provision, with an optional catalog override."""
    event: Event
    recipes: Optional[List[CocktailRecipe]] = Field(
        default=None,
        description="Recipe catalog to use instead of the loaded one"
    )


@router.post("/compute", response_model=PackingList)
def compute(
    request: ComputeRequest,
    service: EventService = Depends(get_event_service),
):
    """
    Compute a packing list without storing anything.

    Always returns a well-formed list; calculation faults yield empty categories.
    """
    recipes = request.recipes if request.recipes is not None else service.list_recipes()
    return compute_packing_list(request.event, recipes)
