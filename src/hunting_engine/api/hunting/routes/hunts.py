"""Hunt routes: create (runs the hunting model), list, get, delete."""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Query, status

from hunting_engine.api.common.dependencies import get_entity_discovery, get_synthesis_client
from hunting_engine.api.common.responses import ERROR_RESPONSES, MessageResponse
from hunting_engine.api.hunting.schemas.hunts import HuntListResponse, HuntResponse, Pagination
from hunting_engine.errors import NotFoundError
from hunting_engine.services.discovery.entity_discovery import EntityDiscovery
from hunting_engine.services.hunting.hunt_orchestrator import create_and_save_hunt
from hunting_engine.services.mongo.hunts_repo import delete_hunt_by_id, get_hunt_by_id, list_hunts
from hunting_engine.services.synthesis.synthesis_client import SynthesisClient
from hunting_engine.validation.params import validate_hunt_params


router = APIRouter(prefix="/api/hunts", tags=["hunts"])


@router.post(
    "",
    response_model=HuntResponse,
    status_code=status.HTTP_201_CREATED,
    responses=ERROR_RESPONSES,
)
async def create_hunt(
    payload: Dict[str, Any] = Body(...),
    discovery: EntityDiscovery = Depends(get_entity_discovery),
    synthesis: SynthesisClient = Depends(get_synthesis_client),
) -> HuntResponse:
    """
    Run the 10-step hunting model and store the result.

    Body: `{subChannel, markets, focusBrands, maxAccounts?}`. The synthesis
    call can take several seconds; the response is sent once it completes.
    """
    params = validate_hunt_params(payload)
    hunt = await create_and_save_hunt(params, discovery=discovery, synthesis=synthesis)
    return HuntResponse.from_doc(hunt)


@router.get("", response_model=HuntListResponse)
async def list_hunts_route(
    subChannel: Optional[str] = None,
    limit: int = Query(20, ge=1, le=100),
    offset: int = Query(0, ge=0),
) -> HuntListResponse:
    """List hunts, most recent first, optionally filtered by sub-channel."""
    hunts, total = await list_hunts(sub_channel=subChannel, limit=limit, offset=offset)
    return HuntListResponse(
        data=[HuntResponse.from_doc(hunt) for hunt in hunts],
        pagination=Pagination(total=total, limit=limit, offset=offset),
    )


@router.get("/{hunt_id}", response_model=HuntResponse, responses=ERROR_RESPONSES)
async def get_hunt(hunt_id: str) -> HuntResponse:
    hunt = await get_hunt_by_id(hunt_id)
    if hunt is None:
        raise NotFoundError("Hunt not found")
    return HuntResponse.from_doc(hunt)


@router.delete("/{hunt_id}", response_model=MessageResponse, responses=ERROR_RESPONSES)
async def delete_hunt(hunt_id: str) -> MessageResponse:
    """Delete a hunt together with its embedded accounts."""
    deleted = await delete_hunt_by_id(hunt_id)
    if not deleted:
        raise NotFoundError("Hunt not found")
    return MessageResponse(message="Hunt deleted successfully")
