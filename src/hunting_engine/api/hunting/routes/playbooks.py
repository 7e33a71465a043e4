"""Playbook routes: generate/regenerate, fetch, list."""

from fastapi import APIRouter, Depends, status

from hunting_engine.api.common.dependencies import get_synthesis_client
from hunting_engine.api.common.responses import ERROR_RESPONSES
from hunting_engine.api.hunting.schemas.playbooks import PlaybookListResponse, PlaybookResponse
from hunting_engine.errors import NotFoundError
from hunting_engine.services.mongo.playbooks_repo import get_playbook_by_sub_channel, list_playbooks
from hunting_engine.services.playbooks.playbook_orchestrator import regenerate_playbook
from hunting_engine.services.synthesis.synthesis_client import SynthesisClient
from hunting_engine.validation.params import validate_playbook_params


router = APIRouter(prefix="/api/playbooks", tags=["playbooks"])


@router.post(
    "/{sub_channel}",
    response_model=PlaybookResponse,
    status_code=status.HTTP_201_CREATED,
    responses=ERROR_RESPONSES,
)
async def generate_playbook_route(
    sub_channel: str,
    synthesis: SynthesisClient = Depends(get_synthesis_client),
) -> PlaybookResponse:
    """
    Generate the playbook for a sub-channel from its most recent hunts.

    Creates version 1 the first time, then bumps the version on every call.
    """
    params = validate_playbook_params({"subChannel": sub_channel})
    playbook = await regenerate_playbook(params.subChannel, synthesis=synthesis)
    return PlaybookResponse.from_doc(playbook)


@router.get("/{sub_channel}", response_model=PlaybookResponse, responses=ERROR_RESPONSES)
async def get_playbook(sub_channel: str) -> PlaybookResponse:
    playbook = await get_playbook_by_sub_channel(sub_channel)
    if playbook is None:
        raise NotFoundError(f"No playbook found for sub-channel: {sub_channel}")
    return PlaybookResponse.from_doc(playbook)


@router.get("", response_model=PlaybookListResponse)
async def list_playbooks_route() -> PlaybookListResponse:
    playbooks = await list_playbooks()
    return PlaybookListResponse(
        data=[PlaybookResponse.from_doc(p) for p in playbooks],
        total=len(playbooks),
    )
