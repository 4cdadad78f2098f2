"""Engineer directory endpoints."""

from typing import List

from fastapi import APIRouter

from ooh_tracker.api.dependencies import EngineerRepositoryDep
from ooh_tracker.api.schemas.directory import EngineerResponse
from ooh_tracker.domain.exceptions.not_found_error import NotFoundError

router = APIRouter(prefix="/engineers", tags=["engineers"])


@router.get("/", response_model=List[EngineerResponse])
async def list_engineers(engineer_repository: EngineerRepositoryDep):
    return [EngineerResponse.from_entity(e) for e in await engineer_repository.list_all()]


@router.get("/{name}", response_model=EngineerResponse)
async def get_engineer(name: str, engineer_repository: EngineerRepositoryDep):
    """Look up an engineer by exact name."""
    engineer = await engineer_repository.get_by_name(name)
    if engineer is None:
        raise NotFoundError("Engineer", name)
    return EngineerResponse.from_entity(engineer)
