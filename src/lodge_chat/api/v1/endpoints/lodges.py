"""Lodge and cabin endpoints."""

from __future__ import annotations

import uuid
from collections.abc import Sequence

from fastapi import APIRouter, status

from lodge_chat.models import Cabin, Lodge, User
from lodge_chat.schemas.cabin import CabinCreate, CabinResponse
from lodge_chat.schemas.common import ERROR_RESPONSES
from lodge_chat.schemas.lodge import LodgeCreate, LodgeResponse
from lodge_chat.schemas.user import PublicUser

from ..dependencies import CabinServiceDep, CurrentUserDep, LodgeServiceDep

router = APIRouter(tags=["lodges"], responses=ERROR_RESPONSES)


@router.get("/lodges", response_model=list[LodgeResponse])
async def list_public_lodges(lodges: LodgeServiceDep) -> Sequence[Lodge]:
    """List lodges discoverable without membership."""
    return lodges.list_public_lodges()


@router.post("/lodge", response_model=LodgeResponse, status_code=status.HTTP_201_CREATED)
async def create_lodge(
    payload: LodgeCreate,
    current_user: CurrentUserDep,
    lodges: LodgeServiceDep,
) -> Lodge:
    """Create a lodge; the caller becomes its admin."""
    return lodges.create_lodge(
        current_user,
        payload.name,
        description=payload.description,
        icon_url=payload.icon_url,
        public=payload.public,
    )


@router.get("/lodge/{lodge_id}", response_model=LodgeResponse)
async def get_lodge(
    lodge_id: uuid.UUID,
    current_user: CurrentUserDep,
    lodges: LodgeServiceDep,
) -> Lodge:
    """Return a lodge; private lodges are visible to members only."""
    return lodges.view(lodge_id, current_user)


@router.post("/lodge/{lodge_id}/join")
async def join_lodge(
    lodge_id: uuid.UUID,
    current_user: CurrentUserDep,
    lodges: LodgeServiceDep,
) -> dict[str, str | bool]:
    """Join the caller to a lodge."""
    lodge = lodges.get_lodge(lodge_id)
    membership = lodges.join(current_user, lodge)
    return {"status": "joined", "admin": membership.admin}


@router.get("/lodge/{lodge_id}/members", response_model=list[PublicUser])
async def list_members(
    lodge_id: uuid.UUID,
    current_user: CurrentUserDep,
    lodges: LodgeServiceDep,
) -> list[User]:
    """List the members of a lodge."""
    lodge = lodges.view(lodge_id, current_user)
    return lodges.members(lodge)


@router.get("/lodge/{lodge_id}/admins", response_model=list[PublicUser])
async def list_lodge_admins(
    lodge_id: uuid.UUID,
    current_user: CurrentUserDep,
    lodges: LodgeServiceDep,
) -> list[User]:
    """List the admins of a lodge."""
    lodge = lodges.view(lodge_id, current_user)
    return lodges.admins(lodge)


@router.get("/lodge/{lodge_id}/cabins", response_model=list[CabinResponse])
async def list_cabins(
    lodge_id: uuid.UUID,
    current_user: CurrentUserDep,
    lodges: LodgeServiceDep,
) -> list[Cabin]:
    """List the cabins of a lodge visible to the caller."""
    lodge = lodges.view(lodge_id, current_user)
    return lodges.cabins(lodge, current_user)


@router.post(
    "/lodge/{lodge_id}/cabin",
    response_model=CabinResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_cabin(
    lodge_id: uuid.UUID,
    payload: CabinCreate,
    current_user: CurrentUserDep,
    lodges: LodgeServiceDep,
    cabins: CabinServiceDep,
) -> Cabin:
    """Create a cabin; only lodge admins may do this."""
    lodge = lodges.get_lodge(lodge_id)
    return cabins.create_cabin(
        lodge,
        current_user,
        payload.name,
        topic=payload.topic,
        require_admin=payload.require_admin,
    )


@router.get("/lodge/{lodge_id}/cabin/{cabin_id}", response_model=CabinResponse)
async def get_cabin(
    lodge_id: uuid.UUID,
    cabin_id: uuid.UUID,
    current_user: CurrentUserDep,
    lodges: LodgeServiceDep,
    cabins: CabinServiceDep,
) -> Cabin:
    """Return a cabin of a lodge."""
    lodge = lodges.get_lodge(lodge_id)
    cabin = cabins.get_cabin(lodge, cabin_id)
    cabins.ensure_can_read(cabin, current_user)
    return cabin
