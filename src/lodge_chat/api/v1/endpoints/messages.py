"""Cabin message endpoints."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, status

from lodge_chat.schemas.cabin import MessageCreate, PublicMessage
from lodge_chat.schemas.common import ERROR_RESPONSES

from ..dependencies import CabinServiceDep, CurrentUserDep, LodgeServiceDep

router = APIRouter(
    prefix="/lodge/{lodge_id}/cabin/{cabin_id}",
    tags=["messages"],
    responses=ERROR_RESPONSES,
)


@router.post("/message", response_model=PublicMessage, status_code=status.HTTP_201_CREATED)
async def send_message(
    lodge_id: uuid.UUID,
    cabin_id: uuid.UUID,
    payload: MessageCreate,
    current_user: CurrentUserDep,
    lodges: LodgeServiceDep,
    cabins: CabinServiceDep,
) -> PublicMessage:
    """Post a message to a cabin."""
    cabin = cabins.get_cabin(lodges.get_lodge(lodge_id), cabin_id)
    message = cabins.send_message(cabin, current_user, payload.content)
    return PublicMessage.from_message(message)


@router.get("/messages", response_model=list[PublicMessage])
async def list_messages(
    lodge_id: uuid.UUID,
    cabin_id: uuid.UUID,
    current_user: CurrentUserDep,
    lodges: LodgeServiceDep,
    cabins: CabinServiceDep,
) -> list[PublicMessage]:
    """List a cabin's messages, newest first."""
    cabin = cabins.get_cabin(lodges.get_lodge(lodge_id), cabin_id)
    messages = cabins.list_messages(cabin, current_user)
    return [PublicMessage.from_message(message) for message in messages]
