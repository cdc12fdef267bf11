from __future__ import annotations

from fastapi import APIRouter, Query

from dm_service.api.deps import AuthorizerDep, Credential, ResolverDep, UoWDep
from dm_service.api.v1.schemas.message import (
    CreateMessageRequest,
    EnvelopeResponse,
    MessageView,
)
from dm_service.domain.value_objects.enums import ArchiveParty, SortOrder
from dm_service.services import mailbox_service, message_service

router = APIRouter(prefix="/api/messages", tags=["messages"])


@router.post("/create", response_model=EnvelopeResponse)
async def create_message(
    body: CreateMessageRequest,
    uow: UoWDep,
    authorizer: AuthorizerDep,
    resolver: ResolverDep,
    receiver_username: str | None = Query(None, alias="receiverUsername"),
    credential: Credential = None,
) -> EnvelopeResponse:
    sender = await authorizer.authorize(credential, "/api/messages/create")
    result = await message_service.create_message(
        sender, body.to_draft(), receiver_username, uow, resolver,
    )
    return EnvelopeResponse.model_validate(result.to_envelope(), from_attributes=True)


@router.get("/inbox", response_model=list[MessageView])
async def list_inbox(
    uow: UoWDep,
    authorizer: AuthorizerDep,
    order: SortOrder = Query(SortOrder.DESC),
    credential: Credential = None,
) -> list[MessageView]:
    user = await authorizer.authorize(credential, "/api/messages/inbox")
    messages = await mailbox_service.list_inbox(user, order, uow)
    return [MessageView.from_record(m) for m in messages]


@router.get("/outbox", response_model=list[MessageView])
async def list_outbox(
    uow: UoWDep,
    authorizer: AuthorizerDep,
    order: SortOrder = Query(SortOrder.DESC),
    credential: Credential = None,
) -> list[MessageView]:
    user = await authorizer.authorize(credential, "/api/messages/outbox")
    messages = await mailbox_service.list_outbox(user, order, uow)
    return [MessageView.from_record(m) for m in messages]


@router.get("/thread/{thread_id}", response_model=list[MessageView])
async def get_thread(
    thread_id: int,
    uow: UoWDep,
    authorizer: AuthorizerDep,
    credential: Credential = None,
) -> list[MessageView]:
    user = await authorizer.authorize(credential, "/api/messages/view")
    messages = await mailbox_service.get_thread(thread_id, user, uow)
    return [MessageView.from_record(m) for m in messages]


@router.put("/archiveSender/{message_id}", response_model=MessageView)
async def archive_for_sender(
    message_id: int,
    uow: UoWDep,
    authorizer: AuthorizerDep,
    credential: Credential = None,
) -> MessageView:
    user = await authorizer.authorize(credential, "/api/messages/archive")
    message = await mailbox_service.archive(message_id, ArchiveParty.SENDER, user, uow)
    return MessageView.from_record(message)


@router.put("/archiveReceiver/{message_id}", response_model=MessageView)
async def archive_for_receiver(
    message_id: int,
    uow: UoWDep,
    authorizer: AuthorizerDep,
    credential: Credential = None,
) -> MessageView:
    user = await authorizer.authorize(credential, "/api/messages/archive")
    message = await mailbox_service.archive(message_id, ArchiveParty.RECEIVER, user, uow)
    return MessageView.from_record(message)


@router.get("/{message_id}", response_model=MessageView)
async def get_message(
    message_id: int,
    uow: UoWDep,
    authorizer: AuthorizerDep,
    credential: Credential = None,
) -> MessageView:
    user = await authorizer.authorize(credential, "/api/messages/view")
    message = await mailbox_service.get_message(message_id, user, uow)
    return MessageView.from_record(message)


@router.put("/{message_id}/read", response_model=MessageView)
async def mark_read(
    message_id: int,
    uow: UoWDep,
    authorizer: AuthorizerDep,
    credential: Credential = None,
) -> MessageView:
    user = await authorizer.authorize(credential, "/api/messages/read")
    message = await mailbox_service.set_read(message_id, True, user, uow)
    return MessageView.from_record(message)


@router.put("/{message_id}/unread", response_model=MessageView)
async def mark_unread(
    message_id: int,
    uow: UoWDep,
    authorizer: AuthorizerDep,
    credential: Credential = None,
) -> MessageView:
    user = await authorizer.authorize(credential, "/api/messages/read")
    message = await mailbox_service.set_read(message_id, False, user, uow)
    return MessageView.from_record(message)
