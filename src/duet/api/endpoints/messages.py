"""Send and pull endpoints for the Duet API."""

from __future__ import annotations

from typing import Annotated, NoReturn

from fastapi import APIRouter, Depends, HTTPException, Request, status

from duet.core.settings import Settings, settings
from duet.schemas.message import PullRequest, PullResponse, SendRequest, SendResponse
from duet.services.chat_service import ChatService
from duet.services.errors import (
    ChatError,
    InvalidChatHandle,
    SenderNotInChat,
    SerializationFault,
    StoreUnavailable,
)

router = APIRouter(tags=["messages"])

_ERROR_STATUS: dict[type[ChatError], int] = {
    InvalidChatHandle: status.HTTP_400_BAD_REQUEST,
    SenderNotInChat: status.HTTP_403_FORBIDDEN,
    StoreUnavailable: status.HTTP_503_SERVICE_UNAVAILABLE,
    SerializationFault: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def get_chat_service(request: Request) -> ChatService:
    """Return the chat service created at application startup."""
    return request.app.state.chat_service


def get_settings() -> Settings:
    """Return the application settings."""
    return settings


ChatServiceDep = Annotated[ChatService, Depends(get_chat_service)]
SettingsDep = Annotated[Settings, Depends(get_settings)]


def _raise_http(exc: ChatError) -> NoReturn:
    status_code = _ERROR_STATUS.get(type(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)
    raise HTTPException(status_code=status_code, detail=str(exc)) from exc


@router.post("/send", response_model=SendResponse)
def send_message(payload: SendRequest, service: ChatServiceDep) -> SendResponse:
    """Store a message sent now by one of the chat's participants."""
    try:
        service.send(payload.chat, payload.sender, payload.text)
    except ChatError as exc:
        _raise_http(exc)
    return SendResponse()


@router.get("/pull", response_model=PullResponse)
@router.post("/pull", response_model=PullResponse)
def pull_messages(
    payload: PullRequest,
    service: ChatServiceDep,
    config: SettingsDep,
) -> PullResponse:
    """Return one page of a chat's messages.

    The request is a JSON body, also on GET.
    """
    query = payload.to_query(config.default_pull_limit)
    try:
        page = service.pull(query)
    except ChatError as exc:
        _raise_http(exc)
    return PullResponse.from_page(page)
