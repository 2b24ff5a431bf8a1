from typing import Any, List

from fastapi import APIRouter, Body, Depends, Request

from .schemas import HealthResponse, MessageCreate, MessageResponse
from .storage import MessageStore

router = APIRouter()


def get_store(request: Request) -> MessageStore:
    return request.app.state.store


def parse_create(payload: Any = Body(None)) -> MessageCreate:
    """
    Reads the create payload. Anything that is not a JSON object carries no text.
    """
    return MessageCreate.model_validate(payload if isinstance(payload, dict) else {})


@router.post(path="/api/messages", tags=["API Messages"], response_model=MessageResponse)
async def append_message(
    data: MessageCreate = Depends(parse_create),
    store: MessageStore = Depends(get_store)
):
    message = store.append(data.text)
    return MessageResponse.model_validate(message)


@router.get(path="/api/messages", tags=["API Messages"], response_model=List[MessageResponse])
async def list_messages(store: MessageStore = Depends(get_store)):
    return [MessageResponse.model_validate(message) for message in store.list()]


@router.get("/health", response_model=HealthResponse)
async def health_check():
    return {"status": "healthy"}
