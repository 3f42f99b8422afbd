"""Chatbot route module."""
import logging
from typing import Optional

from fastapi import APIRouter, HTTPException, Request

from errors import UpstreamError
from models import ChatRequest, ChatResponse
from prompts import ASSISTANT_INSTRUCTIONS
from routes.deps import get_app_state

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/chatbot", response_model=ChatResponse)
async def chatbot(request: Request, request_data: Optional[ChatRequest] = None):
    """
    Converse with the hiring assistant

    Searches up to two vector stores: provisioned collections first,
    then operator-pinned ones.

    Returns:
        The assistant reply and the vector store ids that were searched
    """
    message = request_data.message if request_data else None
    if not message or not isinstance(message, str):
        raise HTTPException(status_code=400, detail='Property "message" is required.')

    dispatcher = get_app_state(request).get_dispatcher()
    vector_store_ids = dispatcher.conversation_index_ids()

    try:
        text = await dispatcher.ask(message, ASSISTANT_INSTRUCTIONS, vector_store_ids)
    except UpstreamError as e:
        logger.exception("Error handling /chatbot request")
        raise HTTPException(status_code=500, detail=e.message or "Failed to process request")

    return ChatResponse(response=text, vector_store_ids=vector_store_ids)
