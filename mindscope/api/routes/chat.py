"""
Chat endpoint
"""

from fastapi import APIRouter, Depends

from ...domain.services.router import MessageRouter
from ..auth import verify_api_key
from ..dependencies import get_message_router
from ..schemas import ChatRequest, ChatResponse

router = APIRouter(
    prefix="/v1/chat",
    tags=["chat"],
    dependencies=[Depends(verify_api_key)],
)


@router.post("", response_model=ChatResponse)
async def chat(
    request: ChatRequest,
    message_router: MessageRouter = Depends(get_message_router),
) -> ChatResponse:
    """
    Main chat endpoint

    Routes one user turn. The history is supplied by the client and is
    never stored. Routing never fails; unexpected errors come back as a
    supportive template.
    """
    history = [msg.to_domain() for msg in request.conversation_history]

    result = await message_router.route(request.message, history, request.language)

    return ChatResponse(**result.to_dict(), is_crisis=result.is_crisis)
