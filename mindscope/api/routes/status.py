"""
Status endpoint
"""

from fastapi import APIRouter, Depends

from ...domain.services.router import MessageRouter
from ..auth import verify_api_key
from ..dependencies import get_message_router
from ..schemas import StatusResponse

router = APIRouter(
    prefix="/v1/status",
    tags=["status"],
    dependencies=[Depends(verify_api_key)],
)


@router.get("", response_model=StatusResponse)
async def status(
    message_router: MessageRouter = Depends(get_message_router),
) -> StatusResponse:
    """LLM configuration status (configured / model / fallback mode)"""
    return StatusResponse(**message_router.status().to_dict())
