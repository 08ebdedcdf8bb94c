"""
Classification endpoint
"""

from fastapi import APIRouter, Depends

from ...domain.services.router import MessageRouter
from ..auth import verify_api_key
from ..dependencies import get_message_router
from ..schemas import ClassifyRequest, ClassifyResponse

router = APIRouter(
    prefix="/v1/classify",
    tags=["classify"],
    dependencies=[Depends(verify_api_key)],
)


@router.post("", response_model=ClassifyResponse)
async def classify(
    request: ClassifyRequest,
    message_router: MessageRouter = Depends(get_message_router),
) -> ClassifyResponse:
    """Classify a message without generating a response"""
    result = message_router.classify(request.message)
    return ClassifyResponse(**result.to_dict())
