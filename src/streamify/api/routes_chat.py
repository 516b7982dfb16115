"""Chat router: tokens for the Stream chat frontend."""

from fastapi import Depends

from ..repositories.base import Document
from ..schemas import StreamTokenResponse
from ..services import StreamClient
from .dependencies import get_current_user, get_stream_client
from .registrar import RouteRegistrar

registrar = RouteRegistrar(prefix="/chat", tags=["chat"])
router = registrar.router


@registrar.get("/token", response_model=StreamTokenResponse, protected=True)
async def get_stream_token(
    current_user: Document = Depends(get_current_user),
    stream: StreamClient = Depends(get_stream_client),
):
    """Issue a chat-service token for the logged-in user."""
    return StreamTokenResponse(token=stream.create_token(str(current_user["_id"])))
