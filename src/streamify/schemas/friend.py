"""Friend request schemas."""

from datetime import datetime
from typing import List, Optional, Union

from pydantic import Field

from .common import APIModel, ObjectIdStr
from .user import FriendSummary


class FriendRequestResponse(APIModel):
    """Friend request; sender/recipient are ids or populated users."""
    id: ObjectIdStr = Field(alias="_id")
    sender: Union[FriendSummary, ObjectIdStr]
    recipient: Union[FriendSummary, ObjectIdStr]
    status: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class FriendRequestsResponse(APIModel):
    """Incoming pending requests and my accepted ones."""
    incoming_reqs: List[FriendRequestResponse]
    accepted_reqs: List[FriendRequestResponse]
