"""Client for the Stream chat service."""

from typing import Any, Dict, Optional

import httpx
from loguru import logger

from ..config import Settings
from ..core.exceptions import ConfigurationError
from ..core.security import create_stream_server_token, create_stream_token


class StreamClient:
    """Issues chat user tokens and mirrors user profiles to Stream."""

    def __init__(
        self,
        api_key: Optional[str],
        api_secret: Optional[str],
        base_url: str = "https://chat.stream-io-api.com",
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize stream client.

        Args:
            api_key: Stream application key
            api_secret: Stream application secret (signs tokens)
            base_url: Stream REST endpoint
            transport: Optional httpx transport, used by tests
        """
        self.api_key = api_key
        self.api_secret = api_secret
        self.base_url = base_url.rstrip("/")
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: Settings) -> "StreamClient":
        secret = settings.STREAM_API_SECRET
        return cls(
            api_key=settings.STREAM_API_KEY,
            api_secret=secret.get_secret_value() if secret else None,
            base_url=settings.STREAM_BASE_URL,
        )

    @property
    def configured(self) -> bool:
        return bool(self.api_key and self.api_secret)

    def create_token(self, user_id: str) -> str:
        """Create a user token for the chat frontend.

        Raises:
            ConfigurationError: No Stream secret configured
        """
        if not self.api_secret:
            raise ConfigurationError("Chat service is not configured")
        return create_stream_token(user_id, self.api_secret)

    async def upsert_user(self, user: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Create or update the Stream user for a serialized user document.

        Returns:
            Stream response or None if skipped or failed
        """
        if not self.configured:
            logger.debug("Stream credentials not set; skipping user upsert")
            return None

        user_id = str(user["_id"])
        payload = {
            "users": {
                user_id: {
                    "id": user_id,
                    "name": user.get("fullName", ""),
                    "image": user.get("profilePic", ""),
                }
            }
        }
        headers = {
            "Authorization": create_stream_server_token(self.api_secret),
            "stream-auth-type": "jwt",
        }

        try:
            async with httpx.AsyncClient(timeout=10.0, transport=self._transport) as client:
                response = await client.post(
                    f"{self.base_url}/users",
                    params={"api_key": self.api_key},
                    json=payload,
                    headers=headers,
                )
                response.raise_for_status()
                return response.json()
        except httpx.HTTPError as e:
            logger.error(f"Error upserting Stream user {user_id}: {e}")
            return None
