"""MongoDB connection for the Streamify API."""

from typing import Callable, Optional
from urllib.parse import urlsplit

from loguru import logger
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo import ASCENDING
from pymongo.errors import PyMongoError

from .core.exceptions import DatabaseConnectionError

USERS = "users"
FRIEND_REQUESTS = "friendrequests"


def _host_of(uri: str) -> str:
    # Never log credentials from the connection string
    return urlsplit(uri).hostname or "unknown"


async def ensure_indexes(db: AsyncIOMotorDatabase) -> None:
    """Create indexes the repositories rely on."""
    await db[USERS].create_index([("email", ASCENDING)], unique=True)
    await db[FRIEND_REQUESTS].create_index(
        [("sender", ASCENDING), ("recipient", ASCENDING)]
    )


class DatabaseConnector:
    """Owns the single MongoDB client of an application instance."""

    def __init__(
        self,
        uri: str,
        db_name: str,
        timeout_ms: int = 5000,
        client_factory: Callable[..., AsyncIOMotorClient] = AsyncIOMotorClient,
    ):
        self.uri = uri
        self.db_name = db_name
        self.timeout_ms = timeout_ms
        self._client_factory = client_factory
        self.client: Optional[AsyncIOMotorClient] = None

    async def connect(self) -> AsyncIOMotorDatabase:
        """Open the client, verify the server answers and prepare indexes.

        Raises:
            DatabaseConnectionError: MongoDB is unreachable
        """
        host = _host_of(self.uri)
        client = self._client_factory(self.uri, serverSelectionTimeoutMS=self.timeout_ms)
        try:
            await client.admin.command("ping")
            db = client[self.db_name]
            await ensure_indexes(db)
        except PyMongoError as e:
            client.close()
            logger.error(f"Error connecting to MongoDB: {e}")
            raise DatabaseConnectionError(host, str(e)) from e

        self.client = client
        logger.info(f"MongoDB connected: {host}/{self.db_name}")
        return db

    def close(self) -> None:
        if self.client is not None:
            self.client.close()
            self.client = None
            logger.info("MongoDB connection closed")
