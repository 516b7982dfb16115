"""Per-application dependency context."""

from dataclasses import dataclass
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorDatabase

from .config import Settings
from .database import DatabaseConnector
from .services.stream_client import StreamClient


@dataclass
class AppContext:
    """Everything request handlers need, built once per application.

    `database` is None until the lifespan connects, unless a handle was
    injected (tests pass an in-memory database here).
    """

    settings: Settings
    stream: StreamClient
    database: Optional[AsyncIOMotorDatabase] = None
    connector: Optional[DatabaseConnector] = None

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        database: Optional[AsyncIOMotorDatabase] = None,
        stream: Optional[StreamClient] = None,
    ) -> "AppContext":
        connector = None
        if database is None:
            connector = DatabaseConnector(
                settings.MONGO_URI.get_secret_value(),
                settings.MONGO_DB_NAME,
                timeout_ms=settings.MONGO_TIMEOUT_MS,
            )
        return cls(
            settings=settings,
            stream=stream or StreamClient.from_settings(settings),
            database=database,
            connector=connector,
        )

    async def connect(self) -> None:
        if self.database is None and self.connector is not None:
            self.database = await self.connector.connect()

    async def close(self) -> None:
        if self.connector is not None:
            self.connector.close()
            self.database = None
