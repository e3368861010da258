"""MongoDB Client Manager — one long-lived PyMongo async client per process.

Invariants:
    - Constructed and connected by the application lifespan, never at import time
    - One client shared by all requests; closed once at shutdown
    - health_check() never raises

Design Decisions:
    - Instance on app.state instead of a module-level singleton: the repository
      receives its collection explicitly, tests build their own
    - Startup ping failure is logged, not fatal: the driver reconnects lazily and
      requests fail with 500 until the server is reachable
"""

import logging

from pymongo import AsyncMongoClient
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import PyMongoError

logger = logging.getLogger(__name__)


class MongoClientManager:
    """Owns the async client and hands out collections of one database."""

    def __init__(
        self,
        url: str,
        database: str,
        server_selection_timeout_ms: int = 5000,
    ):
        self.url = url
        self.database_name = database
        self.server_selection_timeout_ms = server_selection_timeout_ms
        self.client: AsyncMongoClient | None = None

    async def connect(self) -> None:
        """Create the client and check the server answers."""
        if self.client is not None:
            return
        self.client = AsyncMongoClient(
            self.url,
            serverSelectionTimeoutMS=self.server_selection_timeout_ms,
        )
        if await self.health_check():
            logger.info(f"Connected to MongoDB database '{self.database_name}'")
        else:
            logger.warning(
                f"MongoDB not reachable at startup, database '{self.database_name}'",
            )

    @property
    def database(self) -> AsyncDatabase:
        """The configured database; raises before connect()."""
        if self.client is None:
            raise RuntimeError("Database not initialized")
        return self.client[self.database_name]

    def collection(self, name: str) -> AsyncCollection:
        """Named collection of the configured database."""
        return self.database[name]

    async def health_check(self) -> bool:
        """Ping the server (for readiness probes)."""
        if self.client is None:
            return False
        try:
            await self.client.admin.command("ping")
            return True
        except PyMongoError as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def close(self) -> None:
        if self.client is None:
            return
        await self.client.close()
        self.client = None
        logger.info("MongoDB client closed")
