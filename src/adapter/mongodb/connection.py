"""MongoDB client lifecycle.

The client is created once by the FastAPI lifespan, stored on `app.state`
and closed at shutdown. Nothing here keeps module-level connection state.
"""

import logging
from pymongo import MongoClient
from pymongo.errors import PyMongoError

logger = logging.getLogger(__name__)


def create_mongodb_client(mongo_url: str | None) -> MongoClient | None:
    """Create and ping a MongoDB client.

    Returns:
        A connected MongoClient, or None when MONGO_URL is not configured
        or the initial ping fails. Callers treat None as "database
        unavailable" rather than a fatal error.
    """
    if not mongo_url:
        logger.error("[MONGODB] MONGO_URL not configured")
        return None

    try:
        client = MongoClient(
            mongo_url,
            serverSelectionTimeoutMS=5000,
            connectTimeoutMS=5000,
            socketTimeoutMS=30000,
            maxPoolSize=10,
            minPoolSize=0,
            maxIdleTimeMS=30000,
            waitQueueTimeoutMS=10000,
            retryWrites=True,
            retryReads=True,
            tz_aware=True,
        )
        client.admin.command('ping')
        logger.info("[MONGODB] Connected successfully")
        return client
    except PyMongoError as e:
        logger.error(f"[MONGODB] Initial connection failed: {str(e)[:200]}")
        return None


def ping(client: MongoClient | None) -> bool:
    """Return True if the server answers a ping."""
    if client is None:
        return False
    try:
        client.admin.command('ping')
        return True
    except PyMongoError as e:
        logger.debug("[MONGODB] Ping failed", extra={"error": str(e)[:200]})
        return False


def close_mongodb_client(client: MongoClient | None) -> None:
    if client is not None:
        client.close()
        logger.info("[MONGODB] Connection closed")
