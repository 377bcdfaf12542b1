"""
app/db/redis_client.py

Purpose: Redis connection setup

- Initializes the async Redis client with a bounded connection pool
- Startup connectivity check with fixed-delay retries
- Health checks
- Proper connection lifecycle management
"""

from redis.asyncio import Redis
from redis.exceptions import RedisError
from typing import Optional
import asyncio
from app.core.config import settings
from app.core.logging import get_logger

logger = get_logger(__name__)

# Global Redis client
_client: Optional[Redis] = None


def create_redis_client() -> Redis:
    """
    Builds a Redis client from settings. Does not open a connection.
    """
    return Redis(
        host=settings.REDIS_HOST,
        port=settings.REDIS_PORT,
        password=settings.REDIS_PASSWORD,
        db=settings.REDIS_DB,
        max_connections=settings.REDIS_MAX_CONNECTIONS,
        socket_connect_timeout=settings.REDIS_SOCKET_CONNECT_TIMEOUT,
        socket_timeout=settings.REDIS_SOCKET_TIMEOUT,
        decode_responses=True,
    )


async def connect_to_redis(client: Optional[Redis] = None):
    """
    Establishes connection to Redis with retry logic.
    Called during application startup.

    Raises:
        ConnectionError: If Redis is unreachable after all retries
    """
    global _client

    if _client is not None:
        logger.warning("Redis client already initialized")
        return

    max_retries = settings.REDIS_CONNECT_RETRIES
    retry_delay = settings.REDIS_RETRY_DELAY_SECONDS
    candidate = client or create_redis_client()

    for attempt in range(1, max_retries + 1):
        try:
            logger.info(
                f"Attempting to connect to Redis at {settings.REDIS_HOST}:{settings.REDIS_PORT} "
                f"(attempt {attempt}/{max_retries})"
            )

            await candidate.ping()

            _client = candidate
            logger.info("✅ Successfully connected to Redis")
            return

        except (RedisError, OSError) as e:
            logger.error(
                f"Failed to connect to Redis (attempt {attempt}/{max_retries}): {e}"
            )

            if attempt < max_retries:
                logger.info(f"Retrying in {retry_delay} seconds...")
                await asyncio.sleep(retry_delay)
            else:
                logger.critical("Failed to connect to Redis after all retries")
                await candidate.aclose()
                raise ConnectionError("Could not establish Redis connection") from e


async def close_redis_connection():
    """
    Closes the Redis connection pool.
    Called during application shutdown.
    """
    global _client

    if _client:
        logger.info("Closing Redis connection")
        await _client.aclose()
        _client = None
        logger.info("Redis connection closed")


async def check_redis_health() -> bool:
    """
    Checks if the Redis connection is healthy.

    Returns:
        True if connection is healthy, False otherwise
    """
    try:
        if _client is None:
            logger.error("Redis client not initialized")
            return False

        await _client.ping()
        return True

    except (RedisError, OSError) as e:
        logger.error(f"Redis health check failed: {str(e)}")
        return False


def get_redis() -> Redis:
    """
    Returns the process-wide Redis client.

    Raises:
        RuntimeError: If Redis is not initialized
    """
    if _client is None:
        raise RuntimeError(
            "Redis not initialized. Call connect_to_redis() during startup."
        )
    return _client
