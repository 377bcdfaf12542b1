"""
Quick check of the Redis connection and the key layout used by the service

Run: python scripts/check_redis.py
"""

import asyncio
import sys
from pathlib import Path
from dotenv import load_dotenv

sys.path.insert(0, str(Path(__file__).parent.parent))

# Load environment variables
load_dotenv()

from app.core.config import settings
from app.db.redis_client import create_redis_client
from app.models.user import User
from app.repositories.cache_repository import CacheRepository
import logging

logging.basicConfig(level=logging.INFO, format='%(levelname)s: %(message)s')
logger = logging.getLogger(__name__)

TEST_PHONE = "000-000-0000"


async def check_connection():
    """Ping Redis and exercise a verification code and a user record"""
    print("=" * 60)
    print("  Redis Connection Check")
    print("=" * 60 + "\n")

    client = create_redis_client()

    try:
        logger.info(f"🔌 Connecting to Redis at {settings.REDIS_HOST}:{settings.REDIS_PORT}...")
        await client.ping()
        logger.info("✅ Connection successful!\n")

        repository = CacheRepository(client)

        logger.info("🧪 Testing verification code write/read...")
        await repository.store_verification_code(TEST_PHONE, "000000")
        code = await repository.get_verification_code(TEST_PHONE)
        ttl = await client.ttl(f"verification:{TEST_PHONE}")
        logger.info(f"✅ Read back code {code} (ttl={ttl}s)")
        await repository.clear_verification_code(TEST_PHONE)

        logger.info("🧪 Testing user write/read...")
        await repository.store_user(User(phone_number=TEST_PHONE, is_verified=True))
        user = await repository.get_user(TEST_PHONE)
        logger.info(f"📄 User data: {user.model_dump()}\n")
        await client.delete(f"user:profile:{TEST_PHONE}", f"user:session:{TEST_PHONE}")

        logger.info("✅ All checks passed!")

    except Exception as e:
        logger.error(f"❌ Check failed: {e}")
        raise
    finally:
        await client.aclose()

    print("\n" + "=" * 60)


if __name__ == "__main__":
    asyncio.run(check_connection())
