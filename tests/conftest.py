"""
Shared fixtures: an in-memory Redis double, a recording SMS sender and a
TestClient wired to both through dependency overrides.
"""

import pytest
from fastapi.testclient import TestClient
from redis.exceptions import ConnectionError as RedisConnectionError

from app.api.deps import get_repository, get_sms_service
from app.core.exceptions import DeliveryError
from app.main import app
from app.repositories.cache_repository import CacheRepository
from utils.constants import VERIFICATION_CODE_LENGTH
from utils.phone_utils import format_phone_number


class InMemoryRedis:
    """
    Implements the subset of redis.asyncio.Redis the repository uses.

    Time is a manual clock so TTL behaviour can be tested with advance().
    Operations listed in fail_ops raise a Redis ConnectionError.
    """

    def __init__(self):
        self.now = 0.0
        self.data = {}
        self.expiry = {}
        self.fail_ops = set()
        self.ping_failures = 0
        self.closed = False

    def advance(self, seconds: float):
        self.now += seconds

    def _check(self, op: str):
        if op in self.fail_ops:
            raise RedisConnectionError(f"simulated {op} failure")

    def _purge(self, key: str):
        deadline = self.expiry.get(key)
        if deadline is not None and self.now >= deadline:
            self.data.pop(key, None)
            self.expiry.pop(key, None)

    async def ping(self):
        self._check("ping")
        if self.ping_failures > 0:
            self.ping_failures -= 1
            raise RedisConnectionError("simulated ping failure")
        return True

    async def set(self, key, value, ex=None):
        self._check("set")
        self.data[key] = value if isinstance(value, str) else str(value)
        if ex:
            self.expiry[key] = self.now + ex
        else:
            self.expiry.pop(key, None)
        return True

    async def get(self, key):
        self._check("get")
        self._purge(key)
        value = self.data.get(key)
        return value if isinstance(value, str) else None

    async def delete(self, *keys):
        self._check("delete")
        removed = 0
        for key in keys:
            self._purge(key)
            if self.data.pop(key, None) is not None:
                removed += 1
            self.expiry.pop(key, None)
        return removed

    async def sadd(self, key, *members):
        self._check("sadd")
        members_set = self.data.setdefault(key, set())
        before = len(members_set)
        members_set.update(members)
        return len(members_set) - before

    async def smembers(self, key):
        self._check("smembers")
        return set(self.data.get(key, set()))

    async def ttl(self, key):
        self._purge(key)
        if key not in self.data:
            return -2
        if key not in self.expiry:
            return -1
        return int(self.expiry[key] - self.now)

    async def aclose(self):
        self.closed = True


class FakeSmsService:
    """Records messages instead of calling Twilio."""

    def __init__(self):
        self.sent = []
        self.fail = False

    async def send_sms(self, to_phone: str, message: str):
        if self.fail:
            raise DeliveryError("Failed to send SMS: simulated outage")
        destination = format_phone_number(to_phone)
        self.sent.append((destination, message))
        return {"message_sid": f"SM{len(self.sent):032d}", "status": "queued"}

    def last_code(self) -> str:
        _, message = self.sent[-1]
        return message.split("Your verification code is: ")[1][:VERIFICATION_CODE_LENGTH]


@pytest.fixture
def fake_redis():
    return InMemoryRedis()


@pytest.fixture
def fake_sms():
    return FakeSmsService()


@pytest.fixture
def repository(fake_redis):
    return CacheRepository(fake_redis)


@pytest.fixture
def client(fake_redis, fake_sms):
    app.dependency_overrides[get_repository] = lambda: CacheRepository(fake_redis)
    app.dependency_overrides[get_sms_service] = lambda: fake_sms
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def login(client, fake_sms):
    """Runs send-code + verify and returns (response body, auth headers)."""
    def _login(phone: str = "555-123-4567"):
        client.post("/auth/send-code", json={"phone_number": phone})
        response = client.post("/auth/verify", json={"phone_number": phone, "code": fake_sms.last_code()})
        assert response.status_code == 200
        body = response.json()
        return body, {"Authorization": f"Bearer {body['token']['access_token']}"}
    return _login
