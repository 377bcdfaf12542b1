"""
Tests for the verification and login flow
"""
import pytest

from app.core.exceptions import AuthenticationError, DeliveryError, StorageError
from app.core.security import decode_access_token
from app.services.auth_service import AuthService


PHONE = "555-123-4567"


@pytest.fixture
def service(repository, fake_sms):
    return AuthService(repository, fake_sms)


@pytest.mark.asyncio
async def test_send_code_stores_and_sends(service, repository, fake_sms):
    response = await service.send_verification_code(PHONE)

    assert response.success is True
    assert response.message == "Verification code sent successfully"

    code = await repository.get_verification_code(PHONE)
    assert len(code) == 6 and code.isdigit()

    destination, message = fake_sms.sent[-1]
    assert destination == "+15551234567"
    assert message == f"Your verification code is: {code}. Valid for 10 minutes."


@pytest.mark.asyncio
async def test_sent_code_expires(service, repository, fake_redis):
    await service.send_verification_code(PHONE)
    fake_redis.advance(600)
    assert await repository.get_verification_code(PHONE) is None


@pytest.mark.asyncio
async def test_send_code_storage_failure(service, fake_redis, fake_sms):
    fake_redis.fail_ops.add("set")
    with pytest.raises(StorageError):
        await service.send_verification_code(PHONE)
    assert fake_sms.sent == []


@pytest.mark.asyncio
async def test_send_code_delivery_failure_keeps_code(service, repository, fake_sms):
    fake_sms.fail = True
    with pytest.raises(DeliveryError):
        await service.send_verification_code(PHONE)
    assert await repository.get_verification_code(PHONE) is not None


@pytest.mark.asyncio
async def test_verify_without_code_fails(service):
    with pytest.raises(AuthenticationError) as exc_info:
        await service.verify_code_and_login(PHONE, "123456")
    assert exc_info.value.message == "Invalid or expired verification code"


@pytest.mark.asyncio
async def test_verify_expired_code_fails(service, fake_redis, fake_sms):
    await service.send_verification_code(PHONE)
    fake_redis.advance(601)
    with pytest.raises(AuthenticationError):
        await service.verify_code_and_login(PHONE, fake_sms.last_code())


@pytest.mark.asyncio
async def test_mismatched_code_leaves_stored_code(service, repository):
    await repository.store_verification_code(PHONE, "123456")

    with pytest.raises(AuthenticationError) as exc_info:
        await service.verify_code_and_login(PHONE, "654321")

    assert exc_info.value.message == "Invalid verification code"
    assert await repository.get_verification_code(PHONE) == "123456"
    assert await repository.get_user(PHONE) is None


@pytest.mark.asyncio
async def test_first_login_creates_verified_user(service, repository, fake_sms):
    await service.send_verification_code(PHONE)

    result = await service.verify_code_and_login(PHONE, fake_sms.last_code())

    assert result.user.is_verified is True
    assert result.user.phone_number == PHONE
    assert len(result.user.id) == 32
    assert await repository.get_user(PHONE) == result.user
    assert await repository.get_session(PHONE) == result.user

    assert result.token.token_type == "Bearer"
    assert result.token.expires_in == 86400
    claims = decode_access_token(result.token.access_token)
    assert claims.user_id == result.user.id
    assert claims.phone_number == PHONE


@pytest.mark.asyncio
async def test_second_login_reuses_identity(service, fake_sms):
    await service.send_verification_code(PHONE)
    first = await service.verify_code_and_login(PHONE, fake_sms.last_code())

    await service.send_verification_code(PHONE)
    second = await service.verify_code_and_login(PHONE, fake_sms.last_code())

    assert second.user.id == first.user.id
    assert second.user.created_at == first.user.created_at
    assert second.user.last_login >= first.user.last_login


@pytest.mark.asyncio
async def test_used_code_cannot_be_replayed(service, fake_sms):
    await service.send_verification_code(PHONE)
    code = fake_sms.last_code()

    await service.verify_code_and_login(PHONE, code)

    with pytest.raises(AuthenticationError):
        await service.verify_code_and_login(PHONE, code)


@pytest.mark.asyncio
async def test_clear_failure_does_not_fail_login(service, repository, fake_redis):
    await repository.store_verification_code(PHONE, "123456")
    fake_redis.fail_ops.add("delete")

    result = await service.verify_code_and_login(PHONE, "123456")

    assert result.user.is_verified is True
    # Code stays live until its TTL runs out
    assert await repository.get_verification_code(PHONE) == "123456"


@pytest.mark.asyncio
async def test_user_store_failure_raises(service, repository, fake_redis):
    await repository.store_verification_code(PHONE, "123456")
    fake_redis.fail_ops.add("set")

    with pytest.raises(StorageError):
        await service.verify_code_and_login(PHONE, "123456")
