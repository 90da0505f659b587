"""Unit tests for PasswordService."""

import threading

import bcrypt
import pytest

from linkshare.domain.error import PasswordTooLongError
from linkshare.domain.service import PasswordService


class TestPasswordService:
    """bcrypt hashing and verification."""

    @pytest.mark.asyncio
    async def test_hash_is_not_the_password(self, auth_settings):
        password_service = PasswordService(auth_settings)

        password_hash = await password_service.hash_password("hunter2")

        assert password_hash != "hunter2"
        assert password_hash.startswith("$2")

    @pytest.mark.asyncio
    async def test_hashes_are_salted(self, auth_settings):
        password_service = PasswordService(auth_settings)

        first = await password_service.hash_password("same")
        second = await password_service.hash_password("same")

        assert first != second

    @pytest.mark.asyncio
    async def test_verify_matching_password(self, auth_settings):
        password_service = PasswordService(auth_settings)
        password_hash = await password_service.hash_password("hunter2")

        assert await password_service.verify_password("hunter2", password_hash)
        assert not await password_service.verify_password("hunter3", password_hash)

    @pytest.mark.asyncio
    async def test_unreadable_hash_does_not_verify(self, auth_settings):
        password_service = PasswordService(auth_settings)

        assert not await password_service.verify_password(
            "hunter2", "not-a-bcrypt-hash"
        )

    @pytest.mark.asyncio
    async def test_password_at_byte_limit_is_hashed(self, auth_settings):
        password_service = PasswordService(auth_settings)
        password = "p" * 72

        password_hash = await password_service.hash_password(password)

        assert await password_service.verify_password(password, password_hash)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("password", ["p" * 73, "é" * 37])
    async def test_password_over_byte_limit_is_rejected(self, auth_settings, password):
        password_service = PasswordService(auth_settings)
        password_hash = await password_service.hash_password("hunter2")

        with pytest.raises(PasswordTooLongError) as exc_info:
            await password_service.hash_password(password)
        assert exc_info.value.code == "PASSWORD_TOO_LONG"

        with pytest.raises(PasswordTooLongError):
            await password_service.verify_password(password, password_hash)

    @pytest.mark.asyncio
    async def test_bcrypt_runs_off_the_event_loop_thread(self, auth_settings, monkeypatch):
        password_service = PasswordService(auth_settings)
        loop_thread = threading.get_ident()
        threads = []
        real_hashpw, real_checkpw = bcrypt.hashpw, bcrypt.checkpw

        def recording_hashpw(*args):
            threads.append(threading.get_ident())
            return real_hashpw(*args)

        def recording_checkpw(*args):
            threads.append(threading.get_ident())
            return real_checkpw(*args)

        monkeypatch.setattr(bcrypt, "hashpw", recording_hashpw)
        monkeypatch.setattr(bcrypt, "checkpw", recording_checkpw)

        password_hash = await password_service.hash_password("hunter2")
        await password_service.verify_password("hunter2", password_hash)

        assert len(threads) == 2
        assert loop_thread not in threads
