"""Unit tests for IdentityService."""

import pytest

from linkshare.domain.error import InvalidCredentialError, UnauthenticatedError
from linkshare.domain.repository import UserRepository
from linkshare.domain.service import IdentityService, JWTService, extract_token
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


class TestExtractToken:
    """Parsing of the authorization header."""

    def test_scheme_is_ignored(self):
        assert extract_token("Bearer abc.def.ghi") == "abc.def.ghi"
        assert extract_token("Token abc") == "abc"

    def test_token_is_everything_after_first_space(self):
        assert extract_token("Bearer a b") == "a b"

    @pytest.mark.parametrize("header", ["", "Bearer", "Bearer "])
    def test_missing_token_is_invalid(self, header):
        with pytest.raises(InvalidCredentialError):
            extract_token(header)


class TestResolve:
    """Resolution of the caller for a request."""

    @pytest.mark.asyncio
    async def test_no_header_is_anonymous(self, unit_env):
        identity_service = await unit_env.get(IdentityService)

        caller = await identity_service.resolve(None)

        assert not caller.is_authenticated
        with pytest.raises(UnauthenticatedError):
            caller.require_user()

    @pytest.mark.asyncio
    async def test_valid_token_resolves_user(self, unit_env):
        identity_service = await unit_env.get(IdentityService)
        jwt_service = await unit_env.get(JWTService)
        user_repo = await unit_env.get(UserRepository)
        user = (await user_repo.create("ann@example.com", "hash", "Ann")).unwrap()
        token = jwt_service.create_token(user.id)

        caller = await identity_service.resolve(f"Bearer {token}")

        assert caller.is_authenticated
        assert caller.require_user() == user

    @pytest.mark.asyncio
    @pytest.mark.parametrize("header", ["Bearer garbage", "garbage", "Bearer a.b.c"])
    async def test_invalid_credentials_are_anonymous(self, unit_env, header):
        identity_service = await unit_env.get(IdentityService)

        caller = await identity_service.resolve(header)

        assert caller.user is None

    @pytest.mark.asyncio
    async def test_token_for_unknown_user_is_anonymous(self, unit_env):
        identity_service = await unit_env.get(IdentityService)
        jwt_service = await unit_env.get(JWTService)
        token = jwt_service.create_token(424242)

        caller = await identity_service.resolve(f"Bearer {token}")

        assert not caller.is_authenticated

    @pytest.mark.asyncio
    async def test_authenticate_rejects_forged_token(self, unit_env):
        identity_service = await unit_env.get(IdentityService)

        with pytest.raises(InvalidCredentialError):
            identity_service.authenticate("Bearer forged")
