from __future__ import annotations

from datetime import datetime, timedelta, timezone
from types import SimpleNamespace
from uuid import uuid4

import pytest

from src.application.errors import AuthError, ConflictError
from src.application.use_cases.auth import login, logout, refresh_session, signup
from src.application.use_cases.auth.session_tokens import hash_token
from src.domain.models.refresh_token import RefreshToken
from src.domain.models.user import User
from src.infrastructure.auth.jwt_service import JWTService
from src.infrastructure.auth.password import PasswordHasher


class StubUsers:
    def __init__(self) -> None:
        self.items: dict = {}
        self.password_updates: list = []

    async def add(self, user: User) -> User:
        self.items[user.id] = user
        return user

    async def get(self, user_id):
        return self.items.get(user_id)

    async def get_by_username(self, username):
        return next((u for u in self.items.values() if u.username == username), None)

    async def get_by_email(self, email):
        return next((u for u in self.items.values() if u.email == email), None)

    async def get_by_username_or_email(self, username, email):
        return await self.get_by_username(username) or await self.get_by_email(email)

    async def update_password(self, user_id, hashed_password):
        self.password_updates.append(user_id)
        self.items[user_id].hashed_password = hashed_password


class StubRefreshTokens:
    def __init__(self) -> None:
        self.items: dict = {}

    async def add(self, token: RefreshToken) -> RefreshToken:
        self.items[token.id] = token
        return token

    async def list_for_user(self, user_id):
        return [t for t in self.items.values() if t.user_id == user_id]

    async def delete(self, token_id):
        self.items.pop(token_id, None)

    async def delete_by_hash(self, user_id, token_hash):
        for token in await self.list_for_user(user_id):
            if token.token_hash == token_hash:
                del self.items[token.id]
                return True
        return False

    async def delete_for_user(self, user_id):
        doomed = await self.list_for_user(user_id)
        for token in doomed:
            del self.items[token.id]
        return len(doomed)

    async def delete_expired_for_user(self, user_id):
        doomed = [t for t in await self.list_for_user(user_id) if t.is_expired()]
        for token in doomed:
            del self.items[token.id]
        return len(doomed)


def make_uow():
    commits: list[bool] = []

    async def commit():
        commits.append(True)

    async def rollback():
        return None

    return SimpleNamespace(
        users=StubUsers(),
        refresh_tokens=StubRefreshTokens(),
        commit=commit,
        rollback=rollback,
        commits=commits,
    )


@pytest.fixture()
def hasher() -> PasswordHasher:
    return PasswordHasher(schemes=("pbkdf2_sha256",))


@pytest.fixture()
def jwt_service() -> JWTService:
    return JWTService(
        secret_key="access-secret",
        refresh_secret_key="refresh-secret",
        algorithm="HS256",
        access_token_expires_minutes=15,
    )


async def _signup(uow, hasher, jwt_service, username="shepherd", email="shepherd@example.com"):
    return await signup.execute(
        uow=uow,
        payload=signup.SignupInput(username=username, email=email, password="secret123"),
        password_hasher=hasher,
        jwt_service=jwt_service,
    )


@pytest.mark.asyncio
async def test_signup_stores_only_the_refresh_token_digest(hasher, jwt_service):
    uow = make_uow()

    result = await _signup(uow, hasher, jwt_service)

    (stored,) = uow.refresh_tokens.items.values()
    assert stored.token_hash == hash_token(result.refresh_token)
    assert stored.token_hash != result.refresh_token
    assert result.user.farm_name == "My Farm"
    assert jwt_service.decode(result.access_token)["sub"] == str(result.user.id)
    assert hasher.verify("secret123", result.user.hashed_password)


@pytest.mark.asyncio
async def test_signup_reports_which_field_clashes(hasher, jwt_service):
    uow = make_uow()
    await _signup(uow, hasher, jwt_service)

    with pytest.raises(ConflictError) as by_name:
        await _signup(uow, hasher, jwt_service, email="other@example.com")
    with pytest.raises(ConflictError) as by_email:
        await _signup(uow, hasher, jwt_service, username="other")

    assert by_name.value.message == "Username already exists"
    assert by_email.value.message == "Email already exists"


@pytest.mark.asyncio
async def test_login_rejects_bad_password(hasher, jwt_service):
    uow = make_uow()
    await _signup(uow, hasher, jwt_service)

    with pytest.raises(AuthError) as exc:
        await login.execute(
            uow=uow,
            payload=login.LoginInput(username="shepherd", password="wrong"),
            password_hasher=hasher,
            jwt_service=jwt_service,
        )
    assert exc.value.message == "Invalid username or password"


@pytest.mark.asyncio
async def test_login_purges_expired_tokens(hasher, jwt_service):
    uow = make_uow()
    created = await _signup(uow, hasher, jwt_service)
    stale = RefreshToken.create(
        user_id=created.user.id,
        token_hash="stale",
        expires_at=datetime.now(timezone.utc) - timedelta(days=1),
    )
    await uow.refresh_tokens.add(stale)

    await login.execute(
        uow=uow,
        payload=login.LoginInput(username="shepherd", password="secret123"),
        password_hasher=hasher,
        jwt_service=jwt_service,
    )

    assert stale.id not in uow.refresh_tokens.items
    assert len(uow.refresh_tokens.items) == 2


@pytest.mark.asyncio
async def test_login_upgrades_deprecated_hash(jwt_service):
    legacy = PasswordHasher(schemes=("pbkdf2_sha256",))
    current = PasswordHasher(schemes=("pbkdf2_sha512", "pbkdf2_sha256"))
    uow = make_uow()
    created = await _signup(uow, legacy, jwt_service)

    await login.execute(
        uow=uow,
        payload=login.LoginInput(username="shepherd", password="secret123"),
        password_hasher=current,
        jwt_service=jwt_service,
    )

    assert uow.users.password_updates == [created.user.id]
    assert not current.needs_rehash(uow.users.items[created.user.id].hashed_password)


@pytest.mark.asyncio
async def test_refresh_rotates_the_token(hasher, jwt_service):
    uow = make_uow()
    created = await _signup(uow, hasher, jwt_service)

    pair = await refresh_session.execute(
        uow=uow, refresh_token=created.refresh_token, jwt_service=jwt_service
    )

    hashes = {t.token_hash for t in uow.refresh_tokens.items.values()}
    assert hashes == {hash_token(pair.refresh_token)}
    assert pair.refresh_token != created.refresh_token


@pytest.mark.asyncio
async def test_reused_refresh_token_revokes_every_session(hasher, jwt_service):
    uow = make_uow()
    created = await _signup(uow, hasher, jwt_service)
    await refresh_session.execute(
        uow=uow, refresh_token=created.refresh_token, jwt_service=jwt_service
    )

    with pytest.raises(AuthError) as exc:
        await refresh_session.execute(
            uow=uow, refresh_token=created.refresh_token, jwt_service=jwt_service
        )

    assert exc.value.message == "Refresh token not recognized. All sessions revoked."
    assert uow.refresh_tokens.items == {}


@pytest.mark.asyncio
async def test_access_token_is_not_accepted_as_refresh_token(hasher, jwt_service):
    uow = make_uow()
    created = await _signup(uow, hasher, jwt_service)

    with pytest.raises(AuthError):
        await refresh_session.execute(
            uow=uow, refresh_token=created.access_token, jwt_service=jwt_service
        )
    assert len(uow.refresh_tokens.items) == 1


@pytest.mark.asyncio
async def test_logout_removes_only_that_session(hasher, jwt_service):
    uow = make_uow()
    created = await _signup(uow, hasher, jwt_service)
    second = await login.execute(
        uow=uow,
        payload=login.LoginInput(username="shepherd", password="secret123"),
        password_hasher=hasher,
        jwt_service=jwt_service,
    )

    await logout.execute(uow=uow, user_id=created.user.id, refresh_token=created.refresh_token)

    hashes = {t.token_hash for t in uow.refresh_tokens.items.values()}
    assert hashes == {hash_token(second.refresh_token)}


def test_refresh_token_carries_refresh_type(jwt_service):
    token = jwt_service.create_refresh_token(subject=uuid4())

    claims = jwt_service.decode_refresh(token)

    assert claims["typ"] == "refresh"
