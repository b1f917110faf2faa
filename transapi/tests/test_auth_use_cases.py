from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from transapi.application.use_cases.users.login_user import LoginUserUseCase
from transapi.application.use_cases.users.register_user import RegisterUserUseCase
from transapi.domain.users.entities import Claims, User
from transapi.domain.users.exceptions import InvalidCredentialsError, UserAlreadyExistsError
from transapi.domain.users.repositories import PasswordHasher, TokenService, UserRepository


class InMemoryUserRepository(UserRepository):
    def __init__(self) -> None:
        self._users: dict[str, User] = {}
        self._seq = 1

    def find_by_username(self, username: str) -> User | None:
        return self._users.get(username)

    def find_by_id(self, user_id: int) -> User | None:
        return next((u for u in self._users.values() if u.id == user_id), None)

    def add(self, username: str, password_hash: str) -> User:
        if username in self._users:
            raise UserAlreadyExistsError()
        now = datetime.now(UTC)
        new_user = User(
            id=self._seq,
            username=username,
            password_hash=password_hash,
            created_at=now,
            updated_at=now,
        )
        self._seq += 1
        self._users[username] = new_user
        return new_user


class FakeTokenService(TokenService):
    def __init__(self) -> None:
        self.issued: list[str] = []

    def issue(self, username: str) -> str:
        self.issued.append(username)
        return f"token-{username}"

    def validate(self, token: str) -> Claims:
        now = datetime.now(UTC)
        return Claims(username=token.removeprefix("token-"), issued_at=now, expires_at=now)


class DeterministicHasher(PasswordHasher):
    def __init__(self) -> None:
        self.verified: list[str] = []

    def hash(self, password: str) -> str:
        return f"hashed:{password}"

    def verify(self, password: str, hashed: str) -> bool:
        self.verified.append(password)
        return hashed == f"hashed:{password}"


@pytest.fixture()
def users() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture()
def tokens() -> FakeTokenService:
    return FakeTokenService()


def _login(users: UserRepository, tokens: TokenService) -> LoginUserUseCase:
    return LoginUserUseCase(
        users=users,
        tokens=tokens,
        password_hasher=DeterministicHasher(),
        token_ttl=timedelta(hours=24),
    )


def test_register_user_success(users: InMemoryUserRepository) -> None:
    use_case = RegisterUserUseCase(users=users, password_hasher=DeterministicHasher())

    user = use_case.execute("alice", "secret123")

    assert user.username == "alice"
    assert user.password_hash == "hashed:secret123"
    assert users.find_by_username("alice") is not None


def test_register_user_duplicate_raises(users: InMemoryUserRepository) -> None:
    use_case = RegisterUserUseCase(users=users, password_hasher=DeterministicHasher())
    use_case.execute("alice", "secret123")

    with pytest.raises(UserAlreadyExistsError) as exc_info:
        use_case.execute("alice", "other")

    assert exc_info.value.status == 409
    assert users.find_by_username("alice").password_hash == "hashed:secret123"


def test_login_user_success(users: InMemoryUserRepository, tokens: FakeTokenService) -> None:
    RegisterUserUseCase(users=users, password_hasher=DeterministicHasher()).execute(
        "alice", "secret123"
    )

    result = _login(users, tokens).execute("alice", "secret123")

    assert result.token == "token-alice"
    assert result.expires_in == 24 * 3600


def test_login_user_invalid_credentials(
    users: InMemoryUserRepository, tokens: FakeTokenService
) -> None:
    RegisterUserUseCase(users=users, password_hasher=DeterministicHasher()).execute(
        "alice", "secret123"
    )

    with pytest.raises(InvalidCredentialsError):
        _login(users, tokens).execute("alice", "wrong")

    assert tokens.issued == []


def test_login_unknown_user_is_indistinguishable(
    users: InMemoryUserRepository, tokens: FakeTokenService
) -> None:
    hasher = DeterministicHasher()
    login = LoginUserUseCase(
        users=users, tokens=tokens, password_hasher=hasher, token_ttl=timedelta(hours=24)
    )

    with pytest.raises(InvalidCredentialsError) as exc_info:
        login.execute("ghost", "whatever")

    assert hasher.verified == ["whatever"]
    assert tokens.issued == []

    assert exc_info.value.code == "invalid_credentials"
    assert exc_info.value.status == 401
