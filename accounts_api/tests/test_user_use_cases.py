from __future__ import annotations

from http import HTTPStatus

import pytest

from accounts_api.application.services.credential_store import CredentialStore
from accounts_api.application.services.session_tokens import SessionTokenService
from accounts_api.application.use_cases.users import (
    AuthorizeRequestUseCase,
    GetProfileUseCase,
    LoginUserUseCase,
    LogoutUserUseCase,
    RegisterUserUseCase,
    UpdateProfileUseCase,
)
from accounts_api.domain.users.entities import ProfileChanges, SessionIdentity, UserProfile
from accounts_api.domain.users.exceptions import (
    InvalidCredentialsError,
    NotAuthorizedInvalidTokenError,
    NotAuthorizedNoTokenError,
    UserAlreadyExistsError,
    UserNotFoundError,
)


@pytest.fixture()
def register(credentials: CredentialStore, tokens: SessionTokenService) -> RegisterUserUseCase:
    return RegisterUserUseCase(credentials=credentials, tokens=tokens)


@pytest.fixture()
def login(credentials: CredentialStore, tokens: SessionTokenService) -> LoginUserUseCase:
    return LoginUserUseCase(credentials=credentials, tokens=tokens)


def test_register_user_success(
    register: RegisterUserUseCase, credentials: CredentialStore, tokens: SessionTokenService
) -> None:
    result = register.execute("raj", "raj@123.com", "123")

    assert result.status == HTTPStatus.CREATED
    assert set(result.body) == {"id", "name", "email"}
    assert result.body["name"] == "raj"
    assert result.body["email"] == "raj@123.com"

    stored = credentials.find_by_email("raj@123.com")
    assert stored is not None
    assert stored.password_hash != "123"
    assert stored.password_hash not in result.body.values()

    (cookie,) = result.cookies
    assert cookie.name == "jwt"
    assert tokens.decode(cookie.value) == result.body["id"]


def test_register_user_duplicate_raises(register: RegisterUserUseCase) -> None:
    register.execute("raj", "raj@123.com", "123")

    with pytest.raises(UserAlreadyExistsError) as exc_info:
        register.execute("other", "raj@123.com", "456")

    assert exc_info.value.status == HTTPStatus.BAD_REQUEST
    assert exc_info.value.to_dict() == {"error": "User already exists"}


def test_register_assigns_distinct_ids(register: RegisterUserUseCase) -> None:
    first = register.execute("a", "a@example.com", "pw")
    second = register.execute("b", "b@example.com", "pw")

    assert first.body["id"] != second.body["id"]


def test_login_user_success(
    register: RegisterUserUseCase, login: LoginUserUseCase, tokens: SessionTokenService
) -> None:
    created = register.execute("alice", "alice@example.com", "secret123")

    result = login.execute("alice@example.com", "secret123")

    assert result.status == HTTPStatus.OK
    assert result.body == created.body
    assert tokens.decode(result.cookies[0].value) == created.body["id"]


def test_login_wrong_password_and_unknown_email_are_indistinguishable(
    register: RegisterUserUseCase, login: LoginUserUseCase
) -> None:
    register.execute("alice", "alice@example.com", "secret123")

    with pytest.raises(InvalidCredentialsError) as wrong_password:
        login.execute("alice@example.com", "wrong")
    with pytest.raises(InvalidCredentialsError) as unknown_email:
        login.execute("nobody@example.com", "secret123")

    assert wrong_password.value.status == HTTPStatus.UNAUTHORIZED
    assert wrong_password.value.to_dict() == unknown_email.value.to_dict()
    assert wrong_password.value.to_dict() == {"error": "Invalid email or password"}


def test_logout_clears_cookie(tokens: SessionTokenService) -> None:
    result = LogoutUserUseCase(tokens=tokens).execute()

    assert result.status == HTTPStatus.OK
    assert result.body == {"message": "User Logged Out"}
    (cookie,) = result.cookies
    assert cookie.name == "jwt"
    assert cookie.value == ""
    assert cookie.expires == 0


def test_get_profile_wraps_identity() -> None:
    profile = UserProfile(id="u1", name="John Doe", email="john@example.com")

    result = GetProfileUseCase().execute(SessionIdentity(user_id="u1", profile=profile))

    assert result.status == HTTPStatus.OK
    assert result.body == {
        "message": "User Profile",
        "user": {"id": "u1", "name": "John Doe", "email": "john@example.com"},
    }
    assert result.cookies == ()


def test_get_profile_for_missing_account_raises() -> None:
    with pytest.raises(UserNotFoundError) as exc_info:
        GetProfileUseCase().execute(SessionIdentity(user_id="gone"))

    assert exc_info.value.status == HTTPStatus.NOT_FOUND


def test_update_profile_missing_user_raises(credentials: CredentialStore) -> None:
    use_case = UpdateProfileUseCase(credentials=credentials)

    with pytest.raises(UserNotFoundError) as exc_info:
        use_case.execute("does-not-exist", ProfileChanges(name="x"))

    assert exc_info.value.status == HTTPStatus.NOT_FOUND
    assert exc_info.value.to_dict() == {"error": "User not found"}


def test_update_profile_changes_name_and_email(
    register: RegisterUserUseCase, credentials: CredentialStore
) -> None:
    created = register.execute("alice", "alice@example.com", "secret123")
    use_case = UpdateProfileUseCase(credentials=credentials)

    result = use_case.execute(
        created.body["id"], ProfileChanges(name="Alice B", email="alice.b@example.com")
    )

    assert result.status == HTTPStatus.OK
    assert result.body == {
        "id": created.body["id"],
        "name": "Alice B",
        "email": "alice.b@example.com",
    }
    assert credentials.find_by_email("alice@example.com") is None


def test_update_profile_without_password_keeps_hash(
    register: RegisterUserUseCase, credentials: CredentialStore
) -> None:
    created = register.execute("alice", "alice@example.com", "secret123")
    before = credentials.find_by_id(created.body["id"])

    UpdateProfileUseCase(credentials=credentials).execute(
        created.body["id"], ProfileChanges(name="Updated Name")
    )

    after = credentials.find_by_id(created.body["id"])
    assert before is not None and after is not None
    assert after.name == "Updated Name"
    assert after.password_hash == before.password_hash


def test_update_profile_password_change_switches_credentials(
    register: RegisterUserUseCase, login: LoginUserUseCase, credentials: CredentialStore
) -> None:
    created = register.execute("alice", "alice@example.com", "old-password")

    UpdateProfileUseCase(credentials=credentials).execute(
        created.body["id"], ProfileChanges(password="new-password")
    )

    with pytest.raises(InvalidCredentialsError):
        login.execute("alice@example.com", "old-password")
    assert login.execute("alice@example.com", "new-password").status == HTTPStatus.OK


def test_update_profile_to_taken_email_raises(
    register: RegisterUserUseCase, credentials: CredentialStore
) -> None:
    register.execute("alice", "alice@example.com", "pw")
    bob = register.execute("bob", "bob@example.com", "pw")

    with pytest.raises(UserAlreadyExistsError):
        UpdateProfileUseCase(credentials=credentials).execute(
            bob.body["id"], ProfileChanges(email="alice@example.com")
        )


def test_authorize_without_token_raises(
    credentials: CredentialStore, tokens: SessionTokenService
) -> None:
    gate = AuthorizeRequestUseCase(credentials=credentials, tokens=tokens)

    for missing in (None, ""):
        with pytest.raises(NotAuthorizedNoTokenError) as exc_info:
            gate.execute(missing)
        assert exc_info.value.to_dict() == {"error": "Not authorized, no token"}
        assert exc_info.value.status == HTTPStatus.UNAUTHORIZED


def test_authorize_with_invalid_token_raises(
    credentials: CredentialStore, tokens: SessionTokenService
) -> None:
    gate = AuthorizeRequestUseCase(credentials=credentials, tokens=tokens)
    forged = SessionTokenService(
        "a-different-secret-0123456789abcdef", secure_cookies=True
    ).encode("someone")

    for token in ("invalid-token", forged):
        with pytest.raises(NotAuthorizedInvalidTokenError) as exc_info:
            gate.execute(token)
        assert exc_info.value.to_dict() == {"error": "Not authorized, invalid token"}


def test_authorize_with_valid_token_returns_identity(
    register: RegisterUserUseCase, credentials: CredentialStore, tokens: SessionTokenService
) -> None:
    created = register.execute("John Doe", "john@example.com", "123")
    gate = AuthorizeRequestUseCase(credentials=credentials, tokens=tokens)

    identity = gate.execute(created.cookies[0].value)

    assert identity.user_id == created.body["id"]
    assert identity.profile == UserProfile(
        id=created.body["id"], name="John Doe", email="john@example.com"
    )
    assert not hasattr(identity.profile, "password_hash")


def test_authorize_admits_token_for_vanished_user_without_profile(
    register: RegisterUserUseCase, users, credentials: CredentialStore, tokens: SessionTokenService
) -> None:
    created = register.execute("John Doe", "john@example.com", "123")
    users.delete(created.body["id"])
    gate = AuthorizeRequestUseCase(credentials=credentials, tokens=tokens)

    identity = gate.execute(created.cookies[0].value)

    assert identity == SessionIdentity(user_id=created.body["id"], profile=None)
    with pytest.raises(UserNotFoundError):
        UpdateProfileUseCase(credentials=credentials).execute(
            identity.user_id, ProfileChanges(name="x")
        )
