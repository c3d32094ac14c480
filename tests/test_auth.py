"""인증 서비스 테스트 — 로그인, 회원가입.

Auth service tests — Login and signup, including the failure taxonomy.
"""

import pytest

from app.utils.exceptions import EmailInUseError, InvalidCredentialsError


class TestLogin:
    """로그인 테스트."""

    async def test_login_admin_success(self, auth_service):
        profile = await auth_service.login("admin@example.com", "admin123")
        assert profile.id == "1"
        assert profile.role == "admin"
        assert "password" not in profile.to_json_dict()

    async def test_login_user_success(self, auth_service):
        profile = await auth_service.login("user@example.com", "user123")
        assert profile.id == "2"
        assert profile.phone == "555-123-4567"

    async def test_wrong_password_and_unknown_email_look_the_same(self, auth_service):
        """비밀번호 오류와 미등록 이메일은 같은 메시지."""
        with pytest.raises(InvalidCredentialsError) as wrong_secret:
            await auth_service.login("admin@example.com", "nope")
        with pytest.raises(InvalidCredentialsError) as unknown_email:
            await auth_service.login("ghost@example.com", "admin123")

        assert wrong_secret.value.detail == unknown_email.value.detail == "Invalid email or password"
        assert wrong_secret.value.status_code == 401

    async def test_email_match_is_case_sensitive(self, auth_service):
        with pytest.raises(InvalidCredentialsError):
            await auth_service.login("Admin@Example.com", "admin123")


class TestSignup:
    """회원가입 테스트."""

    async def test_signup_then_login(self, auth_service):
        created = await auth_service.signup("new@example.com", "s3cret", "New Resident", "555-000-1111")
        assert created.id == "3"
        assert created.role == "user"
        assert created.name == "New Resident"

        logged_in = await auth_service.login("new@example.com", "s3cret")
        assert logged_in.id == created.id
        assert logged_in.role == created.role

    async def test_signup_without_optional_fields(self, auth_service):
        created = await auth_service.signup("bare@example.com", "pw")
        assert created.name is None
        assert created.phone is None

    async def test_signup_duplicate_email(self, auth_service, store):
        before = len(store.users())
        with pytest.raises(EmailInUseError) as exc:
            await auth_service.signup("user@example.com", "whatever")

        assert exc.value.detail == "Email already in use"
        assert exc.value.status_code == 409
        assert len(store.users()) == before

    async def test_signup_email_uniqueness_is_case_sensitive(self, auth_service):
        created = await auth_service.signup("USER@example.com", "pw")
        assert created.email == "USER@example.com"

    async def test_signup_stores_hash_not_secret(self, auth_service, store):
        await auth_service.signup("hash@example.com", "plaintext-secret")
        stored = store.find_user_by_email("hash@example.com")
        assert stored.password != "plaintext-secret"

    async def test_signup_with_secret_over_72_bytes(self, auth_service):
        """bcrypt 한도(72바이트)를 넘는 비밀번호도 가입/로그인 가능."""
        secret = "x" * 73
        created = await auth_service.signup("long@example.com", secret)

        logged_in = await auth_service.login("long@example.com", secret)
        assert logged_in.id == created.id

    async def test_long_secrets_differing_past_72_bytes_do_not_match(self, auth_service):
        await auth_service.signup("tail@example.com", "y" * 72 + "a")
        with pytest.raises(InvalidCredentialsError):
            await auth_service.login("tail@example.com", "y" * 72 + "b")
