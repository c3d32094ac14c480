"""인증 서비스 — 로그인, 회원가입 비즈니스 로직.

Auth Service — Business logic for login and signup.
Credentials are matched against the record store; the returned profile never
carries the secret. No sessions or tokens are issued: the caller keeps the
profile for as long as it considers the user logged in.
"""

from app.repositories.record_store import RecordStore
from app.schemas.user import PublicUser, User
from app.services import simulate_latency
from app.utils.exceptions import EmailInUseError, InvalidCredentialsError
from app.utils.password import hash_password, verify_password


class AuthService:
    """인증 관련 비즈니스 로직을 처리하는 서비스.

    Service handling authentication business logic.

    Attributes:
        store: 레코드 저장소 (Record store holding the user collection)
    """

    def __init__(self, store: RecordStore, delay_ms: int | None = None) -> None:
        self.store: RecordStore = store
        self.delay_ms: int | None = delay_ms

    async def login(self, email: str, password: str) -> PublicUser:
        """로그인을 처리합니다.

        Match email exactly (case-sensitive) and verify the secret.

        Args:
            email: 이메일 (Email, exact match)
            password: 평문 비밀번호 (Plain text secret)

        Returns:
            PublicUser: 비밀번호가 제거된 프로필 (Sanitized profile)

        Raises:
            InvalidCredentialsError: 이메일이 없거나 비밀번호 불일치
                                     (Unknown email or wrong secret — same message for both)
        """
        await simulate_latency(self.delay_ms)

        user: User | None = self.store.find_user_by_email(email)
        if user is None or not verify_password(password, user.password):
            raise InvalidCredentialsError()
        return user.to_public()

    async def signup(
        self,
        email: str,
        password: str,
        name: str | None = None,
        phone: str | None = None,
    ) -> PublicUser:
        """회원가입을 처리합니다 — 기본 역할은 user.

        Register a new account with the default ``user`` role.

        Args:
            email: 이메일 — 대소문자 구분 고유 (Email, unique case-sensitively)
            password: 평문 비밀번호, bcrypt로 해싱 (Plain text, stored as a bcrypt hash)
            name: 표시 이름 (Optional display name)
            phone: 전화번호 (Optional phone)

        Returns:
            PublicUser: 생성된 프로필 (Created sanitized profile)

        Raises:
            EmailInUseError: 이미 사용 중인 이메일 (Email already registered)
        """
        await simulate_latency(self.delay_ms)

        hashed: str = hash_password(password)
        async with self.store.transaction():
            if self.store.find_user_by_email(email) is not None:
                raise EmailInUseError()
            user: User = await self.store.add_user(
                {
                    "email": email,
                    "password": hashed,
                    "name": name,
                    "phone": phone,
                    "role": "user",
                }
            )
        return user.to_public()
