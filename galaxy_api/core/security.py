import hmac

from passlib.context import CryptContext

from ..config import Settings

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


class AdminCredentialVerifier:
    """Checks the admin password against a bcrypt hash or a plaintext secret.

    The hash wins when both are configured.
    """

    def __init__(self, secret: str = "", password_hash: str = "") -> None:
        if not secret and not password_hash:
            raise ValueError("Admin secret or password hash must be configured")
        self._secret = secret
        self._password_hash = password_hash

    @classmethod
    def from_settings(cls, settings: Settings) -> "AdminCredentialVerifier":
        return cls(secret=settings.admin_password, password_hash=settings.admin_password_hash)

    def verify(self, password: str | None) -> bool:
        if not isinstance(password, str) or not password:
            return False
        if self._password_hash:
            return verify_password(password, self._password_hash)
        return hmac.compare_digest(password.encode(), self._secret.encode())
