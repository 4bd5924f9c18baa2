from __future__ import annotations

from passlib.context import CryptContext


class PasswordHasher:
    def __init__(self, schemes: tuple[str, ...] = ("bcrypt",)) -> None:
        self._pwd_context = CryptContext(schemes=schemes, deprecated="auto")

    def hash(self, password: str) -> str:
        return self._pwd_context.hash(password)

    def verify(self, plain_password: str, hashed_password: str | None) -> bool:
        # Unknown users still pay for one hash so response time does not leak emails
        if not hashed_password:
            self._pwd_context.dummy_verify()
            return False
        return self._pwd_context.verify(plain_password, hashed_password)
