from __future__ import annotations

from passlib.context import CryptContext

DEFAULT_BCRYPT_ROUNDS = 12


class PasswordHasher:
    """passlib ``CryptContext`` wrapper.

    The first scheme hashes new passwords; hashes produced by any other listed
    scheme still verify and are reported by ``needs_rehash``.
    """

    def __init__(
        self,
        schemes: tuple[str, ...] = ("bcrypt",),
        *,
        bcrypt_rounds: int = DEFAULT_BCRYPT_ROUNDS,
    ) -> None:
        options = {"bcrypt__rounds": bcrypt_rounds} if "bcrypt" in schemes else {}
        self._pwd_context = CryptContext(schemes=list(schemes), deprecated="auto", **options)

    def hash(self, password: str) -> str:
        return self._pwd_context.hash(password)

    def verify(self, plain_password: str, hashed_password: str) -> bool:
        try:
            return self._pwd_context.verify(plain_password, hashed_password)
        except ValueError:
            # Unknown or malformed stored hash
            return False

    def needs_rehash(self, hashed_password: str) -> bool:
        return self._pwd_context.needs_update(hashed_password)
