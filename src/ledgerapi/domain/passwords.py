"""Password hashing."""

import bcrypt

from ledgerapi.config import DEFAULT_BCRYPT_ROUNDS


class PasswordHasher:
    """Salted bcrypt hashing with a configurable cost factor."""

    def __init__(self, rounds: int = DEFAULT_BCRYPT_ROUNDS):
        self.rounds = rounds

    def hash(self, plaintext: str) -> str:
        """Hash a password with a fresh random salt.

        Raises:
            ValueError: If the password is longer than bcrypt accepts
        """
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(plaintext.encode("utf-8"), salt).decode("utf-8")

    def verify(self, plaintext: str, password_hash: str) -> bool:
        """Check a password against a stored hash.

        Returns False for anything that cannot be checked, including a
        malformed hash.
        """
        if not isinstance(plaintext, str) or not isinstance(password_hash, str):
            return False
        try:
            return bcrypt.checkpw(plaintext.encode("utf-8"), password_hash.encode("utf-8"))
        except ValueError:
            return False
