"""
Password hashing with bcrypt.
"""

import bcrypt

from .interfaces import IPasswordHasher

# bcrypt cost factor used for every stored password
PASSWORD_WORK_FACTOR = 10

# bcrypt only reads this many bytes of the password
BCRYPT_MAX_BYTES = 72


def _password_bytes(plaintext: str) -> bytes:
    return plaintext.encode("utf-8")[:BCRYPT_MAX_BYTES]


class BcryptHasher(IPasswordHasher):
    """
    bcrypt implementation of IPasswordHasher.

    Passwords longer than 72 bytes are truncated before hashing and
    comparing, so long passwords are accepted and match their own hash.
    """

    def __init__(self, rounds: int = PASSWORD_WORK_FACTOR):
        self.rounds = rounds

    def hash(self, plaintext: str) -> str:
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(_password_bytes(plaintext), salt).decode("utf-8")

    def compare(self, plaintext: str, hashed: str) -> bool:
        try:
            return bcrypt.checkpw(_password_bytes(plaintext), hashed.encode("utf-8"))
        except ValueError:
            # Stored value is not a bcrypt hash
            return False
