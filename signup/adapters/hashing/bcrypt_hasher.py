"""
bcrypt password hasher - Implements PasswordHasher protocol.

bcrypt generates a fresh salt per password and embeds it, together
with the cost factor, in the returned hash string.
"""

import bcrypt

# bcrypt only reads the first 72 bytes of its input
BCRYPT_MAX_BYTES = 72


class BcryptPasswordHasher:
    """
    Implements PasswordHasher protocol via bcrypt.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(self, rounds: int = 10) -> None:
        """
        Args:
            rounds: bcrypt cost factor (log2 of the iteration count)
        """
        self._rounds = rounds

    def hash(self, plaintext: str) -> str:
        """
        Hash ``plaintext`` with a fresh salt.

        Input longer than 72 UTF-8 bytes is truncated to 72 bytes, which
        is what bcrypt would use anyway; bcrypt>=5 refuses longer input.
        """
        secret = plaintext.encode()[:BCRYPT_MAX_BYTES]
        return bcrypt.hashpw(secret, bcrypt.gensalt(rounds=self._rounds)).decode()
