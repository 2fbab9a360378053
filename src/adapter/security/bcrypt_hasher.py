"""bcrypt implementation of PasswordHasher."""

import bcrypt

# 12 rounds = 2^12 key-expansion iterations
BCRYPT_ROUNDS = 12


class BcryptPasswordHasher:
    def __init__(self, rounds: int = BCRYPT_ROUNDS):
        self.rounds = rounds

    def hash(self, plaintext: str) -> str:
        """Hash password with a fresh salt.

        Returns:
            Bcrypt hash as a string (salt and cost are embedded in it)
        """
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(plaintext.encode('utf-8'), salt).decode('utf-8')

    def verify(self, plaintext: str, hashed: str) -> bool:
        """Verify password against hash.

        bcrypt.checkpw compares in constant time. A stored value that is not
        a bcrypt hash never matches.
        """
        if not hashed:
            return False
        try:
            return bcrypt.checkpw(plaintext.encode('utf-8'), hashed.encode('utf-8'))
        except ValueError:
            return False
