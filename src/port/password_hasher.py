from typing import Protocol


class PasswordHasher(Protocol):
    """One-way password hashing."""
    def hash(self, plaintext: str) -> str:
        """Return a salted hash of `plaintext`."""
        ...

    def verify(self, plaintext: str, hashed: str) -> bool:
        """Return True iff `plaintext` matches `hashed`. Constant time."""
        ...
