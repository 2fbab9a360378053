"""Unit tests for BcryptPasswordHasher."""

import unittest

from adapter.security.bcrypt_hasher import BcryptPasswordHasher


class TestBcryptPasswordHasher(unittest.TestCase):

    def setUp(self):
        self.hasher = BcryptPasswordHasher(rounds=4)

    def test_verify_accepts_original_password(self):
        hashed = self.hasher.hash("secret1")
        self.assertTrue(self.hasher.verify("secret1", hashed))

    def test_verify_rejects_wrong_password(self):
        hashed = self.hasher.hash("secret1")
        self.assertFalse(self.hasher.verify("secret2", hashed))
        self.assertFalse(self.hasher.verify("", hashed))

    def test_hash_differs_from_plaintext(self):
        self.assertNotEqual(self.hasher.hash("secret1"), "secret1")

    def test_same_password_hashes_differently(self):
        """Each hash gets its own salt."""
        first = self.hasher.hash("secret1")
        second = self.hasher.hash("secret1")

        self.assertNotEqual(first, second)
        self.assertTrue(self.hasher.verify("secret1", first))
        self.assertTrue(self.hasher.verify("secret1", second))

    def test_hash_embeds_configured_cost(self):
        hashed = self.hasher.hash("secret1")
        self.assertTrue(hashed.startswith("$2b$04$"))

    def test_verify_returns_false_for_malformed_hash(self):
        self.assertFalse(self.hasher.verify("secret1", "not-a-bcrypt-hash"))
        self.assertFalse(self.hasher.verify("secret1", ""))

    def test_unicode_password(self):
        hashed = self.hasher.hash("pässwörd-日本")
        self.assertTrue(self.hasher.verify("pässwörd-日本", hashed))
        self.assertFalse(self.hasher.verify("passwort-日本", hashed))


if __name__ == '__main__':
    unittest.main()
