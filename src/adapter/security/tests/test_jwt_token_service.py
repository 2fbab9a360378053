"""Unit tests for JWTTokenService."""

import unittest
from datetime import datetime, timedelta, timezone

from jose import jwt

from adapter.security.jwt_token_service import JWTTokenService
from domain.model.errors import ConfigError, InvalidTokenError
from domain.model.identity import TokenClaims

SECRET = "unit-test-secret"
CLAIMS = TokenClaims(user_id="user-123", email="a@x.com")


class TestJWTTokenServiceConfig(unittest.TestCase):

    def test_missing_secret_raises_config_error(self):
        with self.assertRaises(ConfigError):
            JWTTokenService(None)

    def test_empty_secret_raises_config_error(self):
        with self.assertRaises(ConfigError):
            JWTTokenService("")

    def test_non_positive_expiration_raises_config_error(self):
        with self.assertRaises(ConfigError):
            JWTTokenService(SECRET, expiration=timedelta(0))


class TestIssueAndVerify(unittest.TestCase):

    def setUp(self):
        self.service = JWTTokenService(SECRET, expiration=timedelta(minutes=30))

    def test_issued_token_verifies(self):
        token = self.service.issue(CLAIMS)
        claims = self.service.verify(token)

        self.assertEqual(claims.user_id, "user-123")
        self.assertEqual(claims.email, "a@x.com")

    def test_token_carries_iat_and_exp(self):
        before = datetime.now(timezone.utc).replace(microsecond=0)
        claims = self.service.verify(self.service.issue(CLAIMS))

        self.assertGreaterEqual(claims.issued_at, before)
        self.assertEqual(claims.expires_at - claims.issued_at, timedelta(minutes=30))

    def test_payload_uses_standard_claim_names(self):
        token = self.service.issue(CLAIMS)
        payload = jwt.get_unverified_claims(token)

        self.assertEqual(payload["sub"], "user-123")
        self.assertEqual(payload["email"], "a@x.com")
        self.assertIn("iat", payload)
        self.assertIn("exp", payload)
        self.assertEqual(jwt.get_unverified_header(token)["alg"], "HS256")


class TestVerifyRejects(unittest.TestCase):

    def setUp(self):
        self.service = JWTTokenService(SECRET)

    def _encode(self, payload: dict, secret: str = SECRET, algorithm: str = "HS256") -> str:
        return jwt.encode(payload, secret, algorithm=algorithm)

    def _valid_payload(self, **overrides) -> dict:
        now = datetime.now(timezone.utc)
        payload = {"sub": "user-123", "email": "a@x.com", "iat": now, "exp": now + timedelta(hours=1)}
        payload.update(overrides)
        return payload

    def test_rejects_expired_token(self):
        now = datetime.now(timezone.utc)
        token = self._encode(self._valid_payload(iat=now - timedelta(hours=2), exp=now - timedelta(hours=1)))

        with self.assertRaises(InvalidTokenError):
            self.service.verify(token)

    def test_rejects_token_issued_by_service_after_window(self):
        short_lived = JWTTokenService(SECRET, expiration=timedelta(seconds=1))
        token = short_lived.issue(CLAIMS)
        payload = jwt.get_unverified_claims(token)
        # Re-sign the same claims with exp moved into the past
        payload["exp"] = payload["iat"] - 1

        with self.assertRaises(InvalidTokenError):
            short_lived.verify(self._encode(payload))

    def test_rejects_token_signed_with_other_secret(self):
        token = JWTTokenService("some-other-secret").issue(CLAIMS)

        with self.assertRaises(InvalidTokenError):
            self.service.verify(token)

    def test_rejects_other_hmac_algorithm(self):
        token = self._encode(self._valid_payload(), algorithm="HS512")

        with self.assertRaises(InvalidTokenError):
            self.service.verify(token)

    def test_rejects_alg_none(self):
        # Hand-built unsigned token: {"alg":"none","typ":"JWT"}.{"sub":"user-123"}.
        token = "eyJhbGciOiJub25lIiwidHlwIjoiSldUIn0.eyJzdWIiOiJ1c2VyLTEyMyJ9."

        with self.assertRaises(InvalidTokenError):
            self.service.verify(token)

    def test_rejects_malformed_token(self):
        for token in ["", "not-a-jwt", "a.b.c", "a.b"]:
            with self.subTest(token=token):
                with self.assertRaises(InvalidTokenError):
                    self.service.verify(token)

    def test_rejects_tampered_payload(self):
        token = self.service.issue(CLAIMS)
        header, payload, signature = token.split(".")
        other = self.service.issue(TokenClaims(user_id="attacker", email="e@x.com"))
        forged = ".".join([header, other.split(".")[1], signature])

        with self.assertRaises(InvalidTokenError):
            self.service.verify(forged)

    def test_rejects_token_without_subject(self):
        payload = self._valid_payload()
        del payload["sub"]

        with self.assertRaises(InvalidTokenError):
            self.service.verify(self._encode(payload))


if __name__ == '__main__':
    unittest.main()
