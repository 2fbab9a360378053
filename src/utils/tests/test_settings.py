"""Tests for environment-driven settings."""

import unittest
from unittest.mock import patch

from utils.settings import DEFAULT_JWT_EXPIRATION_MINUTES, load_settings

_CLEAN_ENV = {"JWT_SECRET_KEY": "k"}


class TestLoadSettings(unittest.TestCase):

    @patch.dict('os.environ', _CLEAN_ENV, clear=True)
    def test_defaults(self):
        settings = load_settings()

        self.assertEqual(settings.jwt_secret_key, "k")
        self.assertEqual(settings.jwt_algorithm, "HS256")
        self.assertEqual(settings.jwt_expiration_minutes, DEFAULT_JWT_EXPIRATION_MINUTES)
        self.assertIsNone(settings.mongo_url)
        self.assertEqual(settings.database_name, "invoicer")
        self.assertEqual(settings.bcrypt_rounds, 12)
        self.assertEqual(settings.cors_origins, "*")
        self.assertEqual(settings.environment, "development")
        self.assertFalse(settings.is_production)

    @patch.dict('os.environ', {
        "JWT_SECRET_KEY": "s3cret",
        "JWT_EXPIRATION_MINUTES": "60",
        "MONGO_URL": "mongodb://db:27017",
        "MONGODB_DATABASE": "invoicer_prod",
        "BCRYPT_ROUNDS": "13",
        "CORS_ORIGINS": "https://app.example.com",
        "APP_ENV": "Production",
        "LOG_LEVEL": "debug",
        "PORT": "9000",
    }, clear=True)
    def test_reads_environment(self):
        settings = load_settings()

        self.assertEqual(settings.jwt_expiration_minutes, 60)
        self.assertEqual(settings.mongo_url, "mongodb://db:27017")
        self.assertEqual(settings.database_name, "invoicer_prod")
        self.assertEqual(settings.bcrypt_rounds, 13)
        self.assertEqual(settings.cors_origins, "https://app.example.com")
        self.assertTrue(settings.is_production)
        self.assertEqual(settings.log_level, "DEBUG")
        self.assertEqual(settings.port, 9000)

    @patch.dict('os.environ', {"JWT_SECRET_KEY": ""}, clear=True)
    def test_empty_secret_is_treated_as_missing(self):
        self.assertIsNone(load_settings().jwt_secret_key)

    @patch.dict('os.environ', {"JWT_SECRET_KEY": "k", "JWT_EXPIRATION_MINUTES": "a week"}, clear=True)
    def test_non_integer_raises(self):
        with self.assertRaises(ValueError) as ctx:
            load_settings()
        self.assertIn("JWT_EXPIRATION_MINUTES", str(ctx.exception))


if __name__ == '__main__':
    unittest.main()
