"""Test-wide environment. Runs before any test module imports api.main."""

import os

os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-not-for-production")
# Cheap hashes keep the suite fast; production default is 12
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.pop("MONGO_URL", None)
