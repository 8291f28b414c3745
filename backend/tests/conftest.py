"""Root conftest — environment for every test, set before app modules import settings."""

import os

# No test may reach a real database, media host or identity provider
for key, value in {
    "DATABASE_URL": "sqlite+aiosqlite:///:memory:",
    "CLOUDINARY_CLOUD_NAME": "test-cloud",
    "CLOUDINARY_API_KEY": "test-key",
    "CLOUDINARY_API_SECRET": "test-secret",
    "AUTH_JWT_KEY": "test-signing-key-that-is-long-enough-for-hs256",
    "AUTH_JWT_ALGORITHMS": '["HS256"]',
    "LOG_FORMAT": "text",
}.items():
    os.environ.setdefault(key, value)
