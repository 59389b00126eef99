"""Root conftest — shared test configuration."""

import os

# Never point tests at a real database or a production salt
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("PASSWORD_SALT", "salt")
os.environ.setdefault("LOG_FORMAT", "text")
