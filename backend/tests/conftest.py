"""Root conftest — shared test configuration."""

import os

# Tests never touch a real database or a built frontend
os.environ.setdefault("STORAGE_BACKEND", "memory")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("STATIC_DIR", "__no_static_dir__")
os.environ.setdefault("LOG_FORMAT", "text")
