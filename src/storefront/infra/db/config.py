from __future__ import annotations

import os

DEFAULT_DATABASE_URL = "sqlite:///storefront.db"


def database_url() -> str:
    return os.getenv("DATABASE_URL") or DEFAULT_DATABASE_URL
