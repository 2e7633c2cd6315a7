from __future__ import annotations

import os
from pathlib import Path

DEFAULT_UPLOAD_DIR = "uploads"


def database_url() -> str:
    """SQLAlchemy URL for the Postgres adapters, e.g. postgresql+psycopg://..."""
    url = os.getenv("DATABASE_URL")
    if not url:
        raise RuntimeError("DATABASE_URL environment variable is not set")
    return url


def upload_dir() -> Path:
    """Directory uploaded car images are written to and served from."""
    return Path(os.getenv("UPLOAD_DIR") or DEFAULT_UPLOAD_DIR)


def access_tokens() -> dict[str, str]:
    """
    Token -> seller id mapping for the static access gate.

    Read from ACCESS_TOKENS as comma-separated ``token:seller_id`` pairs.
    Blank entries are ignored; malformed entries raise RuntimeError so a
    misconfigured deployment fails at startup rather than on first request.
    """
    raw = os.getenv("ACCESS_TOKENS", "")
    tokens: dict[str, str] = {}

    for entry in raw.split(","):
        entry = entry.strip()
        if not entry:
            continue

        token, sep, seller_id = entry.partition(":")
        if not sep or not token.strip() or not seller_id.strip():
            raise RuntimeError(f"Malformed ACCESS_TOKENS entry: {entry!r}")

        tokens[token.strip()] = seller_id.strip()

    return tokens
