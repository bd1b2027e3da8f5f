from __future__ import annotations

import os


def database_url() -> str:
    """
    Resolve the SQLAlchemy database URL.

    DATABASE_URL wins when set. Otherwise the URL is assembled from the
    DB_* variables, each with a local-development default.
    """
    url = os.getenv("DATABASE_URL")

    if url:
        # SQLAlchemy 2.x doesn't accept the 'postgres://' scheme
        if url.startswith("postgres://"):
            url = url.replace("postgres://", "postgresql+psycopg://", 1)
        elif url.startswith("postgresql://"):
            url = url.replace("postgresql://", "postgresql+psycopg://", 1)
        return url

    host = os.getenv("DB_HOST", "localhost")
    port = os.getenv("DB_PORT", "5432")
    user = os.getenv("DB_USER", "postgres")
    password = os.getenv("DB_PASSWORD", "postgres")
    name = os.getenv("DB_NAME", "vehicles_db")
    sslmode = os.getenv("DB_SSLMODE", "disable")

    return f"postgresql+psycopg://{user}:{password}@{host}:{port}/{name}?sslmode={sslmode}"
