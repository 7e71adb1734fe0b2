import ssl

from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine

from portfolio_backend.config import Settings


def normalize_database_url(url: str) -> str:
    """Point plain postgres URLs (as handed out by hosting providers) at asyncpg."""
    for prefix in ("postgres://", "postgresql://"):
        if url.startswith(prefix):
            return "postgresql+asyncpg://" + url[len(prefix):]
    return url


def relaxed_ssl_context() -> ssl.SSLContext:
    # Encrypted, but the server certificate is not verified
    context = ssl.create_default_context()
    context.check_hostname = False
    context.verify_mode = ssl.CERT_NONE
    return context


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the process-wide engine; its pool is shared by every request."""
    url = normalize_database_url(settings.database_url)
    connect_args = {}
    if settings.database_ssl and url.startswith("postgresql+asyncpg://"):
        connect_args["ssl"] = relaxed_ssl_context()
    return create_async_engine(url, connect_args=connect_args, pool_pre_ping=True)


def create_sessionmaker(engine: AsyncEngine) -> async_sessionmaker:
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
