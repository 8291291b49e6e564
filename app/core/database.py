from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool
from app.core.config import settings


def build_engine(url: str, echo: bool = False) -> AsyncEngine:
    """In-memory SQLite gets one shared connection so every session sees the same tables."""
    if url.startswith("sqlite") and (url.endswith("://") or ":memory:" in url):
        return create_async_engine(
            url,
            echo=echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_async_engine(url, echo=echo)


def build_session_factory(bind: AsyncEngine) -> sessionmaker:
    return sessionmaker(
        bind=bind,
        expire_on_commit=False,
        class_=AsyncSession
    )


engine = build_engine(settings.DATABASE_URL, echo=settings.DB_ECHO)
SessionLocal = build_session_factory(engine)

Base = declarative_base()

async def get_db():
    db = SessionLocal()
    try:
        yield db
    except Exception:
        # leave no half-finished transaction on the pooled connection
        await db.rollback()
        raise
    finally:
        await db.close()
