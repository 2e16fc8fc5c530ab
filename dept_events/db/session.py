from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from dept_events.core.config import DATABASE_URL


def build_engine(url: str):
    # SQLite connections are shared across FastAPI's worker threads
    if url.startswith("sqlite"):
        return create_engine(url, connect_args={"check_same_thread": False})
    return create_engine(url, pool_pre_ping=True)


engine = build_engine(DATABASE_URL)

SessionLocal = sessionmaker(bind=engine, autoflush=False)

Base = declarative_base()
