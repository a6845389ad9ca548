from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from checkin_app.core.config import settings


def connect_args_for(database_url: str) -> dict:
    """Driver options for the backend named by the URL scheme."""
    scheme = database_url.split(":", 1)[0].lower()
    if scheme.startswith("postgres"):
        # PostgreSQL connections need explicit UTF-8 encoding
        return {"client_encoding": "UTF8"}
    if scheme.startswith("sqlite"):
        # FastAPI runs sync dependencies in a threadpool
        return {"check_same_thread": False}
    return {}


def build_engine(database_url: Optional[str] = None, echo: Optional[bool] = None, **options):
    database_url = database_url or settings.DATABASE_URL
    return create_engine(
        database_url,
        pool_pre_ping=True,
        connect_args=connect_args_for(database_url),
        echo=settings.SQL_ECHO if echo is None else echo,
        **options
    )


engine = build_engine()
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
