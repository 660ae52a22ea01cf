from sqlalchemy import create_engine, text
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool
from internship_portal.core.config import settings


def _engine_options(database_url: str) -> dict:
    """Pool options per backend; SQLite has no server-side pool to tune"""
    if database_url.startswith("sqlite"):
        options = {"connect_args": {"check_same_thread": False}}
        # In-memory databases live only as long as their single connection
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            options["poolclass"] = StaticPool
        return options

    return {
        "pool_size": settings.db_pool_size,
        "max_overflow": settings.db_max_overflow,
        "pool_timeout": settings.db_pool_timeout,
        "pool_recycle": settings.db_pool_recycle,
        "pool_pre_ping": True,
    }


engine = create_engine(settings.database_url, echo=False, **_engine_options(settings.database_url))

# Session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Declarative base shared by all models
Base = declarative_base()

# Per-request database session dependency
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

# Connection check
def check_db_connection():
    """Runs a trivial query against the configured database"""
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
            return {"status": "connected", "message": "Database connection succeeded"}
    except Exception as e:
        return {"status": "error", "message": f"Database connection failed: {str(e)}"}
