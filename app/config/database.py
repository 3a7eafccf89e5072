from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool
from app.config.settings import settings

def _engine_kwargs(url: str) -> dict:
    if not url.startswith("sqlite"):
        return {"pool_pre_ping": True}
    kwargs = {"connect_args": {"check_same_thread": False}}
    # In-memory SQLite lives inside a single connection
    if url in ("sqlite://", "sqlite:///:memory:"):
        kwargs["poolclass"] = StaticPool
    return kwargs

engine = create_engine(settings.DATABASE_URL, **_engine_kwargs(settings.DATABASE_URL))
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

def init_db(seed: bool = None):
    """Create every table and seed the catalog when enabled."""
    # Models register themselves on Base when imported
    from app.models import user, session, product, blog, order, contact, setting, audit  # noqa: F401
    Base.metadata.create_all(bind=engine)

    if seed is None:
        seed = settings.SEED_DATABASE
    if seed:
        from seed_db import seed as seed_database
        seed_database()
