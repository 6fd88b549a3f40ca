from threading import Lock

from sqlalchemy import create_engine, inspect
from sqlalchemy.orm import declarative_base, sessionmaker

from coursecatalog.core import config


def _engine_options(database_url: str) -> dict:
    if database_url.startswith("sqlite"):
        return {"connect_args": {"check_same_thread": False}}
    return {}


engine = create_engine(config.DATABASE_URL, **_engine_options(config.DATABASE_URL))

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
)

Base = declarative_base()

_schema_lock = Lock()
_store_schema_checked = False


def ensure_store_schema() -> None:
    global _store_schema_checked

    if _store_schema_checked:
        return

    with _schema_lock:
        if _store_schema_checked:
            return

        # Imported here so the model registers on Base before create_all.
        from coursecatalog.models.store_entry import StoreEntry

        inspector = inspect(engine)
        if StoreEntry.__tablename__ not in inspector.get_table_names():
            Base.metadata.create_all(bind=engine, tables=[StoreEntry.__table__])

        _store_schema_checked = True
