"""Seed the demo courses and users into the configured store.

Usage:
    python -m coursecatalog.seed_demo_data
"""
import sys

from sqlalchemy.exc import SQLAlchemyError

from coursecatalog.database import SessionLocal, ensure_store_schema
from coursecatalog.storage.catalog_storage import CatalogStorage
from coursecatalog.storage.kv_store import SqlKeyValueStore


def main() -> None:
    try:
        ensure_store_schema()
        storage = CatalogStorage(SqlKeyValueStore(SessionLocal))
        storage.initialize_demo_data()
        courses = storage.get_courses()
        users = storage.get_users()
    except SQLAlchemyError as exc:
        print("Store unavailable:", exc, file=sys.stderr)
        sys.exit(1)

    print(f"{len(courses)} courses, {len(users)} users")


if __name__ == "__main__":
    main()
