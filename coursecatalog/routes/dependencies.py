import logging
from contextlib import contextmanager

from fastapi import Depends, HTTPException, status
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError

from coursecatalog.database import SessionLocal, ensure_store_schema
from coursecatalog.models.user import User, UserRole
from coursecatalog.storage.catalog_storage import CatalogStorage
from coursecatalog.storage.kv_store import SqlKeyValueStore

logger = logging.getLogger(__name__)


def ensure_database_ready() -> None:
    try:
        ensure_store_schema()
    except SQLAlchemyError as exc:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail='Storage unavailable. Verify DATABASE_URL.',
        ) from exc


def get_storage() -> CatalogStorage:
    ensure_database_ready()
    return CatalogStorage(SqlKeyValueStore(SessionLocal))


@contextmanager
def storage_errors():
    try:
        yield
    except ValidationError as exc:
        logger.exception('Stored catalog data could not be parsed.')
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail='An error occurred while reading stored data.',
        ) from exc
    except SQLAlchemyError as exc:
        logger.exception('Catalog storage failed.')
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail='Storage unavailable. Verify DATABASE_URL.',
        ) from exc


def get_current_user(storage: CatalogStorage = Depends(get_storage)) -> User:
    with storage_errors():
        user = storage.get_current_user()
    if user is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail='Not logged in.')
    return user


def require_role(user: User, role: UserRole, action: str) -> None:
    if user.role != role:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f'Only {role.value}s can {action}.',
        )
