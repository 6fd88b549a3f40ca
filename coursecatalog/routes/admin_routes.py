from fastapi import APIRouter, Depends
from pydantic import BaseModel

from coursecatalog.models.user import UserRole
from coursecatalog.routes.dependencies import get_current_user, get_storage, require_role, storage_errors
from coursecatalog.services.catalog import catalog_stats
from coursecatalog.storage.catalog_storage import CatalogStorage

router = APIRouter(tags=['admin'])


class CatalogStatsResponse(BaseModel):
    total_courses: int
    total_students: int
    total_enrollments: int


@router.get('/stats', response_model=CatalogStatsResponse)
def get_catalog_stats(storage: CatalogStorage = Depends(get_storage)):
    with storage_errors():
        require_role(get_current_user(storage), UserRole.ADMIN, 'view catalog statistics')
        return CatalogStatsResponse(**catalog_stats(storage.get_courses(), storage.get_enrollments()))
