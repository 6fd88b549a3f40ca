from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import BaseModel, Field, field_validator

from coursecatalog.models.course import Course, CourseLevel
from coursecatalog.models.user import UserRole
from coursecatalog.routes.dependencies import get_current_user, get_storage, require_role, storage_errors
from coursecatalog.services.catalog import ALL_CATEGORIES, build_course, filter_courses, list_categories
from coursecatalog.storage.catalog_storage import CatalogStorage

router = APIRouter(tags=['courses'])


class CreateCourseRequest(BaseModel):
    title: str
    description: str
    instructor: str
    duration: str
    level: CourseLevel
    price: float = Field(ge=0, allow_inf_nan=False)
    category: str
    # Either a list or newline-separated text, as typed into the admin form.
    modules: str | list[str] = ''

    @field_validator('title', 'instructor', 'category')
    @classmethod
    def validate_required_text(cls, value: str) -> str:
        normalized = value.strip()
        if not normalized:
            raise ValueError('This field is required.')
        return normalized


@router.get('', response_model=list[Course])
def list_courses(
    search: str = Query(default=''),
    category: str = Query(default=ALL_CATEGORIES),
    hide_enrolled: bool = Query(default=False),
    storage: CatalogStorage = Depends(get_storage),
):
    with storage_errors():
        courses = storage.get_courses()
        exclude_ids: list[str] = []
        if hide_enrolled:
            exclude_ids = get_current_user(storage).enrolled_courses

    return filter_courses(courses, search=search, category=category, exclude_ids=exclude_ids)


@router.get('/categories', response_model=list[str])
def list_course_categories(storage: CatalogStorage = Depends(get_storage)):
    with storage_errors():
        return list_categories(storage.get_courses())


@router.get('/{course_id}', response_model=Course)
def get_course(course_id: str, storage: CatalogStorage = Depends(get_storage)):
    with storage_errors():
        course = storage.get_course(course_id)

    if course is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail='Course not found.')
    return course


@router.post('', response_model=Course, status_code=status.HTTP_201_CREATED)
def create_course(data: CreateCourseRequest, storage: CatalogStorage = Depends(get_storage)):
    with storage_errors():
        require_role(get_current_user(storage), UserRole.ADMIN, 'create courses')

        course = build_course(
            title=data.title,
            description=data.description,
            instructor=data.instructor,
            duration=data.duration,
            level=data.level,
            price=data.price,
            category=data.category,
            modules=data.modules,
        )
        storage.add_course(course)

    return course
