from fastapi import APIRouter, Depends, HTTPException, Response, status

from coursecatalog.models.course import Course
from coursecatalog.models.enrollment import Enrollment
from coursecatalog.models.user import UserRole
from coursecatalog.routes.dependencies import get_current_user, get_storage, require_role, storage_errors
from coursecatalog.services.catalog import enrolled_courses
from coursecatalog.storage.catalog_storage import CatalogStorage

router = APIRouter(tags=['enrollments'])


@router.get('/me', response_model=list[Course])
def list_my_courses(storage: CatalogStorage = Depends(get_storage)):
    with storage_errors():
        user = get_current_user(storage)
        require_role(user, UserRole.STUDENT, 'view enrolled courses')
        return enrolled_courses(storage.get_courses(), user)


@router.post('/{course_id}', response_model=Enrollment, status_code=status.HTTP_201_CREATED)
def enroll_in_course(course_id: str, storage: CatalogStorage = Depends(get_storage)):
    with storage_errors():
        user = get_current_user(storage)
        require_role(user, UserRole.STUDENT, 'enroll in courses')

        if storage.get_course(course_id) is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail='Course not found.')

        if storage.is_enrolled(user.id, course_id):
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail='You are already enrolled in this course.',
            )

        return storage.enroll(user.id, course_id)


@router.delete('/{course_id}', status_code=status.HTTP_204_NO_CONTENT)
def unenroll_from_course(course_id: str, storage: CatalogStorage = Depends(get_storage)):
    with storage_errors():
        user = get_current_user(storage)
        require_role(user, UserRole.STUDENT, 'unenroll from courses')
        storage.unenroll(user.id, course_id)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
