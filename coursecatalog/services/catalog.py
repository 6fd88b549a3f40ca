from collections.abc import Iterable

from coursecatalog.core import config
from coursecatalog.models.course import Course, CourseLevel
from coursecatalog.models.enrollment import Enrollment
from coursecatalog.models.user import User
from coursecatalog.storage.catalog_storage import new_id

ALL_CATEGORIES = 'all'


def matches_search(course: Course, search: str) -> bool:
    term = search.lower()
    return (
        term in course.title.lower()
        or term in course.description.lower()
        or term in course.instructor.lower()
    )


def filter_courses(
    courses: list[Course],
    search: str = '',
    category: str = ALL_CATEGORIES,
    exclude_ids: Iterable[str] = (),
) -> list[Course]:
    excluded = set(exclude_ids)
    return [
        course
        for course in courses
        if matches_search(course, search)
        and (not category or category == ALL_CATEGORIES or course.category == category)
        and course.id not in excluded
    ]


def list_categories(courses: list[Course]) -> list[str]:
    categories = [ALL_CATEGORIES]
    for course in courses:
        if course.category not in categories:
            categories.append(course.category)
    return categories


def enrolled_courses(courses: list[Course], user: User) -> list[Course]:
    enrolled_ids = set(user.enrolled_courses)
    return [course for course in courses if course.id in enrolled_ids]


def catalog_stats(courses: list[Course], enrollments: list[Enrollment]) -> dict[str, int]:
    return {
        'total_courses': len(courses),
        'total_students': sum(course.students for course in courses),
        'total_enrollments': len(enrollments),
    }


def parse_modules(modules: str | list[str]) -> list[str]:
    """Accept modules as a list or as newline-separated text; whitespace-only entries are dropped."""
    lines = modules.split('\n') if isinstance(modules, str) else modules
    return [line for line in lines if line.strip()]


def build_course(
    title: str,
    description: str,
    instructor: str,
    duration: str,
    level: CourseLevel,
    price: float,
    category: str,
    modules: str | list[str],
) -> Course:
    return Course(
        id=new_id('course'),
        title=title,
        description=description,
        instructor=instructor,
        duration=duration,
        level=level,
        image=config.DEFAULT_COURSE_IMAGE,
        price=price,
        category=category,
        modules=parse_modules(modules),
        rating=config.DEFAULT_COURSE_RATING,
        students=0,
    )
