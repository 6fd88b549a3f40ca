"""Course model definitions."""

from enum import Enum

from pydantic import Field

from coursecatalog.models.base import StoredModel


class CourseLevel(str, Enum):
    BEGINNER = 'Beginner'
    INTERMEDIATE = 'Intermediate'
    ADVANCED = 'Advanced'


class Course(StoredModel):
    """A course in the catalog. Created by an admin and never modified afterwards."""

    id: str
    title: str
    description: str
    instructor: str
    duration: str
    level: CourseLevel
    image: str
    price: float
    category: str
    modules: list[str] = Field(default_factory=list)
    rating: float
    students: int = 0
