"""User model definitions."""

from enum import Enum

from pydantic import Field

from coursecatalog.models.base import StoredModel


class UserRole(str, Enum):
    STUDENT = 'student'
    ADMIN = 'admin'


class User(StoredModel):
    """Represents an application user."""

    id: str
    email: str
    name: str
    role: UserRole
    # Course ids in the order the student enrolled in them.
    enrolled_courses: list[str] = Field(default_factory=list)
