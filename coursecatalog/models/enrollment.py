"""Enrollment model definitions."""

from datetime import datetime

from coursecatalog.models.base import StoredModel


class Enrollment(StoredModel):
    """Links one student to one course."""

    id: str
    student_id: str
    course_id: str
    enrolled_at: datetime
    progress: float = 0
