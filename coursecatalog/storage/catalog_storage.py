"""Data access for the course catalog.

``CatalogStorage`` keeps four buckets in a key-value store: users, courses,
enrollments and the current session. Every operation reads the buckets it
needs, changes the in-memory copy and writes the whole bucket back.

Enrollments are recorded twice: as ``Enrollment`` rows and in each user's
``enrolled_courses`` list. ``add_enrollment`` and ``remove_enrollment`` update
both and refresh the session copy when it belongs to the same student. The
store offers no transactions, so a failure between the two writes leaves them
out of sync.
"""

import logging
from datetime import datetime, timezone
from uuid import uuid4

from coursecatalog.core import config
from coursecatalog.core.errors import EmailAlreadyExistsError
from coursecatalog.models.course import Course
from coursecatalog.models.enrollment import Enrollment
from coursecatalog.models.user import User, UserRole
from coursecatalog.storage.buckets import CollectionBucket, RecordBucket
from coursecatalog.storage.demo_data import DEMO_COURSES, DEMO_USERS
from coursecatalog.storage.kv_store import KeyValueStore

logger = logging.getLogger(__name__)


def new_id(prefix: str) -> str:
    return f'{prefix}_{uuid4().hex[:12]}'


def normalize_email(email: str) -> str:
    return email.strip().lower()


class CatalogStorage:
    def __init__(self, store: KeyValueStore, namespace: str | None = None):
        namespace = namespace or config.STORE_NAMESPACE
        self.store = store
        self.users = CollectionBucket(store, f'{namespace}_users', User)
        self.courses = CollectionBucket(store, f'{namespace}_courses', Course)
        self.enrollments = CollectionBucket(store, f'{namespace}_enrollments', Enrollment)
        self.current_user = RecordBucket(store, f'{namespace}_currentUser', User)

    def initialize_demo_data(self) -> None:
        """Seed demo courses and users into buckets that were never written."""
        if not self.courses.exists():
            self.courses.set_all(list(DEMO_COURSES))
            logger.info('Seeded %d demo courses', len(DEMO_COURSES))

        if not self.users.exists():
            self.users.set_all(list(DEMO_USERS))
            logger.info('Seeded %d demo users', len(DEMO_USERS))

    # Courses

    def get_courses(self) -> list[Course]:
        return self.courses.get_all()

    def set_courses(self, courses: list[Course]) -> None:
        self.courses.set_all(courses)

    def add_course(self, course: Course) -> None:
        self.courses.add(course)
        logger.info('Added course %s (%s)', course.id, course.title)

    def get_course(self, course_id: str) -> Course | None:
        return next((course for course in self.get_courses() if course.id == course_id), None)

    # Users

    def get_users(self) -> list[User]:
        return self.users.get_all()

    def set_users(self, users: list[User]) -> None:
        self.users.set_all(users)

    def add_user(self, user: User) -> None:
        self.users.add(user)

    def get_user(self, user_id: str) -> User | None:
        return next((user for user in self.get_users() if user.id == user_id), None)

    def find_user_by_email(self, email: str) -> User | None:
        email = normalize_email(email)
        return next((user for user in self.get_users() if normalize_email(user.email) == email), None)

    # Session

    def get_current_user(self) -> User | None:
        return self.current_user.get()

    def set_current_user(self, user: User | None) -> None:
        self.current_user.set(user)

    def login(self, email: str, password: str) -> User | None:
        # Any password is accepted; the email lookup is the only check.
        user = self.find_user_by_email(email)
        if user is None:
            return None

        self.set_current_user(user)
        logger.info('User %s logged in', user.id)
        return user

    def logout(self) -> None:
        self.set_current_user(None)

    def register(self, name: str, email: str, password: str) -> User:
        if self.find_user_by_email(email) is not None:
            raise EmailAlreadyExistsError(email)

        user = User(
            id=new_id('student'),
            email=normalize_email(email),
            name=name,
            role=UserRole.STUDENT,
            enrolled_courses=[],
        )
        self.add_user(user)
        self.set_current_user(user)
        logger.info('Registered student %s', user.id)
        return user

    # Enrollments

    def get_enrollments(self) -> list[Enrollment]:
        return self.enrollments.get_all()

    def set_enrollments(self, enrollments: list[Enrollment]) -> None:
        self.enrollments.set_all(enrollments)

    def add_enrollment(self, enrollment: Enrollment) -> None:
        self.enrollments.add(enrollment)

        users = self.get_users()
        user = next((user for user in users if user.id == enrollment.student_id), None)
        if user is None:
            return

        user.enrolled_courses.append(enrollment.course_id)
        self.set_users(users)
        self._refresh_session(user)

    def remove_enrollment(self, student_id: str, course_id: str) -> None:
        enrollments = [
            enrollment
            for enrollment in self.get_enrollments()
            if not (enrollment.student_id == student_id and enrollment.course_id == course_id)
        ]
        self.set_enrollments(enrollments)

        users = self.get_users()
        user = next((user for user in users if user.id == student_id), None)
        if user is None:
            return

        user.enrolled_courses = [enrolled_id for enrolled_id in user.enrolled_courses if enrolled_id != course_id]
        self.set_users(users)
        self._refresh_session(user)

    def enroll(self, student_id: str, course_id: str) -> Enrollment:
        """Record an enrollment. Does not check for an existing one; see ``is_enrolled``."""
        enrollment = Enrollment(
            id=new_id('enrollment'),
            student_id=student_id,
            course_id=course_id,
            enrolled_at=datetime.now(timezone.utc),
            progress=0,
        )
        self.add_enrollment(enrollment)
        logger.info('Enrolled %s in course %s', student_id, course_id)
        return enrollment

    def unenroll(self, student_id: str, course_id: str) -> None:
        self.remove_enrollment(student_id, course_id)
        logger.info('Unenrolled %s from course %s', student_id, course_id)

    def is_enrolled(self, student_id: str, course_id: str) -> bool:
        return any(
            enrollment.student_id == student_id and enrollment.course_id == course_id
            for enrollment in self.get_enrollments()
        )

    def _refresh_session(self, user: User) -> None:
        current_user = self.get_current_user()
        if current_user is not None and current_user.id == user.id:
            self.set_current_user(user)
