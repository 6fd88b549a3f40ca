import os

import pytest

os.environ.setdefault('DATABASE_URL', 'sqlite:///./test.db')

from coursecatalog.core.errors import EmailAlreadyExistsError  # noqa: E402
from coursecatalog.models.user import User, UserRole  # noqa: E402
from coursecatalog.storage.catalog_storage import CatalogStorage  # noqa: E402
from coursecatalog.storage.kv_store import InMemoryKeyValueStore  # noqa: E402


@pytest.fixture
def storage() -> CatalogStorage:
    storage = CatalogStorage(InMemoryKeyValueStore(), namespace='courseSystem')
    storage.initialize_demo_data()
    return storage


def test_initialize_demo_data_seeds_three_courses_into_empty_store() -> None:
    storage = CatalogStorage(InMemoryKeyValueStore(), namespace='courseSystem')

    storage.initialize_demo_data()

    assert [course.id for course in storage.get_courses()] == ['1', '2', '3']
    assert {user.id for user in storage.get_users()} == {'admin1', 'student1'}


def test_initialize_demo_data_keeps_existing_buckets() -> None:
    store = InMemoryKeyValueStore({'courseSystem_courses': '[]'})
    storage = CatalogStorage(store, namespace='courseSystem')

    storage.initialize_demo_data()

    assert storage.get_courses() == []
    assert len(storage.get_users()) == 2


def test_buckets_use_namespaced_keys() -> None:
    store = InMemoryKeyValueStore()
    storage = CatalogStorage(store, namespace='demo')

    storage.initialize_demo_data()
    storage.login('student@demo.com', 'pw')

    assert sorted(store.keys()) == ['demo_courses', 'demo_currentUser', 'demo_users']


def test_get_course_and_get_user_return_none_for_unknown_ids(storage: CatalogStorage) -> None:
    assert storage.get_course('1').title == 'Introduction to Programming'
    assert storage.get_course('missing') is None
    assert storage.get_user('missing') is None


@pytest.mark.parametrize('password', ['', 'wrong', 'anything at all'])
def test_login_accepts_any_password_for_existing_email(storage: CatalogStorage, password: str) -> None:
    user = storage.login('student@demo.com', password)

    assert user is not None
    assert user.id == 'student1'
    assert storage.get_current_user() == user


def test_login_returns_none_for_unknown_email(storage: CatalogStorage) -> None:
    assert storage.login('nobody@demo.com', 'pw') is None
    assert storage.get_current_user() is None


def test_logout_clears_current_session(storage: CatalogStorage) -> None:
    storage.login('admin@courseplatform.com', 'pw')

    storage.logout()

    assert storage.get_current_user() is None


def test_register_creates_student_and_logs_them_in(storage: CatalogStorage) -> None:
    user = storage.register('Jane', 'jane@x.com', 'pw')

    stored = storage.find_user_by_email('jane@x.com')
    assert stored == user
    assert stored.role == UserRole.STUDENT
    assert stored.enrolled_courses == []
    assert stored.id.startswith('student_')
    assert storage.get_current_user() == user


def test_register_rejects_existing_email_without_adding_user(storage: CatalogStorage) -> None:
    for user in list(storage.get_users()):
        count_before = len(storage.get_users())

        with pytest.raises(EmailAlreadyExistsError):
            storage.register('Someone', user.email, 'pw')

        assert len(storage.get_users()) == count_before


def test_enroll_records_row_and_user_list(storage: CatalogStorage) -> None:
    enrollment = storage.enroll('student1', '1')

    enrollments = storage.get_enrollments()
    assert len(enrollments) == 1
    assert enrollments[0].progress == 0
    assert enrollments[0].id == enrollment.id
    assert (enrollments[0].student_id, enrollments[0].course_id) == ('student1', '1')
    assert storage.get_user('student1').enrolled_courses == ['1']


def test_unenroll_removes_row_and_user_list_entry(storage: CatalogStorage) -> None:
    storage.enroll('student1', '1')
    storage.enroll('student1', '2')

    storage.unenroll('student1', '1')

    assert [(e.student_id, e.course_id) for e in storage.get_enrollments()] == [('student1', '2')]
    assert storage.get_user('student1').enrolled_courses == ['2']
    assert storage.is_enrolled('student1', '1') is False


def test_enroll_unenroll_enroll_leaves_one_row(storage: CatalogStorage) -> None:
    storage.enroll('student1', '3')
    storage.unenroll('student1', '3')
    storage.enroll('student1', '3')

    assert len(storage.get_enrollments()) == 1
    assert storage.get_user('student1').enrolled_courses == ['3']


def test_repeated_enroll_is_not_deduplicated(storage: CatalogStorage) -> None:
    storage.enroll('student1', '1')
    storage.enroll('student1', '1')

    assert len(storage.get_enrollments()) == 2
    assert storage.get_user('student1').enrolled_courses == ['1', '1']

    storage.unenroll('student1', '1')

    assert storage.get_enrollments() == []
    assert storage.get_user('student1').enrolled_courses == []


def test_enroll_refreshes_session_copy_for_logged_in_student(storage: CatalogStorage) -> None:
    storage.login('student@demo.com', 'pw')

    storage.enroll('student1', '2')
    assert storage.get_current_user().enrolled_courses == ['2']

    storage.unenroll('student1', '2')
    assert storage.get_current_user().enrolled_courses == []


def test_enroll_leaves_other_users_session_untouched(storage: CatalogStorage) -> None:
    admin = storage.login('admin@courseplatform.com', 'pw')

    storage.enroll('student1', '1')

    assert storage.get_current_user() == admin


def test_enroll_for_unknown_student_only_writes_enrollment_row(storage: CatalogStorage) -> None:
    storage.enroll('ghost', '1')

    assert len(storage.get_enrollments()) == 1
    assert all(user.enrolled_courses == [] for user in storage.get_users())


def test_add_user_does_not_enforce_unique_email(storage: CatalogStorage) -> None:
    storage.add_user(User(id='dup', email='student@demo.com', name='Dup', role=UserRole.STUDENT))

    assert [user.id for user in storage.get_users() if user.email == 'student@demo.com'] == ['student1', 'dup']


def test_register_stores_normalized_email_and_blocks_case_variants(storage: CatalogStorage) -> None:
    user = storage.register('Jane', ' Jane@X.com ', 'pw')

    assert user.email == 'jane@x.com'
    with pytest.raises(EmailAlreadyExistsError):
        storage.register('Jane Again', 'JANE@x.com', 'pw')


def test_login_finds_user_stored_with_mixed_case_email(storage: CatalogStorage) -> None:
    storage.add_user(User(id='mixed', email='Mixed.Case@Demo.com', name='Mixed', role=UserRole.STUDENT))

    assert storage.login('mixed.case@demo.com', 'pw').id == 'mixed'
