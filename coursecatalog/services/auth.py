import logging

from coursecatalog.core.errors import InvalidCredentialsError, RoleMismatchError
from coursecatalog.models.user import User, UserRole
from coursecatalog.storage.catalog_storage import CatalogStorage

logger = logging.getLogger(__name__)


def login_to_portal(storage: CatalogStorage, email: str, password: str, role: UserRole) -> User:
    """Log in through the student or admin portal.

    A login through the wrong portal leaves the session as it was before the
    attempt; the caller only learns that the account belongs elsewhere.
    """
    previous_user = storage.get_current_user()
    user = storage.login(email, password)
    if user is None:
        logger.info('Login failed for unknown email %s', email)
        raise InvalidCredentialsError(email)

    if user.role != role:
        storage.set_current_user(previous_user)
        logger.info('User %s tried the %s portal with role %s', user.id, role.value, user.role.value)
        raise RoleMismatchError(role.value)

    return user
