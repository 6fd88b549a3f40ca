"""Domain errors raised by the catalog services.

Routes translate these into HTTP responses; each carries the message shown
to the user.
"""


class CatalogError(Exception):
    """Base class for course catalog failures."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidCredentialsError(CatalogError):
    """No user is registered under the given email."""

    def __init__(self, email: str):
        super().__init__('Invalid credentials.')
        self.email = email


class RoleMismatchError(CatalogError):
    """The account exists but belongs to the other portal."""

    def __init__(self, role: str):
        super().__init__(f'This account is not registered as a {role}.')
        self.role = role


class EmailAlreadyExistsError(CatalogError):
    def __init__(self, email: str):
        super().__init__('Email already exists.')
        self.email = email
