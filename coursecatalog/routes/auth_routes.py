from fastapi import APIRouter, Depends, HTTPException, Response, status
from pydantic import BaseModel, field_validator

from coursecatalog.core.errors import EmailAlreadyExistsError, InvalidCredentialsError, RoleMismatchError
from coursecatalog.models.user import User, UserRole
from coursecatalog.routes.dependencies import get_current_user, get_storage, storage_errors
from coursecatalog.services.auth import login_to_portal
from coursecatalog.storage.catalog_storage import CatalogStorage

router = APIRouter(tags=['auth'])


def _require_email(value: str) -> str:
    if not value.strip():
        raise ValueError('Email is required.')
    return value


class LoginRequest(BaseModel):
    email: str
    password: str
    role: UserRole = UserRole.STUDENT

    @field_validator('email')
    @classmethod
    def validate_email(cls, value: str) -> str:
        return _require_email(value)


class RegisterRequest(BaseModel):
    name: str
    email: str
    password: str

    @field_validator('name')
    @classmethod
    def validate_name(cls, value: str) -> str:
        normalized = value.strip()
        if not normalized:
            raise ValueError('Name is required.')
        return normalized

    @field_validator('email')
    @classmethod
    def validate_email(cls, value: str) -> str:
        return _require_email(value)


@router.post('/login', response_model=User)
def login(data: LoginRequest, storage: CatalogStorage = Depends(get_storage)):
    try:
        with storage_errors():
            user = login_to_portal(storage, data.email, data.password, data.role)
    except InvalidCredentialsError as exc:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=exc.message) from exc
    except RoleMismatchError as exc:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=exc.message) from exc

    return user


@router.post('/register', response_model=User, status_code=status.HTTP_201_CREATED)
def register(data: RegisterRequest, storage: CatalogStorage = Depends(get_storage)):
    try:
        with storage_errors():
            user = storage.register(data.name, data.email, data.password)
    except EmailAlreadyExistsError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=exc.message) from exc

    return user


@router.post('/logout', status_code=status.HTTP_204_NO_CONTENT)
def logout(storage: CatalogStorage = Depends(get_storage)):
    with storage_errors():
        storage.logout()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get('/me', response_model=User)
def me(storage: CatalogStorage = Depends(get_storage)):
    return get_current_user(storage)
