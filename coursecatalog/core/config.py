import os

from dotenv import load_dotenv


load_dotenv()


def _get_bool(value: str | None, default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _get_list(value: str | None, default: list[str]) -> list[str]:
    if not value:
        return default
    return [item.strip() for item in value.split(",") if item.strip()]

APP_ENV = os.getenv("APP_ENV", "development")

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./course_catalog.db")

# Prefix for every bucket key, e.g. "courseSystem_users".
STORE_NAMESPACE = os.getenv("STORE_NAMESPACE", "courseSystem")
SEED_DEMO_DATA = _get_bool(os.getenv("SEED_DEMO_DATA"), default=True)

CORS_ORIGINS = _get_list(os.getenv("CORS_ORIGINS"), default=["http://localhost:5173"])

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

DEFAULT_COURSE_IMAGE = os.getenv("DEFAULT_COURSE_IMAGE", "/src/assets/programming-course.jpg")
DEFAULT_COURSE_RATING = float(os.getenv("DEFAULT_COURSE_RATING", "4.5"))


def validate_runtime_config() -> None:
    if not STORE_NAMESPACE.strip():
        raise RuntimeError("STORE_NAMESPACE must not be empty.")
    if APP_ENV.lower() == "production" and SEED_DEMO_DATA:
        raise RuntimeError("SEED_DEMO_DATA must be disabled in production.")
