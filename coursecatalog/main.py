import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError

from coursecatalog.core import config
from coursecatalog.database import SessionLocal, ensure_store_schema
from coursecatalog.routes import admin_routes, auth_routes, course_routes, enrollment_routes
from coursecatalog.storage.catalog_storage import CatalogStorage
from coursecatalog.storage.kv_store import SqlKeyValueStore

logging.basicConfig(level=config.LOG_LEVEL)

app = FastAPI()

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=['*'],
    allow_headers=['*'],
)

logger = logging.getLogger(__name__)


@app.on_event('startup')
def initialize_store() -> None:
    config.validate_runtime_config()
    try:
        ensure_store_schema()
        if config.SEED_DEMO_DATA:
            CatalogStorage(SqlKeyValueStore(SessionLocal)).initialize_demo_data()
    except SQLAlchemyError:
        logger.exception('Store initialization failed. Check DATABASE_URL.')


@app.get('/')
def root():
    return {'status': 'Course Catalog API Running'}


app.include_router(auth_routes.router, prefix='/auth')
app.include_router(course_routes.router, prefix='/courses')
app.include_router(enrollment_routes.router, prefix='/enrollments')
app.include_router(admin_routes.router, prefix='/admin')
