import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from taskdesk.core.config import settings
from taskdesk.core.database import engine, Base
from taskdesk.core.errors import register_exception_handlers
from taskdesk.core.logging import setup_logging
from taskdesk.routers import health, tasks

setup_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

# Init DB
Base.metadata.create_all(bind=engine)
logger.info(f"Database ready at {engine.url.render_as_string(hide_password=True)}")

app = FastAPI(
    title="Taskdesk API",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Routes
app.include_router(health.router, prefix="/health")
app.include_router(tasks.router)
