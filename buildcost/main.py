from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging
import os

from . import __version__
from .config import settings
from .database import engine, Base
from .logging_config import setup_logging
from .routers import estimates, projects

setup_logging(settings.LOG_LEVEL)
logger = logging.getLogger("buildcost")

BASE_REVISION = "3f1c2a9e7b10"

# Create tables (handles new tables but won't add columns to existing ones)
Base.metadata.create_all(bind=engine)


def _run_migrations():
    """Run pending Alembic migrations on startup.

    Databases created by Base.metadata.create_all() have no alembic_version
    table; the base revision is stamped first so upgrade doesn't recreate
    the projects table.
    """
    try:
        from alembic.config import Config
        from alembic import command
        from sqlalchemy import inspect

        alembic_ini = os.path.join(os.path.dirname(__file__), "..", "alembic.ini")
        if not os.path.exists(alembic_ini):
            logger.info("alembic.ini not found, skipping migrations")
            return

        alembic_cfg = Config(alembic_ini)
        alembic_cfg.set_main_option("sqlalchemy.url", settings.DATABASE_URL)
        alembic_cfg.attributes["configure_logger"] = False

        insp = inspect(engine)
        has_alembic = "alembic_version" in insp.get_table_names()
        has_projects = "projects" in insp.get_table_names()

        if not has_alembic and has_projects:
            logger.info("Stamping base migration %s (tables already exist)", BASE_REVISION)
            command.stamp(alembic_cfg, BASE_REVISION)

        logger.info("Running pending Alembic migrations...")
        command.upgrade(alembic_cfg, "head")
        logger.info("Migrations complete")

    except Exception as e:
        # Never let migration errors prevent app startup
        logger.warning("Alembic migration warning: %s", e)


app = FastAPI(
    title="Building Cost Estimator",
    description="Construction cost estimates from floor area, floors, material grade and amenities",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# API routes
app.include_router(projects.router, prefix="/api")
app.include_router(estimates.router, prefix="/api")


@app.get("/health")
def health():
    return {"status": "ok", "app": "buildcost", "store": settings.STORE_BACKEND}


@app.on_event("startup")
def auto_migrate():
    """Run pending Alembic migrations on startup."""
    if settings.STORE_BACKEND == "sql":
        _run_migrations()
