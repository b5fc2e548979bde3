"""
Main entrypoint for the Shoe Store API.

This module assembles the FastAPI application, sets up logging,
creates the durable shoe map and includes versioned routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``.  Run it with uvicorn,
e.g.::

    uvicorn shoe_store_api.app.main:app --reload

The application title and version are provided via ``Settings`` from
``core.config``.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI

from .core.config import Settings, settings
from .core.logging_config import setup_logging
from .core.db import get_database_path, init_db
from .core.storage import DurableMap
from .schemas.shoe import Shoe
from .api.v1.router import router as v1_router


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Configures logging, builds the single ``DurableMap`` handle used
    by every request and includes versioned API routers.  The map's
    table is created on startup.

    Parameters
    ----------
    app_settings : Optional[Settings]
        Settings to use instead of the module-level ``settings``
        read from the environment.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    app_settings = app_settings or settings
    setup_logging(app_settings.log_level, app_settings.log_file)

    db_path = get_database_path(app_settings.database_url)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        # Creates the database file on first run.
        init_db(db_path, app_settings.shoe_table)
        yield

    app = FastAPI(
        title=app_settings.project_name,
        version=app_settings.api_version,
        debug=app_settings.debug,
        lifespan=lifespan,
    )

    app.state.settings = app_settings
    app.state.storage = DurableMap(
        db_path,
        Shoe,
        table=app_settings.shoe_table,
        max_key_size=app_settings.max_key_size,
        max_value_size=app_settings.max_value_size,
    )

    app.include_router(v1_router, prefix="/api/v1")

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
