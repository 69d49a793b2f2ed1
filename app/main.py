# app/main.py
from dotenv import load_dotenv

load_dotenv()

import logging
import logging.config
from contextlib import asynccontextmanager

from fastapi import FastAPI

from config.appconfig import settings

# Apply logging configuration
logging.config.dictConfig(settings.LOGGING_CONFIG)

# Import routers
from app.database.connection import build_engine, build_session_factory, create_tables
from app.shared.dashboard_routes import router as dashboard_router
from app.shared.error_handlers import register_exception_handlers
from app.system_services.system_routes import router as system_router

logger = logging.getLogger("app.main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Startup: one engine per process, handed to requests through app.state
    engine = build_engine(settings.DATABASE_URL, echo=settings.DB_ECHO)
    if settings.CREATE_TABLES_ON_STARTUP:
        await create_tables(engine)
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)

    logger.info(f"🚀 Starting {settings.APP_NAME} v{settings.APP_VERSION}")
    logger.info(f"✅ Database: {engine.url.render_as_string(hide_password=True)}")
    logger.info(f"✅ Patient ids: {settings.PATIENT_ID_PREFIX} + {settings.PATIENT_ID_WIDTH} digits")
    yield
    # Shutdown
    await engine.dispose()
    logger.info("👋 Shutting down")


app = FastAPI(
    title=settings.APP_NAME,
    description="Migrant worker registration, checkups, disease cases and public-health alerts",
    version=settings.APP_VERSION,
    lifespan=lifespan,
)

register_exception_handlers(app)

# Include routers with prefixes
app.include_router(system_router, prefix="/api", tags=["Surveillance Records"])
app.include_router(dashboard_router, prefix="/api", tags=["Dashboard"])


@app.get("/health")
def health():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host="0.0.0.0", port=8000, reload=True)
