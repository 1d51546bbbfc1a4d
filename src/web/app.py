"""FastAPI application entry point."""

from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cli.logging_config import setup_logging
from web.deps import get_config
from web.routes import dashboard, entries, profile, settings, trends

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    config = get_config()
    setup_logging(
        json_mode=True,
        level=config.logging.level,
        log_file=config.paths.log_file,
        file_level=config.logging.file_level,
    )
    logger.info("web.startup")
    yield
    logger.info("web.shutdown")


app = FastAPI(
    title="Moodify",
    version="0.1.0",
    lifespan=lifespan,
)

# Single frontend origin from config
app.add_middleware(
    CORSMiddleware,
    allow_origins=[get_config().web.frontend_origin],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Mount routes
app.include_router(entries.router)
app.include_router(dashboard.router)
app.include_router(trends.router)
app.include_router(profile.router)
app.include_router(settings.router)


@app.get("/api/health")
async def health():
    return {"status": "ok"}
