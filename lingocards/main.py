import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from lingocards.config import Settings, get_settings
from lingocards.db.factory import make_database
from lingocards.middlewares import request_logging_middleware
from lingocards.routers import flashcards, languages, ping, study
from lingocards.services.webhook.factory import make_webhook_client

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    logging.getLogger().setLevel(settings.log_level.upper())


configure_logging(get_settings())


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan for the API. Builds every shared collaborator once.
    """
    logger.info("Starting LingoCards API...")

    settings = get_settings()
    app.state.settings = settings

    database = make_database(settings)
    database.startup()
    app.state.database = database
    logger.info("Database connected")

    app.state.webhook_client = make_webhook_client(settings)
    if settings.webhook_url:
        logger.info("AI analysis webhook configured")
    else:
        logger.info("AI analysis webhook not configured; sessions are saved without analysis")

    logger.info("API ready")
    yield

    # Cleanup
    app.state.webhook_client.close()
    database.teardown()
    logger.info("API shutdown complete")


app = FastAPI(
    title="LingoCards",
    description="Language-learning flashcards with study sessions and AI feedback.",
    version=get_settings().app_version,
    debug=get_settings().debug,
    lifespan=lifespan,
)

app.middleware("http")(request_logging_middleware)

app.include_router(ping.router, prefix="/api/v1")
app.include_router(languages.router, prefix="/api/v1")
app.include_router(flashcards.router, prefix="/api/v1")
app.include_router(study.router, prefix="/api/v1")


if __name__ == "__main__":
    uvicorn.run(app, port=8000, host="0.0.0.0")
