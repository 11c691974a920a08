# freightquote/main.py

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from freightquote import __version__
from freightquote.core.config import get_settings
from freightquote.core.logging_config import configure_logging
from freightquote.routes import health, quotes

configure_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    logger.info(
        f"Starting quoting service ({settings.ENVIRONMENT}), "
        f"carrier latency={settings.CARRIER_SIMULATED_LATENCY}s, "
        f"partial rates={'on' if settings.ALLOW_PARTIAL_RATES else 'off'}"
    )
    yield
    logger.info("Quoting service stopped")


app = FastAPI(
    title="Air Freight Quoting",
    description="Rate quotes for air freight from New Jersey to the Caribbean",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origin_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(quotes.router)
app.include_router(health.router)  # Health check should be accessible without auth
