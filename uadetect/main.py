# uadetect/main.py

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from uadetect.api import router as detect_router
from uadetect.config import settings
from uadetect.detector import KNOWN_INPUTS

# Configure logging
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events"""

    logger.info("Starting UA Detect API...")
    logger.info(f"Classification cache limited to {settings.cache_max_entries} entries")

    yield

    logger.info(f"Shutting down - {len(KNOWN_INPUTS)} cached classifications dropped")
    KNOWN_INPUTS.clear()


app = FastAPI(
    title="UA Detect API",
    description="Classifies user agent, platform and capability reports",
    version="1.0.0",
    lifespan=lifespan,
)

# Register routes
app.include_router(detect_router)
