"""
HTTP application exposing the file editing use cases.
"""

import logging

from fastapi import FastAPI

from fsedit.api.routers import router as api_router
from fsedit.config.settings import settings

# Create FastAPI app
app = FastAPI(title="fsedit", description="Line-based file editing with encoding preservation")
app.include_router(api_router)

# Configure logging
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

logger = logging.getLogger(__name__)
logger.info(f"Accessible roots: {', '.join(settings.roots)}")
