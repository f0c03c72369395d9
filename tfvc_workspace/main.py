"""
FastAPI application exposing workspace lookup for TFVC folders.
"""

import logging

from fastapi import FastAPI

from tfvc_workspace.api.routers import router as api_router
from tfvc_workspace.config.settings import settings

# Create FastAPI app
app = FastAPI(title="TFVC Workspace API")
app.include_router(api_router)

# Configure logging
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

# Get logger for this module
logger = logging.getLogger(__name__)
logger.debug(f"Using tf at {settings.tfvc_location}")
