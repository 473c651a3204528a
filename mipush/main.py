import logging

from fastapi import FastAPI

from mipush.api.endpoints import health, message
from mipush.core.config import settings

logging.basicConfig(level=logging.INFO)

app = FastAPI(title=settings.PROJECT_NAME)

app.include_router(health.router, prefix="", tags=["health"])

app.include_router(message.router, prefix="/message", tags=["message"])
