"""
FastAPI app assembly: logging and router wiring for the example movie service.
"""
import logging
import os

from fastapi import FastAPI

from behaviorable.api.movies import router as movies_router
from behaviorable.db.database import init_db

# Configure logging
LOG_LEVEL_NAME = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_LEVEL = getattr(logging, LOG_LEVEL_NAME, logging.INFO)
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)
logger.setLevel(LOG_LEVEL)
logger.info("app_startup: log_level=%s", LOG_LEVEL_NAME)

init_db()

app = FastAPI(title="Behaviorable movies")
app.include_router(movies_router)


@app.get("/health")
def health():
    return {"status": "ok"}
