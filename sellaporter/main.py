from fastapi import FastAPI, Request
from loguru import logger

from sellaporter import __version__
from sellaporter.api.pages import router as pages_router
from sellaporter.core.logger import setup_logger

setup_logger()

app = FastAPI(title="Sellaporter", version=__version__)

app.include_router(pages_router)

logger.info("FastAPI application initialized")


@app.get("/health")
def health():
    return {"status": "ok"}


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log all HTTP requests."""
    logger.debug(f"Request: {request.method} {request.url.path}")
    response = await call_next(request)
    logger.debug(f"Response: {response.status_code} for {request.method} {request.url.path}")
    return response
