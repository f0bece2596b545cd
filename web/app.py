"""
Sales Offer PDF Service
Renders real-estate sales offer brochures from property data and returns them as PDF.
"""

import logging
import sys
import time
from pathlib import Path

# Add parent directory for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from fastapi.staticfiles import StaticFiles
import uvicorn

from web.routers import offers
from web.config import get_cors_origins, get_log_level, get_server_config, get_static_dir

VERSION = "1.0.0"

logging.basicConfig(
    level=get_log_level(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Sales Offer PDF Service",
    description="Generates sales offer brochures for apartment and villa units",
    version=VERSION
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_cors_origins(),
    allow_methods=["*"],
    allow_headers=["*"],
)

# Mount static files
app.mount("/static", StaticFiles(directory=get_static_dir()), name="static")


# Access log middleware
@app.middleware("http")
async def access_log_middleware(request: Request, call_next):
    """
    Log one line per request: method, path, status, response size and duration.
    """
    started = time.time()
    status_code = 500
    content_length = "-"
    try:
        response = await call_next(request)
        status_code = response.status_code
        content_length = response.headers.get("content-length", "-")
        return response
    finally:
        elapsed_ms = (time.time() - started) * 1000
        logger.info(
            f"{request.method} {request.url.path} {status_code} "
            f"{content_length} - {elapsed_ms:.3f} ms"
        )


# Include routers
app.include_router(offers.router, tags=["offers"])


@app.get("/", response_class=PlainTextResponse)
async def index():
    """Liveness text for load balancers and quick manual checks."""
    return "Server running"


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": VERSION}


if __name__ == "__main__":
    server = get_server_config()
    logger.info(f"Server listening on port {server['port']}")
    uvicorn.run("web.app:app", host=server['host'], port=server['port'], reload=server['reload'])
