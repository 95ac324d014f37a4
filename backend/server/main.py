import logging

import uvicorn
from fastapi import FastAPI

from config.settings import LOG_LEVEL, UVICORN_CONFIG
from server.api.rest.dependencies import shutdown_dependencies
from server.api_router import api_router

logger = logging.getLogger(__name__)

# Initialize the FastAPI app
app = FastAPI(title="usePopcorn", description="Movie search and watched-list backend API")

app.include_router(api_router)


@app.on_event("shutdown")
async def shutdown_event():
    """Release the catalog HTTP session and the watched-list store."""
    await shutdown_dependencies()
    logger.info("movie session closed")


if __name__ == "__main__":
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    uvicorn.run("server.main:app", **UVICORN_CONFIG)
