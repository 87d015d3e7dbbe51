import logging

from fastapi import FastAPI

from mdposts.routers import posts
from mdposts.settings import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="mdposts", description="Local preview of markdown posts")

app.include_router(posts.router)

logger.info(f"Serving posts from {settings.content_path}")


@app.get("/")
async def root():
    return {"message": "mdposts preview is running"}
