import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from mdposts import dependencies as deps
from mdposts.exceptions import ContentDirectoryError
from mdposts.schemas.blog import Post, PostSummary
from mdposts.services.posts_service import PostsService
from mdposts.settings import settings

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/posts", response_model=List[PostSummary])
def list_posts(service: PostsService = Depends(deps.get_posts_service)):
    """Get all posts metadata, newest first."""
    try:
        posts = service.list_posts(include_drafts=settings.INCLUDE_DRAFTS)
        return [post.to_summary() for post in posts]
    except HTTPException:
        raise
    except ContentDirectoryError as e:
        logger.error(f"Content directory unavailable: {e}")
        raise HTTPException(status_code=503, detail="Content directory unavailable")
    except Exception as e:
        logger.error(f"Unexpected error listing posts: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")


@router.get("/posts/{slug:path}", response_model=Post)
def get_post(
    slug: str,
    service: PostsService = Depends(deps.get_posts_service),
):
    """Get a single post by slug."""
    try:
        post = service.get_post(slug, include_drafts=settings.INCLUDE_DRAFTS)
        if not post:
            raise HTTPException(status_code=404, detail="Post not found")
        return post
    except HTTPException:
        raise
    except ContentDirectoryError as e:
        logger.error(f"Content directory unavailable: {e}")
        raise HTTPException(status_code=503, detail="Content directory unavailable")
    except Exception as e:
        logger.error(f"Unexpected error retrieving post {slug}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve post")
