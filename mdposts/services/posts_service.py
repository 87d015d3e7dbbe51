import datetime
import logging
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from mdposts.exceptions import PostValidationError
from mdposts.schemas.blog import LoadError, LoadResult, Post
from mdposts.services.content_parser import parse_front_matter
from mdposts.utils import calculate_reading_time, extract_excerpt

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("title", "date")


class PostsService:
    def __init__(self, repo, excerpt_length: int = 0):
        self.repo = repo
        self.excerpt_length = excerpt_length

    def load_posts(self, include_drafts: bool = False) -> LoadResult:
        """
        Read every post in the repo in a single pass.

        Broken files are reported in ``errors`` and skipped, the rest are
        returned newest first. A missing content directory is not a per-file
        problem and propagates as ``ContentDirectoryError``.
        """
        paths = self.repo.list_post_paths()

        posts: List[Post] = []
        errors: List[LoadError] = []
        seen: Dict[str, str] = {}

        for path in paths:
            try:
                slug = self.repo.slug_for(path)
                if slug in seen:
                    raise PostValidationError(
                        f"duplicate slug '{slug}' (already used by {seen[slug]})"
                    )
                text = self.repo.read_post(path)
                post = parse_post_data(text, slug, excerpt_length=self.excerpt_length)
            except Exception as e:
                logger.warning(f"Skipping {path}: {e}")
                errors.append(LoadError(path=str(path), reason=str(e)))
                continue

            seen[slug] = str(path)
            posts.append(post)

        if not include_drafts:
            drafts = [p.slug for p in posts if p.draft]
            if drafts:
                logger.debug(f"Leaving out {len(drafts)} drafts: {drafts}")
            posts = [p for p in posts if not p.draft]

        posts = sort_posts(posts)
        logger.info(f"Loaded {len(posts)} posts with {len(errors)} errors")
        return LoadResult(posts=posts, errors=errors)

    def list_posts(self, include_drafts: bool = False) -> List[Post]:
        return self.load_posts(include_drafts=include_drafts).posts

    def get_post(self, slug: str, include_drafts: bool = False) -> Optional[Post]:
        posts = self.list_posts(include_drafts=include_drafts)
        return next((p for p in posts if p.slug == slug), None)


def parse_post_data(text: str, slug: str, *, excerpt_length: int = 0) -> Post:
    """Parse frontmatter and return a validated post"""
    metadata, body = parse_front_matter(text)

    for field in REQUIRED_FIELDS:
        if field not in metadata:
            raise PostValidationError(f"missing required field '{field}'")

    title = metadata["title"]
    if not isinstance(title, str) or not title.strip():
        raise PostValidationError("field 'title' must be a non-empty string")

    try:
        return Post(
            slug=slug,
            title=title,
            date=_parse_date(metadata["date"]),
            draft=metadata.get("draft", False),
            featuredImage=_featured_image(metadata),
            body=body,
            excerpt=extract_excerpt(body, excerpt_length),
            readingTime=calculate_reading_time(body),
            metadata=metadata,
        )
    except ValidationError as e:
        raise PostValidationError(_describe_validation_error(e)) from e


def sort_posts(posts: List[Post]) -> List[Post]:
    """Newest first, equal dates ordered by slug."""
    by_slug = sorted(posts, key=lambda p: p.slug)
    return sorted(by_slug, key=lambda p: p.date, reverse=True)


def _parse_date(value: Any) -> datetime.date:
    # datetime is a subclass of date, check it first
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, datetime.date):
        return value
    if isinstance(value, str):
        raw = value.strip()
        try:
            return datetime.date.fromisoformat(raw)
        except ValueError:
            pass
        try:
            return datetime.datetime.fromisoformat(raw).date()
        except ValueError:
            raise PostValidationError(f"unparseable date {value!r}") from None
    raise PostValidationError(f"unparseable date {value!r}")


def _featured_image(metadata: dict) -> Optional[str]:
    return metadata.get("featured_image") or metadata.get("featuredImage")


def _describe_validation_error(error: ValidationError) -> str:
    problems = [
        f"field '{'.'.join(str(loc) for loc in err['loc'])}': {err['msg']}"
        for err in error.errors()
    ]
    return "; ".join(problems)
