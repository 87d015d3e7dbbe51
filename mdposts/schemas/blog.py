import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class PostSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    slug: str
    title: str
    date: datetime.date
    draft: bool = False
    featuredImage: Optional[str] = None
    excerpt: str = ""
    readingTime: Optional[str] = None
    metadata: Dict[str, Any] = Field(default_factory=dict)


class Post(PostSummary):
    body: str  # Markdown content without frontmatter

    def to_summary(self) -> PostSummary:
        return PostSummary(**self.model_dump(exclude={"body"}))


class LoadError(BaseModel):
    path: str
    reason: str


class LoadResult(BaseModel):
    posts: List[Post] = Field(default_factory=list)
    errors: List[LoadError] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors
