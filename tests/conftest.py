import datetime
import textwrap
from pathlib import Path

import pytest

from mdposts.schemas.blog import Post


def write_post(root: Path, relpath: str, text: str) -> Path:
    """Write a dedented markdown file under root, creating parent dirs."""
    path = root / relpath
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(textwrap.dedent(text).lstrip(), encoding="utf-8")
    return path


@pytest.fixture
def content_dir(tmp_path: Path) -> Path:
    root = tmp_path / "posts"
    root.mkdir()
    return root


class FakeRepo:
    """
    In-memory repo stand-in keyed by slug.
    Paths are the slug plus ".md" so error reports stay readable.
    """

    def __init__(self, files: dict[str, str]):
        self.files = files
        self.reads = []

    def list_post_paths(self):
        return sorted(f"{slug}.md" for slug in self.files)

    def read_post(self, path):
        self.reads.append(path)
        return textwrap.dedent(self.files[self.slug_for(path)]).lstrip()

    def slug_for(self, path):
        return str(path).removesuffix(".md")


def make_post(slug: str, date: str = "2024-01-01", **overrides) -> Post:
    data = {
        "slug": slug,
        "title": slug.replace("-", " ").title(),
        "date": datetime.date.fromisoformat(date),
        "body": "body",
        "excerpt": "body",
        "readingTime": "1 min",
    }
    data.update(overrides)
    return Post(**data)


class FakePostsService:
    """
    Minimal posts service stand-in for router tests.
    Records the include_drafts flag it was called with.
    """

    def __init__(self, list_posts_return=None, get_post_return=None):
        self._list_posts_return = list_posts_return or []
        self._get_post_return = get_post_return
        self.include_drafts_calls = []

    def list_posts(self, include_drafts=False):
        self.include_drafts_calls.append(include_drafts)
        return self._list_posts_return

    def get_post(self, slug: str, include_drafts=False):
        self.include_drafts_calls.append(include_drafts)
        return self._get_post_return
