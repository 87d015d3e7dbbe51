import logging
import os
from pathlib import Path
from typing import List

from mdposts.exceptions import ContentDirectoryError

logger = logging.getLogger(__name__)

BUNDLE_INDEX = "index"


class FilesystemPostsRepo:
    def __init__(self, content_dir):
        self.content_dir = Path(content_dir)

    def list_post_paths(self) -> List[Path]:
        """All markdown files under the content dir, hidden entries skipped."""
        if not self.content_dir.is_dir():
            raise ContentDirectoryError(
                f"Content directory not found: {self.content_dir}"
            )

        paths = []
        for dirpath, dirnames, filenames in os.walk(
            self.content_dir, onerror=_raise_walk_error
        ):
            dirnames[:] = [d for d in dirnames if not d.startswith(".")]
            paths.extend(
                Path(dirpath) / name
                for name in filenames
                if name.endswith(".md") and not name.startswith(".")
            )

        logger.debug(f"Found {len(paths)} markdown files in {self.content_dir}")
        return sorted(paths)

    def read_post(self, path: Path) -> str:
        # utf-8-sig drops a BOM written by some editors
        return Path(path).read_text(encoding="utf-8-sig")

    def slug_for(self, path: Path) -> str:
        relative = Path(path).relative_to(self.content_dir).with_suffix("")
        parts = list(relative.parts)
        # page bundles: foo/index.md is served as foo
        if len(parts) > 1 and parts[-1] == BUNDLE_INDEX:
            parts = parts[:-1]
        return "/".join(parts)


def _raise_walk_error(error: OSError):
    raise ContentDirectoryError(
        f"Cannot read content directory {error.filename}: {error}"
    ) from error
