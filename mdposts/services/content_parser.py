import re
import tomllib
from typing import Any, Dict, Tuple

import tomli_w
from frontmatter.default_handlers import BaseHandler

from mdposts.exceptions import FrontMatterError


class TOMLHandler(BaseHandler):
    """
    ``+++`` delimited TOML 1.0 front matter.

    The boundary only eats spaces/tabs (and a CR) so the newlines around the
    body survive the split.
    """

    FM_BOUNDARY = re.compile(r"^\+{3}[ \t]*\r?$", re.MULTILINE)
    START_DELIMITER = END_DELIMITER = "+++"

    def load(self, fm: str, **kwargs: object) -> Any:
        return tomllib.loads(fm, **kwargs)

    def export(self, metadata: Dict[str, Any], **kwargs: object) -> str:
        return tomli_w.dumps(metadata, **kwargs)


_handler = TOMLHandler()


def parse_front_matter(text: str) -> Tuple[Dict[str, Any], str]:
    """
    Split a markdown document into its ``+++`` TOML front matter and body.

    A UTF-8 BOM and whitespace before the opening delimiter are ignored. The
    body is everything after the line holding the closing delimiter, kept
    exactly as written.
    """
    text = text.lstrip("\ufeff").lstrip()

    if not _handler.detect(text):
        raise FrontMatterError("missing +++ front matter block")
    if len(_handler.FM_BOUNDARY.findall(text)) < 2:
        raise FrontMatterError("unterminated +++ front matter block")

    fm, content = _handler.split(text)
    try:
        metadata = _handler.load(fm)
    except tomllib.TOMLDecodeError as e:
        raise FrontMatterError(f"invalid TOML front matter: {e}") from e

    return metadata, content.removeprefix("\n")


def dump_front_matter(metadata: Dict[str, Any], body: str) -> str:
    """Serialize metadata and body back into a ``+++`` delimited document."""
    start, end = _handler.START_DELIMITER, _handler.END_DELIMITER
    return f"{start}\n{_handler.export(metadata)}{end}\n{body}"
