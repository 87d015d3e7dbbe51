import argparse
import json
import logging
import sys
from typing import List, Optional

from mdposts.exceptions import ContentDirectoryError
from mdposts.repos.posts_repo import FilesystemPostsRepo
from mdposts.services.posts_service import PostsService
from mdposts.settings import settings

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_POST_ERRORS = 1
EXIT_FATAL = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mdposts",
        description="Load markdown posts and emit them as ordered JSON records",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Published posts from CONTENT_DIR
  mdposts build

  # Local preview of a specific directory, drafts included
  mdposts build content/posts --include-drafts
        """,
    )
    commands = parser.add_subparsers(dest="command", required=True)

    build = commands.add_parser("build", help="Load posts and write them to stdout")
    build.add_argument(
        "content_dir",
        nargs="?",
        default=settings.CONTENT_DIR,
        help=f"Directory of .md posts (default: {settings.CONTENT_DIR})",
    )
    build.add_argument(
        "--include-drafts",
        action="store_true",
        help="Keep posts marked draft = true (for local preview)",
    )
    return parser


def run_build(content_dir: str, include_drafts: bool, out=None) -> int:
    if out is None:
        out = sys.stdout
    service = PostsService(
        repo=FilesystemPostsRepo(content_dir),
        excerpt_length=settings.EXCERPT_LENGTH,
    )

    try:
        result = service.load_posts(include_drafts=include_drafts)
    except ContentDirectoryError as e:
        logger.error(f"Build aborted: {e}")
        return EXIT_FATAL

    json.dump([post.model_dump(mode="json") for post in result.posts], out, indent=2)
    out.write("\n")

    if not result.ok:
        for error in result.errors:
            logger.error(f"{error.path}: {error.reason}")
        logger.error(f"Build finished with {len(result.errors)} failed files")
        return EXIT_POST_ERRORS

    logger.info(f"Build finished: {len(result.posts)} posts")
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    args = build_parser().parse_args(argv)

    if args.command == "build":
        return run_build(args.content_dir, args.include_drafts)
    return EXIT_FATAL


if __name__ == "__main__":
    sys.exit(main())
