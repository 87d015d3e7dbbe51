from mdposts.repos.posts_repo import FilesystemPostsRepo
from mdposts.services.posts_service import PostsService
from mdposts.settings import settings


def get_posts_repo():
    return FilesystemPostsRepo(settings.content_path)


def get_posts_service():
    return PostsService(
        repo=get_posts_repo(), excerpt_length=settings.EXCERPT_LENGTH
    )
