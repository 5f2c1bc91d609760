"""Post use cases."""

from .common import PostItem, PostResponse
from .create_post import CreatePostRequest, CreatePostUseCase
from .delete_post import DeletePostUseCase
from .get_post import GetPostUseCase
from .list_posts import ListPostsResponse, ListPostsUseCase
from .update_post import UpdatePostRequest, UpdatePostUseCase

__all__ = [
    "CreatePostRequest",
    "CreatePostUseCase",
    "DeletePostUseCase",
    "GetPostUseCase",
    "ListPostsResponse",
    "ListPostsUseCase",
    "PostItem",
    "PostResponse",
    "UpdatePostRequest",
    "UpdatePostUseCase",
]
