"""Tag use cases."""

from .common import ListTagsResponse, TagItem, TagResponse
from .manage_tags import (
    CreateTagRequest,
    CreateTagUseCase,
    DeleteTagUseCase,
    GetTagUseCase,
    ListTagsUseCase,
)

__all__ = [
    "CreateTagRequest",
    "CreateTagUseCase",
    "DeleteTagUseCase",
    "GetTagUseCase",
    "ListTagsResponse",
    "ListTagsUseCase",
    "TagItem",
    "TagResponse",
]
