"""Domain layer errors.

Every repository operation reports failures as one member of a closed,
storage-independent set of error kinds. The enums below are those sets, one
per operation; the value is the stable code callers see.
"""

from enum import Enum


class GetPostError(str, Enum):
    """Failures of fetching a single post."""

    POST_NOT_FOUND = "post_not_found"
    CANNOT_GET_POST = "cannot_get_post"


class CreatePostError(str, Enum):
    """Failures of creating a post."""

    DUPLICATE_POST_TITLE = "duplicate_post_title"
    CATEGORY_NOT_FOUND = "category_not_found"
    CANNOT_CREATE_POST = "cannot_create_post"


class UpdatePostError(str, Enum):
    """Failures of updating a post."""

    DUPLICATE_POST_TITLE = "duplicate_post_title"
    CATEGORY_NOT_FOUND = "category_not_found"
    CANNOT_UPDATE_POST = "cannot_update_post"


class DeletePostError(str, Enum):
    """Failures of deleting a post."""

    POST_NOT_FOUND = "post_not_found"
    CANNOT_DELETE_POST = "cannot_delete_post"


class GetCategoryError(str, Enum):
    CATEGORY_NOT_FOUND = "category_not_found"
    CANNOT_GET_CATEGORY = "cannot_get_category"


class CreateCategoryError(str, Enum):
    DUPLICATE_CATEGORY_NAME = "duplicate_category_name"
    CANNOT_CREATE_CATEGORY = "cannot_create_category"


class DeleteCategoryError(str, Enum):
    CATEGORY_NOT_FOUND = "category_not_found"
    CANNOT_DELETE_CATEGORY = "cannot_delete_category"


class GetTagError(str, Enum):
    TAG_NOT_FOUND = "tag_not_found"
    CANNOT_GET_TAG = "cannot_get_tag"


class CreateTagError(str, Enum):
    DUPLICATE_TAG_NAME = "duplicate_tag_name"
    CANNOT_CREATE_TAG = "cannot_create_tag"


class DeleteTagError(str, Enum):
    TAG_NOT_FOUND = "tag_not_found"
    CANNOT_DELETE_TAG = "cannot_delete_tag"


class DomainError(Exception):
    """Base domain error."""

    pass


class OperationError(DomainError):
    """Raised by use cases when a repository operation reports an error kind.

    Attributes:
        code: The error kind returned by the repository
        detail: Human-readable description for the caller
    """

    def __init__(self, code: Enum, detail: str):
        self.code = code
        self.detail = detail
        super().__init__(f"{code.value}: {detail}")
