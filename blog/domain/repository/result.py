"""Outcome of a repository operation."""

from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict

T = TypeVar("T")
E = TypeVar("E")


class RepositoryResult(BaseModel, Generic[T, E]):
    """Either a payload or an error kind, never both.

    Repositories return this instead of raising for every failure they can
    classify, so storage exceptions never reach the request layer.

    Example:
        result = await post_repository.find_by_id(post_id)
        if result.error is GetPostError.POST_NOT_FOUND:
            ...
        post = result.data
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    data: Optional[T] = None
    error: Optional[E] = None

    @property
    def ok(self) -> bool:
        """Whether the operation succeeded."""
        return self.error is None

    @classmethod
    def success(cls, data: T) -> "RepositoryResult[T, E]":
        return cls(data=data)

    @classmethod
    def failure(cls, error: E) -> "RepositoryResult[T, E]":
        return cls(error=error)
