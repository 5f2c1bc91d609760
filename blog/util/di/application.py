"""Application layer DI providers."""

from dishka import Scope, provide

from blog.application.usecase.category import (
    CreateCategoryUseCase,
    DeleteCategoryUseCase,
    GetCategoryUseCase,
    ListCategoriesUseCase,
)
from blog.application.usecase.post import (
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostUseCase,
    ListPostsUseCase,
    UpdatePostUseCase,
)
from blog.application.usecase.tag import (
    CreateTagUseCase,
    DeleteTagUseCase,
    GetTagUseCase,
    ListTagsUseCase,
)
from blog.domain.repository import CategoryRepository, PostRepository, TagRepository
from blog.util.di.base import ProviderBase


class ApplicationProvider(ProviderBase):
    """Application use cases provider - concrete, no test swap needed.

    Use cases are REQUEST-scoped; the repositories they wrap are shared.
    """

    scope = Scope.REQUEST

    # Post use cases
    @provide
    def get_list_posts_use_case(
        self, post_repository: PostRepository
    ) -> ListPostsUseCase:
        """Provide list posts use case."""
        return ListPostsUseCase(post_repository=post_repository)

    @provide
    def get_get_post_use_case(self, post_repository: PostRepository) -> GetPostUseCase:
        """Provide get post use case."""
        return GetPostUseCase(post_repository=post_repository)

    @provide
    def get_create_post_use_case(
        self, post_repository: PostRepository
    ) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(post_repository=post_repository)

    @provide
    def get_update_post_use_case(
        self, post_repository: PostRepository
    ) -> UpdatePostUseCase:
        """Provide update post use case."""
        return UpdatePostUseCase(post_repository=post_repository)

    @provide
    def get_delete_post_use_case(
        self, post_repository: PostRepository
    ) -> DeletePostUseCase:
        """Provide delete post use case."""
        return DeletePostUseCase(post_repository=post_repository)

    # Category use cases
    @provide
    def get_list_categories_use_case(
        self, category_repository: CategoryRepository
    ) -> ListCategoriesUseCase:
        return ListCategoriesUseCase(category_repository=category_repository)

    @provide
    def get_get_category_use_case(
        self, category_repository: CategoryRepository
    ) -> GetCategoryUseCase:
        return GetCategoryUseCase(category_repository=category_repository)

    @provide
    def get_create_category_use_case(
        self, category_repository: CategoryRepository
    ) -> CreateCategoryUseCase:
        return CreateCategoryUseCase(category_repository=category_repository)

    @provide
    def get_delete_category_use_case(
        self, category_repository: CategoryRepository
    ) -> DeleteCategoryUseCase:
        return DeleteCategoryUseCase(category_repository=category_repository)

    # Tag use cases
    @provide
    def get_list_tags_use_case(self, tag_repository: TagRepository) -> ListTagsUseCase:
        return ListTagsUseCase(tag_repository=tag_repository)

    @provide
    def get_get_tag_use_case(self, tag_repository: TagRepository) -> GetTagUseCase:
        return GetTagUseCase(tag_repository=tag_repository)

    @provide
    def get_create_tag_use_case(
        self, tag_repository: TagRepository
    ) -> CreateTagUseCase:
        return CreateTagUseCase(tag_repository=tag_repository)

    @provide
    def get_delete_tag_use_case(
        self, tag_repository: TagRepository
    ) -> DeleteTagUseCase:
        return DeleteTagUseCase(tag_repository=tag_repository)
