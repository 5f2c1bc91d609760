"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire

from blog.config import Settings
from blog.domain.repository import CategoryRepository, PostRepository, TagRepository
from blog.persistence.database import Database, create_engine
from blog.persistence.repository import (
    SqlCategoryRepository,
    SqlPostRepository,
    SqlTagRepository,
)
from blog.util.di.base import ProviderBase
from blog.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence provider backed by the configured relational store.

    The storage gateway lives for the whole process. Repositories hold no
    per-request state (each operation opens its own transaction), so they
    are APP-scoped as well.
    """

    scope = Scope.APP

    @provide
    async def get_database(self, settings: Settings) -> AsyncIterator[Database]:
        """Provide the storage gateway, disposing its pool on shutdown."""
        engine = create_engine(settings)
        # Instrument SQLAlchemy for observability
        instrument_sqlalchemy(engine)
        database = Database(engine)
        logfire.info("Database engine created", backend=engine.dialect.name)
        try:
            yield database
        finally:
            await database.dispose()
            logfire.info("Database engine disposed")

    @provide
    def get_post_repository(self, database: Database) -> PostRepository:
        """Provide Post repository."""
        return SqlPostRepository(database)

    @provide
    def get_category_repository(self, database: Database) -> CategoryRepository:
        """Provide Category repository."""
        return SqlCategoryRepository(database)

    @provide
    def get_tag_repository(self, database: Database) -> TagRepository:
        """Provide Tag repository."""
        return SqlTagRepository(database)
