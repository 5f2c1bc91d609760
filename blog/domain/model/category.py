"""Category entity."""

from datetime import datetime

from blog.domain.model.common import DomainModel
from blog.domain.value import CategoryId


class Category(DomainModel):
    """Category a post can be filed under (at most one per post)."""

    id: CategoryId
    name: str
    created_at: datetime
    updated_at: datetime
