"""Tag entity for labelling posts."""

from datetime import datetime

from blog.domain.model.common import DomainModel
from blog.domain.value import TagId


class Tag(DomainModel):
    """Tag entity.

    Tags relate to posts many-to-many through the post_tags association,
    which is owned by the post that last specified its tag set.
    """

    id: TagId
    name: str
    created_at: datetime
    updated_at: datetime
