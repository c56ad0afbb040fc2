"""Thread entity.

A discussion container scoped to one movie. Threads are owned by the
catalog side of the application; here they are only read.
"""

from datetime import datetime

from pydantic import Field

from reel.domain.model.common import DomainModel
from reel.domain.value import MovieId, ThreadId, UserId


class Thread(DomainModel):
    """Discussion thread about a movie."""

    id: ThreadId
    title: str = Field(min_length=1, max_length=300)
    description: str = ""
    likes: int = Field(default=0, ge=0)
    creator_id: UserId
    movie_id: MovieId
    created_at: datetime = Field(default_factory=datetime.now)
