"""User entity."""

from datetime import datetime

from pydantic import Field

from reel.domain.model.common import DomainModel
from reel.domain.value import UserId
from reel.domain.value.types import AuthorSummary, Username


class User(DomainModel):
    """User who writes comments.

    Sign-up and sessions are handled elsewhere; this service only needs
    the identity and display name.
    """

    id: UserId
    username: Username
    created_at: datetime = Field(default_factory=datetime.now)

    def to_summary(self) -> AuthorSummary:
        """Project the user into the summary embedded in comments."""
        return AuthorSummary(user_id=self.id, username=self.username)
