"""Strongly typed identifiers for Reel Talk domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

# Core domain entity identifiers
UserId = NewType("UserId", UUID)
MovieId = NewType("MovieId", UUID)
ThreadId = NewType("ThreadId", UUID)
CommentId = NewType("CommentId", UUID)
