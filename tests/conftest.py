"""Test configuration and fixtures."""

from datetime import datetime, timedelta
from uuid import uuid4

from reel.config import AuthSettings, Settings
from reel.domain.model import Comment, Thread, User
from reel.domain.repository import CommentRepository, ThreadRepository, UserRepository
from reel.domain.value import CommentId, MovieId, ThreadId, UserId
from reel.domain.value.types import Username
from reel.util.jwt import create_token


def make_user(username: str = "cinephile") -> User:
    """Build a user with a fresh ID."""
    return User(id=UserId(uuid4()), username=Username(username))


def make_thread(creator: User, title: str = "Spirited Away: what the bathhouse means") -> Thread:
    """Build a thread created by the given user."""
    return Thread(
        id=ThreadId(uuid4()),
        title=title,
        description="Chihiro's growth and the world of the bathhouse.",
        creator_id=creator.id,
        movie_id=MovieId(uuid4()),
    )


def make_comment(
    thread: Thread,
    author: User,
    content: str = "The ending still gets me.",
    parent: Comment | None = None,
    reply_to: Comment | None = None,
    likes: int = 0,
    minutes_ago: int = 0,
) -> Comment:
    """Build a comment; minutes_ago shifts created_at to control ordering."""
    return Comment(
        id=CommentId(uuid4()),
        thread_id=thread.id,
        author_id=author.id,
        content=content,
        likes=likes,
        parent_id=parent.id if parent else None,
        reply_to_id=reply_to.id if reply_to else None,
        created_at=datetime.now() - timedelta(minutes=minutes_ago),
    )


def auth_token_for(user: User, settings: AuthSettings | None = None) -> str:
    """Issue a session token for the user, signed with the test settings."""
    return create_token(str(user.id), user.username.root, settings or Settings().auth)


async def seed(env, *entities: User | Thread | Comment) -> None:
    """Save users, threads and comments through the container's repositories."""
    for entity in entities:
        if isinstance(entity, User):
            await (await env.get(UserRepository)).save(entity)
        elif isinstance(entity, Thread):
            await (await env.get(ThreadRepository)).save(entity)
        else:
            await (await env.get(CommentRepository)).create(entity)
