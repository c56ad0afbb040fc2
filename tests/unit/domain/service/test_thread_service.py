"""Unit tests for ThreadService and UserService."""

from uuid import uuid4

import pytest

from reel.domain.error import NotFoundError
from reel.domain.repository import ThreadRepository, UserRepository
from reel.domain.service import ThreadService, UserService
from reel.domain.value import ThreadId, UserId
from tests.conftest import make_thread, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestThreadService:
    @pytest.mark.asyncio
    async def test_get_thread(self, unit_env):
        # Arrange
        service = await unit_env.get(ThreadService)
        thread = make_thread(make_user())
        await (await unit_env.get(ThreadRepository)).save(thread)

        # Act
        result = await service.get_thread(thread.id)

        # Assert
        assert result == thread

    @pytest.mark.asyncio
    async def test_missing_thread_raises_not_found(self, unit_env):
        service = await unit_env.get(ThreadService)

        with pytest.raises(NotFoundError, match="Thread not found"):
            await service.get_thread(ThreadId(uuid4()))


class TestUserService:
    @pytest.mark.asyncio
    async def test_get_by_id(self, unit_env):
        service = await unit_env.get(UserService)
        user = make_user("bob")
        await (await unit_env.get(UserRepository)).save(user)

        result = await service.get_by_id(user.id)

        assert result.username.root == "bob"

    @pytest.mark.asyncio
    async def test_missing_user_raises_not_found(self, unit_env):
        service = await unit_env.get(UserService)

        with pytest.raises(NotFoundError, match="User not found"):
            await service.get_by_id(UserId(uuid4()))
