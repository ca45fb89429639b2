from unittest import mock

import pytest

from userdir.domain.entities.user import User
from userdir.domain.ports.repositories.users import UserRepository

from tests.unit.factories.entities.user import UserFactory

# --- Repository Mocks ---


@pytest.fixture
def mock_user_repository() -> mock.AsyncMock:
    return mock.AsyncMock(spec=UserRepository)


# --- Entity Mocks ---


@pytest.fixture
def user(request: pytest.FixtureRequest) -> User:
    return UserFactory.build(**getattr(request, "param", {}))
