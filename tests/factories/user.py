"""User factory for test data generation."""

from uuid import uuid4

from polyfactory import Use

from src.poolsite.core.security import hash_password
from src.poolsite.models import User, UserRole
from tests.factories.base import BaseFactory, short_id, utc_now

# Default test password - stored for convenience in tests
DEFAULT_TEST_PASSWORD = "testpassword123"

_DEFAULT_HASH = hash_password(DEFAULT_TEST_PASSWORD)


class UserFactory(BaseFactory):
    __model__ = User

    id = Use(uuid4)
    email = Use(lambda: f"user_{short_id()}@example.com")
    hashed_password = _DEFAULT_HASH
    name = "Test User"
    role = UserRole.ADMIN.value
    is_active = True
    created_at = Use(utc_now)
    updated_at = Use(utc_now)

    @classmethod
    def editor(cls, **kwargs):
        return cls.build(role=UserRole.EDITOR.value, name=kwargs.pop("name", "Editor"), **kwargs)

    @classmethod
    def inactive(cls, **kwargs):
        return cls.build(is_active=False, **kwargs)
