"""Tests for password hashing, JWT tokens and slug helpers."""

from datetime import timedelta
from uuid import uuid4

import pytest

from src.poolsite.core.security import (
    DUMMY_PASSWORD_HASH,
    create_access_token,
    decode_token,
    hash_password,
    make_slug,
    validate_slug_format,
    verify_password,
)

pytestmark = pytest.mark.unit


class TestPasswordHashing:
    def test_hash_verifies(self):
        hashed = hash_password("pool-builder-1")

        assert hashed.startswith("$argon2id$")
        assert verify_password("pool-builder-1", hashed) is True

    def test_wrong_password_fails(self):
        assert verify_password("wrong", hash_password("right")) is False

    def test_malformed_hash_fails_without_raising(self):
        assert verify_password("anything", "not-a-hash") is False

    def test_dummy_hash_never_matches_user_input(self):
        assert verify_password("", DUMMY_PASSWORD_HASH) is False


class TestAccessToken:
    def test_round_trip_claims(self):
        user_id = uuid4()

        payload = decode_token(create_access_token(user_id, "admin@example.com", "admin"))

        assert payload is not None
        assert payload["sub"] == str(user_id)
        assert payload["email"] == "admin@example.com"
        assert payload["role"] == "admin"
        assert payload["type"] == "access"

    def test_expired_token_is_rejected(self):
        token = create_access_token(
            uuid4(), "a@example.com", "editor", expires_delta=timedelta(seconds=-10)
        )

        assert decode_token(token) is None

    def test_tampered_token_is_rejected(self):
        token = create_access_token(uuid4(), "a@example.com", "admin")

        assert decode_token(token[:-4] + "AAAA") is None

    def test_garbage_is_rejected(self):
        assert decode_token("not.a.jwt") is None


class TestSlugs:
    @pytest.mark.parametrize(
        ("title", "expected"),
        [
            ("Family Pool in Haifa", "family-pool-in-haifa"),
            ("  Spa -- & Deck  ", "spa-deck"),
            ("Infinity Pool 2024!", "infinity-pool-2024"),
            ("בריכה בחיפה", None),
            ("", None),
        ],
    )
    def test_make_slug(self, title, expected):
        assert make_slug(title) == expected

    def test_make_slug_truncates(self):
        slug = make_slug("a" * 300)

        assert slug is not None
        assert len(slug) == 255

    @pytest.mark.parametrize("slug", ["pool-safety", "faq", "step-1-2"])
    def test_valid_slug_format(self, slug):
        assert validate_slug_format(slug) == slug

    @pytest.mark.parametrize("slug", ["Pool", "pool--safety", "-pool", "pool_", "pool safety"])
    def test_invalid_slug_format(self, slug):
        with pytest.raises(ValueError, match="Slug must contain"):
            validate_slug_format(slug)
