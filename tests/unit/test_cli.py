"""Tests for the management command dispatcher."""

from unittest.mock import AsyncMock, patch

import pytest

from src.poolsite.cli import main, parse_args

pytestmark = pytest.mark.unit


class TestParseArgs:
    def test_create_admin_defaults_to_admin_role(self):
        args = parse_args(["create-admin", "--email", "a@example.com", "--name", "A"])

        assert args.role == "admin"
        assert args.password is None

    def test_rejects_unknown_role(self):
        with pytest.raises(SystemExit):
            parse_args(
                ["create-admin", "--email", "a@example.com", "--name", "A", "--role", "owner"]
            )

    def test_command_is_required(self):
        with pytest.raises(SystemExit):
            parse_args([])


class TestMain:
    def test_migrate(self):
        with patch("src.poolsite.cli.run_migrations_sync") as migrate:
            assert main(["migrate", "--revision", "001"]) == 0

        migrate.assert_called_once_with("001")

    def test_serve(self):
        with patch("src.poolsite.cli.uvicorn.run") as run:
            assert main(["serve", "--port", "9000"]) == 0

        assert run.call_args.args == ("src.poolsite.main:app",)
        assert run.call_args.kwargs["port"] == 9000

    def test_create_admin_prompts_for_password(self):
        with (
            patch("src.poolsite.cli.getpass.getpass", return_value="s3cret-pass") as prompt,
            patch("src.poolsite.cli.create_user", new_callable=AsyncMock, return_value=0) as create,
        ):
            code = main(["create-admin", "--email", "a@example.com", "--name", "A"])

        assert code == 0
        prompt.assert_called_once()
        create.assert_awaited_once_with("a@example.com", "A", "s3cret-pass", "admin")
