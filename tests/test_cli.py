"""
Tests for the users-api command line interface
"""

from unittest.mock import patch

from click.testing import CliRunner

from users_api import __version__
from users_api.cli import cli


def test_version():
    result = CliRunner().invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output


def test_schema_prints_sdl():
    result = CliRunner().invoke(cli, ["schema"])

    assert result.exit_code == 0
    assert "type User {" in result.output
    assert "deleteUser(id: ID!): User" in result.output


def test_schema_writes_file(tmp_path):
    target = tmp_path / "schema.graphql"

    result = CliRunner().invoke(cli, ["schema", "--output", str(target)])

    assert result.exit_code == 0
    assert "createUser(username: String!, email: String!): User!" in target.read_text()


def test_serve_runs_uvicorn_with_app_object():
    from users_api.api.app import app

    with patch("users_api.cli.uvicorn.run") as run:
        result = CliRunner().invoke(cli, ["serve", "--port", "4555"])

    assert result.exit_code == 0, result.output
    run.assert_called_once()
    args, kwargs = run.call_args
    assert args[0] is app
    assert kwargs["port"] == 4555


def test_serve_with_reload_passes_import_string():
    with patch("users_api.cli.uvicorn.run") as run:
        result = CliRunner().invoke(cli, ["serve", "--reload"])

    assert result.exit_code == 0, result.output
    args, kwargs = run.call_args
    assert args[0] == "users_api.api.app:app"
    assert kwargs["reload"] is True
    assert kwargs["workers"] == 1


def test_serve_exits_nonzero_on_startup_failure():
    with patch("users_api.cli.uvicorn.run", side_effect=OSError("address in use")):
        result = CliRunner().invoke(cli, ["serve"])

    assert result.exit_code == 1
