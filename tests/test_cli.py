"""Tests for the command line interface."""

import os
import socket
from unittest.mock import AsyncMock, patch

from click.testing import CliRunner

from listings_gateway import __version__
from listings_gateway.api import app as app_module
from listings_gateway.cache.memory import InMemoryResponseCache
from listings_gateway.cli import cli
from listings_gateway.errors import StartupError


def test_version():
    result = CliRunner().invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output


def test_export_schema_to_stdout():
    result = CliRunner().invoke(cli, ["export-schema"])

    assert result.exit_code == 0
    assert "featuredListings: [Listing!]!" in result.output
    assert "listing(id: ID!): Listing" in result.output
    assert "amenities: [Amenity!]!" in result.output


def test_export_schema_to_file(tmp_path):
    target = tmp_path / "schema.graphql"

    result = CliRunner().invoke(cli, ["export-schema", "--output", str(target)])

    assert result.exit_code == 0
    assert "type Amenity" in target.read_text(encoding="utf-8")


class TestServe:
    """Tests for the serve command."""

    def test_exits_1_when_app_creation_fails(self):
        with patch("listings_gateway.api.app.create_app", side_effect=StartupError("bad schema")):
            result = CliRunner().invoke(cli, ["serve", "--port", "4999"])

        assert result.exit_code == 1

    def test_exits_1_when_port_is_taken(self):
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
            sock.bind(("127.0.0.1", 0))
            sock.listen()
            port = sock.getsockname()[1]

            result = CliRunner().invoke(cli, ["serve", "--host", "127.0.0.1", "--port", str(port)])

        assert result.exit_code == 1, result.output

    def test_exits_1_when_lifespan_fails(self, test_settings, upstream):
        cache = InMemoryResponseCache()
        cache.ping = AsyncMock(side_effect=ConnectionError("refused"))
        real_create_app = app_module.create_app

        def build_app(_settings=None):
            return real_create_app(settings=test_settings, transport=upstream.transport, cache=cache)

        with patch("listings_gateway.api.app.create_app", side_effect=build_app):
            result = CliRunner().invoke(cli, ["serve", "--host", "127.0.0.1", "--port", "0"])

        assert result.exit_code == 1, result.output
        cache.ping.assert_awaited_once()

    def test_explicit_port_zero_is_kept(self):
        with (
            patch("listings_gateway.api.app.create_app"),
            patch("listings_gateway.cli.uvicorn.Config") as mock_config,
            patch("listings_gateway.cli.uvicorn.Server") as mock_server,
        ):
            mock_server.return_value.started = True
            result = CliRunner().invoke(cli, ["serve", "--host", "127.0.0.1", "--port", "0"])

        assert result.exit_code == 0, result.output
        assert mock_config.call_args.kwargs["port"] == 0
        assert mock_config.call_args.kwargs["host"] == "127.0.0.1"

    def test_reload_hands_log_level_to_workers(self):
        with patch("listings_gateway.cli.uvicorn.run") as mock_run:
            result = CliRunner().invoke(cli, ["serve", "--reload", "--log-level", "debug"])

        assert result.exit_code == 0, result.output
        assert os.environ["LISTINGS_LOG_LEVEL"] == "debug"
        assert os.environ["LISTINGS_DEBUG"] == "true"
        assert mock_run.call_args.args == ("listings_gateway.api.app:create_app",)
        assert mock_run.call_args.kwargs["factory"] is True
        assert mock_run.call_args.kwargs["reload"] is True
