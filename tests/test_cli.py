"""Tests for the command-line entry point and startup flow."""

from unittest.mock import patch

import pytest

from spotify_cli import main
from spotify_cli.cli import build_parser
from spotify_cli.core.config import Config
from spotify_cli.domain.library.provider import ProviderConfig, ProviderState
from spotify_cli.domain.library.providers.fake import FakeSpotifyClient
from spotify_cli.domain.library.providers.spotify import SpotifyClient


class TestParser:
    def test_defaults(self):
        args = build_parser().parse_args([])

        assert args.debug is False
        assert args.log_level is None
        assert args.subcommand is None

    def test_debug_and_level(self):
        args = build_parser().parse_args(["--debug", "--log-level", "debug"])

        assert args.debug is True
        assert args.log_level == "DEBUG"

    def test_auth_subcommand(self):
        assert build_parser().parse_args(["auth"]).subcommand == "auth"


class TestBuildClient:
    def test_debug_uses_fake_client(self):
        assert isinstance(main.build_client(Config(), debug=True), FakeSpotifyClient)

    def test_missing_client_id(self):
        assert main.build_client(Config()) is None

    def test_not_authenticated(self):
        cfg = Config()
        cfg.spotify.client_id = "abc"
        state = ProviderState(config=ProviderConfig(name="spotify"))

        with patch.object(main.spotify, "init_provider", return_value=state):
            assert main.build_client(cfg) is None

    def test_authenticated(self):
        cfg = Config()
        cfg.spotify.client_id = "abc"
        cfg.spotify.preferred_device_id = "desk"
        state = ProviderState(config=ProviderConfig(name="spotify")).with_authenticated(True)

        with patch.object(main.spotify, "init_provider", return_value=state):
            client = main.build_client(cfg)

        assert isinstance(client, SpotifyClient)
        assert client.device_id == "desk"


class TestInteractiveMode:
    def test_fetch_failure_exits(self):
        cfg = Config()
        failing = FakeSpotifyClient()

        with (
            patch.object(main.config, "load_config", return_value=cfg),
            patch.object(main, "setup_logging"),
            patch.object(main, "build_client", return_value=failing),
            patch.object(failing, "get_page", side_effect=ConnectionError("offline")),
        ):
            with pytest.raises(SystemExit) as exc_info:
                main.interactive_mode()

        assert exc_info.value.code == 1

    def test_runs_ui_with_fetched_albums(self):
        cfg = Config()
        client = FakeSpotifyClient()

        with (
            patch.object(main.config, "load_config", return_value=cfg),
            patch.object(main, "setup_logging"),
            patch.object(main, "build_client", return_value=client),
            patch("spotify_cli.ui.blessed.run_interactive_ui") as run_ui,
        ):
            main.interactive_mode(debug=True)

        ctx = run_ui.call_args.args[0]
        assert ctx.albums == tuple(client.albums)
        assert ctx.debug is True


class TestRunAuth:
    def test_invalid_config_returns_error(self):
        with (
            patch.object(main.config, "load_config", side_effect=ValueError("bad port")),
            patch.object(main, "print_error") as print_error,
            patch.object(main.spotify, "authenticate") as authenticate,
        ):
            assert main.run_auth() == 1

        assert "bad port" in print_error.call_args.args[0]
        authenticate.assert_not_called()

    def test_missing_client_id(self):
        with (
            patch.object(main.config, "load_config", return_value=Config()),
            patch.object(main, "setup_logging"),
            patch.object(main.spotify, "authenticate") as authenticate,
        ):
            assert main.run_auth() == 1

        authenticate.assert_not_called()
