"""Tests for command line argument processing."""

from __future__ import annotations

import logging
from unittest.mock import MagicMock

import pytest
from pytest_mock import MockerFixture

from musicmeta.ui.cli.args import ArgumentParser, InitConfigArgs, ParseArgs


@pytest.fixture
def mock_setup_logger(mocker: MockerFixture) -> MagicMock:
    return mocker.patch("musicmeta.ui.cli.args.parser.setup_logger")


def test_parse_defaults(mock_setup_logger: MagicMock) -> None:
    args = ArgumentParser.process_args(["parse", "song.mp3"])

    assert args == ParseArgs(
        command="parse",
        source="song.mp3",
        content_type=None,
        native=False,
        merge=False,
        skip_covers=False,
        json=False,
        verbose=False,
        quiet=False,
    )
    assert not args.is_url
    assert mock_setup_logger.call_args.kwargs["console_level"] == logging.WARNING


@pytest.mark.parametrize(
    ("flag", "level"),
    [("--verbose", logging.DEBUG), ("--quiet", logging.ERROR)],
)
def test_verbosity_sets_console_level(mock_setup_logger: MagicMock, flag: str, level: int) -> None:
    _ = ArgumentParser.process_args(["parse", "song.mp3", flag])

    assert mock_setup_logger.call_args.kwargs["console_level"] == level


def test_verbose_and_quiet_are_exclusive(mock_setup_logger: MagicMock) -> None:
    with pytest.raises(SystemExit) as exc_info:
        _ = ArgumentParser.process_args(["parse", "song.mp3", "--verbose", "--quiet"])

    assert exc_info.value.code == 2
    mock_setup_logger.assert_not_called()


def test_url_source(mock_setup_logger: MagicMock) -> None:
    _ = mock_setup_logger
    args = ArgumentParser.process_args(["parse", "http://example.com/a.flac"])

    assert isinstance(args, ParseArgs)
    assert args.is_url


def test_init_config_args(mock_setup_logger: MagicMock) -> None:
    _ = mock_setup_logger

    assert ArgumentParser.process_args(["init-config", "--force"]) == InitConfigArgs(
        command="init-config", force=True
    )


def test_command_is_required(mock_setup_logger: MagicMock) -> None:
    _ = mock_setup_logger
    with pytest.raises(SystemExit):
        _ = ArgumentParser.process_args([])
