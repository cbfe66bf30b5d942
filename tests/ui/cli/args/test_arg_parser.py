"""Tests for command line argument parser."""

import logging
from argparse import Namespace
from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from gnudb.config.config import Config
from gnudb.ui.cli.args import (
    ArgumentParser,
    ConfigArgs,
    LookupArgs,
    QueryArgs,
    ReadArgs,
    ServerOptions,
)

TOC = "1 9 185700 150 18051 42248 57183 75952 89333 114384 142453 163641"


def test_create_parser() -> None:
    """Argument parser should expose expected subcommands and options."""

    parser = ArgumentParser.create_parser()

    query_args: Namespace = parser.parse_args(["query", "--toc", TOC])
    assert query_args.command == "query"
    assert query_args.toc == TOC

    read_args: Namespace = parser.parse_args(["read", "rock", "6909aa09", "--http"])
    assert (read_args.category, read_args.discid, read_args.http) == ("rock", "6909aa09", True)

    lookup_args: Namespace = parser.parse_args(["lookup", "--toc", TOC, "--index", "2"])
    assert lookup_args.index == 2

    with pytest.raises(SystemExit):
        _ = parser.parse_args(["query"])


def test_process_query_uses_config_defaults(mocker: MockerFixture) -> None:
    mock_setup_logger = mocker.patch("gnudb.ui.cli.args.parser.setup_logger")

    args = ArgumentParser.process_args(["query", "--toc", TOC])

    assert isinstance(args, QueryArgs)
    assert args.toc.freedb_id == "6909aa09"
    assert args.server == ServerOptions(
        transport="cddbp",
        host="gnudb.gnudb.org",
        port=8880,
        timeout=10.0,
        hello="anonymous localhost gnudb-py 0.1.0",
        proto_level=6,
    )
    mock_setup_logger.assert_called_once_with(console_level=logging.INFO)


def test_flags_override_config(mocker: MockerFixture) -> None:
    _ = mocker.patch("gnudb.ui.cli.args.parser.setup_logger")

    args = ArgumentParser.process_args(
        ["read", "rock", "6909aa09", "--http", "--host", "cddb.example", "--timeout", "3", "--verbose"]
    )

    assert isinstance(args, ReadArgs)
    assert args.server.transport == "http"
    assert args.server.host == "cddb.example"
    assert args.server.port == 80
    assert args.server.timeout == 3.0
    assert args.verbose


def test_explicit_port(mocker: MockerFixture) -> None:
    _ = mocker.patch("gnudb.ui.cli.args.parser.setup_logger")

    args = ArgumentParser.process_args(["lookup", "--toc", TOC, "--port", "8000", "--index", "2"])

    assert isinstance(args, LookupArgs)
    assert args.server.port == 8000
    assert args.index == 2


def test_config_file_selects_http(tmp_path: Path, mocker: MockerFixture) -> None:
    _ = mocker.patch("gnudb.ui.cli.args.parser.setup_logger")
    config_path = tmp_path / "gnudb.toml"
    _ = Config(transport="http", http_port=8080, client_name="ripper").save(config_path)

    args = ArgumentParser.process_args(["query", "--toc", TOC, "--config", str(config_path)])

    assert isinstance(args, QueryArgs)
    assert args.server.transport == "http"
    assert args.server.port == 8080
    assert "ripper" in args.server.hello


def test_http_flag_uses_configured_http_port(tmp_path: Path, mocker: MockerFixture) -> None:
    _ = mocker.patch("gnudb.ui.cli.args.parser.setup_logger")
    config_path = tmp_path / "gnudb.toml"
    _ = Config(cddbp_port=9000, http_port=9080).save(config_path)

    args = ArgumentParser.process_args(["query", "--toc", TOC, "--http", "--config", str(config_path)])

    assert isinstance(args, QueryArgs)
    assert args.server.transport == "http"
    assert args.server.port == 9080


def test_log_file_flag_adds_file_handler(tmp_path: Path, mocker: MockerFixture) -> None:
    mock_setup_logger = mocker.patch("gnudb.ui.cli.args.parser.setup_logger")
    log_file = tmp_path / "trace.log"

    _ = ArgumentParser.process_args(["query", "--toc", TOC, "--quiet", "--log-file", str(log_file)])

    mock_setup_logger.assert_called_with(log_file=log_file, console_level=logging.ERROR)


def test_process_config_args(mocker: MockerFixture) -> None:
    _ = mocker.patch("gnudb.ui.cli.args.parser.setup_logger")

    args = ArgumentParser.process_args(["config", "--init", "--force", "--config", "x.toml"])

    assert args == ConfigArgs(command="config", init=True, force=True, path=Path("x.toml"))


@pytest.mark.parametrize(
    "argv",
    [
        ["query", "--toc", "1 2 3"],
        ["lookup", "--toc", TOC, "--index", "0"],
        ["query", "--toc", TOC, "--timeout", "0"],
    ],
)
def test_invalid_values_exit(argv: list[str], mocker: MockerFixture) -> None:
    _ = mocker.patch("gnudb.ui.cli.args.parser.setup_logger")
    mock_logger = mocker.patch("gnudb.ui.cli.args.parser.logger")

    with pytest.raises(SystemExit) as exc_info:
        _ = ArgumentParser.process_args(argv)

    assert exc_info.value.code == 1
    mock_logger.error.assert_called_once()


def test_broken_config_file_exits(tmp_path: Path, mocker: MockerFixture) -> None:
    _ = mocker.patch("gnudb.ui.cli.args.parser.setup_logger")
    config_path = tmp_path / "broken.toml"
    _ = config_path.write_text('transport = "carrier pigeon"\n', encoding="utf-8")

    with pytest.raises(SystemExit) as exc_info:
        _ = ArgumentParser.process_args(["query", "--toc", TOC, "--config", str(config_path)])

    assert exc_info.value.code == 1
