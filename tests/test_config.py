"""Tests for configuration and command line parsing."""

import logging

import pytest

from hxpy.__main__ import main, parse_args
from hxpy.config import EditorConfig, parse_int_option


@pytest.mark.parametrize("value,expected", [
    ("32", 32),
    ("16", 16),
    ("64", 64),
    ("8", 16),
    ("65", 16),
    ("abc", 16),
    ("", 16),
    (None, 16),
])
def test_parse_int_option(value, expected):
    assert parse_int_option(value, 16, 64, 16) == expected


def test_defaults():
    config = EditorConfig.from_args(parse_args(["file.bin"]), environ={})

    assert config.octets_per_line == 16
    assert config.grouping == 4
    assert config.log_file is None
    assert config.log_level == logging.INFO


def test_options_and_environment():
    args = parse_args(["-o", "32", "-g", "8", "file.bin"])
    config = EditorConfig.from_args(
        args, environ={"HXPY_LOG_FILE": "/tmp/hx.log", "HXPY_LOG_LEVEL": "debug"}
    )

    assert args.file == "file.bin"
    assert config.octets_per_line == 32
    assert config.grouping == 8
    assert config.log_file == "/tmp/hx.log"
    assert config.log_level == logging.DEBUG


def test_out_of_range_options_use_defaults():
    args = parse_args(["-o", "100", "-g", "1", "file.bin"])
    config = EditorConfig.from_args(args, environ={"HXPY_LOG_LEVEL": "loud"})

    assert config.octets_per_line == 16
    assert config.grouping == 4
    assert config.log_level == logging.INFO


def test_missing_filename_is_usage_error():
    with pytest.raises(SystemExit) as exc_info:
        parse_args([])
    assert exc_info.value.code == 2


def test_version(capsys):
    with pytest.raises(SystemExit) as exc_info:
        parse_args(["-v"])

    assert exc_info.value.code == 0
    assert "hxpy version" in capsys.readouterr().out


def test_main_reports_unreadable_file(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc_info:
        main([str(tmp_path / "missing.bin")])

    assert exc_info.value.code == 1
    assert "Error: Cannot open file" in capsys.readouterr().err
