"""
Tests for loading documents from files and strings.
"""

import logging

import pytest

from iniscan.config.cursor import ErrorKind, ParseError
from iniscan.config.loader import ConfigError, ConfigLoader


def test_load_file(write_ini) -> None:
    path = write_ini("global = yes\n[db]\nhost = localhost\nport: 5432 ; default\n")
    loader = ConfigLoader()

    document = loader.load_file(path)

    assert document == {
        "default": {"global": "yes"},
        "db": {"host": "localhost", "port": "5432"},
    }
    assert loader.last_document == document


def test_load_alias_matches_load_file(write_ini) -> None:
    """load() delegates to load_file()."""
    path = write_ini("[S]\nk = v\n")
    loader = ConfigLoader()

    assert loader.load(str(path)) == loader.load_file(path)


def test_load_string() -> None:
    loader = ConfigLoader(default_section="root")

    assert loader.load_string("k = v\n") == {"root": {"k": "v"}}


def test_load_file_with_encoding(write_ini) -> None:
    path = write_ini("[café]\nprix = 3€\n".encode("cp1252"))
    loader = ConfigLoader(encoding="cp1252")

    assert loader.load_file(path) == {"café": {"prix": "3€"}}


def test_missing_file(tmp_path) -> None:
    with pytest.raises(ConfigError, match="not found"):
        ConfigLoader().load_file(tmp_path / "missing.ini")


def test_directory_is_rejected(tmp_path) -> None:
    with pytest.raises(ConfigError, match="Not a file"):
        ConfigLoader().load_file(tmp_path)


def test_parse_error_is_wrapped(write_ini) -> None:
    path = write_ini("[ok]\n[]\n")
    loader = ConfigLoader()

    with pytest.raises(ConfigError) as exc_info:
        loader.load_file(path)

    cause = exc_info.value.__cause__
    assert isinstance(cause, ParseError)
    assert cause.kind is ErrorKind.EMPTY_SECTION_HEADER
    assert str(path) in str(exc_info.value)
    assert "line 2, column 2" in str(exc_info.value)
    assert loader.last_document is None


def test_string_errors_use_filename() -> None:
    with pytest.raises(ConfigError, match=r"^inline: line 1"):
        ConfigLoader().load_string("[open", filename="inline")


def test_load_string_keyword_arguments() -> None:
    loader = ConfigLoader()

    assert loader.load_string(source="[S]\nk = v\n", filename="inline.ini") == {"S": {"k": "v"}}


def test_invalid_bytes_are_wrapped(write_ini) -> None:
    path = write_ini(b"[S]\nk = \xff\n")

    with pytest.raises(ConfigError) as exc_info:
        ConfigLoader().load_file(path)

    assert exc_info.value.__cause__.kind is ErrorKind.READ_FAILURE


def test_unknown_encoding(write_ini) -> None:
    path = write_ini("[S]\n")

    with pytest.raises(ConfigError, match="Unknown encoding"):
        ConfigLoader(encoding="no-such-codec").load_file(path)


def test_empty_default_section_name() -> None:
    with pytest.raises(ConfigError, match="default_section"):
        ConfigLoader(default_section="").load_string("k = v\n")


def test_load_logs_section_count(write_ini, caplog) -> None:
    path = write_ini("[a]\n[b]\n")

    with caplog.at_level(logging.INFO, logger="iniscan"):
        ConfigLoader().load_file(path)

    assert "Loaded 2 section(s)" in caplog.text
