# Copyright (c) 2026 - 2026, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module tests the defaults module."""

import logging
import os
from pathlib import Path

import pytest

from mojoglue.config.defaults import create_defaults, defaults, load_defaults


def test_load_defaults() -> None:
    """Test loading defaults."""
    config_path = os.path.join(os.path.dirname(os.path.abspath(__file__)), "resources", "defaults.ini")

    # Test that the user configuration is loaded.
    assert load_defaults(config_path) is True

    # Test that the values in user configuration are prioritized.
    assert defaults.get_list("clover.report", "formats") == ["html", "xml"]
    assert defaults.getint("clover.report", "flush_interval") == 0
    assert defaults.getboolean("ant", "offline") is True

    # Test that the values not in user configuration are kept.
    assert defaults.get("clover.report", "report_title") == "Maven Clover report"

    # Test loading an invalid configuration path.
    assert load_defaults("invalid") is False


def test_load_packaged_defaults() -> None:
    """Test the values shipped in the packaged defaults.ini."""
    assert load_defaults("") is True
    assert defaults.get("clover.report", "clover_database") == "target/clover/clover.db"
    assert defaults.get("clover.report", "clover_merge_database") == "target/clover/cloverMerge.db"
    assert defaults.get("clover.report", "aggregated_report_title") == "Maven Aggregated Clover report"
    assert defaults.get_list("maven", "remote_repositories") == ["https://repo.maven.apache.org/maven2"]


def test_load_malformed_defaults(tmp_path: Path) -> None:
    """Test loading a user configuration that is not an ini file."""
    user_config_path = tmp_path.joinpath("config.ini")
    user_config_path.write_text("formats = html\n", encoding="utf-8")
    assert load_defaults(str(user_config_path)) is False


def test_create_defaults(tmp_path: Path) -> None:
    """Test dumping the default values."""
    assert create_defaults(str(tmp_path), str(tmp_path)) is True
    assert tmp_path.joinpath("defaults.ini").is_file()


def test_create_defaults_missing_output_dir(tmp_path: Path) -> None:
    """Test dumping the default values to a directory that does not exist."""
    assert create_defaults(str(tmp_path.joinpath("missing")), str(tmp_path)) is False


@pytest.mark.parametrize(
    ("user_config_input", "delimiter", "expect"),
    [
        pytest.param(
            """
            [test.list]
            list = ,github.com, gitlab.com, space string, space string
            """,
            ",",
            ["", "github.com", " gitlab.com", " space string"],
            id="Custom delimiter",
        ),
        pytest.param(
            """
            [test.list]
            list =
                github.com
                comma_ended,
                space string
                space string
            """,
            None,
            ["github.com", "comma_ended,", "space", "string"],
            id="Whitespace delimiter",
        ),
        pytest.param(
            """
            [test.list]
            list =
            """,
            None,
            [],
            id="Empty list",
        ),
    ],
)
def test_get_list(user_config_input: str, delimiter: str | None, expect: list[str], tmp_path: Path) -> None:
    """Test getting a list of strings from defaults.ini with duplicated elements removed."""
    user_config_path = os.path.join(tmp_path, "config.ini")
    with open(user_config_path, "w", encoding="utf-8") as user_config_file:
        user_config_file.write(user_config_input)
    load_defaults(user_config_path)

    assert defaults.get_list("test.list", "list", delimiter=delimiter) == expect


def test_get_list_duplicated_ok(tmp_path: Path) -> None:
    """Test getting a list of strings from defaults.ini without removing duplicated elements."""
    user_config_path = tmp_path.joinpath("config.ini")
    user_config_path.write_text("[test.list]\nlist = pdf html pdf\n", encoding="utf-8")
    load_defaults(str(user_config_path))

    assert defaults.get_list("test.list", "list", duplicated_ok=True) == ["pdf", "html", "pdf"]


@pytest.mark.parametrize(
    ("section", "item", "fallback", "expect"),
    [
        ("clover.report", "non-existing", None, []),
        ("non-existing", "formats", None, []),
        ("clover.report", "non-existing", ["some", "fallback"], ["some", "fallback"]),
        ("non-existing", "formats", ["some", "fallback"], ["some", "fallback"]),
    ],
)
def test_get_list_with_errors(section: str, item: str, fallback: list[str] | None, expect: list[str]) -> None:
    """Test the fallback value of missing sections and items."""
    assert defaults.get_list(section, item, fallback=fallback) == expect


def test_load_defaults_unused_section(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    """Test that a user section that no goal reads is reported, while the known sections are not."""
    user_config_path = tmp_path.joinpath("config.ini")
    user_config_path.write_text("[clover-report]\nformats = pdf\n\n[ant]\noffline = True\n", encoding="utf-8")

    with caplog.at_level(logging.WARNING):
        assert load_defaults(str(user_config_path)) is True

    assert "Section [clover-report]" in caplog.text
    assert "Section [ant]" not in caplog.text
    # The misspelled section does not change the report formats.
    assert defaults.get_list("clover.report", "formats") == ["html"]


def test_create_defaults_replaces_existing(tmp_path: Path) -> None:
    """Test that dumping the default values again restores the packaged file."""
    tmp_path.joinpath("defaults.ini").write_text("[ant]\noffline = True\n", encoding="utf-8")

    assert create_defaults(str(tmp_path), str(tmp_path)) is True
    assert "[clover.report]" in tmp_path.joinpath("defaults.ini").read_text(encoding="utf-8")
