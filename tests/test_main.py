# Copyright (c) 2026 - 2026, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""Simple tests for the main method."""

import os
from collections.abc import Callable
from importlib import metadata as importlib_metadata
from pathlib import Path

import pytest

from mojoglue.__main__ import main
from mojoglue.clover import dispatcher
from mojoglue.clover.renderers import CloverRenderer
from mojoglue.clover.report_config import ReportFormat

RESOURCES_DIR = Path(__file__).parent.joinpath("ant", "resources")


def run_main(argv: list[str]) -> int | str | None:
    """Run the main method and return its exit code."""
    with pytest.raises(SystemExit) as exc_info:
        main(argv)
    return exc_info.value.code


@pytest.mark.parametrize(
    ("flag"),
    [
        "--version",
        "-V",
    ],
)
def test_version(capsys: pytest.CaptureFixture, flag: str) -> None:
    """Test the ``--version/-V`` flag.

    Stdout format should be correct and exit code should be 0.
    """
    with pytest.raises(SystemExit) as exc_info:
        main([flag])
    out, err = capsys.readouterr()

    # Test that we are indeed outputting mojoglue version.
    assert out == f"mojoglue {importlib_metadata.version('mojoglue')}\n"
    assert err == ""
    assert exc_info.value.code == 0


def test_no_action() -> None:
    """Test that running without an action prints the help and fails."""
    assert run_main([]) == os.EX_USAGE


def test_clover_report_without_database(tmp_path: Path) -> None:
    """Test that a missing Clover database is not an error."""
    exit_code = run_main(
        [
            "-o",
            str(tmp_path.joinpath("output")),
            "clover-report",
            "-db",
            str(tmp_path.joinpath("clover.db")),
            "-mdb",
            str(tmp_path.joinpath("cloverMerge.db")),
            "-rd",
            str(tmp_path.joinpath("site")),
            "--no-wait-for-flush",
        ]
    )

    assert exit_code == os.EX_OK
    assert not tmp_path.joinpath("site").exists()
    assert tmp_path.joinpath("output", "debug.log").is_file()


@pytest.fixture(name="report_args")
def fixture_report_args(tmp_path: Path) -> list[str]:
    """Create a Clover database and return the arguments generating its reports."""
    database = tmp_path.joinpath("clover.db")
    database.write_bytes(b"")
    return [
        "-o",
        str(tmp_path.joinpath("output")),
        "clover-report",
        "-db",
        str(database),
        "-mdb",
        str(tmp_path.joinpath("cloverMerge.db")),
        "-rd",
        str(tmp_path.joinpath("site")),
        "--no-wait-for-flush",
    ]


def test_clover_report(
    monkeypatch: pytest.MonkeyPatch,
    fake_renderers: Callable[..., dict[ReportFormat, CloverRenderer]],
    renderer_calls: list,
    report_args: list[str],
) -> None:
    """Test generating the enabled reports of a module."""
    renderers = fake_renderers()
    monkeypatch.setattr(dispatcher, "create_renderers", lambda config: renderers)

    assert run_main([*report_args, "--no-html", "--pdf", "--xml"]) == os.EX_OK
    assert [call[0] for call in renderer_calls] == ["PDF", "XML"]


def test_clover_report_fails(
    monkeypatch: pytest.MonkeyPatch,
    fake_renderers: Callable[..., dict[ReportFormat, CloverRenderer]],
    report_args: list[str],
) -> None:
    """Test that a failing reporter is reported with its own exit code."""
    renderers = fake_renderers(html=1)
    monkeypatch.setattr(dispatcher, "create_renderers", lambda config: renderers)

    assert run_main(report_args) == os.EX_DATAERR


def test_clover_report_without_jar(report_args: list[str]) -> None:
    """Test that the reporters cannot be called without a Clover jar."""
    assert run_main(report_args) == os.EX_SOFTWARE


def test_clover_report_invalid_flush_interval(report_args: list[str]) -> None:
    """Test that a negative flush interval is a usage error."""
    assert run_main([*report_args, "--flush-interval=-1"]) == os.EX_USAGE



def test_clover_report_output_dir_error(tmp_path: Path, report_args: list[str]) -> None:
    """Test that a report directory that cannot be created is reported as an I/O error."""
    tmp_path.joinpath("site").write_bytes(b"")

    assert run_main([*report_args, "-rd", str(tmp_path.joinpath("site", "clover"))]) == os.EX_IOERR


def test_ant(tmp_path: Path) -> None:
    """Test generating the Ant build files of a project."""
    project_dir = tmp_path.joinpath("project")
    project_dir.mkdir()
    pom = project_dir.joinpath("pom.xml")
    pom.write_text(RESOURCES_DIR.joinpath("simple_pom.xml").read_text(encoding="utf-8"), encoding="utf-8")

    exit_code = run_main(
        ["-o", str(tmp_path.joinpath("output")), "ant", "-f", str(pom), "-lr", str(tmp_path.joinpath("repo"))]
    )

    assert exit_code == os.EX_OK
    assert project_dir.joinpath("build.xml").is_file()
    assert project_dir.joinpath("build.properties").is_file()


def test_ant_missing_pom(tmp_path: Path) -> None:
    """Test that a missing POM file is reported as missing input."""
    exit_code = run_main(["-o", str(tmp_path.joinpath("output")), "ant", "-f", str(tmp_path.joinpath("pom.xml"))])
    assert exit_code == os.EX_NOINPUT


def test_ant_write_error(tmp_path: Path) -> None:
    """Test that a build file that cannot be written is reported as an I/O error."""
    project_dir = tmp_path.joinpath("project")
    project_dir.mkdir()
    project_dir.joinpath("build.xml").mkdir()
    pom = project_dir.joinpath("pom.xml")
    pom.write_text(RESOURCES_DIR.joinpath("simple_pom.xml").read_text(encoding="utf-8"), encoding="utf-8")

    exit_code = run_main(
        ["-o", str(tmp_path.joinpath("output")), "ant", "-f", str(pom), "-lr", str(tmp_path.joinpath("repo"))]
    )
    assert exit_code == os.EX_IOERR


def test_dump_defaults(tmp_path: Path) -> None:
    """Test dumping the default values to the output directory."""
    output_dir = tmp_path.joinpath("output")

    assert run_main(["-o", str(output_dir), "dump-defaults"]) == os.EX_OK
    assert output_dir.joinpath("defaults.ini").is_file()


def test_missing_defaults_file(tmp_path: Path) -> None:
    """Test that a defaults file that does not exist is reported as missing input."""
    exit_code = run_main(
        ["-o", str(tmp_path.joinpath("output")), "-dp", str(tmp_path.joinpath("missing.ini")), "dump-defaults"]
    )
    assert exit_code == os.EX_NOINPUT
