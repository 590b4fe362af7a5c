# Copyright (c) 2026 - 2026, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module tests the renderers running the Clover reporters."""

import subprocess  # nosec B404
from collections.abc import Callable
from pathlib import Path

import pytest

from mojoglue.clover import renderers
from mojoglue.clover.renderers import (
    RENDERERS,
    HtmlRenderer,
    PdfRenderer,
    XmlRenderer,
    create_renderers,
)
from mojoglue.clover.report_config import CloverReportConfig, ReportFormat
from mojoglue.errors import RendererInvocationError


@pytest.fixture(name="clover_jar")
def fixture_clover_jar(tmp_path: Path) -> str:
    """Create an empty Clover jar."""
    jar = tmp_path.joinpath("clover.jar")
    jar.write_bytes(b"")
    return str(jar)


@pytest.fixture(name="commands")
def fixture_commands() -> list[list[str]]:
    """Return the list of the commands run by the renderers."""
    return []


def _fake_run(commands: list[list[str]], returncode: int) -> Callable[..., subprocess.CompletedProcess]:
    def _run(command: list[str], **kwargs: object) -> subprocess.CompletedProcess:
        assert kwargs["check"] is False
        commands.append(command)
        return subprocess.CompletedProcess(command, returncode, stdout=b"report written", stderr=b"some error")

    return _run


def test_renderer_table() -> None:
    """Test that every report format has a renderer."""
    assert set(RENDERERS) == set(ReportFormat)
    assert RENDERERS[ReportFormat.HTML] is HtmlRenderer
    assert RENDERERS[ReportFormat.PDF] is PdfRenderer
    assert RENDERERS[ReportFormat.XML] is XmlRenderer


def test_create_renderers(make_report_config: Callable[..., CloverReportConfig]) -> None:
    """Test that the renderers are created with the Java settings of the configuration."""
    config = make_report_config(java_executable="/opt/java/bin/java", clover_jar="/opt/clover.jar")
    created = create_renderers(config)

    assert isinstance(created[ReportFormat.PDF], PdfRenderer)
    for renderer in created.values():
        assert renderer.java_executable == "/opt/java/bin/java"  # type: ignore[attr-defined]
        assert renderer.clover_jar == "/opt/clover.jar"  # type: ignore[attr-defined]


@pytest.mark.parametrize("returncode", [0, 1, 3])
def test_main_impl(monkeypatch: pytest.MonkeyPatch, clover_jar: str, commands: list, returncode: int) -> None:
    """Test that the reporter is run with its arguments and its exit code is returned."""
    monkeypatch.setattr(renderers.subprocess, "run", _fake_run(commands, returncode))

    renderer = XmlRenderer(java_executable="java", clover_jar=clover_jar)
    assert renderer.main_impl(["-t", "title", "-i", "clover.db", "-o", "clover.xml"]) == returncode
    assert commands == [
        [
            "java",
            "-cp",
            clover_jar,
            "com.cenqua.clover.reporters.xml.XMLReporter",
            "-t",
            "title",
            "-i",
            "clover.db",
            "-o",
            "clover.xml",
        ]
    ]


@pytest.mark.parametrize(
    "jar",
    [
        pytest.param("", id="No jar configured"),
        pytest.param("missing.jar", id="Missing jar"),
    ],
)
def test_main_impl_missing_jar(monkeypatch: pytest.MonkeyPatch, commands: list, tmp_path: Path, jar: str) -> None:
    """Test that the reporter is not run without a Clover jar."""
    monkeypatch.setattr(renderers.subprocess, "run", _fake_run(commands, 0))
    clover_jar = str(tmp_path.joinpath(jar)) if jar else ""

    with pytest.raises(RendererInvocationError, match=r"Failed to call \[com.cenqua.clover.reporters.pdf.PDFReporter"):
        PdfRenderer(clover_jar=clover_jar).main_impl([])
    assert not commands


def test_main_impl_java_not_found(monkeypatch: pytest.MonkeyPatch, clover_jar: str) -> None:
    """Test that a Java executable that cannot be started is an invocation error."""

    def _run(command: list[str], **kwargs: object) -> subprocess.CompletedProcess:
        raise FileNotFoundError(command[0])

    monkeypatch.setattr(renderers.subprocess, "run", _run)

    with pytest.raises(RendererInvocationError) as exc_info:
        HtmlRenderer(java_executable="no-such-java", clover_jar=clover_jar).main_impl([])

    assert str(exc_info.value) == "Failed to call [com.cenqua.clover.reporters.html.HtmlReporter.mainImpl]"
    assert isinstance(exc_info.value.__cause__, FileNotFoundError)
