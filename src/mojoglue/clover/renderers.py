# Copyright (c) 2026 - 2026, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module contains the renderers invoking the Clover reporter entry points.

Each report format has its own renderer. The renderers are selected with the ``RENDERERS`` table.
"""

import logging
import os
import subprocess  # nosec B404
from abc import ABC, abstractmethod

from mojoglue.clover.report_config import CloverReportConfig, ReportFormat
from mojoglue.errors import RendererInvocationError

logger: logging.Logger = logging.getLogger(__name__)


class CloverRenderer(ABC):
    """The base class of the Clover reporter entry points."""

    #: The fully qualified name of the Clover reporter class.
    reporter_class: str = ""

    @abstractmethod
    def main_impl(self, args: list[str]) -> int:
        """Run the reporter with the arguments and return its result code.

        Parameters
        ----------
        args : list[str]
            The reporter arguments.

        Returns
        -------
        int
            The result code of the reporter. 0 means success.

        Raises
        ------
        RendererInvocationError
            If the reporter cannot be called.
        """


class JavaCloverRenderer(CloverRenderer):
    """A renderer running the Clover reporter class in a Java process."""

    def __init__(self, java_executable: str = "java", clover_jar: str = "") -> None:
        """Initialize instance.

        Parameters
        ----------
        java_executable : str
            The Java executable.
        clover_jar : str
            The path to the Clover jar.
        """
        self.java_executable = java_executable
        self.clover_jar = clover_jar

    def get_command(self, args: list[str]) -> list[str]:
        """Return the command running the reporter class with the arguments."""
        return [self.java_executable, "-cp", self.clover_jar, self.reporter_class, *args]

    def main_impl(self, args: list[str]) -> int:
        """Run the reporter in a Java process and return its exit code.

        The process is not given a timeout: the reporter runs until it completes.

        Parameters
        ----------
        args : list[str]
            The reporter arguments.

        Returns
        -------
        int
            The exit code of the reporter process.

        Raises
        ------
        RendererInvocationError
            If the Clover jar is missing or the Java process cannot be started.
        """
        if not self.clover_jar or not os.path.isfile(self.clover_jar):
            raise RendererInvocationError(
                f"Failed to call [{self.reporter_class}.mainImpl]: cannot find the Clover jar at '{self.clover_jar}'."
            )

        command = self.get_command(args)
        logger.debug("Running %s", " ".join(command))
        try:
            result = subprocess.run(  # nosec B603
                command,
                capture_output=True,
                check=False,
            )
        except OSError as error:
            raise RendererInvocationError(f"Failed to call [{self.reporter_class}.mainImpl]") from error

        if result.stdout:
            logger.debug("Reporter stdout:\n%s", result.stdout.decode("utf-8", errors="replace"))
        if result.returncode != 0:
            logger.debug("Reporter stderr:\n%s", result.stderr.decode("utf-8", errors="replace"))

        return result.returncode


class HtmlRenderer(JavaCloverRenderer):
    """The HTML Clover reporter."""

    reporter_class = "com.cenqua.clover.reporters.html.HtmlReporter"


class PdfRenderer(JavaCloverRenderer):
    """The PDF Clover reporter."""

    reporter_class = "com.cenqua.clover.reporters.pdf.PDFReporter"


class XmlRenderer(JavaCloverRenderer):
    """The XML Clover reporter."""

    reporter_class = "com.cenqua.clover.reporters.xml.XMLReporter"


RENDERERS: dict[ReportFormat, type[JavaCloverRenderer]] = {
    ReportFormat.HTML: HtmlRenderer,
    ReportFormat.PDF: PdfRenderer,
    ReportFormat.XML: XmlRenderer,
}
"""The mappings between the report formats and their renderers."""


def create_renderers(config: CloverReportConfig) -> dict[ReportFormat, CloverRenderer]:
    """Create one renderer per report format from the configuration.

    Parameters
    ----------
    config : CloverReportConfig
        The report configuration.

    Returns
    -------
    dict[ReportFormat, CloverRenderer]
        The renderers keyed by report format.
    """
    return {
        report_format: renderer(java_executable=config.java_executable, clover_jar=config.clover_jar)
        for report_format, renderer in RENDERERS.items()
    }
