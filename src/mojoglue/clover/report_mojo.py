# Copyright (c) 2026 - 2026, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module contains the Clover report goal.

The goal generates a Clover report from existing Clover databases. The report is an external report
generated by Clover itself. If a merged Clover database exists, an aggregated report is also created.
"""

import logging
import os

from mojoglue.clover.availability import can_generate_report
from mojoglue.clover.dispatcher import ReportDispatcher
from mojoglue.clover.renderers import CloverRenderer
from mojoglue.clover.report_config import CloverReportConfig, ReportFormat, ReportOutcome
from mojoglue.config.defaults import defaults

logger: logging.Logger = logging.getLogger(__name__)


class CloverReportMojo:
    """The Clover report goal."""

    #: The output name of the report, relative to the site directory.
    output_name = "clover/index"

    def __init__(
        self,
        config: CloverReportConfig,
        renderers: dict[ReportFormat, CloverRenderer] | None = None,
        log: logging.Logger | None = None,
    ) -> None:
        """Initialize instance.

        Parameters
        ----------
        config : CloverReportConfig
            The report configuration.
        renderers : dict[ReportFormat, CloverRenderer] | None
            The renderers keyed by report format. They are created from the configuration if not provided.
        log : logging.Logger | None
            The logger of the run. The module logger is used if not provided.
        """
        self.config = config
        self.log = log or logger
        self.dispatcher = ReportDispatcher(config, renderers=renderers, log=self.log)

    @property
    def name(self) -> str:
        """Return the name of the report."""
        return defaults.get("clover.report", "name", fallback="Clover")

    @property
    def description(self) -> str:
        """Return the description of the report."""
        return defaults.get("clover.report", "description", fallback="Clover test coverage report.")

    @property
    def output_directory(self) -> str:
        """Return the absolute path to the report output directory."""
        return os.path.abspath(self.config.output_directory)

    @property
    def is_external_report(self) -> bool:
        """Return True: the report is generated by Clover rather than rendered by us."""
        return True

    def can_generate_report(self) -> bool:
        """Return True if a Clover module database or a Clover merged database exists."""
        return can_generate_report(self.config, log=self.log)

    def execute_report(self) -> list[ReportOutcome]:
        """Generate the reports of every available Clover database.

        Returns
        -------
        list[ReportOutcome]
            The outcomes of the generated reports.

        Raises
        ------
        ReportGenerationError
            If a reporter returns a non-zero result.
        RendererInvocationError
            If a reporter cannot be called.
        ReportOutputError
            If the output directory cannot be created.
        """
        return self.dispatcher.generate_reports()

    def execute(self) -> list[ReportOutcome]:
        """Run the goal.

        Returns
        -------
        list[ReportOutcome]
            The outcomes of the generated reports. The list is empty if report generation was skipped.

        Raises
        ------
        ReportGenerationError
            If a reporter returns a non-zero result.
        RendererInvocationError
            If a reporter cannot be called.
        ReportOutputError
            If the output directory cannot be created.
        """
        if not self.can_generate_report():
            return []

        outcomes = self.execute_report()
        self.log.info("Generated %d Clover report(s) in %s", len(outcomes), self.output_directory)
        return outcomes
