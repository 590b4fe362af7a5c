# Copyright (c) 2026 - 2026, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module dispatches the Clover report requests to the renderers."""

import logging
import os

from mojoglue.clover.cli_args import build_report_args
from mojoglue.clover.renderers import CloverRenderer, create_renderers
from mojoglue.clover.report_config import CloverReportConfig, ReportFormat, ReportOutcome, ReportRequest, ReportScope
from mojoglue.errors import RendererInvocationError, ReportGenerationError, ReportOutputError

logger: logging.Logger = logging.getLogger(__name__)

#: The names of the report files, which differ between scopes so merged reports do not overwrite module reports.
REPORT_FILE_NAMES: dict[tuple[ReportScope, ReportFormat], str] = {
    (ReportScope.SINGLE, ReportFormat.PDF): "clover.pdf",
    (ReportScope.SINGLE, ReportFormat.XML): "clover.xml",
    (ReportScope.MERGED, ReportFormat.PDF): "cloverMerged.pdf",
    (ReportScope.MERGED, ReportFormat.XML): "cloverMerged.xml",
}


def create_output_directory(path: str) -> None:
    """Create a report output directory and its parents.

    Raises
    ------
    ReportOutputError
        If the directory cannot be created.
    """
    try:
        os.makedirs(path, exist_ok=True)
    except OSError as error:
        raise ReportOutputError(f"Cannot create the report output directory: {error}", path=path) from error

class ReportDispatcher:
    """This class generates the enabled Clover reports of a scope."""

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
            The logger of the run. Debug output is requested from the reporters if it has DEBUG enabled.
        """
        self.config = config
        self.renderers = renderers if renderers is not None else create_renderers(config)
        self.log = log or logger

    def get_output_target(self, scope: ReportScope, report_format: ReportFormat) -> str:
        """Return the output of a report.

        HTML reports are written to the output directory itself, other formats to a file inside it.
        """
        if report_format == ReportFormat.HTML:
            return self.config.output_directory
        return os.path.join(self.config.output_directory, REPORT_FILE_NAMES[(scope, report_format)])

    def create_request(self, scope: ReportScope, report_format: ReportFormat) -> ReportRequest:
        """Create the report request of a format in a scope."""
        return ReportRequest(
            format=report_format,
            scope=scope,
            database_path=self.config.get_database(scope),
            output_target=self.get_output_target(scope, report_format),
            title=self.config.get_title(scope),
            debug=self.log.isEnabledFor(logging.DEBUG),
            source_root=self.config.source_root,
        )

    def dispatch(self, scope: ReportScope) -> list[ReportOutcome]:
        """Generate the enabled reports of a scope, in HTML, PDF, XML order.

        Parameters
        ----------
        scope : ReportScope
            The scope of the reports.

        Returns
        -------
        list[ReportOutcome]
            The outcomes of the generated reports.

        Raises
        ------
        ReportGenerationError
            If a reporter returns a non-zero result. The remaining formats are not attempted.
        RendererInvocationError
            If a reporter cannot be called.
        """
        outcomes = []
        for report_format in ReportFormat:
            if not self.config.is_enabled(report_format):
                continue

            request = self.create_request(scope, report_format)
            outcomes.append(self.render(request))

        return outcomes

    def render(self, request: ReportRequest) -> ReportOutcome:
        """Invoke the renderer of a report request.

        Parameters
        ----------
        request : ReportRequest
            The report request.

        Returns
        -------
        ReportOutcome
            The successful outcome.

        Raises
        ------
        ReportGenerationError
            If the reporter returns a non-zero result.
        RendererInvocationError
            If there is no renderer for the format or the reporter cannot be called.
        ReportOutputError
            If the HTML output directory cannot be created.
        """
        renderer = self.renderers.get(request.format)
        if renderer is None:
            raise RendererInvocationError(f"No renderer is available for the {request.label} report.")

        if request.format == ReportFormat.HTML:
            # The HTML reporter does not create its output directory.
            create_output_directory(request.output_target)

        self.log.info("Generating the %s Clover report to %s", request.label, request.output_target)
        result_code = renderer.main_impl(build_report_args(request))
        if result_code != 0:
            raise ReportGenerationError(
                f"Clover has failed to create the {request.label} report",
                report_format=request.format.name,
                scope=request.scope.value,
                result_code=result_code,
            )

        return ReportOutcome(
            format=request.format,
            scope=request.scope,
            result_code=result_code,
            output_target=request.output_target,
        )

    def generate_reports(self) -> list[ReportOutcome]:
        """Generate the reports of every scope whose Clover database exists.

        Returns
        -------
        list[ReportOutcome]
            The outcomes of the module reports followed by the outcomes of the merged reports.

        Raises
        ------
        ReportGenerationError
            If a reporter returns a non-zero result.
        RendererInvocationError
            If a reporter cannot be called.
        ReportOutputError
            If the output directory cannot be created.
        """
        create_output_directory(self.config.output_directory)

        outcomes = []
        for scope in ReportScope:
            database = self.config.get_database(scope)
            if os.path.exists(database):
                outcomes.extend(self.dispatch(scope))
            else:
                self.log.debug("Skipping the %s reports: no Clover database at %s", scope.value, database)

        return outcomes
