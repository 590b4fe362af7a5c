# Copyright (c) 2026 - 2026, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module contains the data model of the Clover report goal."""

import configparser
import dataclasses
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from mojoglue.config.defaults import defaults
from mojoglue.errors import ConfigurationError


class ReportFormat(str, Enum):
    """The report formats supported by the Clover reporters.

    The declaration order is the order in which reports are generated.
    """

    HTML = "html"
    PDF = "pdf"
    XML = "xml"


class ReportScope(str, Enum):
    """Whether a report is generated from one module's database or from the merged database."""

    SINGLE = "single"
    MERGED = "merged"


@dataclass(frozen=True)
class ReportRequest:
    """The inputs of one Clover reporter invocation."""

    #: The format of the report.
    format: ReportFormat

    #: The scope of the report.
    scope: ReportScope

    #: The Clover database the report is generated from.
    database_path: str

    #: The output file, or the output directory for HTML reports.
    output_target: str

    #: The title of the report.
    title: str

    #: Whether the reporter should run with debug output.
    debug: bool = False

    #: The source root of the module, only passed to single-module HTML reports.
    source_root: str | None = None

    @property
    def label(self) -> str:
        """Return a readable name for the report, e.g. ``merged PDF``."""
        if self.scope == ReportScope.MERGED:
            return f"merged {self.format.name}"
        return self.format.name


@dataclass(frozen=True)
class ReportOutcome:
    """The result of one Clover reporter invocation."""

    format: ReportFormat
    scope: ReportScope
    result_code: int
    output_target: str = ""

    @property
    def succeeded(self) -> bool:
        """Return True if the reporter returned a zero result code."""
        return self.result_code == 0


@dataclass(frozen=True)
class CloverReportConfig:
    """The configuration of the Clover report goal.

    An instance is built once per run and passed explicitly to every component.
    """

    #: The location of the Clover database.
    clover_database: str

    #: The location of the merged Clover database created in multi-module builds.
    clover_merge_database: str

    #: The directory where the Clover report will be generated.
    output_directory: str

    #: The minimum period between two flushes of coverage data (in milliseconds).
    flush_interval: int = 500

    #: If True, wait ``2 * flush_interval`` before checking the Clover databases.
    wait_for_flush: bool = True

    #: The report formats to generate.
    enabled_formats: frozenset[ReportFormat] = field(default_factory=lambda: frozenset({ReportFormat.HTML}))

    #: The source root passed to the single-module HTML report.
    source_root: str | None = None

    report_title: str = "Maven Clover report"

    aggregated_report_title: str = "Maven Aggregated Clover report"

    #: The Java executable used to launch the Clover reporters.
    java_executable: str = "java"

    #: The Clover jar providing the reporter entry points.
    clover_jar: str = ""

    def is_enabled(self, report_format: ReportFormat) -> bool:
        """Return True if the report format is enabled."""
        return report_format in self.enabled_formats

    def get_title(self, scope: ReportScope) -> str:
        """Return the report title for the scope."""
        if scope == ReportScope.MERGED:
            return self.aggregated_report_title
        return self.report_title

    def get_database(self, scope: ReportScope) -> str:
        """Return the Clover database path for the scope."""
        if scope == ReportScope.MERGED:
            return self.clover_merge_database
        return self.clover_database


def parse_formats(values: list[str]) -> frozenset[ReportFormat]:
    """Parse a list of format names into report formats.

    Parameters
    ----------
    values : list[str]
        The format names, e.g. ``["html", "PDF"]``.

    Returns
    -------
    frozenset[ReportFormat]
        The report formats.

    Raises
    ------
    ConfigurationError
        If one of the format names is not supported.
    """
    formats = set()
    for value in values:
        try:
            formats.add(ReportFormat(value.strip().lower()))
        except ValueError as error:
            raise ConfigurationError(
                f"Unsupported report format {value}. Allowed values: {', '.join(f.value for f in ReportFormat)}."
            ) from error
    return frozenset(formats)


def load_report_config(**overrides: Any) -> CloverReportConfig:
    """Create the report configuration from ``defaults.ini``.

    Parameters
    ----------
    overrides : Any
        Values that take precedence over ``defaults.ini``. ``None`` values are ignored.

    Returns
    -------
    CloverReportConfig
        The report configuration.

    Raises
    ------
    ConfigurationError
        If a value in ``defaults.ini`` is invalid.
    """
    section = "clover.report"
    try:
        config = CloverReportConfig(
            clover_database=defaults.get(section, "clover_database", fallback="target/clover/clover.db"),
            clover_merge_database=defaults.get(
                section, "clover_merge_database", fallback="target/clover/cloverMerge.db"
            ),
            output_directory=defaults.get(section, "output_directory", fallback="target/site/clover"),
            flush_interval=defaults.getint(section, "flush_interval", fallback=500),
            wait_for_flush=defaults.getboolean(section, "wait_for_flush", fallback=True),
            enabled_formats=parse_formats(defaults.get_list(section, "formats", fallback=["html"])),
            source_root=defaults.get(section, "source_root", fallback="") or None,
            report_title=defaults.get(section, "report_title", fallback="Maven Clover report"),
            aggregated_report_title=defaults.get(
                section, "aggregated_report_title", fallback="Maven Aggregated Clover report"
            ),
            java_executable=defaults.get("clover", "java_executable", fallback="java"),
            clover_jar=defaults.get("clover", "clover_jar", fallback=""),
        )
    except (configparser.Error, ValueError) as error:
        raise ConfigurationError(f"Invalid value in the [{section}] section: {error}") from error

    config = dataclasses.replace(config, **{key: value for key, value in overrides.items() if value is not None})
    if config.flush_interval < 0:
        raise ConfigurationError("The flush interval cannot be negative.")

    return config
