# Copyright (c) 2026 - 2026, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module contains error classes for mojoglue."""


class MojoGlueError(Exception):
    """The base class for mojoglue errors."""


class ConfigurationError(MojoGlueError):
    """Happens when there is an error in the configuration (.ini) file."""


class ReportGenerationError(MojoGlueError):
    """Happens when the Clover reporter returns a non-zero result for a report."""

    def __init__(self, message: str, report_format: str, scope: str, result_code: int) -> None:
        """Initialize instance.

        Parameters
        ----------
        message : str
            The human-readable error message.
        report_format : str
            The format of the report that failed, e.g. ``PDF``.
        scope : str
            The scope of the report that failed, e.g. ``merged``.
        result_code : int
            The result code returned by the reporter.
        """
        super().__init__(message)
        self.report_format = report_format
        self.scope = scope
        self.result_code = result_code


class RendererInvocationError(MojoGlueError):
    """Happens when the Clover reporter entry point cannot be called at all."""


class ProjectModelError(MojoGlueError):
    """Happens when the project model (pom.xml) cannot be loaded."""


class DescriptorWriteError(MojoGlueError, OSError):
    """Happens when a generated build descriptor cannot be written to disk.

    This error is also an ``OSError`` so callers treating descriptor writes as plain I/O keep working.
    """

    def __init__(self, message: str, path: str) -> None:
        """Initialize instance.

        Parameters
        ----------
        message : str
            The human-readable error message.
        path : str
            The path that could not be written.
        """
        super().__init__(message)
        self.path = path

    def __str__(self) -> str:
        return f"{self.args[0]} ({self.path})"


class MojoExecutionError(MojoGlueError):
    """Happens when a plugin goal cannot complete."""


class ReportOutputError(MojoGlueError, OSError):
    """Happens when the output directory of a Clover report cannot be created."""

    def __init__(self, message: str, path: str) -> None:
        """Initialize instance.

        Parameters
        ----------
        message : str
            The human-readable error message.
        path : str
            The directory that could not be created.
        """
        super().__init__(message)
        self.path = path

    def __str__(self) -> str:
        return f"{self.args[0]} ({self.path})"
