# Copyright (c) 2026 - 2026, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module builds the command line arguments of the Clover reporters."""

from mojoglue.clover.report_config import ReportFormat, ReportRequest, ReportScope

TITLE_FLAG = "-t"
INPUT_FLAG = "-i"
OUTPUT_FLAG = "-o"
DEBUG_FLAG = "-d"
SOURCE_FLAG = "-p"


def build_report_args(request: ReportRequest) -> list[str]:
    """Return the arguments of the Clover reporter for a report request.

    The reporters are sensitive to the order of the arguments, so the result only depends on the request.

    Parameters
    ----------
    request : ReportRequest
        The report request.

    Returns
    -------
    list[str]
        The reporter arguments.

    Examples
    --------
    >>> build_report_args(
    ...     ReportRequest(ReportFormat.XML, ReportScope.SINGLE, "clover.db", "out/clover.xml", "Maven Clover report")
    ... )
    ['-t', 'Maven Clover report', '-i', 'clover.db', '-o', 'out/clover.xml']
    """
    args = [
        TITLE_FLAG,
        request.title,
        INPUT_FLAG,
        request.database_path,
        OUTPUT_FLAG,
        request.output_target,
    ]
    if request.debug:
        args.append(DEBUG_FLAG)

    # Only the first source root of the module is passed, and only for the module's own HTML report.
    if request.format == ReportFormat.HTML and request.scope == ReportScope.SINGLE and request.source_root:
        args.extend([SOURCE_FLAG, request.source_root])

    return args
