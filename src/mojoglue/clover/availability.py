# Copyright (c) 2026 - 2026, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module decides whether Clover reports can be generated at all."""

import logging
import os
import time

from mojoglue.clover.report_config import CloverReportConfig

logger: logging.Logger = logging.getLogger(__name__)


def wait_for_flush(wait: bool, flush_interval: int) -> None:
    """Wait for coverage data to be flushed to the Clover database.

    The wait lasts ``2 * flush_interval`` milliseconds. It is a heuristic: the database is written
    by the instrumented tests, which we have no way to synchronize with.

    Parameters
    ----------
    wait : bool
        If False, return immediately.
    flush_interval : int
        The flush interval in milliseconds.
    """
    if wait and flush_interval > 0:
        time.sleep(2 * flush_interval / 1000)


def can_generate_report(config: CloverReportConfig, log: logging.Logger | None = None) -> bool:
    """Return True if a Clover database exists and at least one report format is enabled.

    Parameters
    ----------
    config : CloverReportConfig
        The report configuration.
    log : logging.Logger | None
        The logger receiving the warnings. The module logger is used if not provided.

    Returns
    -------
    bool
        True if reports should be generated, else False.
    """
    log = log or logger
    wait_for_flush(config.wait_for_flush, config.flush_interval)

    if not (os.path.exists(config.clover_database) or os.path.exists(config.clover_merge_database)):
        log.warning("No Clover database found, skipping report generation")
        return False

    if not config.enabled_formats:
        log.warning("No report format enabled, skipping report generation")
        return False

    return True
