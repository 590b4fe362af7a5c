# Copyright (c) 2026 - 2026, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module implements a rich console handler for logging."""

import logging
import time
from typing import Any

from rich.console import Group, RenderableType
from rich.live import Live
from rich.logging import RichHandler
from rich.panel import Panel
from rich.rule import Rule
from rich.status import Status
from rich.table import Table


class RichConsoleHandler(RichHandler):
    """A rich console handler for logging with rich formatting and live updates."""

    def __init__(self, *args: Any, verbose: bool = False, **kwargs: Any) -> None:
        """
        Initialize the RichConsoleHandler.

        Parameters
        ----------
        verbose : bool, optional
            if True, enables verbose logging, by default False
        args
            Variable length argument list.
        kwargs
            Arbitrary keyword arguments.
        """
        super().__init__(*args, **kwargs)
        self.setLevel(logging.DEBUG)
        self.command = ""
        self.logs: list[str] = []
        self.warnings: list[str] = []
        self.details: dict[str, str | Status] = {}
        self.outputs: dict[str, str | Status] = {}
        self.verbose = verbose
        self.verbose_panel = Panel(
            "",
            title="Verbose Mode",
            title_align="left",
            border_style="blue",
        )
        self.error_message: str = ""
        self.live = Live(get_renderable=self.make_layout, refresh_per_second=10)

    @staticmethod
    def _make_table(content: dict[str, str | Status]) -> Table:
        table = Table(show_header=False, box=None)
        table.add_column("Details", justify="left")
        table.add_column("Value", justify="left")
        for key, value in content.items():
            table.add_row(key, value)
        return table

    def emit(self, record: logging.LogRecord) -> None:
        """
        Emit a log record with rich formatting.

        Parameters
        ----------
        record : logging.LogRecord
            The log record to be emitted.
        """
        log_time = time.strftime("%H:%M:%S")
        msg = self.format(record)

        if record.levelno >= logging.ERROR:
            self.logs.append(f"[red][ERROR][/red] {log_time} {msg}")
        elif record.levelno >= logging.WARNING:
            self.logs.append(f"[yellow][WARNING][/yellow] {log_time} {msg}")
            self.warnings.append(msg)
        elif record.levelno >= logging.INFO:
            self.logs.append(f"[blue][INFO][/blue] {log_time} {msg}")
        else:
            self.logs.append(f"[white][DEBUG][/white] {log_time} {msg}")

        self.verbose_panel.renderable = "\n".join(self.logs)

    def update_details(self, key: str, value: str | Status) -> None:
        """
        Add or update a key-value pair in the details table.

        Parameters
        ----------
        key : str
            The key to be added or updated.
        value : str or Status
            The value associated with the key.
        """
        self.details[key] = value

    def update_output(self, output_type: str, output_path: str | Status) -> None:
        """
        Add or update a generated output, e.g. a report or a build file.

        Parameters
        ----------
        output_type : str
            The type of the output, e.g. "HTML Report".
        output_path : str or Status
            The path to the output.
        """
        self.outputs[output_type] = output_path

    def mark_failed(self) -> None:
        """Convert any Processing Status entries to Failed."""
        for content in (self.details, self.outputs):
            for key, value in content.items():
                if isinstance(value, Status):
                    content[key] = "[red]Failed[/red]"

    def make_layout(self) -> Group:
        """
        Create the layout for the live console display.

        Returns
        -------
        Group
            The rich Group object containing the layout for the live console display.
        """
        layout: list[RenderableType] = []
        if self.details:
            layout = layout + [Rule(f" {self.command.upper()}", align="left"), "", self._make_table(self.details)]
        if self.outputs:
            layout = layout + ["", Rule(" SUMMARY", align="left"), "", self._make_table(self.outputs)]
        elif self.warnings and not self.error_message:
            layout = layout + ["", "[yellow]" + "\n".join(self.warnings) + "[/]"]
        if self.verbose:
            layout = layout + ["", self.verbose_panel]
        if self.error_message:
            error_panel = Panel(
                self.error_message,
                title="Error",
                title_align="left",
                border_style="red",
            )
            layout = layout + ["", error_panel]
        return Group(*layout)

    def error(self, message: str) -> None:
        """
        Handle error logging.

        Parameters
        ----------
        message : str
            The error message to be logged.
        """
        self.error_message = message
        self.mark_failed()

    def start(self, command: str) -> None:
        """
        Start the live console display.

        Parameters
        ----------
        command : str
            The command being executed (e.g., "clover-report", "ant").
        """
        self.command = command
        if not self.live.is_started:
            self.live.start()

    def close(self) -> None:
        """Stop the live console display."""
        self.live.stop()


class AccessHandler:
    """A class to manage access to the RichConsoleHandler instance."""

    def __init__(self) -> None:
        """Initialize the AccessHandler with a default RichConsoleHandler instance."""
        self.rich_handler = RichConsoleHandler()

    def set_handler(self, verbose: bool) -> RichConsoleHandler:
        """
        Set a new RichConsoleHandler instance with the specified verbosity.

        Parameters
        ----------
        verbose : bool
            if True, enables verbose logging

        Returns
        -------
        RichConsoleHandler
            The new RichConsoleHandler instance.
        """
        self.rich_handler = RichConsoleHandler(verbose=verbose)
        return self.rich_handler

    def get_handler(self) -> RichConsoleHandler:
        """
        Get the current RichConsoleHandler instance.

        Returns
        -------
        RichConsoleHandler
            The current RichConsoleHandler instance.
        """
        return self.rich_handler


access_handler = AccessHandler()
