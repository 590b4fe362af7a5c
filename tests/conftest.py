# Copyright (c) 2026 - 2026, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""Fixtures for tests."""

from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

import pytest

from mojoglue.clover.renderers import CloverRenderer
from mojoglue.clover.report_config import CloverReportConfig, ReportFormat
from mojoglue.config.defaults import defaults, load_defaults

# We need to pass fixture names as arguments to maintain an order.
# pylint: disable=redefined-outer-name


class FakeRenderer(CloverRenderer):
    """A renderer recording its calls and returning a fixed result code."""

    def __init__(self, reporter_class: str, result_code: int = 0, calls: list | None = None) -> None:
        self.reporter_class = reporter_class
        self.result_code = result_code
        self.calls: list = calls if calls is not None else []

    def main_impl(self, args: list[str]) -> int:
        self.calls.append((self.reporter_class, list(args)))
        return self.result_code


@pytest.fixture(autouse=True)
def setup_test() -> Iterator[None]:
    """Load the values of ``defaults.ini`` for every test and clear them afterwards."""
    load_defaults("")
    yield
    defaults.clear()


@pytest.fixture()
def renderer_calls() -> list:
    """Return the list recording the calls of the fake renderers, in call order."""
    return []


@pytest.fixture()
def fake_renderers(renderer_calls: list) -> Callable[..., dict[ReportFormat, CloverRenderer]]:
    """Return a factory of fake renderers sharing the ``renderer_calls`` list.

    The keyword arguments of the factory map a lower-case format name to its result code.
    """

    def _create(**result_codes: int) -> dict[ReportFormat, CloverRenderer]:
        return {
            report_format: FakeRenderer(
                report_format.name,
                result_code=result_codes.get(report_format.value, 0),
                calls=renderer_calls,
            )
            for report_format in ReportFormat
        }

    return _create


@pytest.fixture()
def make_report_config(tmp_path: Path) -> Callable[..., CloverReportConfig]:
    """Return a factory of report configurations rooted in ``tmp_path``.

    The databases are not created: tests create the ones they need.
    """

    def _create(**kwargs: Any) -> CloverReportConfig:
        values: dict[str, Any] = {
            "clover_database": str(tmp_path.joinpath("clover", "clover.db")),
            "clover_merge_database": str(tmp_path.joinpath("clover", "cloverMerge.db")),
            "output_directory": str(tmp_path.joinpath("site", "clover")),
            "wait_for_flush": False,
        }
        values.update(kwargs)
        return CloverReportConfig(**values)

    return _create


@pytest.fixture()
def create_database() -> Callable[[str], None]:
    """Return a function creating an empty Clover database file, including its parent directories."""

    def _create(path: str) -> None:
        Path(path).parent.mkdir(parents=True, exist_ok=True)
        Path(path).write_bytes(b"")

    return _create
