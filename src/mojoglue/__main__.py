# Copyright (c) 2026 - 2026, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This is the main entrypoint to run mojoglue."""

import argparse
import dataclasses
import logging
import os
import sys
from importlib import metadata as importlib_metadata

from mojoglue.ant.ant_mojo import AntMojo, load_ant_config
from mojoglue.ant.pom_loader import load_project
from mojoglue.clover.report_config import ReportFormat, load_report_config
from mojoglue.clover.report_mojo import CloverReportMojo
from mojoglue.config.defaults import create_defaults, load_defaults
from mojoglue.console import access_handler
from mojoglue.errors import (
    ConfigurationError,
    MojoExecutionError,
    ProjectModelError,
    RendererInvocationError,
    ReportGenerationError,
    ReportOutputError,
)

logger: logging.Logger = logging.getLogger(__name__)


def generate_clover_report(report_args: argparse.Namespace) -> int:
    """Generate the Clover reports from the existing Clover databases.

    Returns
    -------
    int
        Returns os.EX_OK if successful or the corresponding error code on failure.
    """
    rich_handler = access_handler.get_handler()
    try:
        config = load_report_config(
            clover_database=report_args.clover_database,
            clover_merge_database=report_args.clover_merge_database,
            output_directory=report_args.report_dir,
            flush_interval=report_args.flush_interval,
            wait_for_flush=report_args.wait_for_flush,
            source_root=report_args.source_root,
            clover_jar=report_args.clover_jar,
        )
    except ConfigurationError as error:
        logger.error(error)
        rich_handler.error(str(error))
        return os.EX_USAGE

    formats = set(config.enabled_formats)
    for report_format, enabled in (
        (ReportFormat.HTML, report_args.html),
        (ReportFormat.PDF, report_args.pdf),
        (ReportFormat.XML, report_args.xml),
    ):
        if enabled is True:
            formats.add(report_format)
        elif enabled is False:
            formats.discard(report_format)
    config = dataclasses.replace(config, enabled_formats=frozenset(formats))

    rich_handler.update_details("Clover Database:", config.clover_database)
    rich_handler.update_details("Merged Clover Database:", config.clover_merge_database)
    rich_handler.update_details("Output Directory:", config.output_directory)
    rich_handler.update_details("Formats:", ", ".join(f.name for f in ReportFormat if f in formats) or "None")

    mojo = CloverReportMojo(config, log=logging.getLogger("mojoglue.clover"))
    try:
        outcomes = mojo.execute()
    except ReportGenerationError as error:
        logger.error(error)
        rich_handler.error(str(error))
        return os.EX_DATAERR
    except RendererInvocationError as error:
        logger.error("%s: %s", error, error.__cause__ or "")
        rich_handler.error(str(error))
        return os.EX_SOFTWARE
    except ReportOutputError as error:
        logger.error(error)
        rich_handler.error(str(error))
        return os.EX_IOERR

    for outcome in outcomes:
        label = f"{outcome.scope.value.capitalize()} {outcome.format.name} Report"
        rich_handler.update_output(label, os.path.relpath(outcome.output_target, os.getcwd()))

    return os.EX_OK


def generate_ant_build(ant_args: argparse.Namespace) -> int:
    """Generate the Ant build file of a Maven project.

    Returns
    -------
    int
        Returns os.EX_OK if successful or the corresponding error code on failure.
    """
    rich_handler = access_handler.get_handler()
    try:
        project = load_project(ant_args.pom)
    except ProjectModelError as error:
        logger.error(error)
        rich_handler.error(str(error))
        return os.EX_NOINPUT

    try:
        config = load_ant_config(
            local_repository=ant_args.local_repository,
            offline=True if ant_args.offline else None,
        )
    except ConfigurationError as error:
        logger.error(error)
        rich_handler.error(str(error))
        return os.EX_USAGE

    rich_handler.update_details("Project:", str(project.artifact_coordinates))
    rich_handler.update_details("Local Repository:", config.local_repository)

    try:
        build_file, properties_file = AntMojo(project, config, log=logging.getLogger("mojoglue.ant")).execute()
    except MojoExecutionError as error:
        logger.error("%s: %s", error, error.__cause__)
        rich_handler.error(f"{error}: {error.__cause__}")
        return os.EX_IOERR

    rich_handler.update_output("Build File:", os.path.relpath(build_file, os.getcwd()))
    rich_handler.update_output("Properties File:", os.path.relpath(properties_file, os.getcwd()))
    return os.EX_OK


def perform_action(action_args: argparse.Namespace) -> int:
    """Perform the indicated action of mojoglue."""
    match action_args.action:
        case "dump-defaults":
            # Create the defaults.ini file in the output dir.
            if not create_defaults(action_args.output_dir, os.getcwd()):
                return os.EX_CANTCREAT
            access_handler.get_handler().update_output(
                "Defaults:", os.path.relpath(os.path.join(action_args.output_dir, "defaults.ini"), os.getcwd())
            )
            return os.EX_OK

        case "clover-report":
            return generate_clover_report(action_args)

        case "ant":
            return generate_ant_build(action_args)

        case _:
            logger.error("mojoglue does not support command option %s.", action_args.action)
            return os.EX_USAGE


def main(argv: list[str] | None = None) -> None:
    """Execute mojoglue as a standalone command-line tool.

    Parameters
    ----------
    argv: list[str] | None
        Command-line arguments.
        If ``argv`` is ``None``, argparse automatically looks at ``sys.argv``.
        Hence, we set ``argv = None`` by default.
    """
    main_parser = argparse.ArgumentParser(prog="mojoglue")

    main_parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {importlib_metadata.version('mojoglue')}",
        help="Show mojoglue's version number and exit",
    )

    main_parser.add_argument(
        "-v",
        "--verbose",
        help="Run mojoglue with more debug logs",
        action="store_true",
    )

    main_parser.add_argument(
        "-o",
        "--output-dir",
        default=os.path.join(os.getcwd(), "output"),
        help="The output destination path for the mojoglue logs and dumped defaults",
    )

    main_parser.add_argument(
        "-dp",
        "--defaults-path",
        default="",
        help="The path to the defaults configuration file.",
    )

    # Add sub parsers for each action.
    sub_parser = main_parser.add_subparsers(dest="action", help="Run mojoglue <action> --help for help")

    # Generate the Clover reports.
    report_parser = sub_parser.add_parser(
        name="clover-report", description="Generate Clover reports from existing Clover databases."
    )

    report_parser.add_argument(
        "-db",
        "--clover-database",
        required=False,
        type=str,
        help="The location of the Clover database.",
    )

    report_parser.add_argument(
        "-mdb",
        "--clover-merge-database",
        required=False,
        type=str,
        help="The location of the merged Clover database of a multi-module build.",
    )

    report_parser.add_argument(
        "-rd",
        "--report-dir",
        required=False,
        type=str,
        help="The directory where the Clover report will be generated.",
    )

    report_parser.add_argument(
        "--html",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Generate an HTML report.",
    )

    report_parser.add_argument(
        "--pdf",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Generate a PDF report.",
    )

    report_parser.add_argument(
        "--xml",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Generate an XML report.",
    )

    report_parser.add_argument(
        "--wait-for-flush",
        action=argparse.BooleanOptionalAction,
        default=None,
        help=(
            "Wait 2 * flush interval for coverage data to be flushed to the Clover database. "
            + "Disable it when tests run in a separate JVM."
        ),
    )

    report_parser.add_argument(
        "--flush-interval",
        required=False,
        type=int,
        help="The minimum period between flush operations, in milliseconds.",
    )

    report_parser.add_argument(
        "--source-root",
        required=False,
        type=str,
        help="The source root passed to the HTML report of the module.",
    )

    report_parser.add_argument(
        "--clover-jar",
        required=False,
        type=str,
        help="The path to the Clover jar providing the reporters.",
    )

    # Generate the Ant build file.
    ant_parser = sub_parser.add_parser(name="ant", description="Generate an Ant build file for a Maven project.")

    ant_parser.add_argument(
        "-f",
        "--pom",
        required=False,
        type=str,
        default="pom.xml",
        help="The path to the pom.xml file of the project.",
    )

    ant_parser.add_argument(
        "-lr",
        "--local-repository",
        required=False,
        type=str,
        help="The location of the local Maven repository. Defaults to $HOME/.m2/repository.",
    )

    ant_parser.add_argument(
        "--offline",
        required=False,
        action="store_true",
        help="Generate a build that does not download the dependencies.",
    )

    # Dump the default values.
    sub_parser.add_parser(name="dump-defaults", description="Dumps the defaults.ini file to the output directory.")

    args = main_parser.parse_args(argv)

    if not args.action:
        main_parser.print_help()
        sys.exit(os.EX_USAGE)

    if args.verbose:
        log_level = logging.DEBUG
        log_format = "%(asctime)s [%(name)s:%(funcName)s:%(lineno)d] [%(levelname)s] %(message)s"
    else:
        log_level = logging.INFO
        log_format = "%(asctime)s [%(levelname)s] %(message)s"

    # Set global logging config. We need the stream handler for the initial
    # output directory checking log messages.
    st_handler = logging.StreamHandler(sys.stdout)
    logging.basicConfig(format=log_format, handlers=[st_handler], force=True, level=log_level)

    # Set the output directory.
    if not args.output_dir:
        logger.error("The output path cannot be empty. Exiting ...")
        sys.exit(os.EX_USAGE)

    if os.path.isfile(args.output_dir):
        logger.error("The output directory already exists. Exiting ...")
        sys.exit(os.EX_USAGE)

    if not os.path.isdir(args.output_dir):
        os.makedirs(args.output_dir)

    # Add file handler to the root logger. Remove stream handler from the
    # root logger to prevent dependencies printing logs to stdout.
    debug_log_path = os.path.join(args.output_dir, "debug.log")
    log_file_handler = logging.FileHandler(debug_log_path, "w")
    log_file_handler.setFormatter(logging.Formatter(log_format))
    logging.getLogger().removeHandler(st_handler)
    logging.getLogger().addHandler(log_file_handler)

    # Add the rich console handler to the mojoglue logger only.
    rich_handler = access_handler.set_handler(args.verbose)
    rich_handler.setLevel(log_level)
    mojoglue_logger = logging.getLogger("mojoglue")
    mojoglue_logger.addHandler(rich_handler)

    # Load the default values from defaults.ini files.
    if not load_defaults(args.defaults_path):
        logger.error("Exiting because the defaults configuration could not be loaded.")
        mojoglue_logger.removeHandler(rich_handler)
        logging.getLogger().removeHandler(log_file_handler)
        log_file_handler.close()
        sys.exit(os.EX_NOINPUT)

    rich_handler.start(args.action)
    try:
        exit_code = perform_action(args)
    finally:
        rich_handler.close()
        mojoglue_logger.removeHandler(rich_handler)
        logging.getLogger().removeHandler(log_file_handler)
        log_file_handler.close()

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
