# Copyright (c) 2026 - 2026, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module contains the goal generating an Ant build file for a Maven project."""

import configparser
import dataclasses
import logging
import os
from dataclasses import dataclass
from typing import Any

from mojoglue.ant.build_writer import DEFAULT_BUILD_FILE_NAME, DEFAULT_PROPERTIES_FILE_NAME, AntBuildWriter
from mojoglue.ant.project_model import ProjectDescriptor
from mojoglue.config.defaults import defaults
from mojoglue.errors import ConfigurationError, MojoExecutionError

logger: logging.Logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AntConfig:
    """The configuration of the Ant goal."""

    #: The base directory of the local Maven repository.
    local_repository: str

    #: If True, the generated build does not download dependencies.
    offline: bool = False

    build_file_name: str = DEFAULT_BUILD_FILE_NAME

    properties_file_name: str = DEFAULT_PROPERTIES_FILE_NAME


def get_default_local_repository() -> str:
    """Return the location of the local Maven repository of the current user.

    Raises
    ------
    ConfigurationError
        If the home directory of the user cannot be determined.
    """
    home_dir = os.getenv("HOME") or os.path.expanduser("~")
    if not home_dir or home_dir == "~":
        raise ConfigurationError("Cannot find the local Maven repository: the HOME environment variable is not set.")
    return os.path.join(home_dir, ".m2", "repository")


def load_ant_config(**overrides: Any) -> AntConfig:
    """Create the Ant goal configuration from ``defaults.ini``.

    Parameters
    ----------
    overrides : Any
        Values that take precedence over ``defaults.ini``. ``None`` values are ignored.

    Returns
    -------
    AntConfig
        The Ant goal configuration.

    Raises
    ------
    ConfigurationError
        If a value in ``defaults.ini`` is invalid.
    """
    try:
        config = AntConfig(
            local_repository=defaults.get("maven", "local_repository", fallback=""),
            offline=defaults.getboolean("ant", "offline", fallback=False),
            build_file_name=defaults.get("ant", "build_file_name", fallback=DEFAULT_BUILD_FILE_NAME),
            properties_file_name=defaults.get("ant", "properties_file_name", fallback=DEFAULT_PROPERTIES_FILE_NAME),
        )
    except (configparser.Error, ValueError) as error:
        raise ConfigurationError(f"Invalid value in the [ant] section: {error}") from error

    config = dataclasses.replace(config, **{key: value for key, value in overrides.items() if value is not None})
    if not config.local_repository:
        config = dataclasses.replace(config, local_repository=get_default_local_repository())
    return config


class AntMojo:
    """The goal generating an Ant build file."""

    def __init__(self, project: ProjectDescriptor, config: AntConfig, log: logging.Logger | None = None) -> None:
        """Initialize instance.

        Parameters
        ----------
        project : ProjectDescriptor
            The project to create a build for.
        config : AntConfig
            The goal configuration.
        log : logging.Logger | None
            The logger of the run. The module logger is used if not provided.
        """
        self.project = project
        self.config = config
        self.log = log or logger

    def execute(self) -> tuple[str, str]:
        """Write the Ant build file and its properties file in the base directory of the project.

        Returns
        -------
        tuple[str, str]
            The paths to the build file and the properties file.

        Raises
        ------
        MojoExecutionError
            If one of the files cannot be written.
        """
        writer = AntBuildWriter(
            self.project,
            os.path.abspath(self.config.local_repository),
            offline=self.config.offline,
            build_file_name=self.config.build_file_name,
            properties_file_name=self.config.properties_file_name,
        )

        try:
            build_file = writer.write_build_xml()
            properties_file = writer.write_build_properties()
        except OSError as error:
            raise MojoExecutionError("Error building Ant script") from error

        self.log.info(
            "Wrote Ant project for %s to %s", self.project.artifact_id, os.path.abspath(self.project.basedir)
        )
        return build_file, properties_file
