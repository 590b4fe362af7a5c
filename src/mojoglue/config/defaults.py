# Copyright (c) 2026 - 2026, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module provides functions to manage default values."""

import configparser
import logging
import os
import pathlib
import shutil

logger: logging.Logger = logging.getLogger(__name__)


class ConfigParser(configparser.ConfigParser):
    """The parser of ``defaults.ini``, with support for list values such as the report formats."""

    def get_list(
        self,
        section: str,
        item: str,
        delimiter: str | None = None,
        fallback: list | None = None,
        duplicated_ok: bool = False,
    ) -> list[str]:
        """Return the values of a list item, e.g. the enabled report formats or the remote repositories.

        Without a ``delimiter``, values are separated by any whitespace and empty values are dropped.
        With a ``delimiter``, only the delimiter separates values and whitespace is kept.

        Repeated values are dropped unless ``duplicated_ok`` is True. The first occurrence keeps its position.

        Parameters
        ----------
        section : str
            The section in ``defaults.ini``.
        item : str
            The item to parse the list.
        delimiter : str | None
            The delimiter used to split the strings.
        fallback : list | None
            The value returned when the section or the item is missing.
        duplicated_ok : bool
            If True allow duplicate values.

        Returns
        -------
        list[str]
            The values, or the fallback if the section or the item is missing.

        Examples
        --------
        Given the following ``defaults.ini``

        .. code-block::

            [clover.report]
            formats =
                html pdf
                html

        >>> defaults.get_list("clover.report", "formats")
        ['html', 'pdf']
        """
        try:
            value = self.get(section, item)
        except (configparser.NoOptionError, configparser.NoSectionError) as error:
            logger.debug(error)
            return fallback or []

        content = value.split(sep=delimiter)
        if duplicated_ok:
            return content

        return list(dict.fromkeys(content))


#: The ``defaults.ini`` file shipped with mojoglue.
PACKAGED_DEFAULTS = pathlib.Path(__file__).parent.absolute().joinpath("defaults.ini")

#: The sections read by the mojoglue goals.
GOAL_SECTIONS = ("clover", "clover.report", "ant", "maven")

defaults = ConfigParser()


def load_defaults(user_config_path: str) -> bool:
    """Load the packaged ``defaults.ini`` and the user's overrides into the ``defaults`` object.

    Sections of the user file that no goal reads are reported, since they usually come from a
    misspelled section name such as ``[clover-report]``.

    Parameters
    ----------
    user_config_path : str
        The path to the user's defaults configuration file. An empty path only loads the packaged defaults.

    Returns
    -------
    bool
        Return True if succeeded or False if failed.
    """
    if user_config_path and not os.path.isfile(user_config_path):
        logger.error("The defaults configuration file %s does not exist.", user_config_path)
        return False

    try:
        defaults.read(PACKAGED_DEFAULTS, encoding="utf8")
        if not user_config_path:
            return True

        user_config = configparser.ConfigParser()
        user_config.read(user_config_path, encoding="utf8")
        defaults.read(user_config_path, encoding="utf8")
    except (configparser.Error, ValueError) as error:
        logger.error("Failed to read the defaults configuration: %s", error)
        return False

    for section in user_config.sections():
        if section not in GOAL_SECTIONS:
            logger.warning("Section [%s] of %s is not used by any goal.", section, user_config_path)
    logger.debug("Loaded the defaults configuration with the overrides of %s.", user_config_path)
    return True


def create_defaults(output_path: str, cwd_path: str) -> bool:
    """Copy the packaged ``defaults.ini`` to the output directory, as a starting point for ``-dp``.

    The file is copied rather than written with ``ConfigParser.write`` to keep its comments.

    Parameters
    ----------
    output_path : str
        The directory receiving ``defaults.ini``.
    cwd_path : str
        The current working directory, used to shorten the paths in the logs.

    Returns
    -------
    bool
        Return True if succeeded or False if failed.
    """
    dest_path = os.path.join(output_path, PACKAGED_DEFAULTS.name)
    display_path = os.path.relpath(dest_path, cwd_path)
    if os.path.exists(dest_path):
        logger.info("Replacing the existing %s.", display_path)

    try:
        shutil.copyfile(PACKAGED_DEFAULTS, dest_path)
    except OSError as error:
        logger.error("Failed to dump the default values to %s: %s", display_path, error)
        return False

    logger.info("Dumped the default values in %s.", display_path)
    return True
